"""Tests for friendly names, JSON type tags and property casing."""

from typing import AsyncIterator, Awaitable, Dict, List, Optional

import pytest

from hubdocs.core.descriptors import ANY, VOID, AsyncType, describe
from hubdocs.core.naming import camel_case, friendly_name, is_nullable, json_type, strip_nullable
from tests.fixtures.hubs import Envelope, Person, Priority


class TestFriendlyName:
    """Test human readable type names."""

    @pytest.mark.parametrize(
        "annotation,expected",
        [
            (str, "String"),
            (int, "Int32"),
            (None, "void"),
            (Optional[int], "Int32?"),
            (List[Person], "Person[]"),
            (List[List[str]], "String[][]"),
            (Dict[str, int], "Dictionary<String, Int32>"),
            (Awaitable[str], "String"),
            (Awaitable[List[Person]], "Person[]"),
            (AsyncIterator[str], "String"),
            (Priority, "Priority"),
            (Envelope[Person], "Envelope<Person>"),
        ],
    )
    def test_friendly_names(self, annotation, expected):
        """Test the name rendered for common annotations."""
        assert friendly_name(describe(annotation)) == expected

    def test_bare_completion_is_void(self):
        """Test that a completion without a result is void."""
        assert friendly_name(AsyncType()) == "void"

    def test_any_is_object(self):
        """Test that untyped values are Object."""
        assert friendly_name(ANY) == "Object"


class TestJsonType:
    """Test JSON type tags."""

    @pytest.mark.parametrize(
        "annotation,expected",
        [
            (str, "string"),
            (bytes, "string"),
            (int, "integer"),
            (float, "number"),
            (bool, "boolean"),
            (Optional[int], "integer"),
            (Priority, "string"),
            (Person, "object"),
            (List[int], "object"),
        ],
    )
    def test_json_types(self, annotation, expected):
        """Test the tag used when no schema is inferred."""
        assert json_type(describe(annotation)) == expected


class TestNullability:
    """Test nullable helpers."""

    def test_strip_nullable(self):
        """Test that Optional is removed."""
        assert strip_nullable(describe(Optional[Person])) == describe(Person)
        assert strip_nullable(describe(Person)) == describe(Person)

    def test_is_nullable(self):
        """Test which descriptors may be absent."""
        assert is_nullable(describe(Optional[str]))
        assert is_nullable(VOID)
        assert not is_nullable(describe(str))
        assert not is_nullable(describe(List[str]))


class TestCamelCase:
    """Test property name casing."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("name", "name"),
            ("Name", "name"),
            ("first_name", "firstName"),
            ("postal_code_2", "postalCode2"),
            ("URL", "uRL"),
            ("displayName", "displayName"),
        ],
    )
    def test_camel_case(self, name, expected):
        """Test lower-first-letter projection of property names."""
        assert camel_case(name) == expected
