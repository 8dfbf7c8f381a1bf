"""Tests for the documentation models."""

import json

import pytest
from pydantic import ValidationError

from hubdocs.api.config import DocumentationConfig
from hubdocs.core.models import (
    AuthScheme,
    AuthType,
    HubDocumentation,
    HubInfo,
    HubMethodInfo,
    HubParameterInfo,
)
from hubdocs.core.schema import PrimitiveSchema


class TestAuthScheme:
    """Test authentication scheme defaults."""

    def test_default_values(self):
        """Test that a bare scheme is an unnamed bearer scheme."""
        scheme = AuthScheme()

        assert scheme.name == ""
        assert scheme.type == AuthType.BEARER
        assert scheme.header_name is None
        assert scheme.query_param_name is None
        assert scheme.cookie_name is None
        assert scheme.description == ""
        assert scheme.is_default is False

    @pytest.mark.parametrize("auth_type", list(AuthType))
    def test_all_auth_types_are_supported(self, auth_type):
        """Test that every credential transport can be configured."""
        assert AuthScheme(type=auth_type).type == auth_type

    def test_camel_case_aliases(self):
        """Test that schemes accept and emit camelCase keys."""
        scheme = AuthScheme.model_validate(
            {"name": "Cookie", "type": "Cookie", "cookieName": "session", "isDefault": True}
        )

        assert scheme.cookie_name == "session"
        dumped = scheme.model_dump(by_alias=True, mode="json")
        assert dumped["cookieName"] == "session"
        assert dumped["type"] == "Cookie"

    def test_unknown_auth_type(self):
        """Test that unknown transports are rejected."""
        with pytest.raises(ValidationError):
            AuthScheme(type="Carrier pigeon")


class TestDescriptorModels:
    """Test descriptor immutability and serialization."""

    def test_descriptors_are_frozen(self):
        """Test that descriptors cannot be modified."""
        hub = HubInfo(name="Chat", description="Chat", route="/chat")
        with pytest.raises(ValidationError):
            hub.name = "Other"

    def test_serialized_keys(self):
        """Test camelCase keys and schema rendering."""
        documentation = HubDocumentation(
            hubs=(
                HubInfo(
                    name="Chat",
                    description="Chat",
                    route="/chat",
                    methods=(
                        HubMethodInfo(
                            name="send",
                            summary="send",
                            description="Hub method: send",
                            return_type="void",
                            parameters=(
                                HubParameterInfo(
                                    name="count",
                                    type="Int32",
                                    description="Parameter of type Int32",
                                    schema_=PrimitiveSchema(json_type="integer"),
                                ),
                            ),
                        ),
                    ),
                ),
            )
        )

        payload = json.loads(documentation.to_json())
        hub = payload["hubs"][0]
        method = hub["methods"][0]

        assert list(payload) == [
            "title",
            "version",
            "description",
            "hubs",
            "supportedProtocols",
            "supportedAuthSchemes",
        ]
        assert hub["requiresAuth"] is False
        assert method["returnType"] == "void"
        assert method["requiredRoles"] is None
        assert method["returnSchema"] is None
        assert method["parameters"][0]["schema"] == {"type": "integer"}
        assert method["parameters"][0]["isOptional"] is False
        assert method["parameters"][0]["sendEnumAsString"] is False

    def test_to_json_is_indented(self):
        """Test pretty printing."""
        assert "\n  " in HubDocumentation().to_json()

    def test_lookup_helpers(self):
        """Test hub and method lookup by name."""
        method = HubMethodInfo(name="ping", summary="ping", description="", return_type="void")
        hub = HubInfo(name="Chat", description="", route="/chat", methods=(method,))
        documentation = HubDocumentation(hubs=(hub,))

        assert documentation.get_hub("Chat") is hub
        assert documentation.get_hub("Missing") is None
        assert hub.get_method("ping") is method
        assert hub.get_method("pong") is None

    def test_default_title_matches_config(self):
        """Test that an unconfigured document uses the configured default title."""
        assert HubDocumentation().title == DocumentationConfig().title == "Hub Documentation"
