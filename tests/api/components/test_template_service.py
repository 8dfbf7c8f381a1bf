"""Tests for TemplateService."""

import pytest

from hubdocs.api.components.template_service import TemplateService
from hubdocs.exceptions import TemplateNotFoundError


@pytest.fixture
def templates():
    return TemplateService()


class TestProcessTemplate:
    """Test placeholder replacement."""

    def test_simple_replacement(self, templates):
        """Test that placeholders are replaced."""
        result = templates.process_template(
            "Hello {{Name}}, welcome to {{App}}!", {"Name": "John", "App": "Hub Docs"}
        )
        assert result == "Hello John, welcome to Hub Docs!"

    def test_no_replacements(self, templates):
        """Test that templates without placeholders are unchanged."""
        template = "Static content without placeholders"
        assert templates.process_template(template, {}) == template

    def test_missing_placeholder_is_left_intact(self, templates):
        """Test that unknown placeholders survive."""
        result = templates.process_template(
            "Hello {{Name}}, your {{Status}} is {{Unknown}}",
            {"Name": "Alice", "Status": "Active"},
        )
        assert result == "Hello Alice, your Active is {{Unknown}}"

    def test_multiple_occurrences(self, templates):
        """Test that every occurrence is replaced."""
        result = templates.process_template(
            "{{Title}} - {{Title}} Documentation for {{Title}}", {"Title": "Hubs"}
        )
        assert result == "Hubs - Hubs Documentation for Hubs"

    def test_html_and_special_characters(self, templates):
        """Test that values are inserted verbatim."""
        result = templates.process_template(
            "<title>{{Title}}</title><body>{{Content}}</body>",
            {"Title": "Test Page", "Content": "<h1>Welcome</h1> <>&\"'`"},
        )
        assert result == "<title>Test Page</title><body><h1>Welcome</h1> <>&\"'`</body>"

    def test_empty_value(self, templates):
        """Test replacement with an empty string."""
        assert templates.process_template("Before{{Empty}}After", {"Empty": ""}) == "BeforeAfter"

    @pytest.mark.parametrize(
        "template,expected",
        [
            ("{{Key}}", "Value"),
            ("prefix{{Key}}suffix", "prefixValuesuffix"),
            ("{{Key1}}{{Key2}}", "Value{{Key2}}"),
        ],
    )
    def test_various_formats(self, templates, template, expected):
        """Test placeholder positions."""
        assert templates.process_template(template, {"Key": "Value", "Key1": "Value"}) == expected


class TestLoadTemplate:
    """Test loading packaged templates."""

    def test_load_testing_template(self, templates):
        """Test that the console template ships with the package."""
        template = templates.load_template("testing")

        for placeholder in ("Title", "Description", "ApiJsonUrl", "ClientUrl", "MessagePackClientUrl"):
            assert "{{" + placeholder + "}}" in template

    def test_template_is_cached(self, templates):
        """Test that a template is read once."""
        assert templates.load_template("testing") is templates.load_template("testing")

    def test_missing_template(self, templates):
        """Test the error for templates that do not exist."""
        with pytest.raises(TemplateNotFoundError) as exc_info:
            templates.load_template("missing")

        assert exc_info.value.template_name == "missing"
        assert exc_info.value.status_code == 500
        assert "missing.html" in exc_info.value.message
