"""Tests for tfdocs.format.registry."""

import pytest

from tfdocs.exceptions import FormatterError, UnknownFormatterError
from tfdocs.format import (
    FormatterRegistry,
    JsonFormatter,
    MarkdownTableFormatter,
    Settings,
    default_registry,
)


@pytest.mark.unit
class TestFormatterRegistry:
    """Test registration and resolution."""

    def test_default_registry_names(self):
        assert default_registry().names() == [
            "json",
            "markdown table",
            "markdown document",
            "pretty",
            "tfvars hcl",
            "tfvars json",
            "toml",
            "xml",
            "yaml",
        ]

    def test_resolve_passes_settings(self):
        settings = Settings(indent=4)

        formatter = default_registry().resolve("markdown table", settings)

        assert isinstance(formatter, MarkdownTableFormatter)
        assert formatter.settings is settings

    def test_resolve_returns_fresh_instances(self):
        registry = default_registry()

        assert registry.resolve("json") is not registry.resolve("json")

    def test_group_alias(self):
        formatter = default_registry().resolve("markdown")

        assert isinstance(formatter, MarkdownTableFormatter)

    def test_whitespace_and_case_normalised(self):
        formatter = default_registry().resolve("  Markdown   Table ")

        assert isinstance(formatter, MarkdownTableFormatter)

    def test_unknown_name(self):
        with pytest.raises(UnknownFormatterError) as exc_info:
            default_registry().resolve("asciidoc")

        assert exc_info.value.name == "asciidoc"
        assert "json" in exc_info.value.available

    def test_duplicate_registration(self):
        registry = FormatterRegistry()
        registry.register("json", JsonFormatter)

        with pytest.raises(FormatterError, match="already registered"):
            registry.register("json", JsonFormatter)

    def test_alias_clash(self):
        registry = FormatterRegistry()
        registry.register("json", JsonFormatter)

        with pytest.raises(FormatterError, match="alias 'json'"):
            registry.register("other", JsonFormatter, aliases=("json",))

    def test_empty_name(self):
        with pytest.raises(FormatterError):
            FormatterRegistry().register("  ", JsonFormatter)
