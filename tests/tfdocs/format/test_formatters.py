"""
Tests for the built-in formatters.

All formatters render the same small module; markdown and pretty output
are compared in full since their exact text ends up in the docs.
"""

import json
import tomllib
import xml.etree.ElementTree as ET

import pytest
import yaml

from tests.helpers.builders import sample_module
from tfdocs.exceptions import ConfigError
from tfdocs.format import (
    JsonFormatter,
    MarkdownDocumentFormatter,
    MarkdownTableFormatter,
    PrettyFormatter,
    Settings,
    TfvarsHclFormatter,
    TfvarsJsonFormatter,
    TomlFormatter,
    XmlFormatter,
    YamlFormatter,
    hcl_value,
    toml_value,
)
from tfdocs.log import ColorManager
from tfdocs.terraform import Input, Module, Provider, Requirement, Resource


def _full_module() -> Module:
    module = sample_module()
    module.requirements = [Requirement("terraform", ">= 1.0")]
    module.providers = [Provider("aws", version=">= 4.0")]
    module.resources = [
        Resource("aws_s3_bucket", "site"),
        Resource("aws_region", "current", mode="data"),
    ]
    return module


# =============================================================================
# Test Settings
# =============================================================================


@pytest.mark.unit
class TestSettings:
    def test_with_hidden(self):
        settings = Settings.with_hidden(["inputs", "header"], indent=3)

        assert not settings.show_inputs
        assert not settings.show_header
        assert settings.show_outputs
        assert settings.indent == 3

    def test_with_hidden_unknown_section(self):
        with pytest.raises(ConfigError, match="unknown section 'modules'"):
            Settings.with_hidden(["modules"])

    def test_without_color_copies(self):
        settings = Settings()

        plain = settings.without_color()

        assert settings.show_color
        assert not plain.show_color


# =============================================================================
# Test structured formatters
# =============================================================================


@pytest.mark.unit
class TestStructuredFormatters:
    """Test json, yaml and xml."""

    def test_json(self):
        text = JsonFormatter().render(sample_module())
        data = json.loads(text)

        assert data["header"] == "Example module."
        assert [i["name"] for i in data["inputs"]] == ["name", "region"]
        assert data["inputs"][1]["default"] == "eu-west-1"
        assert not text.endswith("\n")

    def test_json_hidden_sections_are_empty(self):
        settings = Settings.with_hidden(["inputs", "header"])

        data = json.loads(JsonFormatter().render(sample_module(), settings))

        assert data["inputs"] == []
        assert data["header"] == ""
        assert len(data["outputs"]) == 1

    def test_yaml_matches_model(self):
        module = _full_module()

        data = yaml.safe_load(YamlFormatter().render(module))

        assert data == module.to_dict()

    def test_yaml_keeps_key_order(self):
        text = YamlFormatter().render(sample_module())

        assert text.index("header:") < text.index("inputs:") < text.index("outputs:")

    def test_xml(self):
        root = ET.fromstring(XmlFormatter().render(_full_module()))

        assert root.tag == "module"
        inputs = root.findall("inputs/input")
        assert [i.findtext("name") for i in inputs] == ["name", "region"]
        assert inputs[1].findtext("default") == '"eu-west-1"'
        assert inputs[0].find("default").text is None
        assert inputs[0].findtext("required") == "true"
        assert len(root.findall("resources/resource")) == 2


# =============================================================================
# Test markdown formatters
# =============================================================================


@pytest.mark.unit
class TestMarkdownTable:
    def test_full_output(self):
        text = MarkdownTableFormatter().render(_full_module())

        assert text == (
            "Example module.\n"
            "\n"
            "## Requirements\n"
            "\n"
            "| Name | Version |\n"
            "|------|---------|\n"
            "| terraform | >= 1.0 |\n"
            "\n"
            "## Providers\n"
            "\n"
            "| Name | Version |\n"
            "|------|---------|\n"
            "| aws | >= 4.0 |\n"
            "\n"
            "## Resources\n"
            "\n"
            "| Name | Type |\n"
            "|------|------|\n"
            "| aws_s3_bucket.site | resource |\n"
            "| data.aws_region.current | data source |\n"
            "\n"
            "## Inputs\n"
            "\n"
            "| Name | Description | Type | Default | Required |\n"
            "|------|-------------|------|---------|:--------:|\n"
            "| name | Resource name | `string` | n/a | yes |\n"
            '| region | Deployment region | `string` | `"eu-west-1"` | no |\n'
            "\n"
            "## Outputs\n"
            "\n"
            "| Name | Description |\n"
            "|------|-------------|\n"
            "| id | Resource id |"
        )

    def test_empty_sections(self):
        text = MarkdownTableFormatter().render(Module())

        assert "## Requirements\n\nNo requirements." in text
        assert "## Inputs\n\nNo inputs." in text

    def test_columns_and_indent_settings(self):
        settings = Settings(indent=3, show_default=False, show_required=False)

        text = MarkdownTableFormatter().render(sample_module(), settings)

        assert "### Inputs" in text
        assert "| Name | Description | Type |\n" in text
        assert "Default" not in text

    def test_escape_pipes_and_newlines(self):
        module = Module(inputs=[Input("a", description="one | two\nthree")])

        escaped = MarkdownTableFormatter().render(module)
        raw = MarkdownTableFormatter().render(module, Settings(escape=False))

        assert "one \\| two<br/>three" in escaped
        assert "one | two<br/>three" in raw


@pytest.mark.unit
class TestMarkdownDocument:
    def test_inputs_split_by_required(self):
        text = MarkdownDocumentFormatter().render(sample_module())

        assert "## Required Inputs" in text
        assert "## Optional Inputs" in text
        assert text.index("### name") < text.index("## Optional Inputs")
        assert 'Default: `"eu-west-1"`' in text

    def test_outputs(self):
        text = MarkdownDocumentFormatter().render(sample_module())

        assert text.endswith(
            "## Outputs\n\nThe following outputs are exported:\n\n"
            "### id\n\nDescription: Resource id"
        )


# =============================================================================
# Test pretty
# =============================================================================


@pytest.mark.unit
class TestPretty:
    def test_plain_output(self):
        text = PrettyFormatter().render(sample_module(), Settings(show_color=False))

        assert text == (
            "Example module.\n"
            "\n"
            "input.name (required)\n"
            "Resource name\n"
            "\n"
            'input.region ("eu-west-1")\n'
            "Deployment region\n"
            "\n"
            "output.id\n"
            "Resource id"
        )

    def test_no_escape_sequences_without_color(self):
        text = PrettyFormatter().render(_full_module(), Settings(show_color=False))

        assert "\x1b" not in text

    def test_colored_output(self):
        text = PrettyFormatter().render(sample_module(), Settings(show_color=True))

        assert ColorManager.CYAN in text
        assert ColorManager.RESET in text

    def test_resources_and_providers(self):
        text = PrettyFormatter().render(_full_module(), Settings(show_color=False))

        assert "requirement.terraform (>= 1.0)" in text
        assert "provider.aws (>= 4.0)" in text
        assert "resource.aws_s3_bucket.site (resource)" in text
        assert "data.aws_region.current (data source)" in text


# =============================================================================
# Test tfvars
# =============================================================================


@pytest.mark.unit
class TestTfvars:
    def test_hcl_aligned(self):
        text = TfvarsHclFormatter().render(sample_module())

        assert text == 'name   = ""\nregion = "eu-west-1"'

    def test_hcl_empty_module(self):
        assert TfvarsHclFormatter().render(Module()) == ""

    def test_json(self):
        text = TfvarsJsonFormatter().render(sample_module())

        assert json.loads(text) == {"name": "", "region": "eu-west-1"}

    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, "null"),
            (True, "true"),
            (3, "3"),
            (1.5, "1.5"),
            ("a", '"a"'),
            (["a", 1], '["a", 1]'),
            ({}, "{}"),
            (
                {"Team": "docs", "cost center": 1},
                '{ Team = "docs", "cost center" = 1 }',
            ),
        ],
    )
    def test_hcl_value(self, value, expected):
        assert hcl_value(value) == expected


# =============================================================================
# Test toml
# =============================================================================


@pytest.mark.unit
class TestToml:
    def test_output(self):
        text = TomlFormatter().render(sample_module())

        assert text.startswith(
            'header = "Example module."\n'
            "providers = []\n"
            "requirements = []\n"
            "resources = []\n"
            "\n"
            "[[inputs]]\n"
            'name = "name"\n'
            'type = "string"\n'
            'description = "Resource name"\n'
            "required = true\n"
        )

    def test_parses_back(self):
        module = _full_module()
        module.inputs[1].default = {"Team": "docs", "cost center": [1, 2]}

        data = tomllib.loads(TomlFormatter().render(module))

        assert data["header"] == "Example module."
        assert "default" not in data["inputs"][0]
        assert data["inputs"][1]["default"] == {"Team": "docs", "cost center": [1, 2]}
        assert data["resources"][1] == {
            "type": "aws_region",
            "name": "current",
            "provider": "aws",
            "mode": "data",
        }

    def test_hidden_sections(self):
        settings = Settings.with_hidden(["inputs", "outputs"])

        data = tomllib.loads(TomlFormatter().render(sample_module(), settings))

        assert data["inputs"] == []
        assert data["outputs"] == []

    @pytest.mark.parametrize(
        "value,expected",
        [
            (False, "false"),
            (2, "2"),
            ('say "hi"', '"say \\"hi\\""'),
            ([1, None, 2], "[1, 2]"),
            ({}, "{}"),
            ({"a": None, "b": 1}, "{ b = 1 }"),
        ],
    )
    def test_toml_value(self, value, expected):
        assert toml_value(value) == expected
