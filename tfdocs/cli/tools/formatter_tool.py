"""
Formatter commands.

Every formatter command takes a module directory, loads it and prints it
through the formatter registered under the command's formatter name. The
loader and the registry are looked up on the root command, so tests can
swap either one.
"""

from __future__ import annotations

import argparse
from typing import TYPE_CHECKING, Any

from ...app import CommandKind, Flag, Tool, ToolConfig
from ...exceptions import ConfigError
from ...format import Settings
from ...terraform import DEFAULT_HEADER_FILE, Options, SortBy

if TYPE_CHECKING:
    from argparse import ArgumentParser

SORT_CRITERIA = ("name", "required")


def module_options(args: argparse.Namespace) -> Options:
    """
    Build loader options from the parsed root flags.

    Raises:
        ConfigError: If --sort-by names an unknown criterion
    """
    sort_by = getattr(args, "sort_by", "name")
    if sort_by not in SORT_CRITERIA:
        raise ConfigError(
            f"unknown sort criterion '{sort_by}'", valid=",".join(SORT_CRITERIA)
        )
    if getattr(args, "sort", True):
        criteria = SortBy(name=True, required=sort_by == "required")
    else:
        criteria = SortBy(name=False, required=False)

    return Options(
        path=getattr(args, "path", "."),
        show_header="header" not in (getattr(args, "hide", None) or []),
        header_from=getattr(args, "header_from", DEFAULT_HEADER_FILE),
        sort_by=criteria,
    )


def render_settings(args: argparse.Namespace) -> Settings:
    """
    Build formatter settings from the parsed flags.

    Flags a command does not declare keep the Settings defaults.

    Raises:
        ConfigError: If --hide names an unknown section
    """
    options = module_options(args)
    return Settings.with_hidden(
        getattr(args, "hide", None) or [],
        show_color=getattr(args, "color", True),
        sort_by_name=options.sort_by.name,
        sort_by_required=options.sort_by.required,
        escape=getattr(args, "escape", True),
        indent=getattr(args, "indent", 2),
        show_required=getattr(args, "required", True),
        show_default=getattr(args, "default", True),
    )


class FormatterTool(Tool):
    """
    Base class for commands that print a module through a formatter.

    Subclasses set ``formatter`` to the registry name and provide their
    configuration.
    """

    formatter: str = ""

    def add_args(self, parser: ArgumentParser) -> None:
        parser.add_argument(
            "path",
            metavar="PATH",
            nargs="?",
            default=".",
            help="Terraform module directory (default: current directory)",
        )

    def run(self, **kwargs: Any) -> int:
        args = self.args
        options = module_options(args)
        settings = render_settings(args)

        self.lg.debug(
            "loading module",
            extra={"path": str(options.path), "formatter": self.formatter},
        )
        module = self.trace_attr("loader")(options)
        formatter = self.trace_attr("registry").resolve(self.formatter, settings)
        self.trace_attr("out").write(formatter.render(module))
        return 0


def _formatter_config(name: str, help_text: str, **kwargs: Any) -> ToolConfig:
    return ToolConfig(
        name=name,
        help_text=help_text,
        use="[PATH]",
        kind=CommandKind.FORMATTER,
        **kwargs,
    )


class JsonTool(FormatterTool):
    formatter = "json"

    def _create_config(self) -> ToolConfig:
        return _formatter_config("json", "Generate JSON of inputs and outputs")


class YamlTool(FormatterTool):
    formatter = "yaml"

    def _create_config(self) -> ToolConfig:
        return _formatter_config("yaml", "Generate YAML of inputs and outputs")


class XmlTool(FormatterTool):
    formatter = "xml"

    def _create_config(self) -> ToolConfig:
        return _formatter_config("xml", "Generate XML of inputs and outputs")


class PrettyTool(FormatterTool):
    """Colorized plain text, meant for terminals."""

    formatter = "pretty"

    def _create_config(self) -> ToolConfig:
        return _formatter_config(
            "pretty", "Generate colorized pretty of inputs and outputs"
        )

    def _create_flags(self) -> list[Flag]:
        return [
            Flag("color", "colorize printed result", default=True, value_type="bool")
        ]


class MarkdownTableTool(FormatterTool):
    formatter = "markdown table"

    def _create_config(self) -> ToolConfig:
        return _formatter_config(
            "table", "Generate Markdown tables of inputs and outputs", aliases=["tbl"]
        )


class MarkdownDocumentTool(FormatterTool):
    formatter = "markdown document"

    def _create_config(self) -> ToolConfig:
        return _formatter_config(
            "document",
            "Generate Markdown document of inputs and outputs",
            aliases=["doc"],
        )


class TfvarsHclTool(FormatterTool):
    formatter = "tfvars hcl"

    def _create_config(self) -> ToolConfig:
        return _formatter_config(
            "hcl", "Generate HCL format of terraform.tfvars of inputs"
        )


class TfvarsJsonTool(FormatterTool):
    formatter = "tfvars json"

    def _create_config(self) -> ToolConfig:
        return _formatter_config(
            "json", "Generate JSON format of terraform.tfvars of inputs"
        )


class TomlTool(FormatterTool):
    formatter = "toml"

    def _create_config(self) -> ToolConfig:
        return _formatter_config("toml", "Generate TOML of inputs and outputs")
