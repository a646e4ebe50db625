"""
The ``tfdocs`` command tree.

Usage:
    tfdocs markdown table ./my-module
    tfdocs json --hide providers,requirements ./my-module
    tfdocs --help
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from ..app import App, Flag, OutputWriter, ToolConfig
from ..format import FormatterRegistry, default_registry
from ..log import LogConfig
from ..terraform import DEFAULT_HEADER_FILE, Module, Options, load_module
from .tools import (
    JsonTool,
    MarkdownTool,
    PrettyTool,
    TfvarsTool,
    TomlTool,
    VersionTool,
    XmlTool,
    YamlTool,
)

ROOT_NAME = "tfdocs"

_DESCRIPTION = (
    "A utility to generate documentation from Terraform modules in various "
    "output formats"
)

_EXAMPLE = """\
tfdocs markdown table ./my-module
tfdocs json --hide providers,requirements ./my-module
tfdocs pretty --no-color --sort-by required ./my-module"""


def _root_flags() -> list[Flag]:
    return [
        Flag(
            "header-from",
            "relative path of a file to read header from",
            default=DEFAULT_HEADER_FILE,
            persistent=True,
        ),
        Flag(
            "hide",
            "hide section [header, inputs, outputs, providers, requirements, resources]",
            default=[],
            value_type="strings",
            persistent=True,
        ),
        Flag("sort", "sort items", default=True, value_type="bool", persistent=True),
        Flag(
            "sort-by",
            "sort items by criteria [name, required]",
            default="name",
            persistent=True,
        ),
    ]


def build_root(
    out: OutputWriter | None = None,
    loader: Callable[[Options], Module] | None = None,
    registry: FormatterRegistry | None = None,
    log_config: LogConfig | None = None,
) -> App:
    """
    Build the full command tree.

    Children keep this order in help listings and in the generated docs.

    Args:
        out: Output writer for command results (default: stdout)
        loader: Module loader (default: load_module)
        registry: Formatter registry (default: default_registry())
        log_config: Logging configuration (default: from environment)
    """
    app = App(
        ToolConfig(
            name=ROOT_NAME,
            help_text=_DESCRIPTION,
            example=_EXAMPLE,
        ),
        out=out,
        log_config=log_config,
    )
    for flag in _root_flags():
        app.add_flag(flag)

    app.loader = loader or load_module  # type: ignore[attr-defined]
    app.registry = registry or default_registry()  # type: ignore[attr-defined]

    app.add_tool(JsonTool())
    app.add_tool(MarkdownTool())
    app.add_tool(PrettyTool())
    app.add_tool(TfvarsTool())
    app.add_tool(TomlTool())
    app.add_tool(XmlTool())
    app.add_tool(YamlTool())
    app.add_tool(VersionTool())
    return app


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the tfdocs command."""
    return build_root().main(argv)
