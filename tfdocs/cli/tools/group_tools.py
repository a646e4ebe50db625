"""Formatter families: commands whose subcommands pick the flavour."""

from __future__ import annotations

from ...app import CommandKind, Flag, Tool, ToolConfig
from .formatter_tool import (
    MarkdownDocumentTool,
    MarkdownTableTool,
    TfvarsHclTool,
    TfvarsJsonTool,
)


class MarkdownTool(Tool):
    """Markdown formatters, sharing the markdown rendering flags."""

    def __init__(self, parent: Tool | None = None):
        super().__init__(parent)
        self.add_tool(MarkdownTableTool())
        self.add_tool(MarkdownDocumentTool())

    def _create_config(self) -> ToolConfig:
        return ToolConfig(
            name="markdown",
            aliases=["md"],
            help_text="Generate Markdown of inputs and outputs",
            kind=CommandKind.FORMATTER,
        )

    def _create_flags(self) -> list[Flag]:
        return [
            Flag(
                "escape",
                "escape special characters",
                default=True,
                value_type="bool",
                persistent=True,
            ),
            Flag(
                "indent",
                "indention level of Markdown sections [1, 2, 3, 4, 5]",
                default=2,
                value_type="int",
                persistent=True,
            ),
            Flag(
                "required",
                "show Required column or section",
                default=True,
                value_type="bool",
                persistent=True,
            ),
            Flag(
                "default",
                "show Default column or section",
                default=True,
                value_type="bool",
                persistent=True,
            ),
        ]


class TfvarsTool(Tool):
    """terraform.tfvars skeletons."""

    def __init__(self, parent: Tool | None = None):
        super().__init__(parent)
        self.add_tool(TfvarsHclTool())
        self.add_tool(TfvarsJsonTool())

    def _create_config(self) -> ToolConfig:
        return ToolConfig(
            name="tfvars",
            help_text="Generate terraform.tfvars of inputs",
            kind=CommandKind.FORMATTER,
        )
