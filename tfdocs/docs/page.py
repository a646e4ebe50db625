"""
Markdown reference page of one command.

Sections, each only when there is something to show:

    ## <command path>            short description
    ### Synopsis                 long description (or the short one)
    usage block                  runnable commands only
    ### Examples                 the command's example text
    ### Options                  own flags
    ### Options inherited ...    ancestors' persistent flags
    ### Example | ### SEE ALSO   leaf pages embed an example, parents link
    ###### Auto generated on ... unless disabled on the command
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date

from ..app.tools import Tool, format_flag_usages
from .example import ExampleEmbedder
from .filter import documentable_children
from .links import Layout, link_for


def autogen_date(d: date) -> str:
    """Format as e.g. 7-Mar-2024 (no zero padding on the day)."""
    return f"{d.day}-{d.strftime('%b')}-{d.year}"


class PageRenderer:
    """
    Renders reference pages.

    Args:
        layout: Docs layout used for SEE ALSO links
        embedder: Produces the Example section of leaf pages
        clock: Returns today's date (default: date.today)
    """

    def __init__(
        self,
        layout: Layout,
        embedder: ExampleEmbedder,
        clock: Callable[[], date] | None = None,
    ):
        self.layout = layout
        self.embedder = embedder
        self.clock = clock or date.today

    def render(self, node: Tool) -> str:
        parts = [
            f"## {node.command_path}\n\n",
            f"{node.short}\n\n",
            "### Synopsis\n\n",
            f"{node.long}\n\n",
        ]
        if node.runnable:
            parts.append(f"```\n{node.use_line}\n```\n\n")
        if node.example:
            parts.append(f"### Examples\n\n```\n{node.example}\n```\n\n")

        parts.append(self._options("### Options", format_flag_usages(node.local_flags)))
        parts.append(
            self._options(
                "### Options inherited from parent commands",
                format_flag_usages(node.inherited_flags),
            )
        )

        children = documentable_children(node)
        if children:
            parts.append(self.see_also(children))
        else:
            parts.append(self.embedder.embed(node))

        if not node.disable_autogen_tag:
            parts.append(f"###### Auto generated on {autogen_date(self.clock())}\n")
        return "".join(parts)

    @staticmethod
    def _options(title: str, usages: str) -> str:
        if not usages:
            return ""
        return f"{title}\n\n```\n{usages}```\n\n"

    def _bullet(self, node: Tool, indent: str = "") -> str:
        link = link_for(node.command_path, self.layout)
        return f"{indent}* [{node.command_path}]({link.href})\t - {node.short}\n"

    def see_also(self, children: list[Tool]) -> str:
        """One bullet per child, nested bullets for grandchildren."""
        lines = ["### SEE ALSO\n\n"]
        for child in children:
            lines.append(self._bullet(child))
            for grandchild in documentable_children(child):
                lines.append(self._bullet(grandchild, indent="  "))
        lines.append("\n")
        return "".join(lines)
