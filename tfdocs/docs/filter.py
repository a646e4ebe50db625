"""Which commands get a reference page."""

from __future__ import annotations

from ..app.tools import CommandKind, Tool


def is_documentable(node: Tool) -> bool:
    """
    True for available formatter commands.

    Hidden, deprecated and help-topic commands are never documented, nor
    is anything not classified as a formatter. The walker and the SEE ALSO
    index both use this predicate, so the generated files and the links to
    them always agree.
    """
    return (
        node.is_available
        and not node.is_help_topic
        and node.kind is CommandKind.FORMATTER
    )


def documentable_children(node: Tool) -> list[Tool]:
    """Documentable subcommands in declaration order."""
    return [child for child in node.commands if is_documentable(child)]
