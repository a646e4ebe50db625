"""
Errors raised while building or running the command tree.

They are ToolErrors, so the entry points report them like any other
TfDocsError; the offending command name travels in the error context.
"""

from typing import Any

from ..exceptions import ToolError


class UndefNameError(ToolError):
    """A tool class or instance without a name."""

    def __init__(self, cls: Any | None = None, tool: Any | None = None) -> None:
        self.cls = cls
        self.tool = tool
        if cls is not None:
            super().__init__("tool class defines no name", cls=cls.__name__)
        else:
            super().__init__("tool has no name", tool=tool)


class UndefGroupError(ToolError):
    """Subcommands requested from a command that has none."""

    def __init__(self, tool: Any) -> None:
        self.tool = tool
        super().__init__("command has no subcommands", command=tool.name)


class DupToolError(ToolError):
    """A subcommand whose name or alias is already taken in its group."""

    def __init__(self, tool: Any) -> None:
        self.tool = tool
        super().__init__("subcommand name already taken", command=tool.name)


class DupFlagError(ToolError):
    def __init__(self, tool_name: str, flag_name: str) -> None:
        self.tool_name = tool_name
        self.flag_name = flag_name
        super().__init__(
            "flag declared twice", command=tool_name, flag=f"--{flag_name}"
        )


class AttrNotFoundError(ToolError):
    """No node from a command up to the root owns the attribute."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"attribute '{name}' not found in command tree")


class MissingParentError(ToolError):
    """Root-owned state read from a command that is not attached to a root."""

    def __init__(self, tool_name: str, property_name: str) -> None:
        self.tool_name = tool_name
        self.property_name = property_name
        super().__init__(
            f"cannot read '{property_name}' before the command is attached",
            command=tool_name,
        )


class InvalidFlagError(ToolError):
    """A flag declared with a value type the parser does not support."""

    def __init__(self, flag_name: str, value_type: str) -> None:
        self.flag_name = flag_name
        self.value_type = value_type
        super().__init__(
            f"unknown value type '{value_type}'", flag=f"--{flag_name}"
        )
