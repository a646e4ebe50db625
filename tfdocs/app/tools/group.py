"""Ordered subcommands of one command, and dispatch to the selected one."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..errors import DupToolError, UndefNameError

if TYPE_CHECKING:
    from .base import Tool


class ToolGroup:
    """
    Subcommands of ``parent`` in the order they were added.

    That order is the one argparse lists in help and the one the docs
    generator walks, so SEE ALSO sections follow it too. The selected
    subcommand's name is stored on the parsed namespace as ``cmd_var``.
    """

    def __init__(self, parent: Tool, cmd_var: str):
        self._parent = parent
        self._cmd_var = cmd_var
        self._tools: dict[str, Tool] = {}

    @property
    def lg(self) -> Any:
        return self._parent.lg

    @property
    def tools(self) -> list[Tool]:
        return list(self._tools.values())

    def _names_in_use(self) -> set[str]:
        names = set(self._tools)
        for tool in self._tools.values():
            names.update(tool.config.aliases)
        return names

    def add_tool(self, tool: Tool) -> Tool:
        """
        Append ``tool``.

        Raises:
            UndefNameError: the tool has no name
            DupToolError: its name or one of its aliases is already in use
        """
        if not tool.name:
            raise UndefNameError(tool=tool)
        taken = self._names_in_use()
        if tool.name in taken or not taken.isdisjoint(tool.config.aliases):
            raise DupToolError(tool)
        self._tools[tool.name] = tool
        return tool

    def get_tool(self, name: str) -> Tool:
        """Find a subcommand by name or alias; KeyError if there is none."""
        tool = self._tools.get(name)
        if tool is not None:
            return tool
        for tool in self._tools.values():
            if name in tool.config.aliases:
                return tool
        raise KeyError(f"no subcommand '{name}'")

    def add_tool_args(self, parser: Any) -> Any:
        subparsers = parser.add_subparsers(dest=self._cmd_var, metavar="COMMAND")
        for tool in self._tools.values():
            args, kwargs = tool.cmd
            sub = subparsers.add_parser(
                *args, **kwargs, formatter_class=parser.formatter_class
            )
            tool.set_args(sub)
        return subparsers

    def run(self, **kwargs: Any) -> int:
        """Run the selected subcommand, or print the parent's help if none was."""
        selected = getattr(self._parent.args, self._cmd_var, None)
        if selected is None:
            if self._parent.arg_prs is not None:
                self._parent.arg_prs.print_help()
            return 0

        tool = self.get_tool(selected)
        self.lg.debug("running subcommand", extra={"command": tool.name})
        return tool.run(**kwargs)
