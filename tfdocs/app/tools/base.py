"""
Base tool class for the command tree.

A Tool is one command: it owns its flags and (through a ToolGroup) its
subcommands, builds its argparse parser, and exposes the read-only
metadata the documentation generator renders.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ...log import Logger, LoggerFactory
from ..errors import DupFlagError, MissingParentError, UndefGroupError, UndefNameError
from ..traceable import Traceable
from .flags import Flag
from .kind import CommandKind

if TYPE_CHECKING:
    from .group import ToolGroup


@dataclass
class ToolConfig:
    """
    Configuration for a tool.

    Attributes:
        name: Command name as typed on the command line
        aliases: Alternative names
        help_text: One line summary
        description: Long description, falls back to help_text
        use: Positional argument placeholder shown in the use line, e.g. "[PATH]"
        example: Example invocations, rendered verbatim
        kind: Classification of the command
        hidden: Exclude from help listings and documentation
        deprecated: Deprecation message; deprecated commands are unavailable
        disable_autogen_tag: Omit the "Auto generated" footer from the page
    """

    name: str
    aliases: list[str] = field(default_factory=list)
    help_text: str = ""
    description: str = ""
    use: str = ""
    example: str = ""
    kind: CommandKind = CommandKind.INTERNAL
    hidden: bool = False
    deprecated: str = ""
    disable_autogen_tag: bool = False


class Tool(Traceable):
    """
    Base class for commands.

    Subclasses provide their configuration through _create_config(), their
    flags through _create_flags() and, for leaf commands, override run().
    Parent commands add subcommands with add_tool().
    """

    def __init__(
        self, parent: Traceable | None = None, config: ToolConfig | None = None
    ):
        """
        Initialize the tool.

        Args:
            parent: Parent tool (set automatically by add_tool)
            config: Tool configuration (optional, default from _create_config)
        """
        super().__init__(parent)
        self.config = config or self._create_config()
        if not self.config.name:
            raise UndefNameError(cls=self.__class__)
        self._flags: list[Flag] = []
        for flag in self._create_flags():
            self.add_flag(flag)
        self._group: ToolGroup | None = None
        self._arg_prs: argparse.ArgumentParser | None = None
        self._logger: Logger | None = None

    def _create_config(self) -> ToolConfig:
        """Create default configuration. Override in subclasses."""
        raise UndefNameError(cls=self.__class__)

    def _create_flags(self) -> list[Flag]:
        """Declare this command's flags. Override in subclasses."""
        return []

    # -- metadata ---------------------------------------------------------

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def kind(self) -> CommandKind:
        return self.config.kind

    @property
    def short(self) -> str:
        return self.config.help_text

    @property
    def long(self) -> str:
        """Long description, or the short one when none is set."""
        return self.config.description or self.config.help_text

    @property
    def example(self) -> str:
        return self.config.example

    @property
    def hidden(self) -> bool:
        return self.config.hidden

    @property
    def disable_autogen_tag(self) -> bool:
        return self.config.disable_autogen_tag

    @property
    def parent_tool(self) -> Tool | None:
        """The parent command, or None for the root."""
        return self.parent if isinstance(self.parent, Tool) else None

    @property
    def command_path(self) -> str:
        """Space separated names from the root command to this one."""
        parent = self.parent_tool
        if parent is None:
            return self.name
        return f"{parent.command_path} {self.name}"

    @property
    def commands(self) -> list[Tool]:
        """Subcommands in declaration order."""
        if self._group is None:
            return []
        return self._group.tools

    @property
    def local_flags(self) -> list[Flag]:
        """Flags declared on this command, persistent or not."""
        return list(self._flags)

    @property
    def persistent_flags(self) -> list[Flag]:
        return [f for f in self._flags if f.persistent]

    @property
    def inherited_flags(self) -> list[Flag]:
        """
        Persistent flags of all ancestors, root first.

        A flag redeclared closer to this command shadows the ancestor's.
        """
        chain = []
        parent = self.parent_tool
        while parent is not None:
            chain.append(parent)
            parent = parent.parent_tool

        own = {f.name for f in self._flags}
        inherited: dict[str, Flag] = {}
        for ancestor in reversed(chain):
            for flag in ancestor.persistent_flags:
                if flag.name not in own:
                    inherited[flag.name] = flag
        return list(inherited.values())

    @property
    def use_line(self) -> str:
        """One line usage, e.g. "tfdocs markdown table [PATH] [flags]"."""
        line = self.command_path
        if self.config.use:
            line += f" {self.config.use}"
        if (self._flags or self.inherited_flags) and "[flags]" not in line:
            line += " [flags]"
        return line

    @property
    def runnable(self) -> bool:
        """True when the command has behaviour of its own (overrides run)."""
        return type(self).run is not Tool.run

    @property
    def has_available_subcommands(self) -> bool:
        return any(c.is_available for c in self.commands)

    @property
    def is_available(self) -> bool:
        """Not hidden, not deprecated, and something to run or to list."""
        if self.config.hidden or self.config.deprecated:
            return False
        return self.runnable or self.has_available_subcommands

    @property
    def is_help_topic(self) -> bool:
        """A pure help topic: nothing to run and no subcommands to list."""
        if self.kind is CommandKind.HELP_TOPIC:
            return True
        return not self.runnable and not self.has_available_subcommands

    # -- flags and subcommands --------------------------------------------

    def add_flag(self, flag: Flag) -> Flag:
        """Declare a flag on this command."""
        if any(f.name == flag.name for f in self._flags):
            raise DupFlagError(self.name, flag.name)
        self._flags.append(flag)
        return flag

    def create_group(self) -> ToolGroup:
        """Create a tool group for subcommands."""
        from .group import ToolGroup

        self._group = ToolGroup(self, self.name.replace("-", "_") + "_cmd")
        return self._group

    def add_tool(self, tool: Tool) -> Tool:
        """Add a subcommand, creating the group on first use."""
        group = self._group or self.create_group()
        tool.set_parent(self)
        return group.add_tool(tool)

    @property
    def group(self) -> ToolGroup:
        """
        Get the tool group for subcommands.

        Raises:
            UndefGroupError: If no group is defined
        """
        if self._group is None:
            raise UndefGroupError(self)
        return self._group

    # -- argument parsing -------------------------------------------------

    @property
    def cmd(self) -> tuple[list[str], dict[str, Any]]:
        """Positional and keyword arguments for ``subparsers.add_parser``."""
        kwargs: dict[str, Any] = {
            "aliases": self.config.aliases,
            "description": self.long,
        }
        if not self.config.hidden:
            kwargs["help"] = self.short
        return [self.name], kwargs

    @property
    def arg_prs(self) -> argparse.ArgumentParser | None:
        return self._arg_prs

    def set_args(self, parser: argparse.ArgumentParser) -> None:
        """Register this command's flags, arguments and subcommands."""
        self._arg_prs = parser
        for flag in self._flags:
            flag.add_to(parser)
        for flag in self.inherited_flags:
            flag.add_to(parser, inherited=True)
        self.add_args(parser)
        if self._group is not None:
            self._group.add_tool_args(parser)

    def add_args(self, parser: argparse.ArgumentParser) -> None:
        """Add positional arguments. Override in subclasses."""
        pass

    @property
    def args(self) -> argparse.Namespace:
        """
        Parsed command line arguments, owned by the root.

        Raises:
            MissingParentError: If the tool is not attached to a root
        """
        if self.parent is None:
            raise MissingParentError(self.name, "args")
        return self.parent.trace_attr("args")  # type: ignore[no-any-return]

    # -- lifecycle --------------------------------------------------------

    @property
    def lg(self) -> Logger:
        """Logger derived from the parent's logger on first use."""
        if self._logger is None:
            if self.parent is None:
                raise MissingParentError(self.name, "lg")
            self._logger = LoggerFactory.derive(self.parent.trace_attr("lg"), self.name)
        return self._logger

    def run(self, **kwargs: Any) -> int:
        """
        Run the command.

        Returns:
            int: Exit code

        Raises:
            UndefGroupError: If no group is defined and run() is not overridden
        """
        return self.group.run(**kwargs)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.command_path!r})"
