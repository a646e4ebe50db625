"""
Command tree components.

- Tool: one command, with flags and subcommands
- ToolGroup: ordered subcommands and dispatch
- Flag: flag descriptor shared by argparse and the docs
- CommandKind: classification of a command
"""

from .base import Tool, ToolConfig
from .flags import Flag, format_flag_usages
from .group import ToolGroup
from .kind import CommandKind

__all__ = [
    "CommandKind",
    "Flag",
    "Tool",
    "ToolConfig",
    "ToolGroup",
    "format_flag_usages",
]
