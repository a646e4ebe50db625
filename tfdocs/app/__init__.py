"""
Command tree framework.

Commands are Tool instances arranged under an App root. Each command
declares its flags and subcommands once; argparse parsers and the
reference documentation are both built from those declarations.
"""

from .app import App
from .output import BufferedOutput, ConsoleOutput, OutputWriter
from .tools import CommandKind, Flag, Tool, ToolConfig, ToolGroup, format_flag_usages

__all__ = [
    "App",
    "BufferedOutput",
    "CommandKind",
    "ConsoleOutput",
    "Flag",
    "OutputWriter",
    "Tool",
    "ToolConfig",
    "ToolGroup",
    "format_flag_usages",
]
