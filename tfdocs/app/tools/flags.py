"""
Flag descriptors for commands.

A Flag is declared once on a command and used twice: to build the
command's argparse parser, and to render the command's options in its
reference page.
"""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from ..errors import InvalidFlagError

VALUE_TYPES = ("bool", "int", "string", "strings")


def _split_csv(value: str) -> list[str]:
    """Split a comma separated flag value, dropping empty items."""
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass(frozen=True)
class Flag:
    """
    A command line flag.

    Attributes:
        name: Long name without dashes, e.g. "sort-by"
        usage: One line help text
        default: Default value, rendered in the options table when not zero
        shorthand: Single letter short name, optional
        value_type: One of "bool", "int", "string", "strings"
        persistent: Inherited by every subcommand of the declaring command
    """

    name: str
    usage: str
    default: Any = None
    shorthand: str = ""
    value_type: str = "string"
    persistent: bool = False

    def __post_init__(self) -> None:
        if self.value_type not in VALUE_TYPES:
            raise InvalidFlagError(self.name, self.value_type)

    @property
    def dest(self) -> str:
        """Attribute name on the parsed argparse namespace."""
        return self.name.replace("-", "_")

    def default_text(self) -> str:
        """
        Render the default the way it appears after the usage text.

        Zero values (False, 0, "", empty list, None) render as "".
        """
        value = self.default
        if self.value_type == "bool":
            return "(default true)" if value else ""
        if self.value_type == "strings":
            items = [str(v) for v in value or ()]
            return f"(default [{','.join(items)}])" if items else ""
        if value is None or value == "" or value == 0:
            return ""
        if self.value_type == "int":
            return f"(default {value})"
        return f'(default "{value}")'

    def add_to(self, parser: Any, inherited: bool = False) -> None:
        """
        Register this flag on an argparse parser.

        Inherited copies default to SUPPRESS so a value parsed by an ancestor
        parser is not overwritten by the subcommand's default.
        """
        names = [f"--{self.name}"]
        if self.shorthand:
            names.insert(0, f"-{self.shorthand}")

        kwargs: dict[str, Any] = {"dest": self.dest, "help": self.usage}
        if self.value_type == "bool":
            kwargs["action"] = argparse.BooleanOptionalAction
        elif self.value_type == "int":
            kwargs["type"] = int
            kwargs["metavar"] = "int"
        elif self.value_type == "strings":
            kwargs["action"] = "extend"
            kwargs["type"] = _split_csv
            kwargs["metavar"] = "strings"
        else:
            kwargs["metavar"] = "string"

        if inherited:
            kwargs["default"] = argparse.SUPPRESS
        elif self.value_type == "strings":
            kwargs["default"] = list(self.default or ())
        else:
            kwargs["default"] = self.default
        parser.add_argument(*names, **kwargs)


def format_flag_usages(flags: Iterable[Flag]) -> str:
    """
    Render flags as an aligned usage block, one flag per line.

    Example output::

          --header-from string   relative path of a file to read header from (default "main.tf")
      -s, --sort                 sort items (default true)

    Flags keep their declaration order. Returns "" for no flags.
    """
    rows = []
    for flag in flags:
        if flag.shorthand:
            left = f"  -{flag.shorthand}, --{flag.name}"
        else:
            left = f"      --{flag.name}"
        if flag.value_type != "bool":
            left += f" {flag.value_type}"
        right = flag.usage
        default = flag.default_text()
        if default:
            right = f"{right} {default}" if right else default
        rows.append((left, right))

    if not rows:
        return ""

    width = max(len(left) for left, _ in rows)
    return "".join(f"{left.ljust(width)}   {right}\n" for left, right in rows)
