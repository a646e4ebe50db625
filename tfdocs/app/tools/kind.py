"""Classification of command tree nodes."""

from __future__ import annotations

import enum


class CommandKind(enum.Enum):
    """
    What a command is, decided when the command is constructed.

    Only FORMATTER commands get a reference page of their own.
    """

    FORMATTER = "formatter"
    INTERNAL = "internal"
    HELP_TOPIC = "help-topic"

    @classmethod
    def from_annotation(cls, value: str | None) -> CommandKind:
        """
        Map a free-text ``kind`` annotation to a CommandKind.

        Missing or unrecognised values classify as INTERNAL, never as an error.
        """
        if not value:
            return cls.INTERNAL
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.INTERNAL
