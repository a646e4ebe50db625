"""
Where commands print their results.

Formatter commands never touch sys.stdout directly; they write to the
``out`` object owned by the root command, which tests replace with a
BufferedOutput.
"""

import sys
from typing import Protocol, TextIO


class OutputWriter(Protocol):
    def write(self, text: str = "") -> None: ...

    def write_raw(self, text: str) -> None: ...


class ConsoleOutput:
    """Writes to ``stream``, stdout unless given."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = sys.stdout if stream is None else stream

    def write(self, text: str = "") -> None:
        """Write ``text`` as one line."""
        self.write_raw(text + "\n")

    def write_raw(self, text: str) -> None:
        self._stream.write(text)

    def flush(self) -> None:
        self._stream.flush()


class BufferedOutput:
    """Keeps everything written; ``text`` returns it joined."""

    def __init__(self) -> None:
        self._chunks: list[str] = []

    def write(self, text: str = "") -> None:
        self._chunks.append(f"{text}\n")

    def write_raw(self, text: str) -> None:
        self._chunks.append(text)

    def flush(self) -> None:
        return None

    @property
    def text(self) -> str:
        return "".join(self._chunks)

    def clear(self) -> None:
        del self._chunks[:]
