"""Tests for tfdocs.app.output."""

import io

import pytest

from tfdocs.app.output import BufferedOutput, ConsoleOutput


@pytest.mark.unit
class TestConsoleOutput:
    def test_write_appends_newline(self):
        stream = io.StringIO()
        out = ConsoleOutput(stream)

        out.write("hello")
        out.write_raw("raw")

        assert stream.getvalue() == "hello\nraw"


@pytest.mark.unit
class TestBufferedOutput:
    def test_collects_text(self):
        out = BufferedOutput()
        out.write("Line 1")
        out.write_raw("Line 2\n")

        assert out.text == "Line 1\nLine 2\n"

    def test_clear(self):
        out = BufferedOutput()
        out.write("x")
        out.clear()

        assert out.text == ""
