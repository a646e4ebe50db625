"""
Root command of a command tree.

The App is the tool at the top of the tree. It owns the resources every
command reaches through its parent chain: parsed arguments, the root
logger and the output writer.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from ..exceptions import TfDocsError
from ..log import LogConfig, Logger, LoggerFactory
from .errors import MissingParentError
from .output import ConsoleOutput, OutputWriter
from .tools.base import Tool, ToolConfig


class App(Tool):
    """
    Root command with argument parsing and error handling.

    Example:
        app = App(ToolConfig(name="tfdocs", help_text="Generate docs"))
        app.add_tool(JsonTool())
        sys.exit(app.main())
    """

    def __init__(
        self,
        config: ToolConfig | None = None,
        out: OutputWriter | None = None,
        log_config: LogConfig | None = None,
    ):
        """
        Initialize the root command.

        Args:
            config: Root command configuration
            out: Output writer for command results (default: stdout)
            log_config: Logging configuration (default: from environment)
        """
        super().__init__(None, config)
        self.out = out if out is not None else ConsoleOutput()
        self._log_config = log_config
        self._parsed_args: argparse.Namespace | None = None

    @property
    def args(self) -> argparse.Namespace:
        """
        Parsed command line arguments.

        Raises:
            MissingParentError: If accessed before parse_args()
        """
        if self._parsed_args is None:
            raise MissingParentError(self.name, "args (arguments not parsed yet)")
        return self._parsed_args

    @property
    def lg(self) -> Logger:
        """Root logger, created on first use."""
        if self._logger is None:
            config = self._log_config or LogConfig.from_env()
            self._logger = LoggerFactory.create_root(config)
        return self._logger

    def create_parser(self) -> argparse.ArgumentParser:
        """Build the argparse parser for the whole tree."""
        parser = argparse.ArgumentParser(
            prog=self.name,
            description=self.long,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        self.set_args(parser)
        return parser

    def parse_args(self, argv: Sequence[str] | None = None) -> argparse.Namespace:
        self._parsed_args = self.create_parser().parse_args(argv)
        return self._parsed_args

    def main(self, argv: Sequence[str] | None = None) -> int:
        """
        Parse arguments and run the selected command.

        Returns:
            int: Exit code; 1 when the command raised a TfDocsError
        """
        self.parse_args(argv)
        try:
            return self.run()
        except TfDocsError as e:
            self.lg.error("command failed", extra={"exception": e})
            return 1
