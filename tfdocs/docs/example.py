"""
Live examples for formatter pages.

Each leaf page shows the command run against the example module and the
output it produces. The output is rendered at generation time, so a
formatter that fails or disappears breaks the docs build instead of
leaving a stale example behind.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Protocol

from ..app.tools import Tool
from ..format import Formatter, Settings
from ..terraform import Module, Options, SortBy

ModuleLoader = Callable[[Options], Module]


class FormatterSource(Protocol):
    """Anything that resolves a formatter by name, e.g. FormatterRegistry."""

    def resolve(self, name: str, settings: Settings | None = None) -> Formatter: ...


def formatter_name(command_path: str) -> str:
    """Registry name of a command: its path without the root command."""
    _, _, rest = command_path.partition(" ")
    return rest or command_path


def indent_block(text: str, prefix: str = "    ") -> str:
    """Indent every non-empty line; empty lines stay empty."""
    return "".join(
        f"{prefix}{line}\n" if line else "\n" for line in text.split("\n")
    )


class ExampleEmbedder:
    """
    Renders the ``### Example`` section of a leaf page.

    Args:
        loader: Module loader, e.g. load_module
        registry: Formatter source, e.g. default_registry()
        example_path: Example module as shown in the command line
        module_dir: Directory actually loaded (default: example_path)
        header_from: Header file of the example module
        flag_overrides: Extra flag for the command line, by formatter name
    """

    def __init__(
        self,
        loader: ModuleLoader,
        registry: FormatterSource,
        example_path: str = "./examples/",
        module_dir: str | Path | None = None,
        header_from: str = "main.tf",
        flag_overrides: dict[str, str] | None = None,
    ):
        self.loader = loader
        self.registry = registry
        self.example_path = example_path
        self.module_dir = module_dir if module_dir is not None else example_path
        self.header_from = header_from
        self.flag_overrides = (
            {"pretty": "--no-color"} if flag_overrides is None else flag_overrides
        )

    def command_line(self, node: Tool) -> str:
        """The shell line shown above the output."""
        line = f"{node.command_path} {self.example_path}"
        flag = self.flag_overrides.get(formatter_name(node.command_path))
        if flag:
            line += f" {flag}"
        return line

    def render_output(self, node: Tool) -> str:
        """
        Render the example module through the node's formatter, colors off.

        Raises:
            UnknownFormatterError: If no formatter is registered for the node
            ModuleLoadError: If the example module cannot be loaded
        """
        settings = Settings().without_color()
        formatter = self.registry.resolve(formatter_name(node.command_path), settings)
        module = self.loader(
            Options(
                path=self.module_dir,
                show_header=True,
                header_from=self.header_from,
                sort_by=SortBy(
                    name=settings.sort_by_name, required=settings.sort_by_required
                ),
            )
        )
        return formatter.render(module, settings)

    def embed(self, node: Tool) -> str:
        output = self.render_output(node)
        return (
            "### Example\n\n"
            "Given the [`examples`](/examples/) module:\n\n"
            f"```shell\n{self.command_line(node)}\n```\n\n"
            "generates the following output:\n\n"
            f"{indent_block(output)}\n"
        )
