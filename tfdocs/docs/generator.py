"""
Entry point of ``tfdocs-docs``.

Regenerates every formatter reference page of the ``tfdocs`` command:

    docs/FORMATS_GUIDE.md           the root command
    docs/formats/<name>.md          one page per formatter command

Takes no arguments. Settings come from etc/docs.yaml when present and from
TFDOCS_DOCS_* environment variables.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from datetime import date
from pathlib import Path

from ..app.tools import Tool
from ..cli import build_root
from ..config import DocsConfig
from ..exceptions import TfDocsError
from ..format import default_registry
from ..log import LogConfig, Logger, LoggerFactory
from ..terraform import load_module
from .example import ExampleEmbedder, FormatterSource, ModuleLoader
from .links import Layout
from .page import PageRenderer
from .walker import TreeWalker


def create_walker(
    config: DocsConfig,
    root: Tool,
    lg: Logger,
    loader: ModuleLoader | None = None,
    registry: FormatterSource | None = None,
    clock: Callable[[], date] | None = None,
) -> TreeWalker:
    """Wire the walker, renderer and embedder for a command tree."""
    layout = Layout(
        base_dir=config.base_dir,
        format_dir=config.format_dir,
        root_prefix=config.prefix_for(root.name),
    )
    embedder = ExampleEmbedder(
        loader or load_module,
        registry or default_registry(),
        example_path=config.example_path,
        module_dir=Path(config.root_dir) / config.example_path,
        header_from=config.header_from,
        flag_overrides=config.flag_overrides,
    )
    renderer = PageRenderer(layout, embedder, clock=clock)
    return TreeWalker(
        renderer,
        layout,
        config.root_dir,
        LoggerFactory.derive(lg, "docs"),
        on_collision=config.on_collision,
    )


def generate(
    config: DocsConfig,
    lg: Logger,
    root: Tool | None = None,
    loader: ModuleLoader | None = None,
    registry: FormatterSource | None = None,
    clock: Callable[[], date] | None = None,
) -> list[Path]:
    """
    Write all pages of the command tree (default: the tfdocs tree).

    loader, registry and clock default to the real ones, see create_walker.

    Raises:
        TfDocsError: On the first page that cannot be rendered or written
    """
    if root is None:
        root = build_root()
    walker = create_walker(config, root, lg, loader, registry, clock)
    written = walker.walk(root, "", config.root_basename)
    docs_dir = Path(config.root_dir) / config.base_dir
    lg.info("generated docs", extra={"pages": len(written), "dir": str(docs_dir)})
    return written


def main() -> int:
    """Generate the docs; exit with status 1 on any error."""
    lg = LoggerFactory.create_root(LogConfig.from_env())
    try:
        config = DocsConfig.load()
        generate(config, lg)
    except TfDocsError as e:
        lg.error("docs generation failed", extra={"exception": e})
        sys.exit(1)
    return 0
