"""
Reference documentation for the formatter commands.

Walks a command tree and writes one markdown page per formatter command,
each leaf page embedding the formatter's output for the example module.

Example:
    from tfdocs.cli import build_root
    from tfdocs.config import DocsConfig
    from tfdocs.docs import generate
    from tfdocs.log import LogConfig, LoggerFactory

    lg = LoggerFactory.create_root(LogConfig.from_env())
    generate(DocsConfig(root_dir="build"), lg, build_root())
"""

from .example import ExampleEmbedder, FormatterSource, ModuleLoader, formatter_name
from .filter import documentable_children, is_documentable
from .generator import create_walker, generate, main
from .links import Layout, Link, derived_name, link_for
from .page import PageRenderer, autogen_date
from .walker import TreeWalker

__all__ = [
    "ExampleEmbedder",
    "FormatterSource",
    "Layout",
    "Link",
    "ModuleLoader",
    "PageRenderer",
    "TreeWalker",
    "autogen_date",
    "create_walker",
    "derived_name",
    "documentable_children",
    "formatter_name",
    "generate",
    "is_documentable",
    "link_for",
    "main",
]
