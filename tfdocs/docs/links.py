"""
Page names and cross links.

All pages except the root's live flat in one directory, whatever the depth
of their command: ``tfdocs markdown table`` is ``docs/formats/markdown-table.md``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Layout:
    """
    Directory layout of the generated docs.

    Attributes:
        base_dir: Docs directory, relative to the output root
        format_dir: Directory of the per-command pages, below base_dir
        root_prefix: Prefix stripped from derived names, e.g. "tfdocs-"
    """

    base_dir: str = "docs"
    format_dir: str = "formats"
    root_prefix: str = "tfdocs-"


@dataclass(frozen=True)
class Link:
    """Where a command's page lives and how other pages link to it."""

    name: str
    filename: str
    href: str


def derived_name(command_path: str, prefix: str) -> str:
    """
    Flat page name of a command.

    Spaces become hyphens and the root prefix is removed::

        derived_name("tfdocs markdown table", "tfdocs-") == "markdown-table"
    """
    name = command_path.replace(" ", "-")
    if prefix and name.startswith(prefix):
        name = name[len(prefix) :]
    return name


def link_for(command_path: str, layout: Layout) -> Link:
    name = derived_name(command_path, layout.root_prefix)
    filename = f"{name}.md"
    dirs = [p.strip("/") for p in (layout.base_dir, layout.format_dir)]
    href = "/" + "/".join([d for d in dirs if d] + [filename])
    return Link(name=name, filename=filename, href=href)
