"""
Writes the reference pages of a command tree.

Children are written before their parent. The first error aborts the
run; pages written up to that point stay on disk.
"""

from __future__ import annotations

from pathlib import Path

from ..app.tools import Tool
from ..config import COLLISION_POLICIES
from ..exceptions import ConfigError, DuplicatePageError, PageWriteError
from ..log import Logger
from .filter import documentable_children
from .links import Layout, link_for
from .page import PageRenderer


class TreeWalker:
    """
    Renders and writes one page per documentable command.

    Args:
        renderer: Page renderer
        layout: Docs layout
        root_dir: Directory the docs tree is created in
        lg: Logger
        on_collision: "error" raises DuplicatePageError when two commands
            map to the same file; "overwrite" logs a warning and keeps the
            last page written
    """

    def __init__(
        self,
        renderer: PageRenderer,
        layout: Layout,
        root_dir: str | Path,
        lg: Logger,
        on_collision: str = "error",
    ):
        if on_collision not in COLLISION_POLICIES:
            raise ConfigError(
                f"invalid collision policy '{on_collision}'",
                valid=",".join(COLLISION_POLICIES),
            )
        self.renderer = renderer
        self.layout = layout
        self.root_dir = Path(root_dir)
        self.lg = lg
        self.on_collision = on_collision
        self._written: dict[Path, str] = {}

    def walk(self, node: Tool, subdir: str, basename: str) -> list[Path]:
        """
        Write the pages of node and its documentable descendants.

        Start with ``walk(root, "", "FORMATS_GUIDE")``.

        Returns:
            Written paths, children before parents

        Raises:
            PageWriteError: If a directory or file cannot be written
            DuplicatePageError: If two commands map to the same file and
                the policy is "error"
        """
        self._written = {}
        return self._walk(node, subdir, basename)

    def _walk(self, node: Tool, subdir: str, basename: str) -> list[Path]:
        written = []
        for child in documentable_children(node):
            link = link_for(child.command_path, self.layout)
            written.extend(self._walk(child, self.layout.format_dir, link.name))

        path = self.root_dir / self.layout.base_dir / subdir / f"{basename}.md"
        self._check_collision(path, node)
        self._write(path, self.renderer.render(node))
        self._written[path] = node.command_path
        written.append(path)
        return written

    def _check_collision(self, path: Path, node: Tool) -> None:
        previous = self._written.get(path)
        if previous is None:
            return
        if self.on_collision == "error":
            raise DuplicatePageError(
                "page already written by another command",
                path=str(path),
                command=node.command_path,
                previous=previous,
            )
        self.lg.warning(
            "overwriting page",
            extra={
                "path": str(path),
                "command": node.command_path,
                "previous": previous,
            },
        )

    def _write(self, path: Path, text: str) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise PageWriteError(f"cannot write page: {e}", path=str(path)) from e
        self.lg.debug("wrote page", extra={"path": str(path)})
