"""
Lookup of shared objects through the command tree.

Only the root command owns the parsed args, the logger, the output writer,
the module loader and the formatter registry. Every other command reaches
them with ``trace_attr``, which asks each ancestor in turn.
"""

from typing import Any, Optional

from .constants import MAX_TRACE_DEPTH
from .errors import AttrNotFoundError

_MISSING = object()


class Traceable:
    """A node that can read attributes owned by its ancestors."""

    def __init__(self, parent: Optional["Traceable"] = None):
        self._parent = parent

    @property
    def parent(self) -> Optional["Traceable"]:
        return self._parent

    def set_parent(self, parent: Optional["Traceable"]) -> None:
        if parent is not None and not isinstance(parent, Traceable):
            raise TypeError(f"parent must be Traceable, not {type(parent).__name__}")
        self._parent = parent

    def _own(self, name: str) -> Any:
        # Instance dict and class attributes only; a plain getattr could
        # recurse through properties that themselves call trace_attr
        if name in vars(self):
            return vars(self)[name]
        if any(name in vars(cls) for cls in type(self).__mro__):
            return getattr(self, name)
        return _MISSING

    def trace_attr(self, name: str) -> Any:
        """
        Return ``name`` from this node or the nearest ancestor that has it.

        Raises:
            AttrNotFoundError: no node up to the root has it, or the chain is
                deeper than MAX_TRACE_DEPTH (a parent cycle)
        """
        node: Optional[Traceable] = self
        depth = 0
        while node is not None:
            if depth >= MAX_TRACE_DEPTH:
                raise AttrNotFoundError(
                    f"{name} (maximum trace depth of {MAX_TRACE_DEPTH} exceeded)"
                )
            value = node._own(name)
            if value is not _MISSING:
                return value
            node = node.parent
            depth += 1
        raise AttrNotFoundError(name)
