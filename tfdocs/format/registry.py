"""
Formatter registration and lookup.

Formatters are registered by class under their user facing name
(``"markdown table"``); resolve() builds a fresh instance per call so
callers can pass their own settings.
"""

from __future__ import annotations

from ..exceptions import FormatterError, UnknownFormatterError
from .base import Formatter, Settings
from .markdown import MarkdownDocumentFormatter, MarkdownTableFormatter
from .pretty import PrettyFormatter
from .structured import JsonFormatter, XmlFormatter, YamlFormatter
from .tfvars import TfvarsHclFormatter, TfvarsJsonFormatter
from .toml import TomlFormatter


def _normalize(name: str) -> str:
    return " ".join(name.split()).lower()


class FormatterRegistry:
    """Formatter classes by name, with aliases for group names."""

    def __init__(self) -> None:
        self._formatters: dict[str, type[Formatter]] = {}
        self._aliases: dict[str, str] = {}

    def register(
        self, name: str, cls: type[Formatter], aliases: tuple[str, ...] = ()
    ) -> None:
        """
        Register a formatter class.

        Args:
            name: Formatter name, e.g. "markdown table"
            cls: Formatter subclass
            aliases: Extra names resolving to this formatter

        Raises:
            FormatterError: If the name or an alias is already registered
        """
        key = _normalize(name)
        if not key:
            raise FormatterError("formatter must have a name", cls=cls.__name__)
        if self.is_registered(key):
            raise FormatterError(f"formatter '{key}' already registered")
        self._formatters[key] = cls

        for alias in aliases:
            alias_key = _normalize(alias)
            if self.is_registered(alias_key):
                raise FormatterError(
                    f"alias '{alias_key}' already registered", formatter=key
                )
            self._aliases[alias_key] = key

    def names(self) -> list[str]:
        """Registered formatter names in registration order."""
        return list(self._formatters)

    def is_registered(self, name: str) -> bool:
        key = _normalize(name)
        return key in self._formatters or key in self._aliases

    def resolve(self, name: str, settings: Settings | None = None) -> Formatter:
        """
        Create the formatter registered under name or alias.

        Raises:
            UnknownFormatterError: If nothing is registered under the name
        """
        key = _normalize(name)
        key = self._aliases.get(key, key)
        cls = self._formatters.get(key)
        if cls is None:
            raise UnknownFormatterError(name, self.names())
        return cls(settings)


def default_registry() -> FormatterRegistry:
    """Registry holding every built-in formatter."""
    registry = FormatterRegistry()
    registry.register(JsonFormatter.name, JsonFormatter)
    registry.register(
        MarkdownTableFormatter.name, MarkdownTableFormatter, aliases=("markdown",)
    )
    registry.register(MarkdownDocumentFormatter.name, MarkdownDocumentFormatter)
    registry.register(PrettyFormatter.name, PrettyFormatter)
    registry.register(TfvarsHclFormatter.name, TfvarsHclFormatter, aliases=("tfvars",))
    registry.register(TfvarsJsonFormatter.name, TfvarsJsonFormatter)
    registry.register(TomlFormatter.name, TomlFormatter)
    registry.register(XmlFormatter.name, XmlFormatter)
    registry.register(YamlFormatter.name, YamlFormatter)
    return registry
