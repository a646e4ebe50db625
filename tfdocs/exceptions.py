"""
Unified exception hierarchy for tfdocs.

Every error raised by the package derives from TfDocsError, so the entry
points can turn any of them into a logged message and a non-zero exit code
with a single except clause.
"""

from typing import Any


class TfDocsError(Exception):
    """
    Base exception for all tfdocs errors.

    Example:
        try:
            walker.walk(root, "", "FORMATS_GUIDE")
        except TfDocsError as e:
            lg.error("docs generation failed", extra={"exception": e})
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context information (stored in self.context)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ConfigError(TfDocsError):
    """
    Configuration-related errors.

    Examples:
        - Config file not readable or not valid YAML
        - Unknown configuration key
        - Invalid value for a known key
    """

    pass


class ModuleLoadError(TfDocsError):
    """
    Raised when a Terraform module directory cannot be loaded.

    Examples:
        - Directory does not exist
        - Directory contains no .tf files
        - HCL syntax error
    """

    pass


class FormatterError(TfDocsError):
    """Raised when a formatter cannot render a module."""

    pass


class UnknownFormatterError(FormatterError):
    """Raised when the registry has no formatter under the requested name."""

    def __init__(self, name: str, available: list[str] | None = None) -> None:
        self.name = name
        self.available = available or []
        super().__init__(
            f"unknown formatter '{name}'", available=",".join(self.available)
        )


class DocsError(TfDocsError):
    """Base class for documentation generation errors."""

    pass


class PageWriteError(DocsError):
    """Raised when a page file or its directory cannot be written."""

    pass


class DuplicatePageError(DocsError):
    """Raised when two commands derive the same output filename."""

    pass


class ToolError(TfDocsError):
    """
    Command tree errors.

    Raised when there are issues with tool registration or configuration.
    """

    pass
