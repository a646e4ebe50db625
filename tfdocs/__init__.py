"""
tfdocs: generate documentation from Terraform modules.

The ``tfdocs`` command renders a module through one of its formatters;
``tfdocs-docs`` writes the reference pages of those formatter commands.
"""

from importlib.metadata import PackageNotFoundError, version

from .exceptions import (
    ConfigError,
    DocsError,
    DuplicatePageError,
    FormatterError,
    ModuleLoadError,
    PageWriteError,
    TfDocsError,
    ToolError,
    UnknownFormatterError,
)

# Version is read from package metadata (pyproject.toml)
try:
    __version__ = version("tfdocs")
except PackageNotFoundError:
    # Package not installed, use fallback (development mode)
    __version__ = "0.1.0-dev"

__all__ = [
    "__version__",
    "ConfigError",
    "DocsError",
    "DuplicatePageError",
    "FormatterError",
    "ModuleLoadError",
    "PageWriteError",
    "TfDocsError",
    "ToolError",
    "UnknownFormatterError",
]
