"""
Output formatters for Terraform modules.

Example:
    from tfdocs.format import Settings, default_registry

    formatter = default_registry().resolve("markdown table", Settings(indent=3))
    print(formatter.render(module))
"""

from .base import SECTIONS, Formatter, Settings, value_repr
from .markdown import MarkdownDocumentFormatter, MarkdownTableFormatter
from .pretty import PrettyFormatter
from .registry import FormatterRegistry, default_registry
from .structured import JsonFormatter, XmlFormatter, YamlFormatter
from .tfvars import TfvarsHclFormatter, TfvarsJsonFormatter, hcl_value
from .toml import TomlFormatter, toml_value

__all__ = [
    "SECTIONS",
    "Formatter",
    "FormatterRegistry",
    "JsonFormatter",
    "MarkdownDocumentFormatter",
    "MarkdownTableFormatter",
    "PrettyFormatter",
    "Settings",
    "TfvarsHclFormatter",
    "TfvarsJsonFormatter",
    "TomlFormatter",
    "XmlFormatter",
    "YamlFormatter",
    "default_registry",
    "hcl_value",
    "toml_value",
    "value_repr",
]
