from .formatter_tool import (
    FormatterTool,
    JsonTool,
    MarkdownDocumentTool,
    MarkdownTableTool,
    PrettyTool,
    TfvarsHclTool,
    TfvarsJsonTool,
    TomlTool,
    XmlTool,
    YamlTool,
    module_options,
    render_settings,
)
from .group_tools import MarkdownTool, TfvarsTool
from .version_tool import VersionTool

__all__ = [
    "FormatterTool",
    "JsonTool",
    "MarkdownDocumentTool",
    "MarkdownTableTool",
    "MarkdownTool",
    "PrettyTool",
    "TfvarsHclTool",
    "TfvarsJsonTool",
    "TfvarsTool",
    "TomlTool",
    "VersionTool",
    "XmlTool",
    "YamlTool",
    "module_options",
    "render_settings",
]
