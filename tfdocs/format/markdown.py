"""
Markdown formatters.

``markdown table`` renders each section as a table; ``markdown document``
renders one heading per item. Both honour ``indent`` (heading level of the
sections) and ``escape`` (escape pipes in table cells).
"""

from __future__ import annotations

import abc

from ..terraform.model import Input, Module
from .base import Formatter, Settings, value_repr


def _cell(text: str, escape: bool) -> str:
    """Make text safe for a single table cell."""
    text = text.strip().replace("\r\n", "\n").replace("\n", "<br/>")
    if escape:
        text = text.replace("|", "\\|")
    return text


def _code(text: str) -> str:
    return f"`{text}`" if "`" not in text else f"``{text}``"


class _MarkdownFormatter(Formatter):
    """Shared section layout."""

    def render(self, module: Module, settings: Settings | None = None) -> str:
        settings = settings or self.settings
        h = "#" * max(1, settings.indent)

        parts: list[str] = []
        if settings.show_header and module.header:
            parts.append(module.header)
        if settings.show_requirements:
            parts.append(self.requirements(module, settings, h))
        if settings.show_providers:
            parts.append(self.providers(module, settings, h))
        if settings.show_resources:
            parts.append(self.resources(module, settings, h))
        if settings.show_inputs:
            parts.append(self.inputs(module, settings, h))
        if settings.show_outputs:
            parts.append(self.outputs(module, settings, h))
        return "\n\n".join(p for p in parts if p)

    @abc.abstractmethod
    def requirements(self, module: Module, settings: Settings, h: str) -> str:
        """Render one section."""

    @abc.abstractmethod
    def providers(self, module: Module, settings: Settings, h: str) -> str:
        """Render one section."""

    @abc.abstractmethod
    def resources(self, module: Module, settings: Settings, h: str) -> str:
        """Render one section."""

    @abc.abstractmethod
    def inputs(self, module: Module, settings: Settings, h: str) -> str:
        """Render one section."""

    @abc.abstractmethod
    def outputs(self, module: Module, settings: Settings, h: str) -> str:
        """Render one section."""


class MarkdownTableFormatter(_MarkdownFormatter):
    """Sections as markdown tables."""

    name = "markdown table"

    @staticmethod
    def _table(headers: list[str], rows: list[list[str]], align: list[str]) -> str:
        lines = ["| " + " | ".join(headers) + " |"]
        lines.append("|" + "|".join(align) + "|")
        lines.extend("| " + " | ".join(row) + " |" for row in rows)
        return "\n".join(lines)

    def requirements(self, module: Module, settings: Settings, h: str) -> str:
        if not module.requirements:
            return f"{h} Requirements\n\nNo requirements."
        rows = [
            [_cell(r.name, settings.escape), _cell(r.version or "n/a", settings.escape)]
            for r in module.requirements
        ]
        table = self._table(["Name", "Version"], rows, ["------", "---------"])
        return f"{h} Requirements\n\n{table}"

    def providers(self, module: Module, settings: Settings, h: str) -> str:
        if not module.providers:
            return f"{h} Providers\n\nNo providers."
        rows = [
            [
                _cell(p.full_name, settings.escape),
                _cell(p.version or "n/a", settings.escape),
            ]
            for p in module.providers
        ]
        table = self._table(["Name", "Version"], rows, ["------", "---------"])
        return f"{h} Providers\n\n{table}"

    def resources(self, module: Module, settings: Settings, h: str) -> str:
        if not module.resources:
            return f"{h} Resources\n\nNo resources."
        rows = [
            [
                _cell(r.address, settings.escape),
                "resource" if r.mode == "managed" else "data source",
            ]
            for r in module.resources
        ]
        table = self._table(["Name", "Type"], rows, ["------", "------"])
        return f"{h} Resources\n\n{table}"

    def inputs(self, module: Module, settings: Settings, h: str) -> str:
        if not module.inputs:
            return f"{h} Inputs\n\nNo inputs."

        headers = ["Name", "Description", "Type"]
        align = ["------", "-------------", "------"]
        if settings.show_default:
            headers.append("Default")
            align.append("---------")
        if settings.show_required:
            headers.append("Required")
            align.append(":--------:")

        rows = []
        for i in module.inputs:
            row = [
                _cell(i.name, settings.escape),
                _cell(i.description or "n/a", settings.escape),
                _cell(_code(i.type), settings.escape),
            ]
            if settings.show_default:
                default = "n/a" if i.required else _code(value_repr(i.default))
                row.append(_cell(default, settings.escape))
            if settings.show_required:
                row.append("yes" if i.required else "no")
            rows.append(row)
        return f"{h} Inputs\n\n{self._table(headers, rows, align)}"

    def outputs(self, module: Module, settings: Settings, h: str) -> str:
        if not module.outputs:
            return f"{h} Outputs\n\nNo outputs."
        rows = [
            [
                _cell(o.name, settings.escape),
                _cell(o.description or "n/a", settings.escape),
            ]
            for o in module.outputs
        ]
        table = self._table(["Name", "Description"], rows, ["------", "-------------"])
        return f"{h} Outputs\n\n{table}"


class MarkdownDocumentFormatter(_MarkdownFormatter):
    """Sections as prose, one heading per input and output."""

    name = "markdown document"

    @staticmethod
    def _bullets(intro: str, items: list[str]) -> str:
        return intro + "\n\n" + "\n\n".join(f"- {item}" for item in items)

    @staticmethod
    def _versioned(name: str, version: str) -> str:
        return f"{name} ({version})" if version else name

    def requirements(self, module: Module, settings: Settings, h: str) -> str:
        if not module.requirements:
            return f"{h} Requirements\n\nNo requirements."
        items = [self._versioned(r.name, r.version) for r in module.requirements]
        intro = "The following requirements are needed by this module:"
        body = self._bullets(intro, items)
        return f"{h} Requirements\n\n{body}"

    def providers(self, module: Module, settings: Settings, h: str) -> str:
        if not module.providers:
            return f"{h} Providers\n\nNo providers."
        items = [self._versioned(p.full_name, p.version) for p in module.providers]
        body = self._bullets("The following providers are used by this module:", items)
        return f"{h} Providers\n\n{body}"

    def resources(self, module: Module, settings: Settings, h: str) -> str:
        if not module.resources:
            return f"{h} Resources\n\nNo resources."
        items = [
            f"{r.address} ({'resource' if r.mode == 'managed' else 'data source'})"
            for r in module.resources
        ]
        body = self._bullets("The following resources are used by this module:", items)
        return f"{h} Resources\n\n{body}"

    def _input(self, i: Input, settings: Settings, h: str) -> str:
        lines = [f"{h}# {i.name}", f"Description: {i.description or 'n/a'}"]
        lines.append(f"Type: {_code(i.type)}")
        if settings.show_default and not i.required:
            lines.append(f"Default: {_code(value_repr(i.default))}")
        return "\n\n".join(lines)

    def inputs(self, module: Module, settings: Settings, h: str) -> str:
        if not module.inputs:
            return f"{h} Inputs\n\nNo inputs."

        parts = []
        if module.required_inputs:
            parts.append(
                f"{h} Required Inputs\n\nThe following input variables are required:"
            )
            parts.extend(self._input(i, settings, h) for i in module.required_inputs)
        if module.optional_inputs:
            parts.append(
                f"{h} Optional Inputs\n\n"
                "The following input variables are optional (have default values):"
            )
            parts.extend(self._input(i, settings, h) for i in module.optional_inputs)
        return "\n\n".join(parts)

    def outputs(self, module: Module, settings: Settings, h: str) -> str:
        if not module.outputs:
            return f"{h} Outputs\n\nNo outputs."
        parts = [f"{h} Outputs\n\nThe following outputs are exported:"]
        for o in module.outputs:
            parts.append(f"{h}# {o.name}\n\nDescription: {o.description or 'n/a'}")
        return "\n\n".join(parts)
