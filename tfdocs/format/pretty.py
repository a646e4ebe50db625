"""Human-readable terminal formatter."""

from __future__ import annotations

from ..log.colors import ColorManager
from ..terraform.model import Module, Resource
from .base import Formatter, Settings, value_repr


class PrettyFormatter(Formatter):
    """
    One block per item, e.g.::

        input.region ("us-east-1")
        AWS region to deploy into

    Item names are colored when ``show_color`` is set; with colors off the
    output is plain text.
    """

    name = "pretty"

    def render(self, module: Module, settings: Settings | None = None) -> str:
        settings = settings or self.settings
        self._color = settings.show_color

        blocks: list[str] = []
        if settings.show_header and module.header:
            blocks.append(module.header)
        if settings.show_requirements and module.requirements:
            blocks.append(
                "\n".join(
                    self._item("requirement", r.name, self._version(r.version))
                    for r in module.requirements
                )
            )
        if settings.show_providers and module.providers:
            blocks.append(
                "\n".join(
                    self._item("provider", p.full_name, self._version(p.version))
                    for p in module.providers
                )
            )
        if settings.show_resources and module.resources:
            blocks.append("\n".join(self._resource(r) for r in module.resources))
        if settings.show_inputs:
            for i in module.inputs:
                if i.required:
                    suffix = self._paint("(required)", ColorManager.RED)
                else:
                    suffix = self._muted(f"({value_repr(i.default)})")
                line = self._item("input", i.name, suffix)
                blocks.append(self._described(line, i.description))
        if settings.show_outputs:
            for o in module.outputs:
                line = self._item("output", o.name)
                blocks.append(self._described(line, o.description))

        return "\n\n".join(blocks)

    def _paint(self, text: str, color: str, bold: bool = False) -> str:
        if not self._color:
            return text
        return ColorManager.paint(text, color, bold=bold)

    def _muted(self, text: str) -> str:
        return self._paint(text, ColorManager.create_gray_level(10))

    def _item(self, prefix: str, name: str, suffix: str = "") -> str:
        line = self._paint(f"{prefix}.{name}", ColorManager.CYAN, bold=True)
        return f"{line} {suffix}" if suffix else line

    def _version(self, version: str) -> str:
        return self._muted(f"({version})") if version else ""

    def _resource(self, r: Resource) -> str:
        if r.mode == "managed":
            kind = self._muted("(resource)")
            return self._item("resource", f"{r.type}.{r.name}", kind)
        return self._item("data", f"{r.type}.{r.name}", self._muted("(data source)"))

    @staticmethod
    def _described(line: str, description: str) -> str:
        return f"{line}\n{description}" if description else line
