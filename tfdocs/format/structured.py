"""Machine-readable formatters: JSON, YAML and XML."""

from __future__ import annotations

import json
import xml.etree.ElementTree as ET
from typing import Any

import yaml

from ..terraform.model import Module
from .base import Formatter, Settings

_ITEM_TAGS = {
    "inputs": "input",
    "outputs": "output",
    "providers": "provider",
    "requirements": "requirement",
    "resources": "resource",
}


class JsonFormatter(Formatter):
    """Module as an indented JSON document."""

    name = "json"

    def render(self, module: Module, settings: Settings | None = None) -> str:
        settings = settings or self.settings
        return json.dumps(
            self.visible_data(module, settings), indent=2, ensure_ascii=False
        )


class YamlFormatter(Formatter):
    """Module as a YAML document, keys in model order."""

    name = "yaml"

    def render(self, module: Module, settings: Settings | None = None) -> str:
        settings = settings or self.settings
        text = yaml.safe_dump(
            self.visible_data(module, settings),
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
        )
        return text.rstrip("\n")


def _to_element(tag: str, value: Any) -> ET.Element:
    elem = ET.Element(tag)
    if isinstance(value, dict):
        for key, child in value.items():
            if key == "default":
                # arbitrary values; keys may not be valid tag names
                sub = ET.SubElement(elem, key)
                if child is not None:
                    sub.text = json.dumps(child, ensure_ascii=False)
            else:
                elem.append(_to_element(key, child))
    elif isinstance(value, list):
        item_tag = _ITEM_TAGS.get(tag, "item")
        for child in value:
            elem.append(_to_element(item_tag, child))
    elif isinstance(value, bool):
        elem.text = "true" if value else "false"
    elif value is not None:
        elem.text = str(value)
    return elem


class XmlFormatter(Formatter):
    """Module as an XML document rooted at ``<module>``."""

    name = "xml"

    def render(self, module: Module, settings: Settings | None = None) -> str:
        settings = settings or self.settings
        root = _to_element("module", self.visible_data(module, settings))
        ET.indent(root, space="  ")
        return ET.tostring(root, encoding="unicode")
