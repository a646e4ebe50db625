"""TOML formatter."""

from __future__ import annotations

import json
import re
from typing import Any

from ..terraform.model import Module
from .base import SECTIONS, Formatter, Settings

_BARE_KEY = re.compile(r"^[A-Za-z0-9_-]+$")


def _key(key: Any) -> str:
    key = str(key)
    return key if _BARE_KEY.match(key) else _string(key)


def _string(value: str) -> str:
    # json.dumps leaves DEL as is; TOML basic strings must escape it
    return json.dumps(value, ensure_ascii=False).replace("\x7f", "\\u007F")


def toml_value(value: Any) -> str:
    """
    Render a Python value as a TOML value.

    TOML has no null: None items are left out of arrays and inline tables.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(toml_value(v) for v in value if v is not None) + "]"
    if isinstance(value, dict):
        items = [
            f"{_key(k)} = {toml_value(v)}" for k, v in value.items() if v is not None
        ]
        return "{ " + ", ".join(items) + " }" if items else "{}"
    return _string(str(value))


class TomlFormatter(Formatter):
    """
    Module as a TOML document.

    The header is a top level string, every other section an array of
    tables (``[[inputs]]``). Empty sections are written as ``inputs = []``
    before the first table; unset values are omitted.
    """

    name = "toml"

    def render(self, module: Module, settings: Settings | None = None) -> str:
        settings = settings or self.settings
        data = self.visible_data(module, settings)

        lines = [f"header = {_string(data['header'])}"]
        tables: list[str] = []
        for section in SECTIONS:
            if section == "header":
                continue
            if not data[section]:
                lines.append(f"{section} = []")
                continue
            for item in data[section]:
                tables.extend(["", f"[[{section}]]"])
                tables.extend(
                    f"{_key(k)} = {toml_value(v)}"
                    for k, v in item.items()
                    if v is not None
                )
        return "\n".join(lines + tables)
