"""
Formatters producing a ``terraform.tfvars`` skeleton for the module.

Optional inputs carry their default; required inputs get an empty string
so the file is valid and the gaps are easy to spot.
"""

from __future__ import annotations

import json
import re
from typing import Any

from ..terraform.model import Module
from .base import Formatter, Settings

_BARE_KEY = re.compile(r"^[A-Za-z_][A-Za-z0-9_-]*$")


def hcl_value(value: Any) -> str:
    """Render a Python value as an HCL expression."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(hcl_value(v) for v in value) + "]"
    if isinstance(value, dict):
        if not value:
            return "{}"
        items = []
        for key, item in value.items():
            key = str(key)
            if not _BARE_KEY.match(key):
                key = json.dumps(key, ensure_ascii=False)
            items.append(f"{key} = {hcl_value(item)}")
        return "{ " + ", ".join(items) + " }"
    return json.dumps(str(value), ensure_ascii=False)


def _values(module: Module) -> dict[str, Any]:
    return {i.name: "" if i.required else i.default for i in module.inputs}


class TfvarsHclFormatter(Formatter):
    """``name = value`` lines with the equals signs aligned."""

    name = "tfvars hcl"

    def render(self, module: Module, settings: Settings | None = None) -> str:
        values = _values(module)
        if not values:
            return ""
        width = max(len(name) for name in values)
        lines = [f"{name.ljust(width)} = {hcl_value(v)}" for name, v in values.items()]
        return "\n".join(lines)


class TfvarsJsonFormatter(Formatter):
    """A JSON object keyed by input name."""

    name = "tfvars json"

    def render(self, module: Module, settings: Settings | None = None) -> str:
        return json.dumps(_values(module), indent=2, ensure_ascii=False)
