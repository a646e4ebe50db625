"""
Formatter base class and rendering settings.
"""

from __future__ import annotations

import abc
import json
from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Any

from ..exceptions import ConfigError
from ..terraform.model import Module

SECTIONS = ("header", "inputs", "outputs", "providers", "requirements", "resources")


@dataclass
class Settings:
    """
    Rendering settings shared by all formatters.

    Formatters ignore the settings that do not apply to them.
    """

    show_color: bool = True
    show_header: bool = True
    show_inputs: bool = True
    show_outputs: bool = True
    show_providers: bool = True
    show_requirements: bool = True
    show_resources: bool = True
    sort_by_name: bool = True
    sort_by_required: bool = False
    escape: bool = True
    indent: int = 2
    show_required: bool = True
    show_default: bool = True

    @classmethod
    def with_hidden(cls, hide: Iterable[str], **kwargs: Any) -> Settings:
        """
        Create settings with the named sections hidden.

        Raises:
            ConfigError: If a section name is unknown
        """
        settings = cls(**kwargs)
        for section in hide:
            if section not in SECTIONS:
                raise ConfigError(
                    f"unknown section '{section}'", valid=",".join(SECTIONS)
                )
            setattr(settings, f"show_{section}", False)
        return settings

    def without_color(self) -> Settings:
        return replace(self, show_color=False)

    def shows(self, section: str) -> bool:
        return bool(getattr(self, f"show_{section}"))


def value_repr(value: Any) -> str:
    """Render a default value the way Terraform would write it."""
    if value is None:
        return "null"
    return json.dumps(value, ensure_ascii=False)


class Formatter(abc.ABC):
    """
    Renders a Module to text.

    Subclasses set ``name`` and implement render(). The settings given to the
    constructor apply when render() is called without settings.
    """

    name: str = ""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings()

    @abc.abstractmethod
    def render(self, module: Module, settings: Settings | None = None) -> str:
        """Render the module; the result has no trailing newline."""

    def visible_data(self, module: Module, settings: Settings) -> dict[str, Any]:
        """Module as plain data with hidden sections emptied."""
        data = module.to_dict()
        for section in SECTIONS:
            if not settings.shows(section):
                data[section] = "" if section == "header" else []
        return data
