"""
In-memory model of a Terraform module.

Formatters only ever see these types; they never touch HCL.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Input:
    """A module variable."""

    name: str
    type: str = "any"
    description: str = ""
    default: Any = None
    required: bool = True
    sensitive: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "description": self.description or None,
            "default": self.default,
            "required": self.required,
            "sensitive": self.sensitive,
        }


@dataclass
class Output:
    """A module output."""

    name: str
    description: str = ""
    sensitive: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description or None,
            "sensitive": self.sensitive,
        }


@dataclass
class Provider:
    """A provider used by the module, with its version constraint if any."""

    name: str
    alias: str = ""
    version: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.name}.{self.alias}" if self.alias else self.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "alias": self.alias or None,
            "version": self.version or None,
        }


@dataclass
class Requirement:
    """A version requirement: terraform itself or a required provider."""

    name: str
    version: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "version": self.version or None}


@dataclass
class Resource:
    """A managed resource or a data source."""

    type: str
    name: str
    mode: str = "managed"

    @property
    def provider(self) -> str:
        return self.type.split("_", 1)[0]

    @property
    def address(self) -> str:
        prefix = "data." if self.mode == "data" else ""
        return f"{prefix}{self.type}.{self.name}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "name": self.name,
            "provider": self.provider,
            "mode": self.mode,
        }


@dataclass
class Module:
    """A loaded Terraform module."""

    header: str = ""
    inputs: list[Input] = field(default_factory=list)
    outputs: list[Output] = field(default_factory=list)
    providers: list[Provider] = field(default_factory=list)
    requirements: list[Requirement] = field(default_factory=list)
    resources: list[Resource] = field(default_factory=list)

    @property
    def required_inputs(self) -> list[Input]:
        return [i for i in self.inputs if i.required]

    @property
    def optional_inputs(self) -> list[Input]:
        return [i for i in self.inputs if not i.required]

    def to_dict(self) -> dict[str, Any]:
        """Plain data for the serialising formatters, in a fixed key order."""
        return {
            "header": self.header,
            "inputs": [i.to_dict() for i in self.inputs],
            "outputs": [o.to_dict() for o in self.outputs],
            "providers": [p.to_dict() for p in self.providers],
            "requirements": [r.to_dict() for r in self.requirements],
            "resources": [r.to_dict() for r in self.resources],
        }
