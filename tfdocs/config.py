"""
Configuration for the documentation generator.

Values come from three layers, later ones winning: the dataclass defaults,
the ``docs`` section of a YAML file, and ``TFDOCS_DOCS_<KEY>`` environment
variables.

Example etc/docs.yaml::

    docs:
      root_dir: .
      example_path: ./examples/
      flag_overrides:
        pretty: --no-color
      on_collision: error
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigError

DEFAULT_CONFIG_FILE = Path("etc") / "docs.yaml"
ENV_PREFIX = "TFDOCS_DOCS_"
COLLISION_POLICIES = ("error", "overwrite")

# Maximum config file size (1MB)
MAX_CONFIG_SIZE_BYTES = 1024 * 1024


def _default_overrides() -> dict[str, str]:
    return {"pretty": "--no-color"}


@dataclass
class DocsConfig:
    """
    Where and how reference pages are generated.

    Attributes:
        root_dir: Directory the docs tree is created in
        base_dir: Docs directory below root_dir
        format_dir: Directory of per-formatter pages below base_dir
        root_basename: File name (without .md) of the root command's page
        root_prefix: Prefix stripped from derived page names; "" derives
            it from the root command name ("tfdocs" -> "tfdocs-")
        example_path: Module rendered into each page's example
        header_from: Header file of the example module
        flag_overrides: Extra flag appended to the example command line,
            keyed by formatter name
        on_collision: "error" or "overwrite" when two pages share a file
    """

    root_dir: str = "."
    base_dir: str = "docs"
    format_dir: str = "formats"
    root_basename: str = "FORMATS_GUIDE"
    root_prefix: str = ""
    example_path: str = "./examples/"
    header_from: str = "main.tf"
    flag_overrides: dict[str, str] = field(default_factory=_default_overrides)
    on_collision: str = "error"

    def __post_init__(self) -> None:
        if self.on_collision not in COLLISION_POLICIES:
            raise ConfigError(
                f"invalid on_collision '{self.on_collision}'",
                valid=",".join(COLLISION_POLICIES),
            )
        if not isinstance(self.flag_overrides, dict):
            raise ConfigError("flag_overrides must be a mapping")

    def prefix_for(self, root_name: str) -> str:
        """The configured prefix, or "<root_name>-" when none is set."""
        return self.root_prefix or f"{root_name.replace(' ', '-')}-"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DocsConfig:
        """
        Create a config from a mapping of field values.

        Raises:
            ConfigError: If a key is not a config field or a value is invalid
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(
                f"unknown docs config key '{unknown[0]}'",
                valid=",".join(sorted(known)),
            )
        return cls(**data)

    @classmethod
    def from_yaml(
        cls, path: str | Path, enable_env_overrides: bool = True
    ) -> DocsConfig:
        """
        Load the ``docs`` section of a YAML file.

        A file without a ``docs`` section yields the defaults.

        Raises:
            ConfigError: If the file cannot be read or parsed, or holds
                unknown keys
        """
        path = Path(path)
        try:
            if path.stat().st_size > MAX_CONFIG_SIZE_BYTES:
                raise ConfigError("config file too large", path=str(path))
            with open(path, encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
        except OSError as e:
            raise ConfigError("cannot read config file", path=str(path)) from e
        except yaml.YAMLError as e:
            raise ConfigError(f"invalid YAML: {e}", path=str(path)) from e

        if not isinstance(raw, dict):
            raise ConfigError("config file must hold a mapping", path=str(path))
        section = raw.get("docs") or {}
        if not isinstance(section, dict):
            raise ConfigError("'docs' section must be a mapping", path=str(path))

        data = dict(section)
        if enable_env_overrides:
            data.update(_collect_env_overrides())
        return cls.from_dict(data)

    @classmethod
    def load(cls, path: str | Path | None = None) -> DocsConfig:
        """
        Load from path, or from etc/docs.yaml when it exists.

        Without a file the defaults plus environment overrides apply.
        """
        if path is not None:
            return cls.from_yaml(path)
        if DEFAULT_CONFIG_FILE.is_file():
            return cls.from_yaml(DEFAULT_CONFIG_FILE)
        return cls.from_dict(_collect_env_overrides())


def _convert_env_value(key: str, value: str) -> Any:
    """Convert an environment string to the type of the field it sets."""
    if key == "flag_overrides":
        overrides = {}
        for item in value.split(","):
            if not item.strip():
                continue
            name, sep, flag = item.partition("=")
            if not sep:
                raise ConfigError(
                    "flag_overrides entries must look like name=flag", value=item
                )
            overrides[name.strip()] = flag.strip()
        return overrides
    return value


def _collect_env_overrides() -> dict[str, Any]:
    """
    Collect TFDOCS_DOCS_<KEY> variables as field values.

    TFDOCS_DOCS_ROOT_DIR=out sets root_dir; flag_overrides takes a comma
    separated list of name=flag pairs.
    """
    overrides = {}
    for key, value in os.environ.items():
        if key.startswith(ENV_PREFIX):
            name = key[len(ENV_PREFIX) :].lower()
            overrides[name] = _convert_env_value(name, value)
    return overrides
