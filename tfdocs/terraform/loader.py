"""
Load a Terraform module directory into a Module.

Every ``*.tf`` file in the directory is parsed with python-hcl2. The
parser's representation differs between releases (interpolation wrappers,
quoted strings, metadata keys), so values are normalised before use.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import hcl2

from ..exceptions import ModuleLoadError
from .header import read_header
from .model import Input, Module, Output, Provider, Requirement, Resource

DEFAULT_HEADER_FILE = "main.tf"


@dataclass
class SortBy:
    """Sort criteria for module items."""

    name: bool = True
    required: bool = False


@dataclass
class Options:
    """
    What to load and how.

    Attributes:
        path: Module directory
        show_header: Read the header comment
        header_from: File the header is read from, relative to path
        sort_by: Sort criteria; with both flags off file order is kept
    """

    path: str | Path = "."
    show_header: bool = True
    header_from: str = DEFAULT_HEADER_FILE
    sort_by: SortBy = field(default_factory=SortBy)


def normalize(value: Any) -> Any:
    """
    Strip parser artefacts from a parsed HCL value.

    ``"${string}"`` becomes ``"string"``, surrounding double quotes are
    removed, and ``__start_line__``-style metadata keys are dropped.
    """
    if isinstance(value, str):
        s = value.strip()
        if s.startswith("${") and s.endswith("}"):
            s = s[2:-1].strip()
        if len(s) >= 2 and s[0] == '"' and s[-1] == '"':
            s = s[1:-1]
        return s
    if isinstance(value, list):
        return [normalize(v) for v in value]
    if isinstance(value, dict):
        return {
            normalize(k): normalize(v)
            for k, v in value.items()
            if not str(k).startswith("__")
        }
    return value


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return bool(value)


def _as_default(value: Any) -> Any:
    """Map the literal null that some parser versions keep as text."""
    if value == "null":
        return None
    return value


def _blocks(parsed: dict[str, Any], key: str) -> list[dict[str, Any]]:
    """Return the blocks of one type as a flat list of dicts."""
    raw = parsed.get(key) or []
    if isinstance(raw, dict):
        raw = [raw]
    return [b for b in raw if isinstance(b, dict)]


def _labelled(parsed: dict[str, Any], key: str) -> list[tuple[str, dict[str, Any]]]:
    """Return (label, body) pairs for single-label blocks such as variable."""
    pairs = []
    for block in _blocks(parsed, key):
        for label, body in block.items():
            pairs.append((label, body if isinstance(body, dict) else {}))
    return pairs


def _parse_file(path: Path) -> dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            parsed = hcl2.load(f)
    except OSError as e:
        raise ModuleLoadError("cannot read terraform file", path=str(path)) from e
    except Exception as e:
        raise ModuleLoadError(
            f"cannot parse terraform file: {e}", path=str(path)
        ) from e
    return normalize(parsed)


class _Collector:
    """Accumulates module items across files in file order."""

    def __init__(self) -> None:
        self.inputs: list[Input] = []
        self.outputs: list[Output] = []
        self.provider_blocks: list[Provider] = []
        self.required_version = ""
        self.required_providers: dict[str, str] = {}
        self.resources: list[Resource] = []

    def add(self, parsed: dict[str, Any]) -> None:
        for name, body in _labelled(parsed, "variable"):
            has_default = "default" in body
            self.inputs.append(
                Input(
                    name=name,
                    type=str(body.get("type") or "any"),
                    description=str(body.get("description") or ""),
                    default=_as_default(body.get("default")) if has_default else None,
                    required=not has_default,
                    sensitive=_as_bool(body.get("sensitive", False)),
                )
            )

        for name, body in _labelled(parsed, "output"):
            self.outputs.append(
                Output(
                    name=name,
                    description=str(body.get("description") or ""),
                    sensitive=_as_bool(body.get("sensitive", False)),
                )
            )

        for name, body in _labelled(parsed, "provider"):
            self.provider_blocks.append(
                Provider(name=name, alias=str(body.get("alias") or ""))
            )

        for block in _blocks(parsed, "terraform"):
            self._add_terraform_block(block)

        for mode, key in (("managed", "resource"), ("data", "data")):
            for rtype, named in _labelled(parsed, key):
                for rname in named:
                    self.resources.append(Resource(type=rtype, name=rname, mode=mode))

    def _add_terraform_block(self, block: dict[str, Any]) -> None:
        if block.get("required_version"):
            self.required_version = str(block["required_version"])
        for entry in _blocks(block, "required_providers"):
            for name, constraint in entry.items():
                if isinstance(constraint, dict):
                    self.required_providers[name] = str(constraint.get("version") or "")
                else:
                    self.required_providers[name] = str(constraint or "")

    def providers(self) -> list[Provider]:
        """Providers from provider blocks and from resource type prefixes."""
        seen: dict[str, Provider] = {}
        for provider in self.provider_blocks:
            seen.setdefault(provider.full_name, provider)
        for resource in self.resources:
            seen.setdefault(resource.provider, Provider(name=resource.provider))
        for provider in seen.values():
            provider.version = self.required_providers.get(provider.name, "")
        return list(seen.values())

    def requirements(self) -> list[Requirement]:
        reqs = []
        if self.required_version:
            reqs.append(Requirement(name="terraform", version=self.required_version))
        for name, version in self.required_providers.items():
            reqs.append(Requirement(name=name, version=version))
        return reqs


def _sort(module: Module, sort_by: SortBy) -> None:
    if not (sort_by.name or sort_by.required):
        return
    if sort_by.required:
        module.inputs.sort(key=lambda i: (not i.required, i.name))
    else:
        module.inputs.sort(key=lambda i: i.name)
    module.outputs.sort(key=lambda o: o.name)
    module.providers.sort(key=lambda p: p.full_name)
    module.requirements.sort(key=lambda r: (r.name != "terraform", r.name))
    module.resources.sort(key=lambda r: (r.mode, r.address))


def load_module(options: Options) -> Module:
    """
    Load the module at ``options.path``.

    Raises:
        ModuleLoadError: If the directory is missing, holds no ``.tf`` files,
            a file cannot be parsed, or an explicitly requested header file
            does not exist
    """
    path = Path(options.path)
    if not path.is_dir():
        raise ModuleLoadError("module directory not found", path=str(path))

    files = sorted(path.glob("*.tf"))
    if not files:
        raise ModuleLoadError("no terraform files in module directory", path=str(path))

    collector = _Collector()
    for file in files:
        collector.add(_parse_file(file))

    header = ""
    if options.show_header:
        header_path = path / options.header_from
        if header_path.is_file():
            try:
                header = read_header(header_path)
            except (OSError, UnicodeDecodeError) as e:
                raise ModuleLoadError(
                    "cannot read header file", path=str(header_path)
                ) from e
        elif options.header_from != DEFAULT_HEADER_FILE:
            raise ModuleLoadError("header file not found", path=str(header_path))

    module = Module(
        header=header,
        inputs=collector.inputs,
        outputs=collector.outputs,
        providers=collector.providers(),
        requirements=collector.requirements(),
        resources=collector.resources,
    )
    _sort(module, options.sort_by)
    return module
