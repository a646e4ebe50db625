"""
Terraform module loading.

load_module() turns a module directory into a Module that formatters
render; nothing outside this package reads HCL.
"""

from .header import read_header
from .loader import DEFAULT_HEADER_FILE, Options, SortBy, load_module, normalize
from .model import Input, Module, Output, Provider, Requirement, Resource

__all__ = [
    "DEFAULT_HEADER_FILE",
    "Input",
    "Module",
    "Options",
    "Output",
    "Provider",
    "Requirement",
    "Resource",
    "SortBy",
    "load_module",
    "normalize",
    "read_header",
]
