"""
Pytest configuration and shared fixtures.

This module provides central pytest configuration, custom markers,
and shared fixtures for the tfdocs test suite.
"""

import logging
from collections.abc import Generator
from datetime import date
from io import StringIO
from pathlib import Path

import pytest

from tfdocs.log import LogConfig, Logger, LoggerFactory

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (filesystem, real HCL parser)"
    )
    config.addinivalue_line("markers", "property: Property-based tests (hypothesis)")


def pytest_collection_modifyitems(config, items):
    """Add the 'unit' marker to tests without another category."""
    for item in items:
        if not any(mark.name == "integration" for mark in item.iter_markers()):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(autouse=True)
def reset_logging_state() -> Generator[None, None, None]:
    """
    Drop tfdocs loggers after each test.

    Loggers are cached by name in logging's loggerDict; without this a
    root logger created by one test would leak its stream into the next.
    """
    original_handlers = logging.root.handlers[:]
    original_level = logging.root.level

    yield

    for name in list(logging.root.manager.loggerDict.keys()):
        if name.startswith("/"):
            del logging.root.manager.loggerDict[name]
    logging.root.handlers = original_handlers
    logging.root.setLevel(original_level)


@pytest.fixture
def log_stream() -> StringIO:
    """Stream receiving the output of the ``lg`` fixture."""
    return StringIO()


@pytest.fixture
def lg(log_stream: StringIO) -> Logger:
    """Debug level root logger without colors, writing to log_stream."""
    return LoggerFactory.create_root(
        LogConfig.from_params("debug", colors=False), stream=log_stream
    )


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture
def fixed_clock():
    """Clock returning 7 March 2024."""
    return lambda: date(2024, 3, 7)


@pytest.fixture
def module_dir(tmp_path: Path) -> Path:
    """
    A small Terraform module on disk.

    Returns:
        Path: Module directory with main.tf, variables.tf and outputs.tf
    """
    root = tmp_path / "module"
    root.mkdir()
    (root / "main.tf").write_text(
        "/**\n"
        " * Example module.\n"
        " *\n"
        " * Creates a bucket.\n"
        " */\n"
        "\n"
        "terraform {\n"
        '  required_version = ">= 1.0"\n'
        "  required_providers {\n"
        "    aws = {\n"
        '      source  = "hashicorp/aws"\n'
        '      version = ">= 4.0"\n'
        "    }\n"
        "  }\n"
        "}\n"
        "\n"
        'resource "aws_s3_bucket" "site" {\n'
        "  bucket = var.name\n"
        "}\n"
        "\n"
        'data "aws_region" "current" {}\n'
    )
    (root / "variables.tf").write_text(
        'variable "region" {\n'
        '  description = "Deployment region"\n'
        "  type        = string\n"
        '  default     = "eu-west-1"\n'
        "}\n"
        "\n"
        'variable "name" {\n'
        '  description = "Bucket name"\n'
        "  type        = string\n"
        "}\n"
        "\n"
        'variable "replicas" {\n'
        "  type    = number\n"
        "  default = 2\n"
        "}\n"
    )
    (root / "outputs.tf").write_text(
        'output "bucket" {\n'
        '  description = "Bucket name"\n'
        "  value       = aws_s3_bucket.site.bucket\n"
        "}\n"
    )
    return root
