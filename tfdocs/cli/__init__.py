"""
Host command line: one subcommand per output formatter.
"""

from .cli import ROOT_NAME, build_root, main

__all__ = ["ROOT_NAME", "build_root", "main"]
