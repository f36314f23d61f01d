"""
CLI module for multilookup.

Provides the command-line interface using Click.
"""

from multilookup.cli.main import cli, main

__all__ = ["main", "cli"]
