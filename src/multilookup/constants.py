"""
Shared constants for multilookup.

This module provides a single source of truth for limits and default
values that are used across multiple modules.
"""

MAX_LEVELS = 10
"""Maximum number of key levels a single lookup may be built with."""

GET_PREFIXES = ("get_", "get")
"""Accessor prefixes accepted for any return type (snake_case first)."""

IS_PREFIXES = ("is_", "is")
"""Accessor prefixes accepted only for accessors declared to return bool."""

EXPRESSION_SEPARATOR = "."
"""Separator between path segments in key/value expressions."""
