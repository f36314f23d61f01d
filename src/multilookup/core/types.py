"""
Core value types for multilookup.

These are plain enums and value objects shared by the builder, the
fluent API and the configuration layer.
"""

import enum as _enum


class DuplicatePolicy(str, _enum.Enum):
    """What to do when two elements resolve to the same key tuple."""

    FIRST = "first"
    """Keep the value of the first element seen."""

    LAST = "last"
    """Overwrite with the value of the last element seen."""

    FAIL = "fail"
    """Abort the build with a DuplicateKeyError."""
