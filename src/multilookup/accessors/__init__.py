"""
Accessor resolution and key/value converters.

Resolves attribute names to accessors on a type and adapts them, or
dotted path expressions, into converters usable as lookup keys and
values.
"""

from multilookup.accessors.converters import (
    AttributeConverter,
    Converter,
    ExpressionConverter,
    identity,
    to_converter,
)
from multilookup.accessors.resolver import (
    Accessor,
    AccessorKind,
    AccessorResolver,
    capability_set,
    find_accessor,
    find_accessors,
    require_accessor,
)

__all__ = [
    "Accessor",
    "AccessorKind",
    "AccessorResolver",
    "AttributeConverter",
    "Converter",
    "ExpressionConverter",
    "capability_set",
    "find_accessor",
    "find_accessors",
    "identity",
    "require_accessor",
    "to_converter",
]
