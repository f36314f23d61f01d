"""
Core lookup types and builders.

- Lookup, MapLookup, EmptyLookup: immutable, depth-tagged indexes
- LookupBuilder, build: recursive multi-level builder
- from_source: fluent builder
- index_by: build by attribute names resolved through accessors
"""

from multilookup.core.builder import LookupBuilder, build
from multilookup.core.chain import build_chain
from multilookup.core.factory import element_type_of, index_by
from multilookup.core.fluent import FluentBuilder, from_source
from multilookup.core.lookup import EmptyLookup, Lookup, MapLookup, create
from multilookup.core.types import DuplicatePolicy

__all__ = [
    "DuplicatePolicy",
    "EmptyLookup",
    "FluentBuilder",
    "Lookup",
    "LookupBuilder",
    "MapLookup",
    "build",
    "build_chain",
    "create",
    "element_type_of",
    "from_source",
    "index_by",
]
