"""
multilookup - read-only multi-level indexes over in-memory collections.

Index a collection by one or more keys computed per element, then query
it with has/find/get/hunt:

    >>> import multilookup
    >>> by_state = multilookup.build(codes, "state", "county", default=UNKNOWN)
    >>> by_state.get("MS").get("Greene").get_code()
    28041
    >>> by_state.find("TX").find("anything") is UNKNOWN
    True
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("multilookup")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)

from multilookup.accessors import (  # noqa: E402
    AttributeConverter,
    ExpressionConverter,
    find_accessor,
    find_accessors,
)
from multilookup.config import BuildConfig, Settings  # noqa: E402
from multilookup.core import (  # noqa: E402
    DuplicatePolicy,
    EmptyLookup,
    Lookup,
    LookupBuilder,
    MapLookup,
    build,
    create,
    from_source,
    index_by,
)
from multilookup.errors import (  # noqa: E402
    DuplicateKeyError,
    KeyNotFoundError,
    LookupArgumentError,
    LookupBuildError,
    LookupException,
)

__all__ = [
    "__version__",
    "__version_info__",
    "AttributeConverter",
    "BuildConfig",
    "DuplicateKeyError",
    "DuplicatePolicy",
    "EmptyLookup",
    "ExpressionConverter",
    "KeyNotFoundError",
    "Lookup",
    "LookupArgumentError",
    "LookupBuildError",
    "LookupBuilder",
    "LookupException",
    "MapLookup",
    "Settings",
    "build",
    "create",
    "find_accessor",
    "find_accessors",
    "from_source",
    "index_by",
]
