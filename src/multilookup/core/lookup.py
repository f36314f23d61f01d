"""
Immutable lookup types.

A Lookup is a read-only index from key to value. Multi-level lookups are
lookups whose values are themselves lookups; every lookup carries its
``depth`` so callers (and the builder) know which kind they hold:

- depth 1: terminal lookup, values are the selected element values
- depth n > 1: values are lookups of depth n - 1

All retrieval methods derive from a single ``_resolve`` primitive plus
the default bound at construction.

Thread safety: lookups have no mutation API, so concurrent reads from
any number of threads are safe.
"""

from __future__ import annotations

import abc as _abc
import types as _types
import typing as _typing

import multilookup.errors as errors


def _get_missing_singleton() -> _MissingType:
    """Return the _MISSING singleton. Called by pickle to reconstruct."""
    return _MISSING


class _MissingType:
    """Sentinel type for "no value" where None is a legitimate value."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<MISSING>"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> tuple[_typing.Callable[[], _MissingType], tuple[()]]:
        """Pickle support: ensure singleton is preserved."""
        return (_get_missing_singleton, ())


_MISSING = _MissingType()


class Lookup(_abc.ABC):
    """
    Read-only index from key to value.

    Retrieval contracts:

    - ``has(key)``: True iff key is not None and present.
    - ``find(key)``: value, or the bound default. Never raises.
    - ``find(key, default)``: value, or the given default (may be None).
    - ``get(key)``: value, or the bound default if it is not None,
      otherwise KeyNotFoundError.
    - ``get(key, default)``: value, or the given default, which must
      not be None.
    - ``hunt(key)``: value, never a default. KeyNotFoundError when
      missing, LookupArgumentError for a None key.

    Example:
        >>> lookup = create({"MS": "Mississippi"}, default="?")
        >>> lookup.get("MS")
        'Mississippi'
        >>> lookup.find("TX")
        '?'
        >>> lookup.hunt("TX")  # KeyNotFoundError
    """

    __slots__ = ("_default", "_depth")

    def __init__(self, default: _typing.Any = None, depth: int = 1) -> None:
        if depth < 1:
            raise errors.LookupArgumentError(f"depth must be at least 1, got {depth}")
        self._default = default
        self._depth = depth

    @_abc.abstractmethod
    def _resolve(self, key: _typing.Hashable) -> _typing.Any:
        """Return the stored value for a non-None key, or _MISSING."""

    @_abc.abstractmethod
    def __iter__(self) -> _typing.Iterator[_typing.Any]:
        """Iterate over keys."""

    @_abc.abstractmethod
    def __len__(self) -> int:
        """Return number of keys."""

    @property
    def default(self) -> _typing.Any:
        """Default bound at construction (None when there is none)."""
        return self._default

    @property
    def depth(self) -> int:
        """Number of key levels below and including this one."""
        return self._depth

    @property
    def is_terminal(self) -> bool:
        """True if values are element values rather than nested lookups."""
        return self._depth == 1

    def _lookup(self, key: _typing.Any) -> _typing.Any:
        if key is None:
            return _MISSING
        try:
            hash(key)
        except TypeError:
            # Unhashable keys can never be present
            return _MISSING
        return self._resolve(key)

    def has(self, key: _typing.Any) -> bool:
        """Check whether a value is stored for key."""
        return self._lookup(key) is not _MISSING

    def find(self, key: _typing.Any, default: _typing.Any = _MISSING) -> _typing.Any:
        """Return the value for key, or a default if not present.

        Args:
            key: Key to look up. None is never present.
            default: Fallback for this call only. When omitted the default
                bound at construction is used.
        """
        value = self._lookup(key)
        if value is not _MISSING:
            return value
        return self._default if default is _MISSING else default

    def get(self, key: _typing.Any, default: _typing.Any = _MISSING) -> _typing.Any:
        """Return the value for key, falling back to a non-None default.

        Raises:
            LookupArgumentError: If an explicit default is given as None.
            KeyNotFoundError: If key is not present and there is no
                default to fall back to.
        """
        if default is None:
            raise errors.LookupArgumentError(errors.not_none("default"))
        value = self._lookup(key)
        if value is not _MISSING:
            return value
        if default is not _MISSING:
            return default
        if self._default is not None:
            return self._default
        raise errors.KeyNotFoundError(key)

    def hunt(self, key: _typing.Any) -> _typing.Any:
        """Return the value for key, ignoring any default.

        Raises:
            LookupArgumentError: If key is None.
            KeyNotFoundError: If key is not present.
        """
        if key is None:
            raise errors.LookupArgumentError(errors.not_none("key"))
        value = self._lookup(key)
        if value is _MISSING:
            raise errors.KeyNotFoundError(key)
        return value

    def __contains__(self, key: object) -> bool:
        return self.has(key)

    def __getitem__(self, key: _typing.Any) -> _typing.Any:
        return self.hunt(key)

    def __setitem__(self, key: _typing.Any, value: _typing.Any) -> None:
        raise TypeError(f"'{type(self).__name__}' object does not support item assignment")

    def __delitem__(self, key: _typing.Any) -> None:
        raise TypeError(f"'{type(self).__name__}' object does not support item deletion")

    def keys(self) -> _typing.KeysView[_typing.Any]:
        """Read-only view of the keys."""
        return self._view().keys()

    def values(self) -> _typing.ValuesView[_typing.Any]:
        """Read-only view of the values."""
        return self._view().values()

    def items(self) -> _typing.ItemsView[_typing.Any, _typing.Any]:
        """Read-only view of (key, value) pairs."""
        return self._view().items()

    @_abc.abstractmethod
    def _view(self) -> _typing.Mapping[_typing.Any, _typing.Any]:
        """Read-only mapping of the stored entries."""

    def __hash__(self) -> int:
        """Lookups are not hashable (values may be mutable)."""
        raise TypeError(f"unhashable type: '{type(self).__name__}'")


class MapLookup(Lookup):
    """
    Lookup backed by a dict.

    The dict is owned by the lookup: the builder hands over a freshly
    built dict, and ``create()`` copies caller mappings before wrapping.
    """

    __slots__ = ("_data",)

    def __init__(
        self,
        data: dict[_typing.Any, _typing.Any],
        default: _typing.Any = None,
        depth: int = 1,
    ) -> None:
        super().__init__(default, depth)
        self._data = data

    def _resolve(self, key: _typing.Hashable) -> _typing.Any:
        return self._data.get(key, _MISSING)

    def _view(self) -> _typing.Mapping[_typing.Any, _typing.Any]:
        return _types.MappingProxyType(self._data)

    def __iter__(self) -> _typing.Iterator[_typing.Any]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"MapLookup({self._data!r}, default={self._default!r}, depth={self._depth})"

    def __eq__(self, other: object) -> bool:
        """Compare equal to another MapLookup with same content and shape."""
        if isinstance(other, MapLookup):
            return (
                self._depth == other._depth
                and self._default == other._default
                and self._data == other._data
            )
        return NotImplemented

    __hash__ = Lookup.__hash__


_EMPTY_VIEW: _typing.Mapping[_typing.Any, _typing.Any] = _types.MappingProxyType({})


class EmptyLookup(Lookup):
    """
    Lookup with no entries.

    Used as the "not found" default of intermediate levels so that a miss
    on an outer key still yields a lookup of the expected shape: calling
    ``find`` on it degrades to its own default, all the way down to the
    terminal default.
    """

    __slots__ = ()

    def _resolve(self, key: _typing.Hashable) -> _typing.Any:
        return _MISSING

    def _view(self) -> _typing.Mapping[_typing.Any, _typing.Any]:
        return _EMPTY_VIEW

    def __iter__(self) -> _typing.Iterator[_typing.Any]:
        return iter(())

    def __len__(self) -> int:
        return 0

    def __repr__(self) -> str:
        return f"EmptyLookup(default={self._default!r}, depth={self._depth})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, EmptyLookup):
            return self._depth == other._depth and self._default == other._default
        return NotImplemented

    __hash__ = Lookup.__hash__


def create(
    mapping: _typing.Mapping[_typing.Any, _typing.Any],
    default: _typing.Any = None,
    depth: int = 1,
) -> MapLookup:
    """
    Create a lookup from an existing mapping.

    The mapping is copied, so later changes to it do not affect the
    returned lookup.

    Args:
        mapping: Key to value entries.
        default: Value returned by find/get when a key is not present.
        depth: Key levels represented (values are lookups when > 1).

    Raises:
        LookupArgumentError: If mapping is None.
    """
    if mapping is None:
        raise errors.LookupArgumentError(errors.not_none("mapping"))
    return MapLookup(dict(mapping), default, depth)
