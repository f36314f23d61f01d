"""
Recursive multi-level lookup builder.

Partitions a source collection by successive key converters into a tree
of immutable lookups:

- intermediate levels group elements by key and recurse per group; their
  "not found" default is the empty chain entry for the remaining depth
- the terminal level maps key to selected value, applying the duplicate
  policy; its "not found" default is the configured default value

The result of ``build()`` has ``depth == len(keys)``.
"""

from __future__ import annotations

import logging as _logging
import typing as _typing

import multilookup.accessors.converters as converters
import multilookup.config.types as config_types
import multilookup.core.chain as chain
import multilookup.core.lookup as lookup
import multilookup.core.types as types
import multilookup.errors as errors

_logger = _logging.getLogger(__name__)

Key = _typing.Any
KeyPath = tuple[Key, ...]


class LookupBuilder:
    """
    Builds a Lookup from a source collection.

    Example:
        >>> builder = LookupBuilder(
        ...     codes,
        ...     keys=[converters.ExpressionConverter("state"),
        ...           converters.ExpressionConverter("county")],
        ... )
        >>> by_state = builder.build()
        >>> by_state.get("MS").get("Greene").get_code()
        28041

    Args:
        source: Elements to index. Elements are referenced, never copied.
        keys: One converter per level, outermost first.
        value: Converter selecting the stored value. Defaults to the
            element itself.
        policy: Duplicate key policy. Defaults to the config's policy.
        default: Value returned for missing terminal keys.
        not_empty: Reject an empty source. Defaults to the config's value.
        config: Build defaults. Defaults to ``BuildConfig()``.
    """

    def __init__(
        self,
        source: _typing.Iterable[_typing.Any],
        keys: _typing.Sequence[converters.Converter[_typing.Any, _typing.Any]],
        *,
        value: converters.Converter[_typing.Any, _typing.Any] | None = None,
        policy: types.DuplicatePolicy | None = None,
        default: _typing.Any = None,
        not_empty: bool | None = None,
        config: config_types.BuildConfig | None = None,
    ) -> None:
        if source is None:
            raise errors.LookupArgumentError(errors.not_none("source"))
        if keys is None:
            raise errors.LookupArgumentError(errors.not_none("keys"))
        if any(key is None for key in keys):
            raise errors.LookupArgumentError(errors.not_none("key converter"))

        config = config or config_types.BuildConfig()
        self._source = list(source)
        self._keys = tuple(keys)
        self._value = converters.identity if value is None else value
        self._policy = types.DuplicatePolicy(policy or config.duplicate_policy)
        self._default = default
        self._not_empty = config.not_empty if not_empty is None else not_empty
        self._max_levels = config.max_levels

    @property
    def levels(self) -> int:
        """Number of key levels."""
        return len(self._keys)

    @property
    def policy(self) -> types.DuplicatePolicy:
        return self._policy

    def build(self) -> lookup.Lookup:
        """
        Build the lookup.

        Raises:
            LookupArgumentError: If there are no key converters, or the
                source is empty and not_empty was requested.
            LookupBuildError: If there are more levels than allowed, or
                reading a key or value failed.
            DuplicateKeyError: If two elements share a key tuple under
                the FAIL policy.
        """
        levels = self.levels
        if levels == 0:
            raise errors.LookupArgumentError("At least one key is required")
        if levels > self._max_levels:
            raise errors.LookupBuildError(
                f"Too many key levels: {levels} (maximum is {self._max_levels})"
            )
        if self._not_empty and not self._source:
            raise errors.LookupArgumentError("Source collection must not be empty")

        _logger.debug(
            "Building %d-level lookup over %d elements (on duplicate: %s)",
            levels,
            len(self._source),
            self._policy.value,
        )
        empty_chain = chain.build_chain(self._default, levels)
        return self._build_level(self._source, 0, (), empty_chain)

    def _build_level(
        self,
        elements: list[_typing.Any],
        level: int,
        path: KeyPath,
        empty_chain: tuple[lookup.EmptyLookup, ...],
    ) -> lookup.Lookup:
        if level == self.levels - 1:
            return self._build_terminal(elements, path)

        key_of = self._keys[level]
        buckets: dict[Key, list[_typing.Any]] = {}
        for element in elements:
            key = _require_hashable(_extract(key_of, element))
            buckets.setdefault(key, []).append(element)

        remaining = self.levels - level
        nested = {
            key: self._build_level(bucket, level + 1, (*path, key), empty_chain)
            for key, bucket in buckets.items()
        }
        # Levels below this one: remaining - 1, indexed from 0
        return lookup.MapLookup(nested, empty_chain[remaining - 2], depth=remaining)

    def _build_terminal(self, elements: list[_typing.Any], path: KeyPath) -> lookup.Lookup:
        key_of = self._keys[-1]
        entries: dict[Key, _typing.Any] = {}

        for element in elements:
            key = _require_hashable(_extract(key_of, element))
            value = _extract(self._value, element)
            if key not in entries:
                entries[key] = value
            elif self._policy is types.DuplicatePolicy.LAST:
                _logger.debug("Duplicate key %r: keeping last value", (*path, key))
                entries[key] = value
            elif self._policy is types.DuplicatePolicy.FIRST:
                _logger.debug("Duplicate key %r: keeping first value", (*path, key))
            else:
                raise errors.DuplicateKeyError(value, entries[key], (*path, key))

        return lookup.MapLookup(entries, self._default, depth=1)


def _extract(
    converter: converters.Converter[_typing.Any, _typing.Any], element: _typing.Any
) -> _typing.Any:
    """Apply a converter, reporting failures as build errors."""
    try:
        return converter(element)
    except errors.LookupException:
        raise
    except Exception as e:
        raise errors.LookupBuildError(f"Failed to convert {element!r}: {e!r}") from e


def _require_hashable(key: Key) -> Key:
    try:
        hash(key)
    except TypeError as e:
        raise errors.LookupBuildError(f"Key {key!r} is not hashable") from e
    return key


def build(
    source: _typing.Iterable[_typing.Any],
    *keys: str | converters.Converter[_typing.Any, _typing.Any],
    value: str | converters.Converter[_typing.Any, _typing.Any] | None = None,
    policy: types.DuplicatePolicy | str | None = None,
    default: _typing.Any = None,
    not_empty: bool | None = None,
    config: config_types.BuildConfig | None = None,
) -> lookup.Lookup:
    """
    Build a lookup in one call.

    Keys and value may be dotted path expressions or callables.

    Example:
        >>> by_state = build(codes, "state", "county", default=UNKNOWN)
        >>> by_state.find("TX").find("anything") is UNKNOWN
        True
    """
    return LookupBuilder(
        source,
        [converters.to_converter(key) for key in keys],
        value=None if value is None else converters.to_converter(value),
        policy=None if policy is None else types.DuplicatePolicy(policy),
        default=default,
        not_empty=not_empty,
        config=config,
    ).build()
