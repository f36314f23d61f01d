"""
Fluent builder API.

Example:
    >>> by_state = (
    ...     from_source(codes)
    ...     .default_to(UNKNOWN)
    ...     .use_last_on_duplicate()
    ...     .by("state", "county")
    ...     .index()
    ... )
    >>> by_state.get("MS").get("Greene").get_code()
    28041
"""

from __future__ import annotations

import typing as _typing

import multilookup.accessors.converters as converters
import multilookup.config.types as config_types
import multilookup.core.builder as builder
import multilookup.core.lookup as lookup
import multilookup.core.types as types
import multilookup.errors as errors

KeySpec = _typing.Union[str, converters.Converter[_typing.Any, _typing.Any]]


class FluentBuilder:
    """
    Collects build options step by step, then builds with ``index()``.

    Every step returns the builder itself, so calls chain. Options can be
    set in any order; keys accumulate across ``by()`` calls, outermost
    first.
    """

    def __init__(
        self,
        source: _typing.Iterable[_typing.Any],
        config: config_types.BuildConfig | None = None,
    ) -> None:
        if source is None:
            raise errors.LookupArgumentError(errors.not_none("source"))
        self._source = source
        self._config = config
        self._keys: list[converters.Converter[_typing.Any, _typing.Any]] = []
        self._value: converters.Converter[_typing.Any, _typing.Any] | None = None
        self._policy: types.DuplicatePolicy | None = None
        self._default: _typing.Any = None
        self._not_empty: bool | None = None

    def default_to(self, default: _typing.Any) -> FluentBuilder:
        """Value returned for keys that are not present."""
        self._default = default
        return self

    def select(self, value: KeySpec) -> FluentBuilder:
        """Store the selected value instead of the element itself."""
        self._value = converters.to_converter(value)
        return self

    def use_first_on_duplicate(self) -> FluentBuilder:
        self._policy = types.DuplicatePolicy.FIRST
        return self

    def use_last_on_duplicate(self) -> FluentBuilder:
        self._policy = types.DuplicatePolicy.LAST
        return self

    def fail_on_duplicate(self) -> FluentBuilder:
        self._policy = types.DuplicatePolicy.FAIL
        return self

    def not_empty(self) -> FluentBuilder:
        """Reject an empty source when building."""
        self._not_empty = True
        return self

    def by(self, *keys: KeySpec) -> FluentBuilder:
        """
        Add key levels.

        Args:
            *keys: Dotted path expressions or converters, outermost first.

        Raises:
            LookupArgumentError: If no keys are given or a key is None.
        """
        if not keys:
            raise errors.LookupArgumentError("At least one key is required")
        self._keys.extend(converters.to_converter(key) for key in keys)
        return self

    def index(self) -> lookup.Lookup:
        """Build the lookup."""
        return builder.LookupBuilder(
            self._source,
            self._keys,
            value=self._value,
            policy=self._policy,
            default=self._default,
            not_empty=self._not_empty,
            config=self._config,
        ).build()


def from_source(
    source: _typing.Iterable[_typing.Any],
    config: config_types.BuildConfig | None = None,
) -> FluentBuilder:
    """Start a fluent build over source."""
    return FluentBuilder(source, config)
