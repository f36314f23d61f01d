"""
Converters extract a key or a value from an element.

A converter is any callable taking one element and returning the key or
value for it. This module provides the built-in ones:

- ``identity``: the element itself (default value selector)
- ``AttributeConverter``: reads one attribute through a resolved accessor
- ``ExpressionConverter``: evaluates a dotted path such as
  ``"address.city"`` against mappings, accessors and plain attributes

All of them return None for a None element, and report failures while
reading an element as LookupBuildError.
"""

from __future__ import annotations

import collections.abc as _abc
import functools as _functools
import typing as _typing

import multilookup.accessors.resolver as resolver
import multilookup.constants as constants
import multilookup.errors as errors

E = _typing.TypeVar("E", contravariant=True)
T = _typing.TypeVar("T", covariant=True)


class Converter(_typing.Protocol[E, T]):
    """Extracts a key or value from an element."""

    def __call__(self, element: E) -> T: ...


def identity(element: _typing.Any) -> _typing.Any:
    """Return the element itself."""
    return element


class AttributeConverter:
    """
    Reads one attribute off an element through a resolved accessor.

    Example:
        >>> converter = AttributeConverter.for_attribute(CountyCode, "state")
        >>> converter(CountyCode(28041, "MS", "Greene"))
        'MS'
        >>> converter(None) is None
        True
    """

    __slots__ = ("_accessor",)

    def __init__(self, accessor: resolver.Accessor) -> None:
        if accessor is None:
            raise errors.LookupArgumentError(errors.not_none("accessor"))
        self._accessor = accessor

    @classmethod
    def for_attribute(cls, element_type: type, attribute: str) -> AttributeConverter:
        """
        Resolve attribute on element_type and wrap the accessor.

        Raises:
            LookupBuildError: If no accessor matches.
        """
        return cls(resolver.require_accessor(element_type, attribute))

    @classmethod
    def for_attributes(
        cls, element_type: type, *attributes: str
    ) -> list[AttributeConverter]:
        """Resolve several attributes in one pass and wrap each accessor.

        Raises:
            LookupBuildError: If any attribute has no accessor.
        """
        accessors = resolver.find_accessors(element_type, *attributes)
        converters = []
        for attribute, accessor in zip(attributes, accessors):
            if accessor is None:
                raise errors.LookupBuildError(
                    f"No accessor found for attribute '{attribute}' "
                    f"on {element_type.__qualname__}"
                )
            converters.append(cls(accessor))
        return converters

    @property
    def accessor(self) -> resolver.Accessor:
        return self._accessor

    def __call__(self, element: _typing.Any) -> _typing.Any:
        if element is None:
            return None
        try:
            return self._accessor.invoke(element)
        except Exception as e:
            raise errors.LookupBuildError(
                f"Failed to read '{self._accessor.attribute}' from {element!r}: {e}"
            ) from e

    def __repr__(self) -> str:
        return f"AttributeConverter({self._accessor.owner.__qualname__}.{self._accessor.name})"


@_functools.lru_cache(maxsize=1024)
def _segment_accessor(cls: type, segment: str) -> resolver.Accessor | None:
    return resolver.find_accessor(cls, segment)


def _read_segment(value: _typing.Any, segment: str) -> _typing.Any:
    """Read one path segment: mapping key, then accessor, then attribute."""
    if isinstance(value, _abc.Mapping):
        return value[segment]
    accessor = _segment_accessor(type(value), segment)
    if accessor is not None:
        return accessor.invoke(value)
    return getattr(value, segment)


class ExpressionConverter:
    """
    Evaluates a dotted path expression against an element.

    Each segment is read from the current value as a mapping key (for
    mappings), through a convention accessor, or as a plain attribute.
    A None along the path yields None.

    Example:
        >>> converter = ExpressionConverter("address.city")
        >>> converter({"address": {"city": "Tupelo"}})
        'Tupelo'
    """

    __slots__ = ("_expression", "_segments")

    def __init__(self, expression: str) -> None:
        if not isinstance(expression, str):
            raise errors.LookupBuildError(f"Expression must be a string, got {expression!r}")
        segments = tuple(expression.split(constants.EXPRESSION_SEPARATOR))
        if not all(segment.strip() for segment in segments):
            raise errors.LookupBuildError(f"Malformed expression: {expression!r}")
        self._expression = expression
        self._segments = tuple(segment.strip() for segment in segments)

    @property
    def expression(self) -> str:
        return self._expression

    def __call__(self, element: _typing.Any) -> _typing.Any:
        value = element
        for segment in self._segments:
            if value is None:
                return None
            try:
                value = _read_segment(value, segment)
            except Exception as e:
                raise errors.LookupBuildError(
                    f"Failed to evaluate '{self._expression}' on {element!r}: {e!r}"
                ) from e
        return value

    def __repr__(self) -> str:
        return f"ExpressionConverter({self._expression!r})"


def to_converter(
    key: str | Converter[_typing.Any, _typing.Any],
) -> Converter[_typing.Any, _typing.Any]:
    """
    Normalize a key or value specification to a converter.

    Strings become ExpressionConverters; callables are used as-is.

    Raises:
        LookupArgumentError: If key is None or neither a string nor callable.
    """
    if key is None:
        raise errors.LookupArgumentError(errors.not_none("converter"))
    if isinstance(key, str):
        return ExpressionConverter(key)
    if callable(key):
        return key
    raise errors.LookupArgumentError(f"Expected an expression or a callable, got {key!r}")
