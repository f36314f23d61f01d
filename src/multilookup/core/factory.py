"""
Factory helpers that index elements by attribute name.

Attributes are resolved once, through accessors, against an element
type: the explicit ``element_type``, else the type of the first non-None
element, else the type of ``default`` (only when no ``select`` is given).
"""

from __future__ import annotations

import typing as _typing

import multilookup.accessors.converters as converters
import multilookup.config.types as config_types
import multilookup.core.builder as builder
import multilookup.core.lookup as lookup
import multilookup.core.types as types
import multilookup.errors as errors


def element_type_of(
    values: _typing.Iterable[_typing.Any],
    default: _typing.Any = None,
) -> type:
    """
    Determine the type attributes are resolved against.

    The first non-None element decides. The type of default is only
    used when there is no such element.

    Raises:
        LookupArgumentError: If default is None and values has no
            non-None element.
    """
    for value in values:
        if value is not None:
            return type(value)
    if default is not None:
        return type(default)
    raise errors.LookupArgumentError(
        "Cannot determine element type: no default and no non-None element"
    )


def index_by(
    values: _typing.Iterable[_typing.Any],
    *attributes: str,
    default: _typing.Any = None,
    element_type: type | None = None,
    select: str | None = None,
    policy: types.DuplicatePolicy | str | None = None,
    config: config_types.BuildConfig | None = None,
) -> lookup.Lookup:
    """
    Index values by one or more attributes read through accessors.

    Example:
        >>> by_state = index_by(codes, "state", "county")
        >>> by_state.hunt("AL").hunt("Lee").get_code()
        1081

    Args:
        values: Elements to index.
        *attributes: Attribute names, outermost level first.
        default: Value returned for missing terminal keys.
        element_type: Type to resolve attributes on.
        select: Attribute stored instead of the element itself.
        policy: Duplicate key policy.
        config: Build defaults.

    Raises:
        LookupArgumentError: If values is None, no attributes are given,
            or the element type cannot be determined.
        LookupBuildError: If an attribute has no accessor.
    """
    if values is None:
        raise errors.LookupArgumentError(errors.not_none("values"))
    if not attributes:
        raise errors.LookupArgumentError("At least one attribute is required")

    values = list(values)
    # A default stands for the selected value, not the element, when select is given
    cls = element_type or element_type_of(values, default if select is None else None)
    if select is None:
        keys = converters.AttributeConverter.for_attributes(cls, *attributes)
        value = None
    else:
        *keys, value = converters.AttributeConverter.for_attributes(cls, *attributes, select)

    return builder.LookupBuilder(
        values,
        keys,
        value=value,
        policy=None if policy is None else types.DuplicatePolicy(policy),
        default=default,
        config=config,
    ).build()
