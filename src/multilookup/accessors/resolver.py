"""
Attribute accessor resolution.

Finds the zero-argument accessor that reads an attribute off instances
of a type, following the naming convention:

- ``get_<attr>`` or ``getAttr``: any return type
- ``is_<attr>`` or ``isAttr``: only when annotated to return ``bool``
- a ``property`` named ``<attr>``
- a dataclass or ``NamedTuple`` field named ``<attr>``

The type's capability set (the type, its bases and every mixin or ABC
it inherits, each visited once) is walked depth first with bases before
the type's own declarations. The first matching declaration wins.

Resolution only decides *which name* to call. ``Accessor.invoke`` always
goes through ``getattr`` on the runtime value, so an override on the
element's concrete class runs even when the matching declaration was
found on a base class or mixin.
"""

from __future__ import annotations

import dataclasses as _dataclasses
import enum as _enum
import functools as _functools
import inspect as _inspect
import logging as _logging
import typing as _typing

import multilookup.constants as constants
import multilookup.errors as errors

_logger = _logging.getLogger(__name__)

_NO_ANNOTATION = _inspect.Signature.empty


class AccessorKind(_enum.Enum):
    """How an accessor is read off an element."""

    GETTER = "getter"
    """Method named with the get prefix, called with no arguments."""

    PREDICATE = "predicate"
    """Method named with the is prefix and a bool return, called with no arguments."""

    PROPERTY = "property"
    """Property (or cached_property) read as an attribute."""

    @property
    def is_method(self) -> bool:
        return self is not AccessorKind.PROPERTY


# Precedence of accessor kinds declared on the same class
_KIND_RANK = {
    AccessorKind.GETTER: 0,
    AccessorKind.PREDICATE: 1,
    AccessorKind.PROPERTY: 2,
}


@_dataclasses.dataclass(frozen=True)
class Accessor:
    """A resolved accessor.

    ``owner`` is the class the matching declaration was found on. It is
    informational only and never used for invocation.
    """

    attribute: str
    name: str
    kind: AccessorKind
    owner: type
    return_type: _typing.Any = None

    def invoke(self, element: _typing.Any) -> _typing.Any:
        """Read the attribute off element using its runtime type."""
        value = getattr(element, self.name)
        return value() if self.kind.is_method else value


def attribute_for(name: str, prefixes: _typing.Sequence[str]) -> str | None:
    """
    Derive the attribute an accessor name stands for.

    Examples:
        >>> attribute_for("get_county", constants.GET_PREFIXES)
        'county'
        >>> attribute_for("getCounty", constants.GET_PREFIXES)
        'county'
        >>> attribute_for("getURL", constants.GET_PREFIXES)
        'URL'
        >>> attribute_for("gettysburg", constants.GET_PREFIXES) is None
        True
    """
    for prefix in prefixes:
        if not name.startswith(prefix) or len(name) == len(prefix):
            continue
        rest = name[len(prefix) :]
        if prefix.endswith("_"):
            return rest
        if not rest[0].isupper():
            continue
        # Only lowered when followed by a lower-case letter: getA1 -> A1
        if len(rest) == 1 or rest[1].islower():
            return rest[0].lower() + rest[1:]
        return rest
    return None


def _is_bool(annotation: _typing.Any) -> bool:
    # Annotations are strings under `from __future__ import annotations`
    return annotation is bool or annotation == "bool"


def _is_void(annotation: _typing.Any) -> bool:
    return annotation is None or annotation is type(None) or annotation == "None"


def _return_annotation(func: _typing.Callable[..., _typing.Any]) -> _typing.Any:
    try:
        annotations = getattr(func, "__annotations__", None) or {}
    except NameError:
        # Lazily evaluated annotation naming an undefined type
        return _NO_ANNOTATION
    return annotations.get("return", _NO_ANNOTATION)


def _takes_no_arguments(func: _typing.Callable[..., _typing.Any]) -> bool:
    """Check that a plain function takes nothing but ``self``."""
    try:
        parameters = list(_inspect.signature(func).parameters.values())
    except (TypeError, ValueError):
        return False
    if len(parameters) != 1:
        return False
    return parameters[0].kind in (
        _inspect.Parameter.POSITIONAL_ONLY,
        _inspect.Parameter.POSITIONAL_OR_KEYWORD,
    )


def _declared_accessors(cls: type) -> list[Accessor]:
    """
    Collect the eligible accessors declared directly on cls.

    Returned in precedence order: getters, then predicates, then
    properties, then fields, each in declaration order.
    """
    found: list[Accessor] = []

    for name, member in vars(cls).items():
        if name.startswith("_"):
            continue

        if isinstance(member, (property, _functools.cached_property)):
            fget = member.fget if isinstance(member, property) else member.func
            if fget is None:
                continue
            annotation = _return_annotation(fget)
            if _is_void(annotation):
                continue
            found.append(Accessor(name, name, AccessorKind.PROPERTY, cls, annotation))
            continue

        # staticmethod and classmethod objects are not plain functions
        if not _inspect.isfunction(member) or not _takes_no_arguments(member):
            continue
        annotation = _return_annotation(member)
        if _is_void(annotation):
            continue

        attribute = attribute_for(name, constants.GET_PREFIXES)
        if attribute is not None:
            found.append(Accessor(attribute, name, AccessorKind.GETTER, cls, annotation))
            continue
        if _is_bool(annotation):
            attribute = attribute_for(name, constants.IS_PREFIXES)
            if attribute is not None:
                found.append(
                    Accessor(attribute, name, AccessorKind.PREDICATE, cls, annotation)
                )

    found.sort(key=lambda accessor: _KIND_RANK[accessor.kind])
    found.extend(_declared_fields(cls))
    return found


def _declared_fields(cls: type) -> list[Accessor]:
    """
    Collect dataclass and NamedTuple fields declared on cls.

    Fields rank after every other accessor kind of the same class. They
    are read as plain attributes.
    """
    if "__dataclass_fields__" in vars(cls):
        fields = [(field.name, field.type) for field in _dataclasses.fields(cls)]
    elif issubclass(cls, tuple) and "_fields" in vars(cls):
        hints = vars(cls).get("__annotations__", {})
        fields = [(name, hints.get(name)) for name in cls._fields]  # type: ignore[attr-defined]
    else:
        return []

    return [
        Accessor(name, name, AccessorKind.PROPERTY, cls, annotation)
        for name, annotation in fields
        if not name.startswith("_")
    ]


def capability_set(cls: type) -> list[type]:
    """
    Flatten a type's bases, mixins and ABCs into search order.

    Depth first: each class's bases (in ``__bases__`` order) come before
    the class itself, and every class appears once. ``object`` is
    excluded.
    """
    ordered: list[type] = []
    visited: set[type] = set()

    def visit(current: type) -> None:
        if current in visited or current is object:
            return
        visited.add(current)
        for base in current.__bases__:
            visit(base)
        ordered.append(current)

    visit(cls)
    return ordered


class AccessorResolver:
    """
    Resolves attribute names to accessors on a type.

    Example:
        >>> class County:
        ...     def get_state(self) -> str: ...
        ...     def is_coastal(self) -> bool: ...
        >>> resolver = AccessorResolver()
        >>> resolver.find_accessor(County, "state").name
        'get_state'
        >>> [a.name if a else None for a in resolver.find_accessors(County, "coastal", "zip")]
        ['is_coastal', None]
    """

    def find_accessor(self, cls: type, attribute: str) -> Accessor | None:
        """Resolve one attribute, or None if no accessor matches."""
        return self.find_accessors(cls, attribute)[0]

    def find_accessors(self, cls: type, *attributes: str) -> list[Accessor | None]:
        """
        Resolve several attributes in one pass over the capability set.

        Args:
            cls: Type to search.
            *attributes: Attribute names.

        Returns:
            One Accessor (or None when unmatched) per attribute, in input
            order.

        Raises:
            LookupArgumentError: If cls is None or no attributes are given.
        """
        if cls is None:
            raise errors.LookupArgumentError(errors.not_none("cls"))
        if not attributes:
            raise errors.LookupArgumentError("At least one attribute is required")
        if any(attribute is None for attribute in attributes):
            raise errors.LookupArgumentError(errors.not_none("attribute"))

        resolved: list[Accessor | None] = [None] * len(attributes)
        pending = len(attributes)

        for candidate in capability_set(cls):
            for accessor in _declared_accessors(candidate):
                for i, attribute in enumerate(attributes):
                    if resolved[i] is None and accessor.attribute == attribute:
                        resolved[i] = accessor
                        pending -= 1
            if not pending:
                break

        _logger.debug(
            "Resolved %d of %d accessors on %s",
            len(attributes) - pending,
            len(attributes),
            cls.__qualname__,
        )
        return resolved

    def require_accessor(self, cls: type, attribute: str) -> Accessor:
        """
        Resolve one attribute.

        Raises:
            LookupBuildError: If no accessor matches.
        """
        accessor = self.find_accessor(cls, attribute)
        if accessor is None:
            raise errors.LookupBuildError(
                f"No accessor found for attribute '{attribute}' on {cls.__qualname__}"
            )
        return accessor


_default_resolver = AccessorResolver()


def find_accessor(cls: type, attribute: str) -> Accessor | None:
    """Resolve one attribute with the shared resolver."""
    return _default_resolver.find_accessor(cls, attribute)


def find_accessors(cls: type, *attributes: str) -> list[Accessor | None]:
    """Resolve several attributes with the shared resolver."""
    return _default_resolver.find_accessors(cls, *attributes)


def require_accessor(cls: type, attribute: str) -> Accessor:
    """Resolve one attribute with the shared resolver, raising if unmatched."""
    return _default_resolver.require_accessor(cls, attribute)
