"""
Error taxonomy for multilookup.

Every failure raised by the library derives from LookupException:

- LookupArgumentError: invalid construction or query argument
- LookupBuildError: failure while building a lookup
- DuplicateKeyError: two values for one key tuple under the FAIL policy
- KeyNotFoundError: query-time miss with no usable default
"""

import typing as _typing


class LookupException(Exception):
    """Base class for all lookup errors."""

    pass


class LookupArgumentError(LookupException, ValueError):
    """An argument passed to a builder or a query method is invalid."""

    pass


def not_none(argument: str) -> str:
    """Message for an argument that must not be None."""
    return f"Argument {argument} must not be None."


class LookupBuildError(LookupException):
    """Building a lookup failed.

    Failures raised by accessors or converters while extracting keys and
    values are chained as ``__cause__``.
    """

    pass


class DuplicateKeyError(LookupBuildError):
    """The same key tuple resolved to two values while building a lookup."""

    def __init__(
        self,
        value: _typing.Any,
        existing: _typing.Any,
        keys: tuple[_typing.Any, ...],
    ) -> None:
        self.value = value
        self.existing = existing
        self.keys = keys
        super().__init__(
            f"Duplicate key {list(keys)!r}: {existing!r} conflicts with {value!r}"
        )

    def __reduce__(self) -> tuple[_typing.Any, ...]:
        return (type(self), (self.value, self.existing, self.keys))

    @property
    def values(self) -> tuple[_typing.Any, _typing.Any]:
        """The conflicting values, newest first."""
        return (self.value, self.existing)


class KeyNotFoundError(LookupException, LookupError):
    """No value and no usable default exist for a key."""

    def __init__(self, key: _typing.Any) -> None:
        self.key = key
        super().__init__(f"Value not found for given key {key!r}")

    def __reduce__(self) -> tuple[_typing.Any, ...]:
        return (type(self), (self.key,))
