"""
Chain of empty sentinel lookups.

``build_chain(default, levels)`` returns one EmptyLookup per nesting
depth. Entry 0 is a terminal lookup defaulting to ``default``; entry k
has depth k + 1 and defaults to entry k - 1:

    chain[0] = EmptyLookup(default, depth=1)
    chain[1] = EmptyLookup(chain[0], depth=2)
    ...

An intermediate level with r levels remaining below it uses
``chain[r - 1]`` as its own default, so a miss on an outer key returns a
lookup that answers every inner query with the configured default.
"""

from __future__ import annotations

import typing as _typing

import multilookup.constants as constants
import multilookup.core.lookup as lookup
import multilookup.errors as errors


def build_chain(default: _typing.Any, levels: int) -> tuple[lookup.EmptyLookup, ...]:
    """
    Build the empty-lookup chain for a lookup with ``levels`` key levels.

    Args:
        default: Terminal default value.
        levels: Number of key levels, 1..MAX_LEVELS.

    Returns:
        Tuple of length ``levels``, indexed by remaining depth - 1.

    Raises:
        LookupBuildError: If levels exceeds MAX_LEVELS.
        LookupArgumentError: If levels is less than 1.
    """
    if levels < 1:
        raise errors.LookupArgumentError(f"levels must be at least 1, got {levels}")
    if levels > constants.MAX_LEVELS:
        raise errors.LookupBuildError(
            f"Too many key levels: {levels} (maximum is {constants.MAX_LEVELS})"
        )

    chain = [lookup.EmptyLookup(default, depth=1)]
    for depth in range(2, levels + 1):
        chain.append(lookup.EmptyLookup(chain[-1], depth=depth))
    return tuple(chain)
