"""Tests for the empty lookup chain."""

import pytest as _pytest

import multilookup.constants as constants
import multilookup.core.chain as chain
import multilookup.core.lookup as lookup
import multilookup.errors as errors


class TestBuildChain:
    """Shape and defaults of the chain."""

    def test_single_level(self) -> None:
        result = chain.build_chain("default", 1)

        assert len(result) == 1
        assert result[0].depth == 1
        assert result[0].default == "default"

    def test_each_entry_defaults_to_previous(self) -> None:
        result = chain.build_chain("default", 4)

        assert [entry.depth for entry in result] == [1, 2, 3, 4]
        for shallower, deeper in zip(result, result[1:]):
            assert deeper.default is shallower

    def test_entries_are_empty(self) -> None:
        for entry in chain.build_chain("default", 3):
            assert isinstance(entry, lookup.EmptyLookup)
            assert len(entry) == 0

    def test_queries_degrade_to_terminal_default(self) -> None:
        """Walking a chain entry with find() always ends at the default."""
        deepest = chain.build_chain("default", 3)[-1]

        assert deepest.find("a").find("b").find("c") == "default"
        assert deepest.get("a").get("b").get("c") == "default"

    def test_max_levels_allowed(self) -> None:
        assert len(chain.build_chain(None, constants.MAX_LEVELS)) == constants.MAX_LEVELS

    def test_too_many_levels_is_build_error(self) -> None:
        with _pytest.raises(errors.LookupBuildError):
            chain.build_chain(None, constants.MAX_LEVELS + 1)

    def test_zero_levels_is_argument_error(self) -> None:
        with _pytest.raises(errors.LookupArgumentError):
            chain.build_chain(None, 0)
