"""
Shared pytest fixtures for multilookup tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import os as _os
import typing as _typing
import unittest.mock as _mock

import pytest as _pytest

# Environment keys that should be cleared for isolated tests
ENV_KEYS_TO_CLEAR = [
    "MULTILOOKUP_ENV_FILE",
    "MULTILOOKUP_BUILD__DUPLICATE_POLICY",
    "MULTILOOKUP_BUILD__NOT_EMPTY",
    "MULTILOOKUP_BUILD__MAX_LEVELS",
    "MULTILOOKUP_LOGGING__LEVEL",
]


class CountyCode:
    """County FIPS code record read through get_* accessors."""

    def __init__(self, code: int, state: str | None, county: str | None) -> None:
        self._code = code
        self._state = state
        self._county = county

    def get_code(self) -> int:
        return self._code

    def get_state(self) -> str | None:
        return self._state

    def get_county(self) -> str | None:
        return self._county

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CountyCode):
            return NotImplemented
        return (self._code, self._state, self._county) == (
            other._code,
            other._state,
            other._county,
        )

    def __hash__(self) -> int:
        return hash((self._code, self._state, self._county))

    def __repr__(self) -> str:
        return f"CountyCode({self._code}, {self._state!r}, {self._county!r})"


DEFAULT_CODE = CountyCode(0, None, None)

COUNTY_CODES = [
    CountyCode(1001, "Alabama", "Autauga"),
    CountyCode(1003, "Alabama", "Baldwin"),
    CountyCode(1063, "Alabama", "Greene"),
    CountyCode(1081, "Alabama", "Lee"),
    CountyCode(28001, "Mississippi", "Adams"),
    CountyCode(28041, "Mississippi", "Greene"),
    CountyCode(28081, "Mississippi", "Lee"),
    CountyCode(34021, "New Jersey", "Mercer"),
]

# Same key tuple, different values
DUPLICATE_CODES = [
    CountyCode(100, "New Jersey", "Mercer"),
    CountyCode(200, "New Jersey", "Mercer"),
]


@_pytest.fixture
def county_code_cls() -> type[CountyCode]:
    """The CountyCode record class."""
    return CountyCode


@_pytest.fixture
def codes() -> list[CountyCode]:
    """A small set of county codes with no duplicate (state, county)."""
    return list(COUNTY_CODES)


@_pytest.fixture
def duplicate_codes() -> list[CountyCode]:
    """Two codes for New Jersey / Mercer."""
    return list(DUPLICATE_CODES)


@_pytest.fixture
def default_code() -> CountyCode:
    """Default value used for missing keys."""
    return DEFAULT_CODE


@_pytest.fixture
def county_records() -> list[dict[str, _typing.Any]]:
    """Plain dict records, as loaded from YAML or JSON."""
    return [
        {"state": "MS", "county": "Greene", "code": 28041},
        {"state": "AL", "county": "Lee", "code": 1081},
    ]


@_pytest.fixture
def clean_env() -> _typing.Generator[None, None, None]:
    """Run with MULTILOOKUP_* settings removed from the environment."""
    env = {k: v for k, v in _os.environ.items() if k not in ENV_KEYS_TO_CLEAR}
    with _mock.patch.dict(_os.environ, env, clear=True):
        yield
