"""Configuration type definitions for multilookup settings.

This module defines the Pydantic models used to represent configuration
sections nested within the main Settings class:

- BuildConfig: defaults applied to every lookup build
- LoggingConfig: log level for the library and the CLI

All types use `extra="allow"` so unknown fields are preserved rather than
silently dropped. Use `get_extra_fields()` to inspect them.
"""

import typing as _typing

import pydantic as _pydantic

import multilookup.constants as constants

# =============================================================================
# Base class with introspection
# =============================================================================


class ConfigBase(_pydantic.BaseModel):
    """
    Base class for all config types.

    Unknown fields are preserved to allow auditing config for typos.
    """

    model_config = _pydantic.ConfigDict(extra="allow")

    def get_extra_fields(self) -> dict[str, _typing.Any]:
        """Return fields that were provided but not in the schema."""
        return dict(self.model_extra) if self.model_extra else {}

    def has_extra_fields(self) -> bool:
        """Check if this config has any unrecognized fields."""
        return bool(self.model_extra)


# =============================================================================
# Build Settings
# =============================================================================


class BuildConfig(ConfigBase):
    """
    Defaults for building lookups.

    Env: MULTILOOKUP_BUILD__*
    """

    duplicate_policy: _typing.Literal["first", "last", "fail"] = "fail"
    """Policy applied when two elements share a key tuple."""

    not_empty: bool = False
    """Reject an empty source collection."""

    max_levels: int = _pydantic.Field(default=constants.MAX_LEVELS, ge=1, le=constants.MAX_LEVELS)
    """Maximum number of key levels accepted by a build."""


# =============================================================================
# Logging Settings
# =============================================================================


class LoggingConfig(ConfigBase):
    """
    Logging settings.

    Env: MULTILOOKUP_LOGGING__*
    """

    level: _typing.Literal["debug", "info", "warning", "error"] = "warning"
    """Log level."""
