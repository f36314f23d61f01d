"""
Settings configuration using pydantic-settings.

Loads configuration from:
1. Constructor arguments (highest precedence)
2. Environment variables with MULTILOOKUP_ prefix
3. .env file named by MULTILOOKUP_ENV_FILE (if set and present)

Nested config uses double underscore delimiter:
  MULTILOOKUP_BUILD__DUPLICATE_POLICY=last
  MULTILOOKUP_LOGGING__LEVEL=debug
"""

import logging as _logging
import os as _os
import pathlib as _pathlib
import typing as _typing

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import multilookup.config.types as types


def _get_env_file() -> str | None:
    """Determine which .env file to load.

    Only an explicit MULTILOOKUP_ENV_FILE is honored; a library should
    not pick up an arbitrary .env from the working directory.
    """
    if env_file := _os.environ.get("MULTILOOKUP_ENV_FILE"):
        if _pathlib.Path(env_file).exists():
            return env_file
    return None


class Settings(_pydantic_settings.BaseSettings):
    """
    multilookup configuration settings.

    All settings can be overridden via environment variables with the
    MULTILOOKUP_ prefix. For nested config, use double underscore:
    MULTILOOKUP_BUILD__NOT_EMPTY=true
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix="MULTILOOKUP_",
        env_file=_get_env_file(),
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="allow",
    )

    @classmethod
    def construct_without_dotenv(cls, **kwargs: _typing.Any) -> "Settings":
        """Create Settings from environment variables only, without loading .env file.

        Useful for test isolation.
        """
        return cls(_env_file=None, **kwargs)  # type: ignore[call-arg]

    build: types.BuildConfig = _pydantic.Field(default_factory=types.BuildConfig)
    """Defaults applied to lookup builds."""

    logging: types.LoggingConfig = _pydantic.Field(default_factory=types.LoggingConfig)
    """Logging settings."""

    @property
    def log_level(self) -> int:
        """Numeric log level for the stdlib logging module."""
        return _logging.getLevelName(self.logging.level.upper())  # type: ignore[no-any-return]

    def configure_logging(self, verbose: bool = False) -> None:
        """Configure the root logger from these settings.

        Args:
            verbose: Force DEBUG regardless of the configured level.
        """
        _logging.basicConfig(
            level=_logging.DEBUG if verbose else self.log_level,
            format="%(levelname)s %(name)s: %(message)s",
        )
