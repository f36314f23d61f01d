"""
Configuration module for multilookup.

Uses pydantic-settings for environment variable loading.
"""

from multilookup.config.settings import Settings
from multilookup.config.types import BuildConfig, LoggingConfig

__all__ = ["BuildConfig", "LoggingConfig", "Settings"]
