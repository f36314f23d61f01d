"""Tests for configuration settings."""

import logging as _logging
import os as _os
import pathlib as _pathlib
import unittest.mock as _mock

import pydantic as _pydantic
import pytest as _pytest

import multilookup.config as config
import multilookup.config.types as types


@_pytest.mark.usefixtures("clean_env")
class TestSettingsDefaults:
    """Settings default values when the environment is clean."""

    def test_default_duplicate_policy_is_fail(self) -> None:
        settings = config.Settings.construct_without_dotenv()
        assert settings.build.duplicate_policy == "fail"

    def test_default_not_empty_is_false(self) -> None:
        settings = config.Settings.construct_without_dotenv()
        assert settings.build.not_empty is False

    def test_default_max_levels_is_ten(self) -> None:
        settings = config.Settings.construct_without_dotenv()
        assert settings.build.max_levels == 10

    def test_default_log_level_is_warning(self) -> None:
        settings = config.Settings.construct_without_dotenv()
        assert settings.logging.level == "warning"
        assert settings.log_level == _logging.WARNING


@_pytest.mark.usefixtures("clean_env")
class TestSettingsEnvironment:
    """Nested overrides through MULTILOOKUP_* variables."""

    def test_duplicate_policy_from_env(self) -> None:
        with _mock.patch.dict(_os.environ, {"MULTILOOKUP_BUILD__DUPLICATE_POLICY": "last"}):
            settings = config.Settings.construct_without_dotenv()
        assert settings.build.duplicate_policy == "last"

    def test_not_empty_from_env(self) -> None:
        with _mock.patch.dict(_os.environ, {"MULTILOOKUP_BUILD__NOT_EMPTY": "true"}):
            settings = config.Settings.construct_without_dotenv()
        assert settings.build.not_empty is True

    def test_log_level_from_env(self) -> None:
        with _mock.patch.dict(_os.environ, {"MULTILOOKUP_LOGGING__LEVEL": "debug"}):
            settings = config.Settings.construct_without_dotenv()
        assert settings.log_level == _logging.DEBUG

    def test_invalid_policy_from_env_rejected(self) -> None:
        with (
            _mock.patch.dict(_os.environ, {"MULTILOOKUP_BUILD__DUPLICATE_POLICY": "merge"}),
            _pytest.raises(_pydantic.ValidationError),
        ):
            config.Settings.construct_without_dotenv()

    def test_constructor_overrides_env(self) -> None:
        with _mock.patch.dict(_os.environ, {"MULTILOOKUP_BUILD__DUPLICATE_POLICY": "last"}):
            settings = config.Settings.construct_without_dotenv(
                build=types.BuildConfig(duplicate_policy="first")
            )
        assert settings.build.duplicate_policy == "first"


@_pytest.mark.usefixtures("clean_env")
class TestEnvFile:
    """The .env file is only read when named explicitly."""

    def test_env_file_named_by_variable(self, tmp_path: _pathlib.Path) -> None:
        path = tmp_path / "lookup.env"
        path.write_text("MULTILOOKUP_BUILD__DUPLICATE_POLICY=first\n")

        with _mock.patch.dict(_os.environ, {"MULTILOOKUP_ENV_FILE": str(path)}):
            env_file = config.settings._get_env_file()
            settings = config.Settings(_env_file=env_file)  # type: ignore[call-arg]

        assert settings.build.duplicate_policy == "first"

    def test_missing_env_file_is_ignored(self, tmp_path: _pathlib.Path) -> None:
        with _mock.patch.dict(_os.environ, {"MULTILOOKUP_ENV_FILE": str(tmp_path / "none.env")}):
            assert config.settings._get_env_file() is None

    def test_no_variable_means_no_env_file(self) -> None:
        assert config.settings._get_env_file() is None


class TestBuildConfig:
    """Validation of the build section."""

    def test_max_levels_upper_bound(self) -> None:
        with _pytest.raises(_pydantic.ValidationError):
            types.BuildConfig(max_levels=11)

    def test_max_levels_lower_bound(self) -> None:
        with _pytest.raises(_pydantic.ValidationError):
            types.BuildConfig(max_levels=0)

    def test_unknown_policy_rejected(self) -> None:
        with _pytest.raises(_pydantic.ValidationError):
            types.BuildConfig(duplicate_policy="merge")  # type: ignore[arg-type]

    def test_extra_fields_preserved(self) -> None:
        """Typos are kept so they can be reported rather than silently dropped."""
        build = types.BuildConfig(duplicat_policy="last")  # type: ignore[call-arg]

        assert build.has_extra_fields()
        assert build.get_extra_fields() == {"duplicat_policy": "last"}
        assert build.duplicate_policy == "fail"

    def test_no_extra_fields(self) -> None:
        build = types.BuildConfig()

        assert not build.has_extra_fields()
        assert build.get_extra_fields() == {}


class TestConfigureLogging:
    """Applying the log level to the stdlib root logger."""

    def test_verbose_forces_debug(self) -> None:
        settings = config.Settings.construct_without_dotenv()

        with _mock.patch.object(_logging, "basicConfig") as basic_config:
            settings.configure_logging(verbose=True)

        assert basic_config.call_args.kwargs["level"] == _logging.DEBUG

    def test_uses_configured_level(self) -> None:
        settings = config.Settings.construct_without_dotenv(
            logging=types.LoggingConfig(level="error")
        )

        with _mock.patch.object(_logging, "basicConfig") as basic_config:
            settings.configure_logging()

        assert basic_config.call_args.kwargs["level"] == _logging.ERROR
