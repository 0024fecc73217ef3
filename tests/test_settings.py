"""Tests for process-environment settings."""

import pydantic_settings as _pydantic_settings
import pytest as _pytest

import configmanager.constants as constants
import configmanager.settings as settings


class TestManagerSettings:
    def test_is_pydantic_settings(self) -> None:
        assert issubclass(settings.ManagerSettings, _pydantic_settings.BaseSettings)

    def test_unset_is_none(self) -> None:
        assert settings.ManagerSettings().env is None

    def test_reads_env_var(self, monkeypatch: _pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(constants.ENV_KEY, "staging")

        assert settings.ManagerSettings().env == "staging"

    def test_empty_is_unset(self, monkeypatch: _pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(constants.ENV_KEY, "")

        assert settings.ManagerSettings().env is None

    def test_field_name_variable_is_ignored(self, monkeypatch: _pytest.MonkeyPatch) -> None:
        """Only CONFIG_MANAGER_ENV selects the environment, never ENV."""
        monkeypatch.setenv("ENV", "prod")
        monkeypatch.setenv("env", "prod")

        assert settings.ManagerSettings().env is None

    def test_lookup_is_case_sensitive(self, monkeypatch: _pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(constants.ENV_KEY.lower(), "prod")

        assert settings.ManagerSettings().env is None
