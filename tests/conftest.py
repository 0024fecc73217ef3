"""
Shared pytest fixtures for configmanager tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import json as _json
import pathlib as _pathlib
import typing as _typing

import pytest as _pytest

import configmanager.constants as constants

FIXTURES_DIR = _pathlib.Path(__file__).parent / "fixtures" / "configs"


@_pytest.fixture(autouse=True)
def clean_env(monkeypatch: _pytest.MonkeyPatch) -> None:
    """Isolate every test from a CONFIG_MANAGER_ENV set in the real environment."""
    monkeypatch.delenv(constants.ENV_KEY, raising=False)


@_pytest.fixture
def fixtures_dir() -> _pathlib.Path:
    """Directory holding the bundled JSON fixture documents."""
    return FIXTURES_DIR


@_pytest.fixture
def write_json(
    tmp_path: _pathlib.Path,
) -> _typing.Callable[[str, _typing.Any], _pathlib.Path]:
    """
    Factory writing a JSON document under tmp_path.

    Usage:
        def test_something(write_json):
            path = write_json("app.json", {"a": 1})
    """

    def _write(name: str, data: _typing.Any) -> _pathlib.Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(_json.dumps(data), encoding="utf-8")
        return path

    return _write
