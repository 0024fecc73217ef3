"""Tests for typed configuration keys."""

import dataclasses as _dataclasses
import typing as _typing

import pytest as _pytest

import configmanager.frozen as frozen
import configmanager.keys as keys


class TestConfigKey:
    """ConfigKey construction and type inference."""

    def test_is_immutable(self) -> None:
        key = keys.ConfigKey("a.b", "x")

        with _pytest.raises(_dataclasses.FrozenInstanceError):
            key.path = "other"  # type: ignore[misc]

    def test_type_inferred_from_default(self) -> None:
        assert keys.ConfigKey("a", "x").resolved_type is str
        assert keys.ConfigKey("a", 3).resolved_type is int

    def test_explicit_type_wins(self) -> None:
        assert keys.ConfigKey("a", [], list[str]).resolved_type == list[str]

    def test_none_default_accepts_anything(self) -> None:
        assert keys.ConfigKey("a", None).resolved_type is _typing.Any


class TestCoerce:
    """Strict coercion with default fallback."""

    def test_none_gives_default(self) -> None:
        assert keys.ConfigKey("missing.path", "fallback").coerce(None) == "fallback"

    def test_matching_string(self) -> None:
        assert keys.ConfigKey("a", "fallback").coerce("value") == "value"

    def test_matching_int(self) -> None:
        assert keys.ConfigKey("a", 0).coerce(42) == 42

    def test_matching_bool(self) -> None:
        assert keys.ConfigKey("a", False).coerce(True) is True

    def test_string_is_not_parsed_as_int(self) -> None:
        assert keys.ConfigKey("a", 7).coerce("42") == 7

    def test_int_is_not_a_string(self) -> None:
        assert keys.ConfigKey("a", "fallback").coerce(42) == "fallback"

    def test_mapping_is_not_a_string(self) -> None:
        assert keys.ConfigKey("a", "fallback").coerce({"b": 1}) == "fallback"

    def test_list_of_strings(self) -> None:
        key = keys.ConfigKey("a", [], list[str])

        assert key.coerce(["x", "y"]) == ["x", "y"]

    def test_list_with_wrong_element_type(self) -> None:
        key = keys.ConfigKey("a", ["default"], list[str])

        assert key.coerce(["x", 1]) == ["default"]

    def test_frozen_values_are_thawed(self) -> None:
        key = keys.ConfigKey("a", {}, dict[str, _typing.Any])

        result = key.coerce(frozen.freeze({"b": {"c": [1]}}))

        assert result == {"b": {"c": [1]}}
        assert isinstance(result, dict)
        assert isinstance(result["b"], dict)

    def test_any_returns_raw_value(self) -> None:
        assert keys.ConfigKey("a", None).coerce("anything") == "anything"

    def test_optional_type(self) -> None:
        key = keys.ConfigKey("a", None, str | None)

        assert key.coerce("v") == "v"
        assert key.coerce(1) is None

    def test_unvalidatable_type_gives_default(self) -> None:
        class Opaque:
            pass

        fallback = Opaque()

        assert keys.ConfigKey("a", fallback).coerce("value") is fallback

    def test_unhashable_type_gives_default(self) -> None:
        key = keys.ConfigKey("a", "fallback", ["not", "a", "type"])

        assert key.coerce("value") == "fallback"
