"""
Typed configuration keys.

A ConfigKey pairs a dotted path with a default value and is normally
declared once, as a module-level constant:

    TIMEOUT = ConfigKey("http.timeout", 30)
    HOSTS = ConfigKey("db.hosts", [], list[str])

    store.get(TIMEOUT)  # -> int, never raises

Coercion is strict. A value is returned only when it already has the
requested type (pydantic strict mode); anything else, including a missing
key or JSON null, yields the key's default. A string "30" requested as an
int is NOT parsed.
"""

from __future__ import annotations

import dataclasses as _dataclasses
import functools as _functools
import typing as _typing

import pydantic as _pydantic

import configmanager.frozen as frozen

T = _typing.TypeVar("T")


@_functools.lru_cache(maxsize=None)
def _adapter(value_type: _typing.Any) -> _pydantic.TypeAdapter[_typing.Any]:
    """Build (once per type) a validator for value_type."""
    return _pydantic.TypeAdapter(value_type)


@_dataclasses.dataclass(frozen=True)
class ConfigKey(_typing.Generic[T]):
    """
    Immutable (path, default) pair for typed lookups.

    Args:
        path: Dotted key path, e.g. "server.port".
        default: Value returned when the path is missing or has the
            wrong type.
        value_type: Type to validate against. Defaults to the type of
            ``default``; with a None default and no type, any value is
            accepted.
    """

    path: str
    default: T
    value_type: _typing.Any = None

    @property
    def resolved_type(self) -> _typing.Any:
        """The type looked-up values are validated against."""
        if self.value_type is not None:
            return self.value_type
        if self.default is None:
            return _typing.Any
        return type(self.default)

    def coerce(self, value: _typing.Any) -> T:
        """
        Convert a looked-up value to this key's type, or fall back.

        Args:
            value: Raw (possibly frozen) value from a dotted lookup.

        Returns:
            The validated value, or ``default`` if value is None or not
            of a compatible type.
        """
        if value is None:
            return self.default

        plain = frozen.thaw(value)
        value_type = self.resolved_type
        if value_type is _typing.Any:
            return _typing.cast(T, plain)

        try:
            adapter = _adapter(value_type)
        except (_pydantic.PydanticSchemaGenerationError, TypeError):
            # Not a type pydantic can validate (or not hashable for the cache)
            return self.default

        try:
            return _typing.cast(T, adapter.validate_python(plain, strict=True))
        except _pydantic.ValidationError:
            return self.default
