"""
Read-only views over configuration trees.

A loaded configuration is immutable: lookups hand out FrozenMapping and
FrozenSequence views instead of the underlying dicts and lists, and nested
containers are wrapped as they are reached. Use thaw() to get an
independent, mutable copy.
"""

from __future__ import annotations

import collections.abc as _abc
import copy as _copy
import typing as _typing


class FrozenMapping(_abc.Mapping[str, _typing.Any]):
    """
    Read-only view of a configuration mapping.

    Example:
        >>> view = FrozenMapping({"db": {"hosts": ["a", "b"]}})
        >>> view["db"]["hosts"][0]
        'a'
        >>> view["db"]["port"] = 5432  # TypeError: immutable
    """

    __slots__ = ("_data",)

    def __init__(self, data: _abc.Mapping[str, _typing.Any]) -> None:
        # Wrapped by reference; the view never mutates it.
        self._data = data

    def __getitem__(self, key: str) -> _typing.Any:
        return freeze(self._data[key])

    def __iter__(self) -> _typing.Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"FrozenMapping({self._data!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, _abc.Mapping):
            return dict(self._data) == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]


class FrozenSequence(_abc.Sequence[_typing.Any]):
    """Read-only view of a configuration list."""

    __slots__ = ("_data",)

    def __init__(self, data: _abc.Sequence[_typing.Any]) -> None:
        self._data = data

    @_typing.overload
    def __getitem__(self, index: int) -> _typing.Any: ...

    @_typing.overload
    def __getitem__(self, index: slice) -> FrozenSequence: ...

    def __getitem__(self, index: int | slice) -> _typing.Any:
        value = self._data[index]
        if isinstance(index, slice):
            return FrozenSequence(value)
        return freeze(value)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"FrozenSequence({self._data!r})"

    def __eq__(self, other: object) -> bool:
        # Strings are sequences too, but never equal to a config list
        if isinstance(other, str):
            return NotImplemented
        if isinstance(other, _abc.Sequence):
            return list(self._data) == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]


def freeze(value: _typing.Any) -> _typing.Any:
    """
    Wrap dicts and lists in read-only views; return scalars unchanged.

    Example:
        >>> freeze({"a": [1, 2]})
        FrozenMapping({'a': [1, 2]})
        >>> freeze("text")
        'text'
    """
    if isinstance(value, (FrozenMapping, FrozenSequence)):
        return value
    if isinstance(value, _abc.Mapping):
        return FrozenMapping(value)
    if isinstance(value, _abc.Sequence) and not isinstance(value, (str, bytes, tuple)):
        return FrozenSequence(value)
    return value


def thaw(value: _typing.Any) -> _typing.Any:
    """
    Return an independent plain-Python copy of a (possibly frozen) value.

    FrozenMapping becomes dict, FrozenSequence becomes list, recursively.
    """
    if isinstance(value, FrozenMapping):
        return {key: thaw(item) for key, item in value._data.items()}
    if isinstance(value, FrozenSequence):
        return [thaw(item) for item in value._data]
    return _copy.deepcopy(value)
