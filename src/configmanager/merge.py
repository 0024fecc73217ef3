"""
Deep merging of configuration trees.

Merge rules ("overlay wins"):
- mapping + mapping -> merged key by key, recursively
- anything else     -> overlay replaces base (lists are NOT concatenated)

A key whose type changes between layers (e.g. list in the base, mapping in
the overlay) is not an error; the overlay value simply wins.
"""

from __future__ import annotations

import collections.abc as _abc
import copy as _copy
import typing as _typing


def deep_merge(
    base: _abc.Mapping[str, _typing.Any],
    overlay: _abc.Mapping[str, _typing.Any],
) -> dict[str, _typing.Any]:
    """
    Deep merge two mappings, with overlay taking priority.

    Neither input is modified. Values taken from the overlay are deep
    copied; values kept from the base are shared with it.

    Args:
        base: The lower-priority mapping.
        overlay: The higher-priority mapping.

    Returns:
        New merged dict.
    """
    result = dict(base)
    for key, value in overlay.items():
        current = result.get(key)
        if (
            key in result
            and isinstance(current, _abc.Mapping)
            and isinstance(value, _abc.Mapping)
        ):
            result[key] = deep_merge(current, value)
        else:
            result[key] = _copy.deepcopy(value)
    return result


def merge_layers(
    layers: _abc.Iterable[_abc.Mapping[str, _typing.Any]],
) -> dict[str, _typing.Any] | None:
    """
    Fold layers together, lowest priority first.

    Returns:
        The merged dict, or None if no layers were given.
    """
    merged: dict[str, _typing.Any] | None = None
    for layer in layers:
        merged = deep_merge(merged if merged is not None else {}, layer)
    return merged
