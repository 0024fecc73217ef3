"""
Serialization formats for configuration documents.

A format turns document text into a generic tree of dicts, lists and
scalars. The loader decides whether the root is acceptable; formats only
parse.

Formats:
- JsonFormat: JSON documents (default)
- YamlFormat: YAML documents, loaded with yaml.safe_load
"""

from __future__ import annotations

import json as _json
import os as _os
import pathlib as _pathlib
import typing as _typing

import yaml as _yaml

YAML_SUFFIXES = frozenset({".yaml", ".yml"})


class ConfigFormat(_typing.Protocol):
    """Parser for one tree-structured serialization format."""

    name: str

    def parse(self, text: str) -> _typing.Any:
        """
        Parse document text into a generic tree.

        Raises:
            ValueError: If the text is not a valid document.
        """
        ...


class JsonFormat:
    """JSON documents via the standard library parser."""

    name = "json"

    def parse(self, text: str) -> _typing.Any:
        # JSONDecodeError is a ValueError subclass
        return _json.loads(text)


class YamlFormat:
    """YAML documents. Only plain data is constructed (no Python tags)."""

    name = "yaml"

    def parse(self, text: str) -> _typing.Any:
        try:
            return _yaml.safe_load(text)
        except _yaml.YAMLError as e:
            raise ValueError(str(e)) from e


def format_for_path(path: str | _os.PathLike[str]) -> ConfigFormat:
    """Pick a format from a file's extension, falling back to JSON."""
    if _pathlib.Path(path).suffix.lower() in YAML_SUFFIXES:
        return YamlFormat()
    return JsonFormat()
