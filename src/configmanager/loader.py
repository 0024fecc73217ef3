"""
Loading of single configuration documents, including ``!extends`` chains.

A document may name a parent document with the reserved top-level key
``!extends``. The parent is loaded first (recursively, with the same
rules) and the child's keys are deep-merged on top of it:

    # base.json
    {"db": {"host": "localhost", "port": 5432}}

    # app.json
    {"!extends": "base.json", "db": {"host": "db.internal"}}

    # load("app.json")
    {"db": {"host": "db.internal", "port": 5432}, "!extends": "base.json"}

The parent filename is resolved relative to the directory of the document
that names it. The ``!extends`` key itself is left in the result.

Errors:
- ConfigNotFoundError: the file does not exist
- ConfigUnreadableError: the file cannot be read or is not UTF-8 text
- ConfigParseError: invalid content, or the root is not a mapping
- ConfigExtendsError: a parent document failed to load

Cyclic ``!extends`` chains are not detected. They recurse until Python's
recursion limit; try_load() reports that as a ConfigExtendsError.
"""

from __future__ import annotations

import dataclasses as _dataclasses
import logging as _logging
import os as _os
import pathlib as _pathlib
import typing as _typing

import configmanager.constants as constants
import configmanager.formats as formats
import configmanager.merge as merge

_logger = _logging.getLogger(__name__)


class ConfigFileError(Exception):
    """Error loading or parsing a configuration file."""

    def __init__(self, path: _pathlib.Path, message: str) -> None:
        self.path = path
        super().__init__(f"Error in config file {path}: {message}")


class ConfigNotFoundError(ConfigFileError):
    """The configuration file does not exist."""


class ConfigUnreadableError(ConfigFileError):
    """The configuration file exists but cannot be read as UTF-8 text."""


class ConfigParseError(ConfigFileError):
    """The file content is malformed or its root is not a mapping."""


class ConfigExtendsError(ConfigFileError):
    """A document named by ``!extends`` could not be loaded."""


@_dataclasses.dataclass(frozen=True)
class LoadResult:
    """
    Outcome of loading one document.

    Exactly one of ``tree`` and ``error`` is set.
    """

    path: _pathlib.Path
    tree: dict[str, _typing.Any] | None = None
    error: ConfigFileError | None = None

    @property
    def ok(self) -> bool:
        """True if the document loaded."""
        return self.error is None


class ConfigLoader:
    """
    Reads configuration documents in a single format and resolves
    ``!extends`` inheritance.
    """

    def __init__(self, config_format: formats.ConfigFormat | None = None) -> None:
        """
        Initialize the loader.

        Args:
            config_format: Format used for every document, including
                parents. Defaults to JSON.
        """
        self._format = config_format if config_format is not None else formats.JsonFormat()

    @property
    def config_format(self) -> formats.ConfigFormat:
        """The format documents are parsed with."""
        return self._format

    def load(self, path: str | _os.PathLike[str]) -> dict[str, _typing.Any]:
        """
        Load a document and everything it extends.

        Args:
            path: Path to the document.

        Returns:
            The document's tree merged on top of its parent chain.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigUnreadableError: If the file cannot be read or decoded.
            ConfigParseError: If the content is invalid or not a mapping.
            ConfigExtendsError: If a parent document fails to load.
        """
        path = _pathlib.Path(path)
        tree = self._read_tree(path)

        parent_name = tree.get(constants.EXTENDS_KEY)
        if parent_name is None:
            return tree
        if not isinstance(parent_name, str):
            _logger.warning(
                "Ignoring non-string %s value in %s: %r",
                constants.EXTENDS_KEY,
                path,
                parent_name,
            )
            return tree

        parent_path = path.parent / parent_name
        _logger.debug("%s extends %s", path, parent_path)
        try:
            parent_tree = self.load(parent_path)
        except ConfigFileError as e:
            raise ConfigExtendsError(
                path, f"cannot load extended config {parent_path}: {e}"
            ) from e

        return merge.deep_merge(parent_tree, tree)

    def try_load(self, path: str | _os.PathLike[str]) -> LoadResult:
        """
        Load a document, reporting failure as a value instead of raising.

        Returns:
            LoadResult with either the tree or the error set.
        """
        path = _pathlib.Path(path)
        try:
            return LoadResult(path=path, tree=self.load(path))
        except ConfigFileError as e:
            return LoadResult(path=path, error=e)
        except RecursionError as e:
            error = ConfigExtendsError(path, f"{constants.EXTENDS_KEY} chain too deep (cycle?)")
            error.__cause__ = e
            return LoadResult(path=path, error=error)

    def _read_tree(self, path: _pathlib.Path) -> dict[str, _typing.Any]:
        """
        Read and parse one document without following ``!extends``.

        Raises:
            ConfigNotFoundError, ConfigUnreadableError, ConfigParseError
        """
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise ConfigNotFoundError(path, "file not found") from e
        except PermissionError as e:
            raise ConfigUnreadableError(path, f"permission denied: {e}") from e
        except OSError as e:
            raise ConfigUnreadableError(path, f"cannot read file: {e}") from e
        except UnicodeDecodeError as e:
            raise ConfigUnreadableError(path, f"not valid UTF-8 text: {e}") from e

        try:
            parsed = self._format.parse(content)
        except ValueError as e:
            raise ConfigParseError(path, f"invalid {self._format.name}: {e}") from e

        if not isinstance(parsed, dict):
            type_name = type(parsed).__name__
            raise ConfigParseError(
                path,
                f"config root must be a mapping, got {type_name}",
            )

        return parsed
