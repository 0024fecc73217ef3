"""
Candidate path resolution.

Given a base configuration path, compute every file location that may
contribute to the final configuration, highest priority first:

1. Private override: ``<dir>/.<name>.<ext>`` (typically git-ignored)
2. Environment file: ``<dir>/<name>.<env>.<ext>`` (only with an environment)
3. Base file:        ``<dir>/<name>.<ext>``

Resolution is pure string manipulation; nothing here touches the disk.
"""

from __future__ import annotations

import logging as _logging
import os as _os
import pathlib as _pathlib

import configmanager.constants as constants

_logger = _logging.getLogger(__name__)


def private_path(base_path: _pathlib.Path) -> _pathlib.Path:
    """Return the private override variant of a base path."""
    return base_path.with_name(constants.PRIVATE_FILE_PREFIX + base_path.name)


def environment_path(base_path: _pathlib.Path, environment: str) -> _pathlib.Path:
    """
    Return the environment-qualified variant of a base path.

    The environment is inserted as an extra segment just before the
    original extension: ``app.json`` + ``staging`` -> ``app.staging.json``.
    A path without an extension simply gains one: ``app`` -> ``app.staging``.
    """
    return base_path.with_name(f"{base_path.stem}.{environment}{base_path.suffix}")


def resolve_candidate_paths(
    base_path: str | _os.PathLike[str],
    environment: str | None = None,
) -> list[_pathlib.Path]:
    """
    Compute candidate config file paths, highest priority first.

    Args:
        base_path: Path to the default configuration file.
        environment: Optional environment name. Empty means none.

    Returns:
        List of candidate paths. The base path is always last. If the
        base path has no usable filename (e.g. "", "/" or ".."), it is the
        only entry. An environment that cannot form a filename (e.g. one
        containing a path separator) contributes no candidate.
    """
    path = _pathlib.Path(base_path)
    if path.name in ("", ".", ".."):
        return [path]

    candidates = [private_path(path)]
    if environment:
        try:
            candidates.append(environment_path(path, environment))
        except ValueError:
            _logger.debug("Environment %r cannot form a filename; skipping", environment)
    candidates.append(path)

    _logger.debug(
        "Resolved %d candidate(s) for %s (environment=%r)",
        len(candidates),
        path,
        environment,
    )
    return candidates
