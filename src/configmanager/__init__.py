"""
configmanager - layered JSON/YAML configuration files.

Loads a base config file plus its environment-specific and private
override variants, follows ``!extends`` inheritance, deep-merges the
layers and exposes the result through dotted-path and typed-key lookups.

Example:
    >>> import configmanager
    >>> store = configmanager.ConfigStore("config/app.json", "staging")
    >>> store.get("db.host")
    'db.staging.internal'
"""

import importlib.metadata as _metadata

# Version lives in pyproject.toml; read it back from the installed metadata
_raw_version = _metadata.version("configmanager")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)

from configmanager.keys import ConfigKey  # noqa: E402
from configmanager.loader import (  # noqa: E402
    ConfigExtendsError,
    ConfigFileError,
    ConfigLoader,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigUnreadableError,
    LoadResult,
)
from configmanager.merge import deep_merge  # noqa: E402
from configmanager.paths import resolve_candidate_paths  # noqa: E402
from configmanager.store import ConfigStore  # noqa: E402

__all__ = [
    "__version__",
    "__version_info__",
    "ConfigExtendsError",
    "ConfigFileError",
    "ConfigKey",
    "ConfigLoader",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigStore",
    "ConfigUnreadableError",
    "LoadResult",
    "deep_merge",
    "resolve_candidate_paths",
]
