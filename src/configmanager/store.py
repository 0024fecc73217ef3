"""
Layered configuration store.

ConfigStore ties path resolution, document loading and deep merging
together. Given ``config/app.json`` and environment ``staging``, the
candidate layers are (highest precedence first):

1. config/.app.json          private override (git-ignored)
2. config/app.staging.json   environment-specific
3. config/app.json           defaults

Layers are loaded lowest precedence first and deep-merged, so a key set in
a higher layer wins while untouched nested keys are inherited.

The store is fail-open: missing files are skipped, and files that cannot be
read or parsed are logged at debug level and skipped too. Lookups never
raise; absence (or a typed key's default) is the only failure signal.

Effective environment (first non-empty wins):
1. ``environment`` constructor argument
2. CONFIG_MANAGER_ENV process environment variable
3. ``metadata["ConfigManagerEnv"]`` (application metadata)
"""

from __future__ import annotations

import collections.abc as _abc
import logging as _logging
import os as _os
import pathlib as _pathlib
import typing as _typing

import configmanager.constants as constants
import configmanager.formats as formats
import configmanager.frozen as frozen
import configmanager.keys as keys
import configmanager.loader as loader
import configmanager.merge as merge
import configmanager.paths as paths
import configmanager.settings as settings

_logger = _logging.getLogger(__name__)

T = _typing.TypeVar("T")


def resolve_environment(
    environment: str | None = None,
    metadata: _abc.Mapping[str, _typing.Any] | None = None,
) -> str | None:
    """
    Determine the effective environment name.

    Args:
        environment: Explicit environment (highest precedence).
        metadata: Application metadata consulted last.

    Returns:
        The first non-empty source, or None.
    """
    if environment:
        return environment

    from_process = settings.ManagerSettings().env
    if from_process:
        return from_process

    if metadata is not None:
        from_metadata = metadata.get(constants.METADATA_ENV_KEY)
        if isinstance(from_metadata, str) and from_metadata:
            return from_metadata

    return None


class ConfigStore:
    """
    Read-only configuration merged from layered files.

    Example:
        >>> store = ConfigStore("config/app.json", environment="staging")
        >>> store.get("db.host")
        'db.staging.internal'
        >>> store.get(ConfigKey("db.port", 5432))
        5432
    """

    def __init__(
        self,
        base_path: str | _os.PathLike[str] | None = None,
        environment: str | None = None,
        *,
        metadata: _abc.Mapping[str, _typing.Any] | None = None,
        config_format: formats.ConfigFormat | None = None,
        config_loader: loader.ConfigLoader | None = None,
    ) -> None:
        """
        Resolve candidates and load the configuration.

        Args:
            base_path: Path to the default config file. None gives an
                empty store.
            environment: Explicit environment name.
            metadata: Application metadata, consulted for the environment
                when neither the argument nor the process environment sets
                one.
            config_format: Format for all documents. Defaults to one chosen
                from the base path's extension.
            config_loader: Loader to use instead of the default one (its
                format then takes effect).
        """
        self._candidate_paths: list[_pathlib.Path] = []
        self._loaded_paths: list[_pathlib.Path] = []
        self._configuration: frozen.FrozenMapping | None = None
        self._environment: str | None = None

        if base_path is None:
            return

        self._environment = resolve_environment(environment, metadata)

        if config_loader is None:
            if config_format is None:
                config_format = formats.format_for_path(base_path)
            config_loader = loader.ConfigLoader(config_format)

        self._candidate_paths = paths.resolve_candidate_paths(base_path, self._environment)
        self._load_candidates(config_loader)

    def _load_candidates(self, config_loader: loader.ConfigLoader) -> None:
        """Load every existing candidate, lowest precedence first, and merge."""
        layers: list[dict[str, _typing.Any]] = []

        for path in reversed(self._candidate_paths):
            result = config_loader.try_load(path)
            if isinstance(result.error, loader.ConfigNotFoundError):
                continue
            if result.tree is None:
                _logger.debug("Skipping config layer %s: %s", path, result.error)
                continue

            _logger.debug("Loaded config layer %s", path)
            layers.append(result.tree)
            self._loaded_paths.insert(0, path)

        merged = merge.merge_layers(layers)
        if merged is not None:
            self._configuration = frozen.FrozenMapping(merged)

    @property
    def candidate_paths(self) -> list[_pathlib.Path]:
        """All candidate paths, highest precedence first."""
        return list(self._candidate_paths)

    @property
    def loaded_paths(self) -> list[_pathlib.Path]:
        """Candidates that contributed to the configuration, highest first."""
        return list(self._loaded_paths)

    @property
    def environment(self) -> str | None:
        """The effective environment, or None."""
        return self._environment

    @property
    def configuration(self) -> frozen.FrozenMapping | None:
        """The merged configuration, or None if nothing was loaded."""
        return self._configuration

    @_typing.overload
    def get(self, key: str) -> _typing.Any: ...

    @_typing.overload
    def get(self, key: keys.ConfigKey[T]) -> T: ...

    def get(self, key: str | keys.ConfigKey[_typing.Any]) -> _typing.Any:
        """
        Look up a value by dotted path or typed key.

        Args:
            key: Dotted path ("db.host") or ConfigKey.

        Returns:
            For a path: the value (containers as read-only views), or None
            if any segment is missing or descends into a non-mapping.
            For a ConfigKey: the value coerced to the key's type, or the
            key's default.
        """
        if isinstance(key, keys.ConfigKey):
            return key.coerce(self._lookup(key.path))
        return self._lookup(key)

    def _lookup(self, dotted_path: str) -> _typing.Any:
        # Empty segments are dropped: "a..b" == "a.b", "" is the root
        node: _typing.Any = self._configuration
        for segment in (part for part in dotted_path.split(".") if part):
            if not isinstance(node, _abc.Mapping):
                return None
            node = node.get(segment)
        return node

    def to_dict(self) -> dict[str, _typing.Any]:
        """Return a mutable deep copy of the configuration ({} if none)."""
        if self._configuration is None:
            return {}
        return frozen.thaw(self._configuration)

    def __repr__(self) -> str:
        return (
            f"ConfigStore(environment={self._environment!r}, "
            f"loaded={[str(p) for p in self._loaded_paths]!r})"
        )
