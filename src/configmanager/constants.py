"""
Shared constants for configmanager.

File naming conventions and reserved keys live here so that the path
resolver, loader and store agree on them.
"""

# Environment selection
ENV_KEY = "CONFIG_MANAGER_ENV"
"""Process environment variable naming the active environment."""

METADATA_ENV_KEY = "ConfigManagerEnv"
"""Application metadata key consulted when no environment is given."""

# File naming
PRIVATE_FILE_PREFIX = "."
"""Prefix marking a private (locally untracked) override file."""

# Reserved document keys
EXTENDS_KEY = "!extends"
"""Top-level key naming a parent document to inherit from."""
