"""
Shared constants for fnkit.

This module provides a single source of truth for default values
that are used across multiple modules.
"""

DEFAULT_PATH_SEPARATOR = "."
"""Separator between segments of a path string (``"a.b.0"``)."""

ENV_PREFIX = "FNKIT_"
"""Prefix for environment variables read by the settings loader."""

ENV_CONFIG_FILE = "FNKIT_CONFIG_FILE"
"""Environment variable naming an explicit YAML settings file."""

ENV_CONFIG_DIR = "FNKIT_CONFIG_DIR"
"""Environment variable overriding the user config directory."""
