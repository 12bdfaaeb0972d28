"""
Configuration module for fnkit.

Uses pydantic-settings for environment variable and YAML loading.
"""

from fnkit.config.settings import Settings, get_settings, reset_settings

__all__ = ["Settings", "get_settings", "reset_settings"]
