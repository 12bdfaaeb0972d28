"""Custom pydantic-settings source for fnkit configuration.

Layers (in precedence order, highest first):
1. Environment variables (handled by pydantic-settings)
2. Explicit config file named by FNKIT_CONFIG_FILE
3. User config: ~/.config/fnkit/config.yaml (or FNKIT_CONFIG_DIR)

YAML layers are combined with fnkit.structural.merge, so nested mappings
merge and everything else is overridden by the higher layer.
"""

import collections.abc as _abc
import logging as _logging
import os as _os
import pathlib as _pathlib
import typing as _typing

import pydantic.fields as _pydantic_fields
import pydantic_settings as _pydantic_settings
import yaml as _yaml

import fnkit.constants as constants
import fnkit.errors as errors
import fnkit.structural as structural

_logger = _logging.getLogger(__name__)


def get_user_config_path() -> _pathlib.Path:
    """
    Get the path to the user config file.

    Respects FNKIT_CONFIG_DIR environment variable if set,
    otherwise uses XDG standard path.
    """
    if config_dir := _os.environ.get(constants.ENV_CONFIG_DIR):
        return _pathlib.Path(config_dir) / "config.yaml"
    return _pathlib.Path.home() / ".config" / "fnkit" / "config.yaml"


def get_explicit_config_path() -> _pathlib.Path | None:
    """Get the config file named by FNKIT_CONFIG_FILE, if any."""
    if config_file := _os.environ.get(constants.ENV_CONFIG_FILE):
        return _pathlib.Path(config_file)
    return None


def load_yaml_file(path: _pathlib.Path) -> dict[str, _typing.Any] | None:
    """
    Load a YAML file and return its contents as a dict.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed YAML contents, or None if the file is empty.

    Raises:
        ConfigFileError: If the file cannot be read, is malformed YAML,
            or contains non-dict content at the top level.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise errors.ConfigFileError(path, f"cannot read file: {e}") from e

    try:
        parsed = _yaml.safe_load(content)
    except _yaml.YAMLError as e:
        raise errors.ConfigFileError(path, f"invalid YAML: {e}") from e

    if parsed is None:
        return None
    if not isinstance(parsed, dict):
        raise errors.ConfigFileError(
            path, f"expected a mapping at top level, got {type(parsed).__name__}"
        )
    return parsed


class YamlLayersSettingsSource(_pydantic_settings.PydanticBaseSettingsSource):
    """
    Settings source that loads and merges layered YAML config files.

    Missing files are skipped. The merged result is a plain dict that
    pydantic validates like any other source.
    """

    def __init__(
        self,
        settings_cls: type[_pydantic_settings.BaseSettings],
        *,
        user_config_path: _pathlib.Path | None = None,
        explicit_config_path: _pathlib.Path | None = None,
    ) -> None:
        """
        Initialize the settings source.

        Args:
            settings_cls: The Settings class being populated.
            user_config_path: Override path for the user config file (for testing).
            explicit_config_path: Override path for the explicit config file.
                If not provided, FNKIT_CONFIG_FILE is consulted.
        """
        super().__init__(settings_cls)
        self._user_config_path = user_config_path or get_user_config_path()
        self._explicit_config_path = explicit_config_path or get_explicit_config_path()
        self.loaded_files: list[_pathlib.Path] = []
        self._data = self._load_layers()

    def _load_layers(self) -> dict[str, _typing.Any]:
        """Merge config files from lowest to highest precedence."""
        merged: dict[str, _typing.Any] = {}
        for path in (self._user_config_path, self._explicit_config_path):
            if path is None:
                continue
            if not path.exists():
                _logger.debug("Config file %s not found, skipping", path)
                continue
            content = load_yaml_file(path)
            if content:
                merged = structural.merge(merged, content)
                self.loaded_files.append(path)
                _logger.debug("Loaded config file %s", path)
        return merged

    def get_field_value(
        self,
        field: _pydantic_fields.FieldInfo,  # noqa: ARG002 - required by pydantic-settings interface
        field_name: str,
    ) -> tuple[_typing.Any, str, bool]:
        """
        Get value for a field from the merged YAML layers.

        Returns:
            Tuple of (value, field_name, is_complex).
        """
        value = self._data.get(field_name)
        return value, field_name, isinstance(value, (_abc.Mapping, list))

    def __call__(self) -> dict[str, _typing.Any]:
        """Return merged config as a plain dict for pydantic validation."""
        return dict(self._data)
