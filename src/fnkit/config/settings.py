"""
Settings configuration using pydantic-settings.

Loads configuration from:
1. Constructor arguments (highest precedence)
2. Environment variables with FNKIT_ prefix
3. Layered YAML config files (see fnkit.config.sources)
"""

import functools as _functools

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import fnkit.config.sources as sources
import fnkit.constants as constants


class Settings(_pydantic_settings.BaseSettings):
    """
    fnkit configuration settings.

    All settings can be overridden via environment variables with the
    FNKIT_ prefix, e.g. ``FNKIT_PATH_SEPARATOR=/``.
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix=constants.ENV_PREFIX,
        env_nested_delimiter="__",
        extra="ignore",
    )

    path_separator: str = _pydantic.Field(
        default=constants.DEFAULT_PATH_SEPARATOR,
        description="Separator between segments of path strings.",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[_pydantic_settings.BaseSettings],
        init_settings: _pydantic_settings.PydanticBaseSettingsSource,
        env_settings: _pydantic_settings.PydanticBaseSettingsSource,
        dotenv_settings: _pydantic_settings.PydanticBaseSettingsSource,
        file_secret_settings: _pydantic_settings.PydanticBaseSettingsSource,
    ) -> tuple[_pydantic_settings.PydanticBaseSettingsSource, ...]:
        """
        Configure settings sources with precedence:
        1. init_settings (constructor args), highest
        2. env_settings (FNKIT_* env vars)
        3. YAML config layers
        4. (defaults via Field definitions), lowest
        """
        del dotenv_settings, file_secret_settings
        return (
            init_settings,
            env_settings,
            sources.YamlLayersSettingsSource(settings_cls),
        )

    @_pydantic.field_validator("path_separator")
    @classmethod
    def _check_separator(cls, value: str) -> str:
        if value == "":
            raise ValueError("path_separator cannot be empty")
        return value


@_functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide Settings, loading them on first use."""
    return Settings()


def reset_settings() -> None:
    """Forget cached settings so the next get_settings() reloads them."""
    get_settings.cache_clear()

