"""
Shared pytest fixtures for fnkit tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import pathlib as _pathlib
import typing as _typing

import pytest as _pytest

import fnkit.config as config

# Environment keys that should be cleared for isolated tests
ENV_KEYS_TO_CLEAR = [
    "FNKIT_PATH_SEPARATOR",
    "FNKIT_CONFIG_FILE",
    "FNKIT_CONFIG_DIR",
]


@_pytest.fixture(autouse=True)
def isolated_settings(
    monkeypatch: _pytest.MonkeyPatch,
    tmp_path: _pathlib.Path,
) -> _typing.Iterator[None]:
    """Run every test against default settings, ignoring the user's config."""
    for key in ENV_KEYS_TO_CLEAR:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("FNKIT_CONFIG_DIR", str(tmp_path / "fnkit-config"))
    config.reset_settings()
    yield
    config.reset_settings()


@_pytest.fixture
def nested_record() -> dict[str, _typing.Any]:
    """Record with nested records, a list of records and scalars."""
    return {
        "model": {"name": "llama", "size": "7b"},
        "plugins": [{"name": "a"}, {"name": "b"}],
        "debug": False,
    }
