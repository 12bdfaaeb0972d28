"""
Exceptions raised by fnkit.

The structural helpers fail in exactly two ways: a path that cannot be
parsed, and a path that runs into a value which is not a container.
Both subclass builtin exception types so callers can catch them the
usual way (``ValueError`` / ``TypeError``).
"""

from __future__ import annotations

import pathlib as _pathlib
import typing as _typing


class FnkitError(Exception):
    """Base class for errors raised by fnkit itself."""

    pass


class InvalidPathError(FnkitError, ValueError):
    """Raised when a path is empty or otherwise cannot address a value."""

    def __init__(self, path: _typing.Any, message: str = "path cannot be empty") -> None:
        self.path = path
        super().__init__(f"Invalid path {path!r}: {message}")


class InvalidSegmentError(InvalidPathError):
    """Raised when a segment cannot be used as an index into a sequence."""

    def __init__(self, path: _typing.Any, segment: str) -> None:
        self.segment = segment
        super().__init__(path, f"segment {segment!r} is not a valid sequence index")


class InvalidIntermediateError(FnkitError, TypeError):
    """Raised when a non-final path segment resolves to a non-container."""

    def __init__(self, path: _typing.Any, segment: str, value: _typing.Any) -> None:
        self.path = path
        self.segment = segment
        super().__init__(
            f"Cannot set {path!r}: intermediate value at {segment!r} is not a "
            f"container (got {type(value).__name__})"
        )


class ConfigFileError(FnkitError):
    """Error loading or parsing a configuration file."""

    def __init__(self, path: _pathlib.Path, message: str) -> None:
        self.path = path
        super().__init__(f"Error in config file {path}: {message}")
