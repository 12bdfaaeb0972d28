"""
Path parsing for the structural helpers.

A path string such as ``"servers.0.host"`` is split on the separator into
``("servers", "0", "host")``. No escaping is supported, and empty segments
(from ``"a..b"``, ``".a"`` or ``"a."``) are kept as literal empty-string
keys rather than rejected.
"""

from __future__ import annotations

import fnkit.constants as constants
import fnkit.errors as errors
import fnkit.structural._types as _types


def parse_path(
    path: str | _types.Path,
    separator: str = constants.DEFAULT_PATH_SEPARATOR,
) -> _types.Path:
    """
    Resolve a path string into a tuple of segments.

    Args:
        path: Separator-delimited path string, or an already-parsed Path
              (returned unchanged so it can be parsed once and reused).
        separator: Segment separator, ``"."`` unless given. To honour the
                   ``path_separator`` setting, pass
                   ``config.get_settings().path_separator`` explicitly.

    Returns:
        Tuple of one or more string segments.

    Raises:
        InvalidPathError: If the path is empty.
        TypeError: If path is neither a string nor a tuple of strings.

    Example:
        >>> parse_path("a.b.0")
        ('a', 'b', '0')
        >>> parse_path("a..b")
        ('a', '', 'b')
    """
    if isinstance(path, tuple):
        if not path:
            raise errors.InvalidPathError(path)
        for segment in path:
            if not isinstance(segment, str):
                raise TypeError(
                    f"Path segments must be strings, got {type(segment).__name__}"
                )
        return path

    if not isinstance(path, str):
        raise TypeError(f"Path must be a string or tuple, got {type(path).__name__}")
    if path == "":
        raise errors.InvalidPathError(path)

    return tuple(path.split(separator))


def format_path(
    path: _types.Path,
    separator: str = constants.DEFAULT_PATH_SEPARATOR,
) -> str:
    """Join a parsed path back into its string form."""
    return separator.join(path)
