"""
Copy-on-write updates along a path.

``set_at`` copies every container between the root and the target and
shares everything else with the original, so the input is never modified:

    >>> config = {"db": {"host": "a", "port": 1}, "cache": {"ttl": 5}}
    >>> updated = set_at("db.port", config, 2)
    >>> updated["cache"] is config["cache"]
    True
    >>> config["db"]["port"]
    1

Creating a missing key works at the last segment only. A missing key in
the middle of the path is a non-container and raises
InvalidIntermediateError, same as a scalar would.
"""

from __future__ import annotations

import logging as _logging
import typing as _typing

import fnkit.errors as errors
import fnkit.structural._paths as _paths
import fnkit.structural._types as _types

_logger = _logging.getLogger(__name__)


def _parse_index(path: _types.Path, segment: str) -> int:
    """Convert a segment into a non-negative sequence index."""
    if not (segment.isascii() and segment.isdigit()):
        raise errors.InvalidSegmentError(path, segment)
    return int(segment)


def _copy_sequence(
    sequence: list[_typing.Any] | tuple[_typing.Any, ...],
    index: int,
    value: _typing.Any,
) -> list[_typing.Any] | tuple[_typing.Any, ...]:
    """Copy a sequence with one position replaced, padding with None if needed."""
    items = list(sequence)
    if index >= len(items):
        items.extend([None] * (index - len(items) + 1))
    items[index] = value
    return tuple(items) if isinstance(sequence, tuple) else items


def _set_recursive(
    path: _types.Path,
    current: _typing.Any,
    segments: _types.Path,
    value: _typing.Any,
) -> _typing.Any:
    if not segments:
        return value

    first, rest = segments[0], segments[1:]
    kind = _types.classify(current)

    if kind is _types.ContainerKind.RECORD:
        updated = dict(current)
        updated[first] = _set_recursive(path, current.get(first), rest, value)
        return updated

    if kind is _types.ContainerKind.SEQUENCE:
        index = _parse_index(path, first)
        child = current[index] if index < len(current) else None
        return _copy_sequence(current, index, _set_recursive(path, child, rest, value))

    _logger.debug(
        "Cannot traverse %r at segment %r: %s is not a container",
        _paths.format_path(path),
        first,
        type(current).__name__,
    )
    raise errors.InvalidIntermediateError(_paths.format_path(path), first, current)


def set_at(
    path: str | _types.Path,
    root: _typing.Any,
    value: _typing.Any,
) -> _typing.Any:
    """
    Return a copy of root with value placed at path.

    Every record and sequence along the path is shallow-copied; branches
    off the path are shared with root. The returned top-level container is
    always new, even for a single-segment path.

    Args:
        path: Separator-delimited path (``"a.b.0"``) or a parsed Path.
        root: Record or sequence to update. Never modified.
        value: Value to install at the end of the path.

    Returns:
        The updated copy of root.

    Raises:
        InvalidPathError: If path is empty.
        InvalidSegmentError: If a segment addressing a sequence is not a
            non-negative integer.
        InvalidIntermediateError: If root, or any value the path passes
            through before its last segment, is not a record or sequence
            (this includes keys that do not exist yet).

    Example:
        >>> set_at("arr.1.b", {"arr": [{"a": 1}, {"b": 2}]}, 42)
        {'arr': [{'a': 1}, {'b': 42}]}
    """
    segments = _paths.parse_path(path)
    return _set_recursive(segments, root, segments, value)


def get_at(
    path: str | _types.Path,
    root: _typing.Any,
    default: _typing.Any = _types.MISSING,
) -> _typing.Any:
    """
    Read the value at path, using the same segment rules as set_at.

    Args:
        path: Separator-delimited path or a parsed Path.
        root: Record or sequence to read from.
        default: Returned when the path does not resolve. If omitted,
                 KeyError is raised instead.

    Raises:
        InvalidPathError: If path is empty.
        KeyError: If the path does not resolve and no default was given.
    """
    segments = _paths.parse_path(path)
    current = root
    for segment in segments:
        kind = _types.classify(current)
        if kind is _types.ContainerKind.RECORD and segment in current:
            current = current[segment]
        elif (
            kind is _types.ContainerKind.SEQUENCE
            and segment.isascii()
            and segment.isdigit()
            and int(segment) < len(current)
        ):
            current = current[int(segment)]
        else:
            if default is _types.MISSING:
                raise KeyError(_paths.format_path(segments))
            return default
    return current
