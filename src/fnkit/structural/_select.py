"""
Shallow key selection: pick and omit.

Both helpers copy one level only. Nested records and sequences in the
result are the same objects as in the source.
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing

import fnkit.structural._types as _types

Key: _typing.TypeAlias = str | int


def _as_record(source: _typing.Any) -> dict[str, _typing.Any]:
    """Shallow copy of a record, or of a sequence keyed by stringified index."""
    kind = _types.classify(source)
    if kind is _types.ContainerKind.RECORD:
        return dict(source)
    if kind is _types.ContainerKind.SEQUENCE:
        return {str(index): item for index, item in enumerate(source)}
    raise TypeError(f"Expected a mapping or sequence, got {type(source).__name__}")


def _normalize_key(record: dict[_typing.Any, _typing.Any], key: Key) -> _typing.Hashable:
    # Numeric keys address string keys, so 0 and "0" are the same key unless
    # the record really holds the int.
    if isinstance(key, int) and not isinstance(key, bool) and key not in record:
        return str(key)
    return key


def pick(
    source: _abc.Mapping[_typing.Any, _typing.Any] | _abc.Sequence[_typing.Any],
    keys: _abc.Iterable[Key],
) -> dict[_typing.Any, _typing.Any]:
    """
    Create a new dict holding only the given keys of source.

    Keys missing from source are skipped. Values are shared, not copied.

    Example:
        >>> pick({"a": 1, "b": 2, "c": 3}, ["a", "c"])
        {'a': 1, 'c': 3}
        >>> pick([10, 20, 30], [0, 2])
        {'0': 10, '2': 30}
    """
    record = _as_record(source)
    result: dict[_typing.Any, _typing.Any] = {}
    for key in keys:
        normalized = _normalize_key(record, key)
        if normalized in record:
            result[normalized] = record[normalized]
    return result


def omit(
    source: _abc.Mapping[_typing.Any, _typing.Any] | _abc.Sequence[_typing.Any],
    keys: _abc.Iterable[Key],
) -> dict[_typing.Any, _typing.Any]:
    """
    Create a shallow copy of source without the given keys.

    Keys missing from source are ignored.

    Example:
        >>> omit({"a": 1, "b": 2, "c": 3}, ["b"])
        {'a': 1, 'c': 3}
    """
    result = _as_record(source)
    for key in keys:
        result.pop(_normalize_key(result, key), None)
    return result
