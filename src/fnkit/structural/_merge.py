"""
Deep merge of two records.

Nested records merge recursively; everything else (scalars, None,
sequences, callables) from the second record replaces the first's value
outright. Lists are never concatenated.
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing

import fnkit.structural._types as _types


def merge(
    base: _abc.Mapping[str, _typing.Any],
    override: _abc.Mapping[str, _typing.Any],
) -> dict[str, _typing.Any]:
    """
    Deep merge two records, with override taking priority.

    Keys present in only one input keep that input's value by reference.
    When override holds a record for a key, it is merged into base's value
    for that key, or into an empty record if base's value is missing or is
    not itself a record.

    Args:
        base: The lower-priority record.
        override: The record to merge in (takes priority).

    Returns:
        New merged dict. Neither input is modified.

    Example:
        >>> merge({"a": {"x": 1}, "b": 2}, {"a": {"y": 2}, "b": 42})
        {'a': {'x': 1, 'y': 2}, 'b': 42}
    """
    result = dict(base)
    for key, value in override.items():
        if _types.classify(value) is _types.ContainerKind.RECORD:
            existing = result.get(key)
            if _types.classify(existing) is not _types.ContainerKind.RECORD:
                existing = {}
            result[key] = merge(existing, value)
        else:
            result[key] = value
    return result
