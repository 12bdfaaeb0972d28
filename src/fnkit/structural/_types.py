"""
Types shared by the structural helpers.

- Path: tuple of string segments addressing a nested location
- ContainerKind: tag telling records, sequences and scalars apart
- MISSING: sentinel for "no default given"
"""

from __future__ import annotations

import collections.abc as _abc
import enum as _enum
import typing as _typing

# Example: ("config", "plugins", "0") addresses config.plugins[0]
Path: _typing.TypeAlias = tuple[str, ...]


class ContainerKind(_enum.Enum):
    """Shape of a value as seen by path traversal and merging."""

    RECORD = "record"
    SEQUENCE = "sequence"
    SCALAR = "scalar"


def classify(value: _typing.Any) -> ContainerKind:
    """
    Tag a value with its container kind.

    This is the only place the structural helpers look at runtime types;
    everything else dispatches on the returned tag.

    - Mapping → RECORD
    - list / tuple → SEQUENCE
    - anything else (including None, str and bytes) → SCALAR

    Example:
        >>> classify({"a": 1})
        <ContainerKind.RECORD: 'record'>
        >>> classify([1, 2])
        <ContainerKind.SEQUENCE: 'sequence'>
        >>> classify("text")
        <ContainerKind.SCALAR: 'scalar'>
    """
    if isinstance(value, _abc.Mapping):
        return ContainerKind.RECORD
    if isinstance(value, (list, tuple)):
        return ContainerKind.SEQUENCE
    return ContainerKind.SCALAR


def _get_missing_singleton() -> _MissingType:
    """Return the MISSING singleton. Called by pickle to reconstruct."""
    return MISSING


class _MissingType:
    """Sentinel type for an omitted default."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<MISSING>"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> tuple[_typing.Callable[[], _MissingType], tuple[()]]:
        return (_get_missing_singleton, ())


MISSING = _MissingType()
