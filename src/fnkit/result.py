"""
Result type for fallible operations.

fnkit's own functions raise exceptions; Ok/Err are offered to callers who
prefer to return failures as values:

    >>> def parse_port(text: str) -> Result[int]:
    ...     if not text.isdigit():
    ...         return Err(f"not a port: {text!r}")
    ...     return Ok(int(text))
    >>> parse_port("8080")
    Ok(value=8080, kind='ok')
"""

from __future__ import annotations

import dataclasses as _dataclasses
import typing as _typing

T = _typing.TypeVar("T")


@_dataclasses.dataclass(frozen=True, slots=True)
class Ok(_typing.Generic[T]):
    """Wraps a value, normally from a fallible procedure."""

    value: T
    kind: _typing.Literal["ok"] = _dataclasses.field(default="ok", init=False)


@_dataclasses.dataclass(frozen=True, slots=True)
class Err:
    """Indicates an error, with a message explaining what went wrong."""

    message: str
    kind: _typing.Literal["err"] = _dataclasses.field(default="err", init=False)


Result: _typing.TypeAlias = _typing.Union[Ok[T], Err]
