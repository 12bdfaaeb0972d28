"""
List helpers.
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing

import fnkit.predicates as predicates

T = _typing.TypeVar("T")
U = _typing.TypeVar("U")


def zip_pairs(
    a: _abc.Sequence[T],
    b: _abc.Sequence[U],
) -> list[tuple[T | None, U | None]]:
    """
    Pair up items from two sequences by position.

    Unlike the builtin zip, the result is as long as the longer input and
    the shorter side is padded with None.

    Example:
        >>> zip_pairs([1, 2, 3], ["a", "b"])
        [(1, 'a'), (2, 'b'), (3, None)]
    """
    length = max(len(a), len(b))
    return [
        (a[i] if i < len(a) else None, b[i] if i < len(b) else None)
        for i in range(length)
    ]


def partition(
    items: _abc.Iterable[T],
    predicate: predicates.Predicate[T],
) -> tuple[list[T], list[T]]:
    """
    Split items into those that satisfy predicate and those that don't.

    Raises:
        TypeError: If predicate is not callable.

    Example:
        >>> partition([1, 2, 3, 4], lambda n: n % 2 == 0)
        ([2, 4], [1, 3])
    """
    if not callable(predicate):
        raise TypeError("partition: predicate must be callable")

    matching: list[T] = []
    rest: list[T] = []
    for item in items:
        if predicate(item):
            matching.append(item)
        else:
            rest.append(item)
    return matching, rest
