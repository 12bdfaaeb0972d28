"""
Type predicates and predicate combinators.

Predicates are plain callables returning bool, so they compose with
``partition``, ``filter`` and friends.
"""

from __future__ import annotations

import typing as _typing

T = _typing.TypeVar("T")
U = _typing.TypeVar("U")

Predicate: _typing.TypeAlias = _typing.Callable[[T], bool]
"""A function that answers yes/no about a candidate."""

Transform: _typing.TypeAlias = _typing.Callable[[T], U]
"""A function converting a value of one type to a value of another (or the same) type."""

_PRIMITIVES = (str, bytes, int, float, complex, bool)


def is_string(candidate: object) -> bool:
    return isinstance(candidate, str)


def is_number(candidate: object) -> bool:
    """True for int and float, but not bool."""
    return isinstance(candidate, (int, float)) and not isinstance(candidate, bool)


def is_boolean(candidate: object) -> bool:
    return isinstance(candidate, bool)


def is_object(candidate: object) -> bool:
    """True for any value that is not None, a primitive, or callable."""
    return (
        candidate is not None
        and not isinstance(candidate, _PRIMITIVES)
        and not callable(candidate)
    )


def is_array(candidate: object) -> bool:
    return isinstance(candidate, (list, tuple))


def is_function(candidate: object) -> bool:
    return callable(candidate)


def is_null(candidate: object) -> bool:
    return candidate is None


def _check_callable(name: str, predicate: object) -> None:
    if not callable(predicate):
        raise TypeError(f"{name}: all elements must be callable")


def is_any_of(*predicates: Predicate[T]) -> Predicate[T]:
    """
    Combine predicates so that at least one must hold.

    With no predicates the result is always False. Predicates are checked
    in order and evaluation stops at the first match, so a non-callable
    entry only raises TypeError once it is reached.

    Example:
        >>> is_text_or_number = is_any_of(is_string, is_number)
        >>> is_text_or_number(3)
        True
    """

    def combined(candidate: T) -> bool:
        for predicate in predicates:
            _check_callable("is_any_of", predicate)
            if predicate(candidate):
                return True
        return False

    return combined


def is_all_of(*predicates: Predicate[T]) -> Predicate[T]:
    """
    Combine predicates so that all must hold.

    With no predicates the result is always True. Evaluation stops at the
    first predicate that fails.
    """

    def combined(candidate: T) -> bool:
        for predicate in predicates:
            _check_callable("is_all_of", predicate)
            if not predicate(candidate):
                return False
        return True

    return combined
