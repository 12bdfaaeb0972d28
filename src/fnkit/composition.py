"""
Function application and composition helpers.
"""

from __future__ import annotations

import functools as _functools
import typing as _typing


def s(call: _typing.Sequence[_typing.Any]) -> _typing.Any:
    """
    Call the first element of a sequence with the rest as arguments.

    Example:
        >>> s([max, 3, 7])
        7

    Raises:
        TypeError: If the first element is not callable.
    """
    if not call or not callable(call[0]):
        raise TypeError("s: first element must be callable")
    function, *args = call
    return function(*args)


def compose_l(
    *functions: _typing.Callable[[_typing.Any], _typing.Any],
) -> _typing.Callable[[_typing.Any], _typing.Any]:
    """
    Left-to-right composition: ``compose_l(f, g)(x) == g(f(x))``.

    With no functions, returns the identity function.
    """

    def composed(value: _typing.Any) -> _typing.Any:
        return _functools.reduce(lambda acc, function: function(acc), functions, value)

    return composed


def compose_r(
    *functions: _typing.Callable[[_typing.Any], _typing.Any],
) -> _typing.Callable[[_typing.Any], _typing.Any]:
    """Right-to-left composition: ``compose_r(f, g)(x) == f(g(x))``."""
    return compose_l(*reversed(functions))
