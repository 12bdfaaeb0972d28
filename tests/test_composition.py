"""Tests for s, compose_l and compose_r."""

import pytest as _pytest

import fnkit.composition as composition


class TestS:
    """Calling a function stored with its arguments."""

    def test_no_args(self) -> None:
        assert composition.s([lambda: 42]) == 42

    def test_with_args(self) -> None:
        assert composition.s([lambda a, b: a + b, 3, 5]) == 8
        assert composition.s([lambda x, y, z: x * y + z, 2, 3, 4]) == 10

    def test_returns_object(self) -> None:
        """Return value is passed through unchanged."""
        value = {"value": 123}

        assert composition.s([lambda obj: obj, value]) is value

    def test_non_callable_raises(self) -> None:
        with _pytest.raises(TypeError):
            composition.s([42])

    def test_empty_raises(self) -> None:
        with _pytest.raises(TypeError):
            composition.s([])


class TestComposeL:
    """Left-to-right composition."""

    def test_identity(self) -> None:
        assert composition.compose_l()(42) == 42

    def test_single(self) -> None:
        assert composition.compose_l(lambda x: x * 2)(3) == 6

    def test_order(self) -> None:
        """First function runs first."""
        composed = composition.compose_l(len, lambda n: n > 3)

        assert composed("test") is True
        assert composed("hi") is False

    def test_three_functions(self) -> None:
        composed = composition.compose_l(lambda n: n + 3, str, lambda t: f"Hello {t}")

        assert composed(7) == "Hello 10"


class TestComposeR:
    """Right-to-left composition."""

    def test_identity(self) -> None:
        assert composition.compose_r()(42) == 42

    def test_order(self) -> None:
        """Last function runs first."""
        composed = composition.compose_r(lambda t: t + "!", str, lambda n: n * n)

        assert composed(3) == "9!"

    def test_mirrors_compose_l(self) -> None:
        """compose_r(f, g) == compose_l(g, f)."""
        f, g = (lambda x: x + 1), (lambda x: x * 10)

        assert composition.compose_r(f, g)(2) == composition.compose_l(g, f)(2) == 21
