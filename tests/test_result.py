"""Tests for Ok / Err."""

import dataclasses as _dataclasses

import pytest as _pytest

import fnkit.result as result


class TestResult:
    """Tagged result values."""

    def test_ok(self) -> None:
        """Ok wraps a value with kind 'ok'."""
        ok = result.Ok(5)

        assert ok.kind == "ok"
        assert ok.value == 5

    def test_err(self) -> None:
        """Err carries a message with kind 'err'."""
        err = result.Err("boom")

        assert err.kind == "err"
        assert err.message == "boom"

    def test_frozen(self) -> None:
        """Results are immutable."""
        with _pytest.raises(_dataclasses.FrozenInstanceError):
            result.Ok(1).value = 2  # type: ignore[misc]

    def test_equality(self) -> None:
        """Results compare by content."""
        assert result.Ok([1]) == result.Ok([1])
        assert result.Err("x") != result.Err("y")

    def test_match_on_kind(self) -> None:
        """Callers can branch on the kind tag."""

        def describe(outcome: result.Result[int]) -> str:
            match outcome:
                case result.Ok(value=value):
                    return f"got {value}"
                case result.Err(message=message):
                    return f"failed: {message}"
            return "unreachable"

        assert describe(result.Ok(3)) == "got 3"
        assert describe(result.Err("no")) == "failed: no"
