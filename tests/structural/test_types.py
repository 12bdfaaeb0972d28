"""Tests for container classification."""

import collections as _collections

import pytest as _pytest

import fnkit.structural as structural

ContainerKind = structural.ContainerKind


class TestClassify:
    """classify tags values by container kind."""

    @_pytest.mark.parametrize(
        "value",
        [{}, {"a": 1}, _collections.OrderedDict(a=1)],
    )
    def test_records(self, value: object) -> None:
        """Mappings are records."""
        assert structural.classify(value) is ContainerKind.RECORD

    @_pytest.mark.parametrize("value", [[], [1], (1, 2)])
    def test_sequences(self, value: object) -> None:
        """Lists and tuples are sequences."""
        assert structural.classify(value) is ContainerKind.SEQUENCE

    @_pytest.mark.parametrize("value", [None, 0, 1.5, True, "text", b"raw", len])
    def test_scalars(self, value: object) -> None:
        """Everything else, strings included, is a scalar."""
        assert structural.classify(value) is ContainerKind.SCALAR

    def test_missing_is_falsy(self) -> None:
        """MISSING is a falsy singleton."""
        assert not structural.MISSING
        assert repr(structural.MISSING) == "<MISSING>"
