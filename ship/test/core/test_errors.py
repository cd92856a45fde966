"""Tests for ship.core.errors module."""

from __future__ import annotations

from ship.core.errors import ErrorCode


def test_values_are_stable() -> None:
    assert [int(c) for c in ErrorCode] == [0, 1, 2, 3, 4, 5]
