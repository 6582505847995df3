"""Tests for planar vector helpers."""
from __future__ import annotations

import math

from tick_cursor import vec


class TestConstants:
    def test_zero(self) -> None:
        assert vec.ZERO == (0.0, 0.0)


class TestLerp:
    def test_endpoints(self) -> None:
        assert vec.lerp((0.0, 0.0), (1.0, 2.0), 0.0) == (0.0, 0.0)
        assert vec.lerp((0.0, 0.0), (1.0, 2.0), 1.0) == (1.0, 2.0)

    def test_midpoint(self) -> None:
        assert vec.lerp((0.2, 0.4), (0.6, 0.0), 0.5) == (0.4, 0.2)

    def test_unclamped(self) -> None:
        assert vec.lerp((0.0, 0.0), (1.0, 1.0), 2.0) == (2.0, 2.0)


class TestDistance:
    def test_same_point(self) -> None:
        assert vec.distance((0.3, 0.3), (0.3, 0.3)) == 0.0

    def test_3_4_5(self) -> None:
        assert vec.distance((0.0, 0.0), (3.0, 4.0)) == 5.0

    def test_diagonal(self) -> None:
        assert math.isclose(vec.distance((0.0, 0.0), (1.0, 1.0)), math.sqrt(2.0))
