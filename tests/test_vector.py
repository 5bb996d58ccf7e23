"""Tests for the Vector2 value type."""

import dataclasses
import math

import pytest

from boids import Vector2


class TestArithmetic:
    """Basic operations return new values."""

    def test_add_and_sub(self):
        a = Vector2(1.0, 2.0)
        b = Vector2(3.0, -4.0)
        assert a.add(b) == Vector2(4.0, -2.0)
        assert a.sub(b) == Vector2(-2.0, 6.0)
        assert a + b == a.add(b)
        assert a - b == a.sub(b)

    def test_scale_and_divide(self):
        v = Vector2(3.0, -6.0)
        assert v.scale(2.0) == Vector2(6.0, -12.0)
        assert 2.0 * v == v * 2.0
        assert v.divide(3.0) == Vector2(1.0, -2.0)

    def test_map_applies_elementwise(self):
        assert Vector2(1.0, 4.0).map(math.sqrt) == Vector2(1.0, 2.0)

    def test_length_is_euclidean(self):
        assert Vector2(3.0, 4.0).length == 5.0
        assert Vector2.zero().length == 0.0

    def test_operands_are_unchanged(self):
        a = Vector2(1.0, 1.0)
        a.add(Vector2(5.0, 5.0))
        assert a == Vector2(1.0, 1.0)

    def test_is_immutable(self):
        v = Vector2(1.0, 2.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            v.x = 3.0


class TestEquality:
    """Equality is exact, not approximate."""

    def test_equal_components(self):
        assert Vector2(0.1, 0.2).equals(Vector2(0.1, 0.2))

    def test_nearly_equal_is_not_equal(self):
        assert not Vector2(0.1 + 0.2, 0.0).equals(Vector2(0.3, 0.0))


class TestRescale:
    """Rescaling guards the zero-length case."""

    def test_rescales_to_magnitude(self):
        v = Vector2(3.0, 4.0).rescaled(10.0)
        assert v.x == pytest.approx(6.0)
        assert v.y == pytest.approx(8.0)

    def test_zero_vector_stays_zero(self):
        v = Vector2.zero().rescaled(5.0)
        assert v == Vector2.zero()
        assert not math.isnan(v.x)
