"""Tests for the Vector3 primitive and input coercion."""
import dataclasses
import math

import numpy as np
import pytest

from vectorplayground.model.vector import Vector3, create_vector, parse_component


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

class TestParseComponent:

    @pytest.mark.parametrize("text, expected", [
        ("3.5", 3.5),
        ("  -2 ", -2.0),
        ("+4", 4.0),
        (".5", 0.5),
        ("1e2", 100.0),
        ("3.5abc", 3.5),
        ("7.", 7.0),
    ])
    def test_numeric_text(self, text, expected):
        assert parse_component(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", "abc", "-", ".", "e5", "x1"])
    def test_malformed_text_is_zero(self, text):
        assert parse_component(text) == 0.0

    @pytest.mark.parametrize("text", ["inf", "Infinity", "nan", "1e999", "-1e999"])
    def test_non_finite_is_zero(self, text):
        assert parse_component(text) == 0.0

    def test_numbers_pass_through(self):
        assert parse_component(2) == 2.0
        assert parse_component(-1.25) == -1.25

    def test_non_finite_numbers_are_zero(self):
        assert parse_component(float("inf")) == 0.0
        assert parse_component(float("nan")) == 0.0

    def test_none_is_zero(self):
        assert parse_component(None) == 0.0


class TestCreateVector:

    def test_malformed_components(self):
        assert create_vector("", "abc", "3.5") == Vector3(0.0, 0.0, 3.5)

    def test_result_is_always_finite(self):
        v = create_vector("nan", "1e999", "-inf")
        assert all(math.isfinite(c) for c in v)
        assert v == Vector3.zero()


# ---------------------------------------------------------------------------
# Vector3
# ---------------------------------------------------------------------------

class TestVector3:

    def test_is_immutable(self):
        v = Vector3(1.0, 2.0, 3.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            v.x = 5.0

    def test_componentwise_equality(self):
        assert Vector3(1.0, 2.0, 3.0) == Vector3(1.0, 2.0, 3.0)
        assert Vector3(1.0, 2.0, 3.0) != Vector3(1.0, 2.0, 3.5)

    def test_arithmetic(self):
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(4.0, 5.0, 6.0)
        assert a + b == Vector3(5.0, 7.0, 9.0)
        assert b - a == Vector3(3.0, 3.0, 3.0)
        assert a * 2.0 == Vector3(2.0, 4.0, 6.0)
        assert 2.0 * a == Vector3(2.0, 4.0, 6.0)
        assert -a == Vector3(-1.0, -2.0, -3.0)

    def test_magnitude(self):
        assert Vector3(3.0, 4.0, 0.0).magnitude() == 5.0
        assert Vector3.zero().magnitude() == 0.0

    def test_normalized(self):
        n = Vector3(0.0, 0.0, 2.0).normalized()
        assert n == Vector3(0.0, 0.0, 1.0)

    def test_normalized_zero_stays_zero(self):
        n = Vector3.zero().normalized()
        assert n == Vector3.zero()
        assert not any(math.isnan(c) for c in n)

    def test_dot_and_cross(self):
        x, y = Vector3.unit_x(), Vector3(0.0, 1.0, 0.0)
        assert x.dot(y) == 0.0
        assert x.cross(y) == Vector3(0.0, 0.0, 1.0)

    def test_as_array(self):
        arr = Vector3(1.0, 2.0, 3.0).as_array()
        assert arr.dtype == np.float64
        np.testing.assert_array_equal(arr, [1.0, 2.0, 3.0])

    def test_isclose(self):
        assert Vector3(0.1 + 0.2, 0.0, 0.0).isclose(Vector3(0.3, 0.0, 0.0))
        assert not Vector3(0.3, 0.0, 0.0).isclose(Vector3(0.31, 0.0, 0.0))

    def test_magnitude_of_large_components(self):
        assert Vector3(1e200, 0.0, 0.0).magnitude() == pytest.approx(1e200)
        assert Vector3(3e200, 4e200, 0.0).magnitude() == pytest.approx(5e200)

    def test_magnitude_overflows_to_inf(self):
        assert Vector3(1e308, 1e308, 0.0).magnitude() == math.inf
