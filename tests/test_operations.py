"""Tests for the vector operation engine."""
import itertools as it
import math

import pytest

from vectorplayground.model.operations import (
    OperationKind, ScaleTarget, ScalarResult, VectorResult,
    add_vectors, compute_operation, cross_product, dot_product, format_factor, format_number,
    format_vector, operation_label, scale_vector, subtract_vectors,
)
from vectorplayground.model.vector import Vector3


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

class TestFormatNumber:

    def test_two_decimals(self):
        assert format_number(1.0) == "1.00"
        assert format_number(-1.5) == "-1.50"
        assert format_number(3.14159) == "3.14"

    def test_negative_zero(self):
        assert format_number(-0.0) == "0.00"

    def test_negative_rounding_to_zero(self):
        assert format_number(-0.001) == "0.00"

    def test_round_half_up_on_exact_value(self):
        # 1.005 is stored as 1.00499999999999989...
        assert format_number(1.005) == "1.00"
        # 0.125 and 0.375 are exact binary fractions
        assert format_number(0.125) == "0.13"
        assert format_number(0.375) == "0.38"
        assert format_number(-0.125) == "-0.13"

    def test_large_values(self):
        assert format_number(1e20) == "100000000000000000000.00"

    def test_integers(self):
        assert format_number(0) == "0.00"
        assert format_number(5) == "5.00"

    def test_format_vector(self):
        assert format_vector(Vector3(1.0, -0.0, 2.456)) == "1.00, 0.00, 2.46"

    def test_non_finite(self):
        assert format_number(math.inf) == "Infinity"
        assert format_number(-math.inf) == "-Infinity"
        assert format_number(math.nan) == "NaN"

    def test_largest_finite_value(self):
        text = format_number(1e308)
        assert text.startswith("1000000000000000010979")
        assert text.endswith(".00")


class TestFormatFactor:

    @pytest.mark.parametrize("factor, expected", [
        (1.0, "1"),
        (2.0, "2"),
        (0.0, "0"),
        (-0.0, "0"),
        (-3.0, "-3"),
        (1.5, "1.5"),
        (-0.5, "-0.5"),
        (0.1, "0.1"),
    ])
    def test_factor(self, factor, expected):
        assert format_factor(factor) == expected


# ---------------------------------------------------------------------------
# Algebraic properties
# ---------------------------------------------------------------------------

class TestProperties:

    def test_add_subtract_round_trip(self, sample_vectors):
        for a, b in it.product(sample_vectors, repeat=2):
            total = add_vectors(a, b).vector
            assert subtract_vectors(total, b).vector.isclose(a, abs_tol=1e-9)

    def test_cross_is_orthogonal(self, sample_vectors):
        for a, b in it.product(sample_vectors, repeat=2):
            c = cross_product(a, b).vector
            scale = max(1.0, a.magnitude() * b.magnitude()) * max(1.0, a.magnitude(), b.magnitude())
            assert c.dot(a) == pytest.approx(0.0, abs=1e-9 * scale)
            assert c.dot(b) == pytest.approx(0.0, abs=1e-9 * scale)

    def test_cross_is_anticommutative(self, sample_vectors):
        for a, b in it.product(sample_vectors, repeat=2):
            assert cross_product(a, b).vector.isclose(-cross_product(b, a).vector)

    def test_dot_is_commutative(self, sample_vectors):
        for a, b in it.product(sample_vectors, repeat=2):
            assert dot_product(a, b).scalar == pytest.approx(dot_product(b, a).scalar)

    def test_scale_identity_zero_negation(self, sample_vectors):
        for v in sample_vectors:
            assert scale_vector(v, 1.0).vector == v
            assert scale_vector(v, 0.0).vector.isclose(Vector3.zero())
            assert scale_vector(v, -1.0).vector == -v


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------

class TestScenarios:

    def test_add_unit_vectors(self):
        result = compute_operation(OperationKind.ADD, Vector3(1, 0, 0), Vector3(0, 1, 0))
        assert isinstance(result, VectorResult)
        assert result.vector == Vector3(1.0, 1.0, 0.0)
        assert result.description == "A + B = (1.00, 1.00, 0.00)"
        assert result.additional_info is None
        assert result.display_text == result.description

    def test_subtract(self):
        result = compute_operation(OperationKind.SUBTRACT, Vector3(1, 0, 0), Vector3(0, 1, 0))
        assert result.vector == Vector3(1.0, -1.0, 0.0)
        assert result.description == "A - B = (1.00, -1.00, 0.00)"

    def test_cross_unit_vectors(self):
        result = compute_operation(OperationKind.CROSS, Vector3(1, 0, 0), Vector3(0, 1, 0))
        assert isinstance(result, VectorResult)
        assert result.vector == Vector3(0.0, 0.0, 1.0)
        assert result.description == "A × B = (0.00, 0.00, 1.00)"
        assert result.magnitude_info == "1.00"
        assert result.additional_info == "Magnitude: 1.00"
        assert result.display_text == "A × B = (0.00, 0.00, 1.00)\nMagnitude: 1.00"

    def test_cross_parallel_gives_clean_zero(self):
        result = compute_operation(OperationKind.CROSS, Vector3(2, 0, 0), Vector3(-1, 0, 0))
        assert result.description == "A × B = (0.00, 0.00, 0.00)"
        assert result.magnitude_info == "0.00"

    def test_dot_with_zero_vector(self):
        result = compute_operation(OperationKind.DOT, Vector3(3, 4, 0), Vector3(0, 0, 0))
        assert isinstance(result, ScalarResult)
        assert result.scalar == 0.0
        assert result.description == "A · B = 0.00"
        assert result.magnitude_info_a == "5.00"
        assert result.magnitude_info_b == "0.00"
        assert result.additional_info == "Magnitude of A: 5.00, Magnitude of B: 0.00"

    def test_scale_targets_a_by_default(self):
        result = compute_operation(OperationKind.SCALE, Vector3(1, 2, 3), Vector3(4, 5, 6), scale_factor=2.0)
        assert result.vector == Vector3(2.0, 4.0, 6.0)
        assert result.description == "2 × Vector = (2.00, 4.00, 6.00)"

    def test_scale_target_b(self):
        result = compute_operation(
            OperationKind.SCALE, Vector3(1, 2, 3), Vector3(4, 5, 6),
            scale_factor=-0.5, scale_target=ScaleTarget.B
        )
        assert result.vector == Vector3(-2.0, -2.5, -3.0)
        assert result.description == "-0.5 × Vector = (-2.00, -2.50, -3.00)"

    def test_scale_by_zero(self):
        result = compute_operation(OperationKind.SCALE, Vector3(1, -2, 3), Vector3.zero(), scale_factor=0.0)
        assert result.description == "0 × Vector = (0.00, 0.00, 0.00)"

    def test_none_has_no_result(self):
        assert compute_operation(OperationKind.NONE, Vector3(1, 0, 0), Vector3(0, 1, 0)) is None

    def test_accepts_string_kind(self):
        result = compute_operation("add", Vector3(1, 0, 0), Vector3(0, 1, 0))
        assert result.vector == Vector3(1.0, 1.0, 0.0)

    def test_unknown_kind_raises(self):
        with pytest.raises(ValueError):
            compute_operation("divide", Vector3(1, 0, 0), Vector3(0, 1, 0))

    def test_unknown_scale_target_raises(self):
        with pytest.raises(ValueError):
            compute_operation(OperationKind.SCALE, Vector3(1, 0, 0), Vector3(0, 1, 0), scale_target="C")

    def test_overflowing_operands(self):
        a, b = Vector3(1e308, 1e308, 0.0), Vector3(1e308, 0.0, 1e308)

        added = compute_operation(OperationKind.ADD, a, b)
        assert added.vector.x == math.inf
        assert added.description.startswith("A + B = (Infinity, 1000")

        dot = compute_operation(OperationKind.DOT, a, b)
        assert dot.scalar == math.inf
        assert dot.description == "A · B = Infinity"

        cross = compute_operation(OperationKind.CROSS, a, b)
        assert cross.description == "A × B = (Infinity, -Infinity, -Infinity)"
        assert cross.magnitude_info == "Infinity"

    def test_overflow_to_nan(self):
        # inf - inf in the first component
        result = compute_operation(OperationKind.SUBTRACT, Vector3(math.inf, 0, 0), Vector3(math.inf, 0, 0))
        assert result.description == "A - B = (NaN, 0.00, 0.00)"

    def test_is_deterministic(self):
        a, b = Vector3(0.3, -1.7, 2.2), Vector3(5.0, 0.25, -3.0)
        for kind in OperationKind:
            assert compute_operation(kind, a, b, 1.5) == compute_operation(kind, a, b, 1.5)


# ---------------------------------------------------------------------------
# Labels
# ---------------------------------------------------------------------------

class TestOperationLabel:

    @pytest.mark.parametrize("kind, expected", [
        (OperationKind.NONE, "Current Operation: None"),
        (OperationKind.ADD, "Current Operation: Vector Addition"),
        (OperationKind.SUBTRACT, "Current Operation: Vector Subtraction"),
        (OperationKind.DOT, "Current Operation: Dot Product"),
        (OperationKind.CROSS, "Current Operation: Cross Product"),
    ])
    def test_labels(self, kind, expected):
        assert operation_label(kind) == expected

    def test_scale_label_names_target(self):
        assert operation_label(OperationKind.SCALE, ScaleTarget.B) == "Current Operation: Vector Scaling (B)"

    def test_produces_vector(self):
        vector_kinds = {k for k in OperationKind if k.produces_vector}
        assert vector_kinds == {OperationKind.ADD, OperationKind.SUBTRACT, OperationKind.SCALE, OperationKind.CROSS}
