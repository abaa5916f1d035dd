"""
Vector Operations (Engine)
==========================
Pure arithmetic and formatting for the five supported operations.

Why is this file needed?
------------------------
1. Determinism: Same operands always yield the same result and text, no access
   to UI state, so every operation is unit-testable on its own.
2. Presentation: It owns the human-readable description strings shown in the
   result panel.

Functions:
    compute_operation: Single entry point used by the Scene Synchronizer.
    format_number: Two-decimal formatting used by every description.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, Context, ROUND_HALF_UP
from enum import StrEnum
import logging
import math
from typing import Optional, Union

from vectorplayground.model.vector import Vector3

logger = logging.getLogger(__name__)

# Wide enough to quantize any finite float to two decimals
_DECIMAL_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)
_TWO_PLACES = Decimal("0.01")


# ------------------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------------------
class OperationKind(StrEnum):
    NONE = "none"
    ADD = "add"
    SUBTRACT = "subtract"
    SCALE = "scale"
    DOT = "dot"
    CROSS = "cross"

    @property
    def produces_vector(self) -> bool:
        """True for operations whose result is drawn as an arrow."""
        return self in (OperationKind.ADD, OperationKind.SUBTRACT, OperationKind.SCALE, OperationKind.CROSS)


class ScaleTarget(StrEnum):
    """Which operand the scale operation applies to."""
    A = "A"
    B = "B"


# ------------------------------------------------------------------------------
# Results
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class VectorResult:
    vector: Vector3
    description: str
    # Only the cross product reports the magnitude of its result
    magnitude_info: Optional[str] = None

    @property
    def additional_info(self) -> Optional[str]:
        if self.magnitude_info is None:
            return None
        return f"Magnitude: {self.magnitude_info}"

    @property
    def display_text(self) -> str:
        info = self.additional_info
        return self.description if info is None else f"{self.description}\n{info}"


@dataclass(frozen=True)
class ScalarResult:
    scalar: float
    description: str
    magnitude_info_a: str
    magnitude_info_b: str

    @property
    def additional_info(self) -> str:
        return f"Magnitude of A: {self.magnitude_info_a}, Magnitude of B: {self.magnitude_info_b}"

    @property
    def display_text(self) -> str:
        return f"{self.description}\n{self.additional_info}"


OperationResult = Union[VectorResult, ScalarResult]


# ------------------------------------------------------------------------------
# Formatting
# ------------------------------------------------------------------------------
def format_number(value: float) -> str:
    """
    Format a number with exactly two decimals.

    Rounding is half-up on the exact binary value of the float, so 0.125
    gives "0.13" while 1.005 (stored as 1.00499...) gives "1.00".
    Negative zero and negatives that round to zero give "0.00".
    Overflowed results render as "Infinity", "-Infinity" or "NaN".
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    rounded = Decimal(value).quantize(_TWO_PLACES, context=_DECIMAL_CONTEXT)
    if rounded.is_zero():
        rounded = abs(rounded)
    return f"{rounded:f}"


def format_vector(vector: Vector3) -> str:
    return f"{format_number(vector.x)}, {format_number(vector.y)}, {format_number(vector.z)}"


def format_factor(factor: float) -> str:
    """Render the scale factor as typed: integral values without a fraction."""
    factor = float(factor)
    if factor.is_integer():
        return str(int(factor))
    return repr(factor)


# ------------------------------------------------------------------------------
# Operations
# ------------------------------------------------------------------------------
def add_vectors(a: Vector3, b: Vector3) -> VectorResult:
    result = a + b
    return VectorResult(vector=result, description=f"A + B = ({format_vector(result)})")


def subtract_vectors(a: Vector3, b: Vector3) -> VectorResult:
    result = a - b
    return VectorResult(vector=result, description=f"A - B = ({format_vector(result)})")


def scale_vector(vector: Vector3, factor: float) -> VectorResult:
    result = vector * factor
    return VectorResult(
        vector=result,
        description=f"{format_factor(factor)} × Vector = ({format_vector(result)})"
    )


def dot_product(a: Vector3, b: Vector3) -> ScalarResult:
    result = a.dot(b)
    return ScalarResult(
        scalar=result,
        description=f"A · B = {format_number(result)}",
        magnitude_info_a=format_number(a.magnitude()),
        magnitude_info_b=format_number(b.magnitude()),
    )


def cross_product(a: Vector3, b: Vector3) -> VectorResult:
    result = a.cross(b)
    return VectorResult(
        vector=result,
        description=f"A × B = ({format_vector(result)})",
        magnitude_info=format_number(result.magnitude()),
    )


def compute_operation(
    kind: OperationKind,
    a: Vector3,
    b: Vector3,
    scale_factor: float = 1.0,
    scale_target: ScaleTarget = ScaleTarget.A
) -> Optional[OperationResult]:
    """
    Apply the selected operation to the operands.

    Returns:
        The operation result, or None for OperationKind.NONE.

    Raises:
        ValueError: If kind or scale_target is not a known value.
    """
    kind = OperationKind(kind)

    match kind:
        case OperationKind.NONE:
            return None
        case OperationKind.ADD:
            return add_vectors(a, b)
        case OperationKind.SUBTRACT:
            return subtract_vectors(a, b)
        case OperationKind.SCALE:
            target = ScaleTarget(scale_target)
            return scale_vector(a if target == ScaleTarget.A else b, scale_factor)
        case OperationKind.DOT:
            return dot_product(a, b)
        case OperationKind.CROSS:
            return cross_product(a, b)


_OPERATION_NAMES: dict[OperationKind, str] = {
    OperationKind.NONE: "None",
    OperationKind.ADD: "Vector Addition",
    OperationKind.SUBTRACT: "Vector Subtraction",
    OperationKind.SCALE: "Vector Scaling",
    OperationKind.DOT: "Dot Product",
    OperationKind.CROSS: "Cross Product",
}


def operation_label(kind: OperationKind, scale_target: ScaleTarget = ScaleTarget.A) -> str:
    """Status line shown above the result, e.g. 'Current Operation: Dot Product'."""
    kind = OperationKind(kind)
    name = _OPERATION_NAMES[kind]
    if kind == OperationKind.SCALE:
        name = f"{name} ({ScaleTarget(scale_target).value})"
    return f"Current Operation: {name}"
