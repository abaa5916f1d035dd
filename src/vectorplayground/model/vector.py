"""
Vector Primitive
================
Immutable 3D vector used by the operation engine and the scene state,
plus the tolerant parser that turns raw input text into vectors.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import math
import re
from typing import Union, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

# Leading decimal number; anything after it is ignored
_NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

ComponentInput = Union[str, float, int, None]


@dataclass(frozen=True)
class Vector3:
    """
    A vector in 3D space representing direction and magnitude.
    Instances are never mutated; every operation returns a new vector.
    """
    x: float
    y: float
    z: float

    @classmethod
    def zero(cls) -> Vector3:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def unit_x(cls) -> Vector3:
        return cls(1.0, 0.0, 0.0)

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vector3:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector3:
        if scalar == 0.0: raise ZeroDivisionError
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def magnitude(self) -> float:
        # Overflows to inf, never raises
        return math.hypot(self.x, self.y, self.z)

    def is_zero(self) -> bool:
        return self.x == 0.0 and self.y == 0.0 and self.z == 0.0

    def normalized(self) -> Vector3:
        """Unit vector in the same direction. The zero vector stays zero."""
        mag = self.magnitude()
        if mag == 0.0: return Vector3.zero()
        return self / mag

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def isclose(self, other: Vector3, abs_tol: float = 1e-9) -> bool:
        """Component-wise comparison within an absolute tolerance."""
        return bool(np.allclose(self.as_array(), other.as_array(), rtol=0.0, atol=abs_tol))

    def as_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def as_tuple(self) -> tuple[float, float, float]:
        return self.x, self.y, self.z


def parse_component(value: ComponentInput) -> float:
    """
    Convert one raw input component to a finite float.

    Only the leading number of the text counts ("3.5abc" -> 3.5) and
    surrounding whitespace is ignored. Empty, non-numeric or non-finite
    input becomes 0.0.
    """
    if value is None:
        return 0.0

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        number = float(value)
    else:
        text = str(value).strip()
        match = _NUMBER_PREFIX.match(text)
        if match is None:
            if text:
                logger.debug(f"Coercing non-numeric component {text!r} to 0.0")
            return 0.0
        number = float(match.group(0))

    if not math.isfinite(number):
        logger.debug(f"Coercing non-finite component {value!r} to 0.0")
        return 0.0
    return number


def create_vector(x: ComponentInput, y: ComponentInput, z: ComponentInput) -> Vector3:
    """Build a vector from raw input components, coercing malformed ones to 0.0."""
    return Vector3(parse_component(x), parse_component(y), parse_component(z))
