"""
Arrow Handles
=============
Renderer-independent description of the arrows drawn in the viewport.

A handle is the identity the viewport keys its actors on. The Scene
Synchronizer mutates handles in place (operands) or replaces them (result)
and reports each change as an ArrowCommand.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
import itertools as it
import math

from vectorplayground.config import HEAD_LENGTH_RATIO, HEAD_WIDTH_RATIO, ZERO_VECTOR_DIRECTION
from vectorplayground.model.vector import Vector3

_handle_ids = it.count(1)


class ArrowRole(StrEnum):
    A = "vector_a"
    B = "vector_b"
    RESULT = "result"


class ArrowAction(StrEnum):
    CREATE = "create"
    UPDATE = "update"
    DESTROY = "destroy"


@dataclass(eq=False)
class ArrowHandle:
    """
    A directed shaft with a head, anchored at the origin.

    Direction is the unit vector of the source. A zero-length source, or one
    whose length overflows, points along +X with length 0.
    """
    role: ArrowRole
    color: str
    source: Vector3 = field(default_factory=Vector3.zero)
    direction: Vector3 = field(default_factory=lambda: Vector3(*ZERO_VECTOR_DIRECTION))
    length: float = 0.0
    head_length: float = 0.0
    head_width: float = 0.0
    id: int = field(default_factory=lambda: next(_handle_ids))

    @classmethod
    def from_vector(cls, role: ArrowRole, color: str, vector: Vector3) -> ArrowHandle:
        handle = cls(role=role, color=color)
        handle.set_vector(vector)
        return handle

    def set_vector(self, vector: Vector3) -> None:
        """Re-derive direction, length and head size from a new source vector."""
        length = vector.magnitude()
        self.source = vector
        # Zero and overflowed vectors draw as a degenerate arrow along +X
        if length == 0.0 or not math.isfinite(length):
            length = 0.0
            self.direction = Vector3(*ZERO_VECTOR_DIRECTION)
        else:
            self.direction = vector.normalized()
        self.length = length
        self.head_length = length * HEAD_LENGTH_RATIO
        self.head_width = length * HEAD_WIDTH_RATIO

    @property
    def is_degenerate(self) -> bool:
        return self.length == 0.0


@dataclass(frozen=True)
class ArrowCommand:
    """One create/update/destroy instruction for the renderer."""
    action: ArrowAction
    handle: ArrowHandle
