"""
Scene State (Data Model)
========================
This module defines the central data structure for the running session.

Why is this file needed?
------------------------
1. State Management: It holds the operands, the selected operation, the latest
   result and the three arrow handles in one place.
2. Decoupling: Views read from this object; only the Scene Synchronizer
   writes to it.

Classes:
    CameraState: Viewpoint for the 3D or top-down view.
    SceneState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
import logging
from typing import Optional

from vectorplayground.config import (
    CAMERA_2D, CAMERA_3D, DEFAULT_OPERAND_A, DEFAULT_OPERAND_B, DEFAULT_SCALE_FACTOR
)
from vectorplayground.model.arrows import ArrowHandle
from vectorplayground.model.operations import OperationKind, OperationResult, ScaleTarget
from vectorplayground.model.vector import Vector3

logger = logging.getLogger(__name__)


class ViewMode(StrEnum):
    VIEW_3D = "3d"
    VIEW_2D = "2d"


@dataclass(frozen=True)
class CameraState:
    position: tuple[float, float, float]
    focal_point: tuple[float, float, float]
    view_up: tuple[float, float, float]

    @classmethod
    def for_mode(cls, mode: ViewMode) -> CameraState:
        preset = CAMERA_3D if ViewMode(mode) == ViewMode.VIEW_3D else CAMERA_2D
        position, focal_point, view_up = preset
        return cls(position=position, focal_point=focal_point, view_up=view_up)


def default_operand_a() -> Vector3:
    return Vector3(*DEFAULT_OPERAND_A)


def default_operand_b() -> Vector3:
    return Vector3(*DEFAULT_OPERAND_B)


@dataclass
class SceneState:
    """
    Holds the entire state of the playground session.
    Owned by a single SceneSynchronizer.
    """
    operand_a: Vector3 = field(default_factory=default_operand_a)
    operand_b: Vector3 = field(default_factory=default_operand_b)

    scale_factor: float = DEFAULT_SCALE_FACTOR
    scale_target: ScaleTarget = ScaleTarget.A

    current_operation: OperationKind = OperationKind.NONE
    current_result: Optional[OperationResult] = None

    arrow_a: Optional[ArrowHandle] = None
    arrow_b: Optional[ArrowHandle] = None
    arrow_result: Optional[ArrowHandle] = None

    view_mode: ViewMode = ViewMode.VIEW_3D
    camera: CameraState = field(default_factory=lambda: CameraState.for_mode(ViewMode.VIEW_3D))

    @property
    def is_initialized(self) -> bool:
        return self.arrow_a is not None and self.arrow_b is not None

    def reset(self) -> None:
        """
        Restore operands, scale factor and operation to their defaults.
        Arrow handles, scale target and view mode are left to the caller.
        """
        self.operand_a = default_operand_a()
        self.operand_b = default_operand_b()
        self.scale_factor = DEFAULT_SCALE_FACTOR
        self.current_operation = OperationKind.NONE
        self.current_result = None
        logger.info("Scene state has been reset.")
