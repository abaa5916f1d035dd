"""
The MODEL layer contains pure data structures and vector arithmetic.
It has NO knowledge of the GUI (Qt) or the Visualization (PyVista).
"""
from vectorplayground.model.vector import Vector3, create_vector, parse_component
from vectorplayground.model.operations import (
    OperationKind, ScaleTarget, VectorResult, ScalarResult, OperationResult,
    compute_operation, operation_label, format_number, format_vector, format_factor,
)
from vectorplayground.model.arrows import ArrowHandle, ArrowRole, ArrowAction, ArrowCommand
from vectorplayground.model.state import SceneState, ViewMode, CameraState

__all__ = [
    "Vector3", "create_vector", "parse_component",
    "OperationKind", "ScaleTarget", "VectorResult", "ScalarResult", "OperationResult",
    "compute_operation", "operation_label", "format_number", "format_vector", "format_factor",
    "ArrowHandle", "ArrowRole", "ArrowAction", "ArrowCommand",
    "SceneState", "ViewMode", "CameraState",
]
