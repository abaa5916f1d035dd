"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents colours, defaults and camera presets from being
   hardcoded throughout the views and controllers.
2. Deployment: Logging can be tuned through environment variables without
   touching the code.

Exports:
    DEFAULT_OPERAND_A, DEFAULT_OPERAND_B (tuple): Reset values of the operands.
    DEFAULT_SCALE_FACTOR (float): Reset value of the scale factor.
    HEAD_LENGTH_RATIO, HEAD_WIDTH_RATIO (float): Arrow head proportions.
    COLORS (dict): Hex colours used by the viewport.
    LOG_LEVEL (str), LOG_FILE (str | None): Logging settings.
"""
import os
from typing import Optional

# Operands
DEFAULT_OPERAND_A: tuple[float, float, float] = (1.0, 0.0, 0.0)
DEFAULT_OPERAND_B: tuple[float, float, float] = (0.0, 1.0, 0.0)

# Scale slider
DEFAULT_SCALE_FACTOR: float = 1.0
SCALE_FACTOR_MIN: float = -5.0
SCALE_FACTOR_MAX: float = 5.0
SCALE_FACTOR_STEP: float = 0.1
SCALE_FACTOR_DECIMALS: int = 1

# Arrow head size relative to the arrow length
HEAD_LENGTH_RATIO: float = 0.2
HEAD_WIDTH_RATIO: float = 0.1

# Direction used for zero-length vectors
ZERO_VECTOR_DIRECTION: tuple[float, float, float] = (1.0, 0.0, 0.0)

NO_RESULT_TEXT: str = "No result yet"

COLORS: dict[str, str] = {
    "vector_a": "#ff5252",  # Red
    "vector_b": "#2196f3",  # Blue
    "result": "#4caf50",  # Green
    "x_axis": "#ff0000",
    "y_axis": "#00ff00",
    "z_axis": "#0000ff",
    "background": "#f8f9fa",
    "grid_major": "#888888",
    "grid_minor": "#cccccc",
}

# Scene helpers (grid lies in the XZ plane, Y is up)
GRID_SIZE: float = 10.0
GRID_DIVISIONS: int = 10
AXES_LENGTH: float = 5.0

# Camera presets: (position, focal point, view up)
CAMERA_3D: tuple[tuple[float, ...], tuple[float, ...], tuple[float, ...]] = (
    (5.0, 5.0, 5.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0)
)
CAMERA_2D: tuple[tuple[float, ...], tuple[float, ...], tuple[float, ...]] = (
    (0.0, 10.0, 0.0), (0.0, 0.0, 0.0), (0.0, 0.0, -1.0)
)

# Logging
LOG_LEVEL: str = os.environ.get("VECTORPLAYGROUND_LOG_LEVEL", "INFO").upper()
LOG_FILE: Optional[str] = os.environ.get("VECTORPLAYGROUND_LOG_FILE") or None
