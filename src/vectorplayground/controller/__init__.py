"""
The CONTROLLER layer turns user events into consistent SceneState transitions.
"""
from vectorplayground.controller.synchronizer import (
    SceneSynchronizer, SceneUpdate, SceneEvent,
    OperandsChanged, OperationSelected, ScaleFactorChanged, ScaleTargetChanged, Reset, ViewModeChanged,
)

__all__ = [
    "SceneSynchronizer", "SceneUpdate", "SceneEvent",
    "OperandsChanged", "OperationSelected", "ScaleFactorChanged", "ScaleTargetChanged", "Reset",
    "ViewModeChanged",
]
