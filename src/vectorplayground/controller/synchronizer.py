"""
Scene Synchronizer
==================
The single writer of SceneState.

Why is this file needed?
------------------------
1. Consistency: After every event the operands, the selected operation, the
   result and the three arrow handles agree with each other.
2. Decoupling: The GUI only sends events and receives a SceneUpdate; it never
   touches the state or decides which arrows to rebuild.

Policy:
    - Operand arrows (A, B) are created once and then updated in place.
    - The result arrow is destroyed and recreated on every recompute and only
      exists for operations with a vector result.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Optional, Union

from vectorplayground.config import COLORS, NO_RESULT_TEXT
from vectorplayground.model.arrows import ArrowAction, ArrowCommand, ArrowHandle, ArrowRole
from vectorplayground.model.operations import (
    OperationKind, ScaleTarget, VectorResult, compute_operation, operation_label
)
from vectorplayground.model.state import CameraState, SceneState, ViewMode
from vectorplayground.model.vector import Vector3, parse_component

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------------------
# Events
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class OperandsChanged:
    a: Vector3
    b: Vector3

@dataclass(frozen=True)
class OperationSelected:
    kind: OperationKind

@dataclass(frozen=True)
class ScaleFactorChanged:
    value: float

@dataclass(frozen=True)
class ScaleTargetChanged:
    target: ScaleTarget

@dataclass(frozen=True)
class Reset:
    pass

@dataclass(frozen=True)
class ViewModeChanged:
    mode: ViewMode

SceneEvent = Union[
    OperandsChanged, OperationSelected, ScaleFactorChanged, ScaleTargetChanged, Reset, ViewModeChanged
]


@dataclass
class SceneUpdate:
    """Everything the shell needs to redraw after one transition."""
    operation_label: str
    result_text: str
    commands: list[ArrowCommand] = field(default_factory=list)
    arrows: list[ArrowHandle] = field(default_factory=list)

    operand_a: Vector3 = field(default_factory=Vector3.zero)
    operand_b: Vector3 = field(default_factory=Vector3.zero)
    scale_factor: float = 1.0
    scale_target: ScaleTarget = ScaleTarget.A
    current_operation: OperationKind = OperationKind.NONE

    # Only set when the viewpoint changed
    camera: Optional[CameraState] = None


# ------------------------------------------------------------------------------
# Synchronizer
# ------------------------------------------------------------------------------
class SceneSynchronizer:
    def __init__(self, state: Optional[SceneState] = None) -> None:
        self.state: SceneState = state if state is not None else SceneState()
        self._pending: list[ArrowCommand] = []
        self._camera_changed: bool = False

    # --------------------------------------------------------------------------
    # Public API
    # --------------------------------------------------------------------------

    def initialize(self) -> SceneUpdate:
        """First render: create the operand arrows and place the camera."""
        self._sync_operand_arrows()
        if self.state.current_operation != OperationKind.NONE:
            self._perform(self.state.current_operation)
        self._camera_changed = True
        return self._finish()

    def on_operands_changed(self, a: Vector3, b: Vector3) -> SceneUpdate:
        self.state.operand_a = a
        self.state.operand_b = b
        logger.debug(f"Operands changed: A={a.as_tuple()}, B={b.as_tuple()}")

        self._sync_operand_arrows()

        # Forced re-evaluation of the active operation with the new operands
        if self.state.current_operation != OperationKind.NONE:
            self._perform(self.state.current_operation)
        return self._finish()

    def on_operation_selected(self, kind: OperationKind) -> SceneUpdate:
        self._ensure_initialized()
        self._perform(OperationKind(kind))
        return self._finish()

    def on_scale_factor_changed(self, value: float) -> SceneUpdate:
        self.state.scale_factor = parse_component(value)
        if self.state.current_operation == OperationKind.SCALE:
            self._perform(OperationKind.SCALE)
        return self._finish()

    def on_scale_target_changed(self, target: ScaleTarget) -> SceneUpdate:
        self.state.scale_target = ScaleTarget(target)
        if self.state.current_operation == OperationKind.SCALE:
            self._perform(OperationKind.SCALE)
        return self._finish()

    def on_reset(self) -> SceneUpdate:
        self.state.reset()
        self._sync_operand_arrows()
        self._destroy_result_arrow()
        return self._finish()

    def on_view_mode_changed(self, mode: ViewMode) -> SceneUpdate:
        """Camera-only transition, vectors and arrows are untouched."""
        mode = ViewMode(mode)
        self.state.view_mode = mode
        self.state.camera = CameraState.for_mode(mode)
        self._camera_changed = True
        logger.debug(f"View mode changed to {mode}")
        return self._finish()

    def dispatch(self, event: SceneEvent) -> SceneUpdate:
        """Route an explicit event to its transition."""
        match event:
            case OperandsChanged(a=a, b=b):
                return self.on_operands_changed(a, b)
            case OperationSelected(kind=kind):
                return self.on_operation_selected(kind)
            case ScaleFactorChanged(value=value):
                return self.on_scale_factor_changed(value)
            case ScaleTargetChanged(target=target):
                return self.on_scale_target_changed(target)
            case Reset():
                return self.on_reset()
            case ViewModeChanged(mode=mode):
                return self.on_view_mode_changed(mode)
            case _:
                raise TypeError(f"Unsupported scene event: {event!r}")

    def live_arrows(self) -> list[ArrowHandle]:
        """Arrow handles that currently exist, in drawing order."""
        handles = [self.state.arrow_a, self.state.arrow_b, self.state.arrow_result]
        return [h for h in handles if h is not None]

    # --------------------------------------------------------------------------
    # Internal: transitions
    # --------------------------------------------------------------------------

    def _perform(self, kind: OperationKind) -> None:
        """Enter `kind`: recompute, then drop the old result arrow and redraw."""
        # State is only mutated once the result exists
        result = compute_operation(
            kind,
            self.state.operand_a,
            self.state.operand_b,
            scale_factor=self.state.scale_factor,
            scale_target=self.state.scale_target,
        )

        self._destroy_result_arrow()
        self.state.current_operation = kind
        self.state.current_result = result

        if isinstance(result, VectorResult):
            handle = ArrowHandle.from_vector(ArrowRole.RESULT, COLORS[ArrowRole.RESULT.value], result.vector)
            self.state.arrow_result = handle
            self._pending.append(ArrowCommand(ArrowAction.CREATE, handle))

        if result is None:
            logger.info(f"Operation selected: {kind}")
        else:
            logger.info(f"Operation selected: {kind} -> {result.description}")

    def _ensure_initialized(self) -> None:
        if not self.state.is_initialized:
            self._sync_operand_arrows()

    def _sync_operand_arrows(self) -> None:
        self.state.arrow_a = self._update_or_create(ArrowRole.A, self.state.operand_a, self.state.arrow_a)
        self.state.arrow_b = self._update_or_create(ArrowRole.B, self.state.operand_b, self.state.arrow_b)

    def _update_or_create(self, role: ArrowRole, vector: Vector3, existing: Optional[ArrowHandle]) -> ArrowHandle:
        if existing is not None:
            existing.set_vector(vector)
            self._pending.append(ArrowCommand(ArrowAction.UPDATE, existing))
            return existing

        handle = ArrowHandle.from_vector(role, COLORS[role.value], vector)
        self._pending.append(ArrowCommand(ArrowAction.CREATE, handle))
        return handle

    def _destroy_result_arrow(self) -> None:
        if self.state.arrow_result is not None:
            self._pending.append(ArrowCommand(ArrowAction.DESTROY, self.state.arrow_result))
            self.state.arrow_result = None

    def _finish(self) -> SceneUpdate:
        """Collect the pending commands into a SceneUpdate and clear them."""
        state = self.state
        result = state.current_result

        update = SceneUpdate(
            operation_label=operation_label(state.current_operation, state.scale_target),
            result_text=result.display_text if result is not None else NO_RESULT_TEXT,
            commands=self._pending,
            arrows=self.live_arrows(),
            operand_a=state.operand_a,
            operand_b=state.operand_b,
            scale_factor=state.scale_factor,
            scale_target=state.scale_target,
            current_operation=state.current_operation,
            camera=state.camera if self._camera_changed else None,
        )

        for cmd in self._pending:
            logger.debug(f"Arrow {cmd.action}: {cmd.handle.role} (id={cmd.handle.id}, length={cmd.handle.length:.3f})")

        self._pending = []
        self._camera_changed = False
        return update
