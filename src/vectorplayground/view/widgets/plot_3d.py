"""
3D Visualization Widget (PyVista Wrapper)
"""

from __future__ import annotations

from typing import Optional

import logging

from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QFrame, QButtonGroup
from PySide6.QtCore import Signal
from PySide6.QtGui import QCloseEvent, QResizeEvent

from pyvistaqt import QtInteractor
import pyvista as pv

from vectorplayground.config import AXES_LENGTH, COLORS, GRID_DIVISIONS, GRID_SIZE
from vectorplayground.controller.synchronizer import SceneUpdate
from vectorplayground.model.arrows import ArrowAction, ArrowHandle
from vectorplayground.model.state import CameraState, ViewMode
from vectorplayground.view.widgets.vtk_utils import VtkUtils

logger = logging.getLogger(__name__)


class PyVistaWidget(QWidget):
    # Emitted with a ViewMode value when the overlay 3D/2D buttons are used
    view_mode_requested = Signal(str)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        self.layout_box: QVBoxLayout = QVBoxLayout(self)
        self.layout_box.setContentsMargins(0, 0, 0, 0)

        self.plotter: QtInteractor = QtInteractor(self)
        self.layout_box.addWidget(self.plotter)

        self._vtk_utils = VtkUtils()

        # --- Actors state ---
        # Keyed on ArrowHandle.id so in-place updates keep the same actor
        self._arrow_actors: dict[int, pv.Actor] = {}

        self._init_plotter()
        self._setup_overlay_controls()

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def apply_update(self, update: SceneUpdate) -> None:
        """
        Replays the arrow commands of one transition, then moves the camera
        if the transition changed it.
        """
        for cmd in update.commands:
            match cmd.action:
                case ArrowAction.CREATE:
                    self._create_arrow(cmd.handle)
                case ArrowAction.UPDATE:
                    self._update_arrow(cmd.handle)
                case ArrowAction.DESTROY:
                    self._destroy_arrow(cmd.handle)

        if update.camera is not None:
            self.set_camera(update.camera)

        self.plotter.render()

    def set_camera(self, camera: CameraState) -> None:
        self.plotter.camera_position = [camera.position, camera.focal_point, camera.view_up]
        self.plotter.reset_camera_clipping_range()

    def set_view_mode_checked(self, mode: ViewMode) -> None:
        """Sync the overlay buttons without emitting view_mode_requested."""
        btn = self.btn_view_3d if ViewMode(mode) == ViewMode.VIEW_3D else self.btn_view_2d
        btn.blockSignals(True)
        btn.setChecked(True)
        btn.blockSignals(False)

    # ------------------------------------------------------------------------------
    # Internal: Arrow Management
    # ------------------------------------------------------------------------------

    def _create_arrow(self, handle: ArrowHandle) -> None:
        if handle.id in self._arrow_actors:
            self._update_arrow(handle)
            return

        mesh = self._vtk_utils.arrow_to_polydata(handle)
        degenerate = mesh.n_points == 0
        if degenerate:
            # Placeholder geometry, the actor stays hidden until the vector is non-zero
            mesh = pv.Arrow()

        actor = self.plotter.add_mesh(
            mesh,
            color=handle.color,
            smooth_shading=True,
            pickable=False,
            show_scalar_bar=False,
            label=str(handle.role),
        )
        actor.SetVisibility(not degenerate)
        self._arrow_actors[handle.id] = actor

    def _update_arrow(self, handle: ArrowHandle) -> None:
        actor = self._arrow_actors.get(handle.id)
        if actor is None:
            self._create_arrow(handle)
            return

        mesh = self._vtk_utils.arrow_to_polydata(handle)
        if mesh.n_points == 0:
            actor.SetVisibility(False)
            return

        # Update existing data in-place so the actor is not rebuilt
        actor.mapper.dataset.copy_from(mesh)
        actor.SetVisibility(True)

    def _destroy_arrow(self, handle: ArrowHandle) -> None:
        actor = self._arrow_actors.pop(handle.id, None)
        if actor is None:
            return
        try:
            self.plotter.remove_actor(actor)
        except Exception as e:
            logger.warning(f"Failed to remove arrow actor for {handle.role}: {e}")

    # ------------------------------------------------------------------------------
    # Internal: Setup
    # ------------------------------------------------------------------------------

    def _init_plotter(self) -> None:
        self.plotter.set_background(COLORS["background"])
        self.plotter.enable_lightkit()

        grid = self._vtk_utils.grid_xz_polydata(GRID_SIZE, GRID_DIVISIONS)
        self.plotter.add_mesh(grid, color=COLORS["grid_minor"], line_width=1, pickable=False, show_scalar_bar=False)

        for axis, key in enumerate(("x_axis", "y_axis", "z_axis")):
            line = self._vtk_utils.axis_polydata(axis, AXES_LENGTH)
            self.plotter.add_mesh(line, color=COLORS[key], line_width=2, pickable=False, show_scalar_bar=False)

        self.set_camera(CameraState.for_mode(ViewMode.VIEW_3D))

    def _setup_overlay_controls(self) -> None:
        """Floating 3D/2D toggle buttons."""
        self.overlay_widget = QFrame(self)
        self.overlay_widget.setStyleSheet("""
            QFrame { background-color: rgba(255, 255, 255, 200); border-radius: 6px; border: 1px solid #ccc; }
            QPushButton { background-color: transparent; border: none; padding: 4px 10px; }
            QPushButton:checked { background-color: rgba(0, 120, 215, 50); border: 1px solid #0078D7; border-radius: 3px; }
            QPushButton:hover { background-color: rgba(0, 0, 0, 10); }
        """)

        layout = QHBoxLayout(self.overlay_widget)
        layout.setContentsMargins(4, 4, 4, 4)

        self._view_group = QButtonGroup(self)
        self._view_group.setExclusive(True)

        def make_btn(text: str, mode: ViewMode, checked: bool) -> QPushButton:
            btn = QPushButton(text)
            btn.setCheckable(True)
            btn.setChecked(checked)
            btn.setToolTip(f"Switch to {text} view")

            def on_toggled(checked: bool) -> None:
                if checked:
                    self.view_mode_requested.emit(mode.value)

            btn.toggled.connect(on_toggled)
            self._view_group.addButton(btn)
            layout.addWidget(btn)
            return btn

        self.btn_view_3d = make_btn("3D", ViewMode.VIEW_3D, True)
        self.btn_view_2d = make_btn("2D", ViewMode.VIEW_2D, False)

        self.overlay_widget.adjustSize()
        self.overlay_widget.move(10, 10)

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        self.overlay_widget.raise_()

    def closeEvent(self, event: QCloseEvent) -> None:
        self.plotter.close()
        event.accept()
