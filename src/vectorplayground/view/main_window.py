"""
Main Application Window
=======================
The primary GUI container: control panel on the left, 3D viewport on the right.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It forwards every panel/viewport signal to the SceneSynchronizer
   and hands the resulting SceneUpdate back to the widgets.
"""
import logging

from PySide6.QtWidgets import QMainWindow, QSplitter
from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QCloseEvent

from vectorplayground.controller.synchronizer import (
    SceneSynchronizer, SceneUpdate, SceneEvent,
    OperandsChanged, OperationSelected, ScaleFactorChanged, ScaleTargetChanged, Reset, ViewModeChanged,
)
from vectorplayground.model.operations import OperationKind, ScaleTarget
from vectorplayground.model.state import ViewMode
from vectorplayground.model.vector import Vector3
from vectorplayground.view.panels.vector_panel import VectorControlPanel
from vectorplayground.view.widgets.plot_3d import PyVistaWidget

logger = logging.getLogger(__name__)

VISIBLE_APP_NAME = "Vector Playground"


class MainWindow(QMainWindow):
    def __init__(self, synchronizer: SceneSynchronizer) -> None:
        super().__init__()
        self.synchronizer: SceneSynchronizer = synchronizer

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1280, 800)

        # --- SPLITTER (CONTENT AREA) ---
        splitter = QSplitter(Qt.Horizontal)
        self.setCentralWidget(splitter)

        # --- LEFT SIDE: Controls ---
        self.panel = VectorControlPanel()
        splitter.addWidget(self.panel)

        # --- RIGHT SIDE: 3D Visualization ---
        self.visualizer = PyVistaWidget()
        splitter.addWidget(self.visualizer)

        splitter.setSizes([320, 960])

        # --- SIGNAL CONNECTIONS ---
        self.panel.operands_changed.connect(self.on_operands_changed)
        self.panel.operation_requested.connect(self.on_operation_requested)
        self.panel.scale_factor_changed.connect(self.on_scale_factor_changed)
        self.panel.scale_target_changed.connect(self.on_scale_target_changed)
        self.panel.reset_requested.connect(self.on_reset)
        self.visualizer.view_mode_requested.connect(self.on_view_mode_requested)

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        # Initial Render
        self._apply(self.synchronizer.initialize(), refresh_inputs=True)

    def _create_actions(self) -> None:
        self.act_reset = QAction("Reset", self)
        self.act_reset.setShortcut("Ctrl+R")
        self.act_reset.triggered.connect(self.on_reset)

        self.act_exit = QAction("Exit", self)
        self.act_exit.setShortcut("Ctrl+Q")
        self.act_exit.triggered.connect(self.close)

        self.act_view_3d = QAction("3D View", self)
        self.act_view_3d.triggered.connect(lambda: self.on_view_mode_requested(ViewMode.VIEW_3D.value))

        self.act_view_2d = QAction("2D View (Top-Down)", self)
        self.act_view_2d.triggered.connect(lambda: self.on_view_mode_requested(ViewMode.VIEW_2D.value))

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")
        file_menu.addAction(self.act_reset)
        file_menu.addSeparator()
        file_menu.addAction(self.act_exit)

        view_menu = menu_bar.addMenu("&View")
        view_menu.addAction(self.act_view_3d)
        view_menu.addAction(self.act_view_2d)

    # --- EVENT SLOTS ---

    def on_operands_changed(self, a: Vector3, b: Vector3) -> None:
        self._dispatch(OperandsChanged(a, b))

    def on_operation_requested(self, kind: str) -> None:
        self._dispatch(OperationSelected(OperationKind(kind)))

    def on_scale_factor_changed(self, value: float) -> None:
        self._dispatch(ScaleFactorChanged(value))

    def on_scale_target_changed(self, target: str) -> None:
        self._dispatch(ScaleTargetChanged(ScaleTarget(target)))

    def on_reset(self) -> None:
        # Reset changes operands behind the input fields
        self._dispatch(Reset(), refresh_inputs=True)

    def on_view_mode_requested(self, mode: str) -> None:
        view_mode = ViewMode(mode)
        self.visualizer.set_view_mode_checked(view_mode)
        self._dispatch(ViewModeChanged(view_mode))

    # --- HELPER METHODS ---

    def _dispatch(self, event: SceneEvent, refresh_inputs: bool = False) -> None:
        self._apply(self.synchronizer.dispatch(event), refresh_inputs=refresh_inputs)

    def _apply(self, update: SceneUpdate, refresh_inputs: bool = False) -> None:
        if refresh_inputs:
            self.panel.load_from_update(update)
        else:
            self.panel.show_result(update)
        self.visualizer.apply_update(update)

    def closeEvent(self, event: QCloseEvent, /) -> None:
        """Close the PyVista plotter safely before the window goes away."""
        if self.visualizer and self.visualizer.plotter:
            self.visualizer.plotter.close()
        event.accept()
