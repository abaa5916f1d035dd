"""
Vector Control Panel
Input fields for both operands, operation buttons, scale controls and the
result read-out.
"""
from typing import Optional

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGroupBox, QFormLayout, QLineEdit, QPushButton,
    QButtonGroup, QSlider, QLabel, QRadioButton
)
from PySide6.QtCore import Signal, Qt

from vectorplayground.config import (
    COLORS, DEFAULT_OPERAND_A, DEFAULT_OPERAND_B, DEFAULT_SCALE_FACTOR, NO_RESULT_TEXT,
    SCALE_FACTOR_DECIMALS, SCALE_FACTOR_MAX, SCALE_FACTOR_MIN, SCALE_FACTOR_STEP
)
from vectorplayground.controller.synchronizer import SceneUpdate
from vectorplayground.model.operations import OperationKind, ScaleTarget, format_factor, operation_label
from vectorplayground.model.vector import Vector3, create_vector

# (button text, operation) in display order
OPERATION_BUTTONS: list[tuple[str, OperationKind]] = [
    ("Add", OperationKind.ADD),
    ("Subtract", OperationKind.SUBTRACT),
    ("Scale", OperationKind.SCALE),
    ("Dot Product", OperationKind.DOT),
    ("Cross Product", OperationKind.CROSS),
]


class VectorInput(QGroupBox):
    """Three text fields for one operand. Malformed text is read as 0."""
    changed = Signal()

    def __init__(self, title: str, color: str, values: tuple[float, float, float]) -> None:
        super().__init__(title)
        self.setStyleSheet(f"QGroupBox {{ font-weight: bold; color: {color}; }}")

        form = QFormLayout(self)
        self.edits: list[QLineEdit] = []
        for axis, value in zip("xyz", values):
            edit = QLineEdit(format_factor(value))
            edit.textChanged.connect(lambda _text: self.changed.emit())
            form.addRow(f"{axis}:", edit)
            self.edits.append(edit)

    def vector(self) -> Vector3:
        x, y, z = (edit.text() for edit in self.edits)
        return create_vector(x, y, z)

    def set_vector(self, vector: Vector3) -> None:
        for edit, value in zip(self.edits, vector):
            edit.blockSignals(True)
            edit.setText(format_factor(value))
            edit.blockSignals(False)


class VectorControlPanel(QWidget):
    # Signals consumed by MainWindow and forwarded to the SceneSynchronizer
    operands_changed = Signal(object, object)
    operation_requested = Signal(str)
    scale_factor_changed = Signal(float)
    scale_target_changed = Signal(str)
    reset_requested = Signal()

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        layout = QVBoxLayout(self)

        # --- Operands ---
        self.input_a = VectorInput("Vector A", COLORS["vector_a"], DEFAULT_OPERAND_A)
        self.input_b = VectorInput("Vector B", COLORS["vector_b"], DEFAULT_OPERAND_B)
        self.input_a.changed.connect(self.on_operand_edited)
        self.input_b.changed.connect(self.on_operand_edited)
        layout.addWidget(self.input_a)
        layout.addWidget(self.input_b)

        # --- Operations ---
        grp_ops = QGroupBox("Operations")
        l_ops = QVBoxLayout(grp_ops)

        self.operation_group = QButtonGroup(self)
        self.operation_group.setExclusive(True)
        self.operation_buttons: dict[OperationKind, QPushButton] = {}
        for text, kind in OPERATION_BUTTONS:
            btn = QPushButton(text)
            btn.setCheckable(True)
            btn.setMinimumHeight(30)
            btn.setStyleSheet("QPushButton:checked { font-weight: bold; background-color: #d0e8ff; }")
            btn.clicked.connect(lambda _=False, k=kind: self.operation_requested.emit(k.value))
            self.operation_group.addButton(btn)
            self.operation_buttons[kind] = btn
            l_ops.addWidget(btn)

        self.btn_reset = QPushButton("Reset")
        self.btn_reset.setMinimumHeight(30)
        self.btn_reset.clicked.connect(lambda _=False: self.reset_requested.emit())
        l_ops.addWidget(self.btn_reset)

        layout.addWidget(grp_ops)

        # --- Scale ---
        grp_scale = QGroupBox("Scale")
        form_scale = QFormLayout(grp_scale)

        # The slider works in integer steps of SCALE_FACTOR_STEP
        self.slider_scale = QSlider(Qt.Horizontal)
        self.slider_scale.setRange(self._to_slider(SCALE_FACTOR_MIN), self._to_slider(SCALE_FACTOR_MAX))
        self.slider_scale.setValue(self._to_slider(DEFAULT_SCALE_FACTOR))
        self.slider_scale.valueChanged.connect(self.on_slider_changed)

        self.lbl_scale_value = QLabel(f"{DEFAULT_SCALE_FACTOR:.{SCALE_FACTOR_DECIMALS}f}")
        self.lbl_scale_value.setMinimumWidth(40)

        row_slider = QHBoxLayout()
        row_slider.addWidget(self.slider_scale)
        row_slider.addWidget(self.lbl_scale_value)
        form_scale.addRow("Factor:", row_slider)

        self.radio_a = QRadioButton("A")
        self.radio_b = QRadioButton("B")
        self.radio_a.setChecked(True)
        self.target_group = QButtonGroup(self)
        self.target_group.addButton(self.radio_a)
        self.target_group.addButton(self.radio_b)
        self.radio_a.toggled.connect(self.on_target_toggled)

        row_target = QHBoxLayout()
        row_target.addWidget(self.radio_a)
        row_target.addWidget(self.radio_b)
        row_target.addStretch()
        form_scale.addRow("Vector:", row_target)

        layout.addWidget(grp_scale)

        # --- Result ---
        grp_result = QGroupBox("Result")
        l_result = QVBoxLayout(grp_result)

        self.lbl_operation = QLabel(operation_label(OperationKind.NONE))
        self.lbl_operation.setStyleSheet("font-weight: bold;")
        l_result.addWidget(self.lbl_operation)

        self.lbl_result = QLabel(NO_RESULT_TEXT)
        self.lbl_result.setWordWrap(True)
        self.lbl_result.setTextInteractionFlags(Qt.TextSelectableByMouse)
        l_result.addWidget(self.lbl_result)

        layout.addWidget(grp_result)
        layout.addStretch()

    # --- Slots ---

    def on_operand_edited(self) -> None:
        self.operands_changed.emit(self.input_a.vector(), self.input_b.vector())

    def on_slider_changed(self, value: int) -> None:
        factor = self._from_slider(value)
        self.lbl_scale_value.setText(f"{factor:.{SCALE_FACTOR_DECIMALS}f}")
        self.scale_factor_changed.emit(factor)

    def on_target_toggled(self, checked_a: bool) -> None:
        target = ScaleTarget.A if checked_a else ScaleTarget.B
        self.scale_target_changed.emit(target.value)

    # --- State sync ---

    def load_from_update(self, update: SceneUpdate) -> None:
        """
        Refresh every widget from a SceneUpdate without emitting signals.
        Needed after reset, where the state changes behind the widgets.
        """
        self.input_a.set_vector(update.operand_a)
        self.input_b.set_vector(update.operand_b)

        self.slider_scale.blockSignals(True)
        self.slider_scale.setValue(self._to_slider(update.scale_factor))
        self.slider_scale.blockSignals(False)
        self.lbl_scale_value.setText(f"{update.scale_factor:.{SCALE_FACTOR_DECIMALS}f}")

        radio = self.radio_a if update.scale_target == ScaleTarget.A else self.radio_b
        for r in (self.radio_a, self.radio_b):
            r.blockSignals(True)
        radio.setChecked(True)
        for r in (self.radio_a, self.radio_b):
            r.blockSignals(False)

        self.show_result(update)

    def show_result(self, update: SceneUpdate) -> None:
        self.lbl_operation.setText(update.operation_label)
        self.lbl_result.setText(update.result_text)
        self._set_active_operation(update.current_operation)

    def _set_active_operation(self, kind: OperationKind) -> None:
        btn = self.operation_buttons.get(kind)
        if btn is not None:
            btn.setChecked(True)
            return
        # An exclusive group cannot be fully unchecked
        self.operation_group.setExclusive(False)
        for b in self.operation_buttons.values():
            b.setChecked(False)
        self.operation_group.setExclusive(True)

    @staticmethod
    def _to_slider(factor: float) -> int:
        return round(factor / SCALE_FACTOR_STEP)

    @staticmethod
    def _from_slider(value: int) -> float:
        return round(value * SCALE_FACTOR_STEP, SCALE_FACTOR_DECIMALS)
