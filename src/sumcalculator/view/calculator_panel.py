"""
Sum Calculator Panel
"""
from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QEvent, QObject, Qt
from PySide6.QtGui import QKeyEvent
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QFormLayout, QGroupBox, QLabel, QLineEdit, QPushButton
)

from sumcalculator.app.store import CalculatorStore
from sumcalculator.model.state import CalculatorState, Operand
from sumcalculator.view.presentation import present


def key_name(event: QKeyEvent) -> Optional[str]:
    """Return "Enter" for Return/keypad Enter, None for keys the store does not handle."""
    if event.key() in (Qt.Key.Key_Return, Qt.Key.Key_Enter):
        return "Enter"
    return None


class SumCalculatorPanel(QWidget):
    def __init__(self, store: CalculatorStore, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store

        layout = QVBoxLayout(self)

        # --- Header ---
        self.lbl_title = QLabel("➕ Sum Calculator")
        self.lbl_title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.lbl_title.setStyleSheet("font-size: 20px; font-weight: bold;")
        layout.addWidget(self.lbl_title)

        self.lbl_subtitle = QLabel("Enter two numbers to calculate their sum")
        self.lbl_subtitle.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.lbl_subtitle.setStyleSheet("color: gray;")
        layout.addWidget(self.lbl_subtitle)

        # --- Inputs ---
        grp_inputs = QGroupBox()
        form = QFormLayout(grp_inputs)

        self.edit_a = QLineEdit()
        self.edit_a.setPlaceholderText("Enter first number")
        form.addRow("Number 1:", self.edit_a)

        self.edit_b = QLineEdit()
        self.edit_b.setPlaceholderText("Enter second number")
        form.addRow("Number 2:", self.edit_b)

        layout.addWidget(grp_inputs)

        # --- Actions ---
        buttons = QHBoxLayout()
        self.btn_calculate = QPushButton("Calculate Sum")
        self.btn_calculate.setMinimumHeight(40)
        buttons.addWidget(self.btn_calculate)

        self.btn_reset = QPushButton("Reset")
        self.btn_reset.setMinimumHeight(40)
        buttons.addWidget(self.btn_reset)
        layout.addLayout(buttons)

        # --- Feedback ---
        self.lbl_error = QLabel("")
        self.lbl_error.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.lbl_error.setStyleSheet("color: red; font-weight: bold;")
        layout.addWidget(self.lbl_error)

        self.grp_result = QGroupBox()
        result_layout = QVBoxLayout(self.grp_result)
        self.lbl_result_caption = QLabel("Result:")
        self.lbl_result_value = QLabel("")
        self.lbl_result_value.setStyleSheet("color: green; font-size: 24px; font-weight: bold;")
        self.lbl_result_details = QLabel("")
        self.lbl_result_details.setStyleSheet("color: gray;")
        for lbl in (self.lbl_result_caption, self.lbl_result_value, self.lbl_result_details):
            lbl.setAlignment(Qt.AlignmentFlag.AlignCenter)
            result_layout.addWidget(lbl)
        layout.addWidget(self.grp_result)

        layout.addStretch()

        # --- SIGNAL CONNECTIONS ---
        # textEdited fires for user input only, not for setText() in render()
        self.edit_a.textEdited.connect(self.on_operand_a_edited)
        self.edit_b.textEdited.connect(self.on_operand_b_edited)
        self.edit_a.installEventFilter(self)
        self.edit_b.installEventFilter(self)

        self.btn_calculate.clicked.connect(self.store.compute)
        self.btn_reset.clicked.connect(self.store.reset)

        self.store.state_changed.connect(self.render)

        # Initial Render
        self.render(self.store.state)

    # --- SLOTS ---

    def on_operand_a_edited(self, text: str) -> None:
        self.store.edit(Operand.A, text)

    def on_operand_b_edited(self, text: str) -> None:
        self.store.edit(Operand.B, text)

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        if watched in (self.edit_a, self.edit_b) and event.type() == QEvent.Type.KeyPress:
            name = key_name(event)
            if name is not None:
                self.store.trigger_on_enter(name)
                return True
        return super().eventFilter(watched, event)

    def render(self, state: CalculatorState) -> None:
        """Redraw every field from the given snapshot."""
        view = present(state)

        # Only touch the text when it differs, so the cursor stays put while typing
        if self.edit_a.text() != view.operand_a:
            self.edit_a.setText(view.operand_a)
        if self.edit_b.text() != view.operand_b:
            self.edit_b.setText(view.operand_b)

        self.lbl_error.setText(view.error_text or "")
        self.lbl_error.setHidden(not view.shows_error)

        self.lbl_result_value.setText(view.result_text or "")
        self.lbl_result_details.setText(view.details_text or "")
        self.grp_result.setHidden(not view.shows_result)
