"""
Main Application Window
=======================
The top-level container that hosts the calculator panel. It holds no logic.
"""
from PySide6.QtWidgets import QMainWindow

from sumcalculator.app.store import CalculatorStore
from sumcalculator.config import VISIBLE_APP_NAME, WINDOW_HEIGHT, WINDOW_WIDTH
from sumcalculator.view.calculator_panel import SumCalculatorPanel


class MainWindow(QMainWindow):
    def __init__(self, store: CalculatorStore) -> None:
        super().__init__()
        self.store: CalculatorStore = store

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(WINDOW_WIDTH, WINDOW_HEIGHT)

        self.calculator_panel = SumCalculatorPanel(self.store, self)
        self.setCentralWidget(self.calculator_panel)
