from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal

from sumcalculator.model import state as transitions
from sumcalculator.model.state import CalculatorState, Operand

logger = logging.getLogger(__name__)


class CalculatorStore(QObject):
    """
    Owns the current calculator snapshot and publishes every new one.

    Views connect to `state_changed` and redraw from the emitted snapshot;
    they never mutate state directly.
    """
    state_changed = Signal(object)

    def __init__(self, initial: CalculatorState | None = None) -> None:
        super().__init__()
        self._state = initial if initial is not None else CalculatorState()

    @property
    def state(self) -> CalculatorState:
        return self._state

    def _publish(self, new_state: CalculatorState) -> None:
        self._state = new_state
        self.state_changed.emit(self._state)

    def edit(self, operand: Operand, text: str) -> None:
        self._publish(transitions.edit(self._state, Operand(operand), text))

    def compute(self) -> None:
        self._publish(transitions.compute(self._state))

    def reset(self) -> None:
        self._publish(transitions.reset(self._state))
        logger.debug("Calculator state has been reset.")

    def trigger_on_enter(self, key: str) -> None:
        """Compute on Enter. Other keys publish nothing."""
        new_state = transitions.trigger_on_enter(self._state, key)
        if new_state is not self._state:
            self._publish(new_state)
