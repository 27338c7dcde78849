"""
Presentation mapping: what the calculator panel must show for a snapshot.
Kept free of Qt so the rules can be checked without a display.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sumcalculator.model.numbers import format_number
from sumcalculator.model.state import CalculatorState


@dataclass(frozen=True)
class Presentation:
    operand_a: str
    operand_b: str
    error_text: Optional[str] = None
    result_text: Optional[str] = None
    details_text: Optional[str] = None

    @property
    def shows_error(self) -> bool:
        return self.error_text is not None

    @property
    def shows_result(self) -> bool:
        return self.result_text is not None


def present(state: CalculatorState) -> Presentation:
    if not state.has_result:
        return Presentation(
            operand_a=state.operand_a,
            operand_b=state.operand_b,
            error_text=state.error_message,
        )

    result_text = format_number(state.result)
    return Presentation(
        operand_a=state.operand_a,
        operand_b=state.operand_b,
        result_text=result_text,
        details_text=f"{state.operand_a} + {state.operand_b} = {result_text}",
    )
