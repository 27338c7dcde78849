"""
Calculator State (Data Model)
=============================
This module defines the state snapshot of the calculator form and the
transitions applied to it in response to user input.

Why is this file needed?
------------------------
1. State Management: It holds the two operand texts, the result and the
   current validation error in one immutable value.
2. Transitions: Every user action maps to a pure function that takes the
   current snapshot and returns the next one. Nothing is merged in place.
3. Decoupling: The store publishes snapshots; views only read them.

Classes:
    Operand: Which input field an edit targets.
    CalculatorState: The snapshot.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Optional

from sumcalculator.model.errors import (
    CalculatorInputError,
    ErrorKind,
    InvalidNumberError,
    MissingInputError,
)
from sumcalculator.model.numbers import WHITESPACE, parse_float_prefix

logger = logging.getLogger(__name__)

ENTER_KEYS = frozenset({"Enter", "Return"})


class Operand(StrEnum):
    A = "a"
    B = "b"


@dataclass(frozen=True)
class CalculatorState:
    """
    One snapshot of the form.
    Invariant: `result` and `error` are never both set.
    """
    operand_a: str = ""
    operand_b: str = ""
    result: Optional[float] = None
    error: Optional[ErrorKind] = None

    def __post_init__(self) -> None:
        if self.result is not None and self.error is not None:
            raise ValueError("A state cannot hold both a result and an error.")

    @property
    def error_message(self) -> Optional[str]:
        return self.error.value if self.error is not None else None

    @property
    def has_result(self) -> bool:
        return self.result is not None


def parse_operands(text_a: str, text_b: str) -> tuple[float, float]:
    """
    Validate and parse both operand texts.

    Raises:
        MissingInputError: either text is empty after stripping whitespace.
        InvalidNumberError: either stripped text has no numeric prefix.
    """
    stripped_a, stripped_b = text_a.strip(WHITESPACE), text_b.strip(WHITESPACE)
    if not stripped_a or not stripped_b:
        raise MissingInputError()

    value_a = parse_float_prefix(stripped_a)
    value_b = parse_float_prefix(stripped_b)
    if value_a is None or value_b is None:
        raise InvalidNumberError()

    return value_a, value_b


# --- TRANSITIONS ---

def edit(state: CalculatorState, operand: Operand, text: str) -> CalculatorState:
    """Overwrite one operand verbatim and drop any stale result or error."""
    if operand == Operand.A:
        return replace(state, operand_a=text, result=None, error=None)
    if operand == Operand.B:
        return replace(state, operand_b=text, result=None, error=None)
    raise ValueError(f"Unknown operand: {operand!r}")


def compute(state: CalculatorState) -> CalculatorState:
    """Validate both operands, then store either their sum or the error."""
    cleared = replace(state, result=None, error=None)
    try:
        value_a, value_b = parse_operands(cleared.operand_a, cleared.operand_b)
    except CalculatorInputError as e:
        logger.debug(f"Validation failed: {e.kind.name}")
        return replace(cleared, error=e.kind)

    total = value_a + value_b
    logger.debug(f"Computed {value_a!r} + {value_b!r} = {total!r}")
    return replace(cleared, result=total)


def reset(state: CalculatorState) -> CalculatorState:
    """Return the initial snapshot, whatever the previous one was."""
    return CalculatorState()


def trigger_on_enter(state: CalculatorState, key: str) -> CalculatorState:
    """Compute when `key` is the Enter/confirm key, otherwise keep the state."""
    if key in ENTER_KEYS:
        return compute(state)
    return state
