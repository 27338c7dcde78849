"""
Validation Errors
=================
The two user-correctable failures of a compute attempt.
"""
from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """Validation failure kinds. The value is the message shown to the user."""
    MISSING_INPUT = "⚠️ Please enter both numbers"
    INVALID_NUMBER = "⚠️ Please enter valid numbers"


class CalculatorInputError(ValueError):
    """Base class for operand validation failures."""
    kind: ErrorKind

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.kind.value)


class MissingInputError(CalculatorInputError):
    kind = ErrorKind.MISSING_INPUT


class InvalidNumberError(CalculatorInputError):
    kind = ErrorKind.INVALID_NUMBER
