# Tests for the snapshot-to-view mapping

import pytest

from sumcalculator.model.errors import ErrorKind
from sumcalculator.model.state import CalculatorState
from sumcalculator.view.presentation import present


class TestPresent:
    def test_idle_shows_no_feedback(self):
        view = present(CalculatorState(operand_a="1", operand_b=""))

        assert (view.operand_a, view.operand_b) == ("1", "")
        assert not view.shows_error
        assert not view.shows_result
        assert view.details_text is None

    @pytest.mark.parametrize("kind", list(ErrorKind))
    def test_error_shown_without_result(self, kind):
        view = present(CalculatorState(operand_a="abc", operand_b="2", error=kind))

        assert view.error_text == kind.value
        assert view.result_text is None
        assert view.details_text is None

    def test_result_restates_operands(self):
        view = present(CalculatorState(operand_a="3", operand_b="4", result=7.0))

        assert not view.shows_error
        assert view.result_text == "7"
        assert view.details_text == "3 + 4 = 7"

    def test_details_use_raw_operand_text(self):
        """Operands are echoed exactly as typed, the sum is formatted."""
        view = present(CalculatorState(operand_a="12abc", operand_b=" 2.5", result=14.5))

        assert view.details_text == "12abc +  2.5 = 14.5"

    def test_nan_result_is_shown(self):
        view = present(CalculatorState(operand_a="Infinity", operand_b="-Infinity", result=float("nan")))

        assert view.result_text == "NaN"
