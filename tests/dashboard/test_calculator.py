from contextvars import copy_context

from dash import no_update
from dash._callback_context import context_value
from dash._utils import AttributeDict

from src.dashboard.calculator import MODAL_HIDDEN, MODAL_SHOWN, handle_form
from src.models.mortgage import LoanValidationError, ValidationErrorKind

FORM = ("equal-principal-interest", 100, 4.5, 30)


def _run(triggered, *form):
    """Invoke the form callback as if `triggered` had just been clicked."""

    def run_callback():
        context_value.set(AttributeDict(
            triggered_inputs=[{"prop_id": f"{triggered}.n_clicks", "value": 1}],
        ))
        return handle_form(1, 0, 0, 0, 0, *(form or FORM))

    return copy_context().run(run_callback)


class TestCalculate:
    def test_shows_result_modal(self):
        result, result_style, error, error_style, loading = _run("calculate-btn")
        assert result_style == MODAL_SHOWN
        assert error_style == MODAL_HIDDEN
        assert error is no_update
        assert loading == ""
        assert "¥5,066.85" in str(result)

    def test_declining_payment_rows(self):
        result, result_style, *_ = _run("calculate-btn", "equal-principal", 100, 4.5, 30)
        assert result_style == MODAL_SHOWN
        assert "First Month Payment" in str(result)
        assert "¥6,527.78" in str(result)

    def test_invalid_form_shows_error_message(self):
        result, result_style, error, error_style, loading = _run(
            "calculate-btn", "equal-principal", 100, 4.5, 15,
        )
        assert error_style == MODAL_SHOWN
        assert result_style == MODAL_HIDDEN
        assert result is no_update
        assert error.children == LoanValidationError(ValidationErrorKind.INVALID_LOAN_YEARS).message

    def test_empty_form_reports_method(self):
        _, _, error, error_style, _ = _run("calculate-btn", None, None, None, None)
        assert error_style == MODAL_SHOWN
        assert error.children == LoanValidationError(ValidationErrorKind.INVALID_REPAYMENT_METHOD).message


class TestCloseModals:
    def test_close_result_button(self):
        assert _run("close-result-btn") == (no_update, MODAL_HIDDEN, no_update, no_update, "")

    def test_close_error_button(self):
        assert _run("close-error-btn") == (no_update, no_update, no_update, MODAL_HIDDEN, "")

    def test_result_backdrop_click(self):
        assert _run("result-modal-backdrop") == (no_update, MODAL_HIDDEN, no_update, no_update, "")

    def test_error_backdrop_click(self):
        assert _run("error-modal-backdrop") == (no_update, no_update, no_update, MODAL_HIDDEN, "")

    def test_close_leaves_form_alone(self):
        # Closing never runs the calculator, even with an invalid form
        outcome = _run("close-error-btn", None, None, None, None)
        assert outcome[2] is no_update
