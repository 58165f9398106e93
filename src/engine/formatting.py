"""Currency display and form-unit scaling."""

from decimal import Decimal, ROUND_HALF_UP

from src.config import settings
from src.engine.amortization import CENTS_CONTEXT

TWO_PLACES = Decimal("0.01")


def format_currency(amount: Decimal | float | int, symbol: str | None = None) -> str:
    """Format an amount with symbol, thousands grouping and exactly two decimals.

    format_currency(Decimal("1824067.1")) -> "¥1,824,067.10"
    """
    symbol = settings.currency_symbol if symbol is None else symbol
    value = Decimal(str(amount)).quantize(TWO_PLACES, ROUND_HALF_UP, context=CENTS_CONTEXT)
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{value.copy_abs():,.2f}"


def amount_unit_label(unit: Decimal | None = None) -> str:
    """Suffix describing the form's amount unit: "× 10,000", or "" for plain amounts."""
    unit = Decimal(str(settings.loan_amount_unit if unit is None else unit))
    if unit == 1:
        return ""
    return f"× {unit.normalize():,f}"


def scale_loan_amount(entered: float | int | Decimal | None, unit: Decimal | None = None):
    """Convert a form amount (e.g. in ten-thousands) to a plain currency amount.

    Non-numeric input is passed through untouched so the calculator can
    reject it with its own error.
    """
    unit = settings.loan_amount_unit if unit is None else unit
    if isinstance(entered, bool) or not isinstance(entered, (int, float, Decimal)):
        return entered
    if isinstance(entered, float):
        return entered * float(unit)
    # Decimal product never overflows; the calculator rejects what float cannot hold
    return entered * unit
