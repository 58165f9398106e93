"""Mortgage amortization summary: level payment vs. declining balance.

Pure functions: LoanRequest in, Ok/Err out. No I/O.

Amounts are computed in binary floating point and only the final figures
are rounded (half away from zero, two places), each one independently.
"""

import math
from decimal import Context, Decimal, ROUND_HALF_UP

from src.models.mortgage import (
    LOAN_TERMS_YEARS,
    CalculationOutcome,
    DecliningPaymentResult,
    Err,
    LevelPaymentResult,
    LoanRequest,
    LoanValidationError,
    Ok,
    RepaymentMethod,
    ValidationErrorKind,
)

TWO_PLACES = Decimal("0.01")

# Wide enough for every finite float quantized to cents
CENTS_CONTEXT = Context(prec=400)


def round_currency(value: float) -> Decimal:
    """Round a float amount to cents, half away from zero."""
    # Decimal(float) is exact, so ties are judged on the true binary value
    return Decimal(value).quantize(TWO_PLACES, ROUND_HALF_UP, context=CENTS_CONTEXT)


def _parse_method(value) -> RepaymentMethod | None:
    if isinstance(value, RepaymentMethod):
        return value
    try:
        return RepaymentMethod(value)
    except ValueError:
        return None


def _positive_finite(value) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return None
    if isinstance(value, Decimal) and not value.is_finite():
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    if not math.isfinite(number) or number <= 0:
        return None
    return number


def _parse_years(value) -> int | None:
    if isinstance(value, bool) or value not in LOAN_TERMS_YEARS:
        return None
    return int(value)


def _unrepresentable(*amounts: float) -> bool:
    return not all(math.isfinite(a) for a in amounts)


def level_payment(loan_amount: float, monthly_rate: float, total_months: int) -> CalculationOutcome:
    """Equal principal and interest (annuity).

    M = P * r * (1+r)^n / [(1+r)^n - 1]
    """
    try:
        factor = (1 + monthly_rate) ** total_months
    except OverflowError:
        return Err(LoanValidationError(ValidationErrorKind.INVALID_INTEREST_RATE))
    if factor == 1:
        # Rate too small to register at float precision
        return Err(LoanValidationError(ValidationErrorKind.INVALID_INTEREST_RATE))
    payment = loan_amount * monthly_rate * factor / (factor - 1)
    total_payment = payment * total_months
    total_interest = total_payment - loan_amount

    if _unrepresentable(payment, total_payment, total_interest):
        return Err(LoanValidationError(ValidationErrorKind.INVALID_LOAN_AMOUNT))

    return Ok(LevelPaymentResult(
        monthly_payment=round_currency(payment),
        total_interest=round_currency(total_interest),
        total_payment=round_currency(total_payment),
    ))


def declining_payment(loan_amount: float, monthly_rate: float, total_months: int) -> CalculationOutcome:
    """Equal principal: fixed principal slice, interest on the shrinking balance.

    The balance drops by one principal slice per month, so interest drops by
    slice * r every month and total interest is an arithmetic series.
    """
    monthly_principal = loan_amount / total_months
    first_month_interest = loan_amount * monthly_rate
    first_month_payment = monthly_principal + first_month_interest
    monthly_decrease = monthly_principal * monthly_rate

    # Last month's balance is exactly one principal slice
    last_month_interest = monthly_principal * monthly_rate
    total_interest = (first_month_interest + last_month_interest) * total_months / 2
    total_payment = loan_amount + total_interest

    if _unrepresentable(first_month_payment, monthly_decrease, total_interest, total_payment):
        return Err(LoanValidationError(ValidationErrorKind.INVALID_LOAN_AMOUNT))

    return Ok(DecliningPaymentResult(
        first_month_payment=round_currency(first_month_payment),
        monthly_decrease=round_currency(monthly_decrease),
        total_interest=round_currency(total_interest),
        total_payment=round_currency(total_payment),
    ))


def validate(request: LoanRequest) -> LoanValidationError | None:
    """Return the first failing field's error, or None if the request is usable."""
    if _parse_method(request.repayment_method) is None:
        return LoanValidationError(ValidationErrorKind.INVALID_REPAYMENT_METHOD)
    if _positive_finite(request.loan_amount) is None:
        return LoanValidationError(ValidationErrorKind.INVALID_LOAN_AMOUNT)
    if _positive_finite(request.annual_interest_rate_percent) is None:
        return LoanValidationError(ValidationErrorKind.INVALID_INTEREST_RATE)
    if _parse_years(request.loan_years) is None:
        return LoanValidationError(ValidationErrorKind.INVALID_LOAN_YEARS)
    return None


def compute(request: LoanRequest) -> CalculationOutcome:
    """Validate a loan request and summarize its repayment.

    Returns Ok(LevelPaymentResult | DecliningPaymentResult) or
    Err(LoanValidationError). Never raises for bad input: amounts too large
    for the totals to be represented are reported as INVALID_LOAN_AMOUNT,
    a rate whose compounding factor float cannot represent as
    INVALID_INTEREST_RATE.
    """
    error = validate(request)
    if error is not None:
        return Err(error)

    method = _parse_method(request.repayment_method)
    loan_amount = _positive_finite(request.loan_amount)
    monthly_rate = _positive_finite(request.annual_interest_rate_percent) / 100 / 12
    total_months = _parse_years(request.loan_years) * 12

    if method is RepaymentMethod.EQUAL_PRINCIPAL_INTEREST:
        return level_payment(loan_amount, monthly_rate, total_months)
    return declining_payment(loan_amount, monthly_rate, total_months)
