from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


class RepaymentMethod(Enum):
    EQUAL_PRINCIPAL_INTEREST = "equal-principal-interest"  # Level payment
    EQUAL_PRINCIPAL = "equal-principal"  # Declining balance

    @property
    def label(self) -> str:
        return REPAYMENT_METHOD_LABELS[self]


REPAYMENT_METHOD_LABELS = {
    RepaymentMethod.EQUAL_PRINCIPAL_INTEREST: "Equal Principal & Interest",
    RepaymentMethod.EQUAL_PRINCIPAL: "Equal Principal",
}

LOAN_TERMS_YEARS = (10, 20, 30)


@dataclass(frozen=True)
class LoanRequest:
    """Raw loan parameters as handed over by the form layer.

    Nothing here is trusted until `compute` has validated it.
    """
    repayment_method: RepaymentMethod | str | None
    loan_amount: float | int | Decimal | None  # Plain currency amount, not ten-thousands
    annual_interest_rate_percent: float | int | Decimal | None  # 4.5 means 4.5%
    loan_years: int | None


@dataclass(frozen=True)
class LevelPaymentResult:
    """Equal principal and interest: the same payment every month."""
    monthly_payment: Decimal
    total_interest: Decimal
    total_payment: Decimal
    method: RepaymentMethod = field(default=RepaymentMethod.EQUAL_PRINCIPAL_INTEREST, init=False)


@dataclass(frozen=True)
class DecliningPaymentResult:
    """Equal principal: payment shrinks by `monthly_decrease` each month."""
    first_month_payment: Decimal
    monthly_decrease: Decimal
    total_interest: Decimal
    total_payment: Decimal
    method: RepaymentMethod = field(default=RepaymentMethod.EQUAL_PRINCIPAL, init=False)


AmortizationResult = LevelPaymentResult | DecliningPaymentResult


class ValidationErrorKind(Enum):
    INVALID_REPAYMENT_METHOD = "invalid_repayment_method"
    INVALID_LOAN_AMOUNT = "invalid_loan_amount"
    INVALID_INTEREST_RATE = "invalid_interest_rate"
    INVALID_LOAN_YEARS = "invalid_loan_years"


VALIDATION_MESSAGES = {
    ValidationErrorKind.INVALID_REPAYMENT_METHOD: (
        'Repayment method must be "equal-principal-interest" or "equal-principal"'
    ),
    ValidationErrorKind.INVALID_LOAN_AMOUNT: "Loan amount must be a positive number",
    ValidationErrorKind.INVALID_INTEREST_RATE: "Annual interest rate must be a positive number",
    ValidationErrorKind.INVALID_LOAN_YEARS: "Loan term must be 10, 20 or 30 years",
}


@dataclass(frozen=True)
class LoanValidationError:
    kind: ValidationErrorKind

    @property
    def message(self) -> str:
        return VALIDATION_MESSAGES[self.kind]


@dataclass(frozen=True)
class Ok:
    value: AmortizationResult


@dataclass(frozen=True)
class Err:
    error: LoanValidationError


CalculationOutcome = Ok | Err
