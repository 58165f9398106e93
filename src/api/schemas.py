"""Pydantic schemas for API request/response models."""

from decimal import Decimal
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from src.engine.formatting import scale_loan_amount
from src.models.mortgage import LoanRequest


# ---- Request schemas ----

class MortgageForm(BaseModel):
    """Calculator form as submitted.

    Every field is optional here; missing values are rejected by the
    calculator itself so the caller gets the field-specific error.
    """
    repayment_method: str | None = Field(None, description='"equal-principal-interest" or "equal-principal"')
    loan_amount: float | None = Field(None, description="Loan amount in form units (ten-thousands by default)")
    annual_interest_rate: float | None = Field(None, description="Annual rate in percent, e.g. 4.5")
    loan_years: int | None = Field(None, description="Loan term: 10, 20 or 30")

    def to_loan_request(self, unit: Decimal | None = None) -> LoanRequest:
        return LoanRequest(
            repayment_method=self.repayment_method,
            loan_amount=scale_loan_amount(self.loan_amount, unit),
            annual_interest_rate_percent=self.annual_interest_rate,
            loan_years=self.loan_years,
        )


# ---- Response schemas ----

class RepaymentMethodOption(BaseModel):
    value: str
    label: str


class OptionsResponse(BaseModel):
    repayment_methods: list[RepaymentMethodOption]
    loan_terms_years: list[int]
    loan_amount_unit: Decimal
    currency_symbol: str


class LevelPaymentResponse(BaseModel):
    repayment_method: Literal["equal-principal-interest"] = "equal-principal-interest"
    loan_amount: Decimal
    monthly_payment: Decimal
    total_interest: Decimal
    total_payment: Decimal
    formatted: dict[str, str] = {}


class DecliningPaymentResponse(BaseModel):
    repayment_method: Literal["equal-principal"] = "equal-principal"
    loan_amount: Decimal
    first_month_payment: Decimal
    monthly_decrease: Decimal
    total_interest: Decimal
    total_payment: Decimal
    formatted: dict[str, str] = {}


CalculationResponse = Annotated[
    Union[LevelPaymentResponse, DecliningPaymentResponse],
    Field(discriminator="repayment_method"),
]


class ValidationErrorDetail(BaseModel):
    kind: str
    message: str
