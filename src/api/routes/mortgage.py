"""Mortgage calculator routes."""

import asyncio
import logging
from dataclasses import fields
from decimal import Decimal

from fastapi import APIRouter, HTTPException

from src.api.schemas import (
    CalculationResponse,
    DecliningPaymentResponse,
    LevelPaymentResponse,
    MortgageForm,
    OptionsResponse,
    RepaymentMethodOption,
    ValidationErrorDetail,
)
from src.config import settings
from src.engine.amortization import compute
from src.engine.formatting import format_currency
from src.models.mortgage import (
    LOAN_TERMS_YEARS,
    AmortizationResult,
    Err,
    LevelPaymentResult,
    RepaymentMethod,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/mortgage", tags=["mortgage"])


def _result_to_response(result: AmortizationResult, loan_amount: Decimal):
    """Convert engine result to the method-specific API response."""
    amounts = {
        f.name: getattr(result, f.name)
        for f in fields(result)
        if f.name != "method"
    }
    formatted = {name: format_currency(value) for name, value in amounts.items()}
    formatted["loan_amount"] = format_currency(loan_amount)

    if isinstance(result, LevelPaymentResult):
        return LevelPaymentResponse(loan_amount=loan_amount, formatted=formatted, **amounts)
    return DecliningPaymentResponse(loan_amount=loan_amount, formatted=formatted, **amounts)


@router.get("/options", response_model=OptionsResponse)
async def get_options():
    """Choices for populating the calculator form."""
    return OptionsResponse(
        repayment_methods=[
            RepaymentMethodOption(value=m.value, label=m.label) for m in RepaymentMethod
        ],
        loan_terms_years=list(LOAN_TERMS_YEARS),
        loan_amount_unit=settings.loan_amount_unit,
        currency_symbol=settings.currency_symbol,
    )


@router.post(
    "/calculate",
    response_model=CalculationResponse,
    responses={422: {"model": ValidationErrorDetail}},
)
async def calculate(form: MortgageForm):
    """Run the amortization calculator on a submitted form."""
    if settings.calculation_delay_seconds > 0:
        await asyncio.sleep(settings.calculation_delay_seconds)

    loan_request = form.to_loan_request()
    outcome = compute(loan_request)

    if isinstance(outcome, Err):
        logger.info("Rejected mortgage calculation: %s", outcome.error.kind.value)
        raise HTTPException(
            status_code=422,
            detail=ValidationErrorDetail(
                kind=outcome.error.kind.value,
                message=outcome.error.message,
            ).model_dump(),
        )

    result = outcome.value
    logger.debug("Computed %s for %s", result.method.value, loan_request.loan_amount)
    return _result_to_response(result, Decimal(str(loan_request.loan_amount)))
