"""Canonical test fixtures used across all tests.

Fixture: ¥1,000,000 loan, 4.5% annual rate, 30-year term.
"""

import pytest

from src.models.mortgage import LoanRequest, RepaymentMethod


@pytest.fixture
def level_payment_request() -> LoanRequest:
    """¥1M, 4.5%, 30 years, equal principal and interest."""
    return LoanRequest(
        repayment_method=RepaymentMethod.EQUAL_PRINCIPAL_INTEREST,
        loan_amount=1_000_000,
        annual_interest_rate_percent=4.5,
        loan_years=30,
    )


@pytest.fixture
def declining_payment_request() -> LoanRequest:
    """¥1M, 4.5%, 30 years, equal principal."""
    return LoanRequest(
        repayment_method=RepaymentMethod.EQUAL_PRINCIPAL,
        loan_amount=1_000_000,
        annual_interest_rate_percent=4.5,
        loan_years=30,
    )


@pytest.fixture
def calculate_payload() -> dict:
    """Form body as the calculator page submits it (amount in ten-thousands)."""
    return {
        "repayment_method": "equal-principal-interest",
        "loan_amount": 100,
        "annual_interest_rate": 4.5,
        "loan_years": 30,
    }
