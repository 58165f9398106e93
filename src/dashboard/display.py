"""Display rows for the result modal.

Kept free of Dash imports so the CLI and tests can reuse it.
"""

from decimal import Decimal

from src.engine.formatting import amount_unit_label, format_currency
from src.models.mortgage import AmortizationResult, LevelPaymentResult, RepaymentMethod


def loan_summary_rows(
    method: RepaymentMethod,
    entered_amount,
    loan_amount,
    annual_rate,
    loan_years,
    unit_label: str | None = None,
) -> list[dict[str, str]]:
    unit_label = amount_unit_label() if unit_label is None else unit_label
    entered = f"{entered_amount} {unit_label}" if unit_label else f"{entered_amount}"
    return [
        {"label": "Loan Amount", "value": f"{entered} ({format_currency(Decimal(str(loan_amount)))})"},
        {"label": "Repayment Method", "value": method.label},
        {"label": "Annual Interest Rate", "value": f"{annual_rate}%"},
        {"label": "Loan Term", "value": f"{loan_years} years"},
    ]


def result_rows(result: AmortizationResult) -> list[dict[str, str]]:
    """Label/value/description triples, method-specific rows first."""
    if isinstance(result, LevelPaymentResult):
        rows = [{
            "label": "Monthly Payment",
            "value": format_currency(result.monthly_payment),
            "description": "Fixed payment every month",
        }]
    else:
        rows = [{
            "label": "First Month Payment",
            "value": format_currency(result.first_month_payment),
            "description": (
                f"Decreases by {format_currency(result.monthly_decrease)} each month; "
                "figures shown are the first payment and the monthly decrease"
            ),
        }]

    rows.append({
        "label": "Total Interest",
        "value": format_currency(result.total_interest),
        "description": "Interest paid over the whole term",
    })
    rows.append({
        "label": "Total Payment",
        "value": format_currency(result.total_payment),
        "description": "Principal plus interest",
    })
    return rows
