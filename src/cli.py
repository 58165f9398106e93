"""CLI for the mortgage calculator.

Usage:
    python -m src.cli --method equal-principal-interest --wan 100 --rate 4.5 --years 30
    python -m src.cli --method equal-principal --amount 1000000 --rate 4.5 --years 30
"""

import argparse
import sys

from src.dashboard.display import result_rows
from src.engine.amortization import compute
from src.engine.formatting import format_currency, scale_loan_amount
from src.models.mortgage import LOAN_TERMS_YEARS, Err, LoanRequest, RepaymentMethod


def print_result(result, loan_request: LoanRequest) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {result.method.label}")
    print(f"{'=' * 60}")
    print(f"  Loan Amount:      {format_currency(loan_request.loan_amount)}")
    print(f"  Interest Rate:    {loan_request.annual_interest_rate_percent}%")
    print(f"  Term:             {loan_request.loan_years} years")
    print()

    for row in result_rows(result):
        print(f"  {row['label'] + ':':<22}{row['value']:>18}")
        print(f"  {'':<22}{row['description']}")
    print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Mortgage repayment calculator")
    parser.add_argument(
        "--method",
        required=True,
        help="Repayment method: " + " | ".join(m.value for m in RepaymentMethod),
    )
    amount = parser.add_mutually_exclusive_group(required=True)
    amount.add_argument("--amount", type=float, help="Loan amount in currency units")
    amount.add_argument("--wan", type=float, help="Loan amount in ten-thousands")
    parser.add_argument("--rate", type=float, required=True, help="Annual interest rate in percent (e.g. 4.5)")
    parser.add_argument(
        "--years",
        type=int,
        required=True,
        help="Loan term in years (" + ", ".join(str(y) for y in LOAN_TERMS_YEARS) + ")",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    loan_amount = args.amount if args.amount is not None else scale_loan_amount(args.wan)
    loan_request = LoanRequest(
        repayment_method=args.method,
        loan_amount=loan_amount,
        annual_interest_rate_percent=args.rate,
        loan_years=args.years,
    )

    outcome = compute(loan_request)
    if isinstance(outcome, Err):
        print(f"Error: {outcome.error.message}", file=sys.stderr)
        return 2

    print_result(outcome.value, loan_request)
    return 0


if __name__ == "__main__":
    sys.exit(main())
