"""Declining-balance loan amortization."""

from __future__ import annotations

import math
from typing import List

from finance_tools.core.errors import InsufficientPaymentError, require_positive
from finance_tools.core.simulator import FlowSign, aggregate_years, monthly_rate, simulate
from finance_tools.schemas.loan import LoanPayoffResult, LoanYear


def payoff_months(principal: float, rate: float, payment: float) -> float:
    """Closed-form number of months to retire ``principal`` at monthly ``rate``.

    n = -ln(1 - P*r/A) / ln(1 + r), or P/A when the rate is zero.
    Callers must already know that ``payment`` exceeds the first month's interest.
    """
    if rate == 0:
        return principal / payment
    return -math.log1p(-principal * rate / payment) / math.log1p(rate)


def compute_loan_payoff(
    principal: float,
    annual_rate_pct: float,
    monthly_payment: float,
) -> LoanPayoffResult:
    """Amortize ``principal`` with a fixed payment and summarize each year.

    The payment is checked against the first month's interest before any
    stepping happens; a payment that never amortizes is rejected up front.
    """
    require_positive(
        principal=principal,
        annual_rate_pct=annual_rate_pct,
        monthly_payment=monthly_payment,
    )

    rate = monthly_rate(annual_rate_pct)
    first_interest = principal * rate
    # a payment equal to the interest up to rounding never amortizes either
    if monthly_payment <= first_interest or math.isclose(monthly_payment, first_interest, rel_tol=1e-9):
        raise InsufficientPaymentError(
            f"monthly payment {monthly_payment:.2f} does not exceed the first month's "
            f"interest of {first_interest:.2f}; the loan would never be paid off"
        )

    # the term is finite once the payment beats the interest; one spare month
    # absorbs floating-point residue left by the closed form
    expected = payoff_months(principal, rate, monthly_payment)
    steps = simulate(
        initial_balance=principal,
        monthly_rate=rate,
        monthly_flow=monthly_payment,
        max_months=math.ceil(expected) + 1,
        sign=FlowSign.PAYOFF,
    )

    annual_summary: List[LoanYear] = []
    total_payments = 0.0
    total_interest = 0.0
    for totals in aggregate_years(steps):
        total_payments += totals.flow
        total_interest += totals.interest
        annual_summary.append(
            LoanYear(
                year=totals.year,
                total_payments=totals.flow,
                total_principal=totals.flow - totals.interest,
                total_interest=totals.interest,
                end_balance=totals.end_balance,
            )
        )

    return LoanPayoffResult(
        principal=principal,
        total_months=len(steps),
        total_interest=total_interest,
        total_payments=total_payments,
        annual_summary=annual_summary,
    )
