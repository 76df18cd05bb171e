"""Compound growth with a fixed monthly contribution."""

from __future__ import annotations

from typing import List

from finance_tools.core.errors import InvalidInputError, require_non_negative
from finance_tools.core.simulator import (
    MONTHS_PER_YEAR,
    FlowSign,
    aggregate_years,
    monthly_rate,
    simulate,
)
from finance_tools.schemas.compound import (
    CompoundComparison,
    CompoundInterestRequest,
    CompoundInterestResult,
    CompoundYear,
)


def compute_compound_interest(
    principal: float,
    monthly_contribution: float,
    annual_rate_pct: float,
    years: int,
) -> CompoundInterestResult:
    """
    Project a balance that earns ``annual_rate_pct`` compounded monthly.

    Order of operations (per month):
      1) Accrue interest on the opening balance.
      2) Add the contribution at the END of the month (it earns from next month).

    ``total_contributions`` counts the principal; a year's interest is its
    balance growth minus the contributions made that year.
    """
    require_non_negative(
        principal=principal,
        monthly_contribution=monthly_contribution,
        annual_rate_pct=annual_rate_pct,
        years=years,
    )
    if int(years) != years or years < 1:
        raise InvalidInputError(f"years must be a whole number >= 1, got {years}")
    years = int(years)

    steps = simulate(
        initial_balance=principal,
        monthly_rate=monthly_rate(annual_rate_pct),
        monthly_flow=monthly_contribution,
        max_months=years * MONTHS_PER_YEAR,
        sign=FlowSign.GROWTH,
    )

    breakdown: List[CompoundYear] = []
    contributed = float(principal)
    earned = 0.0
    for totals in aggregate_years(steps):
        contributed += totals.flow
        earned += totals.interest
        breakdown.append(
            CompoundYear(
                year=totals.year,
                balance=totals.end_balance,
                total_contributions=contributed,
                yearly_interest=totals.interest,
                total_interest=earned,
            )
        )

    final = breakdown[-1]
    return CompoundInterestResult(
        final_balance=final.balance,
        total_contributions=final.total_contributions,
        total_interest=final.total_interest,
        breakdown=breakdown,
    )


def _from_request(request: CompoundInterestRequest) -> CompoundInterestResult:
    return compute_compound_interest(
        principal=request.principal,
        monthly_contribution=request.monthly_contribution,
        annual_rate_pct=request.annual_rate,
        years=request.years,
    )


def compare_compound_interest(
    primary: CompoundInterestRequest,
    comparison: CompoundInterestRequest,
) -> CompoundComparison:
    """Run two independent scenarios and report comparison minus primary."""
    first = _from_request(primary)
    second = _from_request(comparison)
    return CompoundComparison(
        primary=first,
        comparison=second,
        final_balance_difference=second.final_balance - first.final_balance,
        total_interest_difference=second.total_interest - first.total_interest,
    )
