"""Retirement projection: accumulation, then withdrawal-rate outputs."""

from __future__ import annotations

from finance_tools.core.compound import compute_compound_interest
from finance_tools.core.errors import InvalidInputError, require_non_negative
from finance_tools.core.simulator import MONTHS_PER_YEAR
from finance_tools.schemas.retirement import RetirementResult, RetirementYear


def compute_retirement(
    current_age: int,
    retirement_age: int,
    current_savings: float,
    monthly_contribution: float,
    expected_return_pct: float,
    withdrawal_rate_pct: float,
) -> RetirementResult:
    """
    Two phases, run in sequence:
      1) Accumulation: compound growth from ``current_age`` to ``retirement_age``,
         the same monthly stepping as the compound interest calculator.
      2) Withdrawal: the corpus times the withdrawal rate gives the annual
         (and monthly) income it supports.
    """
    require_non_negative(
        current_age=current_age,
        retirement_age=retirement_age,
        current_savings=current_savings,
        monthly_contribution=monthly_contribution,
        expected_return_pct=expected_return_pct,
        withdrawal_rate_pct=withdrawal_rate_pct,
    )
    if int(current_age) != current_age or int(retirement_age) != retirement_age:
        raise InvalidInputError("ages must be whole numbers of years")
    if retirement_age <= current_age:
        raise InvalidInputError(
            f"retirement age ({retirement_age}) must be greater than current age ({current_age})"
        )
    current_age = int(current_age)
    retirement_age = int(retirement_age)
    years = retirement_age - current_age

    growth = compute_compound_interest(
        principal=current_savings,
        monthly_contribution=monthly_contribution,
        annual_rate_pct=expected_return_pct,
        years=years,
    )
    projection = [
        RetirementYear(
            age=current_age + row.year,
            year=row.year,
            balance=row.balance,
            total_contributions=row.total_contributions,
            yearly_growth=row.yearly_interest,
        )
        for row in growth.breakdown
    ]

    corpus = growth.final_balance
    annual_withdrawal = corpus * withdrawal_rate_pct / 100
    return RetirementResult(
        current_age=current_age,
        retirement_age=retirement_age,
        years_to_retirement=years,
        retirement_corpus=corpus,
        total_contributions=growth.total_contributions,
        total_growth=corpus - growth.total_contributions,
        annual_withdrawal=annual_withdrawal,
        monthly_withdrawal=annual_withdrawal / MONTHS_PER_YEAR,
        projection=projection,
    )
