"""Month-by-month balance stepper shared by the time-series calculators.

Every projection (compound growth, loan payoff, retirement accumulation) is
the same loop:

    interest = balance * monthly_rate
    GROWTH:  balance = balance + interest + flow
    PAYOFF:  payment = min(flow, balance + interest)
             balance = balance + interest - payment

The loop emits one ``MonthStep`` per elapsed month; callers that report per
year fold the steps with ``aggregate_years``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence

MONTHS_PER_YEAR = 12


class FlowSign(str, Enum):
    GROWTH = "growth"
    PAYOFF = "payoff"


@dataclass(frozen=True)
class MonthStep:
    month: int
    opening_balance: float
    interest: float
    # contribution added (GROWTH) or payment applied after clipping (PAYOFF)
    flow: float
    balance: float


@dataclass(frozen=True)
class YearTotals:
    year: int
    months: int
    flow: float
    interest: float
    end_balance: float


def monthly_rate(annual_rate_pct: float) -> float:
    """Convert an annual percentage into a per-month decimal rate."""
    return annual_rate_pct / 100 / MONTHS_PER_YEAR


def simulate(
    initial_balance: float,
    monthly_rate: float,
    monthly_flow: float,
    max_months: int,
    sign: FlowSign,
    until: Optional[Callable[[MonthStep], bool]] = None,
) -> List[MonthStep]:
    """Step ``initial_balance`` forward for at most ``max_months`` months.

    PAYOFF runs stop after the month in which the balance reaches zero.
    ``until`` is an extra early-stop predicate checked after every step.
    """
    sign = FlowSign(sign)
    steps: List[MonthStep] = []
    balance = float(initial_balance)

    for month in range(1, max_months + 1):
        opening = balance
        interest = opening * monthly_rate if monthly_rate else 0.0

        if sign is FlowSign.GROWTH:
            flow = monthly_flow
            balance = opening + interest + flow
        else:
            due = opening + interest
            flow = min(monthly_flow, due)
            balance = due - flow if flow < due else 0.0

        step = MonthStep(
            month=month,
            opening_balance=opening,
            interest=interest,
            flow=flow,
            balance=balance,
        )
        steps.append(step)

        if sign is FlowSign.PAYOFF and balance <= 0:
            break
        if until is not None and until(step):
            break

    return steps


def aggregate_years(steps: Sequence[MonthStep]) -> List[YearTotals]:
    """Fold monthly steps into per-year totals; the last year may be partial."""
    years: List[YearTotals] = []
    for start in range(0, len(steps), MONTHS_PER_YEAR):
        chunk = steps[start:start + MONTHS_PER_YEAR]
        years.append(
            YearTotals(
                year=start // MONTHS_PER_YEAR + 1,
                months=len(chunk),
                flow=sum(step.flow for step in chunk),
                interest=sum(step.interest for step in chunk),
                end_balance=chunk[-1].balance,
            )
        )
    return years
