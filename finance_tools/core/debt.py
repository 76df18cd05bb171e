"""Multi-debt payoff simulation: snowball, avalanche and minimum-only."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Mapping, Optional, Sequence, Union

from pydantic import ValidationError

from finance_tools.core.errors import (
    InvalidInputError,
    UnresolvableError,
    require_non_negative,
    require_positive,
)
from finance_tools.core.simulator import monthly_rate
from finance_tools.schemas.debt import (
    Debt,
    DebtPayoffResult,
    Strategy,
    StrategyResult,
    TimelinePoint,
)

DEFAULT_MAX_MONTHS = 1200


@dataclass
class DebtState:
    """Working copy of one debt while a strategy is simulated."""

    name: str
    balance: float
    monthly_rate: float
    min_payment: float
    paid_off_month: Optional[int] = None

    @property
    def paid_off(self) -> bool:
        return self.paid_off_month is not None


@dataclass
class MonthPayments:
    """Bookkeeping for one simulated month."""

    month: int
    interest: float
    minimums: float
    # extra budget plus freed minimums available this month
    pool: float
    rollover: float
    target: Optional[str]
    total_balance: float
    paid_off: List[str]


def order_debts(debts: Sequence[Debt], strategy: Strategy) -> List[DebtState]:
    """Fresh working states in the order ``strategy`` attacks them.

    ``sorted`` is stable, so ties keep the input order.
    """
    states = [
        DebtState(
            name=debt.name,
            balance=float(debt.balance),
            monthly_rate=monthly_rate(debt.rate),
            min_payment=float(debt.min_payment),
        )
        for debt in debts
    ]
    if strategy is Strategy.SNOWBALL:
        return sorted(states, key=lambda state: state.balance)
    if strategy is Strategy.AVALANCHE:
        return sorted(states, key=lambda state: -state.monthly_rate)
    return states


def _step_month(
    month: int,
    states: List[DebtState],
    extra_payment: float,
    rollover: bool,
) -> MonthPayments:
    # capacity freed by debts retired in earlier months
    freed = sum(state.min_payment for state in states if state.paid_off) if rollover else 0.0
    pool = extra_payment + freed

    interest_total = 0.0
    minimums_total = 0.0
    for state in states:
        if state.paid_off:
            continue
        interest = state.balance * state.monthly_rate
        interest_total += interest
        due = state.balance + interest
        payment = min(state.min_payment, due)
        minimums_total += payment
        state.balance = due - payment if payment < due else 0.0

    # the whole pool goes to one target; whatever it cannot absorb is not
    # carried to the next debt this month
    applied = 0.0
    target = next((state for state in states if state.balance > 0), None)
    if target is not None and pool > 0:
        applied = min(pool, target.balance)
        target.balance = target.balance - applied if applied < target.balance else 0.0

    paid_off: List[str] = []
    for state in states:
        if not state.paid_off and state.balance <= 0:
            state.balance = 0.0
            state.paid_off_month = month
            paid_off.append(state.name)

    return MonthPayments(
        month=month,
        interest=interest_total,
        minimums=minimums_total,
        pool=pool,
        rollover=applied,
        target=target.name if applied > 0 else None,
        total_balance=sum(state.balance for state in states),
        paid_off=paid_off,
    )


def iter_months(
    debts: Sequence[Debt],
    strategy: Strategy,
    extra_payment: float = 0.0,
    max_months: int = DEFAULT_MAX_MONTHS,
) -> Iterator[MonthPayments]:
    """Yield one ``MonthPayments`` per month until every balance is zero.

    Each month every open debt accrues interest and receives its minimum.
    Then the extra budget plus the minimums freed by debts already paid
    off goes, in full, to the first open debt in strategy order. The
    minimum-only baseline applies neither extra nor freed payments.
    """
    rollover = strategy is not Strategy.MINIMUM_ONLY
    extra = extra_payment if rollover else 0.0
    states = order_debts(debts, strategy)

    month = 0
    while any(not state.paid_off for state in states):
        month += 1
        if month > max_months:
            remaining = sum(state.balance for state in states)
            raise UnresolvableError(
                f"{strategy.value} payoff does not finish within {max_months} months "
                f"({remaining:.2f} still owed); raise the payments"
            )
        yield _step_month(month, states, extra, rollover)


def simulate_strategy(
    debts: Sequence[Debt],
    strategy: Strategy,
    extra_payment: float = 0.0,
    max_months: int = DEFAULT_MAX_MONTHS,
) -> StrategyResult:
    total_interest = 0.0
    total_months = 0
    timeline: List[TimelinePoint] = []
    payoff_order: List[str] = []
    for payments in iter_months(debts, strategy, extra_payment, max_months):
        total_months = payments.month
        total_interest += payments.interest
        timeline.append(TimelinePoint(month=payments.month, total_balance=payments.total_balance))
        payoff_order.extend(payments.paid_off)

    return StrategyResult(
        strategy=strategy,
        total_months=total_months,
        total_interest=total_interest,
        payoff_order=payoff_order,
        timeline=timeline,
    )


def _coerce(debts: Iterable[Union[Debt, Mapping[str, Any]]]) -> List[Debt]:
    try:
        return [debt if isinstance(debt, Debt) else Debt.model_validate(debt) for debt in debts]
    except ValidationError as exc:
        raise InvalidInputError(f"invalid debt: {exc.errors()[0]['msg']}") from exc


def _validate(debts: Sequence[Debt], extra_payment: float) -> None:
    if not debts:
        raise InvalidInputError("at least one debt with a balance and minimum payment is required")
    require_non_negative(extra_payment=extra_payment)

    seen = set()
    for debt in debts:
        if not debt.name:
            raise InvalidInputError("every debt needs a name")
        if debt.name in seen:
            raise InvalidInputError(f"debt names must be unique, {debt.name!r} appears twice")
        seen.add(debt.name)
        require_positive(balance=debt.balance, min_payment=debt.min_payment)
        require_non_negative(rate=debt.rate)


def compute_debt_payoff(
    debts: Iterable[Union[Debt, Mapping[str, Any]]],
    extra_payment: float,
    max_months: int = DEFAULT_MAX_MONTHS,
) -> DebtPayoffResult:
    """Simulate all three strategies over the same debts and compare interest.

    ``debts`` may be ``Debt`` models or plain mappings with the same fields.
    """
    debts = _coerce(debts)
    _validate(debts, extra_payment)

    snowball = simulate_strategy(debts, Strategy.SNOWBALL, extra_payment, max_months)
    avalanche = simulate_strategy(debts, Strategy.AVALANCHE, extra_payment, max_months)
    minimum_only = simulate_strategy(debts, Strategy.MINIMUM_ONLY, 0.0, max_months)

    return DebtPayoffResult(
        snowball=snowball,
        avalanche=avalanche,
        minimum_only=minimum_only,
        interest_saved_snowball=minimum_only.total_interest - snowball.total_interest,
        interest_saved_avalanche=minimum_only.total_interest - avalanche.total_interest,
    )
