"""Property tests over the calculators."""

from __future__ import annotations

import math

from hypothesis import given, settings, strategies as st

from finance_tools.core.compound import compute_compound_interest
from finance_tools.core.debt import compute_debt_payoff
from finance_tools.core.inflation import compute_inflation
from finance_tools.core.loan import compute_loan_payoff
from finance_tools.core.simulator import monthly_rate
from finance_tools.schemas.debt import Debt

THREE_DEBTS = [
    Debt(name="A", balance=1000, rate=5, min_payment=25),
    Debt(name="B", balance=3000, rate=24, min_payment=90),
    Debt(name="C", balance=6000, rate=15, min_payment=150),
]


@st.composite
def debt_lists(draw):
    count = draw(st.integers(min_value=1, max_value=4))
    debts = []
    for index in range(count):
        balance = draw(st.floats(min_value=100, max_value=20000))
        rate = draw(st.floats(min_value=0, max_value=30))
        # enough to clear the debt within ten years on minimums alone
        minimum = balance * monthly_rate(rate) + balance / 120
        debts.append(Debt(name=f"debt {index}", balance=balance, rate=rate, min_payment=minimum))
    return debts


@settings(max_examples=50, deadline=None)
@given(
    principal=st.floats(min_value=1000, max_value=1_000_000),
    rate=st.floats(min_value=0.5, max_value=30),
    term=st.integers(min_value=1, max_value=600),
)
def test_loan_payments_reconcile_to_principal(principal, rate, term):
    payment = principal * monthly_rate(rate) + principal / term
    result = compute_loan_payoff(principal, rate, payment)

    assert math.isclose(result.total_payments - result.total_interest, principal, rel_tol=1e-6)
    assert result.total_months <= term
    assert result.annual_summary[-1].end_balance == 0


@settings(max_examples=50, deadline=None)
@given(
    low=st.floats(min_value=0, max_value=2000),
    high=st.floats(min_value=0, max_value=2000),
)
def test_more_extra_payment_never_costs_more_interest(low, high):
    low, high = sorted((low, high))
    less = compute_debt_payoff(THREE_DEBTS, low)
    more = compute_debt_payoff(THREE_DEBTS, high)

    assert more.snowball.total_interest <= less.snowball.total_interest + 1e-6
    assert more.avalanche.total_interest <= less.avalanche.total_interest + 1e-6


@settings(max_examples=50, deadline=None)
@given(debts=debt_lists(), extra=st.floats(min_value=0, max_value=1000))
def test_strategies_never_lose_to_minimum_only(debts, extra):
    result = compute_debt_payoff(debts, extra)
    names = sorted(debt.name for debt in debts)

    assert result.interest_saved_snowball >= -1e-6
    assert result.interest_saved_avalanche >= -1e-6
    for strategy in (result.snowball, result.avalanche, result.minimum_only):
        assert sorted(strategy.payoff_order) == names


@settings(max_examples=25, deadline=None)
@given(
    principal=st.floats(min_value=0, max_value=1_000_000),
    contribution=st.floats(min_value=0, max_value=10_000),
    rate=st.floats(min_value=0, max_value=50),
    years=st.integers(min_value=1, max_value=100),
)
def test_compound_interest_is_repeatable_and_non_decreasing(principal, contribution, rate, years):
    first = compute_compound_interest(principal, contribution, rate, years)

    assert first == compute_compound_interest(principal, contribution, rate, years)
    balances = [row.balance for row in first.breakdown]
    assert all(later >= earlier for earlier, later in zip(balances, balances[1:]))
    assert first.final_balance >= first.total_contributions - 1e-6


@settings(max_examples=25, deadline=None)
@given(
    value=st.floats(min_value=1, max_value=1_000_000),
    years=st.integers(min_value=1, max_value=100),
    rate=st.floats(min_value=0, max_value=50),
)
def test_inflation_is_repeatable_and_erodes(value, years, rate):
    result = compute_inflation(value, years, rate)

    assert result == compute_inflation(value, years, rate)
    assert result.future_purchasing_power <= value
    assert result.future_equivalent >= value
