from __future__ import annotations

from math import isclose, nan

import pytest

from finance_tools.core.compound import compare_compound_interest, compute_compound_interest
from finance_tools.core.errors import InvalidInputError
from finance_tools.schemas.compound import CompoundInterestRequest


def test_contributions_and_growth_over_twenty_years():
    result = compute_compound_interest(10000, 500, 7, 20)

    assert result.total_contributions == 10000 + 500 * 12 * 20
    assert result.final_balance > result.total_contributions
    assert len(result.breakdown) == 20
    assert [row.year for row in result.breakdown] == list(range(1, 21))

    r = 0.07 / 12
    n = 240
    expected = 10000 * (1 + r) ** n + 500 * ((1 + r) ** n - 1) / r
    assert isclose(result.final_balance, expected, rel_tol=1e-9)
    assert isclose(result.total_interest, result.final_balance - result.total_contributions, rel_tol=1e-9)


def test_yearly_interest_is_growth_minus_contributions():
    result = compute_compound_interest(5000, 200, 5, 5)

    previous = 5000.0
    for row in result.breakdown:
        assert isclose(row.yearly_interest, row.balance - previous - 200 * 12, rel_tol=1e-9)
        previous = row.balance


def test_zero_rate_accumulates_contributions_only():
    result = compute_compound_interest(1000, 100, 0, 2)

    assert result.final_balance == 3400
    assert result.total_interest == 0
    assert [row.balance for row in result.breakdown] == [2200, 3400]


@pytest.mark.parametrize(
    "principal, contribution, rate, years",
    [
        (-1, 0, 5, 10),
        (1000, -50, 5, 10),
        (1000, 0, -1, 10),
        (1000, 0, 5, 0),
        (1000, 0, 5, -3),
        (1000, 0, 5, 2.5),
        (nan, 0, 5, 10),
    ],
)
def test_invalid_inputs_are_rejected(principal, contribution, rate, years):
    with pytest.raises(InvalidInputError):
        compute_compound_interest(principal, contribution, rate, years)


def test_repeated_calls_are_identical():
    assert compute_compound_interest(10000, 500, 7, 20) == compute_compound_interest(10000, 500, 7, 20)


def test_compare_reports_comparison_minus_primary():
    primary = CompoundInterestRequest(principal=10000, monthly_contribution=500, annual_rate=7, years=20)
    comparison = CompoundInterestRequest(principal=10000, monthly_contribution=500, annual_rate=10, years=20)

    result = compare_compound_interest(primary, comparison)

    assert result.final_balance_difference > 0
    assert isclose(
        result.final_balance_difference,
        result.comparison.final_balance - result.primary.final_balance,
    )
    assert result.primary == compute_compound_interest(10000, 500, 7, 20)
