"""Closed-form inflation erosion of a fixed amount."""

from __future__ import annotations

from typing import List

from finance_tools.core.errors import InvalidInputError, require_non_negative, require_positive
from finance_tools.schemas.inflation import InflationComparison, InflationResult, InflationYear


def compute_inflation(
    current_value: float,
    years: int,
    annual_rate_pct: float,
) -> InflationResult:
    """Price growth and purchasing-power loss for each year up to ``years``.

    No stepping is needed: year N uses (1 + r)^N directly. At a zero rate
    every per-year value equals ``current_value``.
    """
    require_positive(current_value=current_value)
    require_non_negative(annual_rate_pct=annual_rate_pct, years=years)
    if int(years) != years or years < 1:
        raise InvalidInputError(f"years must be a whole number >= 1, got {years}")

    rate = annual_rate_pct / 100
    breakdown: List[InflationYear] = []
    for year in range(1, int(years) + 1):
        if rate == 0:
            future_value = purchasing_power = float(current_value)
        else:
            factor = (1 + rate) ** year
            future_value = current_value * factor
            purchasing_power = current_value / factor
        breakdown.append(
            InflationYear(
                year=year,
                future_value=future_value,
                purchasing_power=purchasing_power,
                value_eroded=current_value - purchasing_power,
                cumulative_inflation=future_value / current_value - 1,
            )
        )

    last = breakdown[-1]
    return InflationResult(
        current_value=current_value,
        future_equivalent=last.future_value,
        future_purchasing_power=last.purchasing_power,
        total_inflation=last.cumulative_inflation,
        breakdown=breakdown,
    )


def compare_inflation(
    current_value: float,
    years: int,
    annual_rate_pct: float,
    comparison_rate_pct: float,
) -> InflationComparison:
    primary = compute_inflation(current_value, years, annual_rate_pct)
    comparison = compute_inflation(current_value, years, comparison_rate_pct)
    return InflationComparison(
        primary=primary,
        comparison=comparison,
        purchasing_power_difference=(
            comparison.future_purchasing_power - primary.future_purchasing_power
        ),
        future_equivalent_difference=comparison.future_equivalent - primary.future_equivalent,
    )
