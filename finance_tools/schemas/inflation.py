"""Data contracts for inflation erosion calculations."""

from typing import List

from pydantic import Field

from finance_tools.schemas.base import CamelModel


class InflationRequest(CamelModel):
    current_value: float = Field(..., gt=0)
    years: int = Field(..., ge=1, le=100)
    annual_rate: float = Field(..., ge=0, le=50, description="Annual inflation as a percentage.")


class InflationYear(CamelModel):
    year: int = Field(..., ge=1)
    future_value: float
    purchasing_power: float
    value_eroded: float
    # fraction, e.g. 0.0927 for 9.27%
    cumulative_inflation: float


class InflationResult(CamelModel):
    current_value: float
    future_equivalent: float
    future_purchasing_power: float
    total_inflation: float
    breakdown: List[InflationYear]


class InflationComparisonRequest(CamelModel):
    current_value: float = Field(..., gt=0)
    years: int = Field(..., ge=1, le=100)
    annual_rate: float = Field(..., ge=0, le=50)
    comparison_rate: float = Field(..., ge=0, le=50)


class InflationComparison(CamelModel):
    """Same value and horizon under two rates; differences are comparison minus primary."""

    primary: InflationResult
    comparison: InflationResult
    purchasing_power_difference: float
    future_equivalent_difference: float
