"""Data contracts for compound interest calculations."""

from typing import List

from pydantic import Field

from finance_tools.schemas.base import CamelModel


class CompoundInterestRequest(CamelModel):
    """Inputs for a growth-with-contribution projection."""

    principal: float = Field(..., ge=0, description="Starting balance.")
    monthly_contribution: float = Field(
        0.0,
        ge=0,
        description="Amount added at the end of every month.",
    )
    annual_rate: float = Field(
        ...,
        ge=0,
        le=50,
        description="Annual rate as a percentage (e.g. 7 for 7%).",
    )
    years: int = Field(..., ge=1, le=100, description="Number of years to project.")


class CompoundYear(CamelModel):
    """Single row of the yearly breakdown."""

    year: int = Field(..., ge=1)
    balance: float
    total_contributions: float
    yearly_interest: float
    total_interest: float


class CompoundInterestResult(CamelModel):
    final_balance: float
    total_contributions: float
    total_interest: float
    breakdown: List[CompoundYear]


class CompoundComparisonRequest(CamelModel):
    primary: CompoundInterestRequest
    comparison: CompoundInterestRequest


class CompoundComparison(CamelModel):
    """Two scenarios side by side; differences are comparison minus primary."""

    primary: CompoundInterestResult
    comparison: CompoundInterestResult
    final_balance_difference: float
    total_interest_difference: float
