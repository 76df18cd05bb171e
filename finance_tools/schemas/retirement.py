"""Data contracts for retirement projections."""

from typing import List

from pydantic import Field, model_validator

from finance_tools.schemas.base import CamelModel


class RetirementRequest(CamelModel):
    current_age: int = Field(..., ge=0, le=120)
    retirement_age: int = Field(..., ge=1, le=120)
    current_savings: float = Field(0.0, ge=0)
    monthly_contribution: float = Field(0.0, ge=0)
    expected_return: float = Field(..., ge=0, le=50, description="Annual return as a percentage.")
    withdrawal_rate: float = Field(
        4.0,
        ge=0,
        le=100,
        description="Share of the corpus withdrawn each year, as a percentage.",
    )

    @model_validator(mode="after")
    def ensure_retirement_after_current(self) -> "RetirementRequest":
        if self.retirement_age <= self.current_age:
            raise ValueError("retirementAge must be greater than currentAge")
        return self


class RetirementYear(CamelModel):
    age: int
    # elapsed years since the projection started, 1-based
    year: int = Field(..., ge=1)
    balance: float
    total_contributions: float
    yearly_growth: float


class RetirementResult(CamelModel):
    current_age: int
    retirement_age: int
    years_to_retirement: int
    retirement_corpus: float
    total_contributions: float
    total_growth: float
    annual_withdrawal: float
    monthly_withdrawal: float
    projection: List[RetirementYear]
