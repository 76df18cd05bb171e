"""Data contracts for multi-debt payoff simulations."""

from enum import Enum
from typing import List

from pydantic import Field

from finance_tools.schemas.base import CamelModel


class Strategy(str, Enum):
    SNOWBALL = "snowball"
    AVALANCHE = "avalanche"
    MINIMUM_ONLY = "minimumOnly"


class Debt(CamelModel):
    name: str = Field(..., min_length=1)
    balance: float = Field(..., gt=0)
    rate: float = Field(..., ge=0, le=100, description="Annual rate as a percentage.")
    min_payment: float = Field(..., gt=0)


class DebtPayoffRequest(CamelModel):
    debts: List[Debt] = Field(..., min_length=1, max_length=50)
    extra_payment: float = Field(0.0, ge=0)


class TimelinePoint(CamelModel):
    month: int = Field(..., ge=1)
    total_balance: float = Field(..., ge=0)


class StrategyResult(CamelModel):
    strategy: Strategy
    total_months: int
    total_interest: float
    payoff_order: List[str]
    timeline: List[TimelinePoint]


class DebtPayoffResult(CamelModel):
    snowball: StrategyResult
    avalanche: StrategyResult
    minimum_only: StrategyResult
    interest_saved_snowball: float
    interest_saved_avalanche: float
