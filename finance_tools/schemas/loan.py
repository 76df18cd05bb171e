"""Data contracts for loan payoff calculations."""

from typing import List

from pydantic import Field

from finance_tools.schemas.base import CamelModel


class LoanPayoffRequest(CamelModel):
    principal: float = Field(..., gt=0, description="Amount borrowed.")
    annual_rate: float = Field(..., ge=0.1, le=50, description="Annual rate as a percentage.")
    monthly_payment: float = Field(..., ge=1, description="Fixed payment made every month.")


class LoanYear(CamelModel):
    """Amortization totals for one year; the last year may be partial."""

    year: int = Field(..., ge=1)
    total_payments: float
    total_principal: float
    total_interest: float
    end_balance: float = Field(..., ge=0)


class LoanPayoffResult(CamelModel):
    principal: float
    total_months: int
    total_interest: float
    total_payments: float
    annual_summary: List[LoanYear]
