"""Pure calculation routines. Nothing in here touches Flask."""

from finance_tools.core.compound import compare_compound_interest, compute_compound_interest
from finance_tools.core.debt import compute_debt_payoff
from finance_tools.core.errors import (
    CalculationError,
    InsufficientPaymentError,
    InvalidInputError,
    UnresolvableError,
)
from finance_tools.core.inflation import compare_inflation, compute_inflation
from finance_tools.core.loan import compute_loan_payoff
from finance_tools.core.retirement import compute_retirement

__all__ = [
    "CalculationError",
    "InsufficientPaymentError",
    "InvalidInputError",
    "UnresolvableError",
    "compare_compound_interest",
    "compare_inflation",
    "compute_compound_interest",
    "compute_debt_payoff",
    "compute_inflation",
    "compute_loan_payoff",
    "compute_retirement",
]
