"""Typed failures raised by the calculators."""

from __future__ import annotations

import math


class CalculationError(ValueError):
    """Base class for every calculator failure.

    ``kind`` is the stable name the API reports to the front end.
    """

    kind = "CalculationError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"kind": self.kind, "message": self.message}


class InvalidInputError(CalculationError):
    """Out-of-range or non-positive values that make the formula meaningless."""

    kind = "InvalidInput"


class InsufficientPaymentError(CalculationError):
    """The loan payment does not exceed the first month's interest."""

    kind = "InsufficientPayment"


class UnresolvableError(CalculationError):
    """The schedule does not finish within the month safety cap."""

    kind = "Unresolvable"


def require_finite(**values: float) -> None:
    for name, value in values.items():
        if not math.isfinite(value):
            raise InvalidInputError(f"{name} must be a finite number, got {value}")


def require_non_negative(**values: float) -> None:
    require_finite(**values)
    for name, value in values.items():
        if value < 0:
            raise InvalidInputError(f"{name} must be >= 0, got {value}")


def require_positive(**values: float) -> None:
    require_finite(**values)
    for name, value in values.items():
        if value <= 0:
            raise InvalidInputError(f"{name} must be > 0, got {value}")
