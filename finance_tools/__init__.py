"""Calculation engine and JSON API behind the finance-tools calculators."""

__version__ = "0.1.0"
