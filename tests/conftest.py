from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from finance_tools.app import create_app
from finance_tools.schemas.debt import Debt


@pytest.fixture()
def app() -> Flask:
    return create_app({"TESTING": True})


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def three_debts() -> list:
    """Smallest balance (A), highest rate (B) and the rest (C) are all different debts."""
    return [
        Debt(name="A", balance=1000, rate=5, min_payment=25),
        Debt(name="B", balance=3000, rate=24, min_payment=90),
        Debt(name="C", balance=6000, rate=15, min_payment=150),
    ]


@pytest.fixture()
def default_debts() -> list:
    return [
        {"name": "Credit Card", "balance": 5000, "rate": 22.99, "minPayment": 150},
        {"name": "Car Loan", "balance": 15000, "rate": 6.5, "minPayment": 350},
        {"name": "Student Loan", "balance": 25000, "rate": 5.0, "minPayment": 280},
    ]
