"""HTTP routes for the Flask API."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any, Callable, Dict, NamedTuple, Type

from flask import Blueprint, Response, abort, current_app, jsonify, request
from pydantic import BaseModel, ValidationError

from finance_tools.core import report as reports
from finance_tools.core.compound import compare_compound_interest, compute_compound_interest
from finance_tools.core.debt import compute_debt_payoff
from finance_tools.core.errors import CalculationError
from finance_tools.core.inflation import compare_inflation, compute_inflation
from finance_tools.core.loan import compute_loan_payoff
from finance_tools.core.retirement import compute_retirement
from finance_tools.schemas.base import CamelModel
from finance_tools.schemas.compound import CompoundComparisonRequest, CompoundInterestRequest
from finance_tools.schemas.debt import DebtPayoffRequest
from finance_tools.schemas.health import HealthResponse
from finance_tools.schemas.inflation import InflationComparisonRequest, InflationRequest
from finance_tools.schemas.loan import LoanPayoffRequest
from finance_tools.schemas.retirement import RetirementRequest

api_bp = Blueprint("api", __name__)


class Calculator(NamedTuple):
    request_model: Type[BaseModel]
    run: Callable[[Any], CamelModel]
    report: Callable[[Any, Any], reports.Report]


def _compound(payload: CompoundInterestRequest):
    return compute_compound_interest(
        principal=payload.principal,
        monthly_contribution=payload.monthly_contribution,
        annual_rate_pct=payload.annual_rate,
        years=payload.years,
    )


def _loan(payload: LoanPayoffRequest):
    return compute_loan_payoff(
        principal=payload.principal,
        annual_rate_pct=payload.annual_rate,
        monthly_payment=payload.monthly_payment,
    )


def _retirement(payload: RetirementRequest):
    return compute_retirement(
        current_age=payload.current_age,
        retirement_age=payload.retirement_age,
        current_savings=payload.current_savings,
        monthly_contribution=payload.monthly_contribution,
        expected_return_pct=payload.expected_return,
        withdrawal_rate_pct=payload.withdrawal_rate,
    )


def _inflation(payload: InflationRequest):
    return compute_inflation(
        current_value=payload.current_value,
        years=payload.years,
        annual_rate_pct=payload.annual_rate,
    )


def _debt(payload: DebtPayoffRequest):
    return compute_debt_payoff(
        debts=payload.debts,
        extra_payment=payload.extra_payment,
        max_months=current_app.config["DEBT_MAX_MONTHS"],
    )


CALCULATORS: Dict[str, Calculator] = {
    "compound-interest": Calculator(
        CompoundInterestRequest, _compound, reports.compound_interest_report
    ),
    "loan-payoff": Calculator(LoanPayoffRequest, _loan, reports.loan_payoff_report),
    "retirement": Calculator(RetirementRequest, _retirement, reports.retirement_report),
    "inflation": Calculator(InflationRequest, _inflation, reports.inflation_report),
    "debt-payoff": Calculator(DebtPayoffRequest, _debt, reports.debt_payoff_report),
}


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False, include_context=False)}), (
        HTTPStatus.UNPROCESSABLE_ENTITY
    )


@api_bp.errorhandler(CalculationError)
def _handle_calculation_error(exc: CalculationError):
    """Report engine failures as a typed error body."""
    current_app.logger.warning("%s rejected on %s: %s", exc.kind, request.path, exc.message)
    return jsonify({"error": exc.to_dict()}), HTTPStatus.BAD_REQUEST


def _payload() -> Any:
    return request.get_json(force=True, silent=False)


def _calculate(name: str) -> Any:
    calculator = CALCULATORS[name]
    payload = calculator.request_model.model_validate(_payload())
    result = calculator.run(payload)
    current_app.logger.info("calculated %s", name)
    return jsonify(result.to_json_dict())


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = HealthResponse(status="ok", service="finance-tools")
    return jsonify(response.model_dump())


@api_bp.post("/calc/compound-interest")
def compound_interest() -> Any:
    return _calculate("compound-interest")


@api_bp.post("/calc/compound-interest/compare")
def compound_interest_compare() -> Any:
    """Two compound scenarios side by side."""
    payload = CompoundComparisonRequest.model_validate(_payload())
    result = compare_compound_interest(payload.primary, payload.comparison)
    current_app.logger.info("calculated compound-interest comparison")
    return jsonify(result.to_json_dict())


@api_bp.post("/calc/loan-payoff")
def loan_payoff() -> Any:
    return _calculate("loan-payoff")


@api_bp.post("/calc/retirement")
def retirement() -> Any:
    return _calculate("retirement")


@api_bp.post("/calc/inflation")
def inflation() -> Any:
    return _calculate("inflation")


@api_bp.post("/calc/inflation/compare")
def inflation_compare() -> Any:
    """The same amount and horizon under a second inflation rate."""
    payload = InflationComparisonRequest.model_validate(_payload())
    result = compare_inflation(
        current_value=payload.current_value,
        years=payload.years,
        annual_rate_pct=payload.annual_rate,
        comparison_rate_pct=payload.comparison_rate,
    )
    current_app.logger.info("calculated inflation comparison")
    return jsonify(result.to_json_dict())


@api_bp.post("/calc/debt-payoff")
def debt_payoff() -> Any:
    return _calculate("debt-payoff")


@api_bp.post("/report/<calculator>")
def report(calculator: str) -> Any:
    """Export document for a calculator; ``?format=csv`` returns the table as CSV."""
    if calculator not in CALCULATORS:
        abort(HTTPStatus.NOT_FOUND)

    entry = CALCULATORS[calculator]
    payload = entry.request_model.model_validate(_payload())
    document = entry.report(payload, entry.run(payload))
    current_app.logger.info("built %s report with %d rows", calculator, len(document.rows))

    if request.args.get("format") == "csv":
        return Response(
            document.to_csv(),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={calculator}.csv"},
        )
    return jsonify(document.to_json_dict())
