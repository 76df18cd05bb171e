"""Export documents built from calculator results.

A report is what the PDF/CSV exporters consume: a title, a flat list of
label/value pairs, and optionally a table given as uniform row records plus
column accessors. Values stay raw numbers; ``format`` only tells the consumer
how to display them. PERCENT values are fractions (0.07 for 7%).
"""

from __future__ import annotations

import csv
import io
from enum import Enum
from typing import Any, Iterator, List

from pydantic import SerializeAsAny, computed_field
from pydantic.alias_generators import to_camel

from finance_tools.schemas.base import CamelModel
from finance_tools.schemas.compound import CompoundInterestRequest, CompoundInterestResult
from finance_tools.schemas.debt import DebtPayoffRequest, DebtPayoffResult
from finance_tools.schemas.inflation import InflationRequest, InflationResult
from finance_tools.schemas.loan import LoanPayoffRequest, LoanPayoffResult
from finance_tools.schemas.retirement import RetirementRequest, RetirementResult


class ValueFormat(str, Enum):
    CURRENCY = "currency"
    PERCENT = "percent"
    MONTHS = "months"
    NUMBER = "number"
    TEXT = "text"


class SummaryItem(CamelModel):
    label: str
    value: Any
    format: ValueFormat = ValueFormat.CURRENCY


class Column(CamelModel):
    header: str
    # attribute name read from every row
    field: str
    format: ValueFormat = ValueFormat.CURRENCY

    @computed_field
    @property
    def key(self) -> str:
        """Name of the same value in the row's JSON form."""
        return to_camel(self.field)

    def read(self, row: CamelModel) -> Any:
        return getattr(row, self.field)


class Report(CamelModel):
    title: str
    summary: List[SummaryItem]
    columns: List[Column] = []
    rows: List[SerializeAsAny[CamelModel]] = []

    def table(self) -> Iterator[List[Any]]:
        """Header row, then one list of cell values per row."""
        yield [column.header for column in self.columns]
        for row in self.rows:
            yield [column.read(row) for column in self.columns]

    def to_csv(self) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer)
        if self.columns:
            writer.writerows(self.table())
        else:
            writer.writerow(["Label", "Value"])
            writer.writerows([item.label, item.value] for item in self.summary)
        return buffer.getvalue()


def _item(label: str, value: Any, fmt: ValueFormat = ValueFormat.CURRENCY) -> SummaryItem:
    return SummaryItem(label=label, value=value, format=fmt)


def compound_interest_report(
    request: CompoundInterestRequest,
    result: CompoundInterestResult,
) -> Report:
    return Report(
        title="Compound Interest Results",
        summary=[
            _item("Final Balance", result.final_balance),
            _item("Total Contributions", result.total_contributions),
            _item("Total Interest Earned", result.total_interest),
            _item("Initial Investment", request.principal),
            _item("Monthly Contribution", request.monthly_contribution),
            _item("Annual Interest Rate", request.annual_rate / 100, ValueFormat.PERCENT),
            _item("Time Period (Years)", request.years, ValueFormat.NUMBER),
        ],
        columns=[
            Column(header="Year", field="year", format=ValueFormat.NUMBER),
            Column(header="Balance", field="balance"),
            Column(header="Contributions", field="total_contributions"),
            Column(header="Interest Earned", field="yearly_interest"),
            Column(header="Total Interest", field="total_interest"),
        ],
        rows=result.breakdown,
    )


def loan_payoff_report(request: LoanPayoffRequest, result: LoanPayoffResult) -> Report:
    return Report(
        title="Loan Payoff Schedule",
        summary=[
            _item("Loan Amount", request.principal),
            _item("Interest Rate", request.annual_rate / 100, ValueFormat.PERCENT),
            _item("Monthly Payment", request.monthly_payment),
            _item("Payoff Time", result.total_months, ValueFormat.MONTHS),
            _item("Total Interest Paid", result.total_interest),
            _item("Total Amount Paid", result.total_payments),
        ],
        columns=[
            Column(header="Year", field="year", format=ValueFormat.NUMBER),
            Column(header="Payments", field="total_payments"),
            Column(header="Principal", field="total_principal"),
            Column(header="Interest", field="total_interest"),
            Column(header="Remaining", field="end_balance"),
        ],
        rows=result.annual_summary,
    )


def retirement_report(request: RetirementRequest, result: RetirementResult) -> Report:
    return Report(
        title="Retirement Projection",
        summary=[
            _item("Retirement Corpus", result.retirement_corpus),
            _item("Total Contributions", result.total_contributions),
            _item("Investment Growth", result.total_growth),
            _item("Annual Withdrawal", result.annual_withdrawal),
            _item("Monthly Withdrawal", result.monthly_withdrawal),
            _item("Current Age", request.current_age, ValueFormat.NUMBER),
            _item("Retirement Age", request.retirement_age, ValueFormat.NUMBER),
        ],
        columns=[
            Column(header="Age", field="age", format=ValueFormat.NUMBER),
            Column(header="Year", field="year", format=ValueFormat.NUMBER),
            Column(header="Balance", field="balance"),
            Column(header="Contributions", field="total_contributions"),
            Column(header="Growth", field="yearly_growth"),
        ],
        rows=result.projection,
    )


def inflation_report(request: InflationRequest, result: InflationResult) -> Report:
    return Report(
        title="Inflation Impact Analysis",
        summary=[
            _item("Current Value", result.current_value),
            _item("Future Equivalent Cost", result.future_equivalent),
            _item("Future Purchasing Power", result.future_purchasing_power),
            _item("Total Inflation", result.total_inflation, ValueFormat.PERCENT),
            _item("Inflation Rate", request.annual_rate / 100, ValueFormat.PERCENT),
            _item("Time Period (Years)", request.years, ValueFormat.NUMBER),
        ],
        columns=[
            Column(header="Year", field="year", format=ValueFormat.NUMBER),
            Column(header="Future Cost", field="future_value"),
            Column(header="Purchasing Power", field="purchasing_power"),
            Column(header="Value Eroded", field="value_eroded"),
            Column(header="Cumulative Inflation", field="cumulative_inflation", format=ValueFormat.PERCENT),
        ],
        rows=result.breakdown,
    )


def debt_payoff_report(request: DebtPayoffRequest, result: DebtPayoffResult) -> Report:
    """Strategy comparison only; the per-month timeline is left to the charts."""
    total_debt = sum(debt.balance for debt in request.debts)
    return Report(
        title="Debt Payoff Strategy",
        summary=[
            _item("Total Debt", total_debt),
            _item("Extra Monthly Payment", request.extra_payment),
            _item("Snowball Payoff Time", result.snowball.total_months, ValueFormat.MONTHS),
            _item("Snowball Interest", result.snowball.total_interest),
            _item("Avalanche Payoff Time", result.avalanche.total_months, ValueFormat.MONTHS),
            _item("Avalanche Interest", result.avalanche.total_interest),
            _item("Interest Saved (Snowball)", result.interest_saved_snowball),
            _item("Interest Saved (Avalanche)", result.interest_saved_avalanche),
        ],
    )

