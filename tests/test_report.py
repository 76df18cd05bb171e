from __future__ import annotations

import csv
import io

from finance_tools.core.compound import compute_compound_interest
from finance_tools.core.debt import compute_debt_payoff
from finance_tools.core.loan import compute_loan_payoff
from finance_tools.core.report import (
    ValueFormat,
    compound_interest_report,
    debt_payoff_report,
    loan_payoff_report,
)
from finance_tools.schemas.compound import CompoundInterestRequest
from finance_tools.schemas.debt import DebtPayoffRequest
from finance_tools.schemas.loan import LoanPayoffRequest


def compound_report():
    request = CompoundInterestRequest(principal=10000, monthly_contribution=500, annual_rate=7, years=20)
    result = compute_compound_interest(10000, 500, 7, 20)
    return compound_interest_report(request, result), result


def test_table_reads_rows_through_column_fields():
    document, result = compound_report()
    table = list(document.table())

    assert document.title == "Compound Interest Results"
    assert table[0] == ["Year", "Balance", "Contributions", "Interest Earned", "Total Interest"]
    assert len(table) == 21
    first = result.breakdown[0]
    assert table[1] == [
        1,
        first.balance,
        first.total_contributions,
        first.yearly_interest,
        first.total_interest,
    ]


def test_summary_keeps_raw_values():
    document, result = compound_report()
    summary = {item.label: item for item in document.summary}

    assert summary["Final Balance"].value == result.final_balance
    assert summary["Annual Interest Rate"].value == 0.07
    assert summary["Annual Interest Rate"].format is ValueFormat.PERCENT


def test_json_form_uses_camel_case_keys():
    document, _ = compound_report()
    body = document.to_json_dict()

    assert body["columns"][2] == {
        "header": "Contributions",
        "field": "total_contributions",
        "format": "currency",
        "key": "totalContributions",
    }
    assert set(body["rows"][0]) == {
        "year",
        "balance",
        "totalContributions",
        "yearlyInterest",
        "totalInterest",
    }


def test_csv_has_header_and_one_line_per_row():
    request = LoanPayoffRequest(principal=250000, annual_rate=6.5, monthly_payment=2000)
    result = compute_loan_payoff(250000, 6.5, 2000)
    document = loan_payoff_report(request, result)

    lines = list(csv.reader(io.StringIO(document.to_csv())))
    assert lines[0] == ["Year", "Payments", "Principal", "Interest", "Remaining"]
    assert len(lines) == len(result.annual_summary) + 1
    assert float(lines[-1][4]) == 0


def test_debt_report_is_summary_only(default_debts):
    request = DebtPayoffRequest(debts=default_debts, extra_payment=200)
    result = compute_debt_payoff(request.debts, request.extra_payment)
    document = debt_payoff_report(request, result)

    assert document.columns == []
    assert document.rows == []
    labels = [item.label for item in document.summary]
    assert labels[0] == "Total Debt"
    assert document.summary[0].value == 45000
    lines = list(csv.reader(io.StringIO(document.to_csv())))
    assert lines[0] == ["Label", "Value"]
    assert len(lines) == len(labels) + 1
