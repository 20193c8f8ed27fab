"""Tests for export-ready comparison tables."""

import pytest

from vehicle_tco.config import Scenario
from vehicle_tco.engine.orchestrator import run_comparison
from vehicle_tco.errors import InvalidInputError
from vehicle_tco.reporting.tables import (
    COST_CATEGORIES,
    build_comparison_table,
    build_loan_comparison_table,
    format_currency,
    tables_for,
)


class TestComparisonTable:
    def test_headers(self, scenario: Scenario):
        result = run_comparison(scenario)
        table = build_comparison_table(scenario.vehicles, [r.costs for r in result.vehicles])
        assert table.headers == ["Expense Category", "Petrol Hatchback", "Electric Compact", "Hybrid Estate"]

    def test_fixed_category_order(self, scenario: Scenario):
        result = run_comparison(scenario)
        table = build_comparison_table(scenario.vehicles, [r.costs for r in result.vehicles])
        assert [row[0] for row in table.rows] == [
            "Purchase Price", "Fuel Cost", "Maintenance Cost", "Insurance Cost", "Tax Cost",
            "Financing Cost", "Total Cost", "Residual Value", "Net Cost",
            "Cost per Year", "Cost per Month",
        ]
        assert len(COST_CATEGORIES) == 11

    def test_values_come_from_breakdowns(self, scenario: Scenario):
        result = run_comparison(scenario)
        table = build_comparison_table(scenario.vehicles, [r.costs for r in result.vehicles])
        net_row = table.rows[8]
        assert net_row[1:] == [r.costs.net_cost for r in result.vehicles]

    def test_missing_financing_shown_as_zero(self, scenario: Scenario):
        result = run_comparison(scenario)
        table = build_comparison_table(scenario.vehicles, [r.costs for r in result.vehicles])
        financing = table.rows[5]
        assert financing[1] == 0
        assert financing[2] > 0
        assert financing[3] == pytest.approx(420 * 36)

    def test_detail_rows(self, scenario: Scenario):
        result = run_comparison(scenario)
        table = build_comparison_table(scenario.vehicles, [r.costs for r in result.vehicles])
        details = {row[0]: row[1:] for row in table.detail_rows}

        assert details["Fuel Type"] == ["gasoline", "electric", "hybrid"]
        assert details["Fuel Efficiency"] == ["6 L/100km", "16 kWh/100km", "4.5 L/100km"]
        assert details["Ownership Period"] == ["5 years", "5 years", "3 years"]
        assert details["Payment Method"] == ["cash", "loan", "lease"]
        assert details["Cash Payment"] == [25_000, 8_000, 0]

    def test_length_mismatch_rejected(self, scenario: Scenario):
        result = run_comparison(scenario)
        with pytest.raises(InvalidInputError):
            build_comparison_table(scenario.vehicles[:2], [r.costs for r in result.vehicles])


class TestLoanComparisonTable:
    def test_only_loan_vehicles(self, scenario: Scenario):
        result = run_comparison(scenario)
        table = build_loan_comparison_table(scenario.vehicles, [r.loan for r in result.vehicles])
        assert table.headers == ["Loan Details", "Electric Compact"]

    def test_rows(self, scenario: Scenario):
        result = run_comparison(scenario)
        loan = result.vehicles[1].loan
        table = build_loan_comparison_table(scenario.vehicles, [r.loan for r in result.vehicles])
        rows = {row[0]: row[1] for row in table.rows}

        assert rows["Loan Amount"] == 30_000
        assert rows["Loan Term (months)"] == 60
        assert rows["Nominal Interest Rate (%)"] == 4.9
        assert rows["Effective Interest Rate (%)"] == pytest.approx(loan.effective_interest_rate)
        assert rows["Monthly Payment"] == pytest.approx(loan.monthly_payment)
        assert rows["Total Interest and Fees"] == pytest.approx(loan.total_interest)

    def test_none_without_loans(self, cash_vehicle):
        result = run_comparison(Scenario(vehicles=[cash_vehicle]))
        assert build_loan_comparison_table([cash_vehicle], [r.loan for r in result.vehicles]) is None

    def test_tables_for(self, scenario: Scenario):
        tables = tables_for(scenario.vehicles, run_comparison(scenario))
        assert tables["costs"] is not None
        assert tables["loans"] is not None


class TestFormatCurrency:
    def test_thousands_separator(self):
        assert format_currency(25_837.75) == "€25,838"

    def test_negative(self):
        assert format_currency(-1_500) == "-€1,500"

    def test_symbol(self):
        assert format_currency(10, symbol="$") == "$10"
