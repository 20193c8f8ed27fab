"""Reporting: export-ready tables built from engine results."""

from vehicle_tco.reporting.tables import (
    COST_CATEGORIES,
    ComparisonTable,
    build_comparison_table,
    build_loan_comparison_table,
    format_currency,
    tables_for,
)

__all__ = [
    "COST_CATEGORIES",
    "ComparisonTable",
    "build_comparison_table",
    "build_loan_comparison_table",
    "format_currency",
    "tables_for",
]
