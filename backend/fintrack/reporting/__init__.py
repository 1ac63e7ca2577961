from __future__ import annotations

from fintrack.reporting.aggregation import savings_rate, sum_by_kind, total_expense, total_income
from fintrack.reporting.categories import CategoryTotal, category_breakdown
from fintrack.reporting.clock import Clock, FixedClock, SystemClock
from fintrack.reporting.monthly import MonthlyTotal, bucket_monthly
from fintrack.reporting.ranges import DEFAULT_RANGE, resolve_range, resolve_window
from fintrack.reporting.records import (
    UNCATEGORIZED,
    InvalidRecordError,
    NamedCategory,
    Record,
    RecordKind,
    RecordSource,
    ReportWindow,
    salary_record,
    transaction_record,
)
from fintrack.reporting.report import (
    DashboardStats,
    ExpenseSeries,
    build_dashboard_stats,
    build_expense_series,
)

__all__ = [
    "DEFAULT_RANGE",
    "UNCATEGORIZED",
    "CategoryTotal",
    "Clock",
    "DashboardStats",
    "ExpenseSeries",
    "FixedClock",
    "InvalidRecordError",
    "MonthlyTotal",
    "NamedCategory",
    "Record",
    "RecordKind",
    "RecordSource",
    "ReportWindow",
    "SystemClock",
    "bucket_monthly",
    "build_dashboard_stats",
    "build_expense_series",
    "category_breakdown",
    "resolve_range",
    "resolve_window",
    "salary_record",
    "savings_rate",
    "sum_by_kind",
    "total_expense",
    "total_income",
]
