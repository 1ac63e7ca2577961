from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from fintrack.reporting.aggregation import savings_rate, total_expense, total_income
from fintrack.reporting.categories import CategoryTotal, category_breakdown
from fintrack.reporting.monthly import MonthlyTotal, bucket_monthly
from fintrack.reporting.ranges import current_month_window, resolve_window
from fintrack.reporting.records import Record, ReportWindow


@dataclass(frozen=True)
class DashboardStats:
    total_balance: Decimal
    monthly_income: Decimal
    monthly_expenses: Decimal
    savings_rate: Decimal


@dataclass(frozen=True)
class ExpenseSeries:
    window: ReportWindow
    monthly: list[MonthlyTotal]
    categories: list[CategoryTotal]


def build_dashboard_stats(records: Iterable[Record], now: datetime) -> DashboardStats:
    records = list(records)
    month = current_month_window(now)

    monthly_income = total_income(records, month)
    monthly_expenses = total_expense(records, month)
    return DashboardStats(
        total_balance=total_income(records) - total_expense(records),
        monthly_income=monthly_income,
        monthly_expenses=monthly_expenses,
        savings_rate=savings_rate(monthly_income, monthly_expenses),
    )


def build_expense_series(
    records: Iterable[Record], range_token: str | None, now: datetime
) -> ExpenseSeries:
    window = resolve_window(range_token, now)
    in_window = [r for r in records if window.contains(r.occurred_at)]
    return ExpenseSeries(
        window=window,
        monthly=bucket_monthly(in_window, window.start, now),
        categories=category_breakdown(in_window),
    )
