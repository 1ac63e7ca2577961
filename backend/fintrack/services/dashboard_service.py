from __future__ import annotations

import logging
import uuid

from fintrack.reporting.clock import Clock
from fintrack.reporting.ranges import normalize_range, resolve_window
from fintrack.reporting.report import (
    DashboardStats,
    ExpenseSeries,
    build_dashboard_stats,
    build_expense_series,
)
from fintrack.services.record_store import RecordStore

logger = logging.getLogger(__name__)


async def get_dashboard_stats(
    store: RecordStore, user_id: uuid.UUID, clock: Clock
) -> DashboardStats:
    now = clock.now()
    records = await store.fetch_records(user_id)
    stats = build_dashboard_stats(records, now)
    logger.info(
        "Dashboard stats for user %s: balance=%s, monthly income=%s, "
        "monthly expenses=%s, savings rate=%s",
        user_id, stats.total_balance, stats.monthly_income,
        stats.monthly_expenses, stats.savings_rate,
    )
    return stats


async def get_expense_chart(
    store: RecordStore, user_id: uuid.UUID, range_token: str | None, clock: Clock
) -> ExpenseSeries:
    now = clock.now()
    window = resolve_window(range_token, now)
    logger.info(
        "Expense chart for user %s with range %r (%s to %s)",
        user_id, normalize_range(range_token), window.start, window.end,
    )
    records = await store.fetch_records(user_id, window)
    return build_expense_series(records, range_token, now)
