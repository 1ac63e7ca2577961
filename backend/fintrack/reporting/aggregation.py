from __future__ import annotations

import logging
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from fintrack.reporting.records import Record, RecordKind, RecordSource, ReportWindow

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
HUNDRED = Decimal("100")
RATIO_QUANTUM = Decimal("0.0001")


def sum_by_kind(
    records: Iterable[Record],
    kind: RecordKind,
    window: ReportWindow | None = None,
    source: RecordSource | None = None,
) -> Decimal:
    """Sum amounts of ``kind``, optionally scoped to a window and one record family."""
    total = ZERO
    for record in records:
        if record.kind is not kind:
            continue
        if source is not None and record.source is not source:
            continue
        if window is not None and not window.contains(record.occurred_at):
            continue
        total += record.amount
    return total


def total_income(records: Iterable[Record], window: ReportWindow | None = None) -> Decimal:
    """Income from transactions plus income from salary entries.

    The two families are disjoint, so their sums are added and never merged.
    """
    records = list(records)
    from_transactions = sum_by_kind(records, RecordKind.INCOME, window, RecordSource.TRANSACTION)
    from_salaries = sum_by_kind(records, RecordKind.INCOME, window, RecordSource.SALARY)
    logger.debug(
        "Income window=%s: transactions=%s, salaries=%s",
        window, from_transactions, from_salaries,
    )
    return from_transactions + from_salaries


def total_expense(records: Iterable[Record], window: ReportWindow | None = None) -> Decimal:
    return sum_by_kind(records, RecordKind.EXPENSE, window, RecordSource.TRANSACTION)


def savings_rate(monthly_income: Decimal, monthly_expenses: Decimal) -> Decimal:
    # Not clamped: spending more than earned gives a negative rate.
    if monthly_income <= 0:
        return ZERO
    ratio = (monthly_income - monthly_expenses) / monthly_income
    return ratio.quantize(RATIO_QUANTUM, rounding=ROUND_HALF_UP) * HUNDRED
