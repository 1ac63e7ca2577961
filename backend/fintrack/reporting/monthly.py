from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from fintrack.reporting.records import Record, RecordKind

MONTH_LABEL_FORMAT = "%b %Y"

_MonthKey = tuple[int, int]


@dataclass(frozen=True)
class MonthlyTotal:
    month: str
    amount: Decimal


def months_between(start: datetime, end: datetime) -> int:
    """Whole calendar months from ``start``'s month to ``end``'s month."""
    return (end.year - start.year) * 12 + (end.month - start.month)


def _month_keys(start: datetime, now: datetime) -> list[_MonthKey]:
    keys = []
    year, month = start.year, start.month
    for _ in range(months_between(start, now) + 1):
        keys.append((year, month))
        year, month = (year + 1, 1) if month == 12 else (year, month + 1)
    return keys


def month_label(year: int, month: int) -> str:
    return datetime(year, month, 1).strftime(MONTH_LABEL_FORMAT)


def bucket_monthly(
    records: Iterable[Record], window_start: datetime, now: datetime
) -> list[MonthlyTotal]:
    """Per-month expense totals from ``window_start``'s month through ``now``'s.

    Every month is present even without expenses. Expenses dated outside the
    generated months are dropped.
    """
    buckets: dict[_MonthKey, Decimal] = {
        key: Decimal("0") for key in _month_keys(window_start, now)
    }
    for record in records:
        if not record.is_transaction or record.kind is not RecordKind.EXPENSE:
            continue
        key = (record.occurred_at.year, record.occurred_at.month)
        if key in buckets:
            buckets[key] += record.amount

    return [MonthlyTotal(month=month_label(*key), amount=total) for key, total in buckets.items()]
