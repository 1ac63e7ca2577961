from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from fintrack.reporting.records import (
    CategoryKey,
    NamedCategory,
    Record,
    RecordKind,
    category_label,
)

PERCENT_QUANTUM = Decimal("0.01")


@dataclass(frozen=True)
class CategoryTotal:
    key: CategoryKey
    total: Decimal
    percentage: Decimal

    @property
    def name(self) -> str:
        return category_label(self.key)


def _sort_key(entry: CategoryTotal) -> tuple:
    # Equal totals: label ascending, then real categories before the sentinel.
    return (-entry.total, entry.name, not isinstance(entry.key, NamedCategory))


def category_breakdown(records: Iterable[Record]) -> list[CategoryTotal]:
    """Group expense transactions by category with each group's share of the total."""
    totals: dict[CategoryKey, Decimal] = {}
    for record in records:
        if not record.is_transaction or record.kind is not RecordKind.EXPENSE:
            continue
        totals[record.category] = totals.get(record.category, Decimal("0")) + record.amount

    if not totals:
        return []

    grand_total = sum(totals.values(), Decimal("0"))
    entries = []
    for key, total in totals.items():
        if grand_total:
            share = (total / grand_total * 100).quantize(PERCENT_QUANTUM, rounding=ROUND_HALF_UP)
        else:
            share = Decimal("0.00")
        entries.append(CategoryTotal(key=key, total=total, percentage=share))

    entries.sort(key=_sort_key)
    return entries
