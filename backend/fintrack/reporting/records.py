from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import UTC, date, datetime, tzinfo
from decimal import Decimal, InvalidOperation
from typing import Any, Union
from zoneinfo import ZoneInfo


class RecordKind(str, enum.Enum):
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


class RecordSource(str, enum.Enum):
    TRANSACTION = "transaction"
    SALARY = "salary"


class InvalidRecordError(ValueError):
    """A record whose amount, timestamp or kind cannot be trusted."""

    def __init__(self, record_ref: str, reason: str):
        self.record_ref = record_ref
        self.reason = reason
        super().__init__(f"Invalid record {record_ref or '<unknown>'}: {reason}")


@dataclass(frozen=True)
class NamedCategory:
    name: str


@dataclass(frozen=True)
class Uncategorized:
    pass


UNCATEGORIZED = Uncategorized()
UNCATEGORIZED_LABEL = "Uncategorized"

CategoryKey = Union[NamedCategory, Uncategorized]


def category_key(name: str | None) -> CategoryKey:
    if name is None or not name.strip():
        return UNCATEGORIZED
    return NamedCategory(name)


def category_label(key: CategoryKey) -> str:
    if isinstance(key, NamedCategory):
        return key.name
    return UNCATEGORIZED_LABEL


def _coerce_amount(value: Any, ref: str) -> Decimal:
    if value is None:
        raise InvalidRecordError(ref, "amount is missing")
    if isinstance(value, bool):
        raise InvalidRecordError(ref, f"amount {value!r} is not a number")
    if isinstance(value, float):
        value = str(value)
    try:
        amount = value if isinstance(value, Decimal) else Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidRecordError(ref, f"amount {value!r} is not a number") from None
    if not amount.is_finite():
        raise InvalidRecordError(ref, f"amount {value!r} is not finite")
    if amount < 0:
        raise InvalidRecordError(ref, f"amount {value!r} is negative")
    return amount


def _coerce_timestamp(value: Any, ref: str) -> datetime:
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone(UTC).replace(tzinfo=None)
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if value is None:
        raise InvalidRecordError(ref, "timestamp is missing")
    raise InvalidRecordError(ref, f"timestamp {value!r} is not a date or datetime")


def to_wall_clock(value: Any, tz: tzinfo | str | None) -> Any:
    """Express an aware timestamp as naive wall-clock time in ``tz``.

    Naive values and non-datetimes pass through unchanged.
    """
    if tz is None or not isinstance(value, datetime) or value.tzinfo is None:
        return value
    zone = ZoneInfo(tz) if isinstance(tz, str) else tz
    return value.astimezone(zone).replace(tzinfo=None)


def _coerce_kind(value: Any, ref: str) -> RecordKind:
    if isinstance(value, RecordKind):
        return value
    if isinstance(value, str):
        try:
            return RecordKind(value.strip().upper())
        except ValueError:
            pass
    raise InvalidRecordError(ref, f"unknown record kind {value!r}")


@dataclass(frozen=True)
class Record:
    """An immutable dated monetary event fed to the reporting engine.

    Construction validates and normalizes every field so that aggregation never
    sees a null amount or an unusable timestamp. Timezone-aware timestamps reaching
    the constructor are stored as naive UTC; the builders below accept a zone to
    store them as wall-clock time in that zone instead.
    """

    source: RecordSource
    kind: RecordKind
    amount: Decimal
    occurred_at: datetime
    category: CategoryKey = UNCATEGORIZED
    ref: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        ref = self.ref
        try:
            source = RecordSource(self.source)
        except ValueError:
            raise InvalidRecordError(ref, f"unknown record source {self.source!r}") from None
        kind = _coerce_kind(self.kind, ref)
        if source is RecordSource.SALARY:
            if kind is not RecordKind.INCOME:
                raise InvalidRecordError(ref, "salary entries are always income")
            if self.category != UNCATEGORIZED:
                raise InvalidRecordError(ref, "salary entries carry no category")
        if not isinstance(self.category, (NamedCategory, Uncategorized)):
            raise InvalidRecordError(ref, f"category {self.category!r} is not a category key")

        object.__setattr__(self, "source", source)
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "amount", _coerce_amount(self.amount, ref))
        object.__setattr__(self, "occurred_at", _coerce_timestamp(self.occurred_at, ref))

    @property
    def is_transaction(self) -> bool:
        return self.source is RecordSource.TRANSACTION

    @property
    def is_salary(self) -> bool:
        return self.source is RecordSource.SALARY


def transaction_record(
    kind: RecordKind | str,
    amount: Any,
    occurred_at: datetime | date,
    category_name: str | None = None,
    ref: str = "",
    tz: tzinfo | str | None = None,
) -> Record:
    return Record(
        source=RecordSource.TRANSACTION,
        kind=kind,  # type: ignore[arg-type]
        amount=amount,
        occurred_at=to_wall_clock(occurred_at, tz),  # type: ignore[arg-type]
        category=category_key(category_name),
        ref=ref,
    )


def salary_record(
    amount: Any,
    occurred_at: datetime | date,
    ref: str = "",
    tz: tzinfo | str | None = None,
) -> Record:
    return Record(
        source=RecordSource.SALARY,
        kind=RecordKind.INCOME,
        amount=amount,
        occurred_at=to_wall_clock(occurred_at, tz),  # type: ignore[arg-type]
        ref=ref,
    )


@dataclass(frozen=True)
class ReportWindow:
    """Half-open interval ``[start, end)``."""

    start: datetime
    end: datetime

    def contains(self, instant: datetime) -> bool:
        return self.start <= instant < self.end
