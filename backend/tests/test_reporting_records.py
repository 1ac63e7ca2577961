from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from fintrack.reporting.records import (
    UNCATEGORIZED,
    InvalidRecordError,
    NamedCategory,
    Record,
    RecordKind,
    RecordSource,
    ReportWindow,
    category_label,
    salary_record,
    transaction_record,
)


def test_transaction_record_normalizes_fields():
    record = transaction_record("expense", "12.50", date(2024, 3, 1), "Food", ref="transaction:1")
    assert record.source is RecordSource.TRANSACTION
    assert record.kind is RecordKind.EXPENSE
    assert record.amount == Decimal("12.50")
    assert record.occurred_at == datetime(2024, 3, 1)
    assert record.category == NamedCategory("Food")


def test_float_amount_goes_through_str():
    record = transaction_record(RecordKind.INCOME, 0.1, datetime(2024, 1, 1))
    assert record.amount == Decimal("0.1")


def test_blank_category_is_uncategorized():
    assert transaction_record("EXPENSE", 1, datetime(2024, 1, 1), "  ").category == UNCATEGORIZED
    assert transaction_record("EXPENSE", 1, datetime(2024, 1, 1), None).category == UNCATEGORIZED


def test_aware_timestamp_is_stored_as_naive_utc():
    plus_two = timezone(timedelta(hours=2))
    record = salary_record(100, datetime(2024, 5, 1, 1, 30, tzinfo=plus_two))
    assert record.occurred_at == datetime(2024, 4, 30, 23, 30)
    assert record.occurred_at.tzinfo is None
    assert salary_record(1, datetime(2024, 5, 1, tzinfo=UTC)).occurred_at == datetime(2024, 5, 1)


def test_salary_is_income_without_category():
    record = salary_record(Decimal("3000"), datetime(2024, 1, 31))
    assert record.kind is RecordKind.INCOME
    assert record.category == UNCATEGORIZED
    assert record.is_salary and not record.is_transaction


@pytest.mark.parametrize(
    "amount, reason",
    [
        (None, "missing"),
        ("abc", "not a number"),
        (Decimal("NaN"), "not finite"),
        (float("inf"), "not finite"),
        ("-1.00", "negative"),
        (True, "not a number"),
    ],
)
def test_invalid_amount_names_the_record(amount, reason):
    with pytest.raises(InvalidRecordError, match=reason) as exc_info:
        transaction_record("EXPENSE", amount, datetime(2024, 1, 1), ref="transaction:42")
    assert exc_info.value.record_ref == "transaction:42"
    assert "transaction:42" in str(exc_info.value)


def test_invalid_timestamp():
    with pytest.raises(InvalidRecordError, match="timestamp is missing"):
        salary_record(10, None, ref="salary:7")  # type: ignore[arg-type]
    with pytest.raises(InvalidRecordError, match="not a date"):
        salary_record(10, "2024-01-01", ref="salary:7")  # type: ignore[arg-type]


def test_invalid_kind():
    with pytest.raises(InvalidRecordError, match="unknown record kind"):
        transaction_record("TRANSFER", 10, datetime(2024, 1, 1))


def test_salary_must_be_income():
    with pytest.raises(InvalidRecordError, match="always income"):
        Record(
            source=RecordSource.SALARY,
            kind=RecordKind.EXPENSE,
            amount=Decimal("1"),
            occurred_at=datetime(2024, 1, 1),
        )


def test_zero_amount_is_valid():
    assert transaction_record("EXPENSE", 0, datetime(2024, 1, 1)).amount == 0


def test_category_labels():
    assert category_label(NamedCategory("Rent")) == "Rent"
    assert category_label(UNCATEGORIZED) == "Uncategorized"
    assert NamedCategory("Uncategorized") != UNCATEGORIZED


def test_window_is_half_open():
    window = ReportWindow(datetime(2024, 1, 1), datetime(2024, 2, 1))
    assert window.contains(datetime(2024, 1, 1))
    assert window.contains(datetime(2024, 1, 31, 23, 59, 59))
    assert not window.contains(datetime(2024, 2, 1))
    assert not window.contains(datetime(2023, 12, 31, 23, 59, 59))
