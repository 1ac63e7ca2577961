from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from fintrack.reporting.categories import category_breakdown
from fintrack.reporting.records import UNCATEGORIZED, NamedCategory, salary_record, transaction_record

WHEN = datetime(2024, 5, 5)


def expense(amount, category=None):
    return transaction_record("EXPENSE", amount, WHEN, category)


def test_example_breakdown():
    result = category_breakdown([expense(100, "Food"), expense(50, "Food"), expense(50, "Transport")])
    assert [(c.name, c.total, c.percentage) for c in result] == [
        ("Food", Decimal("150"), Decimal("75.00")),
        ("Transport", Decimal("50"), Decimal("25.00")),
    ]


def test_empty_and_income_only():
    assert category_breakdown([]) == []
    assert category_breakdown(
        [transaction_record("INCOME", 10, WHEN, "Gift"), salary_record(100, WHEN)]
    ) == []


def test_missing_category_grouped_as_uncategorized():
    result = category_breakdown([expense(30), expense(10, "Food"), expense(20, None)])
    assert result[0].key == UNCATEGORIZED
    assert result[0].name == "Uncategorized"
    assert result[0].total == Decimal("50")


def test_real_uncategorized_category_does_not_merge_with_sentinel():
    result = category_breakdown([expense(10, "Uncategorized"), expense(10)])
    assert len(result) == 2
    assert [c.key for c in result] == [NamedCategory("Uncategorized"), UNCATEGORIZED]


def test_ties_ordered_by_name():
    result = category_breakdown([expense(10, "Travel"), expense(10, "Books"), expense(10, "Gym")])
    assert [c.name for c in result] == ["Books", "Gym", "Travel"]
    assert all(c.percentage == Decimal("33.33") for c in result)


def test_percentages_sum_to_hundred_within_rounding():
    result = category_breakdown(
        [expense("13.37", "A"), expense("42.10", "B"), expense("7.01", "C"), expense("0.99")]
    )
    total = sum(c.percentage for c in result)
    assert abs(total - 100) <= Decimal("0.01") * len(result)


def test_percentage_rounds_half_up():
    # 1/32 = 3.125% -> 3.13
    result = category_breakdown([expense(1, "Small"), expense(31, "Large")])
    small = next(c for c in result if c.name == "Small")
    assert small.percentage == Decimal("3.13")


def test_zero_amount_expenses_have_zero_percentages():
    result = category_breakdown([expense(0, "Food"), expense(0, "Rent")])
    assert [c.percentage for c in result] == [Decimal("0.00"), Decimal("0.00")]
