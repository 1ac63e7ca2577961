from __future__ import annotations

import calendar
from datetime import datetime

from fintrack.reporting.records import ReportWindow

DEFAULT_RANGE = "6m"

# Tokens that map to a rolling number of months back from "now".
_ROLLING_MONTHS = {"6m": 6, "12m": 12}


def add_months(value: datetime, months: int) -> datetime:
    """Shift by calendar months, clamping the day to the target month's length."""
    year = value.year + (value.month - 1 + months) // 12
    month = (value.month - 1 + months) % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def month_start(value: datetime) -> datetime:
    return datetime(value.year, value.month, 1)


def current_month_window(now: datetime) -> ReportWindow:
    start = month_start(now)
    return ReportWindow(start=start, end=add_months(start, 1))


def normalize_range(token: str | None) -> str:
    if token is None or not token.strip():
        return DEFAULT_RANGE
    return token.strip().lower()


def resolve_range(token: str | None, now: datetime) -> datetime:
    """Map a report range token to the window start.

    ``"12m"`` and ``"6m"`` go back that many calendar months, ``"ytd"`` starts at
    January 1st of the current year. Anything else falls back to ``"6m"``.
    """
    key = normalize_range(token)
    if key == "ytd":
        return datetime(now.year, 1, 1)
    months = _ROLLING_MONTHS.get(key, _ROLLING_MONTHS[DEFAULT_RANGE])
    return add_months(now, -months)


def resolve_window(token: str | None, now: datetime) -> ReportWindow:
    return ReportWindow(start=resolve_range(token, now), end=now)
