from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Protocol
from zoneinfo import ZoneInfo


class Clock(Protocol):
    def now(self) -> datetime:
        """Current naive wall-clock time."""


class SystemClock:
    def __init__(self, tz: tzinfo | str = "UTC"):
        self.tz = ZoneInfo(tz) if isinstance(tz, str) else tz

    def now(self) -> datetime:
        return datetime.now(self.tz).replace(tzinfo=None)


class FixedClock:
    def __init__(self, instant: datetime):
        self.instant = instant.replace(tzinfo=None)

    def now(self) -> datetime:
        return self.instant
