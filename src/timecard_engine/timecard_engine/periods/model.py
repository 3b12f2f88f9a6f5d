from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import iter_dates


@dataclass(frozen=True)
class PeriodWindow:
    """Inclusive [start, end] window over event timestamps."""

    start: datetime
    end: datetime

    def contains(self, instant: datetime) -> bool:
        return self.start <= instant <= self.end

    @property
    def start_date(self) -> date:
        return self.start.date()

    @property
    def end_date(self) -> date:
        return self.end.date()

    def dates(self) -> list[date]:
        return list(iter_dates(self.start_date, self.end_date))


@dataclass(frozen=True)
class PeriodRequest:
    """Select exactly one window mode: closing-day (year/month) or custom range."""

    year: Optional[int] = None
    month: Optional[int] = None
    closing_day: Optional[int] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    strict: bool = False
