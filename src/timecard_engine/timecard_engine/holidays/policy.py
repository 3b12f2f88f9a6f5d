from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Iterable

from ..core.constants import DEFAULT_WEEKEND_DAYS

HolidayPredicate = Callable[[date], bool]


@dataclass(frozen=True)
class WeekendHolidayPolicy:
    """Fixed rule: Saturday and Sunday are non-working days."""

    def __call__(self, day: date) -> bool:
        return day.weekday() in DEFAULT_WEEKEND_DAYS


@dataclass(frozen=True)
class HolidayCalendar:
    """Company calendar: configurable weekend days plus registered holidays."""

    weekend_days: frozenset[int] = frozenset(DEFAULT_WEEKEND_DAYS)
    holidays: frozenset[date] = field(default_factory=frozenset)

    @classmethod
    def build(cls, *, weekend_days: Iterable[int] = DEFAULT_WEEKEND_DAYS, holidays: Iterable[date] = ()) -> "HolidayCalendar":
        return cls(weekend_days=frozenset(int(d) for d in weekend_days), holidays=frozenset(holidays))

    def __call__(self, day: date) -> bool:
        return day.weekday() in self.weekend_days or day in self.holidays
