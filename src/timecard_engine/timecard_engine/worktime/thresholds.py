from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import minutes_between
from ..holidays.policy import HolidayPredicate, WeekendHolidayPolicy
from ..schedules.model import Schedule


@dataclass(frozen=True)
class ThresholdResult:
    overtime_minutes: int
    late_minutes: int
    early_leave_minutes: int
    is_late: bool
    is_early_leave: bool
    is_holiday_work: bool


class ThresholdEvaluator:
    """Derive overtime, lateness, early leave and holiday work for one day.

    Each figure is computed on its own; none gates another.
    """

    def __init__(self, is_holiday: Optional[HolidayPredicate] = None):
        self._is_holiday = is_holiday or WeekendHolidayPolicy()

    def is_holiday_work(self, work_date: date) -> bool:
        """True when any clock-in on this date counts as holiday work."""
        return bool(self._is_holiday(work_date))

    def evaluate(
        self,
        *,
        work_date: date,
        clock_in: datetime,
        clock_out: datetime,
        work_minutes: int,
        schedule: Schedule,
    ) -> ThresholdResult:
        overtime = max(0, math.floor(work_minutes - schedule.standard_work_minutes))

        scheduled_start = datetime.combine(clock_in.date(), schedule.scheduled_start)
        late = max(0, minutes_between(scheduled_start, clock_in))

        scheduled_end = datetime.combine(clock_out.date(), schedule.scheduled_end)
        early_leave = max(0, minutes_between(clock_out, scheduled_end))

        return ThresholdResult(
            overtime_minutes=overtime,
            late_minutes=late,
            early_leave_minutes=early_leave,
            is_late=late > schedule.late_grace_minutes,
            is_early_leave=early_leave > 0,
            is_holiday_work=self.is_holiday_work(work_date),
        )
