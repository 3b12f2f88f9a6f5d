from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import minutes_between
from ..core.enums import EventKind
from ..events.model import AttendanceEvent
from .breaks import BreakPairer


@dataclass(frozen=True)
class LiveWorkTime:
    clock_in: datetime
    until: datetime
    work_minutes: int
    is_finished: bool
    is_on_break: bool

    @property
    def hours(self) -> int:
        return self.work_minutes // 60

    @property
    def minutes(self) -> int:
        return self.work_minutes % 60


class LiveWorkTimeService:
    """Provisional worked time for today's screen.

    Uses `now` in place of a missing clock_out. Not part of period totals.
    """

    def __init__(self, pairer: Optional[BreakPairer] = None):
        self._pairer = pairer or BreakPairer()

    def current(self, events: Sequence[AttendanceEvent], *, now: datetime) -> Optional[LiveWorkTime]:
        clock_in = next((e for e in events if e.kind == EventKind.CLOCK_IN), None)
        if not clock_in:
            return None

        clock_out = next((e for e in events if e.kind == EventKind.CLOCK_OUT), None)
        until = clock_out.timestamp if clock_out else now
        breaks = self._pairer.pair(events)

        return LiveWorkTime(
            clock_in=clock_in.timestamp,
            until=until,
            work_minutes=minutes_between(clock_in.timestamp, until) - breaks.total_minutes,
            is_finished=clock_out is not None,
            is_on_break=breaks.is_currently_on_break,
        )
