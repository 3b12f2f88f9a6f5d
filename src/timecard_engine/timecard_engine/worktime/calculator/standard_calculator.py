from __future__ import annotations

from typing import Optional, Sequence

from ...common.datetime_utils import minutes_between
from ...core.enums import DayClassification, EventKind
from ...events.model import AttendanceEvent
from ..breaks import BreakPairer
from .base import WorkTimeCalculator
from .model import DayDuration


def _first(events: Sequence[AttendanceEvent], kind: EventKind) -> Optional[AttendanceEvent]:
    return next((e for e in events if e.kind == kind), None)


class DayDurationCalculator(WorkTimeCalculator):
    """Standard rule: (out - in) - paired breaks, never clamped at 0.

    Returns None when the day has no clock_in and no leave/absence marker.
    """

    def __init__(self, pairer: BreakPairer | None = None):
        self._pairer = pairer or BreakPairer()

    def calculate(self, events: Sequence[AttendanceEvent]) -> DayDuration | None:
        kinds = {e.kind for e in events}
        if EventKind.PAID_LEAVE in kinds:
            return DayDuration(classification=DayClassification.PAID_LEAVE)
        if EventKind.ABSENCE in kinds:
            return DayDuration(classification=DayClassification.ABSENCE)

        clock_in = _first(events, EventKind.CLOCK_IN)
        if not clock_in:
            return None

        breaks = self._pairer.pair(events)
        clock_out = _first(events, EventKind.CLOCK_OUT)
        if not clock_out:
            return DayDuration(
                classification=DayClassification.MISSING_CLOCK_OUT,
                clock_in=clock_in.timestamp,
                breaks=breaks,
            )

        gross = minutes_between(clock_in.timestamp, clock_out.timestamp)
        break_minutes = breaks.total_minutes
        return DayDuration(
            classification=DayClassification.WORKDAY,
            clock_in=clock_in.timestamp,
            clock_out=clock_out.timestamp,
            gross_minutes=gross,
            break_minutes=break_minutes,
            work_minutes=gross - break_minutes,
            breaks=breaks,
        )
