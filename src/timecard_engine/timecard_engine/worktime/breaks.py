from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Sequence

from ..common.datetime_utils import minutes_between
from ..core.enums import EventKind
from ..events.model import AttendanceEvent


@dataclass(frozen=True)
class BreakInterval:
    start: datetime
    end: datetime

    @property
    def minutes(self) -> int:
        return minutes_between(self.start, self.end)


@dataclass(frozen=True)
class BreakPairing:
    intervals: tuple[BreakInterval, ...] = ()
    # BreakStarts never closed on the same day; they deduct nothing.
    open_breaks: tuple[datetime, ...] = ()

    @property
    def is_currently_on_break(self) -> bool:
        return bool(self.open_breaks)

    @property
    def total_minutes(self) -> int:
        return sum(b.minutes for b in self.intervals)


class BreakPairer:
    """Pair break_start/break_end events of one employee-day.

    Stack rule: each break_end closes the most recently opened break_start.
    A break_end with nothing open is ignored.
    """

    def pair(self, events: Sequence[AttendanceEvent]) -> BreakPairing:
        stack: list[datetime] = []
        closed: list[BreakInterval] = []

        for event in events:
            if event.kind == EventKind.BREAK_START:
                stack.append(event.timestamp)
            elif event.kind == EventKind.BREAK_END and stack:
                closed.append(BreakInterval(start=stack.pop(), end=event.timestamp))

        closed.sort(key=lambda b: b.start)
        return BreakPairing(intervals=tuple(closed), open_breaks=tuple(stack))
