from __future__ import annotations

from datetime import datetime, time

import pytest

from src.timecard_engine.timecard_engine.core.enums import EventKind
from src.timecard_engine.timecard_engine.events.model import AttendanceEvent
from src.timecard_engine.timecard_engine.schedules.model import Schedule


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 1, 15, 8, 30, 0)


@pytest.fixture
def standard_schedule() -> Schedule:
    return Schedule(
        scheduled_start=time(9, 0),
        scheduled_end=time(18, 0),
        break_minutes_budget=60,
        standard_work_hours=8,
    )


@pytest.fixture
def make_event():
    """Build AttendanceEvent from ("clock_in", "2025-01-15 09:00")."""

    def _make(kind: str, when: str, *, employee_id: str = "emp-1", name: str | None = "Tanaka") -> AttendanceEvent:
        return AttendanceEvent(
            employee_id=employee_id,
            kind=EventKind(kind),
            timestamp=datetime.strptime(when, "%Y-%m-%d %H:%M"),
            employee_name=name,
        )

    return _make


@pytest.fixture
def make_day(make_event):
    """Build one employee-day from (kind, "HH:MM") pairs on a given date."""

    def _make(day: str, *punches: tuple[str, str], employee_id: str = "emp-1"):
        return [make_event(kind, f"{day} {hhmm}", employee_id=employee_id) for kind, hhmm in punches]

    return _make
