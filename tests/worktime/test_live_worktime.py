from datetime import datetime

from src.timecard_engine.timecard_engine.worktime.live import LiveWorkTimeService


def test_in_progress_day_uses_now(make_day):
    events = make_day("2025-01-15", ("clock_in", "09:00"), ("break_start", "12:00"), ("break_end", "12:45"))

    live = LiveWorkTimeService().current(events, now=datetime(2025, 1, 15, 14, 30))

    assert live.work_minutes == 285
    assert (live.hours, live.minutes) == (4, 45)
    assert live.is_finished is False
    assert live.is_on_break is False


def test_on_break_flag(make_day):
    events = make_day("2025-01-15", ("clock_in", "09:00"), ("break_start", "12:00"))

    live = LiveWorkTimeService().current(events, now=datetime(2025, 1, 15, 12, 10))

    assert live.work_minutes == 190
    assert live.is_on_break is True


def test_finished_day_ignores_now(make_day):
    events = make_day("2025-01-15", ("clock_in", "09:00"), ("clock_out", "17:00"))

    live = LiveWorkTimeService().current(events, now=datetime(2025, 1, 16, 9, 0))

    assert live.work_minutes == 480
    assert live.is_finished is True


def test_no_clock_in(make_day):
    assert LiveWorkTimeService().current(make_day("2025-01-15"), now=datetime(2025, 1, 15, 9, 0)) is None
