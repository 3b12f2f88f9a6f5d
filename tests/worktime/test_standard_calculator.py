from dataclasses import replace

from src.timecard_engine.timecard_engine.core.enums import DayClassification
from src.timecard_engine.timecard_engine.worktime.calculator.standard_calculator import DayDurationCalculator


def test_standard_calculator_subtracts_paired_breaks(make_day):
    events = make_day(
        "2025-01-15",
        ("clock_in", "09:00"),
        ("break_start", "12:00"),
        ("break_end", "13:00"),
        ("clock_out", "18:00"),
    )

    duration = DayDurationCalculator().calculate(events)

    assert duration.classification == DayClassification.WORKDAY
    assert duration.gross_minutes == 540
    assert duration.break_minutes == 60
    assert duration.work_minutes == 480


def test_no_clock_in_produces_nothing(make_day):
    events = make_day("2025-01-15", ("break_start", "12:00"), ("clock_out", "18:00"))

    assert DayDurationCalculator().calculate(events) is None


def test_missing_clock_out(make_day):
    events = make_day("2025-01-15", ("clock_in", "09:00"), ("break_start", "12:00"))

    duration = DayDurationCalculator().calculate(events)

    assert duration.classification == DayClassification.MISSING_CLOCK_OUT
    assert duration.work_minutes == 0
    assert duration.breaks.is_currently_on_break is True


def test_paid_leave_short_circuits_clock_events(make_day):
    events = make_day(
        "2025-01-15",
        ("clock_in", "09:00"),
        ("paid_leave", "09:00"),
        ("clock_out", "18:00"),
    )

    duration = DayDurationCalculator().calculate(events)

    assert duration.classification == DayClassification.PAID_LEAVE
    assert duration.work_minutes == 0


def test_absence_day(make_day):
    duration = DayDurationCalculator().calculate(make_day("2025-01-15", ("absence", "00:00")))

    assert duration.classification == DayClassification.ABSENCE


def test_negative_result_is_not_clamped(make_day):
    events = make_day(
        "2025-01-15",
        ("clock_in", "09:00"),
        ("clock_out", "10:00"),
        ("break_start", "10:30"),
        ("break_end", "12:00"),
    )

    duration = DayDurationCalculator().calculate(events)

    assert duration.work_minutes == -30
    assert duration.is_negative is True


def test_seconds_are_floored(make_event):
    clock_out = make_event("clock_out", "2025-01-15 17:59")
    events = [
        make_event("clock_in", "2025-01-15 09:00"),
        replace(clock_out, timestamp=clock_out.timestamp.replace(second=59)),
    ]

    assert DayDurationCalculator().calculate(events).work_minutes == 539
