from datetime import datetime

from src.timecard_engine.timecard_engine.worktime.breaks import BreakInterval, BreakPairer


def test_pairs_break_with_next_break_end(make_day):
    events = make_day(
        "2025-01-15",
        ("clock_in", "09:00"),
        ("break_start", "12:00"),
        ("clock_out", "12:30"),
        ("break_end", "13:00"),
    )

    pairing = BreakPairer().pair(events)

    assert pairing.intervals == (BreakInterval(datetime(2025, 1, 15, 12, 0), datetime(2025, 1, 15, 13, 0)),)
    assert pairing.total_minutes == 60
    assert pairing.is_currently_on_break is False


def test_interleaved_breaks_close_most_recent_first(make_day):
    events = make_day(
        "2025-01-15",
        ("break_start", "10:00"),
        ("break_start", "10:30"),
        ("break_end", "10:45"),
        ("break_end", "11:00"),
    )

    pairing = BreakPairer().pair(events)

    assert [(b.start.strftime("%H:%M"), b.end.strftime("%H:%M")) for b in pairing.intervals] == [
        ("10:00", "11:00"),
        ("10:30", "10:45"),
    ]
    assert pairing.total_minutes == 75


def test_unmatched_start_is_open_and_not_counted(make_day):
    events = make_day(
        "2025-01-15",
        ("break_start", "10:00"),
        ("break_start", "15:00"),
        ("break_end", "15:20"),
    )

    pairing = BreakPairer().pair(events)

    assert pairing.total_minutes == 20
    assert pairing.open_breaks == (datetime(2025, 1, 15, 10, 0),)
    assert pairing.is_currently_on_break is True


def test_stray_break_end_is_ignored(make_day):
    events = make_day("2025-01-15", ("break_end", "09:30"), ("break_start", "12:00"), ("break_end", "12:15"))

    pairing = BreakPairer().pair(events)

    assert pairing.total_minutes == 15
    assert pairing.open_breaks == ()
