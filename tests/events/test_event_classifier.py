from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from src.timecard_engine.timecard_engine.core.enums import EventKind
from src.timecard_engine.timecard_engine.core.exceptions import MalformedEventError
from src.timecard_engine.timecard_engine.events.classifier import EventClassifier
from src.timecard_engine.timecard_engine.events.model import AttendanceEvent


def test_classify_raw_record_with_app_field_names():
    event = EventClassifier().classify(
        {
            "userId": "u1",
            "userName": "Sato",
            "type": "break_start",
            "timestamp": "2025-01-15T12:00:00",
            "isManualEntry": True,
        }
    )

    assert event == AttendanceEvent(
        employee_id="u1",
        kind=EventKind.BREAK_START,
        timestamp=datetime(2025, 1, 15, 12, 0),
        is_manual_entry=True,
        employee_name="Sato",
    )


def test_classify_accepts_snake_case_and_datetime():
    event = EventClassifier().classify(
        {"employee_id": 7, "kind": "CLOCK_OUT", "timestamp": datetime(2025, 1, 15, 18, 0)}
    )

    assert event.employee_id == "7"
    assert event.kind == EventKind.CLOCK_OUT
    assert event.is_manual_entry is False


def test_aware_timestamp_becomes_naive_local():
    aware = datetime(2025, 1, 15, 0, 0, tzinfo=timezone.utc)
    event = EventClassifier().classify({"userId": "u1", "type": "clock_in", "timestamp": aware})

    assert event.timestamp.tzinfo is None
    assert event.timestamp == aware.astimezone().replace(tzinfo=None)


def test_configured_timezone_decides_the_local_day():
    tokyo = timezone(timedelta(hours=9))
    classifier = EventClassifier(tz=tokyo)

    from_iso = classifier.classify({"userId": "u1", "type": "clock_in", "timestamp": "2025-01-14T23:30:00Z"})
    from_epoch = classifier.classify({"userId": "u1", "type": "clock_in", "timestamp": 1736897400})

    assert from_iso.timestamp == datetime(2025, 1, 15, 8, 30)
    assert from_epoch.timestamp == datetime(2025, 1, 15, 8, 30)
    assert from_iso.work_date.isoformat() == "2025-01-15"


def test_aware_event_objects_are_normalized_too():
    aware = AttendanceEvent(
        employee_id="u1",
        kind=EventKind.CLOCK_IN,
        timestamp=datetime(2025, 1, 15, 0, 0, tzinfo=timezone.utc),
    )

    event = EventClassifier(tz=timezone(timedelta(hours=-5))).classify(aware)

    assert event.timestamp == datetime(2025, 1, 14, 19, 0)


@pytest.mark.parametrize(
    "record",
    [
        {"userId": "u1", "type": "lunch", "timestamp": "2025-01-15T12:00:00"},
        {"userId": "u1", "type": "clock_in", "timestamp": "not-a-date"},
        {"userId": "u1", "type": "clock_in"},
        {"type": "clock_in", "timestamp": "2025-01-15T09:00:00"},
        "clock_in",
    ],
)
def test_malformed_record_raises(record):
    with pytest.raises(MalformedEventError):
        EventClassifier().classify(record)


def test_classify_all_drops_malformed_and_keeps_order():
    records = [
        {"userId": "u1", "type": "clock_in", "timestamp": "2025-01-15T09:00:00"},
        {"userId": "u1", "type": "coffee", "timestamp": "2025-01-15T10:00:00"},
        {"userId": "u1", "type": "clock_out", "timestamp": "2025-01-15T18:00:00"},
    ]

    result = EventClassifier().classify_all(records)

    assert [e.kind for e in result.events] == [EventKind.CLOCK_IN, EventKind.CLOCK_OUT]
    assert len(result.rejected) == 1
    assert result.rejected[0].record["type"] == "coffee"
