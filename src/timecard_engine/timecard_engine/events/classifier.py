from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import replace
from datetime import datetime, tzinfo
from typing import Any, Iterable, Optional

from ..common.datetime_utils import parse_timestamp
from ..core.enums import EventKind
from ..core.exceptions import MalformedEventError
from .model import AttendanceEvent, ClassificationResult

logger = logging.getLogger(__name__)

# Raw records use the timecard app field names; snake_case is accepted too.
_FIELD_ALIASES = {
    "employee_id": ("userId", "employee_id", "employeeId", "user_id"),
    "employee_name": ("userName", "employee_name", "employeeName", "user_name"),
    "kind": ("type", "kind"),
    "timestamp": ("timestamp",),
    "is_manual_entry": ("isManualEntry", "is_manual_entry"),
}


def _pick(record: Mapping, name: str) -> Any:
    for key in _FIELD_ALIASES[name]:
        if key in record and record[key] is not None:
            return record[key]
    return None


class EventClassifier:
    """Validate raw punches and tag them with an EventKind.

    Malformed records never abort a batch: `classify_all` drops them and keeps
    the errors so callers can attach them to the report.
    """

    def __init__(self, tz: Optional[tzinfo] = None):
        self.tz = tz

    def classify(self, raw: Any) -> AttendanceEvent:
        if isinstance(raw, AttendanceEvent):
            return self._revalidate(raw)
        if not isinstance(raw, Mapping):
            raise MalformedEventError(f"Unsupported record type: {type(raw).__name__}", record=raw)

        kind = self._parse_kind(_pick(raw, "kind"), raw)

        employee_id = _pick(raw, "employee_id")
        if employee_id is None or not str(employee_id).strip():
            raise MalformedEventError("Record has no employee id", record=raw)

        timestamp_raw = _pick(raw, "timestamp")
        if timestamp_raw is None:
            raise MalformedEventError("Record has no timestamp", record=raw)
        try:
            timestamp = parse_timestamp(timestamp_raw, self.tz)
        except (TypeError, ValueError, OverflowError, OSError) as exc:
            raise MalformedEventError(f"Unparsable timestamp {timestamp_raw!r}: {exc}", record=raw) from exc

        name = _pick(raw, "employee_name")
        return AttendanceEvent(
            employee_id=str(employee_id).strip(),
            kind=kind,
            timestamp=timestamp,
            is_manual_entry=bool(_pick(raw, "is_manual_entry") or False),
            employee_name=str(name) if name is not None else None,
        )

    def classify_all(self, records: Iterable[Any]) -> ClassificationResult:
        events: list[AttendanceEvent] = []
        rejected: list[MalformedEventError] = []
        for raw in records:
            try:
                events.append(self.classify(raw))
            except MalformedEventError as exc:
                logger.warning("Dropping malformed attendance record: %s", exc)
                rejected.append(exc)
        return ClassificationResult(events=tuple(events), rejected=tuple(rejected))

    def _parse_kind(self, value: Any, record: Any) -> EventKind:
        if isinstance(value, EventKind):
            return value
        try:
            return EventKind(str(value).strip().lower())
        except ValueError:
            raise MalformedEventError(f"Unrecognized event kind: {value!r}", record=record) from None

    def _revalidate(self, event: AttendanceEvent) -> AttendanceEvent:
        if not isinstance(event.kind, EventKind):
            raise MalformedEventError(f"Unrecognized event kind: {event.kind!r}", record=event)
        if not isinstance(event.timestamp, datetime):
            raise MalformedEventError(f"Invalid timestamp: {event.timestamp!r}", record=event)
        if event.timestamp.tzinfo is not None:
            return replace(event, timestamp=parse_timestamp(event.timestamp, self.tz))
        return event
