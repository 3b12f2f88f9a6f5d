from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..core.enums import EventKind
from ..core.exceptions import MalformedEventError


@dataclass(frozen=True)
class AttendanceEvent:
    """Thực thể miền (domain): Một lần chấm công thô."""

    employee_id: str
    kind: EventKind
    timestamp: datetime
    is_manual_entry: bool = False
    employee_name: Optional[str] = None

    @property
    def work_date(self) -> date:
        return self.timestamp.date()


@dataclass(frozen=True)
class ClassificationResult:
    """Events that passed classification plus the records that were dropped."""

    events: tuple[AttendanceEvent, ...] = ()
    rejected: tuple[MalformedEventError, ...] = field(default_factory=tuple)
