from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Protocol

from .model import Schedule


class ScheduleSource(Protocol):
    def get_for_employee(self, employee_id: str) -> Optional[Schedule]:
        raise NotImplementedError


class InMemoryScheduleSource(ScheduleSource):
    """Schedules keyed by employee id, e.g. parsed from a request body."""

    def __init__(self, schedules: Mapping[str, Schedule]):
        self._schedules = {str(k): v for k, v in schedules.items()}

    @classmethod
    def from_settings(cls, data: Mapping[str, Mapping[str, Any]], *, fallback: Schedule) -> "InMemoryScheduleSource":
        return cls({str(k): Schedule.from_mapping(v, fallback=fallback) for k, v in data.items()})

    def get_for_employee(self, employee_id: str) -> Optional[Schedule]:
        return self._schedules.get(str(employee_id))
