from __future__ import annotations

import logging
from typing import Optional

from .model import Schedule
from .repository import ScheduleSource

logger = logging.getLogger(__name__)


class ScheduleService:
    """Resolve the effective schedule for an employee.

    The default schedule is injected by the container, never built here.
    """

    def __init__(self, default_schedule: Schedule, schedules: Optional[ScheduleSource] = None):
        self._default = default_schedule
        self._schedules = schedules

    @property
    def default_schedule(self) -> Schedule:
        return self._default

    def get_effective(self, employee_id: str) -> Schedule:
        if self._schedules:
            schedule = self._schedules.get_for_employee(employee_id)
            if schedule:
                return schedule
        logger.debug("No schedule for employee %s, using default", employee_id)
        return self._default
