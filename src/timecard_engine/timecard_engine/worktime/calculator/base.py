from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ...events.model import AttendanceEvent
from .model import DayDuration


class WorkTimeCalculator(ABC):
    """Calculator interface (Strategy Pattern for worked time)."""

    @abstractmethod
    def calculate(self, events: Sequence[AttendanceEvent]) -> DayDuration | None:
        raise NotImplementedError
