from __future__ import annotations

from typing import Any, Protocol, Sequence

from ..periods.model import PeriodWindow


class EventSource(Protocol):
    def fetch_events(self, employee_id: str, window: PeriodWindow) -> Sequence[Any]:
        """Return one employee's raw records inside the window, ascending by timestamp."""

        raise NotImplementedError
