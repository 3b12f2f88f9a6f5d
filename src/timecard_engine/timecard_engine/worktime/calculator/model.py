from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ...core.enums import DayClassification
from ..breaks import BreakPairing


@dataclass(frozen=True)
class DayDuration:
    """Net worked time of one employee-day before thresholds are applied."""

    classification: DayClassification
    clock_in: Optional[datetime] = None
    clock_out: Optional[datetime] = None
    gross_minutes: int = 0
    break_minutes: int = 0
    work_minutes: int = 0
    breaks: BreakPairing = field(default_factory=BreakPairing)

    @property
    def is_negative(self) -> bool:
        return self.work_minutes < 0
