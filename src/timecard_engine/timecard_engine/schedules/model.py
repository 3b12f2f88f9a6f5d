from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import time
from typing import Any

from ..common.datetime_utils import parse_hhmm
from ..common.validators import require_positive
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class Schedule:
    """Cấu hình giờ làm việc của một nhân viên (read-only snapshot).

    break_minutes_budget is informational: actual paired breaks are deducted.
    """

    scheduled_start: time
    scheduled_end: time
    break_minutes_budget: int = 60
    standard_work_hours: float = 8.0
    late_grace_minutes: int = 0

    @property
    def standard_work_minutes(self) -> float:
        return float(self.standard_work_hours) * 60

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, fallback: "Schedule | None" = None) -> "Schedule":
        """Build from an employee settings document ("HH:MM" strings).

        Missing keys fall back to `fallback` when given.
        """

        def value(keys: tuple[str, ...], default: Any) -> Any:
            for key in keys:
                if data.get(key) not in (None, ""):
                    return data[key]
            return default

        try:
            start = parse_hhmm(value(("startTime", "scheduled_start"), fallback.scheduled_start if fallback else None))
            end = parse_hhmm(value(("endTime", "scheduled_end"), fallback.scheduled_end if fallback else None))
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"Giờ làm việc không hợp lệ: {exc}") from exc

        standard = require_positive(
            value(("standardWorkTime", "standard_work_hours"), fallback.standard_work_hours if fallback else None),
            "standard_work_hours",
        )
        budget = value(("breakTime", "break_minutes_budget"), fallback.break_minutes_budget if fallback else 0)
        grace = value(("lateThreshold", "late_grace_minutes"), fallback.late_grace_minutes if fallback else 0)
        return cls(
            scheduled_start=start,
            scheduled_end=end,
            break_minutes_budget=int(budget),
            standard_work_hours=standard,
            late_grace_minutes=int(grace),
        )
