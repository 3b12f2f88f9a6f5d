from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.diagnostics import EngineWarning
from ..core.enums import DayClassification
from ..periods.model import PeriodWindow


@dataclass(frozen=True)
class DaySummary:
    """Kết quả tính công của một nhân viên trong một ngày."""

    employee_id: str
    work_date: date
    classification: DayClassification
    clock_in: Optional[datetime] = None
    clock_out: Optional[datetime] = None
    gross_minutes: int = 0
    break_minutes: int = 0
    work_minutes: int = 0
    overtime_minutes: int = 0
    late_minutes: int = 0
    early_leave_minutes: int = 0
    is_holiday_work: bool = False
    is_late: bool = False
    is_early_leave: bool = False
    is_on_break: bool = False
    warnings: tuple[EngineWarning, ...] = ()

    @property
    def is_paid_leave_day(self) -> bool:
        return self.classification == DayClassification.PAID_LEAVE

    @property
    def is_absence_day(self) -> bool:
        return self.classification == DayClassification.ABSENCE

    @property
    def counts_toward_totals(self) -> bool:
        return self.classification == DayClassification.WORKDAY


@dataclass(frozen=True)
class PeriodSummary:
    """Báo cáo tổng hợp theo kỳ (immutable)."""

    employee_id: str
    window: PeriodWindow
    expected_working_days: int
    employee_name: Optional[str] = None
    working_days: int = 0
    total_work_minutes: int = 0
    average_work_minutes: float = 0.0
    total_overtime_minutes: int = 0
    holiday_work_days: int = 0
    holiday_work_minutes: int = 0
    lateness_count: int = 0
    total_lateness_minutes: int = 0
    early_leave_count: int = 0
    total_early_leave_minutes: int = 0
    paid_leave_days: int = 0
    absence_days: int = 0
    attendance_rate_percent: float = 0.0
    days: tuple[DaySummary, ...] = ()
    warnings: tuple[EngineWarning, ...] = ()
