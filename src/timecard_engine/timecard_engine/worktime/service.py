from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..core.diagnostics import EngineWarning
from ..core.enums import DayClassification, WarningKind
from ..events.model import AttendanceEvent
from ..reports.model import DaySummary
from ..schedules.model import Schedule
from .calculator.base import WorkTimeCalculator
from .calculator.standard_calculator import DayDurationCalculator
from .thresholds import ThresholdEvaluator

logger = logging.getLogger(__name__)


class DaySummaryService:
    """Build one DaySummary from an employee-day's sorted events."""

    def __init__(
        self,
        *,
        calculator: Optional[WorkTimeCalculator] = None,
        thresholds: Optional[ThresholdEvaluator] = None,
    ):
        self._calculator = calculator or DayDurationCalculator()
        self._thresholds = thresholds or ThresholdEvaluator()

    def summarize(
        self,
        *,
        employee_id: str,
        work_date: date,
        events: Sequence[AttendanceEvent],
        schedule: Schedule,
    ) -> Optional[DaySummary]:
        duration = self._calculator.calculate(events)
        if duration is None:
            return None

        if duration.classification in (DayClassification.PAID_LEAVE, DayClassification.ABSENCE):
            return DaySummary(employee_id=employee_id, work_date=work_date, classification=duration.classification)

        warnings: list[EngineWarning] = []
        if duration.breaks.is_currently_on_break:
            warnings.append(
                EngineWarning(
                    kind=WarningKind.UNTERMINATED_BREAK,
                    message=f"{len(duration.breaks.open_breaks)} break(s) without break_end; not deducted",
                    work_date=work_date,
                )
            )

        if duration.classification == DayClassification.MISSING_CLOCK_OUT:
            warnings.append(
                EngineWarning(
                    kind=WarningKind.MISSING_CLOCK_OUT,
                    message="Day excluded from totals: no clock_out",
                    work_date=work_date,
                )
            )
            return DaySummary(
                employee_id=employee_id,
                work_date=work_date,
                classification=duration.classification,
                clock_in=duration.clock_in,
                break_minutes=duration.breaks.total_minutes,
                is_holiday_work=self._thresholds.is_holiday_work(work_date),
                is_on_break=duration.breaks.is_currently_on_break,
                warnings=tuple(warnings),
            )

        if duration.is_negative:
            logger.warning(
                "Negative worked time for employee %s on %s: %s min", employee_id, work_date, duration.work_minutes
            )
            warnings.append(
                EngineWarning(
                    kind=WarningKind.NEGATIVE_WORK_TIME,
                    message=f"Worked time is negative ({duration.work_minutes} min); check clock events",
                    work_date=work_date,
                )
            )

        result = self._thresholds.evaluate(
            work_date=work_date,
            clock_in=duration.clock_in,
            clock_out=duration.clock_out,
            work_minutes=duration.work_minutes,
            schedule=schedule,
        )
        return DaySummary(
            employee_id=employee_id,
            work_date=work_date,
            classification=duration.classification,
            clock_in=duration.clock_in,
            clock_out=duration.clock_out,
            gross_minutes=duration.gross_minutes,
            break_minutes=duration.break_minutes,
            work_minutes=duration.work_minutes,
            overtime_minutes=result.overtime_minutes,
            late_minutes=result.late_minutes,
            early_leave_minutes=result.early_leave_minutes,
            is_holiday_work=result.is_holiday_work,
            is_late=result.is_late,
            is_early_leave=result.is_early_leave,
            is_on_break=duration.breaks.is_currently_on_break,
            warnings=tuple(warnings),
        )
