from __future__ import annotations

import logging
from collections import OrderedDict
from datetime import date
from typing import Any, Iterable, Optional, Sequence

from ..common.validators import require_positive
from ..core.diagnostics import EngineWarning
from ..core.enums import WarningKind
from ..core.exceptions import UnorderedEventsError
from ..events.classifier import EventClassifier
from ..events.model import AttendanceEvent
from ..holidays.policy import HolidayPredicate
from ..periods.model import PeriodWindow
from ..schedules.model import Schedule
from ..worktime.service import DaySummaryService
from ..worktime.thresholds import ThresholdEvaluator
from .model import DaySummary, PeriodSummary

logger = logging.getLogger(__name__)


def ensure_ordered(events: Sequence[AttendanceEvent]) -> None:
    """Reject batches that are not in non-decreasing timestamp order."""

    for previous, current in zip(events, events[1:]):
        if current.timestamp < previous.timestamp:
            raise UnorderedEventsError(
                f"Event at {current.timestamp.isoformat()} follows {previous.timestamp.isoformat()}"
            )


def group_by_day(events: Iterable[AttendanceEvent]) -> "OrderedDict[date, list[AttendanceEvent]]":
    days: "OrderedDict[date, list[AttendanceEvent]]" = OrderedDict()
    for event in events:
        days.setdefault(event.work_date, []).append(event)
    return days


class PeriodAggregator:
    """Fold an employee's events over a resolved window into a PeriodSummary.

    Pure function of (events, schedule, window, expected_working_days,
    holiday predicate): no clock reads, no shared state.
    """

    def __init__(self, *, classifier: Optional[EventClassifier] = None):
        self._classifier = classifier or EventClassifier()

    def aggregate(
        self,
        employee_id: str,
        events: Iterable[Any],
        schedule: Schedule,
        window: PeriodWindow,
        expected_working_days: int,
        *,
        is_holiday: Optional[HolidayPredicate] = None,
    ) -> PeriodSummary:
        expected = require_positive(expected_working_days, "expected_working_days")
        employee_id = str(employee_id)

        classified = self._classifier.classify_all(events)
        warnings: list[EngineWarning] = [
            EngineWarning(kind=WarningKind.MALFORMED_EVENT, message=str(err)) for err in classified.rejected
        ]

        mine = [e for e in classified.events if e.employee_id == employee_id]
        ensure_ordered(mine)
        in_window = [e for e in mine if window.contains(e.timestamp)]

        days_service = DaySummaryService(thresholds=ThresholdEvaluator(is_holiday))
        days: list[DaySummary] = []
        for work_date, day_events in group_by_day(in_window).items():
            summary = days_service.summarize(
                employee_id=employee_id, work_date=work_date, events=day_events, schedule=schedule
            )
            if summary is None:
                continue
            days.append(summary)
            warnings.extend(summary.warnings)

        employee_name = next((e.employee_name for e in mine if e.employee_name), None)
        return self._fold(
            employee_id=employee_id,
            employee_name=employee_name,
            window=window,
            expected=expected,
            expected_working_days=expected_working_days,
            days=days,
            warnings=warnings,
        )

    def _fold(
        self,
        *,
        employee_id: str,
        employee_name: Optional[str],
        window: PeriodWindow,
        expected: float,
        expected_working_days: int,
        days: list[DaySummary],
        warnings: list[EngineWarning],
    ) -> PeriodSummary:
        working = [d for d in days if d.counts_toward_totals]
        holiday = [d for d in working if d.is_holiday_work]
        late = [d for d in working if d.is_late]
        early = [d for d in working if d.is_early_leave]

        total_minutes = sum(d.work_minutes for d in working)
        working_days = len(working)

        logger.debug(
            "Aggregated employee %s over %s..%s: %d working day(s), %d warning(s)",
            employee_id,
            window.start_date,
            window.end_date,
            working_days,
            len(warnings),
        )
        return PeriodSummary(
            employee_id=employee_id,
            employee_name=employee_name,
            window=window,
            expected_working_days=expected_working_days,
            working_days=working_days,
            total_work_minutes=total_minutes,
            average_work_minutes=total_minutes / working_days if working_days else 0.0,
            total_overtime_minutes=sum(d.overtime_minutes for d in working),
            holiday_work_days=len(holiday),
            holiday_work_minutes=sum(d.work_minutes for d in holiday),
            lateness_count=len(late),
            total_lateness_minutes=sum(d.late_minutes for d in late),
            early_leave_count=len(early),
            total_early_leave_minutes=sum(d.early_leave_minutes for d in early),
            paid_leave_days=sum(1 for d in days if d.is_paid_leave_day),
            absence_days=sum(1 for d in days if d.is_absence_day),
            attendance_rate_percent=working_days / expected * 100,
            days=tuple(days),
            warnings=tuple(warnings),
        )
