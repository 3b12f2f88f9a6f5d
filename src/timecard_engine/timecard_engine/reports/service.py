from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, Optional, Sequence

from ..core.constants import DEFAULT_EXPECTED_WORKING_DAYS
from ..core.diagnostics import EngineWarning
from ..core.enums import WarningKind
from ..events.classifier import EventClassifier
from ..events.repository import EventSource
from ..holidays.policy import HolidayPredicate
from ..periods.model import PeriodRequest, PeriodWindow
from ..periods.resolver import PeriodResolver
from ..schedules.service import ScheduleService
from ..worktime.service import DaySummaryService
from ..worktime.thresholds import ThresholdEvaluator
from .aggregator import PeriodAggregator, ensure_ordered
from .model import DaySummary, PeriodSummary
from .rows import summary_to_row

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportData:
    window: PeriodWindow
    summaries: tuple[PeriodSummary, ...]
    rows: tuple[dict, ...]
    warnings: tuple[EngineWarning, ...] = ()


class AttendanceReportService:
    """Period reports for many employees.

    Each employee is aggregated independently through PeriodAggregator; the
    schedule falls back to the injected default when the source has none.
    """

    def __init__(
        self,
        schedules: ScheduleService,
        *,
        resolver: Optional[PeriodResolver] = None,
        aggregator: Optional[PeriodAggregator] = None,
        classifier: Optional[EventClassifier] = None,
        is_holiday: Optional[HolidayPredicate] = None,
        expected_working_days: int = DEFAULT_EXPECTED_WORKING_DAYS,
    ):
        self._schedules = schedules
        self._resolver = resolver or PeriodResolver()
        self._classifier = classifier or EventClassifier()
        self._aggregator = aggregator or PeriodAggregator(classifier=self._classifier)
        self._is_holiday = is_holiday
        self._expected_working_days = int(expected_working_days)

    def with_schedules(self, schedules: ScheduleService) -> "AttendanceReportService":
        """Same engine wiring, different schedule lookup."""

        return AttendanceReportService(
            schedules,
            resolver=self._resolver,
            aggregator=self._aggregator,
            classifier=self._classifier,
            is_holiday=self._is_holiday,
            expected_working_days=self._expected_working_days,
        )

    def resolve_window(self, request: PeriodRequest, *, today: Optional[date] = None) -> PeriodWindow:
        return self._resolver.resolve(request, today=today)

    def build_period_report(
        self,
        *,
        records: Sequence[Any],
        window: PeriodWindow,
        employee_id: Optional[str] = None,
        expected_working_days: Optional[int] = None,
    ) -> ReportData:
        """Group a mixed batch of raw records per employee and aggregate each."""

        classified = self._classifier.classify_all(records)
        employee_ids: list[str] = []
        for event in classified.events:
            if event.employee_id not in employee_ids:
                employee_ids.append(event.employee_id)

        if employee_id is not None:
            employee_ids = [e for e in employee_ids if e == str(employee_id)]

        summaries = tuple(
            self.summarize_employee(
                employee_id=eid,
                records=[e for e in classified.events if e.employee_id == eid],
                window=window,
                expected_working_days=expected_working_days,
            )
            for eid in employee_ids
        )
        logger.info(
            "Built period report %s..%s for %d employee(s), %d malformed record(s) dropped",
            window.start_date,
            window.end_date,
            len(summaries),
            len(classified.rejected),
        )
        dropped = tuple(EngineWarning(kind=WarningKind.MALFORMED_EVENT, message=str(err)) for err in classified.rejected)
        return ReportData(
            window=window,
            summaries=summaries,
            rows=tuple(summary_to_row(s) for s in summaries),
            warnings=dropped,
        )

    def build_from_source(
        self,
        *,
        source: EventSource,
        employee_ids: Iterable[str],
        window: PeriodWindow,
        expected_working_days: Optional[int] = None,
    ) -> ReportData:
        summaries = tuple(
            self.summarize_employee(
                employee_id=eid,
                records=source.fetch_events(eid, window),
                window=window,
                expected_working_days=expected_working_days,
            )
            for eid in employee_ids
        )
        return ReportData(window=window, summaries=summaries, rows=tuple(summary_to_row(s) for s in summaries))

    def summarize_employee(
        self,
        *,
        employee_id: str,
        records: Iterable[Any],
        window: PeriodWindow,
        expected_working_days: Optional[int] = None,
    ) -> PeriodSummary:
        return self._aggregator.aggregate(
            employee_id,
            records,
            self._schedules.get_effective(employee_id),
            window,
            self._expected_working_days if expected_working_days is None else expected_working_days,
            is_holiday=self._is_holiday,
        )

    def summarize_day(self, *, employee_id: str, work_date: date, records: Iterable[Any]) -> Optional[DaySummary]:
        classified = self._classifier.classify_all(records)
        events = [
            e for e in classified.events if e.employee_id == str(employee_id) and e.work_date == work_date
        ]
        ensure_ordered(events)
        days = DaySummaryService(thresholds=ThresholdEvaluator(self._is_holiday))
        return days.summarize(
            employee_id=str(employee_id),
            work_date=work_date,
            events=events,
            schedule=self._schedules.get_effective(str(employee_id)),
        )
