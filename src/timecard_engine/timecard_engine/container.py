from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .common.datetime_utils import parse_iso_date, parse_timezone
from .core.constants import DEFAULT_CLOSING_DAY, DEFAULT_EXPECTED_WORKING_DAYS, DEFAULT_WEEKEND_DAYS
from .events.classifier import EventClassifier
from .holidays.policy import HolidayCalendar
from .periods.resolver import PeriodResolver
from .reports.aggregator import PeriodAggregator
from .reports.service import AttendanceReportService
from .schedules.model import Schedule
from .schedules.repository import ScheduleSource
from .schedules.service import ScheduleService
from .worktime.live import LiveWorkTimeService


@dataclass(frozen=True)
class Container:
    default_schedule: Schedule
    holiday_calendar: HolidayCalendar
    expected_working_days: int

    classifier: EventClassifier
    period_resolver: PeriodResolver
    period_aggregator: PeriodAggregator

    schedule_service: ScheduleService
    report_service: AttendanceReportService
    live_service: LiveWorkTimeService


def build_container(*, settings: Any, schedules: Optional[ScheduleSource] = None) -> Container:
    """Wire value objects and services from a settings module."""

    default_schedule = Schedule.from_mapping(dict(getattr(settings, "SCHEDULE_DEFAULTS")))
    holiday_calendar = HolidayCalendar.build(
        weekend_days=getattr(settings, "WEEKEND_DAYS", DEFAULT_WEEKEND_DAYS),
        holidays=[parse_iso_date(d) for d in getattr(settings, "HOLIDAYS", [])],
    )
    expected_working_days = int(getattr(settings, "EXPECTED_WORKING_DAYS", DEFAULT_EXPECTED_WORKING_DAYS))

    classifier = EventClassifier(tz=parse_timezone(getattr(settings, "TIMEZONE", "")))
    period_resolver = PeriodResolver(default_closing_day=int(getattr(settings, "CLOSING_DAY", DEFAULT_CLOSING_DAY)))
    period_aggregator = PeriodAggregator(classifier=classifier)

    schedule_service = ScheduleService(default_schedule, schedules)
    report_service = AttendanceReportService(
        schedule_service,
        resolver=period_resolver,
        aggregator=period_aggregator,
        classifier=classifier,
        is_holiday=holiday_calendar,
        expected_working_days=expected_working_days,
    )

    return Container(
        default_schedule=default_schedule,
        holiday_calendar=holiday_calendar,
        expected_working_days=expected_working_days,
        classifier=classifier,
        period_resolver=period_resolver,
        period_aggregator=period_aggregator,
        schedule_service=schedule_service,
        report_service=report_service,
        live_service=LiveWorkTimeService(),
    )
