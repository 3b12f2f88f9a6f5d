from datetime import date, datetime, time

from src.timecard_engine.timecard_engine.holidays.policy import HolidayCalendar, WeekendHolidayPolicy
from src.timecard_engine.timecard_engine.schedules.model import Schedule
from src.timecard_engine.timecard_engine.worktime.thresholds import ThresholdEvaluator


def _evaluate(evaluator, schedule, clock_in, clock_out, work_minutes):
    return evaluator.evaluate(
        work_date=clock_in.date(),
        clock_in=clock_in,
        clock_out=clock_out,
        work_minutes=work_minutes,
        schedule=schedule,
    )


def test_on_time_full_day(standard_schedule):
    result = _evaluate(
        ThresholdEvaluator(), standard_schedule, datetime(2025, 1, 15, 9, 0), datetime(2025, 1, 15, 18, 0), 480
    )

    assert result.overtime_minutes == 0
    assert result.late_minutes == 0
    assert result.early_leave_minutes == 0
    assert result.is_late is False
    assert result.is_early_leave is False
    assert result.is_holiday_work is False


def test_late_by_twenty_minutes(standard_schedule):
    result = _evaluate(
        ThresholdEvaluator(), standard_schedule, datetime(2025, 1, 15, 9, 20), datetime(2025, 1, 15, 18, 0), 460
    )

    assert result.late_minutes == 20
    assert result.is_late is True
    assert result.overtime_minutes == 0


def test_early_leave_and_overtime_are_independent(standard_schedule):
    # 07:00-17:30 without breaks: 630 min worked, 30 min early.
    result = _evaluate(
        ThresholdEvaluator(), standard_schedule, datetime(2025, 1, 15, 7, 0), datetime(2025, 1, 15, 17, 30), 630
    )

    assert result.overtime_minutes == 150
    assert result.early_leave_minutes == 30
    assert result.is_early_leave is True
    assert result.late_minutes == 0


def test_fractional_standard_hours():
    schedule = Schedule(scheduled_start=time(9, 0), scheduled_end=time(17, 0), standard_work_hours=7.5)

    result = _evaluate(ThresholdEvaluator(), schedule, datetime(2025, 1, 15, 9, 0), datetime(2025, 1, 15, 17, 0), 480)

    assert result.overtime_minutes == 30


def test_grace_minutes_only_affect_flag():
    schedule = Schedule(scheduled_start=time(9, 0), scheduled_end=time(18, 0), late_grace_minutes=5)

    result = _evaluate(ThresholdEvaluator(), schedule, datetime(2025, 1, 15, 9, 4), datetime(2025, 1, 15, 18, 0), 536)

    assert result.late_minutes == 4
    assert result.is_late is False


def test_weekend_is_holiday_work_regardless_of_hours(standard_schedule):
    saturday = datetime(2025, 1, 18, 10, 0)

    result = _evaluate(ThresholdEvaluator(), standard_schedule, saturday, datetime(2025, 1, 18, 11, 0), 60)

    assert result.is_holiday_work is True


def test_injected_calendar_replaces_weekend_rule(standard_schedule):
    calendar = HolidayCalendar.build(weekend_days=[6], holidays=[date(2025, 1, 15)])
    evaluator = ThresholdEvaluator(calendar)

    wednesday = _evaluate(evaluator, standard_schedule, datetime(2025, 1, 15, 9), datetime(2025, 1, 15, 18), 480)
    saturday = _evaluate(evaluator, standard_schedule, datetime(2025, 1, 18, 9), datetime(2025, 1, 18, 18), 480)

    assert wednesday.is_holiday_work is True
    assert saturday.is_holiday_work is False


def test_weekend_policy():
    policy = WeekendHolidayPolicy()

    assert policy(date(2025, 1, 18)) is True
    assert policy(date(2025, 1, 19)) is True
    assert policy(date(2025, 1, 20)) is False
