from __future__ import annotations

from .model import DaySummary, PeriodSummary


def _hhmm(minutes: int) -> str:
    sign = "-" if minutes < 0 else ""
    minutes = abs(int(minutes))
    return f"{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def _hours(minutes: float) -> str:
    return f"{minutes / 60:.1f}"


def day_to_row(day: DaySummary) -> dict:
    return {
        "employee_id": day.employee_id,
        "work_date": day.work_date.strftime("%Y-%m-%d"),
        "classification": day.classification.value,
        "clock_in": day.clock_in.strftime("%H:%M") if day.clock_in else "-",
        "clock_out": day.clock_out.strftime("%H:%M") if day.clock_out else "-",
        "break_minutes": day.break_minutes,
        "work_minutes": day.work_minutes,
        "worked_hours": _hhmm(day.work_minutes),
        "overtime_minutes": day.overtime_minutes,
        "late_minutes": day.late_minutes,
        "early_leave_minutes": day.early_leave_minutes,
        "is_late": day.is_late,
        "is_early_leave": day.is_early_leave,
        "is_holiday_work": day.is_holiday_work,
        "is_on_break": day.is_on_break,
        "warnings": [w.kind.value for w in day.warnings],
    }


def summary_to_row(summary: PeriodSummary) -> dict:
    """Flat row for exporters: raw minutes plus one-decimal hour strings."""

    return {
        "employee_id": summary.employee_id,
        "employee_name": summary.employee_name or "-",
        "period_start": summary.window.start_date.strftime("%Y-%m-%d"),
        "period_end": summary.window.end_date.strftime("%Y-%m-%d"),
        "working_days": summary.working_days,
        "total_work_minutes": summary.total_work_minutes,
        "total_work_hours": _hours(summary.total_work_minutes),
        "average_work_minutes": round(summary.average_work_minutes, 1),
        "average_work_hours": _hours(summary.average_work_minutes),
        "total_overtime_minutes": summary.total_overtime_minutes,
        "total_overtime_hours": _hours(summary.total_overtime_minutes),
        "holiday_work_days": summary.holiday_work_days,
        "holiday_work_minutes": summary.holiday_work_minutes,
        "holiday_work_hours": _hours(summary.holiday_work_minutes),
        "lateness_count": summary.lateness_count,
        "total_lateness_minutes": summary.total_lateness_minutes,
        "early_leave_count": summary.early_leave_count,
        "total_early_leave_minutes": summary.total_early_leave_minutes,
        "paid_leave_days": summary.paid_leave_days,
        "absence_days": summary.absence_days,
        "expected_working_days": summary.expected_working_days,
        "attendance_rate_percent": f"{summary.attendance_rate_percent:.1f}",
        "warnings": [
            {
                "kind": w.kind.value,
                "message": w.message,
                "work_date": w.work_date.strftime("%Y-%m-%d") if w.work_date else None,
            }
            for w in summary.warnings
        ],
    }
