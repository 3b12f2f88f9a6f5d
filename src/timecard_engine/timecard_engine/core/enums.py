from __future__ import annotations

from enum import Enum


class EventKind(str, Enum):
    """Loại bản ghi chấm công (giá trị khớp với dữ liệu thô)."""

    CLOCK_IN = "clock_in"
    CLOCK_OUT = "clock_out"
    BREAK_START = "break_start"
    BREAK_END = "break_end"
    PAID_LEAVE = "paid_leave"
    ABSENCE = "absence"


class DayClassification(str, Enum):
    """Phân loại duy nhất cho một ngày của một nhân viên."""

    WORKDAY = "workday"
    PAID_LEAVE = "paid_leave"
    ABSENCE = "absence"
    MISSING_CLOCK_OUT = "missing_clock_out"


class WarningKind(str, Enum):
    """Non-fatal conditions attached to day/period summaries."""

    MALFORMED_EVENT = "MalformedEventError"
    UNTERMINATED_BREAK = "UnterminatedBreakWarning"
    MISSING_CLOCK_OUT = "MissingClockOutWarning"
    NEGATIVE_WORK_TIME = "NegativeWorkTimeWarning"
