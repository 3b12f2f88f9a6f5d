from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from ..common.datetime_utils import add_years, end_of_day, start_of_day
from ..common.validators import require_int_between
from ..core.constants import DEFAULT_CLOSING_DAY, MAX_LOOKBACK_YEARS, MAX_RANGE_DAYS
from ..core.exceptions import InvalidRangeError, ValidationError
from .model import PeriodRequest, PeriodWindow


@dataclass(frozen=True)
class PeriodResolver:
    """Turn a closing-day month or a custom date range into a PeriodWindow."""

    default_closing_day: int = DEFAULT_CLOSING_DAY
    max_range_days: int = MAX_RANGE_DAYS
    max_lookback_years: int = MAX_LOOKBACK_YEARS

    def for_closing_day(self, year: int, month: int, closing_day: Optional[int] = None) -> PeriodWindow:
        """Payroll month ending on `closing_day`.

        Day numbers past the end of a month roll into the next one, so both
        ends are computed as offsets from the 1st of their month.
        """

        year = require_int_between(year, "year", 1, 9999)
        month = require_int_between(month, "month", 1, 12)
        closing_day = require_int_between(
            self.default_closing_day if closing_day is None else closing_day, "closing_day", 1, 31
        )

        prev_year, prev_month = (year - 1, 12) if month == 1 else (year, month - 1)
        start = date(prev_year, prev_month, 1) + timedelta(days=closing_day)
        end = date(year, month, 1) + timedelta(days=closing_day - 1)
        return PeriodWindow(start=start_of_day(start), end=end_of_day(end))

    def for_range(
        self,
        start_date: date,
        end_date: date,
        *,
        strict: bool = False,
        today: Optional[date] = None,
    ) -> PeriodWindow:
        if start_date is None or end_date is None:
            raise InvalidRangeError("Vui lòng chọn ngày bắt đầu và ngày kết thúc")
        if start_date > end_date:
            raise InvalidRangeError(f"Ngày bắt đầu {start_date} sau ngày kết thúc {end_date}")
        if strict:
            self._check_strict(start_date, end_date, today)
        return PeriodWindow(start=start_of_day(start_date), end=end_of_day(end_date))

    def resolve(self, request: PeriodRequest, *, today: Optional[date] = None) -> PeriodWindow:
        monthly = request.year is not None or request.month is not None
        custom = request.start_date is not None or request.end_date is not None
        if monthly == custom:
            raise ValidationError("Chọn đúng một kiểu kỳ: theo tháng (year/month) hoặc khoảng ngày")

        if monthly:
            if request.year is None or request.month is None:
                raise ValidationError("Kỳ theo tháng cần cả year và month")
            return self.for_closing_day(request.year, request.month, request.closing_day)
        return self.for_range(request.start_date, request.end_date, strict=request.strict, today=today)

    def _check_strict(self, start_date: date, end_date: date, today: Optional[date]) -> None:
        if today is None:
            raise ValidationError("Strict range validation needs `today`")

        if (end_date - start_date).days > self.max_range_days:
            raise InvalidRangeError(f"Khoảng thời gian tối đa {self.max_range_days} ngày")
        if start_date < add_years(today, -self.max_lookback_years):
            raise InvalidRangeError(f"Không chấp nhận ngày cũ hơn {self.max_lookback_years} năm")
        if end_date > today + timedelta(days=1):
            raise InvalidRangeError("Không chấp nhận ngày trong tương lai")
