from __future__ import annotations

import math
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Any, Optional
from zoneinfo import ZoneInfo


END_OF_DAY = time(23, 59, 59, 999000)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_hhmm(value: Any) -> time:
    """Parse "HH:MM" (or "HH:MM:SS") into a time of day."""
    if isinstance(value, time):
        return value
    parts = str(value).strip().split(":")
    if len(parts) < 2:
        raise ValueError(f"Invalid time string: {value!r}")
    hours = int(parts[0])
    minutes = int(parts[1])
    seconds = int(parts[2]) if len(parts) >= 3 and parts[2] else 0
    return time(hour=hours, minute=minutes, second=seconds)


def parse_timestamp(value: Any, tz: Optional[tzinfo] = None) -> datetime:
    """Normalize a raw timestamp into a naive local datetime.

    Accepts datetime, date, ISO-8601 strings (a trailing "Z" is allowed) and
    epoch seconds. Aware values and epoch seconds are converted into `tz`, then
    made naive. With no `tz` the host timezone is used, so deployments that mix
    hosts should configure one. Naive values are taken as already local.
    """

    if isinstance(value, bool):
        raise TypeError(f"Unsupported timestamp value type: {type(value)!r}")

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, (int, float)):
        parsed = datetime.fromtimestamp(value, tz) if tz is not None else datetime.fromtimestamp(value)
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
    else:
        raise TypeError(f"Unsupported timestamp value type: {type(value)!r}")

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(tz).replace(tzinfo=None)
    return parsed


def minutes_between(start: datetime, end: datetime) -> int:
    """Whole elapsed minutes from start to end (floored, may be negative)."""
    return math.floor((end - start).total_seconds() / 60)


def start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min)


def end_of_day(day: date) -> datetime:
    return datetime.combine(day, END_OF_DAY)


def add_years(day: date, years: int) -> date:
    """Shift a date by whole years; Feb 29 falls back to Feb 28."""
    try:
        return day.replace(year=day.year + years)
    except ValueError:
        return day.replace(year=day.year + years, day=28)


def iter_dates(start: date, end: date):
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def parse_timezone(value: Any) -> Optional[tzinfo]:
    """Turn "+09:00" / "-05:30" or an IANA name into a tzinfo; empty means host local."""
    if value is None or isinstance(value, tzinfo):
        return value
    text = str(value).strip()
    if not text:
        return None
    if text[0] in "+-":
        offset = parse_hhmm(text[1:])
        delta = timedelta(hours=offset.hour, minutes=offset.minute)
        return timezone(-delta if text[0] == "-" else delta)
    return ZoneInfo(text)
