"""
Week and working-day helpers.

Office attendance is keyed by a week range string such as
``"Monday, 07/10/2024 - Sunday, 13/10/2024"``, so every range
computed here must format exactly like the rows written to SQL.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterable, Optional
from zoneinfo import ZoneInfo

WEEK_RANGE_DATE_FORMAT = "%d/%m/%Y"


def today(tz: Optional[str] = None) -> date:
    """Current date in the given IANA time zone (local time if None)."""
    if tz is None:
        return date.today()
    return datetime.now(ZoneInfo(tz)).date()


def get_start_of_week(day: date) -> date:
    """Return the Monday of the week containing ``day``."""
    return day - timedelta(days=day.weekday())


def get_end_of_week(start: date) -> date:
    """Return the Sunday closing the week that begins on ``start``."""
    return start + timedelta(days=6)


def get_next_week_start(start: date) -> date:
    return start + timedelta(days=7)


def format_week_range(start: date, end: date) -> str:
    return (
        f"Monday, {start.strftime(WEEK_RANGE_DATE_FORMAT)} - "
        f"Sunday, {end.strftime(WEEK_RANGE_DATE_FORMAT)}"
    )


def format_date(value: date) -> str:
    """Format a date (or datetime) as YYYY-MM-DD."""
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()


def day_name(day: date) -> str:
    """English weekday name, e.g. "Monday"."""
    return day.strftime("%A")


def attendance_includes_day(attendance: Optional[str], day: str) -> bool:
    """
    Check whether a comma-separated attendance string includes ``day``.

    Args:
        attendance: Value such as "Monday, Wednesday,Friday"
        day: Weekday name to look for

    Returns:
        True if the day is listed (case-insensitive)
    """
    if not attendance:
        return False
    days = [d.strip().lower() for d in attendance.split(",")]
    return day.strip().lower() in days


def get_next_working_day(day: date, holidays: Iterable[date] = ()) -> date:
    """Return the first weekday after ``day`` that is not a holiday."""
    holiday_set = set(holidays)
    candidate = day + timedelta(days=1)
    while candidate.weekday() >= 5 or candidate in holiday_set:
        candidate += timedelta(days=1)
    return candidate


@dataclass(frozen=True)
class WeekRanges:
    """Previous, current and next week ranges around a reference day."""

    previous: str
    current: str
    next: str

    @classmethod
    def for_day(cls, day: date) -> "WeekRanges":
        current_start = get_start_of_week(day)
        next_start = get_next_week_start(current_start)
        previous_start = current_start - timedelta(days=7)
        return cls(
            previous=format_week_range(previous_start, get_end_of_week(previous_start)),
            current=format_week_range(current_start, get_end_of_week(current_start)),
            next=format_week_range(next_start, get_end_of_week(next_start)),
        )
