"""
Office attendance orchestration for getAttendance.

Attendance rows are stored per person with a "current" and a "next"
week. A row written last week therefore describes this week in its
"next" columns, so rows are merged into one ``weeks`` map per person.
"""

import logging
from datetime import date
from typing import Iterable, Optional

from helix_hub.config import get_settings
from helix_hub.database import (
    AttendanceResponse,
    HelixQueries,
    PersonAttendance,
    WeeklyAttendance,
)
from helix_hub.database.client import Row
from helix_hub.dates import (
    BankHolidayClient,
    WeekRanges,
    attendance_includes_day,
    day_name,
    format_week_range,
    get_end_of_week,
    get_next_working_day,
    get_start_of_week,
    today,
)
from helix_hub.exceptions import ExternalServiceError

logger = logging.getLogger(__name__)


def build_attendance(
    rows: Iterable[Row], ranges: WeekRanges, day_to_check: date
) -> list[PersonAttendance]:
    """
    Group attendance rows by person.

    Args:
        rows: Rows from the attendance table
        ranges: Week ranges the rows were selected for
        day_to_check: Day used for ``attendingToday``, read from the week containing it

    Returns:
        One PersonAttendance per name, sorted case-insensitively
    """
    people: dict[str, PersonAttendance] = {}

    for row in rows:
        name = row.get("name") or ""
        person = people.get(name)
        if person is None:
            person = PersonAttendance(
                name=name,
                level=row.get("level") or "",
                weeks={},
                attending_today=False,
                confirmed=False,
            )
            people[name] = person

        current_week = row.get("current_week")
        if current_week:
            person.weeks[current_week] = WeeklyAttendance(
                iso=row.get("current_iso") or 0,
                attendance=row.get("current_attendance") or "",
            )
        next_week = row.get("next_week")
        if next_week:
            person.weeks[next_week] = WeeklyAttendance(
                iso=row.get("next_iso") or 0,
                attendance=row.get("next_attendance") or "",
            )

    check_day = day_name(day_to_check)
    check_start = get_start_of_week(day_to_check)
    check_week = format_week_range(check_start, get_end_of_week(check_start))
    for person in people.values():
        person.confirmed = ranges.current in person.weeks
        week = person.weeks.get(check_week)
        person.attending_today = attendance_includes_day(
            week.attendance if week else None, check_day
        )

    return sorted(people.values(), key=lambda p: p.name.lower())


class AttendanceService:
    """Builds the weekly attendance payload for the whole team."""

    def __init__(
        self,
        queries: Optional[HelixQueries] = None,
        bank_holidays: Optional[BankHolidayClient] = None,
    ):
        self.settings = get_settings()
        self.queries = queries or HelixQueries()
        self.bank_holidays = bank_holidays

    async def get_day_to_check(self, day: date) -> date:
        """
        Day used for ``attendingToday``.

        Today, unless ``attendance_check_next_working_day`` is set, in which
        case the next weekday that is not a bank holiday.
        """
        if not self.settings.attendance_check_next_working_day:
            return day

        holidays: list[date] = []
        if self.bank_holidays is not None:
            try:
                for year in {day.year, day.year + 1}:
                    holidays.extend(await self.bank_holidays.get_bank_holidays(year))
            except ExternalServiceError as e:
                logger.warning(f"Bank holidays unavailable, skipping weekends only: {e}")
        return get_next_working_day(day, holidays)

    async def get_attendance(self, day_to_check: Optional[date] = None) -> AttendanceResponse:
        """
        Get the team's attendance for the current and next week.

        Args:
            day_to_check: Override for the day used for ``attendingToday``

        Returns:
            AttendanceResponse with attendance and the active team
        """
        day = today(self.settings.timezone)
        ranges = WeekRanges.for_day(day)
        if day_to_check is None:
            day_to_check = await self.get_day_to_check(day)

        logger.info(f"Current week range: {ranges.current}")
        logger.info(f"Next week range: {ranges.next}")
        logger.info(f"Day to check: {day_name(day_to_check)} ({day_to_check})")

        rows = await self.queries.get_attendance_rows(ranges)
        attendance = build_attendance(rows, ranges, day_to_check)
        team = await self.queries.get_active_team()

        logger.info(f"Attendance built for {len(attendance)} people, team of {len(team)}")
        return AttendanceResponse(attendance=attendance, team=team)
