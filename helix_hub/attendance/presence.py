"""Who is in the office, working from home or on leave today."""

import asyncio
import logging
from datetime import date
from typing import Iterable, Optional

from helix_hub.config import get_settings
from helix_hub.database import (
    AnnualLeaveRecord,
    OfficePresence,
    PersonAttendance,
    PresenceEntry,
    TeamMember,
)
from helix_hub.dates import today
from helix_hub.leave import AnnualLeaveService, is_on_leave

from .service import AttendanceService

logger = logging.getLogger(__name__)


def partition_presence(
    team: Iterable[TeamMember],
    attendance: Iterable[PersonAttendance],
    leave: list[AnnualLeaveRecord],
    day: date,
) -> OfficePresence:
    """
    Split the team by where they are on ``day``.

    Booked leave wins over attendance. Attendance entries are matched to
    team members by first name, case-insensitively.
    """
    attending = {person.name.lower(): person.attending_today for person in attendance}
    presence = OfficePresence(in_office=[], working_from_home=[], on_leave=[])

    for member in sorted(team, key=lambda m: (m.first or "").lower()):
        first = member.first or ""
        initials = member.initials or ""
        entry = PresenceEntry(
            id=initials,
            name=first,
            initials=initials,
            nickname=member.nickname or first,
        )
        if initials and is_on_leave(leave, initials, day):
            presence.on_leave.append(entry)
        elif attending.get(first.lower(), False):
            presence.in_office.append(entry)
        else:
            presence.working_from_home.append(entry)

    return presence


class OfficePresenceService:
    """Builds the office presence groups shown on the home page."""

    def __init__(
        self,
        attendance_service: Optional[AttendanceService] = None,
        leave_service: Optional[AnnualLeaveService] = None,
    ):
        self.settings = get_settings()
        self.attendance_service = attendance_service or AttendanceService()
        self.leave_service = leave_service or AnnualLeaveService()

    async def get_office_presence(self) -> OfficePresence:
        day = today(self.settings.timezone)
        attendance, leave = await asyncio.gather(
            self.attendance_service.get_attendance(day_to_check=day),
            self.leave_service.get_current_leave(day),
        )
        presence = partition_presence(attendance.team, attendance.attendance, leave, day)
        logger.info(
            f"Office presence for {day}: {len(presence.in_office)} in office, "
            f"{len(presence.working_from_home)} working from home, "
            f"{len(presence.on_leave)} on leave"
        )
        return presence
