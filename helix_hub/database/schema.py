"""
Pydantic models for Helix SQL rows and API payloads.

JSON keys follow what the Teams tab already consumes: team rows keep
their SQL column names (``"Entra ID"``, ``"AOW"``), leave rows keep
their snake_case columns.
"""

from datetime import date, datetime, time
from typing import Any, Optional, Union

from pydantic import BaseModel, Field

from helix_hub.dates import format_date


class HelixModel(BaseModel):
    """Base model serialised by alias, omitting fields never set."""

    class Config:
        populate_by_name = True

    def to_response(self) -> dict[str, Any]:
        """JSON-ready dict for an HTTP response body."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _optional_text(value: Any) -> Optional[str]:
    return str(value) if value else None


# =============================================================================
# Team
# =============================================================================

class TeamMember(HelixModel):
    """
    Team member row.

    Maps to: [dbo].[team] in helix-core-data
    Only the columns a query selected are serialised.
    """
    first: Optional[str] = Field(None, alias="First")
    last: Optional[str] = Field(None, alias="Last")
    full_name: Optional[str] = Field(None, alias="Full Name")
    nickname: Optional[str] = Field(None, alias="Nickname")
    initials: Optional[str] = Field(None, alias="Initials")
    email: Optional[str] = Field(None, alias="Email")
    entra_id: Optional[str] = Field(None, alias="Entra ID")
    clio_id: Optional[Union[int, str]] = Field(None, alias="Clio ID")
    rate: Optional[float] = Field(None, alias="Rate")
    role: Optional[str] = Field(None, alias="Role")
    aow: Optional[str] = Field(None, alias="AOW")
    created_date: Optional[Union[datetime, date, str]] = Field(None, alias="Created Date")
    created_time: Optional[Union[time, str]] = Field(None, alias="Created Time")


# =============================================================================
# Attendance
# =============================================================================

class WeeklyAttendance(HelixModel):
    """Attendance days confirmed for one week."""
    iso: int = 0
    attendance: str = ""


class PersonAttendance(HelixModel):
    """
    Weekly attendance for one person.

    ``weeks`` is keyed by week range, e.g.
    "Monday, 07/10/2024 - Sunday, 13/10/2024".
    """
    name: str
    level: str = ""
    weeks: dict[str, WeeklyAttendance] = Field(default_factory=dict)
    attending_today: bool = Field(False, alias="attendingToday")
    confirmed: bool = False


class AttendanceResponse(HelixModel):
    """Payload returned by getAttendance."""
    attendance: list[PersonAttendance]
    team: list[TeamMember]


# =============================================================================
# Annual leave
# =============================================================================

class AnnualLeaveRecord(HelixModel):
    """
    Annual leave request.

    Maps to: [dbo].[annualLeave] in helix-project-data
    ``AOW`` and ``approvers`` are only present once a record is enriched
    with team data.
    """
    request_id: Optional[int] = None
    person: str = ""
    start_date: str = ""
    end_date: str = ""
    reason: str = ""
    status: str = ""
    days_taken: float = 0
    leave_type: Optional[str] = None
    rejection_notes: Optional[str] = None
    aow: Optional[str] = Field(None, alias="AOW")
    approvers: Optional[list[str]] = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "AnnualLeaveRecord":
        """Build a record from an annualLeave row (``fe`` selected as ``person``)."""
        start_date = row.get("start_date")
        end_date = row.get("end_date")
        return cls(
            request_id=row.get("request_id"),
            person=_text(row.get("person")),
            start_date=format_date(start_date) if start_date else "",
            end_date=format_date(end_date) if end_date else "",
            reason=_text(row.get("reason")),
            status=_text(row.get("status")),
            days_taken=float(row.get("days_taken") or 0),
            leave_type=_optional_text(row.get("leave_type")),
            rejection_notes=_optional_text(row.get("rejection_notes")),
        )


class LeaveTotals(HelixModel):
    """Fiscal-year leave totals for one person."""
    standard: float = 0
    unpaid: float = 0
    purchase: float = 0
    rejected: float = 0
    aow: Optional[str] = Field(None, alias="AOW")


class UserDetails(HelixModel):
    """A person's fiscal-year leave entries and totals."""
    leave_entries: list[AnnualLeaveRecord] = Field(alias="leaveEntries")
    totals: LeaveTotals


class AnnualLeaveResponse(HelixModel):
    """Payload returned by getAnnualLeave."""
    annual_leave: list[AnnualLeaveRecord]
    future_leave: list[AnnualLeaveRecord]
    user_details: UserDetails


# =============================================================================
# Presence & calendar
# =============================================================================

class PresenceEntry(HelixModel):
    """A team member placed in one of the office presence groups."""
    id: str
    name: str
    initials: str
    nickname: str


class OfficePresence(HelixModel):
    """Team split by where they are today."""
    in_office: list[PresenceEntry] = Field(default_factory=list)
    working_from_home: list[PresenceEntry] = Field(default_factory=list)
    on_leave: list[PresenceEntry] = Field(default_factory=list)


class BankHolidays(HelixModel):
    """Bank holidays for one division and calendar year."""
    division: str
    year: int
    dates: list[date]
