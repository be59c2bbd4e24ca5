"""SQL Server access for the Helix databases."""

from .client import SqlClient
from .connection import SqlConnectionConfig, build_connection_string, parse_connection_string
from .queries import HelixQueries
from .schema import (
    AnnualLeaveRecord,
    AnnualLeaveResponse,
    AttendanceResponse,
    BankHolidays,
    LeaveTotals,
    OfficePresence,
    PersonAttendance,
    PresenceEntry,
    TeamMember,
    UserDetails,
    WeeklyAttendance,
)
from .secrets import SqlPasswordProvider, get_password_provider

__all__ = [
    "AnnualLeaveRecord",
    "AnnualLeaveResponse",
    "AttendanceResponse",
    "BankHolidays",
    "HelixQueries",
    "LeaveTotals",
    "OfficePresence",
    "PersonAttendance",
    "PresenceEntry",
    "SqlClient",
    "SqlConnectionConfig",
    "SqlPasswordProvider",
    "TeamMember",
    "UserDetails",
    "WeeklyAttendance",
    "build_connection_string",
    "get_password_provider",
    "parse_connection_string",
]
