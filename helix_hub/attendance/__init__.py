"""Office attendance and presence."""

from .presence import OfficePresenceService, partition_presence
from .service import AttendanceService, build_attendance

__all__ = [
    "AttendanceService",
    "OfficePresenceService",
    "build_attendance",
    "partition_presence",
]
