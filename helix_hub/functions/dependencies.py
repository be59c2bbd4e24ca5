"""
Service instances shared across invocations.

A warm worker reuses the same SQL clients and caches; each is created
on first use so importing the function app never touches Azure.
"""

from functools import lru_cache

from helix_hub.attendance import AttendanceService, OfficePresenceService
from helix_hub.database import HelixQueries
from helix_hub.dates import BankHolidayClient
from helix_hub.enquiries import RatingService
from helix_hub.leave import AnnualLeaveService


@lru_cache
def get_queries() -> HelixQueries:
    return HelixQueries()


@lru_cache
def get_bank_holiday_client() -> BankHolidayClient:
    return BankHolidayClient()


@lru_cache
def get_attendance_service() -> AttendanceService:
    return AttendanceService(queries=get_queries(), bank_holidays=get_bank_holiday_client())


@lru_cache
def get_leave_service() -> AnnualLeaveService:
    return AnnualLeaveService(queries=get_queries())


@lru_cache
def get_presence_service() -> OfficePresenceService:
    return OfficePresenceService(
        attendance_service=get_attendance_service(),
        leave_service=get_leave_service(),
    )


@lru_cache
def get_rating_service() -> RatingService:
    return RatingService(queries=get_queries())
