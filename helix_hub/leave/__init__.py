"""Annual leave: approval routing, totals and the getAnnualLeave service."""

from .approvals import (
    approvals_needed,
    bookings_needed,
    combine_leave,
    determine_approvers,
    ensure_lz_in_approvers,
    is_on_leave,
)
from .service import AnnualLeaveService
from .totals import calculate_totals

__all__ = [
    "AnnualLeaveService",
    "approvals_needed",
    "bookings_needed",
    "calculate_totals",
    "combine_leave",
    "determine_approvers",
    "ensure_lz_in_approvers",
    "is_on_leave",
]
