"""Fiscal-year leave totals."""

from typing import Iterable, Optional

from helix_hub.database.schema import AnnualLeaveRecord, LeaveTotals


def calculate_totals(
    records: Iterable[AnnualLeaveRecord], aow: Optional[str] = None
) -> LeaveTotals:
    """
    Sum a person's leave days by type.

    Standard leave only counts once booked; unpaid and purchased leave
    count whatever their status. Rejected requests with notes are
    totalled separately.

    Args:
        records: The person's leave entries for the fiscal year
        aow: Person's areas of work, echoed on the totals

    Returns:
        LeaveTotals
    """
    standard = unpaid = purchase = rejected = 0.0

    for record in records:
        if not record.leave_type:
            continue
        leave_type = record.leave_type.lower()
        status = record.status.lower()
        days = record.days_taken

        if leave_type == "standard":
            if status == "booked":
                standard += days
        elif leave_type == "unpaid":
            unpaid += days
        elif leave_type == "purchase":
            purchase += days

        if status == "rejected" and record.rejection_notes:
            rejected += days

    return LeaveTotals(
        standard=standard,
        unpaid=unpaid,
        purchase=purchase,
        rejected=rejected,
        aow=aow,
    )
