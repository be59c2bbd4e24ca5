"""
Annual leave approval routing.

LZ signs off every request. Construction requests also go to JW;
all other areas of work go to AC.
"""

from datetime import date
from typing import Iterable, Optional

from helix_hub.dates import format_date
from helix_hub.database.schema import AnnualLeaveRecord

ALWAYS_APPROVER = "LZ"
CONSTRUCTION_APPROVER = "JW"
DEFAULT_APPROVER = "AC"
APPROVERS = frozenset({DEFAULT_APPROVER, CONSTRUCTION_APPROVER, ALWAYS_APPROVER})


def parse_aow(aow: Optional[str]) -> list[str]:
    """Split a comma-separated AOW value into lowercased, trimmed entries."""
    if not aow:
        return []
    return [item.strip() for item in aow.lower().split(",")]


def determine_approvers(aow: Optional[str]) -> list[str]:
    """
    Work out who approves leave for someone with the given areas of work.

    Args:
        aow: Comma-separated AOW, e.g. "Commercial, Construction"

    Returns:
        ["LZ", "JW"] for construction, otherwise ["LZ", "AC"]
    """
    if "construction" in parse_aow(aow):
        return [ALWAYS_APPROVER, CONSTRUCTION_APPROVER]
    return [ALWAYS_APPROVER, DEFAULT_APPROVER]


def ensure_lz_in_approvers(approvers: Optional[list[str]]) -> list[str]:
    approvers = list(approvers or [])
    if ALWAYS_APPROVER not in approvers:
        approvers.append(ALWAYS_APPROVER)
    return approvers


def combine_leave(*groups: Iterable[AnnualLeaveRecord]) -> list[AnnualLeaveRecord]:
    """
    Merge leave lists, dropping repeats of the same request.

    Current and future leave overlap for requests that start today.
    """
    seen: set[int] = set()
    combined = []
    for group in groups:
        for record in group:
            if record.request_id is not None:
                if record.request_id in seen:
                    continue
                seen.add(record.request_id)
            combined.append(record)
    return combined


def approvals_needed(
    records: Iterable[AnnualLeaveRecord], initials: str
) -> list[AnnualLeaveRecord]:
    """
    Requests waiting on this user's approval.

    Only AC, JW and LZ approve leave; anyone else gets an empty list.
    """
    if initials not in APPROVERS:
        return []
    return [
        record
        for record in records
        if record.status == "requested"
        and initials in ensure_lz_in_approvers(record.approvers)
    ]


def bookings_needed(
    records: Iterable[AnnualLeaveRecord], initials: str
) -> list[AnnualLeaveRecord]:
    """The user's own approved or rejected requests, still to be booked or dismissed."""
    initials = initials.lower()
    return [
        record
        for record in records
        if record.status in ("approved", "rejected")
        and record.person.lower() == initials
    ]


def is_on_leave(records: Iterable[AnnualLeaveRecord], initials: str, day: date) -> bool:
    """
    Check whether someone has booked leave covering ``day``.

    Args:
        records: Leave records with YYYY-MM-DD dates
        initials: Person's initials (case-insensitive)
        day: Day to check

    Returns:
        True if a booked record for the person spans the day
    """
    initials = initials.strip().lower()
    day_str = format_date(day)
    return any(
        record.status == "booked"
        and record.person.strip().lower() == initials
        and record.start_date <= day_str <= record.end_date
        for record in records
    )
