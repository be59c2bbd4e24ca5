from collections import Counter
from datetime import date

import pytest

from helix_hub.config import get_settings
from helix_hub.database.schema import AnnualLeaveRecord, TeamMember
from helix_hub.exceptions import DatabaseError


@pytest.fixture(autouse=True)
def settings(monkeypatch):
    monkeypatch.setenv("SQL_PASSWORD", "test-password")
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.setenv("ATTENDANCE_CHECK_NEXT_WORKING_DAY", "false")
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


def make_leave(**overrides) -> AnnualLeaveRecord:
    values = {
        "request_id": 1,
        "person": "AB",
        "start_date": "2024-10-07",
        "end_date": "2024-10-08",
        "reason": "Holiday",
        "status": "booked",
        "days_taken": 2,
        "leave_type": "standard",
        "rejection_notes": None,
    }
    values.update(overrides)
    return AnnualLeaveRecord(**values)


def make_member(first: str, initials: str, nickname=None, entra_id=None) -> TeamMember:
    return TeamMember.model_validate(
        {"First": first, "Initials": initials, "Nickname": nickname, "Entra ID": entra_id}
    )


class FakeQueries:
    """In-memory stand-in for HelixQueries that counts calls."""

    def __init__(
        self,
        attendance_rows=None,
        team=None,
        aow_map=None,
        current_leave=None,
        future_leave=None,
        user_leave=None,
        rowcount=1,
        fail=(),
    ):
        self.attendance_rows = attendance_rows or []
        self.team = team or []
        self.aow_map = aow_map or {}
        self.current_leave = current_leave or []
        self.future_leave = future_leave or []
        self.user_leave = user_leave or {}
        self.rowcount = rowcount
        self.fail = set(fail)
        self.calls = Counter()
        self.requested_ranges = []
        self.requested_days = []
        self.user_leave_requests = []
        self.rating_updates = []
        self.team_full = None

    def _record(self, name):
        self.calls[name] += 1
        if name in self.fail:
            raise DatabaseError("SQL query failed.")

    async def get_attendance_rows(self, ranges):
        self._record("attendance")
        self.requested_ranges.append(ranges)
        return list(self.attendance_rows)

    async def get_active_team(self, full=False):
        self._record("team")
        self.team_full = full
        return list(self.team)

    async def get_team_aow_map(self):
        self._record("aow")
        return dict(self.aow_map)

    async def get_current_leave(self, today: date):
        self._record("current_leave")
        self.requested_days.append(today)
        return list(self.current_leave)

    async def get_future_leave(self, today: date):
        self._record("future_leave")
        return list(self.future_leave)

    async def get_user_leave(self, initials, fiscal_year):
        self._record("user_leave")
        self.user_leave_requests.append((initials, fiscal_year))
        return list(self.user_leave.get(initials, []))

    async def update_enquiry_rating(self, enquiry_id, rating):
        self._record("rating")
        self.rating_updates.append((enquiry_id, rating))
        return self.rowcount


@pytest.fixture
def fake_queries():
    return FakeQueries()
