"""
SQL queries for the Helix dashboard.

Attendance and annual leave live in helix-project-data; the team and
enquiry tables live in helix-core-data.
"""

import logging
from datetime import date
from typing import Optional

from helix_hub.config import get_settings
from helix_hub.dates import FiscalYear, WeekRanges

from .client import Row, SqlClient
from .schema import AnnualLeaveRecord, TeamMember

logger = logging.getLogger(__name__)


class HelixQueries:
    """
    High-level query interface for the Helix SQL databases.

    Wraps one SqlClient per database with domain-specific methods
    that return typed Pydantic models.
    """

    # Tables
    ATTENDANCE = "[dbo].[officeAttendance-clioCalendarEntries]"
    ANNUAL_LEAVE = "[dbo].[annualLeave]"
    TEAM = "[dbo].[team]"
    ENQUIRIES = "[dbo].[enquiries]"

    ATTENDANCE_TEAM_COLUMNS = "[First], [Initials], [Entra ID], [Nickname]"
    FULL_TEAM_COLUMNS = (
        "[Created Date], [Created Time], [Full Name], [Last], [First], [Nickname], "
        "[Initials], [Email], [Entra ID], [Clio ID], [Rate], [Role], [AOW]"
    )
    LEAVE_COLUMNS = (
        "[request_id], [fe] AS person, [start_date], [end_date], [reason], "
        "[status], [days_taken], [leave_type], [rejection_notes]"
    )

    def __init__(
        self,
        project_client: Optional[SqlClient] = None,
        core_client: Optional[SqlClient] = None,
    ):
        """
        Initialize with SQL clients.

        Args:
            project_client: Client for helix-project-data. Created if not provided.
            core_client: Client for helix-core-data. Created if not provided.
        """
        settings = get_settings()
        self.project = project_client or SqlClient(settings.sql_project_database)
        self.core = core_client or SqlClient(settings.sql_core_database)

    # =========================================================================
    # Attendance
    # =========================================================================

    async def get_attendance_rows(self, ranges: WeekRanges) -> list[Row]:
        """
        Get attendance rows for the current and next week.

        Rows written last week whose "next week" is now the current week
        are included too.

        Args:
            ranges: Previous, current and next week ranges

        Returns:
            Raw rows ordered by first name
        """
        sql = f"""
            SELECT
                [First_Name] AS name,
                [Current_Attendance] AS current_attendance,
                [Current_Week] AS current_week,
                [Current_ISO] AS current_iso,
                [Next_Attendance] AS next_attendance,
                [Next_Week] AS next_week,
                [Next_ISO] AS next_iso,
                [Level] AS level,
                [Entry_ID] AS entry_id
            FROM {self.ATTENDANCE}
            WHERE [Current_Week] = %(current_week)s
               OR [Next_Week] = %(next_week)s
               OR ([Next_Week] = %(current_week)s AND [Current_Week] = %(previous_week)s)
            ORDER BY [First_Name];
        """
        try:
            return await self.project.query(
                sql,
                {
                    "current_week": ranges.current,
                    "next_week": ranges.next,
                    "previous_week": ranges.previous,
                },
            )
        except Exception as e:
            logger.error(f"Failed to get attendance rows for {ranges.current}: {e}")
            raise

    # =========================================================================
    # Team
    # =========================================================================

    async def get_active_team(self, full: bool = False) -> list[TeamMember]:
        """
        Get team members who are not inactive.

        Args:
            full: Select every profile column instead of the attendance subset

        Returns:
            List of TeamMember, carrying only the selected columns
        """
        columns = self.FULL_TEAM_COLUMNS if full else self.ATTENDANCE_TEAM_COLUMNS
        sql = f"SELECT {columns} FROM {self.TEAM} WHERE [status] <> 'inactive';"
        try:
            rows = await self.core.query(sql)
            return [TeamMember.model_validate(row) for row in rows]
        except Exception as e:
            logger.error(f"Failed to get active team: {e}")
            raise

    async def get_team_aow_map(self) -> dict[str, Optional[str]]:
        """
        Get each team member's areas of work.

        Returns:
            Dict of initials to AOW (None when empty)
        """
        sql = f"SELECT [Initials], [AOW] FROM {self.TEAM};"
        try:
            rows = await self.core.query(sql)
        except Exception as e:
            logger.error(f"Failed to get team AOW data: {e}")
            raise

        aow_map: dict[str, Optional[str]] = {}
        for row in rows:
            initials = row.get("Initials")
            if initials:
                aow_map[initials] = row.get("AOW") or None
        return aow_map

    # =========================================================================
    # Annual leave
    # =========================================================================

    async def _get_leave(self, where: str, params: dict) -> list[AnnualLeaveRecord]:
        sql = f"SELECT {self.LEAVE_COLUMNS} FROM {self.ANNUAL_LEAVE} WHERE {where};"
        rows = await self.project.query(sql, params)
        return [AnnualLeaveRecord.from_row(row) for row in rows]

    async def get_current_leave(self, today: date) -> list[AnnualLeaveRecord]:
        """Get leave spanning ``today``."""
        try:
            return await self._get_leave(
                "%(today)s BETWEEN [start_date] AND [end_date]", {"today": today}
            )
        except Exception as e:
            logger.error(f"Failed to get current leave for {today}: {e}")
            raise

    async def get_future_leave(self, today: date) -> list[AnnualLeaveRecord]:
        """Get leave starting on or after ``today``."""
        try:
            return await self._get_leave("[start_date] >= %(today)s", {"today": today})
        except Exception as e:
            logger.error(f"Failed to get future leave from {today}: {e}")
            raise

    async def get_user_leave(
        self, initials: str, fiscal_year: FiscalYear
    ) -> list[AnnualLeaveRecord]:
        """
        Get a person's leave starting within a fiscal year.

        Args:
            initials: Fee earner initials
            fiscal_year: Fiscal year bounds

        Returns:
            List of AnnualLeaveRecord
        """
        try:
            return await self._get_leave(
                "[fe] = %(initials)s AND [start_date] >= %(fiscal_start)s "
                "AND [start_date] <= %(fiscal_end)s",
                {
                    "initials": initials,
                    "fiscal_start": fiscal_year.start,
                    "fiscal_end": fiscal_year.end,
                },
            )
        except Exception as e:
            logger.error(f"Failed to get leave for {initials} in {fiscal_year.label}: {e}")
            raise

    # =========================================================================
    # Enquiries
    # =========================================================================

    async def update_enquiry_rating(self, enquiry_id: str, rating: str) -> int:
        """
        Set the rating on an enquiry.

        Returns:
            Number of rows updated
        """
        sql = f"UPDATE {self.ENQUIRIES} SET [Rating] = %(rating)s WHERE [ID] = %(id)s;"
        try:
            return await self.core.execute(sql, {"rating": rating, "id": enquiry_id})
        except Exception as e:
            logger.error(f"Failed to update rating for enquiry {enquiry_id}: {e}")
            raise
