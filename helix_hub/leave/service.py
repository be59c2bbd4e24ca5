"""
Annual leave orchestration for getAnnualLeave.

Combines current leave, future leave and the caller's fiscal-year
entries, enriched with each person's areas of work and approvers.
"""

import asyncio
import logging
from datetime import date
from typing import Optional

from helix_hub.cache import TTLCache
from helix_hub.config import get_settings
from helix_hub.database import (
    AnnualLeaveRecord,
    AnnualLeaveResponse,
    HelixQueries,
    UserDetails,
)
from helix_hub.dates import get_fiscal_year, today

from .approvals import determine_approvers
from .totals import calculate_totals

logger = logging.getLogger(__name__)

TEAM_AOW_KEY = "team_aow"


class AnnualLeaveService:
    """
    Builds the annual leave payload for one user.

    Team, leave and per-user data are cached separately for
    ``leave_cache_ttl_seconds``.
    """

    def __init__(self, queries: Optional[HelixQueries] = None):
        self.settings = get_settings()
        self.queries = queries or HelixQueries()
        ttl = self.settings.leave_cache_ttl_seconds
        self._team_cache: TTLCache[dict[str, Optional[str]]] = TTLCache(max_size=1, default_ttl=ttl)
        self._leave_cache: TTLCache[list[AnnualLeaveRecord]] = TTLCache(max_size=8, default_ttl=ttl)
        self._user_cache: TTLCache[list[AnnualLeaveRecord]] = TTLCache(max_size=256, default_ttl=ttl)

    def clear_cache(self) -> None:
        """Drop all cached team and leave data."""
        self._team_cache.clear()
        self._leave_cache.clear()
        self._user_cache.clear()

    async def get_team_aow_map(self) -> dict[str, Optional[str]]:
        return await self._team_cache.get_or_set(TEAM_AOW_KEY, self.queries.get_team_aow_map)

    async def get_current_leave(self, day: date) -> list[AnnualLeaveRecord]:
        return await self._leave_cache.get_or_set(
            ("current", day), lambda: self.queries.get_current_leave(day)
        )

    async def get_future_leave(self, day: date) -> list[AnnualLeaveRecord]:
        return await self._leave_cache.get_or_set(
            ("future", day), lambda: self.queries.get_future_leave(day)
        )

    async def get_user_leave(self, initials: str, day: date) -> list[AnnualLeaveRecord]:
        fiscal_year = get_fiscal_year(day)
        return await self._user_cache.get_or_set(
            (initials, fiscal_year.start),
            lambda: self.queries.get_user_leave(initials, fiscal_year),
        )

    @staticmethod
    def enrich(
        records: list[AnnualLeaveRecord], aow_map: dict[str, Optional[str]]
    ) -> list[AnnualLeaveRecord]:
        """Attach each person's AOW and approvers to their leave records."""
        enriched = []
        for record in records:
            aow = aow_map.get(record.person) or None
            enriched.append(
                record.model_copy(
                    update={"aow": aow, "approvers": determine_approvers(aow or "")}
                )
            )
        return enriched

    async def get_annual_leave(self, initials: str) -> AnnualLeaveResponse:
        """
        Get the annual leave payload for a user.

        Args:
            initials: The caller's initials

        Returns:
            AnnualLeaveResponse with enriched current and future leave and
            the caller's fiscal-year details
        """
        day = today(self.settings.timezone)
        logger.info(f"Fetching annual leave for {initials} as of {day}")

        aow_map = await self.get_team_aow_map()
        current, future, user_leave = await asyncio.gather(
            self.get_current_leave(day),
            self.get_future_leave(day),
            self.get_user_leave(initials, day),
        )

        user_aow = aow_map.get(initials) or None
        user_details = UserDetails(
            leave_entries=user_leave,
            totals=calculate_totals(user_leave, aow=user_aow),
        )

        logger.info(
            f"Annual leave for {initials}: {len(current)} current, "
            f"{len(future)} future, {len(user_leave)} in fiscal year"
        )
        return AnnualLeaveResponse(
            annual_leave=self.enrich(current, aow_map),
            future_leave=self.enrich(future, aow_map),
            user_details=user_details,
        )
