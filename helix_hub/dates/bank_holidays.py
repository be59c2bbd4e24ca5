"""
UK bank holidays from the gov.uk feed.

The feed lists every division (england-and-wales, scotland,
northern-ireland) with several years of events; we keep the dates for
one division and one year.
"""

import logging
from datetime import date
from typing import Optional

import httpx
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from helix_hub.cache import TTLCache
from helix_hub.config import get_settings
from helix_hub.exceptions import ExternalServiceError

logger = logging.getLogger(__name__)


class BankHolidayClient:
    """
    Async client for https://www.gov.uk/bank-holidays.json.

    Parsed years are cached so repeated dashboard loads do not refetch the feed.
    """

    def __init__(self, http_client: Optional[httpx.AsyncClient] = None):
        """
        Initialize the client with settings.

        Args:
            http_client: Optional preconfigured httpx client (used in tests)
        """
        self.settings = get_settings()
        self._http_client = http_client
        self._cache: TTLCache[list[date]] = TTLCache(
            max_size=16, default_ttl=self.settings.bank_holiday_cache_ttl_seconds
        )

    async def _get_http_client(self) -> httpx.AsyncClient:
        if self._http_client is None or self._http_client.is_closed:
            self._http_client = httpx.AsyncClient(
                headers={"Accept": "application/json"},
                timeout=10.0,
            )
        return self._http_client

    async def close(self):
        """Close the HTTP client."""
        if self._http_client and not self._http_client.is_closed:
            await self._http_client.aclose()

    @retry(
        retry=retry_if_exception_type(httpx.HTTPError),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        reraise=True,
    )
    async def _fetch_feed(self) -> dict:
        client = await self._get_http_client()
        logger.debug(f"Fetching bank holidays from {self.settings.bank_holidays_url}")
        response = await client.get(self.settings.bank_holidays_url)
        response.raise_for_status()
        return response.json()

    async def get_bank_holidays(self, year: int) -> list[date]:
        """
        Get the bank holidays for a calendar year.

        Args:
            year: Calendar year

        Returns:
            Sorted list of holiday dates for the configured division

        Raises:
            ExternalServiceError: If the feed cannot be fetched or parsed
        """
        cached = self._cache.get(year)
        if cached is not None:
            return cached

        division = self.settings.bank_holidays_division
        try:
            feed = await self._fetch_feed()
            events = feed[division].get("events") or []
            holidays = sorted(
                day
                for day in (date.fromisoformat(event["date"]) for event in events)
                if day.year == year
            )
        except httpx.HTTPError as e:
            logger.error(f"Failed to fetch bank holidays: {e}")
            raise ExternalServiceError("Failed to fetch bank holidays") from e
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.error(f"Unexpected bank holidays payload for {division}: {e}")
            raise ExternalServiceError("Unexpected bank holidays payload") from e

        logger.info(f"Loaded {len(holidays)} bank holidays for {division} {year}")
        self._cache.set(year, holidays)
        return holidays
