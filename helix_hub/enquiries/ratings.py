"""Enquiry quality ratings."""

import logging
from enum import Enum
from typing import Any, Optional

from helix_hub.database import HelixQueries
from helix_hub.exceptions import InvalidRequestError, MissingFieldError, NotFoundError

logger = logging.getLogger(__name__)


class EnquiryRating(str, Enum):
    """Rating a fee earner gives an enquiry."""
    GOOD = "Good"
    NEUTRAL = "Neutral"
    POOR = "Poor"


class RatingService:
    """Records enquiry ratings in helix-core-data."""

    def __init__(self, queries: Optional[HelixQueries] = None):
        self.queries = queries or HelixQueries()

    async def update_rating(self, enquiry_id: Any, rating: Any) -> EnquiryRating:
        """
        Set the rating on an enquiry.

        Args:
            enquiry_id: Enquiry ID
            rating: One of "Good", "Neutral" or "Poor"

        Returns:
            The rating that was stored

        Raises:
            InvalidRequestError: If the ID is empty or the rating unknown
            NotFoundError: If no enquiry has the ID
        """
        if enquiry_id is None or not str(enquiry_id).strip():
            raise MissingFieldError("ID")
        try:
            value = EnquiryRating(rating)
        except ValueError:
            allowed = ", ".join(r.value for r in EnquiryRating)
            raise InvalidRequestError(f"Invalid rating. Expected one of: {allowed}.") from None

        enquiry_id = str(enquiry_id).strip()
        updated = await self.queries.update_enquiry_rating(enquiry_id, value.value)
        if updated == 0:
            logger.warning(f"No enquiry found with ID {enquiry_id}")
            raise NotFoundError(f"Enquiry {enquiry_id} not found.")

        logger.info(f"Enquiry {enquiry_id} rated {value.value}")
        return value
