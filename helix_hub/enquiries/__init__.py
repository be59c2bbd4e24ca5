"""Enquiry ratings."""

from .ratings import EnquiryRating, RatingService

__all__ = ["EnquiryRating", "RatingService"]
