import pytest

from helix_hub.enquiries import EnquiryRating, RatingService
from helix_hub.exceptions import InvalidRequestError, MissingFieldError, NotFoundError

from tests.conftest import FakeQueries


async def test_update_rating():
    queries = FakeQueries()

    rating = await RatingService(queries=queries).update_rating(" 123 ", "Good")

    assert rating is EnquiryRating.GOOD
    assert queries.rating_updates == [("123", "Good")]


@pytest.mark.parametrize("enquiry_id", [None, "", "   "])
async def test_missing_id(enquiry_id):
    with pytest.raises(MissingFieldError):
        await RatingService(queries=FakeQueries()).update_rating(enquiry_id, "Good")


async def test_invalid_rating():
    queries = FakeQueries()

    with pytest.raises(InvalidRequestError, match="Good, Neutral, Poor"):
        await RatingService(queries=queries).update_rating("123", "Excellent")
    assert queries.rating_updates == []


async def test_unknown_enquiry():
    with pytest.raises(NotFoundError):
        await RatingService(queries=FakeQueries(rowcount=0)).update_rating(123, "Poor")
