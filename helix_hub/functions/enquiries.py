"""updateRating: record a rating against an enquiry."""

import logging

import azure.functions as func

from helix_hub.enquiries import RatingService
from helix_hub.exceptions import InvalidRequestError, NotFoundError

from .dependencies import get_rating_service
from .http import get_request_body, text_response

logger = logging.getLogger(__name__)

bp = func.Blueprint()


async def handle_update_rating(
    req: func.HttpRequest, service: RatingService
) -> func.HttpResponse:
    """
    Handle an updateRating request.

    Expects ``{"ID": "...", "Rating": "Good" | "Neutral" | "Poor"}``.
    """
    logger.info("updateRating invoked")
    try:
        body = get_request_body(req)
        rating = await service.update_rating(body.get("ID"), body.get("Rating"))
    except InvalidRequestError as e:
        logger.warning(f"Rejected updateRating request: {e}")
        return text_response(str(e), 400)
    except NotFoundError as e:
        return text_response(str(e), 404)
    except Exception as e:
        logger.error(f"Error updating enquiry rating: {e}", exc_info=True)
        return text_response("An error occurred while updating the rating.", 500)
    logger.info("updateRating completed")
    return text_response(f"Rating updated to {rating.value}.", 200)


@bp.function_name("updateRating")
@bp.route(route="updateRating", methods=["POST"], auth_level=func.AuthLevel.FUNCTION)
async def update_rating(req: func.HttpRequest) -> func.HttpResponse:
    return await handle_update_rating(req, get_rating_service())
