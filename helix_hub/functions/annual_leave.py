"""getAnnualLeave: current, future and personal annual leave."""

import logging

import azure.functions as func

from helix_hub.exceptions import InvalidRequestError, MissingFieldError
from helix_hub.leave import AnnualLeaveService

from .dependencies import get_leave_service
from .http import get_request_body, json_response, text_response

logger = logging.getLogger(__name__)

bp = func.Blueprint()


async def handle_get_annual_leave(
    req: func.HttpRequest, service: AnnualLeaveService
) -> func.HttpResponse:
    """
    Handle a getAnnualLeave request.

    Expects ``{"initials": "..."}``. Validation failures return 400 with a
    plain-text message; anything else returns 500.
    """
    logger.info("getAnnualLeave invoked")
    try:
        body = get_request_body(req)
        initials = body.get("initials")
        if initials is not None and not isinstance(initials, str):
            raise InvalidRequestError("Invalid 'initials' in request body. Expected a string.")
        if not initials or not initials.strip():
            raise MissingFieldError("initials")
        initials = initials.strip()
    except InvalidRequestError as e:
        logger.warning(f"Rejected getAnnualLeave request: {e}")
        return text_response(str(e), 400)

    try:
        result = await service.get_annual_leave(initials)
    except Exception as e:
        logger.error(f"Error processing getAnnualLeave: {e}", exc_info=True)
        return text_response("An error occurred while processing your request.", 500)
    logger.info(f"getAnnualLeave completed for {initials}")
    return json_response(result.to_response())


@bp.function_name("getAnnualLeave")
@bp.route(route="getAnnualLeave", methods=["POST"], auth_level=func.AuthLevel.FUNCTION)
async def get_annual_leave(req: func.HttpRequest) -> func.HttpResponse:
    return await handle_get_annual_leave(req, get_leave_service())
