"""getOfficePresence: who is in the office, at home or on leave today."""

import logging

import azure.functions as func

from helix_hub.attendance import OfficePresenceService

from .dependencies import get_presence_service
from .http import json_response, text_response

logger = logging.getLogger(__name__)

bp = func.Blueprint()


async def handle_get_office_presence(
    req: func.HttpRequest, service: OfficePresenceService
) -> func.HttpResponse:
    logger.info("getOfficePresence invoked")
    try:
        presence = await service.get_office_presence()
    except Exception as e:
        logger.error(f"Error retrieving office presence: {e}", exc_info=True)
        return text_response("Error retrieving office presence.", 500)
    logger.info("getOfficePresence completed")
    return json_response(presence.to_response())


@bp.function_name("getOfficePresence")
@bp.route(route="getOfficePresence", methods=["POST"], auth_level=func.AuthLevel.FUNCTION)
async def get_office_presence(req: func.HttpRequest) -> func.HttpResponse:
    return await handle_get_office_presence(req, get_presence_service())
