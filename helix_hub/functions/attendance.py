"""getAttendance: weekly office attendance for the team."""

import logging

import azure.functions as func

from helix_hub.attendance import AttendanceService

from .dependencies import get_attendance_service
from .http import json_response, text_response

logger = logging.getLogger(__name__)

bp = func.Blueprint()


async def handle_get_attendance(
    req: func.HttpRequest, service: AttendanceService
) -> func.HttpResponse:
    logger.info(f"getAttendance invoked ({req.method})")
    try:
        result = await service.get_attendance()
    except Exception as e:
        logger.error(f"Error retrieving attendance data: {e}", exc_info=True)
        return text_response("Error retrieving attendance data.", 500)
    logger.info(f"getAttendance completed: {len(result.attendance)} people")
    return json_response(result.to_response())


@bp.function_name("getAttendance")
@bp.route(route="getAttendance", methods=["POST"], auth_level=func.AuthLevel.FUNCTION)
async def get_attendance(req: func.HttpRequest) -> func.HttpResponse:
    return await handle_get_attendance(req, get_attendance_service())
