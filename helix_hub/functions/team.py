"""getTeamData: active team members with their full profile columns."""

import logging

import azure.functions as func

from helix_hub.database import HelixQueries

from .dependencies import get_queries
from .http import json_response, text_response

logger = logging.getLogger(__name__)

bp = func.Blueprint()


async def handle_get_team_data(
    req: func.HttpRequest, queries: HelixQueries
) -> func.HttpResponse:
    logger.info(f"getTeamData invoked ({req.method})")
    try:
        team = await queries.get_active_team(full=True)
    except Exception as e:
        logger.error(f"Error retrieving team data: {e}", exc_info=True)
        return text_response("Error retrieving team data.", 500)
    logger.info(f"getTeamData completed: {len(team)} members")
    return json_response([member.to_response() for member in team])


@bp.function_name("getTeamData")
@bp.route(route="getTeamData", methods=["GET", "POST"], auth_level=func.AuthLevel.FUNCTION)
async def get_team_data(req: func.HttpRequest) -> func.HttpResponse:
    return await handle_get_team_data(req, get_queries())
