"""getBankHolidays: UK bank holidays for a calendar year."""

import logging

import azure.functions as func

from helix_hub.config import get_settings
from helix_hub.database import BankHolidays
from helix_hub.dates import BankHolidayClient, today
from helix_hub.exceptions import ExternalServiceError

from .dependencies import get_bank_holiday_client
from .http import json_response, text_response

logger = logging.getLogger(__name__)

bp = func.Blueprint()


async def handle_get_bank_holidays(
    req: func.HttpRequest, client: BankHolidayClient
) -> func.HttpResponse:
    """
    Handle a getBankHolidays request.

    ``?year=`` defaults to the current year in the configured time zone.
    """
    settings = get_settings()
    year_param = (req.params.get("year") or "").strip()
    if year_param:
        try:
            year = int(year_param)
        except ValueError:
            logger.warning(f"Rejected getBankHolidays year: '{year_param}'")
            return text_response("Invalid 'year' query parameter.", 400)
    else:
        year = today(settings.timezone).year

    logger.info(f"getBankHolidays invoked for {year}")
    try:
        dates = await client.get_bank_holidays(year)
    except ExternalServiceError as e:
        logger.error(f"Error retrieving bank holidays: {e}")
        return text_response("Error retrieving bank holidays.", 502)
    except Exception as e:
        logger.error(f"Unexpected error retrieving bank holidays: {e}", exc_info=True)
        return text_response("Error retrieving bank holidays.", 500)

    logger.info(f"getBankHolidays completed: {len(dates)} dates")
    payload = BankHolidays(division=settings.bank_holidays_division, year=year, dates=dates)
    return json_response(payload.to_response())


@bp.function_name("getBankHolidays")
@bp.route(route="getBankHolidays", methods=["GET"], auth_level=func.AuthLevel.FUNCTION)
async def get_bank_holidays(req: func.HttpRequest) -> func.HttpResponse:
    return await handle_get_bank_holidays(req, get_bank_holiday_client())
