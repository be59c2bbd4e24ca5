"""Request parsing and response helpers shared by the HTTP functions."""

import json
from typing import Any

import azure.functions as func

from helix_hub.exceptions import InvalidRequestBodyError

INVALID_BODY_MESSAGE = "Invalid request body. Ensure it's valid JSON."


def get_request_body(req: func.HttpRequest) -> dict[str, Any]:
    """
    Parse a JSON object body. An empty body counts as ``{}``.

    Raises:
        InvalidRequestBodyError: If the body is not valid JSON or not an object
    """
    if not req.get_body().strip():
        return {}
    try:
        body = req.get_json()
    except ValueError as e:
        raise InvalidRequestBodyError(INVALID_BODY_MESSAGE) from e
    if not isinstance(body, dict):
        raise InvalidRequestBodyError(INVALID_BODY_MESSAGE)
    return body


def json_response(payload: Any, status_code: int = 200) -> func.HttpResponse:
    return func.HttpResponse(
        body=json.dumps(payload),
        status_code=status_code,
        mimetype="application/json",
    )


def text_response(message: str, status_code: int) -> func.HttpResponse:
    return func.HttpResponse(body=message, status_code=status_code, mimetype="text/plain")
