from __future__ import annotations

import json
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

from techhub.api.schemas import ErrorBodySchema

GENERIC_USER_MESSAGE = (
    "An unexpected error occurred. Please try again or contact support if the problem persists."
)


class BadRequestBody(ValueError):
    pass


async def read_json_object(request: Request) -> dict[str, Any]:
    """Parse the request body as a JSON object. Raises BadRequestBody otherwise."""
    body = await request.body()
    try:
        payload = json.loads(body.decode("utf-8")) if body else {}
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise BadRequestBody("Request body must be valid JSON") from e
    if not isinstance(payload, dict):
        raise BadRequestBody("Request body must be a JSON object")
    return payload


def error_response(status_code: int, error: str, **extra: Any) -> JSONResponse:
    return JSONResponse({"success": False, "error": error, **extra}, status_code=status_code)


def validation_error_response(errors: dict[str, str], message: str = "Validation failed") -> JSONResponse:
    body = ErrorBodySchema(
        type="validation",
        message=message,
        user_message="Please check your form and try again.",
        details=errors,
    )
    return JSONResponse(
        {"success": False, "error": body.model_dump(by_alias=True)},
        status_code=400,
    )
