from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request

from techhub.api.responses import BadRequestBody, error_response, read_json_object
from techhub.api.schemas import MessageResponseSchema
from techhub.application.exceptions import EmailDeliveryError
from techhub.wiring.dependencies import Container, get_container

router = APIRouter()
logger = logging.getLogger(__name__)


def client_ip(request: Request) -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


@router.post("/contact")
async def submit_contact(request: Request, container: Container = Depends(get_container)):
    try:
        ip = client_ip(request)
        if not container.contact_rate_limiter.allow(ip):
            logger.info("Contact rate limit hit", extra={"client_ip": ip})
            return error_response(
                429, "Too many submission attempts. Please wait a minute before trying again."
            )

        try:
            payload = await read_json_object(request)
        except BadRequestBody as e:
            return error_response(400, str(e))

        validation = container.submit_contact.validate(payload)
        if not validation.is_valid:
            return error_response(400, "Validation failed", details=validation.errors)

        try:
            await container.submit_contact.execute(validation.data)
        except EmailDeliveryError as e:
            logger.error("Contact form error", extra={"client_ip": ip, "error": str(e)})
            return error_response(
                500,
                "Sorry, there was an error sending your message. Please try again.",
                details=str(e),
            )

        return MessageResponseSchema(
            message="Thank you for your message! We'll get back to you soon."
        ).model_dump(by_alias=True)
    except Exception as e:
        logger.exception("Contact form error", extra={"error": str(e)})
        return error_response(500, "Sorry, there was an error sending your message. Please try again.")


@router.get("/contact")
async def contact_method_not_allowed():
    return error_response(405, "Method not allowed")
