from __future__ import annotations

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, Query, Request
from fastapi.security import HTTPAuthorizationCredentials

from techhub.api.auth import bearer_scheme, require_admin
from techhub.api.responses import (
    GENERIC_USER_MESSAGE,
    BadRequestBody,
    error_response,
    read_json_object,
    validation_error_response,
)
from techhub.api.schemas import (
    AvailabilityResponseSchema,
    BookingCreatedSchema,
    BookingListResponseSchema,
    BookingSchema,
    MessageResponseSchema,
)
from techhub.application.exceptions import (
    BookingNotFoundError,
    BookingValidationError,
    SlotConflictError,
)
from techhub.domain.entities.admin_user import AdminUser
from techhub.wiring.dependencies import Container, get_container

router = APIRouter()
logger = logging.getLogger(__name__)

BOOKED_MESSAGE = (
    "Your visit has been scheduled successfully! We'll send you a confirmation email shortly."
)


@router.get("/booking")
async def get_bookings(
    date: str | None = Query(None),
    action: str | None = Query(None),
    filter: str | None = Query(None),
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    container: Container = Depends(get_container),
):
    if date and action != "list":
        try:
            availability = container.booking.availability(date)
        except ValueError as e:
            return error_response(400, str(e))
        except Exception as e:
            logger.exception("Booking fetch error", extra={"error": str(e)})
            return error_response(500, "Internal server error")
        return AvailabilityResponseSchema(
            date=availability.date,
            available_slots=availability.available_slots,
            booked_slots=availability.booked_slots,
        ).model_dump(by_alias=True)

    # action=list, or no parameters at all: the admin listing
    await require_admin(credentials=credentials, container=container)
    try:
        bookings = container.booking.list(filter=filter)
        stats = container.booking.stats()
    except ValueError as e:
        return error_response(400, str(e))
    except Exception as e:
        logger.exception("Booking fetch error", extra={"error": str(e)})
        return error_response(500, "Internal server error")

    return BookingListResponseSchema(
        bookings=[BookingSchema.from_entity(b) for b in bookings],
        stats=stats,
    ).model_dump(by_alias=True)


@router.post("/booking")
async def create_booking(
    request: Request,
    background_tasks: BackgroundTasks,
    container: Container = Depends(get_container),
):
    try:
        try:
            payload = await read_json_object(request)
        except BadRequestBody as e:
            return error_response(400, str(e))

        try:
            booking = container.booking.create(payload)
        except BookingValidationError as e:
            return validation_error_response(e.errors, message=str(e))
        except SlotConflictError:
            return error_response(409, "This time slot is already booked")

        # Runs after the response is sent; its outcome never changes this response.
        background_tasks.add_task(container.notify_booking.execute, booking)

        return BookingCreatedSchema(message=BOOKED_MESSAGE, booking_id=booking.id).model_dump(by_alias=True)
    except Exception as e:
        logger.exception("Booking submission error", extra={"error": str(e)})
        return error_response(500, "Internal server error", userMessage=GENERIC_USER_MESSAGE)


@router.put("/booking")
async def update_booking_status(
    request: Request,
    _: AdminUser = Depends(require_admin),
    container: Container = Depends(get_container),
):
    try:
        try:
            payload = await read_json_object(request)
        except BadRequestBody as e:
            return error_response(400, str(e))

        booking_id = payload.get("bookingId")
        status = payload.get("status")
        if not booking_id or not status:
            return error_response(400, "Booking ID and status are required")

        try:
            container.booking.update_status(str(booking_id), str(status))
        except ValueError as e:
            return error_response(400, str(e))
        except BookingNotFoundError:
            return error_response(404, "Booking not found")

        return MessageResponseSchema(message="Booking status updated successfully").model_dump(by_alias=True)
    except Exception as e:
        logger.exception("Booking update error", extra={"error": str(e)})
        return error_response(500, "Internal server error")


@router.delete("/booking")
async def delete_booking(
    id: str | None = Query(None),
    _: AdminUser = Depends(require_admin),
    container: Container = Depends(get_container),
):
    if not id:
        return error_response(400, "Booking ID is required")
    try:
        container.booking.delete(id)
    except BookingNotFoundError:
        return error_response(404, "Booking not found")
    except Exception as e:
        logger.exception("Booking deletion error", extra={"error": str(e)})
        return error_response(500, "Internal server error")

    return MessageResponseSchema(message="Booking deleted successfully").model_dump(by_alias=True)
