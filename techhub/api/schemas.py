from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from techhub.domain.entities.booking import Booking


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LoginRequestSchema(BaseModel):
    username: str
    password: str


class AdminUserSchema(BaseModel):
    id: str
    username: str
    role: str


class LoginResponseSchema(BaseModel):
    success: bool
    token: str
    user: AdminUserSchema


class BookingSchema(CamelModel):
    id: str | None
    name: str
    email: str
    phone: str
    date: str
    time: str
    purpose: str
    guests: int
    message: str
    status: str
    created_at: str | None

    @classmethod
    def from_entity(cls, booking: Booking) -> "BookingSchema":
        return cls(**booking.to_dict())


class AvailabilityResponseSchema(CamelModel):
    success: bool = True
    date: str
    available_slots: list[str]
    booked_slots: list[str]


class BookingListResponseSchema(CamelModel):
    success: bool = True
    bookings: list[BookingSchema] = Field(default_factory=list)
    stats: dict[str, int] = Field(default_factory=dict)


class BookingCreatedSchema(CamelModel):
    success: bool = True
    message: str
    booking_id: str


class ErrorBodySchema(CamelModel):
    type: str
    message: str
    user_message: str
    details: dict[str, Any] = Field(default_factory=dict)


class MessageResponseSchema(CamelModel):
    success: bool = True
    message: str
