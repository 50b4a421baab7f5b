class SlotConflictError(RuntimeError):
    """Raised when a booking is requested for a (date, time) slot that is already taken."""

    def __init__(self, date: str, time: str) -> None:
        super().__init__(f"Slot {date} {time} is already booked")
        self.date = date
        self.time = time


class BookingNotFoundError(LookupError):
    """Raised when no booking exists with the given identifier."""

    def __init__(self, booking_id: str) -> None:
        super().__init__(f"Booking {booking_id} not found")
        self.booking_id = booking_id


class EmailDeliveryError(RuntimeError):
    """Raised when an e-mail provider rejects a message or cannot be reached."""
    pass


class AuthenticationError(RuntimeError):
    """Raised when admin credentials or a bearer token cannot be verified."""
    pass


class BookingValidationError(ValueError):
    """Raised when a booking payload fails validation; carries the field-keyed messages."""

    def __init__(self, errors: dict[str, str], message: str = "Validation failed") -> None:
        super().__init__(message)
        self.errors = errors
