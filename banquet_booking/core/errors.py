"""
Booking errors.

Raised by the service layer and rendered into JSON responses by the
handler registered in main.py.
"""
from typing import Optional


class BookingError(Exception):
    """Base class for every error the booking service reports."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"message": self.message}


class InvalidInput(BookingError):
    """Malformed dates, reversed range, unknown thali or payment status."""

    status_code = 400


class Conflict(BookingError):
    """The requested slot is already booked."""

    status_code = 400


class NotFound(BookingError):
    """No booking has the requested id."""

    status_code = 404


class StoreFailure(BookingError):
    """The underlying database operation failed."""

    status_code = 500

    def __init__(self, message: str, error: Optional[str] = None):
        super().__init__(message)
        self.error = error

    def to_dict(self) -> dict:
        body = {"message": self.message}
        if self.error:
            body["error"] = self.error
        return body
