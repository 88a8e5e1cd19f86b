"""Exceptions raised by the RouteXL client."""

from __future__ import annotations


class RouteXLError(Exception):
    """Base exception for RouteXL client errors."""

    def __init__(self, message: str, status_code: int | None = None, error_code: str = "ROUTEXL_ERROR"):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        super().__init__(self.message)


class NotEnoughLocationsError(RouteXLError, ValueError):
    """Raised before any request when the itinerary is too short to optimize."""

    def __init__(self, minimum: int):
        self.minimum = minimum
        super().__init__(
            f"At least {minimum} locations are required to optimize a tour.",
            error_code="NOT_ENOUGH_LOCATIONS",
        )


class RequestError(RouteXLError):
    """The API answered with a non-200 status or failed the echo check."""

    def __init__(self, message: str, status_code: int | None = None, error_code: str = "REQUEST_FAILED"):
        super().__init__(message, status_code, error_code)


class ResultParseError(RouteXLError, ValueError):
    """The retained response body could not be decoded as JSON."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message, status_code, "INVALID_RESULT")
