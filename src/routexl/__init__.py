"""Client for the RouteXL route optimization API."""

from .errors import NotEnoughLocationsError, RequestError, ResultParseError, RouteXLError
from .schemas.locations import Location, Restrictions
from .services.client import RouteXLClient

__all__ = [
    "RouteXLClient",
    "Location",
    "Restrictions",
    "RouteXLError",
    "NotEnoughLocationsError",
    "RequestError",
    "ResultParseError",
]
