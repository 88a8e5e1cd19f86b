"""HTTP client for the RouteXL tour optimization API."""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable, Mapping

import httpx

from ..config import settings
from ..errors import NotEnoughLocationsError, RequestError, ResultParseError
from ..schemas.locations import Location, serialize_itinerary

MIN_TOUR_LOCATIONS = 2
NO_STATUS_MESSAGE = "--No HTTP Status--"

# Messages as documented by RouteXL for each response status.
STATUS_MESSAGES: dict[int, str] = {
    200: "OK",
    204: "No distance matrix, tour or route was found",
    401: "Authentication problem",
    403: "Too many locations for your subscription",
    409: "No input or no locations found",
    429: "Another route in progress",
}

logger = logging.getLogger(__name__)


def status_message(status_code: int | None) -> str:
    """Resolve a response status to its RouteXL message, ``HTTP <code>`` if unlisted."""
    if status_code is None:
        return NO_STATUS_MESSAGE
    return STATUS_MESSAGES.get(status_code, f"HTTP {status_code}")


class RouteXLClient:
    """Collects an itinerary and submits it to RouteXL for optimization.

    Every call to :meth:`check_status` or :meth:`tour` replaces the recorded
    status and response body. Instances are not safe to share between threads.
    """

    def __init__(
        self,
        username: str,
        password: str,
        *,
        api_endpoint: str | None = None,
        timeout: float | None = None,
        connect_timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.username = username
        self.password = password
        self.api_endpoint = api_endpoint or settings.api_endpoint
        self.timeout = timeout if timeout is not None else settings.timeout
        self.connect_timeout = min(
            connect_timeout if connect_timeout is not None else settings.connect_timeout,
            self.timeout,
        )
        self.status_echo = settings.status_echo
        self._transport = transport
        self._itinerary: list[Location] = []
        self._http_code: int | None = None
        self._raw_result: bytes | None = None

    @classmethod
    def from_settings(cls, **kwargs: Any) -> "RouteXLClient":
        """Build a client with the credentials configured through ``ROUTEXL_*`` variables."""
        if not settings.username or not settings.password:
            raise ValueError(
                "RouteXL credentials are not configured. Set ROUTEXL_USERNAME and ROUTEXL_PASSWORD."
            )
        return cls(settings.username, settings.password, **kwargs)

    @property
    def itinerary(self) -> tuple[Location, ...]:
        return tuple(self._itinerary)

    @property
    def http_code(self) -> int | None:
        return self._http_code

    def add_locations(self, locations: Iterable[Location | Mapping[str, Any]]) -> None:
        """Append locations to the itinerary in the given order.

        Mappings are converted to :class:`Location`; if any entry fails to
        convert, the itinerary is left unchanged.
        """
        converted = [
            location if isinstance(location, Location) else Location.model_validate(location)
            for location in locations
        ]
        self._itinerary.extend(converted)

    def check_status(self) -> bool:
        """Call the status endpoint and verify that RouteXL echoes the account tag."""
        response = self._request("GET", f"status/{self.status_echo}")
        if response.status_code != 200:
            raise self._request_error(response.status_code)

        try:
            data = self.get_result()
        except ResultParseError:
            data = None
        echo = data.get("echo") if isinstance(data, dict) else None
        if echo != self.status_echo:
            logger.warning(f"RouteXL status echo mismatch: expected {self.status_echo!r}, got {echo!r}")
            raise RequestError(
                f"Echo check failed: expected {self.status_echo!r}, got {echo!r}",
                status_code=response.status_code,
                error_code="ECHO_MISMATCH",
            )
        return True

    def tour(self) -> bool:
        """Submit the itinerary for optimization; the response is kept for :meth:`get_result`."""
        if len(self._itinerary) < MIN_TOUR_LOCATIONS:
            raise NotEnoughLocationsError(MIN_TOUR_LOCATIONS)

        logger.debug(f"Submitting RouteXL tour with {len(self._itinerary)} locations")
        response = self._request(
            "POST",
            "tour",
            data={"locations": serialize_itinerary(self._itinerary)},
        )
        if response.status_code != 200:
            raise self._request_error(response.status_code)
        return True

    def get_result(self) -> Any:
        """Decode the last response body. Returns None if there is no body yet."""
        if not self._raw_result:
            return None
        try:
            return json.loads(self._raw_result)
        except ValueError as exc:
            raise ResultParseError(
                f"RouteXL response is not valid JSON: {exc}", status_code=self._http_code
            ) from exc

    def get_http_message(self) -> str:
        return status_message(self._http_code)

    def _get_client(self) -> httpx.Client:
        return httpx.Client(
            base_url=self.api_endpoint,
            auth=httpx.BasicAuth(self.username, self.password),
            timeout=httpx.Timeout(self.timeout, connect=self.connect_timeout),
            transport=self._transport,
        )

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        logger.debug(f"RouteXL {method} {path}")
        with self._get_client() as client:
            response = client.request(method, path, **kwargs)
        self._http_code = response.status_code
        self._raw_result = response.content or None
        return response

    def _request_error(self, status_code: int) -> RequestError:
        message = status_message(status_code)
        logger.warning(f"RouteXL request failed with HTTP {status_code}: {message}")
        return RequestError(message, status_code=status_code)
