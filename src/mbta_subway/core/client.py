"""MBTA V3 API client."""

import logging
from collections.abc import Callable
from typing import Any

import requests
from pydantic import ValidationError as PydanticValidationError
from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ..config import DEFAULT_BASE_URL, Settings
from .exceptions import RemoteError
from .models import Route, Stop

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Internal Error."


class MBTAClient:
    """Client for the routes and stops resources of the MBTA V3 API."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: int | None = None,
        max_attempts: int | None = None,
    ):
        """Initialize the client.

        Explicit keyword arguments take precedence over ``settings``.

        Args:
            settings: Loaded settings, defaults to ``Settings()``
            api_key: MBTA API key sent as ``x-api-key``
            base_url: API root URL
            timeout: Request timeout in seconds
            max_attempts: Attempts per request on connection errors
        """
        settings = settings or Settings()
        self.api_key = api_key if api_key is not None else settings.api_key
        self.base_url = (base_url or settings.base_url or DEFAULT_BASE_URL).rstrip("/")
        self.timeout = timeout or settings.timeout
        self.max_attempts = max_attempts or settings.max_attempts

        self.session = requests.Session()
        self.session.headers.update(
            {
                "Accept": "application/vnd.api+json",
                "User-Agent": "mbta-subway-info/0.1.0",
            }
        )
        if self.api_key:
            self.session.headers["x-api-key"] = self.api_key

    def fetch_routes(self, filters: dict[str, Any] | None = None) -> list[Route]:
        """Fetch routes matching the API-side filters.

        Args:
            filters: Mapping turned into ``filter[<key>]=<value>`` parameters

        Returns:
            List of Route objects

        Raises:
            RemoteError: If the request fails or the API reports an error
        """
        resources = self._get_resources("routes", filters)
        return self._parse_resources("routes", resources, Route.from_resource)

    def fetch_stops(self, filters: dict[str, Any] | None = None) -> list[Stop]:
        """Fetch stops matching the API-side filters.

        Raises:
            RemoteError: If the request fails or the API reports an error
        """
        resources = self._get_resources("stops", filters)
        return self._parse_resources("stops", resources, Stop.from_resource)

    def get_routes_matching(self, predicate: Callable[[Route], bool]) -> list[Route]:
        """Get all routes for which ``predicate`` returns True."""
        return [route for route in self.fetch_routes() if predicate(route)]

    def get_subway_routes(self) -> list[Route]:
        """Get light rail and heavy rail routes.

        Filtering happens client-side so that other route predicates can be
        added without relying on the API's filter support.
        """
        return self.get_routes_matching(lambda route: route.is_subway)

    def get_route_stops(self, route: Route) -> list[Stop]:
        """Get the ordered stops served by a route."""
        return self.fetch_stops({"route": route.id})

    def _get_resources(
        self, path: str, filters: dict[str, Any] | None
    ) -> list[dict[str, Any]]:
        """Fetch a collection and unwrap its JSON:API envelope."""
        params = self._build_params(filters)
        payload = self._request(path, params)

        errors = payload.get("errors") or []
        if errors:
            first = errors[0]
            raise RemoteError(
                str(first.get("code") or first.get("detail") or DEFAULT_ERROR_MESSAGE),
                code=_parse_status(first.get("status")),
            )

        data = payload.get("data")
        if not isinstance(data, list):
            raise RemoteError(f"Unexpected response from /{path}: missing data")

        logger.debug(f"Fetched {len(data)} resources from /{path}")
        return data

    @staticmethod
    def _parse_resources(
        path: str,
        resources: list[dict[str, Any]],
        factory: Callable[[dict[str, Any]], Any],
    ) -> list[Any]:
        """Turn resource objects into models, reporting malformed ones as RemoteError."""
        try:
            return [factory(resource) for resource in resources]
        except (KeyError, TypeError, AttributeError, PydanticValidationError) as e:
            logger.error(f"Malformed resource from /{path}: {e}")
            raise RemoteError(str(e) or DEFAULT_ERROR_MESSAGE) from e

    def _request(self, path: str, params: dict[str, str]) -> dict[str, Any]:
        """Issue a GET request and decode its JSON body.

        Raises:
            RemoteError: On transport failure, undecodable body or HTTP error
        """
        url = f"{self.base_url}/{path}"
        retrying = Retrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=1, min=1, max=10),
            retry=retry_if_exception_type(
                (requests.exceptions.ConnectionError, requests.exceptions.Timeout)
            ),
            reraise=True,
        )

        try:
            response = retrying(
                self.session.get, url, params=params, timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Request to {url} failed: {e}")
            raise RemoteError(str(e) or DEFAULT_ERROR_MESSAGE) from e

        try:
            payload = response.json()
        except ValueError as e:
            if not response.ok:
                raise RemoteError(
                    response.reason or DEFAULT_ERROR_MESSAGE,
                    code=response.status_code,
                ) from e
            raise RemoteError(str(e) or DEFAULT_ERROR_MESSAGE) from e

        if not isinstance(payload, dict):
            raise RemoteError(f"Unexpected response from /{path}")

        if not response.ok and not payload.get("errors"):
            raise RemoteError(
                response.reason or DEFAULT_ERROR_MESSAGE, code=response.status_code
            )

        return payload

    @staticmethod
    def _build_params(filters: dict[str, Any] | None) -> dict[str, str]:
        """Convert filters to JSON:API query parameters."""
        params = {}
        for key, value in (filters or {}).items():
            if isinstance(value, (list, tuple, set)):
                value = ",".join(str(item) for item in value)
            params[f"filter[{key}]"] = str(value)
        return params


def _parse_status(status: Any) -> int:
    """Parse the string status of a JSON:API error object."""
    try:
        return int(status)
    except (TypeError, ValueError):
        return 500
