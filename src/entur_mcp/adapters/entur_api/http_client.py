"""HTTP client for Entur API requests.

Each call is exactly one round trip. Non-success statuses raise
UpstreamHttpError; network failures from aiohttp propagate unchanged.
"""

import logging
from typing import TYPE_CHECKING, Any

from entur_mcp.adapters.api_request_logger import log_api_request
from entur_mcp.adapters.entur_api.constants import (
    DEFAULT_ET_CLIENT_NAME,
    ET_CLIENT_NAME_HEADER,
)
from entur_mcp.domain.errors import UpstreamHttpError
from entur_mcp.domain.models.error_details import ErrorDetails

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class EnturHttpClient:
    """HTTP client for the Entur geocoder and journey planner endpoints."""

    def __init__(
        self,
        session: "ClientSession | None" = None,
        client_name: str = DEFAULT_ET_CLIENT_NAME,
    ) -> None:
        """Initialize with an aiohttp session and the ET-Client-Name value."""
        self._session = session
        self._client_name = client_name

    def _headers(self, extra: dict[str, str] | None = None) -> dict[str, str]:
        headers = {ET_CLIENT_NAME_HEADER: self._client_name}
        if extra:
            headers.update(extra)
        return headers

    def _require_session(self) -> "ClientSession":
        if self._session is None:
            raise RuntimeError("Entur API requires an aiohttp session")
        return self._session

    @staticmethod
    async def _raise_for_status(response: "ClientResponse", url: str, service: str) -> None:
        """Raise UpstreamHttpError for any non-2xx response."""
        if 200 <= response.status < 300:
            return

        error_text = await response.text()
        error_body = error_text[:200] if error_text else "(empty response body)"
        logger.warning(f"{service} returned status {response.status} for {url}: {error_body}")
        raise UpstreamHttpError(
            service,
            ErrorDetails(status_code=response.status, reason=response.reason or ""),
        )

    async def get_json(self, url: str, params: dict[str, str], service: str) -> Any:
        """Send a GET request and return the decoded JSON body.

        Args:
            url: Endpoint URL.
            params: Query parameters.
            service: Service label used in error messages.

        Returns:
            Decoded JSON body.

        Raises:
            UpstreamHttpError: If upstream answers with a non-success status.
        """
        session = self._require_session()
        headers = self._headers()
        log_api_request(service, "GET", url, params=params, headers=headers)

        async with session.get(url, params=params, headers=headers) as response:
            await self._raise_for_status(response, url, service)
            return await response.json(content_type=None)

    async def post_json(self, url: str, payload: dict[str, Any], service: str) -> Any:
        """Send a JSON POST request and return the decoded JSON body.

        Args:
            url: Endpoint URL.
            payload: JSON-serializable request body.
            service: Service label used in error messages.

        Returns:
            Decoded JSON body.

        Raises:
            UpstreamHttpError: If upstream answers with a non-success status.
        """
        session = self._require_session()
        headers = self._headers({"Content-Type": "application/json"})
        log_api_request(service, "POST", url, headers=headers, payload=payload)

        async with session.post(url, json=payload, headers=headers) as response:
            await self._raise_for_status(response, url, service)
            return await response.json(content_type=None)
