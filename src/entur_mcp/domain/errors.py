"""Errors raised when an upstream Entur API call fails.

Network-level failures (``aiohttp.ClientError``, ``asyncio.TimeoutError``) are
not wrapped and reach the caller unchanged.
"""

from entur_mcp.domain.models.error_details import ErrorDetails


class EnturApiError(Exception):
    """Base class for failures reported by an Entur API."""


class UpstreamHttpError(EnturApiError):
    """Upstream answered with a non-success HTTP status."""

    def __init__(self, service: str, details: ErrorDetails) -> None:
        self.service = service
        self.details = details
        super().__init__(f"{service} error: {details.status_code} {details.reason}".rstrip())

    @property
    def status_code(self) -> int:
        return self.details.status_code

    @property
    def reason(self) -> str:
        return self.details.reason


class UpstreamLogicError(EnturApiError):
    """Upstream answered successfully but reported GraphQL errors."""

    def __init__(self, service: str, messages: list[str] | tuple[str, ...]) -> None:
        self.service = service
        self.messages = tuple(messages)
        super().__init__(f"{service} GraphQL: {'; '.join(self.messages)}")
