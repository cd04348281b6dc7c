"""Outbound Entur request logging, enabled with ENTUR_LOG_REQUESTS=true."""

import json
import logging
import os
from typing import Any
from urllib.parse import urlencode

logger = logging.getLogger(__name__)

REDACTED = "***REDACTED***"
SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "x-api-key"})


def should_log_requests() -> bool:
    """Check if request logging is enabled via ENTUR_LOG_REQUESTS environment variable."""
    return os.getenv("ENTUR_LOG_REQUESTS", "").lower() == "true"


def describe_url(url: str, params: dict[str, Any] | None) -> str:
    """Return the URL with its query parameters in sorted order."""
    if not params:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{urlencode(sorted(params.items()))}"


def redact_headers(headers: dict[str, str]) -> dict[str, str]:
    """Replace values of credential-bearing headers."""
    return {k: REDACTED if k.lower() in SENSITIVE_HEADERS else v for k, v in headers.items()}


def _graphql_operation(query: str) -> str:
    """First non-blank line of a GraphQL document, e.g. 'query Trip($from: String!, ...) {'."""
    for line in query.splitlines():
        if line.strip():
            return line.strip()
    return ""


def describe_payload(payload: Any) -> list[str]:
    """Describe a request body; GraphQL bodies are reduced to operation and variables."""
    if isinstance(payload, dict) and isinstance(payload.get("query"), str):
        lines = [f"Operation: {_graphql_operation(payload['query'])}"]
        variables = payload.get("variables")
        if variables:
            lines.append(f"Variables: {json.dumps(variables, sort_keys=True, ensure_ascii=False)}")
        return lines
    try:
        return [f"Payload: {json.dumps(payload, indent=2, ensure_ascii=False)}"]
    except (TypeError, ValueError):
        return [f"Payload: {payload}"]


def log_api_request(
    service: str,
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
    payload: Any = None,
) -> None:
    """Log one outbound request if ENTUR_LOG_REQUESTS is enabled.

    Args:
        service: Service label, e.g. "Entur Geocoder".
        method: HTTP method.
        url: Request URL.
        params: Query parameters.
        headers: Request headers; credential headers are redacted.
        payload: JSON body, e.g. the GraphQL query and variables.
    """
    if not should_log_requests():
        return

    parts = [f"{method} {describe_url(url, params)}"]
    if headers:
        parts.append(f"Headers: {json.dumps(redact_headers(headers), sort_keys=True)}")
    if payload is not None:
        parts.extend(describe_payload(payload))

    logger.info(f"{service} request:\n" + "\n".join(parts))
