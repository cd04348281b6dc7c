"""Decoding of GraphQL response bodies into a tagged result.

A non-empty ``errors`` list wins over any ``data`` in the same body.
"""

from dataclasses import dataclass, field
from typing import Any

UNKNOWN_ERROR_MESSAGE = "unknown error"


@dataclass(frozen=True)
class GraphQLSuccess:
    """Response carried data and no errors."""

    data: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class GraphQLFailure:
    """Response reported one or more errors."""

    messages: tuple[str, ...]


GraphQLResult = GraphQLSuccess | GraphQLFailure


def _error_message(error: Any) -> str:
    if isinstance(error, dict) and error.get("message") is not None:
        return str(error["message"])
    return UNKNOWN_ERROR_MESSAGE


def decode_graphql_response(body: Any) -> GraphQLResult:
    """Decode a GraphQL response body in one pass.

    Args:
        body: Decoded JSON body.

    Returns:
        GraphQLFailure with messages in reported order when ``errors`` is a
        non-empty list, otherwise GraphQLSuccess with ``data`` ({} if absent).
    """
    if not isinstance(body, dict):
        return GraphQLSuccess()

    errors = body.get("errors")
    if isinstance(errors, list) and errors:
        return GraphQLFailure(messages=tuple(_error_message(e) for e in errors))

    data = body.get("data")
    return GraphQLSuccess(data=data if isinstance(data, dict) else {})
