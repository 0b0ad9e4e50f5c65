"""``ClientResponseError`` specialization which never reads the body."""

from typing import Any

import httpx

from client_errors.features.client.response_error import ClientResponseError
from client_errors.features.redaction.configuration import (
    DEFAULT_REDACTION,
    RedactionConfiguration,
)


def from_optional_request_response(
    request: httpx.Request | None,
    response: httpx.Response,
    config: RedactionConfiguration = DEFAULT_REDACTION,
) -> ClientResponseError[Any]:
    """Build an error from metadata only; the body stays unread."""
    return ClientResponseError.from_optional_request_response(
        request, response, config=config
    )


def from_request_response(
    request: httpx.Request,
    response: httpx.Response,
    config: RedactionConfiguration = DEFAULT_REDACTION,
) -> ClientResponseError[Any]:
    return from_optional_request_response(request, response, config)


def from_response(
    response: httpx.Response,
    config: RedactionConfiguration = DEFAULT_REDACTION,
) -> ClientResponseError[Any]:
    return from_optional_request_response(None, response, config)


def strip_body(error: ClientResponseError[Any]) -> ClientResponseError[Any]:
    """Drop the body outcome of an existing error."""
    return error.without_body()
