"""``ClientResponseError`` specialization whose body is always text."""

from collections.abc import Callable
from typing import Any

import httpx

from client_errors.features.client.response_error import ClientResponseError
from client_errors.features.redaction.configuration import (
    DEFAULT_REDACTION,
    RedactionConfiguration,
)


ClientResponseErrorTextBody = ClientResponseError[str]


def decode_text(response: httpx.Response) -> str:
    """Read the body and decode it with the response charset."""
    response.read()
    return response.text


def show_text(value: str) -> str | None:
    return value


def from_optional_request_response(
    request: httpx.Request | None,
    response: httpx.Response,
    config: RedactionConfiguration = DEFAULT_REDACTION,
    decoder: Callable[[httpx.Response], str] = decode_text,
) -> ClientResponseErrorTextBody:
    """Build an error whose body is decoded as text.

    Args:
        request: The request, if available.
        response: The unexpected response.
        config: Redaction configuration.
        decoder: Text decoder (default: ``decode_text``).

    Returns:
        The constructed error.
    """
    return ClientResponseError.from_optional_request_response(
        request, response, config=config, decoder=decoder, render_body=show_text
    )


def from_request_response(
    request: httpx.Request,
    response: httpx.Response,
    config: RedactionConfiguration = DEFAULT_REDACTION,
) -> ClientResponseErrorTextBody:
    return from_optional_request_response(request, response, config)


def from_response(
    response: httpx.Response,
    config: RedactionConfiguration = DEFAULT_REDACTION,
) -> ClientResponseErrorTextBody:
    return from_optional_request_response(None, response, config)


async def afrom_optional_request_response(
    request: httpx.Request | None,
    response: httpx.Response,
    config: RedactionConfiguration = DEFAULT_REDACTION,
) -> ClientResponseErrorTextBody:
    """Async variant reading a streamed body before decoding it as text."""
    return await ClientResponseError.afrom_optional_request_response(
        request,
        response,
        config=config,
        decoder=lambda loaded: loaded.text,
        render_body=show_text,
    )


async def afrom_request_response(
    request: httpx.Request,
    response: httpx.Response,
    config: RedactionConfiguration = DEFAULT_REDACTION,
) -> ClientResponseErrorTextBody:
    return await afrom_optional_request_response(request, response, config)


async def afrom_response(
    response: httpx.Response,
    config: RedactionConfiguration = DEFAULT_REDACTION,
) -> ClientResponseErrorTextBody:
    return await afrom_optional_request_response(None, response, config)


def to_text_body(error: ClientResponseError[Any]) -> ClientResponseErrorTextBody:
    """Narrow an existing error to a text body without any I/O.

    ``bytes`` bodies are decoded as UTF-8 with replacement; other values are
    rendered with ``str``.
    """

    def as_text(value: Any) -> str:
        if isinstance(value, bytes):
            return value.decode("utf-8", errors="replace")
        return str(value)

    return error.map(as_text, show_text)
