"""Raise ``ClientResponseError`` for responses outside the 2xx range.

These helpers play the role of an ``expect``-style client call: a successful
response is returned unchanged, anything else becomes a redacted error.
They can also be installed as httpx response event hooks:

    client = httpx.Client(
        event_hooks={"response": [raise_for_client_error(decoder=decode_text)]}
    )
"""

from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from client_errors.constants import HTTP_STATUS_OK_MAX, HTTP_STATUS_OK_MIN
from client_errors.features.client.response_error import ClientResponseError
from client_errors.features.redaction.configuration import (
    DEFAULT_REDACTION,
    RedactionConfiguration,
)


def is_success(response: httpx.Response) -> bool:
    """Check if the response status is 2xx."""
    return HTTP_STATUS_OK_MIN <= response.status_code < HTTP_STATUS_OK_MAX


def _request_of(response: httpx.Response) -> httpx.Request | None:
    # ``Response.request`` raises when no request is attached
    try:
        return response.request
    except RuntimeError:
        return None


def expect_success(
    response: httpx.Response,
    *,
    config: RedactionConfiguration = DEFAULT_REDACTION,
    decoder: Callable[[httpx.Response], Any] | None = None,
    render_body: Callable[[Any], str | None] | None = None,
) -> httpx.Response:
    """Return a 2xx response, otherwise raise a ``ClientResponseError``.

    Args:
        response: Response to check.
        config: Redaction configuration.
        decoder: Optional body decoder, invoked only for unexpected responses.
        render_body: Renderer for a decoded body.

    Returns:
        The response, unchanged.

    Raises:
        ClientResponseError: If the status is not 2xx.
    """
    if is_success(response):
        return response
    kwargs: dict[str, Any] = {"config": config, "decoder": decoder}
    if render_body is not None:
        kwargs["render_body"] = render_body
    raise ClientResponseError.from_optional_request_response(
        _request_of(response), response, **kwargs
    )


async def aexpect_success(
    response: httpx.Response,
    *,
    config: RedactionConfiguration = DEFAULT_REDACTION,
    decoder: Callable[[httpx.Response], Any] | None = None,
    render_body: Callable[[Any], str | None] | None = None,
) -> httpx.Response:
    """Async variant of ``expect_success`` for streamed async responses."""
    if is_success(response):
        return response
    kwargs: dict[str, Any] = {"config": config, "decoder": decoder}
    if render_body is not None:
        kwargs["render_body"] = render_body
    raise await ClientResponseError.afrom_optional_request_response(
        _request_of(response), response, **kwargs
    )


def raise_for_client_error(
    config: RedactionConfiguration = DEFAULT_REDACTION,
    decoder: Callable[[httpx.Response], Any] | None = None,
    render_body: Callable[[Any], str | None] | None = None,
) -> Callable[[httpx.Response], None]:
    """Build a sync httpx response hook calling ``expect_success``."""

    def hook(response: httpx.Response) -> None:
        expect_success(response, config=config, decoder=decoder, render_body=render_body)

    return hook


def araise_for_client_error(
    config: RedactionConfiguration = DEFAULT_REDACTION,
    decoder: Callable[[httpx.Response], Any] | None = None,
    render_body: Callable[[Any], str | None] | None = None,
) -> Callable[[httpx.Response], Awaitable[None]]:
    """Build an async httpx response hook calling ``aexpect_success``."""

    async def hook(response: httpx.Response) -> None:
        await aexpect_success(
            response, config=config, decoder=decoder, render_body=render_body
        )

    return hook
