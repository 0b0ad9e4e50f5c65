"""Structured, redacted error describing an unexpected HTTP response."""

from collections.abc import Callable
from typing import Any, Generic, TypeVar

import httpx

from client_errors.errors import ResponseBodyDecodeError, StructuredError
from client_errors.features.client.body import (
    NO_BODY,
    BodyOutcome,
    Decoded,
    DecodeFailed,
    NoBody,
)
from client_errors.features.redaction.configuration import (
    DEFAULT_REDACTION,
    RedactionConfiguration,
)
from client_errors.features.redaction.views import (
    RedactedRequestHeaders,
    RedactedResponseHeaders,
    RedactedUri,
    render_headers,
)


A = TypeVar("A")
B = TypeVar("B")

Decoder = Callable[[httpx.Response], A]
RenderBody = Callable[[A], str | None]


def _render_nothing(_value: Any) -> str | None:
    return None


def format_status(status_code: int) -> str:
    """Render a status code with its reason phrase, e.g. ``404 Not Found``."""
    reason = httpx.codes.get_reason_phrase(status_code)
    return f"{status_code} {reason}" if reason else str(status_code)


def _decode(response: httpx.Response, decoder: Decoder[A] | None) -> BodyOutcome[A]:
    if decoder is None:
        return NO_BODY
    try:
        return Decoded(decoder(response))
    except Exception as e:  # noqa: BLE001
        return DecodeFailed(e)


class ClientResponseError(StructuredError, Generic[A]):
    """Error raised for an unexpected response from an HTTP call.

    Headers and query parameters are redacted according to a
    ``RedactionConfiguration`` before they reach any message. The originals
    are still reachable through the ``unredacted`` field of each view.

    The body is decoded at most once, when the error is built, and the
    result is kept as a ``BodyOutcome``. A decoding failure is recorded as
    ``DecodeFailed`` rather than raised, so building this error never fails.

    Request fields are either all present or all ``None``; they are absent
    when only the response was available.

    Instances are immutable and hold no reference to the response stream.
    """

    def __init__(
        self,
        status: int,
        response_headers: RedactedResponseHeaders,
        body: BodyOutcome[A] = NO_BODY,
        *,
        request_method: str | None = None,
        request_headers: RedactedRequestHeaders | None = None,
        request_uri: RedactedUri | None = None,
        render_body: RenderBody[A] = _render_nothing,
    ) -> None:
        """Initialize the error from already redacted parts.

        Prefer the ``from_*`` factories, which do the redaction and decoding.

        Args:
            status: HTTP status code of the response.
            response_headers: Redacted response headers.
            body: Outcome of decoding the response body.
            request_method: HTTP method of the request, if known.
            request_headers: Redacted request headers, if known.
            request_uri: Redacted request URI, if known.
            render_body: Converts a decoded body to text, or ``None`` when
                the body should not be shown (binary or sensitive data).
        """
        super().__init__(status)
        self._status = status
        self._response_headers = response_headers
        self._body = body
        self._request_method = request_method
        self._request_headers = request_headers
        self._request_uri = request_uri
        self._render_body = render_body

    @property
    def status(self) -> int:
        return self._status

    @property
    def status_text(self) -> str:
        return format_status(self._status)

    @property
    def request_method(self) -> str | None:
        return self._request_method

    @property
    def request_headers(self) -> RedactedRequestHeaders | None:
        return self._request_headers

    @property
    def request_uri(self) -> RedactedUri | None:
        return self._request_uri

    @property
    def response_headers(self) -> RedactedResponseHeaders:
        return self._response_headers

    @property
    def body(self) -> BodyOutcome[A]:
        """The result of the single decode attempt."""
        return self._body

    @property
    def error_response_had_body(self) -> bool:
        return not isinstance(self._body, NoBody)

    @property
    def response_body(self) -> A | Exception | None:
        """The decoded body, the decoding exception, or ``None`` if absent."""
        if isinstance(self._body, Decoded):
            return self._body.value
        if isinstance(self._body, DecodeFailed):
            return self._body.cause
        return None

    @property
    def response_body_text(self) -> str | None:
        """The body as text, only when it decoded and is renderable."""
        if isinstance(self._body, Decoded):
            return self._render_body(self._body.value)
        return None

    @property
    def request_headers_value(self) -> httpx.Headers | None:
        if self._request_headers is None:
            return None
        return self._request_headers.value

    @property
    def response_headers_value(self) -> httpx.Headers:
        return self._response_headers.value

    @property
    def primary_message(self) -> str:
        if self._request_uri is not None and self._request_uri.value.host:
            return (
                f"Unexpected response from HTTP call to "
                f"{self._request_uri.value.host}: {self.status_text}"
            )
        return f"Unexpected response from HTTP call: {self.status_text}"

    @property
    def secondary_messages(self) -> list[str]:
        messages: list[str] = []
        if self._request_uri is not None:
            messages.append(f"Request URI: {self._request_uri.display}")
        if self._request_method is not None:
            messages.append(f"Request Method: {self._request_method}")
        messages.append(f"Status: {self.status_text}")
        messages.append(f"Response Headers: {render_headers(self._response_headers.value)}")
        if self._request_headers is not None:
            messages.append(f"Request Headers: {render_headers(self._request_headers.value)}")
        body_text = self.response_body_text
        if body_text is not None:
            messages.append(f"Response Body: {body_text}")
        return messages

    @property
    def causes(self) -> list[BaseException]:
        if isinstance(self._body, DecodeFailed):
            return [ResponseBodyDecodeError(self._body.cause)]
        return []

    def map(
        self,
        transform: Callable[[A], B],
        render_body: RenderBody[B] = _render_nothing,
    ) -> "ClientResponseError[B]":
        """Return a copy with the decoded body transformed.

        No I/O happens here. An exception raised by ``transform`` is recorded
        as ``DecodeFailed`` on the new error.

        Args:
            transform: Function applied to a decoded body.
            render_body: Renderer for the transformed body.

        Returns:
            A new error with the same request and response metadata.
        """
        body: BodyOutcome[B]
        if isinstance(self._body, Decoded):
            try:
                body = Decoded(transform(self._body.value))
            except Exception as e:  # noqa: BLE001
                body = DecodeFailed(e)
        else:
            body = self._body
        return self._with_body(body, render_body)

    def without_body(self) -> "ClientResponseError[Any]":
        """Return a copy whose body outcome is ``NoBody``."""
        return self._with_body(NO_BODY, _render_nothing)

    def _with_body(
        self, body: BodyOutcome[B], render_body: RenderBody[B]
    ) -> "ClientResponseError[B]":
        return ClientResponseError(
            self._status,
            self._response_headers,
            body,
            request_method=self._request_method,
            request_headers=self._request_headers,
            request_uri=self._request_uri,
            render_body=render_body,
        )

    def __repr__(self) -> str:
        return f"ClientResponseError({self})"

    def __reduce__(self) -> tuple[Any, ...]:
        # ``args`` only holds the status; rebuild from the stored fields
        return (
            type(self),
            (self._status, self._response_headers, self._body),
            self.__dict__.copy(),
        )

    @classmethod
    def from_body_outcome(
        cls,
        request: httpx.Request | None,
        response: httpx.Response,
        body: BodyOutcome[A],
        *,
        config: RedactionConfiguration = DEFAULT_REDACTION,
        render_body: RenderBody[A] = _render_nothing,
    ) -> "ClientResponseError[A]":
        """Redact the request and response and attach an existing body outcome.

        Args:
            request: The request, if available.
            response: The response which triggered the error.
            body: Result of an already attempted decode.
            config: Redaction configuration.
            render_body: Renderer for a decoded body.

        Returns:
            The constructed error.
        """
        return cls(
            response.status_code,
            RedactedResponseHeaders.from_response_and_config(response, config),
            body,
            request_method=None if request is None else request.method,
            request_headers=(
                None
                if request is None
                else RedactedRequestHeaders.from_request_and_config(request, config)
            ),
            request_uri=(
                None
                if request is None
                else RedactedUri.from_request_and_config(request, config)
            ),
            render_body=render_body,
        )

    @classmethod
    def from_optional_request_response(
        cls,
        request: httpx.Request | None,
        response: httpx.Response,
        *,
        config: RedactionConfiguration = DEFAULT_REDACTION,
        decoder: Decoder[A] | None = None,
        render_body: RenderBody[A] = _render_nothing,
    ) -> "ClientResponseError[A]":
        """Build an error, decoding the body once with ``decoder``.

        The decoder receives the response and may read it. Without a decoder
        the body is never touched and the outcome is ``NoBody``.

        Args:
            request: The request, if available.
            response: The response which triggered the error.
            config: Redaction configuration.
            decoder: Body decoder; any exception it raises is recorded.
            render_body: Renderer for a decoded body.

        Returns:
            The constructed error; this never raises for decode problems.
        """
        return cls.from_body_outcome(
            request,
            response,
            _decode(response, decoder),
            config=config,
            render_body=render_body,
        )

    @classmethod
    def from_request_response(
        cls,
        request: httpx.Request,
        response: httpx.Response,
        *,
        config: RedactionConfiguration = DEFAULT_REDACTION,
        decoder: Decoder[A] | None = None,
        render_body: RenderBody[A] = _render_nothing,
    ) -> "ClientResponseError[A]":
        """As ``from_optional_request_response`` with a request present."""
        return cls.from_optional_request_response(
            request, response, config=config, decoder=decoder, render_body=render_body
        )

    @classmethod
    def from_response(
        cls,
        response: httpx.Response,
        *,
        config: RedactionConfiguration = DEFAULT_REDACTION,
        decoder: Decoder[A] | None = None,
        render_body: RenderBody[A] = _render_nothing,
    ) -> "ClientResponseError[A]":
        """As ``from_optional_request_response`` without a request."""
        return cls.from_optional_request_response(
            None, response, config=config, decoder=decoder, render_body=render_body
        )

    @classmethod
    async def afrom_optional_request_response(
        cls,
        request: httpx.Request | None,
        response: httpx.Response,
        *,
        config: RedactionConfiguration = DEFAULT_REDACTION,
        decoder: Decoder[A] | None = None,
        render_body: RenderBody[A] = _render_nothing,
    ) -> "ClientResponseError[A]":
        """Async variant which reads a streamed body before decoding.

        A failed read is recorded as ``DecodeFailed``. Cancellation is not an
        ``Exception`` and propagates unchanged.
        """
        body: BodyOutcome[A]
        if decoder is None:
            body = NO_BODY
        else:
            try:
                await response.aread()
            except Exception as e:  # noqa: BLE001
                body = DecodeFailed(e)
            else:
                body = _decode(response, decoder)
        return cls.from_body_outcome(
            request, response, body, config=config, render_body=render_body
        )

    @classmethod
    async def afrom_request_response(
        cls,
        request: httpx.Request,
        response: httpx.Response,
        *,
        config: RedactionConfiguration = DEFAULT_REDACTION,
        decoder: Decoder[A] | None = None,
        render_body: RenderBody[A] = _render_nothing,
    ) -> "ClientResponseError[A]":
        return await cls.afrom_optional_request_response(
            request, response, config=config, decoder=decoder, render_body=render_body
        )

    @classmethod
    async def afrom_response(
        cls,
        response: httpx.Response,
        *,
        config: RedactionConfiguration = DEFAULT_REDACTION,
        decoder: Decoder[A] | None = None,
        render_body: RenderBody[A] = _render_nothing,
    ) -> "ClientResponseError[A]":
        return await cls.afrom_optional_request_response(
            None, response, config=config, decoder=decoder, render_body=render_body
        )
