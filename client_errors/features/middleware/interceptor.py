"""Single-read interception of structured error responses.

For each response the interceptor first looks at the ``Content-Type`` header
only. Responses of any other media type are forwarded without touching the
body. A matching body is read into memory exactly once by the transport,
then:

- if it decodes, a ``ClientResponseError`` is raised in place of the response;
- if it does not, a fresh response over the buffered bytes is returned, so
  downstream readers see the same content the network produced.

The original stream is never handed downstream after it has been read.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import httpx

from client_errors.constants import PROBLEM_JSON_MEDIA_TYPE
from client_errors.features.client.body import Decoded
from client_errors.features.client.response_error import ClientResponseError
from client_errors.features.middleware.metrics import InterceptorMetrics
from client_errors.features.observability.logging import get_logger
from client_errors.features.problem.models import decode_problem, render_problem
from client_errors.features.redaction.configuration import (
    DEFAULT_REDACTION,
    RedactionConfiguration,
)


if TYPE_CHECKING:
    from client_errors.features.middleware.transport import (
        AsyncProblemJsonTransport,
        ProblemJsonTransport,
    )
    from client_errors.settings.app import ClientErrorSettings


logger = get_logger(__name__)


def media_type_of(headers: httpx.Headers) -> str | None:
    """Extract the lower-cased media type from a ``Content-Type`` header.

    Args:
        headers: Response headers.

    Returns:
        Media type without parameters, or None if the header is missing.
    """
    content_type = headers.get("content-type")
    if content_type is None:
        return None
    return content_type.split(";", 1)[0].strip().lower()


def replay_response(
    request: httpx.Request, response: httpx.Response, body: bytes
) -> httpx.Response:
    """Build an unread response equivalent to ``response`` over ``body``.

    Status, headers, and extensions are copied as-is; no ``Content-Length``
    or other header is added.
    """
    return httpx.Response(
        status_code=response.status_code,
        headers=response.headers,
        stream=httpx.ByteStream(body),
        request=request,
        extensions=response.extensions,
    )


class ProblemResponseInterceptor:
    """Decide per response whether to read the body and raise an error.

    Transports own the body stream and call ``matches``, then either
    ``passthrough`` or, after buffering the raw body once, ``resolve``.
    """

    def __init__(
        self,
        media_type: str = PROBLEM_JSON_MEDIA_TYPE,
        config: RedactionConfiguration = DEFAULT_REDACTION,
        decoder: Callable[[httpx.Response], Any] = decode_problem,
        render_body: Callable[[Any], str | None] = render_problem,
    ) -> None:
        """Initialize the interceptor.

        Args:
            media_type: Media type signalling a structured error body.
            config: Redaction configuration for raised errors.
            decoder: Decodes a buffered response into the payload type.
            render_body: Renders a decoded payload for error messages.
        """
        self._media_type = media_type.strip().lower()
        self._config = config
        self._decoder = decoder
        self._render_body = render_body
        self._log = logger.bind(
            component="problem_interceptor",
            media_type=self._media_type,
        )

    @classmethod
    def for_content_type(
        cls,
        media_type: str,
        config: RedactionConfiguration = DEFAULT_REDACTION,
        decoder: Callable[[httpx.Response], Any] = decode_problem,
        render_body: Callable[[Any], str | None] = render_problem,
    ) -> "ProblemResponseInterceptor":
        """Create an interceptor for ``media_type``."""
        return cls(
            media_type=media_type,
            config=config,
            decoder=decoder,
            render_body=render_body,
        )

    @classmethod
    def from_settings(
        cls, settings: "ClientErrorSettings"
    ) -> "ProblemResponseInterceptor":
        """Create a problem+json interceptor from application settings."""
        return cls(
            media_type=settings.problem_media_type,
            config=RedactionConfiguration.from_settings(settings),
        )

    @property
    def media_type(self) -> str:
        return self._media_type

    @property
    def config(self) -> RedactionConfiguration:
        return self._config

    def matches(self, response: httpx.Response) -> bool:
        """Check the response media type without touching the body."""
        return media_type_of(response.headers) == self._media_type

    def passthrough(self, response: httpx.Response) -> httpx.Response:
        """Forward a non-matching response unread."""
        InterceptorMetrics.get_instance().record_passthrough()
        self._log.debug(
            "problem_response_passthrough",
            status_code=response.status_code,
            content_type=media_type_of(response.headers),
        )
        return response

    def resolve(
        self,
        request: httpx.Request,
        response: httpx.Response,
        body: bytes,
    ) -> httpx.Response:
        """Decode a buffered body, raising on success.

        Args:
            request: The request that produced the response.
            response: The original response; its stream is already consumed.
            body: The raw (still content-encoded) body bytes.

        Returns:
            A fresh response over ``body`` when decoding fails.

        Raises:
            ClientResponseError: When the body decodes.
        """
        metrics = InterceptorMetrics.get_instance()
        metrics.record_buffered(len(body))
        self._log.debug(
            "problem_response_buffered",
            status_code=response.status_code,
            bytes=len(body),
        )

        decoded_from = replay_response(request, response, body)
        try:
            payload = self._decoder(decoded_from)
        except Exception as e:  # noqa: BLE001
            metrics.record_decode_failure()
            self._log.warning(
                "problem_decode_failed",
                status_code=response.status_code,
                error_type=type(e).__name__,
            )
            return replay_response(request, response, body)

        error = ClientResponseError.from_body_outcome(
            request,
            decoded_from,
            Decoded(payload),
            config=self._config,
            render_body=self._render_body,
        )
        metrics.record_problem_raised()
        self._log.info(
            "problem_response_raised",
            status_code=error.status,
            method=error.request_method,
            url=None if error.request_uri is None else str(error.request_uri.display),
        )
        raise error

    def wrap(
        self,
        transport: httpx.BaseTransport | httpx.AsyncBaseTransport,
        asynchronous: bool | None = None,
    ) -> "ProblemJsonTransport | AsyncProblemJsonTransport":
        """Wrap an httpx transport with this interceptor.

        Args:
            transport: Transport to delegate to.
            asynchronous: Force the async (True) or sync (False) wrapper.
                Needed for transports implementing both interfaces, such as
                ``httpx.MockTransport``; inferred otherwise.

        Returns:
            A wrapping transport.
        """
        from client_errors.features.middleware.transport import (
            AsyncProblemJsonTransport,
            ProblemJsonTransport,
        )

        if asynchronous is None:
            asynchronous = not isinstance(transport, httpx.BaseTransport)
        if asynchronous:
            return AsyncProblemJsonTransport(transport, interceptor=self)  # type: ignore[arg-type]
        return ProblemJsonTransport(transport, interceptor=self)  # type: ignore[arg-type]
