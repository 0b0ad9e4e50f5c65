"""httpx transports applying the problem response interceptor."""

from collections.abc import AsyncIterable, Iterable

import httpx

from client_errors.features.middleware.interceptor import ProblemResponseInterceptor
from client_errors.features.middleware.metrics import InterceptorMetrics


class ProblemJsonTransport(httpx.BaseTransport):
    """Transport raising ``ClientResponseError`` for structured error bodies.

    Wraps another transport. Install it on a client like any transport:

        client = httpx.Client(transport=ProblemJsonTransport())
    """

    def __init__(
        self,
        transport: httpx.BaseTransport | None = None,
        interceptor: ProblemResponseInterceptor | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            transport: Inner transport (default: ``httpx.HTTPTransport()``).
            interceptor: Interceptor to apply (default: problem+json with
                the default redaction configuration).
        """
        self._transport = transport if transport is not None else httpx.HTTPTransport()
        self._interceptor = interceptor or ProblemResponseInterceptor()

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        response = self._transport.handle_request(request)
        InterceptorMetrics.get_instance().record_inspected()
        if not self._interceptor.matches(response):
            return self._interceptor.passthrough(response)

        stream: Iterable[bytes] = response.stream  # type: ignore[assignment]
        try:
            body = b"".join(stream)
        finally:
            response.close()
        return self._interceptor.resolve(request, response, body)

    def close(self) -> None:
        self._transport.close()


class AsyncProblemJsonTransport(httpx.AsyncBaseTransport):
    """Async counterpart of ``ProblemJsonTransport``.

    If the surrounding task is cancelled while the body is being read, the
    partial buffer is dropped, the inner response is closed, and the
    cancellation propagates.
    """

    def __init__(
        self,
        transport: httpx.AsyncBaseTransport | None = None,
        interceptor: ProblemResponseInterceptor | None = None,
    ) -> None:
        self._transport = (
            transport if transport is not None else httpx.AsyncHTTPTransport()
        )
        self._interceptor = interceptor or ProblemResponseInterceptor()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        response = await self._transport.handle_async_request(request)
        InterceptorMetrics.get_instance().record_inspected()
        if not self._interceptor.matches(response):
            return self._interceptor.passthrough(response)

        stream: AsyncIterable[bytes] = response.stream  # type: ignore[assignment]
        try:
            body = b"".join([chunk async for chunk in stream])
        finally:
            await response.aclose()
        return self._interceptor.resolve(request, response, body)

    async def aclose(self) -> None:
        await self._transport.aclose()
