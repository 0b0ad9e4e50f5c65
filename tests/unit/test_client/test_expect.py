"""Unit tests for expect_success and the httpx response hooks."""

import asyncio

import httpx
import pytest

from client_errors.constants import REDACTED_VALUE
from client_errors.features.client.expect import (
    aexpect_success,
    araise_for_client_error,
    expect_success,
    is_success,
    raise_for_client_error,
)
from client_errors.features.client.response_error import ClientResponseError
from client_errors.features.client.text_body import decode_text


def handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/ok":
        return httpx.Response(200, text="fine")
    return httpx.Response(
        403, headers={"X-Session": "abc"}, text="forbidden", request=request
    )


class TestIsSuccess:
    """Tests for is_success."""

    @pytest.mark.parametrize(
        ("status", "expected"),
        [(200, True), (204, True), (299, True), (199, False), (301, False), (500, False)],
    )
    @pytest.mark.unit
    def test_status_ranges(self, status: int, expected: bool) -> None:
        """Test the 2xx boundary."""
        assert is_success(httpx.Response(status)) is expected


class TestExpectSuccess:
    """Tests for expect_success."""

    @pytest.mark.unit
    def test_returns_success_response(self) -> None:
        """Test that 2xx responses are returned unchanged."""
        response = httpx.Response(200)

        assert expect_success(response) is response

    @pytest.mark.unit
    def test_raises_with_request(self) -> None:
        """Test that a non-2xx response with a request raises a full error."""
        request = httpx.Request("GET", "https://api.example.com/private?key=k")
        response = httpx.Response(403, text="forbidden", request=request)

        with pytest.raises(ClientResponseError) as exc_info:
            expect_success(response, decoder=decode_text, render_body=str)

        error = exc_info.value
        assert error.status == 403
        assert error.request_method == "GET"
        assert error.request_uri is not None
        assert error.request_uri.value.params["key"] == REDACTED_VALUE
        assert error.response_body_text == "forbidden"

    @pytest.mark.unit
    def test_raises_without_request(self) -> None:
        """Test that a response without a request yields no request fields."""
        with pytest.raises(ClientResponseError) as exc_info:
            expect_success(httpx.Response(500))

        assert exc_info.value.request_method is None
        assert exc_info.value.request_uri is None

    @pytest.mark.unit
    def test_async_variant(self) -> None:
        """Test aexpect_success on a streamed body."""
        response = httpx.Response(500, text="down")

        async def run() -> ClientResponseError:
            with pytest.raises(ClientResponseError) as exc_info:
                await aexpect_success(
                    response, decoder=lambda loaded: loaded.text, render_body=str
                )
            return exc_info.value

        error = asyncio.run(run())

        assert error.response_body_text == "down"


class TestResponseHooks:
    """Tests for raise_for_client_error and araise_for_client_error."""

    @pytest.mark.unit
    def test_sync_hook(self) -> None:
        """Test installing the sync hook on a client."""
        hook = raise_for_client_error(decoder=decode_text, render_body=str)

        with httpx.Client(
            transport=httpx.MockTransport(handler), event_hooks={"response": [hook]}
        ) as client:
            assert client.get("https://api.example.com/ok").text == "fine"
            with pytest.raises(ClientResponseError) as exc_info:
                client.get("https://api.example.com/private")

        error = exc_info.value
        assert error.status == 403
        assert error.response_body_text == "forbidden"
        assert error.response_headers.value["X-Session"] == REDACTED_VALUE

    @pytest.mark.unit
    def test_async_hook(self) -> None:
        """Test installing the async hook on an async client."""
        hook = araise_for_client_error(decoder=lambda loaded: loaded.text)

        async def run() -> ClientResponseError:
            async with httpx.AsyncClient(
                transport=httpx.MockTransport(handler),
                event_hooks={"response": [hook]},
            ) as client:
                with pytest.raises(ClientResponseError) as exc_info:
                    await client.get("https://api.example.com/private")
            return exc_info.value

        error = asyncio.run(run())

        assert error.status == 403
        assert error.response_body == "forbidden"
        assert error.request_method == "GET"
