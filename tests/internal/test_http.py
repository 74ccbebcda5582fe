"""Tests for the httpx transport and error mapping."""

import httpx
import pytest
import respx

from catalog_sdk._internal.http import (
    HttpxTransport,
    TransportResponse,
    error_for_response,
    service_message,
)
from catalog_sdk.exceptions import BadRequestError, NotFoundError, RequestFailedError

BASE_URL = "https://api.test/v1"


class TestErrorForResponse:
    """Tests for error_for_response()."""

    def test_bad_request(self):
        """400 should map to BadRequestError with the service message."""
        body = {"error": {"status": 400, "message": "invalid id"}}
        error = error_for_response(TransportResponse(status=400, body=body))
        assert isinstance(error, BadRequestError)
        assert error.status_code == 400
        assert error.message == "invalid id"
        assert error.body == body
        assert '"status": 400' in str(error)
        assert '"message": "invalid id"' in str(error)

    def test_not_found(self):
        """404 should map to NotFoundError."""
        body = {"error": {"status": 404, "message": "Non existing id"}}
        error = error_for_response(TransportResponse(status=404, body=body))
        assert isinstance(error, NotFoundError)
        assert error.kind == "not_found"

    @pytest.mark.parametrize("status", [401, 403, 429, 500, 502, 503])
    def test_other_statuses(self, status):
        """Other non-2xx statuses should map to RequestFailedError."""
        error = error_for_response(TransportResponse(status=status, body=None))
        assert type(error) is RequestFailedError
        assert error.status_code == status


class TestServiceMessage:
    """Tests for service_message()."""

    def test_nested_error(self):
        """Should read error.message."""
        response = TransportResponse(status=400, body={"error": {"status": 400, "message": "bad request"}})
        assert service_message(response) == "bad request"

    def test_oauth_error(self):
        """Should prefer error_description for OAuth style bodies."""
        body = {"error": "invalid_client", "error_description": "Invalid client"}
        assert service_message(TransportResponse(status=400, body=body)) == "Invalid client"

    def test_oauth_error_without_description(self):
        """Should fall back to the error code."""
        body = {"error": "invalid_grant"}
        assert service_message(TransportResponse(status=400, body=body)) == "invalid_grant"

    def test_plain_text(self):
        """Should use a text body as is."""
        assert service_message(TransportResponse(status=502, body=" Bad Gateway ")) == "Bad Gateway"

    def test_empty_body(self):
        """Should describe the status when the body is empty."""
        assert service_message(TransportResponse(status=500)) == "Request failed with status 500"


class TestHttpxTransport:
    """Tests for HttpxTransport."""

    @pytest.mark.asyncio
    async def test_decodes_json(self):
        """Should return status and decoded JSON body."""
        with respx.mock(base_url=BASE_URL) as router:
            route = router.get("/albums/abc").mock(
                return_value=httpx.Response(200, json={"id": "abc"})
            )
            transport = HttpxTransport.create(base_url=BASE_URL)
            response = await transport.send(
                "GET", "/albums/abc", params={"market": "NL"}, headers={"Authorization": "Bearer t"}
            )
            await transport.aclose()

        assert response.status == 200
        assert response.ok is True
        assert response.body == {"id": "abc"}
        request = route.calls.last.request
        assert request.url.params["market"] == "NL"
        assert request.headers["authorization"] == "Bearer t"
        assert request.headers["user-agent"].startswith("catalog-sdk/")

    @pytest.mark.asyncio
    async def test_keeps_text_body(self):
        """Non-JSON bodies should be returned as text."""
        with respx.mock(base_url=BASE_URL) as router:
            router.get("/albums").mock(return_value=httpx.Response(503, text="unavailable"))
            transport = HttpxTransport.create(base_url=BASE_URL)
            response = await transport.send("GET", "/albums")
            await transport.aclose()

        assert response.ok is False
        assert response.body == "unavailable"

    @pytest.mark.asyncio
    async def test_empty_body(self):
        """An empty body should decode to None."""
        with respx.mock(base_url=BASE_URL) as router:
            router.get("/albums").mock(return_value=httpx.Response(204))
            transport = HttpxTransport.create(base_url=BASE_URL)
            response = await transport.send("GET", "/albums")
            await transport.aclose()

        assert response.body is None

    @pytest.mark.asyncio
    async def test_timeout(self):
        """A timeout should raise RequestFailedError without status."""
        with respx.mock(base_url=BASE_URL) as router:
            router.get("/albums").mock(side_effect=httpx.TimeoutException("timeout"))
            transport = HttpxTransport.create(base_url=BASE_URL)
            with pytest.raises(RequestFailedError) as exc_info:
                await transport.send("GET", "/albums")
            await transport.aclose()

        assert exc_info.value.status_code is None
        assert "timed out" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_network_error(self):
        """A connection error should raise RequestFailedError."""
        with respx.mock(base_url=BASE_URL) as router:
            router.get("/albums").mock(side_effect=httpx.ConnectError("connection failed"))
            transport = HttpxTransport.create(base_url=BASE_URL)
            with pytest.raises(RequestFailedError, match="connection failed"):
                await transport.send("GET", "/albums")
            await transport.aclose()
