"""Shared HTTP transport and response-to-error mapping."""

from typing import Any, Protocol

import httpx
from pydantic import BaseModel

from catalog_sdk._version import __version__
from catalog_sdk.exceptions import (
    BadRequestError,
    CatalogAPIError,
    NotFoundError,
    RequestFailedError,
)

DEFAULT_TIMEOUT = 30.0
DEFAULT_BASE_URL = "https://api.spotify.com/v1"


class TransportResponse(BaseModel):
    """Status code and decoded body of a single HTTP exchange."""

    status: int
    body: Any = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class Transport(Protocol):
    """Anything that can send one request to the catalog API."""

    async def send(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> TransportResponse: ...

    async def aclose(self) -> None: ...


def create_http_client(
    *,
    timeout: float = DEFAULT_TIMEOUT,
    base_url: str | None = None,
) -> httpx.AsyncClient:
    """Create configured HTTP client.

    Args:
        timeout: Request timeout in seconds.
        base_url: Optional base URL for all requests.

    Returns:
        Configured httpx.AsyncClient instance.
    """
    return httpx.AsyncClient(
        timeout=timeout,
        base_url=base_url or "",
        headers={"User-Agent": f"catalog-sdk/{__version__}"},
    )


class HttpxTransport:
    """Transport backed by a shared httpx.AsyncClient.

    Timeouts and connection failures surface as RequestFailedError with no
    status code. No retries are attempted.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    @classmethod
    def create(
        cls, *, base_url: str = DEFAULT_BASE_URL, timeout: float = DEFAULT_TIMEOUT
    ) -> "HttpxTransport":
        return cls(create_http_client(timeout=timeout, base_url=base_url))

    async def send(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> TransportResponse:
        try:
            response = await self._client.request(
                method, path, params=params, json=json, headers=headers
            )
        except httpx.TimeoutException as e:
            raise RequestFailedError(f"Request timed out: {e}") from e
        except httpx.HTTPError as e:
            raise RequestFailedError(f"Request error: {e}") from e
        return TransportResponse(status=response.status_code, body=_decode_body(response))

    async def aclose(self) -> None:
        await self._client.aclose()


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def service_message(response: TransportResponse) -> str:
    """Extract the service's diagnostic message from an error response."""
    body = response.body
    if isinstance(body, dict):
        error = body.get("error")
        # {"error": {"status": 400, "message": "invalid id"}}
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        # OAuth style: {"error": "invalid_client", "error_description": "..."}
        if isinstance(error, str):
            return str(body.get("error_description") or error)
        if body.get("message"):
            return str(body["message"])
    if isinstance(body, str) and body.strip():
        return body.strip()
    return f"Request failed with status {response.status}"


def error_for_response(response: TransportResponse) -> CatalogAPIError:
    """Map a non-2xx response to its error kind.

    400 is a bad request, 404 is not found, anything else is a failed request.
    The service's status and message are carried over unchanged.
    """
    message = service_message(response)
    if response.status == 400:
        return BadRequestError(message, response.status, body=response.body)
    if response.status == 404:
        return NotFoundError(message, response.status, body=response.body)
    return RequestFailedError(message, response.status, body=response.body)
