"""User-facing client for the catalog API.

Example usage:
    from catalog_sdk import CatalogClient, StaticCredentialProvider

    async with CatalogClient(StaticCredentialProvider("access-token")) as client:
        album = await client.albums.get("3T4tUhGYeRNVUGevb0wThu")
        albums = await client.albums.list(["5Z9iiGl2FcIfa3BMiv6OIw", "1IOYUjGsuwWJPchUBNwP4A"])
        tracks = await client.albums.tracks("0Vzr3HlSCCACpfENH4y1jC", offset=500, limit=50)
"""

import os
from datetime import datetime
from types import TracebackType

from catalog_sdk._internal.auth import (
    Clock,
    CredentialGuard,
    CredentialProvider,
    StaticCredentialProvider,
    utc_now,
)
from catalog_sdk._internal.http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, HttpxTransport, Transport
from catalog_sdk._internal.resources import AlbumsClient
from catalog_sdk.exceptions import CatalogConfigError

DEFAULT_TIMEOUT_MS = int(DEFAULT_TIMEOUT * 1000)


class CatalogClient:
    """Client for the music catalog API.

    The credential provider is shared read-only by every operation. The
    client only asks it to refresh once the current token has expired.

    Use `CatalogClient.from_env()` to create a client from environment variables.
    """

    def __init__(
        self,
        credentials: CredentialProvider,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        transport: Transport | None = None,
        clock: Clock = utc_now,
        debug: bool = False,
    ) -> None:
        """Initialize the catalog client.

        Args:
            credentials: Provider of the current access token.
            base_url: Root URL of the catalog API.
            timeout_ms: Request timeout in milliseconds. Ignored when a
                transport is passed in.
            transport: Optional transport to use instead of the default
                httpx one. The caller keeps ownership of it.
            clock: Source of the current time for expiry checks.
            debug: Enable debug logging to stderr.
        """
        self._owns_transport = transport is None
        self._transport = transport or HttpxTransport.create(
            base_url=base_url, timeout=timeout_ms / 1000
        )
        self._base_url = base_url
        self._timeout_ms = timeout_ms
        self._debug = debug
        self._credentials = CredentialGuard(credentials, clock=clock)
        self._albums = AlbumsClient(self._transport, self._credentials, debug=debug)

    @classmethod
    def from_env(cls, credentials: CredentialProvider | None = None) -> "CatalogClient":
        """Create a catalog client from environment variables.

        Optional environment variables:
            CATALOG_API_URL: Root URL of the catalog API.
            CATALOG_TIMEOUT_MS: Request timeout in milliseconds.
            CATALOG_DEBUG: Set to "1" to enable debug logging.

        Required when no credentials are passed:
            CATALOG_ACCESS_TOKEN: A pre-issued access token.

        Optional when no credentials are passed:
            CATALOG_TOKEN_EXPIRES_AT: ISO 8601 expiry of the access token.

        Returns:
            A configured CatalogClient.

        Raises:
            CatalogConfigError: If no credentials are available.
            ValueError: If a numeric or timestamp variable is malformed.
        """
        base_url = os.environ.get("CATALOG_API_URL") or DEFAULT_BASE_URL
        timeout_ms = int(os.environ.get("CATALOG_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))
        debug = os.environ.get("CATALOG_DEBUG", "") == "1"

        if credentials is None:
            token = os.environ.get("CATALOG_ACCESS_TOKEN")
            if not token:
                raise CatalogConfigError("CATALOG_ACCESS_TOKEN is not set")
            expires_at = os.environ.get("CATALOG_TOKEN_EXPIRES_AT")
            credentials = StaticCredentialProvider(
                token,
                expires_at=datetime.fromisoformat(expires_at) if expires_at else None,
            )

        return cls(credentials, base_url=base_url, timeout_ms=timeout_ms, debug=debug)

    @property
    def albums(self) -> AlbumsClient:
        return self._albums

    async def aclose(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            await self._transport.aclose()

    async def __aenter__(self) -> "CatalogClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


def get_catalog_client() -> CatalogClient:
    """Get a catalog client configured from environment variables.

    Returns:
        A configured CatalogClient instance.
    """
    return CatalogClient.from_env()
