"""Catalog SDK for Python.

Async client for a music catalog API: albums by id, batched album lookups
and paginated track listings.

Public API:
    CatalogClient - User-facing client
    StaticCredentialProvider - Pre-issued access token holder
    exceptions - Error taxonomy (BadRequestError, NotFoundError, RequestFailedError)
    models - Album, Track, Page and friends
"""

from catalog_sdk._internal.auth import (
    CredentialProvider,
    CredentialState,
    StaticCredentialProvider,
)
from catalog_sdk._internal.http import Transport, TransportResponse
from catalog_sdk._version import __version__
from catalog_sdk.client import CatalogClient, get_catalog_client
from catalog_sdk.exceptions import (
    BadRequestError,
    CatalogAPIError,
    CatalogConfigError,
    CatalogError,
    NotFoundError,
    RequestFailedError,
)
from catalog_sdk.models import Album, ArtistRef, Image, Page, Track

__all__ = [
    "__version__",
    "CatalogClient",
    "get_catalog_client",
    "CredentialProvider",
    "CredentialState",
    "StaticCredentialProvider",
    "Transport",
    "TransportResponse",
    "CatalogError",
    "CatalogAPIError",
    "CatalogConfigError",
    "BadRequestError",
    "NotFoundError",
    "RequestFailedError",
    "Album",
    "ArtistRef",
    "Image",
    "Page",
    "Track",
]
