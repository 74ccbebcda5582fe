"""Catalog resource clients."""

from catalog_sdk._internal.resources.client import (
    MAX_IDS_PER_REQUEST,
    AlbumsClient,
    ResourceClient,
)

__all__ = ["MAX_IDS_PER_REQUEST", "AlbumsClient", "ResourceClient"]
