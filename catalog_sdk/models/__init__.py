"""Public models for the catalog API."""

from catalog_sdk.models.catalog import Album, ArtistRef, Image, Page, Track

__all__ = ["Album", "ArtistRef", "Image", "Page", "Track"]
