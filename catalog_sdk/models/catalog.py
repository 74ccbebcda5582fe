"""Pydantic models for catalog API responses.

Fields mirror the service's JSON objects. Unknown fields are kept so newer
API attributes survive a round trip.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

ItemT = TypeVar("ItemT")


class Image(BaseModel):
    """Cover art in one resolution."""

    url: str
    height: int | None = None
    width: int | None = None


class ArtistRef(BaseModel):
    """Simplified artist object referenced from albums and tracks."""

    id: str | None = None
    name: str
    type: str = "artist"
    uri: str | None = None
    href: str | None = None
    external_urls: dict[str, str] = Field(default_factory=dict)

    model_config = {"extra": "allow"}


class Page(BaseModel, Generic[ItemT]):
    """One window of an ordered collection, as reported by the service.

    ``total`` is the size of the whole collection. ``next`` and ``previous``
    are passed through from the service without being recomputed.
    """

    items: list[ItemT]
    total: int
    limit: int
    offset: int
    href: str
    next: str | None = None
    previous: str | None = None


class Track(BaseModel):
    """Simplified track object listed inside an album."""

    id: str | None = None
    name: str
    track_number: int | None = None
    disc_number: int | None = None
    duration_ms: int | None = None
    explicit: bool = False
    artists: list[ArtistRef] = Field(default_factory=list)
    preview_url: str | None = None
    type: str = "track"
    uri: str | None = None
    href: str | None = None

    model_config = {"extra": "allow"}


class Album(BaseModel):
    """Full album object with its first page of tracks."""

    id: str
    name: str
    type: str = "album"
    album_type: str | None = None
    release_date: str | None = None
    release_date_precision: str | None = None
    total_tracks: int | None = None
    artists: list[ArtistRef] = Field(default_factory=list)
    tracks: Page[Track]
    images: list[Image] = Field(default_factory=list)
    label: str | None = None
    genres: list[str] = Field(default_factory=list)
    popularity: int | None = None
    uri: str | None = None
    href: str | None = None
    external_urls: dict[str, str] = Field(default_factory=dict)

    model_config = {"extra": "allow"}
