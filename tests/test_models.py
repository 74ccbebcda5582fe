"""Tests for public models."""

import pytest
from pydantic import ValidationError

from catalog_sdk.models import Album, Page, Track

ALBUM = {
    "id": "3T4tUhGYeRNVUGevb0wThu",
    "name": "÷ (Deluxe)",
    "type": "album",
    "release_date": "2017-03-03",
    "artists": [{"id": "6eUKZXaKkcviH0Ku9w2n3V", "name": "Ed Sheeran", "type": "artist"}],
    "tracks": {
        "href": "https://api.test/v1/albums/3T4tUhGYeRNVUGevb0wThu/tracks?offset=0&limit=20",
        "items": [{"id": "7oolFzHipTMg2nL7shhdz2", "name": "Eraser", "track_number": 1}],
        "limit": 20,
        "offset": 0,
        "total": 1,
        "next": None,
        "previous": None,
    },
    "copyrights": [{"text": "2017 Asylum Records UK", "type": "C"}],
}


class TestAlbum:
    """Tests for Album model."""

    def test_parses_service_payload(self):
        """Should parse an album with its embedded tracks page."""
        album = Album.model_validate(ALBUM)
        assert album.id == "3T4tUhGYeRNVUGevb0wThu"
        assert album.name == "÷ (Deluxe)"
        assert album.artists[0].name == "Ed Sheeran"
        assert isinstance(album.tracks.items[0], Track)
        assert album.tracks.items[0].name == "Eraser"

    def test_keeps_unknown_fields(self):
        """Fields the model does not declare should be kept."""
        album = Album.model_validate(ALBUM)
        assert album.model_dump()["copyrights"] == ALBUM["copyrights"]

    def test_requires_tracks(self):
        """An album without tracks page should be rejected."""
        payload = {k: v for k, v in ALBUM.items() if k != "tracks"}
        with pytest.raises(ValidationError):
            Album.model_validate(payload)


class TestPage:
    """Tests for Page model."""

    def test_generic_items(self):
        """Items should be parsed into the item model."""
        page = Page[Track].model_validate(ALBUM["tracks"])
        assert page.total == 1
        assert page.next is None
        assert page.items[0].track_number == 1

    def test_missing_total(self):
        """total is required."""
        payload = {k: v for k, v in ALBUM["tracks"].items() if k != "total"}
        with pytest.raises(ValidationError):
            Page[Track].model_validate(payload)
