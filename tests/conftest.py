import pytest
from spotipy.exceptions import SpotifyException
from spotipy.oauth2 import SpotifyOauthError

from fakes import make_item


@pytest.fixture
def two_page_responses():
    return {
        "first": {
            "items": [
                make_item("69Kzq3FMkDwiSFBQzRckFD", "One", ("A", "B")),
                {"track": None},
                make_item("3wUMcPzXcmaeW8QxTdyXQO", "Two"),
            ],
            "next": "https://api.spotify.com/v1/playlists/x/tracks?offset=100",
        },
        "https://api.spotify.com/v1/playlists/x/tracks?offset=100": {
            "items": [
                {"track": {"id": None, "name": "Local file", "artists": []}},
                make_item("6LUGvXEAK8WxIBYK43uoTb", "Three"),
            ],
            "next": None,
        },
    }


@pytest.fixture
def not_found_error():
    return SpotifyException(404, -1, "https://api.spotify.com/v1/playlists/x/tracks:\n Not found.")


@pytest.fixture
def invalid_client_error():
    return SpotifyOauthError(
        "error: invalid_client, error_description: Invalid client",
        error="invalid_client",
        error_description="Invalid client",
    )
