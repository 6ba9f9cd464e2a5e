import logging

import pytest
from requests.exceptions import ConnectionError

from fakes import FakeAuth, StatusSession, make_fetcher, make_item
from wavecodes.core.playlist_fetcher import PAGE_FIELDS, PlaylistFetcher, extract_playlist_id
from wavecodes.errors import ErrorKind, HttpError, ValidationError
from wavecodes.models.playlist import PlaylistPage


def test_extract_playlist_id_with_query():
    url = "https://open.spotify.com/playlist/37i9dQZF1DXcBWIGoYBM5M?si=abc"
    assert extract_playlist_id(url) == "37i9dQZF1DXcBWIGoYBM5M"


def test_extract_playlist_id_without_query():
    assert extract_playlist_id("https://open.spotify.com/playlist/37i9dQZF1DXcBWIGoYBM5M") == (
        "37i9dQZF1DXcBWIGoYBM5M"
    )


@pytest.mark.parametrize("url", [
    "https://open.spotify.com/album/37i9dQZF1DXcBWIGoYBM5M",
    "https://open.spotify.com/playlist/short?si=abc",
    "https://open.spotify.com/playlist/37i9dQZF1DXcBWIGoYBM5M/extra",
])
def test_extract_playlist_id_rejects(url):
    with pytest.raises(ValidationError) as excinfo:
        extract_playlist_id(url)
    assert excinfo.value.kind is ErrorKind.VALIDATION


def test_missing_credentials():
    with pytest.raises(ValidationError):
        PlaylistFetcher("", "secret")


def test_page_from_response_skips_null_tracks_and_ids():
    page = PlaylistPage.from_response({
        "items": [None, {"track": None}, {"track": {"id": None}}, make_item("x" * 22)],
        "next": None,
    })
    assert page.track_ids == ["x" * 22]
    assert page.next_url is None


def test_fetch_follows_next_in_order(two_page_responses):
    fetcher = make_fetcher(two_page_responses)
    assert fetcher.fetch_track_ids("playlist") == [
        "69Kzq3FMkDwiSFBQzRckFD",
        "3wUMcPzXcmaeW8QxTdyXQO",
        "6LUGvXEAK8WxIBYK43uoTb",
    ]
    assert fetcher._client.playlist_id == "playlist"
    assert fetcher._client.fields == PAGE_FIELDS
    assert fetcher._client.limit == 100


def test_pages_are_requested_lazily(two_page_responses):
    fetcher = make_fetcher(two_page_responses)
    pages = fetcher.iter_pages("playlist")
    first = next(pages)
    assert first.track_ids == ["69Kzq3FMkDwiSFBQzRckFD", "3wUMcPzXcmaeW8QxTdyXQO"]
    assert fetcher._client.requested == ["first"]
    second = next(pages)
    assert second.tracks[0].name == "Three"
    with pytest.raises(StopIteration):
        next(pages)
    assert len(fetcher._client.requested) == 2


def test_empty_playlist():
    fetcher = make_fetcher({"first": {"items": [], "next": None}})
    assert fetcher.fetch_track_ids("playlist") == []


def test_failure_on_later_page_discards_earlier_pages(two_page_responses, not_found_error):
    two_page_responses["https://api.spotify.com/v1/playlists/x/tracks?offset=100"] = not_found_error
    fetcher = make_fetcher(two_page_responses)
    with pytest.raises(HttpError) as excinfo:
        fetcher.fetch_track_ids("playlist")
    assert excinfo.value.status == 404
    assert "Not found." in excinfo.value.detail
    assert excinfo.value.kind is ErrorKind.HTTP


def test_connection_error_is_http_error():
    fetcher = make_fetcher({"first": ConnectionError("timed out")})
    with pytest.raises(HttpError) as excinfo:
        fetcher.fetch_track_ids("playlist")
    assert excinfo.value.status is None


def test_authenticate_returns_token(caplog):
    caplog.set_level(logging.INFO, logger="wavecodes")
    fetcher = make_fetcher({})
    assert fetcher.authenticate() == "fake-token"
    assert not [r for r in caplog.records if r.levelno >= logging.INFO]


def test_authenticate_failure_carries_error_description(invalid_client_error):
    fetcher = make_fetcher({}, auth_error=invalid_client_error)
    with pytest.raises(HttpError) as excinfo:
        fetcher.authenticate()
    assert excinfo.value.detail == "Invalid client"
    assert str(excinfo.value) == "Failed to get access token: Invalid client"


@pytest.mark.parametrize("status", [500, 503, 429])
def test_server_error_keeps_status_and_body(status):
    session = StatusSession(status, {"error": {"status": status, "message": "upstream exploded"}})
    fetcher = PlaylistFetcher("client-id", "client-secret", auth_manager=FakeAuth(), session=session)
    with pytest.raises(HttpError) as excinfo:
        fetcher.fetch_track_ids("37i9dQZF1DXcBWIGoYBM5M")
    assert excinfo.value.status == status
    assert "upstream exploded" in excinfo.value.detail
    assert len(session.urls) == 1
