"""Spotify playlist track listing via Spotipy; authenticates with the client-credentials grant."""
import logging
from typing import Iterator, List, Optional

import requests
from requests.exceptions import RequestException
from spotipy import Spotify
from spotipy.cache_handler import MemoryCacheHandler
from spotipy.exceptions import SpotifyException
from spotipy.oauth2 import SpotifyClientCredentials, SpotifyOauthError

from wavecodes.config import REQUEST_TIMEOUT
from wavecodes.errors import HttpError, ValidationError
from wavecodes.models.playlist import PlaylistPage

logger = logging.getLogger(__name__)

PLAYLIST_MARKER = "/playlist/"
PLAYLIST_ID_LENGTH = 22
PAGE_LIMIT = 100
PAGE_FIELDS = "items(track(id,name,artists(name))),next"


def extract_playlist_id(url: str) -> str:
    """Return the playlist ID from e.g. https://open.spotify.com/playlist/<id>?si=...

    Raises ValidationError if the URL has no /playlist/ segment or the ID is not 22 characters.
    """
    pos = url.find(PLAYLIST_MARKER)
    if pos < 0:
        raise ValidationError(
            "Could not extract playlist ID from URL. Please provide a valid Spotify playlist URL."
        )
    playlist_id = url[pos + len(PLAYLIST_MARKER):].split("?", 1)[0]
    if len(playlist_id) != PLAYLIST_ID_LENGTH:
        raise ValidationError("Invalid playlist ID length")
    return playlist_id


class PlaylistFetcher:
    """Reads a playlist's tracks page by page.

    Requests go through a plain requests.Session so no urllib3 retry adapter
    is mounted: any non-success response ends the fetch with an HttpError
    carrying the real status and body.
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        timeout: float = REQUEST_TIMEOUT,
        auth_manager: Optional[SpotifyClientCredentials] = None,
        client: Optional[Spotify] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        if not client_id or not client_secret:
            raise ValidationError("Spotify client ID and client secret are required")
        session = session or requests.Session()
        self._auth = auth_manager or SpotifyClientCredentials(
            client_id=client_id,
            client_secret=client_secret,
            cache_handler=MemoryCacheHandler(),
            requests_session=session,
            requests_timeout=timeout,
        )
        self._client = client or Spotify(
            auth_manager=self._auth,
            requests_session=session,
            requests_timeout=timeout,
            retries=0,
            status_retries=0,
        )

    def authenticate(self) -> str:
        """Request an access token; returns it. Raises HttpError on failure."""
        try:
            token = self._auth.get_access_token(as_dict=False)
        except SpotifyOauthError as e:
            raise HttpError(
                "Failed to get access token",
                detail=e.error_description or str(e),
            ) from e
        except RequestException as e:
            raise HttpError("Failed to get access token", detail=str(e)) from e
        logger.debug("Authenticated with Spotify API")
        return token

    def _request(self, call, *args, **kwargs) -> Optional[dict]:
        try:
            return call(*args, **kwargs)
        except SpotifyException as e:
            raise HttpError(
                "Failed to get playlist tracks", status=e.http_status, detail=e.msg
            ) from e
        except SpotifyOauthError as e:
            raise HttpError(
                "Failed to get access token",
                detail=e.error_description or str(e),
            ) from e
        except RequestException as e:
            raise HttpError("Failed to get playlist tracks", detail=str(e)) from e

    def iter_pages(self, playlist_id: str) -> Iterator[PlaylistPage]:
        """Yield pages in server order, requesting the next page only when asked for it."""
        response = self._request(
            self._client.playlist_items,
            playlist_id,
            fields=PAGE_FIELDS,
            limit=PAGE_LIMIT,
            additional_types=("track",),
        )
        while response:
            page = PlaylistPage.from_response(response)
            yield page
            if not page.next_url:
                break
            response = self._request(self._client.next, response)

    def fetch_track_ids(self, playlist_id: str) -> List[str]:
        """All track IDs in the playlist. A failure on any page discards what was already read."""
        track_ids: List[str] = []
        for page in self.iter_pages(playlist_id):
            for track in page.tracks:
                logger.debug("Found: %s - %s", ", ".join(track.artists), track.name)
            track_ids.extend(page.track_ids)
        logger.debug("Found %d tracks in playlist %s", len(track_ids), playlist_id)
        return track_ids
