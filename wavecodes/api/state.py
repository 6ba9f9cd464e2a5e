"""Shared application state (injected into routes)."""
from wavecodes.config import REQUEST_TIMEOUT, SPOTIFY_CLIENT_ID, SPOTIFY_CLIENT_SECRET
from wavecodes.core.playlist_fetcher import PlaylistFetcher


class AppState:
    def __init__(
        self,
        client_id: str = SPOTIFY_CLIENT_ID,
        client_secret: str = SPOTIFY_CLIENT_SECRET,
        timeout: float = REQUEST_TIMEOUT,
    ) -> None:
        self.client_id = client_id
        self.client_secret = client_secret
        self.timeout = timeout

    @property
    def has_credentials(self) -> bool:
        return bool(self.client_id and self.client_secret)

    def playlist_fetcher(self) -> PlaylistFetcher:
        """New fetcher per request; tokens are not shared between requests."""
        return PlaylistFetcher(self.client_id, self.client_secret, timeout=self.timeout)


_state = AppState()


def get_state() -> AppState:
    return _state
