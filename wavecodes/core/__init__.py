"""Core services: ID extraction, page rendering, file loading, playlist fetching."""
from wavecodes.core.playlist_fetcher import PlaylistFetcher
from wavecodes.core.renderer import render_page

__all__ = ["PlaylistFetcher", "render_page"]
