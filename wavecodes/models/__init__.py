"""Data models for page layout and playlist listings."""
from wavecodes.models.page import PageConfig
from wavecodes.models.playlist import PlaylistPage, PlaylistTrack

__all__ = [
    "PageConfig",
    "PlaylistPage",
    "PlaylistTrack",
]
