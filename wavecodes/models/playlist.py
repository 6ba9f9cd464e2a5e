"""Playlist listing pages from the Spotify Web API."""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class PlaylistTrack:
    """One playable track from a playlist listing."""
    spotify_id: str
    name: str
    artists: List[str] = field(default_factory=list)


@dataclass
class PlaylistPage:
    """One page of a playlist's tracks plus the URL of the next page, if any."""
    tracks: List[PlaylistTrack]
    next_url: Optional[str] = None

    @property
    def track_ids(self) -> List[str]:
        return [t.spotify_id for t in self.tracks]

    @classmethod
    def from_response(cls, response: dict) -> "PlaylistPage":
        """Build a page from a playlist-tracks response; null tracks and null ids are skipped."""
        tracks = []
        for item in response.get("items") or []:
            track = (item or {}).get("track")
            if not track or not track.get("id"):
                continue
            tracks.append(
                PlaylistTrack(
                    spotify_id=track["id"],
                    name=track.get("name") or "",
                    artists=[a.get("name") or "" for a in track.get("artists") or []],
                )
            )
        return cls(tracks=tracks, next_url=response.get("next"))
