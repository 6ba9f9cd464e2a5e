"""Playlist URL -> track IDs via the Spotify Web API."""
import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from wavecodes.api.state import AppState, get_state
from wavecodes.core.playlist_fetcher import extract_playlist_id
from wavecodes.errors import HttpError, ValidationError

router = APIRouter()
logger = logging.getLogger(__name__)


class ExtractTracksBody(BaseModel):
    playlistUrl: str = ""


@router.post("/extract-tracks")
def extract_tracks(body: ExtractTracksBody, state: AppState = Depends(get_state)):
    """Fetch every track ID in the playlist, in playlist order."""
    if not body.playlistUrl:
        raise HTTPException(status_code=400, detail="Playlist URL is required")
    if not state.has_credentials:
        raise HTTPException(
            status_code=503,
            detail="Spotify API credentials not configured. "
                   "Set SPOTIFY_CLIENT_ID and SPOTIFY_CLIENT_SECRET.",
        )
    try:
        playlist_id = extract_playlist_id(body.playlistUrl)
        fetcher = state.playlist_fetcher()
        fetcher.authenticate()
        track_ids = fetcher.fetch_track_ids(playlist_id)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except HttpError as e:
        logger.warning("Playlist fetch failed: %s", e)
        raise HTTPException(status_code=502, detail=str(e))
    return {
        "success": True,
        "trackIds": track_ids,
        "message": f"Successfully extracted {len(track_ids)} track IDs",
    }
