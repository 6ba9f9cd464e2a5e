"""FastAPI app, CORS, and route registration."""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wavecodes.config import LOG_FORMAT, LOG_LEVEL

# Configure logging in the worker process (uvicorn --reload spawns a fresh one)
logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

from wavecodes.api.state import AppState, get_state

# Import routes after state to avoid circular imports
from wavecodes.api.routes import pages, playlists, tracks

__all__ = ["app", "AppState", "get_state"]

app = FastAPI(
    title="Wave Codes API",
    description="Generate printable Spotify wave code pages from track IDs or playlists",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(pages.router, prefix="/api", tags=["pages"])
app.include_router(playlists.router, prefix="/api", tags=["playlists"])
app.include_router(tracks.router, prefix="/api", tags=["tracks"])
