"""Configuration: env, .env file, Spotify credentials, defaults."""
import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

# Load .env from the working directory (or a parent) so SPOTIFY_CLIENT_ID etc. are set
load_dotenv(find_dotenv(usecwd=True))

# Spotify (client-credentials grant; no user login)
SPOTIFY_CLIENT_ID = os.getenv("SPOTIFY_CLIENT_ID", "")
SPOTIFY_CLIENT_SECRET = os.getenv("SPOTIFY_CLIENT_SECRET", "")

# Seconds per HTTP request to the Spotify API
REQUEST_TIMEOUT = float(os.getenv("WAVECODES_REQUEST_TIMEOUT", "10"))

# get-song-ids writes its list here
INPUT_DIR = Path(os.getenv("WAVECODES_INPUT_DIR", "input"))

# API
API_HOST = os.getenv("WAVECODES_API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("WAVECODES_API_PORT", "8000"))

LOG_LEVEL = os.getenv("WAVECODES_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"

# CLI defaults
DEFAULT_PAGE_OUTPUT = "wave_codes.html"
DEFAULT_PLAYLIST_OUTPUT = "playlist_tracks.txt"
DEFAULT_EXTRACT_OUTPUT = "extracted_tracks.txt"


def ensure_input_dir() -> Path:
    INPUT_DIR.mkdir(parents=True, exist_ok=True)
    return INPUT_DIR
