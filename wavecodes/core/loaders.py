"""Read track ID lists from text/JSON files and write results back to disk."""
import json
import logging
from pathlib import Path
from typing import Iterable, List, Union

from wavecodes.errors import ParseError, WaveCodeIOError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_text(path: PathLike) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise WaveCodeIOError(f"Could not read {path}: {e}") from e


def _write_text(path: PathLike, content: str) -> None:
    try:
        Path(path).write_text(content, encoding="utf-8")
    except OSError as e:
        raise WaveCodeIOError(f"Could not write {path}: {e}") from e


def parse_track_list(value: str) -> List[str]:
    """Split a comma-separated list, dropping blanks."""
    return [s.strip() for s in value.split(",") if s.strip()]


def load_from_text_file(path: PathLike) -> List[str]:
    """One ID per line; lines are stripped and blank lines dropped. Contents are not validated."""
    content = read_text(path)
    track_ids = [line.strip() for line in content.splitlines() if line.strip()]
    logger.debug("Loaded %d track IDs from %s", len(track_ids), path)
    return track_ids


def load_from_json_file(path: PathLike) -> List[str]:
    """JSON array of strings, e.g. ["69Kzq3FMkDwiSFBQzRckFD", ...]."""
    content = read_text(path)
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
        raise ParseError(f"Expected a JSON array of strings in {path}")
    logger.debug("Loaded %d track IDs from %s", len(data), path)
    return data


def write_track_ids(path: PathLike, track_ids: Iterable[str]) -> None:
    """Newline-separated IDs, no trailing newline."""
    _write_text(path, "\n".join(track_ids))


def write_page(path: PathLike, html: str) -> None:
    _write_text(path, html)
