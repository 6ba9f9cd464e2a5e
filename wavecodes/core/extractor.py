"""Pull Spotify track IDs out of URLs, URIs, CSV fields and plain lines."""
import logging
import re
from typing import Callable, Dict, Iterable, List, Optional

from wavecodes.errors import ValidationError

logger = logging.getLogger(__name__)

TRACK_ID_LENGTH = 22

# Markers in https://open.spotify.com/track/<id> and spotify:track:<id>
_MARKERS = ("track/", "track:")
_ALNUM_RUN = re.compile(r"[A-Za-z0-9]*")
_TRACK_ID = re.compile(r"[A-Za-z0-9]{%d}" % TRACK_ID_LENGTH)


def is_track_id(text: str) -> bool:
    """True if text is exactly 22 ASCII letters/digits."""
    return _TRACK_ID.fullmatch(text) is not None


def _id_after(text: str, marker: str) -> Optional[str]:
    # Only the first occurrence of the marker is considered
    pos = text.find(marker)
    if pos < 0:
        return None
    candidate = _ALNUM_RUN.match(text, pos + len(marker)).group()
    return candidate if len(candidate) == TRACK_ID_LENGTH else None


def extract_track_id(text: str) -> Optional[str]:
    """Return the track ID in a URL, URI or bare ID, or None.

    "track/" is tried first, then "track:", then the whole stripped text.
    """
    for marker in _MARKERS:
        track_id = _id_after(text, marker)
        if track_id is not None:
            return track_id
    text = text.strip()
    if is_track_id(text):
        return text
    return None


def _collect(values: Iterable[str]) -> List[str]:
    out = []
    for value in values:
        track_id = extract_track_id(value)
        if track_id is not None:
            out.append(track_id)
    return out


def _strip_quotes(field: str) -> str:
    """Drop one leading and one trailing double quote."""
    if field.startswith('"'):
        field = field[1:]
    if field.endswith('"'):
        field = field[:-1]
    return field


def extract_from_urls(content: str) -> List[str]:
    """One ID per line at most; order and duplicates kept."""
    return _collect(line.strip() for line in content.splitlines())


def extract_from_csv(content: str) -> List[str]:
    """Split each line on commas and look for an ID in every field."""
    fields = (
        _strip_quotes(field.strip())
        for line in content.splitlines()
        for field in line.split(",")
    )
    return _collect(fields)


def extract_plain_ids(content: str) -> List[str]:
    """Lines that are bare IDs; no URL/URI markers are searched."""
    return [line.strip() for line in content.splitlines() if is_track_id(line.strip())]


def extract_mixed(content: str) -> List[str]:
    """URLs, then CSV fields, then bare IDs, concatenated (duplicates expected)."""
    track_ids = extract_from_urls(content)
    track_ids.extend(extract_from_csv(content))
    track_ids.extend(extract_plain_ids(content))
    return track_ids


EXTRACTORS: Dict[str, Callable[[str], List[str]]] = {
    "csv": extract_from_csv,
    "urls": extract_from_urls,
    "mixed": extract_mixed,
}


def extract_ids(content: str, fmt: str = "mixed") -> List[str]:
    """Run the extractor for ``fmt`` ('csv', 'urls' or 'mixed')."""
    extractor = EXTRACTORS.get(fmt)
    if extractor is None:
        raise ValidationError("Unsupported format. Use: csv, urls, or mixed")
    track_ids = extractor(content)
    logger.debug("Extracted %d candidate IDs (%s)", len(track_ids), fmt)
    return track_ids


def finalize_ids(track_ids: Iterable[str]) -> List[str]:
    """Sort, de-duplicate and keep only 22-character entries.

    Raises ValidationError when nothing is left.
    """
    out = sorted(t for t in set(track_ids) if t and len(t) == TRACK_ID_LENGTH)
    if not out:
        raise ValidationError("No valid track IDs found in input")
    return out
