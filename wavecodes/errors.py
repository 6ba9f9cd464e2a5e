"""Error kinds raised by loaders, extractors and the playlist fetcher."""
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    IO = "io"
    PARSE = "parse"
    VALIDATION = "validation"
    HTTP = "http"


class WaveCodeError(Exception):
    """Base error. Callers branch on ``kind`` (or the subclass), never on the message."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class WaveCodeIOError(WaveCodeError):
    """A file could not be read or written."""

    kind = ErrorKind.IO


class ParseError(WaveCodeError):
    """Malformed JSON or an invalid numeric flag."""

    kind = ErrorKind.PARSE


class ValidationError(WaveCodeError):
    """Input has the wrong shape: empty list, bad playlist URL, unknown format."""

    kind = ErrorKind.VALIDATION


class HttpError(WaveCodeError):
    """Non-success response from the Spotify API; ``detail`` holds the response body."""

    kind = ErrorKind.HTTP

    def __init__(self, message: str, status: Optional[int] = None, detail: str = "") -> None:
        self.status = status
        self.detail = detail
        super().__init__(f"{message}: {detail}" if detail else message)
