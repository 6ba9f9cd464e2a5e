"""Page layout configuration."""
from dataclasses import dataclass

DEFAULT_TITLE = "Spotify Codes Printable Page"
DEFAULT_COLUMNS = 4
DEFAULT_BACKGROUND_COLOR = "white"
DEFAULT_IMAGE_SIZE = 640


@dataclass(frozen=True)
class PageConfig:
    """Title, grid columns, background color and code image size (px).

    Values are not validated: zero or negative columns/sizes are written into
    the CSS and image URLs as given.
    """
    title: str = DEFAULT_TITLE
    columns: int = DEFAULT_COLUMNS
    background_color: str = DEFAULT_BACKGROUND_COLOR
    image_size: int = DEFAULT_IMAGE_SIZE
