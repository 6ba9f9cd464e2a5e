"""Printable HTML page of Spotify wave codes in a CSS grid.

Rendering is pure string building: no network or file access, and the same
track IDs and PageConfig always give byte-identical output.
"""
from typing import Optional, Sequence

from wavecodes.models.page import DEFAULT_IMAGE_SIZE, PageConfig

# Spotify's scannables service renders a code image for any URI
CODE_IMAGE_URL = "https://scannables.scdn.co/uri/plain/png/000000/white/{size}/spotify:track:{track_id}"
DEFAULT_ALT_TEXT = "Spotify Code"

_SONG_TEMPLATE = """    <div class="song">
        <img src="{src}" alt="{alt}">
    </div>"""

_CSS_TEMPLATE = """        body {{
            font-family: Arial, sans-serif;
            margin: 10px;
            padding: 0;
            background-color: {background_color};
            display: grid;
            grid-template-columns: repeat({columns}, 1fr);
            column-gap: 1px;
            row-gap: 1px;
        }}
        .song {{
            margin: 0;
            padding: 0;
            box-shadow: none;
            border-radius: 0;
            text-align: center;
            page-break-inside: avoid;
        }}
        img {{
            max-width: 100%;
            height: auto;
            border: none;
            border-radius: 0;
            display: block;
        }}
        @media print {{
            body {{ padding: 0; margin: 0; background: white; }}
            .song {{ margin: 0; box-shadow: none; border: none; }}
            @page {{
                margin: 10px;
            }}
        }}"""

_PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <style>
{css}
    </style>
</head>
<body>
{songs}
</body>
</html>"""


def code_image_url(track_id: str, image_size: int = DEFAULT_IMAGE_SIZE) -> str:
    """URL of the wave code image for a track."""
    return CODE_IMAGE_URL.format(size=image_size, track_id=track_id)


def render_song_block(
    track_id: str,
    alt_text: Optional[str] = None,
    image_size: Optional[int] = None,
) -> str:
    """One <div class="song"> holding the code image for track_id."""
    size = DEFAULT_IMAGE_SIZE if image_size is None else image_size
    alt = DEFAULT_ALT_TEXT if alt_text is None else alt_text
    return _SONG_TEMPLATE.format(
        src=code_image_url(track_id, size),
        alt=alt,
    )


def render_css(config: PageConfig) -> str:
    """Grid and print styles for the page body."""
    return _CSS_TEMPLATE.format(
        background_color=config.background_color,
        columns=config.columns,
    )


def render_page(track_ids: Sequence[str], config: Optional[PageConfig] = None) -> str:
    """Complete HTML document with one code per track ID, in order."""
    if config is None:
        config = PageConfig()
    songs = "\n".join(
        render_song_block(track_id, image_size=config.image_size) for track_id in track_ids
    )
    return _PAGE_TEMPLATE.format(
        title=config.title,
        css=render_css(config),
        songs=songs.rstrip(),
    )


def render_titled_page(track_ids: Sequence[str], title: Optional[str] = None) -> str:
    """render_page with default layout and an optional title."""
    if title is None:
        return render_page(track_ids)
    return render_page(track_ids, PageConfig(title=title))
