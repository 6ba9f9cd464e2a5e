"""HTML page generation from a list of track IDs."""
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from wavecodes.core.renderer import render_page
from wavecodes.models.page import (
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_COLUMNS,
    DEFAULT_IMAGE_SIZE,
    DEFAULT_TITLE,
    PageConfig,
)

router = APIRouter()


class GenerateHtmlBody(BaseModel):
    """Field names match the web frontend (camelCase). Missing or empty values use the defaults."""
    trackIds: List[str] = []
    title: Optional[str] = None
    columns: Optional[int] = None
    imageSize: Optional[int] = None
    backgroundColor: Optional[str] = None


@router.post("/generate-html")
def generate_html(body: GenerateHtmlBody):
    """Render the printable page and return it as a string."""
    if not body.trackIds:
        raise HTTPException(status_code=400, detail="Track IDs are required")
    config = PageConfig(
        title=body.title or DEFAULT_TITLE,
        columns=body.columns or DEFAULT_COLUMNS,
        background_color=body.backgroundColor or DEFAULT_BACKGROUND_COLOR,
        image_size=body.imageSize or DEFAULT_IMAGE_SIZE,
    )
    return {
        "success": True,
        "html": render_page(body.trackIds, config),
        "message": (
            f"Generated HTML with {len(body.trackIds)} tracks "
            f"in {config.columns}-column layout"
        ),
    }
