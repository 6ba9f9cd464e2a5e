"""Track ID extraction from pasted text (URLs, CSV rows, bare IDs)."""
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from wavecodes.core.extractor import extract_ids, finalize_ids
from wavecodes.errors import ValidationError

router = APIRouter()


class ExtractIdsBody(BaseModel):
    content: str = ""
    format: str = "mixed"


@router.post("/extract-ids")
def extract_track_ids(body: ExtractIdsBody):
    """Unique, sorted track IDs found in the content."""
    try:
        track_ids = finalize_ids(extract_ids(body.content, body.format))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {
        "success": True,
        "trackIds": track_ids,
        "message": f"Extracted {len(track_ids)} unique track IDs",
    }
