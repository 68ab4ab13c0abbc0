from fastapi import APIRouter
import logging
import math
from pydantic import BaseModel
from typing import Optional
from choirbook_core.audio import (
    accepts_audio_file,
    format_time,
    is_supported_audio_format,
    validate_bookmark_name,
    validate_bookmark_range,
)

router = APIRouter(prefix="/audio", tags=["audio"])
log = logging.getLogger("choirbook_api")


class FileCheckRequest(BaseModel):
    file_name: str
    mime_type: Optional[str] = None


class RangeCheckRequest(BaseModel):
    start_time: float
    end_time: float
    duration: float
    name: Optional[str] = None


@router.get("/format")
def format_seconds(seconds: float):
    return {"seconds": seconds if math.isfinite(seconds) else None, "text": format_time(seconds)}


@router.post("/file-check")
def check_file(data: FileCheckRequest):
    result = accepts_audio_file(data.mime_type)
    if not result.is_valid:
        log.warning("audio.file_check rejected file=%s type=%s", data.file_name, data.mime_type)
    return {
        "accepted": result.is_valid,
        "supported": bool(data.mime_type) and is_supported_audio_format(data.mime_type),
        "message": result.error_message,
    }


@router.post("/validate")
def validate_range(data: RangeCheckRequest):
    """Dry-run of bookmark validation; name is checked first when given."""
    result = validate_bookmark_name(data.name) if data.name is not None else None
    if result is None or result.is_valid:
        result = validate_bookmark_range(data.start_time, data.end_time, data.duration)
    return {"is_valid": result.is_valid, "error_message": result.error_message}
