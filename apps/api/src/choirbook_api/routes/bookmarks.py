from fastapi import APIRouter, Depends, HTTPException
import logging
from pydantic import BaseModel
from typing import Optional
from choirbook_core.bookmarks import BookmarkService
from choirbook_core.config import Settings
from choirbook_core.storage import SqlBookmarkRepository

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])
log = logging.getLogger("choirbook_api")


def get_bookmark_service() -> BookmarkService:
    settings = Settings()
    return BookmarkService(SqlBookmarkRepository(key=settings.bookmark_storage_key))


class BookmarkCreateRequest(BaseModel):
    name: str
    start_time: float
    end_time: float
    duration: float
    file_name: str


@router.get("/")
def list_bookmarks(file_name: Optional[str] = None, service: BookmarkService = Depends(get_bookmark_service)):
    items = service.list(file_name)
    log.info("bookmarks.list count=%d file=%s", len(items), file_name or "*")
    return items


@router.post("/")
def create_bookmark(data: BookmarkCreateRequest, service: BookmarkService = Depends(get_bookmark_service)):
    result, bookmark = service.add(data.name, data.start_time, data.end_time, data.duration, data.file_name)
    if not result.is_valid:
        raise HTTPException(status_code=400, detail=result.error_message)
    return bookmark


@router.get("/{bookmark_id}/jump")
def jump_to_bookmark(bookmark_id: str, current_file: Optional[str] = None, service: BookmarkService = Depends(get_bookmark_service)):
    if service.get(bookmark_id) is None:
        raise HTTPException(status_code=404, detail="Bookmark not found")
    target = service.jump_target(bookmark_id, current_file)
    if target is None:
        raise HTTPException(status_code=409, detail="Bookmark belongs to another file")
    return {"id": bookmark_id, "time": target}


@router.delete("/{bookmark_id}/")
def delete_bookmark(bookmark_id: str, service: BookmarkService = Depends(get_bookmark_service)):
    if not service.delete(bookmark_id):
        raise HTTPException(status_code=404, detail="Bookmark not found")
    return {"status": "deleted"}
