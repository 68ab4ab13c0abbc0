"""Audio bookmark list management on top of an injected repository."""
from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional, Tuple

from choirbook_core.audio import ValidationResult, validate_bookmark_name, validate_bookmark_range
from choirbook_core.models import AudioBookmark
from choirbook_core.storage import BookmarkRepository

logger = logging.getLogger("choirbook_core.bookmarks")


def _timestamp_id() -> str:
    return str(int(time.time() * 1000))


class BookmarkService:
    def __init__(self, repository: BookmarkRepository, id_factory: Callable[[], str] = _timestamp_id):
        self.repository = repository
        self.id_factory = id_factory

    def list(self, file_name: Optional[str] = None) -> List[AudioBookmark]:
        bookmarks = self.repository.load()
        if file_name is None:
            return bookmarks
        return [b for b in bookmarks if b.file_name == file_name]

    def get(self, bookmark_id: str) -> Optional[AudioBookmark]:
        return next((b for b in self.repository.load() if b.id == bookmark_id), None)

    def _unique_id(self, existing: List[AudioBookmark]) -> str:
        taken = {b.id for b in existing}
        new_id = self.id_factory()
        suffix = 1
        candidate = new_id
        while candidate in taken:
            candidate = f"{new_id}-{suffix}"
            suffix += 1
        return candidate

    def add(
        self,
        name: str,
        start: float,
        end: float,
        duration: float,
        file_name: str,
    ) -> Tuple[ValidationResult, Optional[AudioBookmark]]:
        """Validate and append a bookmark, saving the whole list.

        Returns the validation result and the new bookmark (``None`` when
        validation failed and nothing was stored).
        """
        result = validate_bookmark_name(name)
        if result.is_valid:
            result = validate_bookmark_range(start, end, duration)
        if not result.is_valid:
            logger.info("bookmarks.add rejected file=%s reason=%s", file_name, result.error_message)
            return result, None

        bookmarks = self.repository.load()
        bookmark = AudioBookmark(
            id=self._unique_id(bookmarks),
            name=name.strip(),
            start_time=start,
            end_time=end,
            file_name=file_name,
        )
        bookmarks.append(bookmark)
        self.repository.save(bookmarks)
        logger.info("bookmarks.add ok id=%s file=%s range=%.2f-%.2f", bookmark.id, file_name, start, end)
        return result, bookmark

    def delete(self, bookmark_id: str) -> bool:
        bookmarks = self.repository.load()
        remaining = [b for b in bookmarks if b.id != bookmark_id]
        if len(remaining) == len(bookmarks):
            logger.warning("bookmarks.delete not_found id=%s", bookmark_id)
            return False
        self.repository.save(remaining)
        logger.info("bookmarks.delete ok id=%s", bookmark_id)
        return True

    def jump_target(self, bookmark_id: str, current_file: Optional[str]) -> Optional[float]:
        """Start position to seek to, only when the bookmark's file is loaded."""
        bookmark = self.get(bookmark_id)
        if bookmark is None or current_file is None or bookmark.file_name != current_file:
            return None
        return bookmark.start_time


__all__ = ["BookmarkService"]
