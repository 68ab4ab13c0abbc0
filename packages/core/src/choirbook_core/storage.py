"""Key-value persistence for client state (the audio bookmark list).

The whole list is stored as one JSON blob under a fixed key and rewritten in
full on every save. Data that cannot be parsed is discarded: the key is
cleared and the list loads empty.
"""
from __future__ import annotations

import json
import logging
from typing import Callable, List, Optional, Protocol

from sqlalchemy.orm import Session

from choirbook_core.db import SessionLocal
from choirbook_core.models import AudioBookmark, StoredBlob

logger = logging.getLogger("choirbook_core.storage")

DEFAULT_BOOKMARK_KEY = "audioBookmarks"


class BookmarkRepository(Protocol):
    def load(self) -> List[AudioBookmark]: ...

    def save(self, bookmarks: List[AudioBookmark]) -> None: ...


class SqlBookmarkRepository:
    """Bookmark list stored in the ``stored_blobs`` table."""

    def __init__(self, session_factory: Callable[[], Session] = SessionLocal, key: str = DEFAULT_BOOKMARK_KEY):
        self.session_factory = session_factory
        self.key = key

    def _read_raw(self, db: Session) -> Optional[str]:
        blob = db.get(StoredBlob, self.key)
        return blob.value if blob is not None else None

    def load(self) -> List[AudioBookmark]:
        db = self.session_factory()
        try:
            raw = self._read_raw(db)
            if raw is None:
                return []
            try:
                records = json.loads(raw)
                if not isinstance(records, list):
                    raise ValueError("bookmark blob is not a list")
                bookmarks = [AudioBookmark.from_record(r) for r in records]
            except (ValueError, KeyError, TypeError) as e:
                logger.error("storage.load corrupt key=%s error=%s; clearing", self.key, e)
                db.query(StoredBlob).filter(StoredBlob.key == self.key).delete()
                db.commit()
                return []
            logger.debug("storage.load key=%s count=%d", self.key, len(bookmarks))
            return bookmarks
        finally:
            db.close()

    def save(self, bookmarks: List[AudioBookmark]) -> None:
        payload = json.dumps([b.to_record() for b in bookmarks], ensure_ascii=False)
        db = self.session_factory()
        try:
            blob = db.get(StoredBlob, self.key)
            if blob is None:
                db.add(StoredBlob(key=self.key, value=payload))
            else:
                blob.value = payload
            db.commit()
            logger.debug("storage.save key=%s count=%d", self.key, len(bookmarks))
        finally:
            db.close()


__all__ = ["BookmarkRepository", "SqlBookmarkRepository", "DEFAULT_BOOKMARK_KEY"]
