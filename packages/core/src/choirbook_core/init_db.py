"""Database initialization helper for Choirbook.

Creates all tables and optionally an empty bookmark list.
"""
from __future__ import annotations
import logging
from .db import Base, engine
from .models import StoredBlob  # noqa: F401  (registers the table)
from .storage import SqlBookmarkRepository

logger = logging.getLogger("choirbook_core.init_db")


def init_db(seed_bookmarks: bool = True) -> None:
    """Create tables and optional seed records.

    Parameters
    ----------
    seed_bookmarks: bool
        If True and no bookmark list is stored yet, store an empty one so the
        key exists from first start.
    """
    Base.metadata.create_all(bind=engine)
    if not seed_bookmarks:
        return
    repo = SqlBookmarkRepository()
    if not repo.load():
        repo.save([])
    logger.info("init_db ok url=%s", engine.url.render_as_string(hide_password=True))

if __name__ == "__main__":  # pragma: no cover
    init_db()
