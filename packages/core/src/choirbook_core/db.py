"""Database setup.

Provides SQLAlchemy engine, session factory, and declarative base.

Defaults to an on-disk SQLite database under ``data/choirbook.db`` at the
repository root, but respects an explicit environment override via
``CHOIRBOOK_DB_URL`` (or ``CHOIRBOOK_DATABASE_URL``) for testing or custom setups.
"""
from __future__ import annotations

import os
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from choirbook_core.config import Settings
from urllib.parse import urlparse

_settings = Settings()
_data_dir = _settings.effective_data_dir()

_env_url = os.getenv("CHOIRBOOK_DB_URL") or os.getenv("CHOIRBOOK_DATABASE_URL")
if _env_url:
    # If pointing to a SQLite file, ensure its directory exists
    parsed = urlparse(_env_url)
    if parsed.scheme == "sqlite" and parsed.path and parsed.path != ":memory:":
        _dir = os.path.dirname(parsed.path)
        if _dir:
            os.makedirs(_dir, exist_ok=True)
    DATABASE_URL = _env_url
else:
    os.makedirs(_data_dir, exist_ok=True)
    _db_path = os.path.join(_data_dir, "choirbook.db")
    DATABASE_URL = f"sqlite:///{_db_path}"

engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {},
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

__all__ = [
    "DATABASE_URL",
    "engine",
    "SessionLocal",
    "Base",
]
