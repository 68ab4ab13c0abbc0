"""Configuration utilities for Choirbook."""
from dataclasses import dataclass, field
from typing import Optional
import os, sys
from pathlib import Path
from dotenv import load_dotenv  # type: ignore


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    val = os.getenv(name)
    return val if val not in (None, "") else default


def _env_flag(name: str, default: bool = False) -> bool:
    val = _env(name)
    if val is None:
        return default
    return val.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    val = _env(name)
    try:
        return int(val) if val is not None else default
    except ValueError:
        return default


@dataclass
class Settings:
    data_dir: str = field(default_factory=lambda: _env("CHOIRBOOK_DATA_DIR", "data"))
    bookmark_storage_key: str = field(default_factory=lambda: _env("CHOIRBOOK_BOOKMARK_KEY", "audioBookmarks"))
    # Team filter on the calendar applies to practices only unless enabled.
    include_performances_in_filter: bool = field(default_factory=lambda: _env_flag("CHOIRBOOK_FILTER_PERFORMANCES", False))
    api_host: str = field(default_factory=lambda: _env("CHOIRBOOK_API_HOST", "127.0.0.1"))
    api_port: int = field(default_factory=lambda: _env_int("CHOIRBOOK_API_PORT", 8000))

    def _bundle_base(self) -> Optional[str]:
        base = getattr(sys, "_MEIPASS", None)
        if base and os.path.isdir(base):
            return base
        return None

    def repo_root(self) -> str:
        base = self._bundle_base()
        if base:  # Frozen bundle base (PyInstaller, etc.)
            return base
        # Walk upward from this file looking for project markers
        cur = os.path.abspath(os.path.dirname(__file__))
        markers = ("pyproject.toml", ".git")
        for _ in range(8):
            if any(os.path.exists(os.path.join(cur, m)) for m in markers):
                return cur
            parent = os.path.dirname(cur)
            if parent == cur:
                break
            cur = parent
        # Fallback: fixed ascent from packages/core/src/choirbook_core
        return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../../../"))

    def load_backend_env(self) -> None:
        """Load canonical backend env file if present (idempotent)."""
        env_file = Path(self.repo_root()) / "config" / "env" / ".env.backend"
        if env_file.exists():
            load_dotenv(env_file, override=False)

    def resolve_path(self, p: Optional[str]) -> Optional[str]:
        if not p:
            return None
        if os.path.isabs(p):
            return p
        return os.path.abspath(os.path.join(self.repo_root(), p))

    def effective_data_dir(self) -> str:
        return self.resolve_path(self.data_dir) or os.path.join(self.repo_root(), "data")

    def logging_config_path(self) -> Path:
        return Path(self.repo_root()) / "config" / "logging.ini"


# The backend env file must be in os.environ before any Settings() reads it.
Settings().load_backend_env()
