"""Central logging configuration helper."""
from __future__ import annotations
import logging
import logging.config
import os
from io import StringIO
from pathlib import Path

from choirbook_core.config import Settings

DEFAULT_CONFIG_PATHS = [
    Path("config/logging.ini"),
    Settings().logging_config_path(),
]


def configure_logging(level: str | None = None, config_file: str | os.PathLike[str] | None = None) -> None:
    """Configure logging using an INI template.

    If the config contains the placeholder __LOG_LEVEL__, it is replaced with
    the effective log level before passing to logging.config.fileConfig.
    Without a config file, falls back to a plain ``basicConfig`` setup.
    """
    lvl = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    cfg_path: Path | None
    if config_file:
        cfg_path = Path(config_file)
    else:
        cfg_path = next((p for p in DEFAULT_CONFIG_PATHS if p.exists()), None)
    if not cfg_path or not cfg_path.exists():
        logging.basicConfig(level=getattr(logging, lvl, logging.INFO), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
        return
    text = cfg_path.read_text(encoding="utf-8").replace("__LOG_LEVEL__", lvl)
    # FileHandlers in the template write under logs/
    Path("logs").mkdir(exist_ok=True)
    if os.environ.get("CHOIRBOOK_LOG_RENDER", "0").lower() in ("1", "true", "yes"):  # pragma: no cover - opt-in
        (Path("logs") / "rendered_logging.ini").write_text(text, encoding="utf-8")
    logging.config.fileConfig(StringIO(text), disable_existing_loggers=False)

__all__ = ["configure_logging"]
