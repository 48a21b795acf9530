"""Runtime boot helpers for the Brave Search CLI.

Updates:
  v0.1.1 - 2026-10-12 - Fall back to the configured log level when no INI file is present.
  v0.1.0 - 2026-10-06 - Extract logging configuration helpers.
"""

from __future__ import annotations

import logging
import logging.config
from pathlib import Path

DEFAULT_LOGGING_CONFIG_PATH = Path("config/logging.conf")


def setup_logging(logging_conf_path: Path | None, *, level: str = "INFO") -> None:
    """Configure logging using *logging_conf_path* when available."""
    path = logging_conf_path or DEFAULT_LOGGING_CONFIG_PATH
    fallback_reason: str | None = None
    if path.exists():
        try:
            logging.config.fileConfig(path, disable_existing_loggers=False)
            return
        except Exception as exc:  # pragma: no cover - configuration fallback
            fallback_reason = f"{type(exc).__name__}: {exc}"
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if fallback_reason is not None:
        logging.getLogger("brave_search.cli").warning(
            "Ignoring invalid logging configuration %s (%s)", path, fallback_reason
        )
