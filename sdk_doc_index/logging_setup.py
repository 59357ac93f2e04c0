"""Process-wide logging configuration for command-line entry points."""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "SDK_DOC_INDEX_LOG_LEVEL"


def configure_logging(level: str | None = None) -> None:  # lightweight, idempotent
    if getattr(configure_logging, "_done", False):  # type: ignore[attr-defined]
        return
    level_name = (level or os.getenv(LOG_LEVEL_ENV, "WARNING")).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="[%(levelname)s] %(name)s: %(message)s",
    )
    configure_logging._done = True  # type: ignore[attr-defined]


__all__ = ["LOG_LEVEL_ENV", "configure_logging"]
