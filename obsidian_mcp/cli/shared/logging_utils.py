"""Loguru helpers for CLI logging; stdout is reserved for protocol traffic."""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

_SINK_IDS: dict[str, int] = {}


def configure_stderr_logging(level: str = "INFO") -> None:
    """Replace every loguru sink with a single stderr sink at ``level``."""
    logger.remove()
    _SINK_IDS.clear()
    _SINK_IDS["stderr"] = logger.add(
        sys.stderr,
        level=level.upper(),
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{line} - {message}",
        backtrace=False,
        diagnose=False,
    )


def ensure_rotating_log_file(log_path: Path, level: str = "INFO") -> Path:
    """Ensure a rotating log sink writing to ``log_path``."""
    key = str(log_path)
    if key in _SINK_IDS:
        return log_path
    log_path.parent.mkdir(parents=True, exist_ok=True)
    _SINK_IDS[key] = logger.add(
        key,
        level=level.upper(),
        rotation="10 MB",
        retention="14 days",
        encoding="utf-8",
        backtrace=False,
        diagnose=False,
    )
    return log_path
