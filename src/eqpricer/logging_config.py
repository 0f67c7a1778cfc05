"""Logging setup for the command-line entry point.

Library modules never configure logging; they only do
``logger = logging.getLogger(__name__)``.  ``setup_logging`` is called once
by the CLI.
"""

from __future__ import annotations

import logging
from pathlib import Path

DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def coerce_level(level: int | str) -> int:
    """Accept ``logging.INFO``, ``"info"``, ``"20"`` and friends."""
    if isinstance(level, int):
        return level

    s = str(level).strip().upper()
    if not s:
        raise ValueError("Empty logging level")
    if s.isdigit():
        return int(s)

    value = logging.getLevelName(s)
    if not isinstance(value, int):
        raise ValueError(f"Unknown logging level: {level!r}")
    return value


def setup_logging(
    level: int | str = "INFO",
    *,
    fmt: str = DEFAULT_FORMAT,
    datefmt: str = DEFAULT_DATEFMT,
    log_file: str | Path | None = None,
) -> None:
    """Send records to stderr and, optionally, to ``log_file``.

    Uses ``force=True`` so repeated calls replace earlier handlers.
    """
    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)
    handlers: list[logging.Handler] = [logging.StreamHandler()]

    if log_file is not None:
        p = Path(log_file)
        p.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(p, encoding="utf-8"))

    for h in handlers:
        h.setFormatter(formatter)
    logging.basicConfig(level=coerce_level(level), handlers=handlers, force=True)
