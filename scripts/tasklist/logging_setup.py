"""Logging configuration for the task list app."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.logging import TextualHandler

from tasklist.config import DEFAULT_LOG_DIR

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    *,
    log_dir: str | Path | None = DEFAULT_LOG_DIR,
    level: int = logging.INFO,
) -> Path | None:
    """
    Configure the root logger:
    - Textual handler: records go to the devtools console, not the screen
    - File handler (unless log_dir is None): full detail for debugging

    Call once, before the app starts. Returns the log file path, if any.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    th = TextualHandler()
    th.setLevel(level)
    th.setFormatter(fmt)
    root.addHandler(th)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)

    if log_dir is None:
        return None

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "tasklist.log"

    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(fmt)
    root.addHandler(fh)
    return log_file
