"""Logging setup for CLI runs."""

import logging
import os
import sys
from typing import Optional


def configure_logging(
    run_id: Optional[str] = None,
    level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> None:
    """Send predictor logs to stderr, and to ``log_file`` when given.

    ``level`` wins over AVIATOR_LOG_LEVEL. Batch runs pass a ``run_id`` so
    their lines can be told apart in a shared log file.
    """
    level_name = (level or os.environ.get("AVIATOR_LOG_LEVEL", "INFO")).upper()
    run_tag = f"[run {run_id[:8]}] " if run_id else ""

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s [%(levelname)s] " + run_tag + "%(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
        force=True,
    )
