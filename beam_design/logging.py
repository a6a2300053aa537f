# beam_design/logging.py
"""Loguru sink setup for scripts and the API."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger


def configure_logging(level: str = "INFO", log_path: Optional[Union[str, Path]] = None) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)  # console
    if log_path is not None:
        log_path = Path(log_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(str(log_path), level="DEBUG", rotation="5 MB", retention=10,
                   backtrace=False, diagnose=False)
