from __future__ import annotations

import logging
import sys
from typing import Optional

from merklecommit.core.settings import get_settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging on stderr.

    Falls back to the configured MERKLECOMMIT_LOG_LEVEL when no level is given.
    """
    level_name = (level or get_settings().log_level).upper()
    log_level = getattr(logging, level_name, None)
    if not isinstance(log_level, int):
        log_level = logging.WARNING

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    logging.getLogger("merklecommit").setLevel(log_level)
