"""
Root logger setup.

Defaults to warnings and errors only; set LOG_LEVEL=INFO for request-level detail.
"""

from __future__ import annotations

import logging

from . import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(filename)s:%(lineno)d %(message)s"
DATE_FORMAT = "%Y/%m/%d %H:%M:%S"


def configure_logging(level: str | None = None) -> None:
    name = (level or settings.log_level()).upper()
    resolved = getattr(logging, name, logging.WARNING)
    if not isinstance(resolved, int):
        resolved = logging.WARNING

    logging.basicConfig(level=resolved, format=LOG_FORMAT, datefmt=DATE_FORMAT)
    logging.getLogger().setLevel(resolved)
