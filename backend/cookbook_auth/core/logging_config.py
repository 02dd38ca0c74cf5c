"""
Process-wide logging setup.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stdout,
    )
    for _noisy in ("passlib", "sqlalchemy.engine", "multipart"):
        logging.getLogger(_noisy).setLevel(logging.WARNING)
