"""Logging setup for applications embedding geo_bounds."""

import logging
import sys

from geo_bounds.config import settings


def setup_logging(level: str | None = None) -> None:
    """Configure root logging.

    Uses ``level`` when given, otherwise ``settings.log_level``. Unknown level
    names fall back to INFO.
    """
    name = (level or settings.log_level).upper()
    resolved = getattr(logging, name, None)
    if not isinstance(resolved, int):
        resolved = logging.INFO
    logging.basicConfig(
        level=resolved,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )
