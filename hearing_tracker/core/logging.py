"""Logging setup driven by ``Settings.log_level``."""

import logging

from hearing_tracker.core.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for scripts and host applications.

    Args:
        level: Explicit level name; falls back to ``settings.log_level``.
    """
    level_name = (level or get_settings().log_level).upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.INFO), format=LOG_FORMAT)
