"""Logging setup for applications embedding pdfcraft.

The package itself only creates module-level loggers; this helper is for
scripts that want the standard output format at the configured level.
"""

import logging

from pdfcraft.config import get_config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging with the package's standard format.

    Args:
        level: Optional level name. If not provided, uses
            get_config().log_level
    """
    level_name = (level or get_config().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
    )
