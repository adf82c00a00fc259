# storage_api/logging_config.py
"""Application-wide logging configuration."""

import logging
from typing import Optional

from rich.logging import RichHandler

from storage_api.config import settings


def setup_logging(level: Optional[str] = None) -> None:
    """Routes every logger through a single Rich console handler."""
    log_level_str = (level or settings.LOG_LEVEL).upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    rich_handler = RichHandler(
        show_time=True,
        show_level=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_suppress=[logging],
    )
    # Replace rather than append so repeated calls do not duplicate output
    root_logger.handlers = [rich_handler]

    # Request lines come from our own middleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
