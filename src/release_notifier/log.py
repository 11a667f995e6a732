"""Rich console logging for the API and the batch job."""

import logging
from typing import Optional

from rich.logging import RichHandler

from .config import Settings, get_settings

def setup_logging(settings: Optional[Settings] = None):
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )
    for name in settings.QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"release_notifier.{name}")
