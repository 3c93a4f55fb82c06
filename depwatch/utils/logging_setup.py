"""
Logging configuration for the depwatch CLI.
"""
import logging
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(level: Union[str, int] = "WARNING", log_file: Optional[str] = None) -> None:
    """
    Configure root logging for a CLI run.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or numeric level
        log_file: Optional path of a log file written in addition to stderr
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
