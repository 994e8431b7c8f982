import logging
import sys
from typing import TextIO

from pythonjsonlogger import jsonlogger


def setup_logging(level: str = "INFO", stream: TextIO | None = None):
    """
    Configures structured JSON logging for the application.

    This function initializes a JSON formatter that includes timestamp, level,
    logger name and message, and replaces the root logger's handlers with a
    single stream handler so every module logs in the same format. Library
    modules only call `logging.getLogger(__name__)`; the application calls
    this once at startup.

    Args:
        level: Name of the root log level, e.g. "INFO" or "DEBUG".
        stream: Where to write log records. Defaults to stdout.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s"
    )
    stream_handler = logging.StreamHandler(stream or sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = []
    root_logger.addHandler(stream_handler)

    return root_logger
