"""Module to create a logger instance."""

import logging
import sys
from logging import Formatter, Logger, StreamHandler

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


class StdoutFilter(logging.Filter):
    """Let through only records not exceeding WARNING."""

    def filter(self, record):
        return record.levelno <= logging.WARNING


class StderrFilter(logging.Filter):
    """Let through only records from ERROR upwards."""

    def filter(self, record):
        return record.levelno >= logging.ERROR


def _split_handlers() -> list[StreamHandler]:
    formatter = Formatter(LOG_FORMAT)

    stdout_handler = StreamHandler(sys.stdout)
    stdout_handler.setFormatter(formatter)
    stdout_handler.addFilter(StdoutFilter())

    stderr_handler = StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    stderr_handler.addFilter(StderrFilter())

    return [stdout_handler, stderr_handler]


def create_logger(name: str, level: str | int | None = None) -> Logger:
    """Return the logger with the given name, attaching stdout and stderr handlers.

    Messages up to WARNING are written to stdout, the others to stderr. Handlers
    are attached only the first time a logger with this name is requested, so
    repeated calls do not duplicate the output.

    Args:
        name (str): logger name.
        level (str | int | None): logging level. When None the level is untouched.

    Returns:
        Logger: the configured logger.

    """
    logger = logging.getLogger(name)
    error_msg = None
    if level is not None:
        try:
            logger.setLevel(level)
        except ValueError:
            error_msg = f"Invalid log level: {level}"

    if len(logger.handlers) == 0:
        for handler in _split_handlers():
            logger.addHandler(handler)

    if error_msg is not None:
        logger.error(error_msg)

    return logger
