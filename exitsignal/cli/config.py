import logging
import sys

from exitsignal.config import LOG_LEVEL, resolve_log_level


def setup_logging(level=None, stream=None):
    """
    Configure logging for the application.

    Installs a single stream handler on the root logger. Standard output is
    left to the error helpers, so records go to stderr unless another stream
    is given.

    Parameters:
        level (str | int, optional): Logging level. Defaults to ``LOG_LEVEL``.
        stream (IO, optional): Destination stream. Defaults to ``sys.stderr``.
    """
    stream_handler = logging.StreamHandler(stream or sys.stderr)
    logging.basicConfig(
        handlers=[stream_handler],
        format=(
            "{asctime:^} | {levelname: ^8} | {filename: ^14} {lineno: <4} | {message}"
        ),
        style="{",
        datefmt="%d.%m.%Y %H:%M:%S",
        level=resolve_log_level(LOG_LEVEL if level is None else level),
        force=True,
    )


def get_logger(name: str = None) -> logging.Logger:
    """
    Retrieve a logger instance with the given name.

    Parameters:
        name (str, optional): The name of the logger. Defaults to None for the root logger.

    Returns:
        logging.Logger: The configured logger.
    """
    return logging.getLogger(name)
