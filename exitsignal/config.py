"""Environment-backed settings for exitsignal."""

import logging
import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

LOG_LEVEL = os.getenv("EXITSIGNAL_LOG_LEVEL", "WARNING")


def resolve_log_level(value) -> int:
    """
    Convert a level name or number to a ``logging`` level.

    Parameters:
        value (str | int): Level name such as "debug", or a numeric level.

    Returns:
        int: The matching ``logging`` level.

    Raises:
        ValueError: If the name is not a known logging level.
    """
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {value}")
    return level
