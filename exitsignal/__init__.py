"""Graceful process exit from any call depth."""

from exitsignal.errors import ExitSignal
from exitsignal.exit import (
    catch,
    exit_on_error,
    exit_with,
    exit_with_error,
    exit_with_errorf,
)

__all__ = [
    "ExitSignal",
    "catch",
    "exit_on_error",
    "exit_with",
    "exit_with_error",
    "exit_with_errorf",
]
