"""Graceful process exit from any call depth.

Calling ``sys.exit`` is already unwinding in Python, but any
``except BaseException`` or ``except SystemExit`` between the call site and
``main`` can swallow or rewrite it, and it cannot be told apart from an exit
requested by a library. :func:`exit_with` instead raises a dedicated
:class:`~exitsignal.errors.ExitSignal`, and only :func:`catch`, wrapped
around the whole body of ``main``, turns it into a real process exit::

    @catch()
    def main():
        with open_resources():
            run()          # may call exit_with(3) from any depth

Every ``finally`` block, context-manager exit and ``ExitStack`` callback
between the raising frame and ``main`` runs, innermost first, before the
process ends.

Limitations:
    There must be exactly one catcher and it must be outermost. Without it,
    the signal ends the process as an uncaught exception (traceback, status
    1). A signal raised on another thread only unwinds that thread and never
    reaches the catcher.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Iterator, NoReturn

import click

from exitsignal import exit_codes
from exitsignal.errors import ExitSignal

log = logging.getLogger(__name__)


@contextmanager
def catch() -> Iterator[None]:
    """Turn an :class:`ExitSignal` raised inside the block into a process exit.

    Anything else propagates unchanged. Works as ``with catch():`` and as the
    ``@catch()`` decorator.
    """
    try:
        yield
    except ExitSignal as signal:
        log.debug("Exiting process with code %d", signal.code)
        sys.exit(signal.code)


def exit_with(code: int) -> NoReturn:
    """Unwind the stack and exit with ``code`` once :func:`catch` is reached."""
    log.debug("Exit requested with code %s", code)
    raise ExitSignal(code)


def exit_on_error(err: BaseException | None, fmt: str | None = None, *args: object) -> None:
    """Print ``err`` and exit with code 1, unless ``err`` is ``None``.

    With ``fmt`` the line reads ``"<fmt % args>: <err>"``, otherwise it is
    just ``str(err)``. See :func:`exit_with_errorf` for the formatting rules.
    """
    if err is None:
        return
    if fmt is None:
        _echo(str(err))
    else:
        _echo(f"{_format(fmt, args)}: {err}")
    exit_with(exit_codes.FAILURE)


def exit_with_error(err: BaseException | None) -> NoReturn:
    """Print ``err`` and exit with code 1. ``None`` is printed as ``None``."""
    _echo(str(err))
    exit_with(exit_codes.FAILURE)


def exit_with_errorf(fmt: str, *args: object) -> NoReturn:
    """Print ``fmt % args`` and exit with code 1.

    ``fmt`` is always %-formatted, so a literal percent sign is written
    ``%%`` whether or not arguments are passed. A format that does not match
    its arguments is a programmer error; it is logged, the line is printed
    with the format verbatim followed by ``%!(<args>)``, and the exit still
    happens.
    """
    _echo(_format(fmt, args))
    exit_with(exit_codes.FAILURE)


def _echo(message: str) -> None:
    # color=True keeps escape sequences in the text when stdout is not a tty.
    click.echo(message, color=True)


def _format(fmt: str, args: tuple[object, ...]) -> str:
    try:
        return fmt % args
    except (TypeError, ValueError, KeyError) as exc:
        log.warning("Format %r does not match arguments %r: %s", fmt, args, exc)
        return f"{fmt} %!({', '.join(repr(arg) for arg in args)})"
