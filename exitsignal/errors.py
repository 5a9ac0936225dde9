"""Exception types raised by exitsignal."""

from __future__ import annotations


class ExitSignal(BaseException):
    """Request to terminate the process with ``code``.

    Derives from ``BaseException`` so ``except Exception`` handlers between
    the raising frame and the entry point let it through. It is deliberately
    not a ``SystemExit``: one that escapes :func:`exitsignal.exit.catch` is
    reported by the interpreter as a crash instead of being honoured.
    """

    def __init__(self, code: int) -> None:
        self.code = int(code)
        super().__init__(self.code)

    def __str__(self) -> str:
        return f"exit requested with code {self.code}"
