"""Tests for exit signalling and the top-level catcher."""

from __future__ import annotations

import logging
import threading
from contextlib import ExitStack

import pytest

from exitsignal.errors import ExitSignal
from exitsignal.exit import catch, exit_with


@pytest.mark.parametrize("code", [0, 1, 2, 42, 255])
def test_catch_exits_with_requested_code(code: int) -> None:
    """Ensure a signal raised inside catch() becomes SystemExit with its code."""
    with pytest.raises(SystemExit) as exc_info:
        with catch():
            exit_with(code)

    assert exc_info.value.code == code


def test_exit_with_raises_exit_signal() -> None:
    """Ensure exit_with never returns and raises an ExitSignal."""
    with pytest.raises(ExitSignal) as exc_info:
        exit_with(3)

    assert exc_info.value.code == 3


def test_cleanups_run_innermost_first_before_exit() -> None:
    """Ensure every cleanup between the call site and main runs in LIFO order."""
    calls: list[str] = []

    def inner() -> None:
        with ExitStack() as stack:
            stack.callback(calls.append, "inner")
            exit_with(7)
        calls.append("unreachable")

    def outer() -> None:
        try:
            inner()
        finally:
            calls.append("outer")

    with pytest.raises(SystemExit) as exc_info:
        with catch():
            with ExitStack() as stack:
                stack.callback(calls.append, "main")
                outer()

    assert calls == ["inner", "outer", "main"]
    assert exc_info.value.code == 7


def test_signal_is_not_swallowed_by_except_exception() -> None:
    """Ensure generic exception handlers on the way up let the signal through."""
    swallowed = False

    def guarded() -> None:
        nonlocal swallowed
        try:
            exit_with(5)
        except Exception:
            swallowed = True

    with pytest.raises(SystemExit) as exc_info:
        with catch():
            guarded()

    assert not swallowed
    assert exc_info.value.code == 5


def test_catch_is_noop_on_normal_completion() -> None:
    """Ensure catch() does nothing when no signal is raised."""
    calls: list[str] = []

    with catch():
        calls.append("body")

    assert calls == ["body"]


def test_catch_reraises_unrelated_errors_unchanged() -> None:
    """Ensure foreign exceptions keep their identity when passing the catcher."""
    error = ValueError("unrelated")

    with pytest.raises(ValueError) as exc_info:
        with catch():
            raise error

    assert exc_info.value is error


@pytest.mark.parametrize("error", [KeyboardInterrupt(), SystemExit("other exit")])
def test_catch_reraises_other_base_exceptions(error: BaseException) -> None:
    """Ensure interrupts and plain sys.exit calls are not treated as signals."""
    with pytest.raises(type(error)) as exc_info:
        with catch():
            raise error

    assert exc_info.value is error


def test_catch_as_decorator() -> None:
    """Ensure @catch() works on an entry-point function."""

    @catch()
    def main() -> None:
        exit_with(9)

    @catch()
    def quiet_main() -> str:
        return "ok"

    with pytest.raises(SystemExit) as exc_info:
        main()

    assert exc_info.value.code == 9
    assert quiet_main() == "ok"


def test_exit_is_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    """Ensure both the request and the final exit are logged."""
    caplog.set_level(logging.DEBUG, logger="exitsignal.exit")

    with pytest.raises(SystemExit):
        with catch():
            exit_with(4)

    assert [record.getMessage() for record in caplog.records] == [
        "Exit requested with code 4",
        "Exiting process with code 4",
    ]


def test_signal_on_worker_thread_does_not_reach_catcher(monkeypatch: pytest.MonkeyPatch) -> None:
    """Document that a signal raised on another thread only ends that thread."""
    seen: list[type[BaseException]] = []
    monkeypatch.setattr(threading, "excepthook", lambda args: seen.append(args.exc_type))

    with catch():
        worker = threading.Thread(target=exit_with, args=(6,))
        worker.start()
        worker.join()

    assert seen == [ExitSignal]
