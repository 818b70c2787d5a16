"""Command-line entry point that refreshes the status line periodically."""

from __future__ import annotations

import os
import shutil
import signal
import subprocess
import sys
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import NoReturn

from barstatus.config import (
    INTERVAL_MS,
    MAXLEN,
    UNKNOWN_STR,
    Component,
    default_components,
)
from barstatus.util import warn


@dataclass(frozen=True)
class Options:
    """Parsed command-line options."""

    stdout: bool = False
    once: bool = False


def _die(message: str) -> NoReturn:
    warn(message)
    raise SystemExit(1)


def _usage() -> NoReturn:
    name = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else ""
    _die(f"usage: {name or 'barstatus'} [-s] [-1]")


def build_status(
    components: Iterable[Component],
    unknown: str = UNKNOWN_STR,
    maxlen: int = MAXLEN,
) -> str:
    """Render ``components`` into one status line of at most ``maxlen - 1`` bytes.

    A piece that does not fit is cut short, and no further pieces are added.
    """
    if maxlen < 1:
        raise ValueError("maxlen must be at least 1")
    status = bytearray()
    for component in components:
        try:
            piece = component.render(unknown).encode("utf-8")
        except (TypeError, ValueError) as exc:
            warn(f"vsnprintf: {exc}")
            break
        room = maxlen - len(status)
        if len(piece) >= room:
            status += piece[: room - 1]
            warn("vsnprintf: Output truncated")
            break
        status += piece
    return status.decode("utf-8", errors="ignore")


def parse_args(argv: Sequence[str]) -> Options:
    """Parse ``-s`` (print to stdout) and ``-1`` (print once, implies ``-s``)."""
    stdout = False
    once = False
    args = list(argv)
    while args and args[0].startswith("-") and len(args[0]) > 1:
        arg = args.pop(0)
        if arg == "--":
            break
        for flag in arg[1:]:
            if flag == "1":
                once = True
                stdout = True
            elif flag == "s":
                stdout = True
            else:
                _usage()
    if args:
        _usage()
    return Options(stdout=stdout, once=once)


class _RootWindow:
    """Sets the name of the X root window, which status bars display."""

    @classmethod
    def open(cls) -> _RootWindow:
        if not os.environ.get("DISPLAY") or shutil.which("xsetroot") is None:
            _die("XOpenDisplay: Failed to open display")
        return cls()

    def store_name(self, name: str) -> None:
        try:
            result = subprocess.run(["xsetroot", "-name", name], check=False)
        except OSError as exc:
            _die(f"XStoreName: {exc.strerror or exc}")
        if result.returncode != 0:
            _die("XStoreName: Allocation failed")

    def close(self) -> None:
        self.store_name("")


class _WakeUp(Exception):
    """Raised by a signal handler to cut a sleep short."""


@dataclass
class _LoopState:
    done: bool = False
    sleeping: bool = False


def _install_handlers(state: _LoopState) -> dict[int, object]:
    def handler(signo: int, _frame: object) -> None:
        if signo != signal.SIGUSR1:
            state.done = True
        if state.sleeping:
            raise _WakeUp

    previous = {}
    for signo in (signal.SIGINT, signal.SIGTERM, signal.SIGUSR1):
        previous[signo] = signal.signal(signo, handler)
    return previous


def _restore_handlers(previous: dict[int, object]) -> None:
    for signo, handler in previous.items():
        signal.signal(signo, handler)


def _sleep(state: _LoopState, seconds: float) -> None:
    try:
        state.sleeping = True
        if not state.done:
            time.sleep(seconds)
    except _WakeUp:
        pass
    finally:
        state.sleeping = False


def _emit(status: str, root: _RootWindow | None) -> None:
    if root is None:
        try:
            print(status, flush=True)
        except OSError as exc:
            _die(f"puts: {exc.strerror or exc}")
    else:
        root.store_name(status)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the status loop until interrupted, or once with ``-1``."""
    if argv is None:
        argv = sys.argv[1:]
    options = parse_args(argv)
    components = default_components()
    state = _LoopState(done=options.once)
    interval = INTERVAL_MS / 1000

    previous = _install_handlers(state)
    try:
        root = None if options.stdout else _RootWindow.open()
        while True:
            start = time.monotonic()
            _emit(build_status(components, UNKNOWN_STR, MAXLEN), root)
            if state.done:
                break
            wait = interval - (time.monotonic() - start)
            if wait >= 0:
                _sleep(state, wait)
            if state.done:
                break
        if root is not None:
            root.close()
    finally:
        _restore_handlers(previous)
    return 0


if __name__ == "__main__":
    sys.exit(main())