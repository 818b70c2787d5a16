"""General system components: time, host, user, load and commands."""

from __future__ import annotations

import os
import platform
import pwd
import socket
import subprocess
import sys
import time

from barstatus.util import read_uint, warn

_BUF_SIZE = 1024
_ENTROPY_PATH = "/proc/sys/kernel/random/entropy_avail"
_INFINITY = "\u221e"


def datetime(fmt: str) -> str | None:
    """Format the current local time with ``fmt`` (strftime syntax)."""
    result = time.strftime(fmt, time.localtime())
    if not result or len(result.encode("utf-8")) >= _BUF_SIZE:
        warn("strftime: Result string exceeds buffer size")
        return None
    return result


def entropy(path: str = _ENTROPY_PATH) -> str | None:
    """Return the kernel's available entropy; BSD systems report infinity."""
    if sys.platform.startswith(("openbsd", "freebsd")):
        return _INFINITY
    value = read_uint(path)
    return None if value is None else str(value)


def hostname() -> str | None:
    """Return the host name."""
    try:
        return socket.gethostname()
    except OSError as exc:
        warn(f"gethostname: {exc.strerror or exc}")
        return None


def kernel_release() -> str | None:
    """Return the kernel release, as ``uname -r`` prints it."""
    release = platform.release()
    if not release:
        warn("uname: Failed to obtain kernel release")
        return None
    return release


def load_avg() -> str | None:
    """Return the 1, 5 and 15 minute load averages."""
    try:
        one, five, fifteen = os.getloadavg()
    except OSError:
        warn("getloadavg: Failed to obtain load average")
        return None
    return f"{one:.2f} {five:.2f} {fifteen:.2f}"


def _uptime_clock() -> int:
    for name in ("CLOCK_BOOTTIME", "CLOCK_UPTIME"):
        clock = getattr(time, name, None)
        if clock is not None:
            return clock
    return time.CLOCK_MONOTONIC


def uptime() -> str | None:
    """Return the system uptime as ``<hours>h <minutes>m``."""
    clock = _uptime_clock()
    try:
        seconds = int(time.clock_gettime(clock))
    except OSError:
        warn(f"clock_gettime {clock}")
        return None
    hours, rest = divmod(seconds, 3600)
    return f"{hours}h {rest // 60}m"


def gid() -> str:
    """Return the real group id of the current process."""
    return str(os.getgid())


def uid() -> str:
    """Return the effective user id of the current process."""
    return str(os.geteuid())


def username() -> str | None:
    """Return the name of the effective user."""
    euid = os.geteuid()
    try:
        return pwd.getpwuid(euid).pw_name
    except KeyError:
        warn(f"getpwuid '{euid}': no such user")
        return None


def separator(text: str) -> str:
    """Return ``text`` unchanged."""
    return text


def run_command(cmd: str) -> str | None:
    """Run ``cmd`` in a shell and return the first line of its output.

    At most 1022 bytes are read; an empty line gives None.
    """
    try:
        proc = subprocess.Popen(cmd, shell=True, stdout=subprocess.PIPE)
    except OSError as exc:
        warn(f"popen '{cmd}': {exc.strerror or exc}")
        return None
    assert proc.stdout is not None
    with proc.stdout:
        line = proc.stdout.readline(_BUF_SIZE - 2)
    proc.wait()

    text = line.decode("utf-8", errors="replace")
    newline = text.rfind("\n")
    if newline >= 0:
        text = text[:newline]
    return text or None


def num_files(path: str) -> str | None:
    """Return the number of entries in directory ``path``."""
    try:
        with os.scandir(path) as entries:
            count = sum(1 for _ in entries)
    except OSError as exc:
        warn(f"opendir '{path}': {exc.strerror or exc}")
        return None
    return str(count)