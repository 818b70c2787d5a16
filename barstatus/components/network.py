"""Network components: addresses, traffic speed and wireless link status."""

from __future__ import annotations

import fcntl
import os
import re
import socket
import struct
from array import array

import psutil

from barstatus.util import fmt_human, read_uint, warn

NET_CLASS_ROOT = "/sys/class/net"
WIRELESS_PATH = "/proc/net/wireless"
INTERVAL_MS = 1000

_BUF_SIZE = 1024
_UINTMAX = 1 << 64
_IFNAMSIZ = 16
_IW_ESSID_MAX_SIZE = 32
_SIOCGIWESSID = 0x8B1B
_IWREQ_SIZE = 40
_WIRELESS_MAX_QUALITY = 70
_QUALITY_RE = re.compile(r"\s*[+-]?\d+\s+([+-]?\d+)")


def _ip(interface: str, family: int) -> str | None:
    try:
        addresses = psutil.net_if_addrs()
    except OSError as exc:
        warn(f"getifaddrs: {exc.strerror or exc}")
        return None
    for entry in addresses.get(interface, ()):
        if entry.family == family:
            return entry.address
    return None


def ipv4(interface: str) -> str | None:
    """Return the first IPv4 address of ``interface``."""
    return _ip(interface, socket.AF_INET)


def ipv6(interface: str) -> str | None:
    """Return the first IPv6 address of ``interface``."""
    return _ip(interface, socket.AF_INET6)


class NetSpeed:
    """Reports the byte rate of one traffic direction between successive reads."""

    def __init__(
        self,
        direction: str,
        interval: int = INTERVAL_MS,
        root: str = NET_CLASS_ROOT,
    ) -> None:
        if direction not in ("rx", "tx"):
            raise ValueError(f"direction must be 'rx' or 'tx', not {direction!r}")
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.direction = direction
        self.interval = interval
        self.root = root
        self._bytes = 0

    def read(self, interface: str) -> str | None:
        """Return bytes per second since the previous read; the first read gives None."""
        previous = self._bytes
        path = os.path.join(
            self.root, interface, "statistics", f"{self.direction}_bytes"
        )
        current = read_uint(path)
        if current is None:
            return None
        self._bytes = current
        if previous == 0:
            return None
        delta = (current - previous) % _UINTMAX
        return fmt_human(delta * 1000 // self.interval, 1024)


_rx = NetSpeed("rx")
_tx = NetSpeed("tx")


def netspeed_rx(interface: str) -> str | None:
    """Return the receive speed of ``interface``."""
    return _rx.read(interface)


def netspeed_tx(interface: str) -> str | None:
    """Return the transmit speed of ``interface``."""
    return _tx.read(interface)


def wifi_perc(
    interface: str,
    root: str = NET_CLASS_ROOT,
    wireless_path: str = WIRELESS_PATH,
) -> str | None:
    """Return the wireless link quality of ``interface`` in percent."""
    operstate = os.path.join(root, interface, "operstate")
    try:
        with open(operstate, encoding="utf-8", errors="replace") as handle:
            status = handle.readline(4)
    except OSError as exc:
        warn(f"fopen '{operstate}': {exc.strerror or exc}")
        return None
    if status != "up\n":
        return None

    try:
        with open(wireless_path, encoding="utf-8", errors="replace") as handle:
            lines = [handle.readline(_BUF_SIZE - 2) for _ in range(3)]
    except OSError as exc:
        warn(f"fopen '{wireless_path}': {exc.strerror or exc}")
        return None
    line = lines[2]
    if not line:
        return None

    start = line.find(interface)
    if start < 0:
        return None
    match = _QUALITY_RE.match(line, start + len(interface) + 2)
    if match is None:
        return None
    quality = int(match.group(1))
    return str(int(quality / _WIRELESS_MAX_QUALITY * 100))


def wifi_essid(interface: str) -> str | None:
    """Return the ESSID that wireless ``interface`` is associated with."""
    name = interface.encode("utf-8")
    if len(name) >= _IFNAMSIZ:
        warn("vsnprintf: Output truncated")
        return None

    essid = array("B", bytes(_IW_ESSID_MAX_SIZE + 1))
    address, _ = essid.buffer_info()
    request = bytearray(_IWREQ_SIZE)
    struct.pack_into(
        f"{_IFNAMSIZ}sPHH", request, 0, name, address, _IW_ESSID_MAX_SIZE + 1, 0
    )

    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError as exc:
        warn(f"socket 'AF_INET': {exc.strerror or exc}")
        return None
    with sock:
        try:
            fcntl.ioctl(sock.fileno(), _SIOCGIWESSID, request, True)
        except OSError as exc:
            warn(f"ioctl 'SIOCGIWESSID': {exc.strerror or exc}")
            return None

    value = essid.tobytes().split(b"\0", 1)[0]
    if not value:
        return None
    return value.decode("utf-8", errors="replace")