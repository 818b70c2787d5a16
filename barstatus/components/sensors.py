"""Sensor components: temperature from a sysfs file and OSS mixer volume."""

from __future__ import annotations

import fcntl
import os
import struct

from barstatus.util import read_uint, warn

# OSS mixer ioctl requests: _IOR('M', nr, int).
_IOC_READ_INT = 0x80044D00
SOUND_MIXER_READ_DEVMASK = _IOC_READ_INT | 0xFE

SOUND_DEVICE_NAMES = (
    "vol", "bass", "treble", "synth", "pcm", "speaker", "line",
    "mic", "cd", "mix", "pcm2", "rec", "igain", "ogain",
    "line1", "line2", "line3", "dig1", "dig2", "dig3",
    "phin", "phout", "video", "radio", "monitor",
)


def _mixer_read(nr: int) -> int:
    return _IOC_READ_INT | nr


def temp(file: str) -> str | None:
    """Return the temperature in degrees Celsius from a millidegree sensor file."""
    value = read_uint(file)
    if value is None:
        return None
    return str(value // 1000)


def _ioctl_int(fd: int, request: int) -> int:
    result = fcntl.ioctl(fd, request, bytes(4))
    return struct.unpack("i", result)[0]


def vol_perc(card: str) -> str | None:
    """Return the master volume of the OSS mixer device ``card`` in percent."""
    try:
        fd = os.open(card, os.O_RDONLY | os.O_NONBLOCK)
    except OSError as exc:
        warn(f"open '{card}': {exc.strerror or exc}")
        return None

    try:
        try:
            devmask = _ioctl_int(fd, SOUND_MIXER_READ_DEVMASK)
        except OSError as exc:
            warn(f"ioctl 'SOUND_MIXER_READ_DEVMASK': {exc.strerror or exc}")
            return None

        level = None
        for index, name in enumerate(SOUND_DEVICE_NAMES):
            if devmask & (1 << index) and name == "vol":
                try:
                    level = _ioctl_int(fd, _mixer_read(index))
                except OSError as exc:
                    warn(f"ioctl 'MIXER_READ({index})': {exc.strerror or exc}")
                    return None
    finally:
        os.close(fd)

    if level is None:
        return None
    return str(level & 0xFF)