"""Shared helpers: warnings, human-readable sizes and small file readers."""

from __future__ import annotations

import os
import re
import sys

_PREFIXES = {
    1000: ("", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    1024: ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
}

_UINT_RE = re.compile(r"\s*\+?(\d+)")


def _program_name() -> str:
    name = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else ""
    return name or "barstatus"


def warn(message: str) -> None:
    """Write a diagnostic line to stderr, prefixed by the program name.

    Usage messages are written without the prefix.
    """
    if message.startswith("usage"):
        line = message
    else:
        line = f"{_program_name()}: {message}"
    print(line, file=sys.stderr, flush=True)


def fmt_human(num: float, base: int) -> str:
    """Scale ``num`` by ``base`` and return it with one decimal and a unit prefix.

    ``base`` must be 1000 (SI prefixes) or 1024 (binary prefixes).
    """
    try:
        prefixes = _PREFIXES[base]
    except KeyError:
        raise ValueError(f"fmt_human: Invalid base {base!r}") from None

    scaled = float(num)
    index = 0
    while index < len(prefixes) - 1 and scaled >= base:
        scaled /= base
        index += 1
    return f"{scaled:.1f} {prefixes[index]}"


def read_text(path: str | os.PathLike[str]) -> str | None:
    """Return the whole text of ``path``, or None (with a warning) if it cannot be read."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return handle.read()
    except OSError as exc:
        warn(f"fopen '{os.fspath(path)}': {exc.strerror or exc}")
        return None


def read_uint(path: str | os.PathLike[str]) -> int | None:
    """Return the unsigned integer at the start of ``path``, or None."""
    text = read_text(path)
    if text is None:
        return None
    match = _UINT_RE.match(text)
    if match is None:
        return None
    return int(match.group(1))