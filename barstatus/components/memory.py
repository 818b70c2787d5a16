"""Memory and swap components read from /proc/meminfo."""

from __future__ import annotations

import re

from barstatus.util import fmt_human, read_text, warn

MEMINFO_PATH = "/proc/meminfo"

_RAM_KEYS = ("MemTotal", "MemFree", "MemAvailable", "Buffers", "Cached")
_RAM_PATTERNS = {
    key: re.compile(rf"\s*{key}:\s*(\d+)\s*kB") for key in _RAM_KEYS
}
_SWAP_VALUE = re.compile(r"\s*([+-]?\d+)")


def _ram_values(path: str, count: int) -> list[int] | None:
    """Return the first ``count`` leading meminfo fields, which must come in order."""
    text = read_text(path)
    if text is None:
        return None
    values: list[int] = []
    pos = 0
    for key in _RAM_KEYS[:count]:
        match = _RAM_PATTERNS[key].match(text, pos)
        if match is None:
            return None
        values.append(int(match.group(1)))
        pos = match.end()
    return values


def _ram_usage(path: str) -> tuple[int, int, int, int] | None:
    values = _ram_values(path, 5)
    if values is None:
        return None
    total, free, _available, buffers, cached = values
    return total, free, buffers, cached


def ram_free(path: str = MEMINFO_PATH) -> str | None:
    """Return the available memory."""
    values = _ram_values(path, 3)
    if values is None:
        return None
    return fmt_human(values[2] * 1024, 1024)


def ram_perc(path: str = MEMINFO_PATH) -> str | None:
    """Return the memory in use, excluding buffers and cache, in percent."""
    usage = _ram_usage(path)
    if usage is None:
        return None
    total, free, buffers, cached = usage
    if total == 0:
        return None
    return str(100 * ((total - free) - (buffers + cached)) // total)


def ram_total(path: str = MEMINFO_PATH) -> str | None:
    """Return the total memory."""
    values = _ram_values(path, 1)
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def ram_used(path: str = MEMINFO_PATH) -> str | None:
    """Return the memory in use, excluding buffers and cache."""
    usage = _ram_usage(path)
    if usage is None:
        return None
    total, free, buffers, cached = usage
    return fmt_human((total - free - buffers - cached) * 1024, 1024)


def _swap_info(path: str, *names: str) -> dict[str, int] | None:
    """Return the requested swap fields (in kB) from meminfo, or None."""
    try:
        handle = open(path, encoding="utf-8", errors="replace")
    except OSError as exc:
        warn(f"fopen '{path}': {exc.strerror or exc}")
        return None

    found: dict[str, int] = {}
    wanted = set(names)
    with handle:
        for line in handle:
            if not wanted:
                break
            name = next((n for n in names if n in wanted and line.startswith(n)), None)
            if name is None:
                continue
            wanted.discard(name)
            match = _SWAP_VALUE.match(line, len(name) + 1)
            if match is not None:
                found[name] = int(match.group(1))

    if len(found) != len(names):
        return None
    return found


def swap_free(path: str = MEMINFO_PATH) -> str | None:
    """Return the free swap space."""
    info = _swap_info(path, "SwapFree")
    if info is None:
        return None
    return fmt_human(info["SwapFree"] * 1024, 1024)


def swap_perc(path: str = MEMINFO_PATH) -> str | None:
    """Return the swap in use, excluding cached pages, in percent."""
    info = _swap_info(path, "SwapTotal", "SwapFree", "SwapCached")
    if info is None or info["SwapTotal"] == 0:
        return None
    total = info["SwapTotal"]
    used = total - info["SwapFree"] - info["SwapCached"]
    return str(int(100 * used / total))


def swap_total(path: str = MEMINFO_PATH) -> str | None:
    """Return the total swap space."""
    info = _swap_info(path, "SwapTotal")
    if info is None:
        return None
    return fmt_human(info["SwapTotal"] * 1024, 1024)


def swap_used(path: str = MEMINFO_PATH) -> str | None:
    """Return the swap in use, excluding cached pages."""
    info = _swap_info(path, "SwapTotal", "SwapFree", "SwapCached")
    if info is None:
        return None
    used = info["SwapTotal"] - info["SwapFree"] - info["SwapCached"]
    return fmt_human(used * 1024, 1024)