"""CPU components: usage between two samples and current frequency."""

from __future__ import annotations

from barstatus.util import fmt_human, read_text, read_uint

STAT_PATH = "/proc/stat"
FREQ_PATH = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq"

_FIELDS = 7  # user nice system idle iowait irq softirq


def _parse_stat(text: str) -> list[float] | None:
    tokens = text.split(None, _FIELDS + 1)[1 : _FIELDS + 1]
    values: list[float] = []
    for token in tokens:
        try:
            values.append(float(token))
        except ValueError:
            break
    return values if len(values) == _FIELDS else None


class CpuUsage:
    """Tracks the aggregate CPU counters and reports usage since the last sample."""

    def __init__(self, stat_path: str = STAT_PATH) -> None:
        self.stat_path = stat_path
        self._previous = [0.0] * _FIELDS

    def perc(self) -> str | None:
        """Return the CPU usage in percent since the previous call.

        The first call only takes a sample and returns None.
        """
        before = self._previous
        text = read_text(self.stat_path)
        if text is None:
            return None
        current = _parse_stat(text)
        if current is None:
            return None
        self._previous = current

        if before[0] == 0:
            return None

        total = sum(before) - sum(current)
        if total == 0:
            return None

        def busy(values: list[float]) -> float:
            user, nice, system, _idle, _iowait, irq, softirq = values
            return user + nice + system + irq + softirq

        return str(int(100 * (busy(before) - busy(current)) / total))


_default_usage = CpuUsage()


def cpu_perc() -> str | None:
    """Return the system-wide CPU usage in percent since the previous call."""
    return _default_usage.perc()


def cpu_freq(path: str = FREQ_PATH) -> str | None:
    """Return the frequency of the first CPU with an SI prefix, in Hz."""
    khz = read_uint(path)
    if khz is None:
        return None
    return fmt_human(khz * 1000, 1000)