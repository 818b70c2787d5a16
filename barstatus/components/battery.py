"""Battery components read from the power-supply class in sysfs."""

from __future__ import annotations

import os

from barstatus.util import read_text, read_uint

POWER_SUPPLY_ROOT = "/sys/class/power_supply"

_STATE_SYMBOLS = {
    "Charging": "+",
    "Discharging": "-",
    "Full": "o",
}
_STATE_MAXLEN = 12


def _read_state(bat: str, root: str) -> str | None:
    text = read_text(os.path.join(root, bat, "status"))
    if text is None:
        return None
    tokens = text.split()
    if not tokens:
        return None
    return tokens[0][:_STATE_MAXLEN]


def _pick(bat: str, root: str, *names: str) -> str | None:
    """Return the first readable file among ``names`` in the battery directory."""
    for name in names:
        path = os.path.join(root, bat, name)
        if os.access(path, os.R_OK):
            return path
    return None


def battery_perc(bat: str, root: str = POWER_SUPPLY_ROOT) -> str | None:
    """Return the charge of battery ``bat`` in percent."""
    capacity = read_uint(os.path.join(root, bat, "capacity"))
    return None if capacity is None else str(capacity)


def battery_state(bat: str, root: str = POWER_SUPPLY_ROOT) -> str | None:
    """Return '+' when charging, '-' when discharging, 'o' when full, '?' otherwise."""
    state = _read_state(bat, root)
    if state is None:
        return None
    return _STATE_SYMBOLS.get(state, "?")


def battery_remaining(bat: str, root: str = POWER_SUPPLY_ROOT) -> str | None:
    """Return the time left on battery as ``<h>h <m>m``.

    An empty string is returned when the battery is not discharging.
    """
    state = _read_state(bat, root)
    if state is None:
        return None

    charge_path = _pick(bat, root, "charge_now", "energy_now")
    if charge_path is None:
        return None
    charge_now = read_uint(charge_path)
    if charge_now is None:
        return None

    if state != "Discharging":
        return ""

    current_path = _pick(bat, root, "current_now", "power_now")
    if current_path is None:
        return None
    current_now = read_uint(current_path)
    if not current_now:
        return None

    timeleft = charge_now / current_now
    hours = int(timeleft)
    minutes = int((timeleft - hours) * 60)
    return f"{hours}h {minutes}m"