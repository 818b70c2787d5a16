"""Status bar configuration: the components shown and their defaults."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from barstatus.components.system import datetime

INTERVAL_MS = 1000
"""Interval between updates, in milliseconds."""

UNKNOWN_STR = "n/a"
"""Text shown when a component cannot retrieve its value."""

MAXLEN = 2048
"""Maximum length of the status line in bytes, terminator included."""


@dataclass(frozen=True)
class Component:
    """One entry of the status line: a value source and a printf-style format."""

    func: Callable[..., str | None]
    fmt: str = "%s"
    arg: str | None = None

    def render(self, unknown: str = UNKNOWN_STR) -> str:
        """Call the component and format its value, using ``unknown`` for None."""
        value = self.func() if self.arg is None else self.func(self.arg)
        if value is None:
            value = unknown
        return self.fmt % (value,)


def default_components() -> list[Component]:
    """Return the default status line layout: the local date and time."""
    return [Component(datetime, "%s", "%F %T")]