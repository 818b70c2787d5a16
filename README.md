# barstatus

barstatus builds a one-line status text and refreshes it once per second.
The line is either written to standard output, for bars that read their text
from a pipe, or set as the name of the X root window, which many window
manager bars display.

The line shown by the command is the local date and time (`%F %T`). A set of
component functions for other readings (CPU, memory, disk, battery, network
and more) is available for building your own line from Python.

## Installing

    pip install .

## Running

    barstatus -s

`-s` writes the status line to standard output once per interval until the
process receives SIGINT or SIGTERM. `-1` writes one line to standard output
and exits:

    barstatus -1

Without options, barstatus sets the X root window name by running
`xsetroot -name`; this needs `DISPLAY` to be set and `xsetroot` to be on the
`PATH`, otherwise it exits with status 1. On a clean exit the root window name
is cleared.

Sending SIGUSR1 makes barstatus refresh the line at once instead of waiting
for the rest of the interval. Any option other than `-s` and `-1`, and any
argument that is not an option, prints a usage message and exits with
status 1.

If a reading cannot be taken, its place in the line shows `n/a`. A line that
would exceed the maximum length (2048 bytes, terminator included) is cut off
at the component that would overflow it, and a warning goes to standard
error.

## Components

The functions live in `barstatus.components`:

- `system`: `datetime`, `entropy`, `hostname`, `kernel_release`, `load_avg`,
  `uptime`, `gid`, `uid`, `username`, `separator`, `run_command`, `num_files`
- `battery`: `battery_perc`, `battery_state`, `battery_remaining`
- `cpu`: `cpu_perc`, `cpu_freq`, and the `CpuUsage` sampler
- `disk`: `disk_free`, `disk_perc`, `disk_total`, `disk_used`
- `memory`: `ram_free`, `ram_perc`, `ram_total`, `ram_used`, `swap_free`,
  `swap_perc`, `swap_total`, `swap_used`
- `sensors`: `temp`, `vol_perc`
- `network`: `ipv4`, `ipv6`, `netspeed_rx`, `netspeed_tx`, `wifi_perc`,
  `wifi_essid`, and the `NetSpeed` sampler

Each returns a string, or `None` when nothing could be read; failures are
reported as warnings on standard error. `cpu_perc`, `netspeed_rx` and
`netspeed_tx` compare against the previous call, so their first call returns
`None`. Most readings come from Linux files under `/proc` and `/sys`.

Sizes are shown with binary or decimal prefixes through
`barstatus.util.fmt_human`:

    >>> from barstatus.util import fmt_human
    >>> fmt_human(1536, 1024)
    '1.5 Ki'

## Building your own line

`barstatus.config.Component` pairs a function with a printf-style format and
an optional argument; `render()` calls the function and formats its value.
`barstatus.cli.build_status(components, unknown, maxlen)` joins a list of
components into one line:

    from barstatus.cli import build_status
    from barstatus.config import Component
    from barstatus.components.memory import ram_perc
    from barstatus.components.system import datetime, load_avg

    line = build_status([
        Component(load_avg, "[%s] "),
        Component(ram_perc, "mem %s%% "),
        Component(datetime, "%s", "%a %b %d %H:%M"),
    ])

## What it does not do

- The `barstatus` command always shows the layout from
  `barstatus.config.default_components()`; there is no configuration file
  or option to choose other components.
- There are no keyboard indicator or keyboard layout readings.
- Battery, CPU, memory, swap, temperature and network speed readings are
  taken from Linux interfaces only; other systems give `None` for them.

## Testing

    pip install .[test]
    pytest