"""A stopwatch with lap functionality and nanosecond resolution to time things.

Get a single measurement::

    from fine_grained import Stopwatch

    stopwatch = Stopwatch.start_new()
    do_something_long()
    print(f"Duration: {stopwatch}")

Get measurements for repetitive tasks and a total time::

    stopwatch = Stopwatch.start_new()
    for _ in range(10):
        do_something_repetitive()
        stopwatch.lap()
    stopwatch = stopwatch.stop()
    for i, lap in enumerate(stopwatch.laps()):
        print(f"Round {i}: {lap}ns")
    print(f"Total time: {stopwatch}")
"""

from __future__ import annotations

from .clock import CLOCKS, NS_PER_MS, now_monotonic_ns, now_perf_ns, ns_to_ms, resolve_clock
from .config import StopwatchConfig, get_config, resolve_log_level
from .errors import ConsumedStopwatchError, InvalidLogLevelError, StopwatchError, UnknownClockError
from .report import StopwatchReport, report_dump
from .stopwatch import (
    InitializedStopwatch,
    LapEntry,
    LapKind,
    PausedStopwatch,
    RunningStopwatch,
    Stopwatch,
    StoppedStopwatch,
    new,
    start_new,
)

__version__ = "0.1.0"

__all__ = [
    "CLOCKS",
    "NS_PER_MS",
    "ConsumedStopwatchError",
    "InvalidLogLevelError",
    "InitializedStopwatch",
    "LapEntry",
    "LapKind",
    "PausedStopwatch",
    "RunningStopwatch",
    "Stopwatch",
    "StopwatchConfig",
    "StopwatchError",
    "StopwatchReport",
    "StoppedStopwatch",
    "UnknownClockError",
    "get_config",
    "new",
    "now_monotonic_ns",
    "now_perf_ns",
    "ns_to_ms",
    "report_dump",
    "resolve_clock",
    "resolve_log_level",
    "start_new",
]
