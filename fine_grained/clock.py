"""Monotonic nanosecond clock sources.

A clock is any zero-argument callable returning an ``int`` count of
nanoseconds that never decreases during the life of the process.
"""

from __future__ import annotations

import time
from importlib import import_module
from typing import Callable, Dict

from .errors import UnknownClockError

NS_PER_MS = 1_000_000

Clock = Callable[[], int]


def now_monotonic_ns() -> int: return time.monotonic_ns()
def now_perf_ns() -> int: return time.perf_counter_ns()
def ns_to_ms(ns: int) -> int: return ns // NS_PER_MS


CLOCKS: Dict[str, Clock] = {
    "monotonic": now_monotonic_ns,
    "perf_counter": now_perf_ns,
}


def resolve_clock(name: str) -> Clock:
    """Return the clock registered under ``name``.

    Besides the built-in names, ``name`` may be an import target of the form
    ``"package.module:function"``. The target must return ``int`` nanoseconds;
    it is called once here to check that.
    """

    if name in CLOCKS:
        return CLOCKS[name]
    mod_path, _, attr = name.partition(":")
    if not mod_path or not attr:
        raise UnknownClockError(
            f"Unknown clock '{name}'. Use one of {sorted(CLOCKS)} or 'module:function'."
        )
    try:
        mod = import_module(mod_path)
    except ImportError as exc:
        raise UnknownClockError(f"Cannot import clock module '{mod_path}'") from exc
    fn = getattr(mod, attr, None)
    if not callable(fn):
        raise UnknownClockError(f"'{name}' does not name a callable clock")
    # lap durations are int nanoseconds
    reading = fn()
    if not isinstance(reading, int) or isinstance(reading, bool):
        raise UnknownClockError(
            f"'{name}' returned {type(reading).__name__}, expected int nanoseconds"
        )
    return fn


__all__ = ["Clock", "CLOCKS", "NS_PER_MS", "now_monotonic_ns", "now_perf_ns", "ns_to_ms", "resolve_clock"]
