"""Exceptions raised by the stopwatch package."""

from __future__ import annotations


class StopwatchError(Exception):
    """Base class for every error raised by ``fine_grained``."""


class ConsumedStopwatchError(StopwatchError):
    """A stopwatch handle was used after a transition handed its state on.

    Transitions such as ``start()`` or ``stop()`` return a *new* handle for the
    new state. The old handle is dead from that point on.
    """

    def __init__(self, handle: str) -> None:
        super().__init__(
            f"{handle} was consumed by a state transition; "
            "use the stopwatch returned by that transition instead."
        )
        self.handle = handle


class UnknownClockError(StopwatchError, ValueError):
    """The configured clock name could not be resolved to a callable."""


class InvalidLogLevelError(StopwatchError, ValueError):
    """The configured log level is not a known ``logging`` level name."""


__all__ = ["StopwatchError", "ConsumedStopwatchError", "InvalidLogLevelError", "UnknownClockError"]
