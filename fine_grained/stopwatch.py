"""A stopwatch with lap functionality and nanosecond resolution.

The stopwatch is a family of handle types, one per state:

    InitializedStopwatch --start--> RunningStopwatch
    RunningStopwatch --pause / lap_and_pause--> PausedStopwatch
    RunningStopwatch --stop / lap_and_stop--> StoppedStopwatch
    PausedStopwatch --resume--> RunningStopwatch
    PausedStopwatch --stop--> StoppedStopwatch
    StoppedStopwatch --reset--> InitializedStopwatch
    StoppedStopwatch --restart--> RunningStopwatch

An operation is only defined on the states where it is legal, so lapping a
stopwatch that was never started is rejected by a type checker and fails with
``AttributeError`` at run time. A transition moves the measurements into the
handle it returns; the old handle raises ``ConsumedStopwatchError`` if used
again.

All measurements are integer nanoseconds.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .clock import Clock
from .config import get_config
from .errors import ConsumedStopwatchError

logger = logging.getLogger(__name__)


class LapKind(enum.Enum):
    COMPLETED = "completed"
    # elapsed time of the open lap, frozen by pause()
    PENDING = "pending"
    # empty lap waiting after lap_and_pause()
    PLACEHOLDER = "placeholder"


@dataclass(frozen=True)
class LapEntry:
    kind: LapKind
    duration_ns: int = 0


@dataclass
class _Measurements:
    """Mutable record shared by the state handles.

    ``accumulated_ns`` is always the sum of the COMPLETED entries and
    ``running_since`` is set only while the stopwatch is running.
    """

    clock: Clock
    entries: List[LapEntry] = field(default_factory=list)
    running_since: Optional[int] = None
    accumulated_ns: int = 0

    def close_lap(self) -> int:
        """Finish the open lap as a completed one and return its duration."""
        assert self.running_since is not None
        now = self.clock()
        lap = now - self.running_since
        self.entries.append(LapEntry(LapKind.COMPLETED, lap))
        self.accumulated_ns += lap
        self.running_since = now
        return lap

    def completed(self) -> Tuple[int, ...]:
        return tuple(e.duration_ns for e in self.entries if e.kind is LapKind.COMPLETED)


class Stopwatch:
    """Read access common to every state."""

    def __init__(self, measurements: _Measurements) -> None:
        self._measurements: Optional[_Measurements] = measurements

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @staticmethod
    def new(clock: Optional[Clock] = None) -> InitializedStopwatch:
        """Create a stopwatch without starting it.

        ``clock`` defaults to the clock named by the package configuration.
        """
        if clock is None:
            clock = get_config().make_clock()
        return InitializedStopwatch(_Measurements(clock=clock))

    @staticmethod
    def start_new(clock: Optional[Clock] = None) -> RunningStopwatch:
        """Create a stopwatch and start it."""
        return Stopwatch.new(clock).start()

    # ------------------------------------------------------------------
    # Handle bookkeeping
    # ------------------------------------------------------------------
    def _live(self) -> _Measurements:
        if self._measurements is None:
            raise ConsumedStopwatchError(type(self).__name__)
        return self._measurements

    def _hand_over(self) -> _Measurements:
        measurements = self._live()
        self._measurements = None
        return measurements

    # ------------------------------------------------------------------
    # Readouts
    # ------------------------------------------------------------------
    def total_time(self) -> int:
        """Total measured time in nanoseconds.

        While running this includes the open lap up to now. Otherwise it is
        the sum of all completed laps.
        """
        m = self._live()
        if m.running_since is None:
            return m.accumulated_ns
        return m.accumulated_ns + (m.clock() - m.running_since)

    def laps(self) -> Tuple[int, ...]:
        """Completed lap durations in the order they were timed."""
        return self._live().completed()

    def number_of_laps(self) -> int:
        return len(self.laps())

    def is_running(self) -> bool:
        return self._live().running_since is not None

    def __str__(self) -> str:
        return f"{self.total_time()}ns"

    def __repr__(self) -> str:
        if self._measurements is None:
            return f"<{type(self).__name__} (consumed)>"
        return f"<{type(self).__name__} laps={self.number_of_laps()} total={self}>"


class InitializedStopwatch(Stopwatch):
    """A stopwatch that has not been started yet."""

    def start(self) -> RunningStopwatch:
        m = self._hand_over()
        m.running_since = m.clock()
        logger.debug("stopwatch started at %d", m.running_since)
        return RunningStopwatch(m)


class RunningStopwatch(Stopwatch):
    """A stopwatch that is accumulating time into its open lap."""

    def lap(self) -> int:
        """Start a new lap. Save the last lap's duration and return it."""
        lap = self._live().close_lap()
        logger.debug("lap recorded: %dns", lap)
        return lap

    def pause(self) -> PausedStopwatch:
        """Suspend the open lap; ``resume()`` continues it."""
        m = self._hand_over()
        assert m.running_since is not None
        elapsed = m.clock() - m.running_since
        m.entries.append(LapEntry(LapKind.PENDING, elapsed))
        m.running_since = None
        logger.debug("stopwatch paused after %dns in open lap", elapsed)
        return PausedStopwatch(m)

    def lap_and_pause(self) -> Tuple[int, PausedStopwatch]:
        """Finish the open lap, then pause with a fresh empty lap pending."""
        m = self._hand_over()
        lap = m.close_lap()
        m.entries.append(LapEntry(LapKind.PLACEHOLDER))
        m.running_since = None
        logger.debug("lap recorded: %dns; stopwatch paused", lap)
        return lap, PausedStopwatch(m)

    def lap_and_stop(self) -> Tuple[int, StoppedStopwatch]:
        """Finish the open lap, then stop."""
        m = self._hand_over()
        lap = m.close_lap()
        m.running_since = None
        logger.debug("lap recorded: %dns; stopwatch stopped", lap)
        return lap, StoppedStopwatch(m)

    def stop(self) -> StoppedStopwatch:
        """Stop without recording the open lap.

        Laps and the total time are preserved; the time elapsed since the last
        lap is not added to them.
        """
        m = self._hand_over()
        m.running_since = None
        logger.debug("stopwatch stopped, total %dns", m.accumulated_ns)
        return StoppedStopwatch(m)


class PausedStopwatch(Stopwatch):
    """A stopwatch whose open lap is suspended."""

    def resume(self) -> RunningStopwatch:
        m = self._hand_over()
        pending = m.entries.pop()
        assert pending.kind is not LapKind.COMPLETED
        m.running_since = m.clock() - pending.duration_ns
        logger.debug("stopwatch resumed with %dns already in open lap", pending.duration_ns)
        return RunningStopwatch(m)

    def stop(self) -> StoppedStopwatch:
        """Stop, recording the suspended lap if it had any time in it.

        After ``pause()`` the suspended time becomes a completed lap. After
        ``lap_and_pause()`` the pending lap is empty and is dropped.
        """
        m = self._hand_over()
        pending = m.entries.pop()
        assert pending.kind is not LapKind.COMPLETED
        if pending.kind is LapKind.PENDING:
            m.entries.append(LapEntry(LapKind.COMPLETED, pending.duration_ns))
            m.accumulated_ns += pending.duration_ns
        logger.debug("stopwatch stopped from pause, total %dns", m.accumulated_ns)
        return StoppedStopwatch(m)


class StoppedStopwatch(Stopwatch):
    """A stopped stopwatch; its readouts are frozen."""

    def reset(self) -> InitializedStopwatch:
        m = self._hand_over()
        m.entries.clear()
        m.accumulated_ns = 0
        m.running_since = None
        logger.debug("stopwatch reset")
        return InitializedStopwatch(m)

    def restart(self) -> RunningStopwatch:
        return self.reset().start()


new = Stopwatch.new
start_new = Stopwatch.start_new


__all__ = [
    "LapEntry",
    "LapKind",
    "Stopwatch",
    "InitializedStopwatch",
    "RunningStopwatch",
    "PausedStopwatch",
    "StoppedStopwatch",
    "new",
    "start_new",
]
