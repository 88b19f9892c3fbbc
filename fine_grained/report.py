"""Structured snapshot of a stopwatch's readouts."""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field

from .stopwatch import Stopwatch


class StopwatchReport(BaseModel):
    """Point-in-time readouts of a stopwatch, all in nanoseconds."""

    laps_ns: List[int] = Field(default_factory=list)
    total_ns: int = 0
    number_of_laps: int = 0
    running: bool = False

    @classmethod
    def from_stopwatch(cls, stopwatch: Stopwatch) -> "StopwatchReport":
        laps = list(stopwatch.laps())
        return cls(
            laps_ns=laps,
            total_ns=stopwatch.total_time(),
            number_of_laps=len(laps),
            running=stopwatch.is_running(),
        )


def report_dump(report: StopwatchReport) -> Dict[str, Any]:
    """Return a plain ``dict`` for ``report`` under Pydantic v1 or v2."""

    if hasattr(report, "model_dump"):
        return report.model_dump()  # type: ignore[return-value]
    return report.dict()  # type: ignore[return-value]


__all__ = ["StopwatchReport", "report_dump"]
