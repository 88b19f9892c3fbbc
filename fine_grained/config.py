"""Runtime settings for the stopwatch package.

Values come from environment variables when set:
    FINE_GRAINED_CLOCK      clock name or 'module:function' target
    FINE_GRAINED_LOG_LEVEL  logging level used by the CLI
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from pydantic import BaseModel, Field

from .clock import Clock, resolve_clock
from .errors import InvalidLogLevelError


def resolve_log_level(name: str) -> int:
    """Map a level name such as ``"debug"`` to its ``logging`` level number."""
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise InvalidLogLevelError(
            f"Unknown log level '{name}'. Use one of DEBUG, INFO, WARNING, ERROR, CRITICAL."
        )
    return level


class StopwatchConfig(BaseModel):
    clock: str = Field(default_factory=lambda: os.getenv("FINE_GRAINED_CLOCK", "perf_counter"))
    log_level: str = Field(default_factory=lambda: os.getenv("FINE_GRAINED_LOG_LEVEL", "WARNING"))

    def make_clock(self) -> Clock:
        return resolve_clock(self.clock)

    def make_log_level(self) -> int:
        return resolve_log_level(self.log_level)


# ---------- Singleton access ----------

_config_singleton: Optional[StopwatchConfig] = None


def get_config(force_refresh: bool = False) -> StopwatchConfig:
    """Return a cached StopwatchConfig built from the environment."""
    global _config_singleton
    if force_refresh or _config_singleton is None:
        _config_singleton = StopwatchConfig()
    return _config_singleton


__all__ = ["StopwatchConfig", "get_config", "resolve_log_level"]
