# tests/unit/test_config.py
import logging

import pytest

from fine_grained import (
    InvalidLogLevelError,
    UnknownClockError,
    get_config,
    now_monotonic_ns,
    now_perf_ns,
    resolve_log_level,
)
from fine_grained.config import StopwatchConfig


def test_defaults():
    cfg = get_config(force_refresh=True)
    assert cfg.clock == "perf_counter"
    assert cfg.log_level == "WARNING"
    assert cfg.make_clock() is now_perf_ns


def test_env_overrides_take_precedence(monkeypatch):
    monkeypatch.setenv("FINE_GRAINED_CLOCK", "monotonic")
    monkeypatch.setenv("FINE_GRAINED_LOG_LEVEL", "DEBUG")

    cfg = get_config(force_refresh=True)

    assert cfg.clock == "monotonic"
    assert cfg.log_level == "DEBUG"
    assert cfg.make_clock() is now_monotonic_ns


def test_singleton_is_cached(monkeypatch):
    first = get_config()
    # Changing the env does not affect the cached instance until a refresh
    monkeypatch.setenv("FINE_GRAINED_CLOCK", "monotonic")
    assert get_config() is first
    assert get_config(force_refresh=True).clock == "monotonic"


def test_explicit_values_win_over_env(monkeypatch):
    monkeypatch.setenv("FINE_GRAINED_CLOCK", "monotonic")
    assert StopwatchConfig(clock="perf_counter").clock == "perf_counter"


def test_bad_clock_surfaces_on_make_clock():
    cfg = StopwatchConfig(clock="sundial")
    with pytest.raises(UnknownClockError):
        cfg.make_clock()


@pytest.mark.parametrize("name, level", [("DEBUG", logging.DEBUG), ("info", logging.INFO), (" warning ", logging.WARNING)])
def test_log_level_names_resolve(name, level):
    assert resolve_log_level(name) == level


@pytest.mark.parametrize("name", ["verbose", "loud", "", "5"])
def test_unknown_log_level_raises(name):
    with pytest.raises(InvalidLogLevelError):
        resolve_log_level(name)


def test_bad_log_level_from_env_surfaces_on_make_log_level(monkeypatch):
    monkeypatch.setenv("FINE_GRAINED_LOG_LEVEL", "verbose")
    with pytest.raises(ValueError):
        get_config(force_refresh=True).make_log_level()
