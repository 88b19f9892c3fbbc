import pytest

import fine_grained.config as config_mod


class FakeClock:
    """Manually driven nanosecond clock."""

    def __init__(self, start: int = 1_000) -> None:
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ns: int) -> None:
        self.now += ns


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch):
    """
    Keep the config singleton from leaking env overrides between tests.
    """
    monkeypatch.delenv("FINE_GRAINED_CLOCK", raising=False)
    monkeypatch.delenv("FINE_GRAINED_LOG_LEVEL", raising=False)
    config_mod._config_singleton = None
    yield
    config_mod._config_singleton = None
