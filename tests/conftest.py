"""
Pytest configuration and shared fixtures for benchman tests.
"""
import pytest

from benchman import BenchMan, BenchManConfig, NoopHighlightRuleConfig, ReportConfig


class FakeClock:
    """Deterministic clock; every test advances it explicitly."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def plain_config() -> BenchManConfig:
    """Config without colors or highlighting, for exact text assertions."""
    return BenchManConfig(
        report_config=ReportConfig(
            color=False,
            highlight_rule_config=NoopHighlightRuleConfig(),
        )
    )


@pytest.fixture
def benchman(clock: FakeClock, plain_config: BenchManConfig) -> BenchMan:
    return BenchMan("test", config=plain_config, clock=clock)
