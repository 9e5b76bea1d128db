"""One-shot benchmarking: scoped stopwatches feeding a shared, label keyed stats store."""

from benchman.benchman import BenchMan
from benchman.config import (
    BenchManConfig,
    NoopHighlightRuleConfig,
    RelativeHighlightRuleConfig,
    ReportConfig,
    ThresholdHighlightRuleConfig,
)
from benchman.report import Report, ReportEntry
from benchman.stats import StatisticsSummary, percentile, summarize
from benchman.stopwatch import Stopwatch
from benchman.store import SampleStore
from benchman.types import ReportOrderType

__all__ = [
    "BenchMan",
    "BenchManConfig",
    "NoopHighlightRuleConfig",
    "RelativeHighlightRuleConfig",
    "Report",
    "ReportConfig",
    "ReportEntry",
    "ReportOrderType",
    "SampleStore",
    "StatisticsSummary",
    "Stopwatch",
    "ThresholdHighlightRuleConfig",
    "percentile",
    "summarize",
]
