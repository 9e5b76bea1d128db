from benchman.stats.statistics_summary import StatisticsSummary, percentile, summarize

__all__ = ["StatisticsSummary", "percentile", "summarize"]
