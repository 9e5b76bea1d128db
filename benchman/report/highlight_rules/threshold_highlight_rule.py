from typing import List, Set

from benchman.report.highlight_rules.base_highlight_rule import BaseHighlightRule
from benchman.report.report import ReportEntry


class ThresholdHighlightRule(BaseHighlightRule):
    def apply(self, entries: List[ReportEntry]) -> Set[str]:
        return {
            label
            for label, value in self._get_metric_values(entries).items()
            if value > self._config.threshold
        }
