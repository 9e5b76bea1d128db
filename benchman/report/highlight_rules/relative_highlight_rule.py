from typing import List, Set

import numpy as np

from benchman.report.highlight_rules.base_highlight_rule import BaseHighlightRule
from benchman.report.report import ReportEntry


class RelativeHighlightRule(BaseHighlightRule):
    """Flags labels that are much slower than the typical label of the run."""

    def apply(self, entries: List[ReportEntry]) -> Set[str]:
        values = self._get_metric_values(entries)

        # a single label has no peers to be compared with
        if len(values) < 2:
            return set()

        baseline = float(np.median(list(values.values())))
        return {
            label
            for label, value in values.items()
            if value > self._config.factor * baseline
        }
