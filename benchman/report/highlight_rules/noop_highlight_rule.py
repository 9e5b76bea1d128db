from typing import List, Set

from benchman.report.highlight_rules.base_highlight_rule import BaseHighlightRule
from benchman.report.report import ReportEntry


class NoopHighlightRule(BaseHighlightRule):
    def apply(self, entries: List[ReportEntry]) -> Set[str]:
        return set()
