from abc import ABC, abstractmethod
from typing import Dict, List, Set

from benchman.config import BaseHighlightRuleConfig
from benchman.report.report import ReportEntry


class BaseHighlightRule(ABC):
    def __init__(self, config: BaseHighlightRuleConfig) -> None:
        self._config = config

    def _get_metric_values(self, entries: List[ReportEntry]) -> Dict[str, float]:
        return {
            entry.label: entry.summary.get(self._config.metric)
            for entry in entries
            if entry.summary.has_data
        }

    @abstractmethod
    def apply(self, entries: List[ReportEntry]) -> Set[str]:
        """Returns the labels that should be emphasized."""
        pass
