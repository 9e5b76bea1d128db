from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

import pandas as pd

from benchman.constants import DEPTH_STR, LABEL_STR, PARENT_STR, SUMMARY_FIELDS
from benchman.stats import StatisticsSummary
from benchman.types import ReportOrderType


@dataclass
class ReportEntry:
    label: str
    summary: StatisticsSummary
    depth: int = 0
    parent: Optional[str] = None
    children: List["ReportEntry"] = field(default_factory=list)
    # set by the highlight rule, only affects rendering
    highlighted: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label,
            "parent": self.parent,
            "depth": self.depth,
            "highlighted": self.highlighted,
            **self.summary.to_dict(),
        }


class Report:
    """
    Snapshot of the statistics of every label, in display order.

    Iterating a report walks the entries depth first, parents before their
    children, which is also the order in which they are rendered.
    """

    def __init__(
        self,
        tag: str,
        roots: List[ReportEntry],
        order: ReportOrderType = ReportOrderType.INSERTION,
    ) -> None:
        self._tag = tag
        self._roots = roots
        self._order = order
        self._entries = {entry.label: entry for entry in self._walk(self._roots)}

    @staticmethod
    def _walk(entries: List[ReportEntry]) -> Iterator[ReportEntry]:
        for entry in entries:
            yield entry
            yield from Report._walk(entry.children)

    @property
    def tag(self) -> str:
        return self._tag

    @property
    def order(self) -> ReportOrderType:
        return self._order

    @property
    def roots(self) -> List[ReportEntry]:
        return self._roots

    @property
    def is_empty(self) -> bool:
        return len(self._entries) == 0

    def __iter__(self) -> Iterator[ReportEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, label: str) -> bool:
        return label in self._entries

    def labels(self) -> List[str]:
        return list(self._entries)

    def get(self, label: str) -> Optional[ReportEntry]:
        return self._entries.get(label)

    def summaries(self) -> Dict[str, StatisticsSummary]:
        return {label: entry.summary for label, entry in self._entries.items()}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tag": self._tag,
            "order": str(self._order),
            "entries": [entry.to_dict() for entry in self],
        }

    def to_df(self) -> pd.DataFrame:
        rows = [
            [entry.label, entry.parent, entry.depth]
            + [getattr(entry.summary, name) for name in SUMMARY_FIELDS]
            for entry in self
        ]
        return pd.DataFrame(
            rows, columns=[LABEL_STR, PARENT_STR, DEPTH_STR, *SUMMARY_FIELDS]
        )
