from collections import defaultdict
from typing import Dict, List, Optional, Sequence, Union

from benchman.config import ReportConfig
from benchman.logger import init_logger
from benchman.report.highlight_rules import HighlightRuleRegistry
from benchman.report.report import Report, ReportEntry
from benchman.stats import summarize
from benchman.store import SampleStore
from benchman.types import ReportOrderType

logger = init_logger(__name__)


class ReportBuilder:
    def __init__(self, config: ReportConfig) -> None:
        self._config = config
        self._highlight_rule = HighlightRuleRegistry.get(
            config.highlight_rule_config.get_type(),
            config.highlight_rule_config,
        )

    def _order_labels(
        self, labels: List[str], label_order: Optional[Sequence[str]]
    ) -> List[str]:
        if not label_order:
            return labels

        known_labels = set(labels)
        ranks = {}
        for label in label_order:
            if label not in known_labels:
                logger.debug(f"Ignoring unknown label {label} in label order")
                continue
            ranks.setdefault(label, len(ranks))

        first_use = {label: i for i, label in enumerate(labels)}
        # listed labels first, the rest keep their first-use order
        return sorted(
            labels,
            key=lambda label: (
                (0, ranks[label]) if label in ranks else (1, first_use[label])
            ),
        )

    def _build_nested(
        self, entries: Dict[str, ReportEntry], labels: List[str]
    ) -> List[ReportEntry]:
        roots = []
        children = defaultdict(list)
        for label in labels:
            entry = entries[label]
            if entry.parent is None:
                roots.append(entry)
            else:
                children[entry.parent].append(entry)

        def attach(entry: ReportEntry, depth: int) -> None:
            entry.depth = depth
            entry.children = children[entry.label]
            for child in entry.children:
                attach(child, depth + 1)

        for root in roots:
            attach(root, 0)

        return roots

    def build(
        self,
        store: SampleStore,
        tag: str,
        order: Optional[Union[ReportOrderType, str]] = None,
        label_order: Optional[Sequence[str]] = None,
    ) -> Report:
        if order is None:
            order = self._config.get_order()
        elif isinstance(order, str):
            order = ReportOrderType.from_str(order)

        # one consistent view of the label forest
        parents = store.get_parents()
        labels = self._order_labels(list(parents), label_order)

        entries = {
            label: ReportEntry(
                label=label,
                summary=summarize(store.snapshot(label)),
                parent=parents[label],
            )
            for label in labels
        }

        if order == ReportOrderType.NESTED:
            roots = self._build_nested(entries, labels)
        else:
            roots = [entries[label] for label in labels]

        for label in self._highlight_rule.apply(list(entries.values())):
            entries[label].highlighted = True

        logger.debug(f"Built {str(order)} report {tag} with {len(entries)} labels")

        return Report(tag, roots, order)
