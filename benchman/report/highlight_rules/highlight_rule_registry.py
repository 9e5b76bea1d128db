from benchman.report.highlight_rules.noop_highlight_rule import NoopHighlightRule
from benchman.report.highlight_rules.relative_highlight_rule import (
    RelativeHighlightRule,
)
from benchman.report.highlight_rules.threshold_highlight_rule import (
    ThresholdHighlightRule,
)
from benchman.types import HighlightRuleType
from benchman.utils.base_registry import BaseRegistry


class HighlightRuleRegistry(BaseRegistry):
    @classmethod
    def get_key_from_str(cls, key_str: str) -> HighlightRuleType:
        return HighlightRuleType.from_str(key_str)


HighlightRuleRegistry.register(HighlightRuleType.NOOP, NoopHighlightRule)
HighlightRuleRegistry.register(HighlightRuleType.THRESHOLD, ThresholdHighlightRule)
HighlightRuleRegistry.register(HighlightRuleType.RELATIVE, RelativeHighlightRule)
