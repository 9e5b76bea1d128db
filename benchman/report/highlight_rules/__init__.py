from benchman.report.highlight_rules.base_highlight_rule import BaseHighlightRule
from benchman.report.highlight_rules.highlight_rule_registry import (
    HighlightRuleRegistry,
)

__all__ = ["BaseHighlightRule", "HighlightRuleRegistry"]
