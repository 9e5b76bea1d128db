from benchman.config.base_poly_config import BasePolyConfig
from benchman.config.config import (
    BaseHighlightRuleConfig,
    BenchManConfig,
    NoopHighlightRuleConfig,
    RelativeHighlightRuleConfig,
    ReportConfig,
    ThresholdHighlightRuleConfig,
)

__all__ = [
    "BaseHighlightRuleConfig",
    "BasePolyConfig",
    "BenchManConfig",
    "NoopHighlightRuleConfig",
    "RelativeHighlightRuleConfig",
    "ReportConfig",
    "ThresholdHighlightRuleConfig",
]
