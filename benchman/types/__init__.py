from benchman.types.base_int_enum import BaseIntEnum
from benchman.types.highlight_rule_type import HighlightRuleType
from benchman.types.report_order_type import ReportOrderType
from benchman.types.time_unit import TimeUnit

__all__ = [
    "HighlightRuleType",
    "ReportOrderType",
    "TimeUnit",
    "BaseIntEnum",
]
