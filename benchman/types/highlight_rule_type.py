from benchman.types.base_int_enum import BaseIntEnum


class HighlightRuleType(BaseIntEnum):
    NOOP = 1
    THRESHOLD = 2
    RELATIVE = 3
