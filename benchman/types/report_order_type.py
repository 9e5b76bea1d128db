from benchman.types.base_int_enum import BaseIntEnum


class ReportOrderType(BaseIntEnum):
    # flat list in first-use order
    INSERTION = 1
    # parent label blocks contain their children
    NESTED = 2
