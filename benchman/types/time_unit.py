from benchman.types.base_int_enum import BaseIntEnum


class TimeUnit(BaseIntEnum):
    S = 1
    MS = 2
    US = 3
    NS = 4

    @property
    def scale(self) -> float:
        # multiplier from seconds
        return {
            TimeUnit.S: 1.0,
            TimeUnit.MS: 1e3,
            TimeUnit.US: 1e6,
            TimeUnit.NS: 1e9,
        }[self]
