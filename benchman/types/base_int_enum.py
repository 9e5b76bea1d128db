from enum import IntEnum


class BaseIntEnum(IntEnum):
    def __str__(self):
        return self.name.lower()

    @classmethod
    def from_str(cls, string: str):
        for member in cls:
            if str(member) == string.lower():
                return member
        raise ValueError(f"Invalid {cls.__name__}: {string}")
