from abc import ABC
from dataclasses import dataclass
from typing import Any

from benchman.config.utils import get_all_subclasses


@dataclass
class BasePolyConfig(ABC):

    @classmethod
    def get_class_from_type_string(cls, type_str: str) -> Any:
        for subclass in get_all_subclasses(cls):
            if str(subclass.get_type()) == type_str:
                return subclass
        raise ValueError(f"[{cls.__name__}] Invalid type string: {type_str}")
