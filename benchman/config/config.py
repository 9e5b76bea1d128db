from dataclasses import dataclass, field, fields
from typing import Any, Dict

from benchman.config.base_poly_config import BasePolyConfig
from benchman.config.utils import (
    dataclass_to_dict,
    get_inner_type,
    is_optional,
    is_subclass,
)
from benchman.constants import HIGHLIGHT_METRICS
from benchman.logger import init_logger
from benchman.types import HighlightRuleType, ReportOrderType, TimeUnit

logger = init_logger(__name__)


@dataclass
class BaseHighlightRuleConfig(BasePolyConfig):
    metric: str = field(
        default="p95",
        metadata={"help": "Statistic compared by the highlight rule."},
    )

    def __post_init__(self):
        if self.metric not in HIGHLIGHT_METRICS:
            raise ValueError(
                f"Invalid highlight metric: {self.metric},"
                f" expected one of {HIGHLIGHT_METRICS}"
            )


@dataclass
class NoopHighlightRuleConfig(BaseHighlightRuleConfig):

    @staticmethod
    def get_type():
        return HighlightRuleType.NOOP


@dataclass
class ThresholdHighlightRuleConfig(BaseHighlightRuleConfig):
    threshold: float = field(
        default=0.1,
        metadata={"help": "Highlight labels whose metric exceeds this many seconds."},
    )

    def __post_init__(self):
        super().__post_init__()
        if self.threshold < 0:
            raise ValueError(f"Threshold must be non-negative, got {self.threshold}")

    @staticmethod
    def get_type():
        return HighlightRuleType.THRESHOLD


@dataclass
class RelativeHighlightRuleConfig(BaseHighlightRuleConfig):
    factor: float = field(
        default=2.0,
        metadata={
            "help": "Highlight labels whose metric exceeds this multiple of the median across labels."
        },
    )

    def __post_init__(self):
        super().__post_init__()
        if self.factor <= 0:
            raise ValueError(f"Factor must be positive, got {self.factor}")

    @staticmethod
    def get_type():
        return HighlightRuleType.RELATIVE


@dataclass
class ReportConfig:
    color: bool = field(
        default=True,
        metadata={"help": "Whether to emit ANSI colors when rendering."},
    )
    time_unit: str = field(
        default="ms",
        metadata={"help": "Unit used when rendering durations (s, ms, us, ns)."},
    )
    order: str = field(
        default="nested",
        metadata={"help": "Label ordering of the report (insertion, nested)."},
    )
    indent: int = field(
        default=2,
        metadata={"help": "Spaces of indentation per nesting level."},
    )
    save_table_to_wandb: bool = field(
        default=True,
        metadata={"help": "Whether to log the stats table to an active wandb run."},
    )
    highlight_rule_config: BaseHighlightRuleConfig = field(
        default_factory=RelativeHighlightRuleConfig,
        metadata={"help": "Highlight rule config."},
    )

    def __post_init__(self):
        # fail early on typos
        TimeUnit.from_str(self.time_unit)
        ReportOrderType.from_str(self.order)
        if self.indent < 0:
            raise ValueError(f"Indent must be non-negative, got {self.indent}")

    def get_time_unit(self) -> TimeUnit:
        return TimeUnit.from_str(self.time_unit)

    def get_order(self) -> ReportOrderType:
        return ReportOrderType.from_str(self.order)


@dataclass
class BenchManConfig:
    tag: str = field(
        default="benchman",
        metadata={"help": "Name printed at the top of the report."},
    )
    track_nesting: bool = field(
        default=True,
        metadata={
            "help": "Whether stopwatches opened inside another stopwatch's scope become its children."
        },
    )
    report_config: ReportConfig = field(
        default_factory=ReportConfig,
        metadata={"help": "Report config."},
    )

    def to_dict(self) -> Dict[str, Any]:
        return dataclass_to_dict(self)

    @classmethod
    def create_from_dict(cls, config_dict: Dict[str, Any]) -> "BenchManConfig":
        return _create_dataclass(cls, config_dict)


def _create_dataclass(cls, config_dict: Dict[str, Any]) -> Any:
    args = {}

    for _field in fields(cls):
        if _field.name not in config_dict:
            continue

        value = config_dict[_field.name]
        field_type = _field.type
        if is_optional(field_type):
            field_type = get_inner_type(field_type)

        if is_subclass(field_type, BasePolyConfig) and isinstance(value, dict):
            value = dict(value)
            type_str = value.pop("name", None)
            if type_str is None:
                subclass = type(_field.default_factory())
            else:
                subclass = field_type.get_class_from_type_string(type_str)
            args[_field.name] = _create_dataclass(subclass, value)
        elif hasattr(field_type, "__dataclass_fields__") and isinstance(value, dict):
            args[_field.name] = _create_dataclass(field_type, value)
        else:
            args[_field.name] = value

    unknown_keys = set(config_dict) - {f.name for f in fields(cls)} - {"name"}
    if unknown_keys:
        logger.warning(f"Ignoring unknown {cls.__name__} keys: {sorted(unknown_keys)}")

    return cls(**args)
