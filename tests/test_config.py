import pytest

from benchman import (
    BenchManConfig,
    NoopHighlightRuleConfig,
    RelativeHighlightRuleConfig,
    ReportConfig,
    ThresholdHighlightRuleConfig,
)
from benchman.config import BaseHighlightRuleConfig
from benchman.report.highlight_rules import HighlightRuleRegistry
from benchman.report.highlight_rules.threshold_highlight_rule import (
    ThresholdHighlightRule,
)
from benchman.types import HighlightRuleType, ReportOrderType, TimeUnit


def test_defaults() -> None:
    config = BenchManConfig()

    assert config.tag == "benchman"
    assert config.track_nesting
    assert config.report_config.get_time_unit() == TimeUnit.MS
    assert config.report_config.get_order() == ReportOrderType.NESTED
    assert isinstance(
        config.report_config.highlight_rule_config, RelativeHighlightRuleConfig
    )


def test_to_dict_round_trip() -> None:
    config = BenchManConfig(
        tag="run",
        report_config=ReportConfig(
            color=False,
            time_unit="us",
            highlight_rule_config=ThresholdHighlightRuleConfig(threshold=0.5),
        ),
    )
    config_dict = config.to_dict()

    assert config_dict["report_config"]["highlight_rule_config"]["name"] == "threshold"
    assert BenchManConfig.create_from_dict(config_dict) == config


def test_create_from_partial_dict() -> None:
    config = BenchManConfig.create_from_dict(
        {"report_config": {"highlight_rule_config": {"factor": 3.0}}}
    )

    assert config.tag == "benchman"
    assert config.report_config.highlight_rule_config == RelativeHighlightRuleConfig(
        factor=3.0
    )


@pytest.mark.parametrize(
    "kwargs",
    [
        {"time_unit": "minutes"},
        {"order": "random"},
        {"indent": -1},
    ],
)
def test_invalid_report_config(kwargs) -> None:
    with pytest.raises(ValueError):
        ReportConfig(**kwargs)


def test_invalid_highlight_configs() -> None:
    with pytest.raises(ValueError):
        ThresholdHighlightRuleConfig(threshold=-1.0)
    with pytest.raises(ValueError):
        RelativeHighlightRuleConfig(factor=0.0)
    with pytest.raises(ValueError):
        NoopHighlightRuleConfig(metric="total")


def test_unknown_poly_type_string() -> None:
    with pytest.raises(ValueError):
        BaseHighlightRuleConfig.get_class_from_type_string("fastest")


def test_enum_from_str() -> None:
    assert ReportOrderType.from_str("NESTED") == ReportOrderType.NESTED
    assert str(TimeUnit.US) == "us"
    with pytest.raises(ValueError):
        HighlightRuleType.from_str("bogus")


def test_registry_builds_rules() -> None:
    config = ThresholdHighlightRuleConfig()
    rule = HighlightRuleRegistry.get(config.get_type(), config)

    assert isinstance(rule, ThresholdHighlightRule)
    assert isinstance(
        HighlightRuleRegistry.get_from_str("threshold", config), ThresholdHighlightRule
    )
    with pytest.raises(ValueError):
        HighlightRuleRegistry.get_from_str("bogus", config)
