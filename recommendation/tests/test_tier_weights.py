"""
Test the tier weight table.
"""

import logging

import pytest

from recommendation.logic import (
    AssessmentTier,
    DEFAULT_TIER_WEIGHTS,
    TierWeightConfigurationError,
    TierWeightTable,
)
from recommendation.logic.tier_weights import validate_tier_weights


def _table(**overrides):
    weights = DEFAULT_TIER_WEIGHTS.as_dict()
    weights.update(overrides)
    return weights


@pytest.mark.parametrize("tier", list(AssessmentTier))
def test_default_tiers_sum_to_100(tier):
    assert DEFAULT_TIER_WEIGHTS.tier_total(tier) == pytest.approx(100)


def test_basic_tier_uses_core_components_only():
    weights = DEFAULT_TIER_WEIGHTS.weights_for("basic")
    assert weights["subjects"] == 35
    assert weights["interests"] == 35
    assert weights["vision"] == 30
    assert weights["riasec"] is None
    assert weights["cvq"] is None
    assert weights["kolb"] is None


def test_premium_and_group_share_weights():
    assert DEFAULT_TIER_WEIGHTS.weights_for("premium") == DEFAULT_TIER_WEIGHTS.weights_for("group")
    assert DEFAULT_TIER_WEIGHTS.effective_weight("premium", "riasec") == 30
    assert DEFAULT_TIER_WEIGHTS.effective_weight("premium", "interests") == 0


def test_effective_weight_none_disables_component():
    assert DEFAULT_TIER_WEIGHTS.effective_weight(AssessmentTier.BASIC, "riasec", 30) is None


@pytest.mark.parametrize("tier", list(AssessmentTier))
def test_retired_market_component_is_disabled_in_every_tier(tier):
    assert DEFAULT_TIER_WEIGHTS.effective_weight(tier, "market", 15) is None


def test_effective_weight_falls_back_to_stored_default():
    table = TierWeightTable(_table(basic={"subjects": 50, "interests": 50}))
    assert table.effective_weight("basic", "vision", 30) == 30
    assert table.effective_weight("basic", "vision") is None
    assert table.effective_weight("basic", "subjects", 10) == 50


def test_invalid_sum_is_rejected_with_tier_name():
    with pytest.raises(TierWeightConfigurationError) as exc_info:
        TierWeightTable(_table(basic={"subjects": 35, "interests": 35, "vision": 20}))

    assert len(exc_info.value.errors) == 1
    assert 'Tier "basic"' in exc_info.value.errors[0]
    assert "90%" in exc_info.value.errors[0]


def test_every_bad_tier_is_reported():
    with pytest.raises(TierWeightConfigurationError) as exc_info:
        TierWeightTable(_table(basic={"subjects": 10}, premium={"subjects": 120}))

    messages = "\n".join(exc_info.value.errors)
    assert 'Tier "basic"' in messages
    assert 'Tier "premium"' in messages
    assert "outside 0-100" in messages


def test_missing_tier_is_rejected():
    weights = DEFAULT_TIER_WEIGHTS.as_dict()
    del weights["group"]
    with pytest.raises(TierWeightConfigurationError, match="group"):
        TierWeightTable(weights)


def test_sum_tolerance():
    table = TierWeightTable(_table(basic={"subjects": 33.334, "interests": 33.333, "vision": 33.333}))
    assert table.tier_total("basic") == pytest.approx(100)


def test_validation_can_be_deferred():
    table = TierWeightTable(_table(basic={"subjects": 10}), validate=False)
    with pytest.raises(TierWeightConfigurationError):
        table.validate()


def test_table_is_read_only():
    weights = DEFAULT_TIER_WEIGHTS.weights_for("basic")
    weights["subjects"] = 99
    assert DEFAULT_TIER_WEIGHTS.effective_weight("basic", "subjects") == 35


def test_grants_premium():
    assert TierWeightTable.grants_premium("premium")
    assert TierWeightTable.grants_premium(AssessmentTier.GROUP)
    assert not TierWeightTable.grants_premium("basic")


def test_startup_validation_logs_totals(caplog):
    with caplog.at_level(logging.INFO, logger="recommendation.logic.tier_weights"):
        validate_tier_weights()
    assert "Tier 'basic' weights validated (total=100)" in caplog.text
