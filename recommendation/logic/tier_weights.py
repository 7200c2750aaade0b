"""
Tier Weight Table

Maps an assessment tier to component-weight overrides. Different tiers unlock
different instruments, so weights are redistributed per tier to keep overall
scores comparable.

The table is immutable and validated on construction; the default table is
built at import so a mis-summed configuration fails at process start.
"""

import logging
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Union

from .constants import (
    AssessmentTier,
    PREMIUM_TIERS,
    TIER_WEIGHT_OVERRIDES,
    TOTAL_WEIGHT,
    WEIGHT_EPSILON,
)
from .errors import TierWeightConfigurationError

logger = logging.getLogger(__name__)

TierLike = Union[AssessmentTier, str]


class TierWeightTable:
    """
    Immutable tier -> component key -> weight configuration.

    A weight of None marks the component as unused in that tier. A component
    key the tier does not mention keeps its stored default weight.
    """

    def __init__(
        self,
        overrides: Mapping[str, Mapping[str, Optional[float]]],
        validate: bool = True,
    ):
        self._overrides = MappingProxyType({
            AssessmentTier(tier): MappingProxyType(dict(weights))
            for tier, weights in overrides.items()
        })
        if validate:
            self.validate()

    def validate(self) -> None:
        """Raise TierWeightConfigurationError unless every tier sums to 100."""
        errors = []
        for tier in AssessmentTier:
            weights = self._overrides.get(tier)
            if weights is None:
                errors.append(f'Tier "{tier.value}" has no weight configuration')
                continue
            for key, weight in weights.items():
                if weight is not None and not 0 <= weight <= TOTAL_WEIGHT:
                    errors.append(
                        f'Tier "{tier.value}" component "{key}" weight {weight} is outside 0-100'
                    )
            total = self.tier_total(tier)
            if abs(total - TOTAL_WEIGHT) > WEIGHT_EPSILON:
                errors.append(
                    f'Tier "{tier.value}" weights sum to {total:g}% instead of 100%. '
                    f"Components: {dict(weights)}"
                )
        if errors:
            raise TierWeightConfigurationError(errors)

    def tier_total(self, tier: TierLike) -> float:
        weights = self._overrides.get(AssessmentTier(tier), {})
        return sum(weight for weight in weights.values() if weight is not None)

    def weights_for(self, tier: TierLike) -> Dict[str, Optional[float]]:
        return dict(self._overrides.get(AssessmentTier(tier), {}))

    def effective_weight(
        self,
        tier: TierLike,
        component_key: str,
        default_weight: Optional[float] = None,
    ) -> Optional[float]:
        """
        Effective weight of a component for a tier.

        Returns:
            The tier override, None when the tier disables the component, or
            default_weight when the tier does not mention the component.
        """
        weights = self._overrides.get(AssessmentTier(tier), {})
        if component_key in weights:
            return weights[component_key]
        return default_weight

    @staticmethod
    def grants_premium(tier: TierLike) -> bool:
        return AssessmentTier(tier) in PREMIUM_TIERS

    def as_dict(self) -> Dict[str, Dict[str, Optional[float]]]:
        return {tier.value: dict(weights) for tier, weights in self._overrides.items()}


def validate_tier_weights(table: Optional[TierWeightTable] = None) -> None:
    """Startup check, logs the validated totals."""
    table = table or DEFAULT_TIER_WEIGHTS
    table.validate()
    for tier in AssessmentTier:
        logger.info(f"⚖️ Tier '{tier.value}' weights validated (total={table.tier_total(tier):g})")


DEFAULT_TIER_WEIGHTS = TierWeightTable(TIER_WEIGHT_OVERRIDES)
