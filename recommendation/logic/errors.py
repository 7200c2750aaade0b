"""
Matching Engine Errors

Configuration errors abort the whole request; not-found and insufficient-data
errors are surfaced to the caller. A calculator with no usable data returns
None instead of raising.
"""

from typing import Dict, Iterable, Optional


class MatchingError(Exception):
    """Base class for all matching engine errors."""


# =============================================================================
# CONFIGURATION
# =============================================================================

class ConfigurationError(MatchingError):
    """The engine is misconfigured for every user, not just this one."""


class TierWeightConfigurationError(ConfigurationError):
    """One or more tiers have weights that do not sum to 100."""

    def __init__(self, errors: Iterable[str]):
        self.errors = list(errors)
        super().__init__(
            "Tier weight configuration validation failed:\n" + "\n".join(self.errors)
        )


class EmptyCatalogError(ConfigurationError):
    """No careers are provisioned, so nothing can be matched."""

    def __init__(self):
        super().__init__("Career catalog is empty: no careers are provisioned for matching")


class ComponentWeightError(ConfigurationError):
    """The active, weight-overridden component set does not sum to 100."""

    def __init__(self, tier: str, weights: Dict[str, float]):
        self.tier = tier
        self.weights = dict(weights)
        total = sum(self.weights.values())
        listing = ", ".join(f"{key}({weight:g}%)" for key, weight in self.weights.items())
        super().__init__(
            f"Component weights must sum to 100% for tier '{tier}'. "
            f"Current total: {total:g}%. Active components: {listing or 'none'}"
        )


# =============================================================================
# NOT FOUND
# =============================================================================

class NotFoundError(MatchingError):
    """A referenced entity does not exist."""

    entity = "Entity"

    def __init__(self, entity_id: Optional[str]):
        self.entity_id = entity_id
        super().__init__(f"{self.entity} {entity_id} not found")


class ProfileNotFoundError(NotFoundError):
    entity = "Student profile"


class CareerNotFoundError(NotFoundError):
    entity = "Career"


class CountryNotFoundError(NotFoundError):
    entity = "Country"


# =============================================================================
# DATA
# =============================================================================

class InsufficientProfileDataError(MatchingError):
    """No component could score any career for this profile."""

    def __init__(self, profile_id: str):
        self.profile_id = profile_id
        super().__init__(
            f"Cannot generate recommendations for profile {profile_id}: "
            "insufficient profile data"
        )
