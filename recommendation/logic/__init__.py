"""
Career Matching Logic Module

Provides the deterministic, weighted multi-component career matching engine.
"""

from .contracts import (
    StudentProfile,
    LearningStyleResult,
    PersonalityResult,
    ValuesResult,
    SubjectCompetency,
    Career,
    Country,
    AssessmentComponent,
    WeightedComponent,
    CareerComponentAffinity,
    RiasecAffinity,
    KolbAffinity,
    ComponentScore,
    ComponentBreakdown,
    CareerMatch,
)
from .constants import (
    AssessmentTier,
    ComponentKey,
    LearningStyle,
    RiasecTheme,
    ValuesDomain,
)
from .engine import MatchingEngine, get_recommendations, config_version
from .errors import (
    MatchingError,
    ConfigurationError,
    TierWeightConfigurationError,
    ComponentWeightError,
    EmptyCatalogError,
    NotFoundError,
    ProfileNotFoundError,
    CareerNotFoundError,
    CountryNotFoundError,
    InsufficientProfileDataError,
)
from .repositories import (
    ReferenceRepository,
    InMemoryRepository,
    ReferenceDataCache,
    CachedRepository,
)
from .tier_weights import TierWeightTable, DEFAULT_TIER_WEIGHTS

__all__ = [
    # Main engine
    "MatchingEngine",
    "get_recommendations",
    "config_version",
    "TierWeightTable",
    "DEFAULT_TIER_WEIGHTS",

    # Contracts
    "StudentProfile",
    "LearningStyleResult",
    "PersonalityResult",
    "ValuesResult",
    "SubjectCompetency",
    "Career",
    "Country",
    "AssessmentComponent",
    "WeightedComponent",
    "CareerComponentAffinity",
    "RiasecAffinity",
    "KolbAffinity",
    "ComponentScore",
    "ComponentBreakdown",
    "CareerMatch",

    # Repositories
    "ReferenceRepository",
    "InMemoryRepository",
    "ReferenceDataCache",
    "CachedRepository",

    # Enums
    "AssessmentTier",
    "ComponentKey",
    "LearningStyle",
    "RiasecTheme",
    "ValuesDomain",

    # Errors
    "MatchingError",
    "ConfigurationError",
    "TierWeightConfigurationError",
    "ComponentWeightError",
    "EmptyCatalogError",
    "NotFoundError",
    "ProfileNotFoundError",
    "CareerNotFoundError",
    "CountryNotFoundError",
    "InsufficientProfileDataError",
]
