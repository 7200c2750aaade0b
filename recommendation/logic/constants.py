"""
Matching Engine Constants

Defines the enums, score bands, thresholds and default tier weights used by the
career matching engine. All values are deterministic with no AI/ML components.
"""

from enum import Enum
from typing import Dict, Optional

# =============================================================================
# ENUMS
# =============================================================================

class AssessmentTier(str, Enum):
    """Assessment tier purchased for a student profile."""
    BASIC = "basic"
    PREMIUM = "premium"
    GROUP = "group"


class ComponentKey(str, Enum):
    """Scoring dimensions that have a registered calculator."""
    SUBJECTS = "subjects"
    INTERESTS = "interests"
    VISION = "vision"
    KOLB = "kolb"
    RIASEC = "riasec"
    CVQ = "cvq"


class LearningStyle(str, Enum):
    """Kolb learning-style quadrants."""
    DIVERGING = "Diverging"          # Feeling + Watching
    ASSIMILATING = "Assimilating"    # Thinking + Watching
    CONVERGING = "Converging"        # Thinking + Doing
    ACCOMMODATING = "Accommodating"  # Feeling + Doing


class RiasecTheme(str, Enum):
    """Holland Code themes."""
    R = "R"
    I = "I"
    A = "A"
    S = "S"
    E = "E"
    C = "C"


class ValuesDomain(str, Enum):
    """Children's Values Questionnaire domains."""
    ACHIEVEMENT = "achievement"
    BENEVOLENCE = "benevolence"
    UNIVERSALISM = "universalism"
    SELF_DIRECTION = "self-direction"
    SECURITY = "security"
    POWER = "power"
    HEDONISM = "hedonism"


RIASEC_THEME_NAMES: Dict[RiasecTheme, str] = {
    RiasecTheme.R: "Realistic",
    RiasecTheme.I: "Investigative",
    RiasecTheme.A: "Artistic",
    RiasecTheme.S: "Social",
    RiasecTheme.E: "Enterprising",
    RiasecTheme.C: "Conventional",
}

# Tiers that unlock components flagged requires_premium
PREMIUM_TIERS = frozenset({AssessmentTier.PREMIUM, AssessmentTier.GROUP})

# =============================================================================
# COMPONENT SCORE BANDS
# =============================================================================

# Subjects: floor when favorites and career subjects do not overlap.
# Product-tuned value, kept as-is pending product review.
SUBJECT_NO_OVERLAP_SCORE = 20.0

# Subjects: blend of stated preference and demonstrated quiz competency
SUBJECT_PREFERENCE_WEIGHT = 0.4
SUBJECT_COMPETENCY_WEIGHT = 0.6

# Vision: score by position of the career category in the ordered sector list
VISION_RANK_SCORES = (100.0, 90.0, 80.0)
VISION_LOWER_PRIORITY_SCORE = 60.0   # listed at rank 3 or below
VISION_NO_MATCH_SCORE = 40.0         # product-tuned floor, see above

# CVQ: values are normalized to a 0-100 scale per domain
VALUES_SCALE_MAX = 100.0

MIN_SCORE = 0.0
MAX_SCORE = 100.0

# =============================================================================
# AGGREGATION & RANKING
# =============================================================================

TOTAL_WEIGHT = 100.0
WEIGHT_EPSILON = 0.01

MIN_MATCH_SCORE = 40.0
MAX_RECOMMENDATIONS = 5

CONFIG_VERSION_LENGTH = 16

# =============================================================================
# DEFAULT TIER WEIGHTS
# =============================================================================

# Retired component with no calculator. Older databases may still hold an
# active row for it, so every tier disables it explicitly.
MARKET_COMPONENT_KEY = "market"

# None means the component is not used in that tier.
# Each tier's defined weights must sum to 100.
TIER_WEIGHT_OVERRIDES: Dict[str, Dict[str, Optional[float]]] = {
    AssessmentTier.BASIC.value: {
        ComponentKey.SUBJECTS.value: 35,    # Subject competency + preferences
        ComponentKey.INTERESTS.value: 35,   # Interest keyword matching
        ComponentKey.VISION.value: 30,      # Country vision alignment
        ComponentKey.RIASEC.value: None,
        ComponentKey.CVQ.value: None,
        ComponentKey.KOLB.value: None,
        MARKET_COMPONENT_KEY: None,
    },
    AssessmentTier.PREMIUM.value: {
        ComponentKey.SUBJECTS.value: 20,
        ComponentKey.INTERESTS.value: 0,    # replaced by the psychometric instruments
        ComponentKey.VISION.value: 20,
        ComponentKey.RIASEC.value: 30,
        ComponentKey.CVQ.value: 20,
        ComponentKey.KOLB.value: 10,
        MARKET_COMPONENT_KEY: None,
    },
    AssessmentTier.GROUP.value: {
        ComponentKey.SUBJECTS.value: 20,
        ComponentKey.INTERESTS.value: 0,
        ComponentKey.VISION.value: 20,
        ComponentKey.RIASEC.value: 30,
        ComponentKey.CVQ.value: 20,
        ComponentKey.KOLB.value: 10,
        MARKET_COMPONENT_KEY: None,
    },
}
