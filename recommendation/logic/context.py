"""
Matching Context

Everything the scorers need, hydrated once per request so the scoring loop
performs no I/O.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .affinity import AffinityIndex
from .constants import AssessmentTier
from .contracts import Career, Country, StudentProfile, WeightedComponent


@dataclass(frozen=True)
class MatchingContext:
    profile: StudentProfile
    careers: List[Career]
    components: List[WeightedComponent]
    affinities: AffinityIndex = field(default_factory=AffinityIndex)
    country: Optional[Country] = None

    @property
    def tier(self) -> AssessmentTier:
        return self.profile.tier
