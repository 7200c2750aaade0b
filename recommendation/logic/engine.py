"""
Career Matching Engine

Main orchestrator that combines all component scorers into a single pipeline.
This is the primary entry point for generating career recommendations.
"""

import hashlib
import logging
import math
import time
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .affinity import AffinityIndex
from .component_scorers import COMPONENT_SCORERS, ComponentScorer
from .constants import (
    AssessmentTier,
    CONFIG_VERSION_LENGTH,
    MAX_RECOMMENDATIONS,
    MIN_MATCH_SCORE,
    TOTAL_WEIGHT,
    WEIGHT_EPSILON,
)
from .context import MatchingContext
from .contracts import (
    AssessmentComponent,
    Career,
    CareerMatch,
    ComponentBreakdown,
    WeightedComponent,
)
from .errors import (
    CareerNotFoundError,
    ComponentWeightError,
    CountryNotFoundError,
    EmptyCatalogError,
    InsufficientProfileDataError,
    ProfileNotFoundError,
)
from .repositories import ReferenceRepository
from .tier_weights import DEFAULT_TIER_WEIGHTS, TierWeightTable

logger = logging.getLogger(__name__)

ScorerPlan = List[Tuple[WeightedComponent, ComponentScorer]]


def round_score(score: float) -> float:
    """Round half-up to one decimal place."""
    return math.floor(score * 10 + 0.5) / 10


def config_version(components: Iterable[WeightedComponent]) -> str:
    """Deterministic fingerprint of the (component key, weight) pairs in use."""
    config_string = "|".join(
        f"{c.key}:{c.weight:g}" for c in sorted(components, key=lambda c: c.key)
    )
    return hashlib.sha256(config_string.encode("utf-8")).hexdigest()[:CONFIG_VERSION_LENGTH]


def rank_matches(
    matches: Sequence[CareerMatch],
    min_score: float = MIN_MATCH_SCORE,
    limit: int = MAX_RECOMMENDATIONS,
) -> List[CareerMatch]:
    """Drop weak matches, sort by overall score (descending, ties by title), keep the top."""
    eligible = [m for m in matches if m.overall_score >= min_score]
    ranked = sorted(eligible, key=lambda m: (-m.overall_score, m.career.title))
    return ranked[:limit]


class MatchingEngine:
    """
    Main matching engine that orchestrates the scoring pipeline.

    Pipeline flow:
    1. Hydration - profile, catalog, tier-weighted components, affinities, country
    2. Validation - active component weights must sum to 100
    3. Component Scoring - every scorer for every career, None means "skip"
    4. Aggregation - weighted average over the components that produced a score
    5. Ranking - threshold, sort, top N
    """

    def __init__(
        self,
        repository: ReferenceRepository,
        tier_weights: TierWeightTable = DEFAULT_TIER_WEIGHTS,
        scorers: Optional[Mapping] = None,
        min_score: float = MIN_MATCH_SCORE,
        max_results: int = MAX_RECOMMENDATIONS,
    ):
        """
        Initialize the matching engine.

        Args:
            repository: Source of profiles and reference data
            tier_weights: Tier weight table (validated on construction)
            scorers: Component key -> scorer; defaults to the registered scorers
            min_score: Matches below this overall score are dropped
            max_results: Maximum matches returned
        """
        self.repository = repository
        self.tier_weights = tier_weights
        self.scorers: Dict[str, ComponentScorer] = {
            getattr(key, "value", key): scorer
            for key, scorer in (scorers if scorers is not None else COMPONENT_SCORERS).items()
        }
        self.min_score = min_score
        self.max_results = max_results

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def generate_recommendations(self, profile_id: str) -> List[CareerMatch]:
        """
        Generate ranked career matches for a student profile.

        Raises:
            ProfileNotFoundError / CountryNotFoundError: unknown ids
            ComponentWeightError: active weights do not sum to 100
            EmptyCatalogError: no careers are provisioned
            InsufficientProfileDataError: no component could score any career
        """
        start_time = time.perf_counter()

        context = self.hydrate(profile_id)
        self.validate_weights(context)
        if not context.careers:
            raise EmptyCatalogError()

        matches = self.score_all(context)
        if not any(m.applied_weight > 0 for m in matches):
            raise InsufficientProfileDataError(profile_id)

        ranked = rank_matches(matches, self.min_score, self.max_results)

        elapsed = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"✅ Profile {profile_id}: {len(matches)} careers scored, "
            f"{len(ranked)} recommended in {elapsed:.2f}ms"
        )
        return ranked

    def score_single_career(self, profile_id: str, career_id: str) -> CareerMatch:
        """
        Score one career for a student, unfiltered.

        Useful for explaining why a career the student asked about did or did
        not make the list.
        """
        context = self.hydrate(profile_id)
        self.validate_weights(context)

        career = next((c for c in context.careers if c.id == career_id), None)
        if career is None:
            raise CareerNotFoundError(career_id)
        return self.score_career(context, career)

    # -------------------------------------------------------------------------
    # Pipeline steps
    # -------------------------------------------------------------------------

    def hydrate(self, profile_id: str) -> MatchingContext:
        """Load everything the scorers need so the scoring loop does no I/O."""
        profile = self.repository.get_profile(profile_id)
        if profile is None:
            raise ProfileNotFoundError(profile_id)

        careers = self.repository.list_careers()
        components = self.select_components(profile.tier, self.repository.list_components())

        affinities = AffinityIndex(self.repository.bulk_affinities(
            [career.id for career in careers],
            [weighted.component.id for weighted in components],
        ))

        country = None
        if profile.country_id:
            country = self.repository.get_country(profile.country_id)
            if country is None:
                raise CountryNotFoundError(profile.country_id)

        logger.info(
            f"🔍 Hydrated profile {profile_id} (tier={profile.tier.value}): "
            f"{len(careers)} careers, {len(components)} components, {len(affinities)} affinities"
        )
        return MatchingContext(
            profile=profile,
            careers=careers,
            components=components,
            affinities=affinities,
            country=country,
        )

    def select_components(
        self,
        tier: AssessmentTier,
        components: Iterable[AssessmentComponent],
    ) -> List[WeightedComponent]:
        """Active components the tier may use, with tier weights; zero-weight ones dropped."""
        grants_premium = self.tier_weights.grants_premium(tier)

        selected = []
        for component in components:
            if not component.is_active:
                continue
            if component.requires_premium and not grants_premium:
                continue
            weight = self.tier_weights.effective_weight(tier, component.key, component.weight)
            if not weight:
                continue
            selected.append(WeightedComponent(component=component, weight=weight))
        return selected

    def validate_weights(self, context: MatchingContext) -> None:
        total = sum(weighted.weight for weighted in context.components)
        if abs(total - TOTAL_WEIGHT) > WEIGHT_EPSILON:
            raise ComponentWeightError(
                context.tier.value,
                {weighted.key: weighted.weight for weighted in context.components},
            )

    def score_all(self, context: MatchingContext) -> List[CareerMatch]:
        plan = self._plan(context.components)
        version = config_version(context.components)
        return [self._score(context, career, plan, version) for career in context.careers]

    def score_career(self, context: MatchingContext, career: Career) -> CareerMatch:
        return self._score(
            context,
            career,
            self._plan(context.components),
            config_version(context.components),
        )

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _plan(self, components: Iterable[WeightedComponent]) -> ScorerPlan:
        """Pair each component with its scorer; unregistered keys are skipped for every career."""
        plan: ScorerPlan = []
        for weighted in components:
            scorer = self.scorers.get(weighted.key)
            if scorer is None:
                logger.warning(f"⚠️ No scorer registered for component: {weighted.key}")
                continue
            plan.append((weighted, scorer))
        return plan

    @staticmethod
    def _score(
        context: MatchingContext,
        career: Career,
        plan: ScorerPlan,
        version: str,
    ) -> CareerMatch:
        breakdown: List[ComponentBreakdown] = []
        weighted_sum = 0.0
        applied_weight = 0.0

        for weighted, scorer in plan:
            result = scorer(context, career, weighted)
            if result is None:
                continue

            breakdown.append(ComponentBreakdown(
                key=weighted.key,
                display_name=weighted.name,
                score=result.score,
                weight=weighted.weight,
                reasoning=result.reasoning,
            ))
            weighted_sum += result.score * weighted.weight
            applied_weight += weighted.weight

        overall = weighted_sum / applied_weight if applied_weight > 0 else 0.0

        return CareerMatch(
            career=career,
            overall_score=round_score(overall),
            component_scores=breakdown,
            applied_weight=applied_weight,
            applied_config_version=version,
        )


# Convenience function for simple usage
def get_recommendations(
    profile_id: str,
    repository: ReferenceRepository,
    tier_weights: TierWeightTable = DEFAULT_TIER_WEIGHTS,
) -> List[CareerMatch]:
    engine = MatchingEngine(repository, tier_weights=tier_weights)
    return engine.generate_recommendations(profile_id)
