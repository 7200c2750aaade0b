"""
Component Scorers

One scoring function per assessment component. Each scorer takes the hydrated
context, a career and the weighted component, and returns a ComponentScore
(0-100 with a short reasoning) or None when the component cannot be scored
for this student/career pair. None is not a zero: the aggregator leaves the
component out of the career's weighting entirely.

All logic is deterministic - no AI/ML components.
"""

import math
from typing import Callable, Dict, List, Optional

from .constants import (
    ComponentKey,
    RiasecTheme,
    RIASEC_THEME_NAMES,
    ValuesDomain,
    MIN_SCORE,
    MAX_SCORE,
    SUBJECT_NO_OVERLAP_SCORE,
    SUBJECT_PREFERENCE_WEIGHT,
    SUBJECT_COMPETENCY_WEIGHT,
    VISION_RANK_SCORES,
    VISION_LOWER_PRIORITY_SCORE,
    VISION_NO_MATCH_SCORE,
    VALUES_SCALE_MAX,
)
from .context import MatchingContext
from .contracts import (
    Career,
    ComponentScore,
    KolbAffinity,
    RiasecAffinity,
    SubjectCompetency,
    WeightedComponent,
)
from .lexicon import canonical_subject, categories_for_interest, text_matches

ComponentScorer = Callable[[MatchingContext, Career, WeightedComponent], Optional[ComponentScore]]


def _clamp(score: float) -> float:
    return max(MIN_SCORE, min(MAX_SCORE, score))


def _unique(items: List[str]) -> List[str]:
    """Strip, drop blanks and case-insensitive duplicates, keep order."""
    seen = set()
    result = []
    for item in items:
        text = item.strip()
        key = text.casefold()
        if text and key not in seen:
            seen.add(key)
            result.append(text)
    return result


def _join(items: List[str], limit: int = 2) -> str:
    return " and ".join(items[:limit])


# =============================================================================
# SUBJECTS
# =============================================================================

def _competency_average(
    competencies: Optional[Dict[str, SubjectCompetency]],
    subjects: List[str],
) -> Optional[float]:
    """Mean quiz percentage over the subjects that have quiz data, else None."""
    if not competencies:
        return None
    index = {name.strip().casefold(): value for name, value in competencies.items()}

    percentages = []
    for subject in subjects:
        found = index.get(subject.casefold()) or index.get(canonical_subject(subject).casefold())
        if found is not None:
            percentages.append(found.percentage)

    if not percentages:
        return None
    return sum(percentages) / len(percentages)


def score_subjects(
    context: MatchingContext,
    career: Career,
    component: WeightedComponent,
) -> Optional[ComponentScore]:
    """
    Score favorite-subject overlap with the career's related subjects.

    - No overlap scores a flat floor rather than zero
    - Preference ratio = matched / career's related subjects
    - Blended 40/60 with quiz competency over the matched subjects when available
    """
    favorites = _unique(context.profile.favorite_subjects or [])
    related = {subject.casefold(): subject for subject in _unique(career.related_subjects)}
    if not favorites or not related:
        return None

    matched = [related[s.casefold()] for s in favorites if s.casefold() in related]
    if not matched:
        return ComponentScore(
            score=SUBJECT_NO_OVERLAP_SCORE,
            reasoning=f"None of your favorite subjects overlap with the core subjects of {career.title}",
        )

    preference = len(matched) / len(related) * 100
    competency = _competency_average(context.profile.subject_competencies, matched)

    if competency is None:
        return ComponentScore(
            score=_clamp(preference),
            reasoning=f"Your interest in {_join(matched)} aligns with this career",
        )

    score = SUBJECT_PREFERENCE_WEIGHT * preference + SUBJECT_COMPETENCY_WEIGHT * competency
    return ComponentScore(
        score=_clamp(score),
        reasoning=(
            f"Your interest in {_join(matched)} is backed by "
            f"{competency:.0f}% demonstrated quiz competency"
        ),
    )


# =============================================================================
# INTERESTS
# =============================================================================

def score_interests(
    context: MatchingContext,
    career: Career,
    component: WeightedComponent,
) -> Optional[ComponentScore]:
    """Share of the student's interests whose category synonyms match the career category."""
    interests = _unique(context.profile.interests or [])
    if not interests:
        return None

    matched = [
        interest for interest in interests
        if any(text_matches(category, career.category) for category in categories_for_interest(interest))
    ]
    score = len(matched) / len(interests) * 100

    if matched:
        reasoning = f"Your interest in {_join(matched)} points towards {career.category} careers"
    else:
        reasoning = f"None of your interests point towards {career.category} careers"
    return ComponentScore(score=_clamp(score), reasoning=reasoning)


# =============================================================================
# NATIONAL VISION
# =============================================================================

def score_vision(
    context: MatchingContext,
    career: Career,
    component: WeightedComponent,
) -> Optional[ComponentScore]:
    """
    Score the career category's position in the country's ordered priority sectors.

    Banded, not continuous: top three ranks score 100/90/80, anything further
    down the list 60, and no match at all 40.
    """
    country = context.country
    if country is None or not country.priority_sectors:
        return None

    for rank, sector in enumerate(country.priority_sectors):
        if not text_matches(sector, career.category):
            continue
        if rank < len(VISION_RANK_SCORES):
            score = VISION_RANK_SCORES[rank]
        else:
            score = VISION_LOWER_PRIORITY_SCORE
        return ComponentScore(
            score=score,
            reasoning=f"{sector} is national priority #{rank + 1} in {country.name}",
        )

    return ComponentScore(
        score=VISION_NO_MATCH_SCORE,
        reasoning=f"{career.category} is not among the priority sectors of {country.name}",
    )


# =============================================================================
# LEARNING STYLE (KOLB)
# =============================================================================

def score_kolb(
    context: MatchingContext,
    career: Career,
    component: WeightedComponent,
) -> Optional[ComponentScore]:
    """The career's affinity for the student's learning style, looked up directly."""
    result = context.profile.learning_style
    if result is None:
        return None

    affinity = context.affinities.get(career.id, component.key)
    if not isinstance(affinity, KolbAffinity):
        return None

    value = affinity.scores.get(result.learning_style)
    if value is None:
        return None

    style = result.learning_style.value
    return ComponentScore(
        score=_clamp(value),
        reasoning=f"{style} learners show {value:.0f}/100 affinity for this career",
    )


# =============================================================================
# PERSONALITY (RIASEC)
# =============================================================================

def score_riasec(
    context: MatchingContext,
    career: Career,
    component: WeightedComponent,
) -> Optional[ComponentScore]:
    """
    Career affinity averaged with the student's theme scores as weights:
    sum(student_i * affinity_i) / sum(student_i).

    Not normalized by the affinity vector's magnitude, so careers with
    generally higher affinities score higher for the same student.
    """
    result = context.profile.personality
    if result is None:
        return None

    affinity = context.affinities.get(career.id, component.key)
    if not isinstance(affinity, RiasecAffinity):
        return None

    student = result.scores
    total_student = sum(student[theme] for theme in RiasecTheme)
    if total_student <= 0:
        return ComponentScore(
            score=MIN_SCORE,
            reasoning="Your personality profile shows no preference for any Holland theme",
        )

    total_affinity = sum(student[theme] * affinity.scores[theme] for theme in RiasecTheme)
    score = total_affinity / total_student

    top_themes = " & ".join(RIASEC_THEME_NAMES[theme] for theme in result.ranking[:2])
    return ComponentScore(
        score=_clamp(score),
        reasoning=f"Strong {top_themes} personality match",
    )


# =============================================================================
# VALUES (CVQ)
# =============================================================================

def score_cvq(
    context: MatchingContext,
    career: Career,
    component: WeightedComponent,
) -> Optional[ComponentScore]:
    """
    Similarity of the student's values to the career's values profile.

    Euclidean distance over the shared domains, normalized against the largest
    possible distance for that many domains on a 0-100 scale.
    """
    result = context.profile.values
    profile = career.values_profile
    if result is None or not profile:
        return None

    shared = [domain for domain in ValuesDomain if domain in result.scores and domain in profile]
    if not shared:
        return None

    distance = math.sqrt(sum((result.scores[d] - profile[d]) ** 2 for d in shared))
    max_distance = math.sqrt(len(shared) * VALUES_SCALE_MAX ** 2)
    score = _clamp(100 * (1 - distance / max_distance))

    top_values = [domain.value for domain in result.top3 if domain in shared]
    if top_values:
        reasoning = f"Your values ({', '.join(top_values)}) align {score:.0f}% with this career"
    else:
        reasoning = f"Your values align {score:.0f}% with this career"
    return ComponentScore(score=score, reasoning=reasoning)


# =============================================================================
# REGISTRY
# =============================================================================

COMPONENT_SCORERS: Dict[ComponentKey, ComponentScorer] = {
    ComponentKey.SUBJECTS: score_subjects,
    ComponentKey.INTERESTS: score_interests,
    ComponentKey.VISION: score_vision,
    ComponentKey.KOLB: score_kolb,
    ComponentKey.RIASEC: score_riasec,
    ComponentKey.CVQ: score_cvq,
}

_unregistered = [key.value for key in ComponentKey if key not in COMPONENT_SCORERS]
if _unregistered:
    raise RuntimeError(f"Component keys without a scorer: {', '.join(_unregistered)}")
