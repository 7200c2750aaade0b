"""
Instrument Scoring

Turns raw psychometric responses into the structured results the matching
engine consumes. Results are complete or not built at all.
"""

from typing import Dict, Mapping

from .constants import LearningStyle, RiasecTheme, ValuesDomain
from .contracts import LearningStyleResult, PersonalityResult, ValuesResult

# Each RIASEC theme is measured by five Likert items (1-5)
RIASEC_ITEMS_PER_THEME = 5
RIASEC_LIKERT_MIN = 1
RIASEC_LIKERT_MAX = 5


def classify_learning_style(x: float, y: float) -> LearningStyle:
    """Quadrant of the (AC - CE, AE - RO) plane."""
    if x >= 0 and y >= 0:
        return LearningStyle.CONVERGING      # Thinking + Doing
    if x < 0 and y >= 0:
        return LearningStyle.ACCOMMODATING   # Feeling + Doing
    if x >= 0:
        return LearningStyle.ASSIMILATING    # Thinking + Watching
    return LearningStyle.DIVERGING           # Feeling + Watching


def score_learning_style(ce: float, ro: float, ac: float, ae: float) -> LearningStyleResult:
    x = ac - ce
    y = ae - ro
    return LearningStyleResult(
        ce=ce, ro=ro, ac=ac, ae=ae,
        x=x, y=y,
        learning_style=classify_learning_style(x, y),
    )


def score_riasec_responses(responses: Mapping[str, int]) -> PersonalityResult:
    """
    Score RIASEC Likert responses.

    Question ids start with their theme letter (``R1``, ``I3``...). Raw theme
    totals (5-25) are normalized to 0-100.
    """
    raw: Dict[RiasecTheme, int] = {theme: 0 for theme in RiasecTheme}
    for question_id, value in responses.items():
        code = question_id[:1].upper()
        if code in RiasecTheme.__members__:
            raw[RiasecTheme(code)] += value

    low = RIASEC_ITEMS_PER_THEME * RIASEC_LIKERT_MIN
    span = RIASEC_ITEMS_PER_THEME * (RIASEC_LIKERT_MAX - RIASEC_LIKERT_MIN)
    scores = {
        theme: min(100, max(0, round((total - low) / span * 100)))
        for theme, total in raw.items()
    }
    return PersonalityResult(scores=scores)


def score_values(domain_scores: Mapping[str, float]) -> ValuesResult:
    """Build a CVQ result from normalized (0-100) domain scores."""
    return ValuesResult(scores={ValuesDomain(key): value for key, value in domain_scores.items()})
