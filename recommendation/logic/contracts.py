"""
Data Contracts for the Career Matching Engine

Defines Pydantic models for the student profile (input), the reference data
the engine reads (careers, countries, components, affinities) and the ranked
CareerMatch output. These contracts are the API boundary for the engine.
"""

from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from .constants import (
    AssessmentTier,
    LearningStyle,
    RiasecTheme,
    ValuesDomain,
    MIN_SCORE,
    MAX_SCORE,
)


def _check_score_range(scores: Dict, label: str) -> Dict:
    for key, value in scores.items():
        if not MIN_SCORE <= value <= MAX_SCORE:
            name = getattr(key, "value", key)
            raise ValueError(f"{label} score for {name} must be within 0-100, got {value}")
    return scores


def _coerce_scores(raw, enum_cls) -> Optional[Dict]:
    """Best-effort enum-keyed copy of raw scores; None leaves the error to field validation."""
    if not isinstance(raw, dict):
        return None
    try:
        scores = {enum_cls(key): float(value) for key, value in raw.items()}
    except (ValueError, TypeError):
        return None
    if any(member not in scores for member in enum_cls):
        return None
    return scores


def rank_keys(scores: Dict, order: List) -> List:
    """Keys sorted by score (descending), ties kept in enumeration order."""
    return sorted(order, key=lambda key: -scores[key])


# =============================================================================
# INSTRUMENT RESULTS
# =============================================================================

class SubjectCompetency(BaseModel):
    """Quiz-derived competency for one subject."""
    correct: int = 0
    total: int = 0
    percentage: float = Field(ge=0.0, le=100.0)


class LearningStyleResult(BaseModel):
    """Kolb Learning Style Inventory result."""
    ce: float  # Concrete Experience
    ro: float  # Reflective Observation
    ac: float  # Abstract Conceptualization
    ae: float  # Active Experimentation
    x: float   # AC - CE (thinking vs. feeling)
    y: float   # AE - RO (doing vs. watching)
    learning_style: LearningStyle

    @model_validator(mode="before")
    @classmethod
    def _derive_axes(cls, data):
        if isinstance(data, dict):
            data = dict(data)
            if data.get("x") is None and None not in (data.get("ac"), data.get("ce")):
                data["x"] = data["ac"] - data["ce"]
            if data.get("y") is None and None not in (data.get("ae"), data.get("ro")):
                data["y"] = data["ae"] - data["ro"]
        return data

    class Config:
        frozen = True


class PersonalityResult(BaseModel):
    """Holland Code (RIASEC) result. All six themes are required."""
    scores: Dict[RiasecTheme, float]
    ranking: List[RiasecTheme] = Field(default_factory=list)
    top3: List[RiasecTheme] = Field(default_factory=list)

    @field_validator("scores")
    @classmethod
    def _all_themes(cls, scores):
        missing = [theme.value for theme in RiasecTheme if scores.get(theme) is None]
        if missing:
            raise ValueError(f"Incomplete RIASEC scores, missing: {', '.join(missing)}")
        return _check_score_range(scores, "RIASEC")

    @model_validator(mode="before")
    @classmethod
    def _derive_ranking(cls, data):
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if not data.get("ranking"):
            scores = _coerce_scores(data.get("scores"), RiasecTheme)
            if scores is None:
                return data
            data["ranking"] = rank_keys(scores, list(RiasecTheme))
        if not data.get("top3"):
            data["top3"] = data["ranking"][:3]
        return data

    class Config:
        frozen = True


class ValuesResult(BaseModel):
    """Children's Values Questionnaire result, normalized 0-100 per domain."""
    scores: Dict[ValuesDomain, float]
    top3: List[ValuesDomain] = Field(default_factory=list)

    @field_validator("scores")
    @classmethod
    def _all_domains(cls, scores):
        missing = [domain.value for domain in ValuesDomain if scores.get(domain) is None]
        if missing:
            raise ValueError(f"Incomplete CVQ scores, missing: {', '.join(missing)}")
        return _check_score_range(scores, "CVQ")

    @model_validator(mode="before")
    @classmethod
    def _derive_top3(cls, data):
        if not isinstance(data, dict) or data.get("top3"):
            return data
        scores = _coerce_scores(data.get("scores"), ValuesDomain)
        if scores is None:
            return data
        data = dict(data)
        data["top3"] = rank_keys(scores, list(ValuesDomain))[:3]
        return data

    class Config:
        frozen = True


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class StudentProfile(BaseModel):
    """
    Input contract for the matching engine.

    ``favorite_subjects`` and ``interests`` are None when the student never
    answered that step, and an empty list when they answered with nothing.
    """
    id: str

    # Demographics
    name: Optional[str] = None
    age: Optional[int] = None
    grade: Optional[str] = None
    gender: Optional[str] = None
    country_id: Optional[str] = None

    tier: AssessmentTier = AssessmentTier.BASIC

    # Preferences
    favorite_subjects: Optional[List[str]] = None
    interests: Optional[List[str]] = None

    # Quiz
    subject_competencies: Optional[Dict[str, SubjectCompetency]] = None

    # Psychometric instruments
    learning_style: Optional[LearningStyleResult] = None
    personality: Optional[PersonalityResult] = None
    values: Optional[ValuesResult] = None

    class Config:
        frozen = True


class Career(BaseModel):
    """Career catalog entry."""
    id: str
    title: str
    description: str = ""
    category: str
    related_subjects: List[str] = Field(default_factory=list)
    required_skills: List[str] = Field(default_factory=list)
    education_level: str = ""
    average_salary: Optional[str] = None
    growth_outlook: str = ""
    values_profile: Optional[Dict[ValuesDomain, float]] = None

    @field_validator("values_profile")
    @classmethod
    def _values_profile_range(cls, profile):
        if profile is None:
            return None
        if not profile:
            raise ValueError("values_profile must name at least one domain")
        return _check_score_range(profile, "Values profile")

    class Config:
        frozen = True


class Country(BaseModel):
    """Country with its ordered national priority sectors (index 0 = highest)."""
    id: str
    name: str
    code: Optional[str] = None
    mission: str = ""
    vision: str = ""
    priority_sectors: List[str] = Field(default_factory=list)
    national_goals: List[str] = Field(default_factory=list)

    class Config:
        frozen = True


class AssessmentComponent(BaseModel):
    """A configurable scoring dimension."""
    id: str
    key: str
    name: str
    description: str = ""
    weight: float = Field(ge=0.0, le=100.0)
    is_active: bool = True
    requires_premium: bool = False
    display_order: int = 0

    class Config:
        frozen = True


class WeightedComponent(BaseModel):
    """An active component with its tier-effective weight."""
    component: AssessmentComponent
    weight: float = Field(gt=0.0, le=100.0)

    @property
    def key(self) -> str:
        return self.component.key

    @property
    def name(self) -> str:
        return self.component.name

    class Config:
        frozen = True


# =============================================================================
# AFFINITY DATA
# =============================================================================

class RiasecAffinity(BaseModel):
    """Career affinity (0-100) for each of the six Holland themes."""
    kind: Literal["riasec"] = "riasec"
    scores: Dict[RiasecTheme, float]

    @field_validator("scores")
    @classmethod
    def _all_themes(cls, scores):
        missing = [theme.value for theme in RiasecTheme if scores.get(theme) is None]
        if missing:
            raise ValueError(f"Incomplete RIASEC affinity, missing: {', '.join(missing)}")
        return _check_score_range(scores, "RIASEC affinity")

    class Config:
        frozen = True


class KolbAffinity(BaseModel):
    """Career affinity (0-100) per Kolb learning style."""
    kind: Literal["kolb"] = "kolb"
    scores: Dict[LearningStyle, float]

    @field_validator("scores")
    @classmethod
    def _non_empty(cls, scores):
        if not scores:
            raise ValueError("Kolb affinity must score at least one learning style")
        return _check_score_range(scores, "Kolb affinity")

    class Config:
        frozen = True


AffinityData = Annotated[Union[RiasecAffinity, KolbAffinity], Field(discriminator="kind")]


class CareerComponentAffinity(BaseModel):
    """Join between a career and a component carrying typed affinity data."""
    career_id: str
    component_id: str
    component_key: str
    data: AffinityData

    class Config:
        frozen = True


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class ComponentScore(BaseModel):
    """Result of a single component calculator."""
    score: float = Field(ge=0.0, le=100.0)
    reasoning: str = Field(min_length=1)


class ComponentBreakdown(BaseModel):
    """One applied component in a career's score."""
    key: str
    display_name: str
    score: float = Field(ge=0.0, le=100.0)
    weight: float
    reasoning: str


class CareerMatch(BaseModel):
    """A career ranked against a student profile."""
    career: Career
    overall_score: float = Field(ge=0.0, le=100.0)
    component_scores: List[ComponentBreakdown] = Field(default_factory=list)
    applied_weight: float = 0.0
    applied_config_version: str
