"""
Data Adapter for the Matching Engine

Reads from the production tables (assessments, careers, countries, components,
affinities) and transforms JSON-based attributes into engine contracts.

This is a pure READ + TRANSFORM layer:
- NO scoring logic
- NO ranking
- NO DB writes

Stored instrument results are all-or-nothing: a result that does not validate
is logged and treated as absent.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel, ValidationError
from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models import (
    AssessmentComponentModel,
    AssessmentModel,
    CareerComponentAffinityModel,
    CareerModel,
    CountryModel,
)
from .affinity import build_affinity
from .constants import AssessmentTier
from .contracts import (
    AssessmentComponent,
    Career,
    CareerComponentAffinity,
    Country,
    LearningStyleResult,
    PersonalityResult,
    StudentProfile,
    SubjectCompetency,
    ValuesResult,
)
from .instruments import score_learning_style
from .repositories import ReferenceRepository

logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT", bound=BaseModel)

# Tier names used by older assessment rows
LEGACY_TIER_NAMES = {
    "kolb": AssessmentTier.PREMIUM,
    "individual": AssessmentTier.PREMIUM,
}


def _pick(data: Dict[str, Any], *keys):
    """First present key, trying each spelling in order."""
    for key in keys:
        if key in data:
            return data[key]
    return None


def _validated(model: Type[ResultT], payload: Dict[str, Any], label: str, owner: str) -> Optional[ResultT]:
    try:
        return model(**payload)
    except ValidationError as e:
        logger.warning(f"Ignoring incomplete {label} result on assessment {owner}: {e.errors()[:1]}")
        return None


# =============================================================================
# INSTRUMENT PARSERS
# =============================================================================

def parse_tier(raw: Optional[str], owner: str = "") -> AssessmentTier:
    if not raw:
        return AssessmentTier.BASIC
    value = raw.strip().lower()
    if value in LEGACY_TIER_NAMES:
        return LEGACY_TIER_NAMES[value]
    try:
        return AssessmentTier(value)
    except ValueError:
        logger.warning(f"Unknown assessment tier '{raw}' on assessment {owner}, using basic")
        return AssessmentTier.BASIC


def parse_learning_style(raw: Any, owner: str = "") -> Optional[LearningStyleResult]:
    """Kolb scores as stored: {CE, RO, AC, AE, X, Y, learningStyle}."""
    if not isinstance(raw, dict):
        return None
    payload = {
        "ce": _pick(raw, "CE", "ce"),
        "ro": _pick(raw, "RO", "ro"),
        "ac": _pick(raw, "AC", "ac"),
        "ae": _pick(raw, "AE", "ae"),
        "x": _pick(raw, "X", "x"),
        "y": _pick(raw, "Y", "y"),
        "learning_style": _pick(raw, "learningStyle", "learning_style"),
    }
    scales = (payload["ce"], payload["ro"], payload["ac"], payload["ae"])

    # older rows stored the four sub-scales without the derived label
    if payload["learning_style"] is None and all(isinstance(s, (int, float)) for s in scales):
        return score_learning_style(*scales)
    return _validated(LearningStyleResult, payload, "Kolb", owner)


def parse_personality(raw: Any, owner: str = "") -> Optional[PersonalityResult]:
    """RIASEC scores as stored: {R, I, A, S, E, C, top3?, ranking?}."""
    if not isinstance(raw, dict):
        return None
    source = raw.get("scores") if isinstance(raw.get("scores"), dict) else raw
    scores = {theme: source.get(theme) for theme in ("R", "I", "A", "S", "E", "C")}

    # ranking may be a list of codes or of {code, score} objects
    ranking = [
        item.get("code") if isinstance(item, dict) else item
        for item in (raw.get("ranking") or [])
    ]
    payload = {"scores": scores, "ranking": ranking, "top3": raw.get("top3") or []}
    return _validated(PersonalityResult, payload, "RIASEC", owner)


def parse_values(raw: Any, owner: str = "") -> Optional[ValuesResult]:
    """CVQ scores as stored: {scores: {domain: 0-100}, top3?} or a flat domain map."""
    if not isinstance(raw, dict):
        return None
    if isinstance(raw.get("scores"), dict):
        payload = {"scores": raw["scores"], "top3": raw.get("top3") or []}
    else:
        payload = {"scores": {k: v for k, v in raw.items() if not isinstance(v, (list, dict))}}
    return _validated(ValuesResult, payload, "CVQ", owner)


def parse_competencies(raw: Any, owner: str = "") -> Optional[Dict[str, SubjectCompetency]]:
    if not isinstance(raw, dict) or not raw:
        return None
    competencies = {}
    for subject, value in raw.items():
        if not isinstance(value, dict):
            continue
        try:
            competencies[subject] = SubjectCompetency(**value)
        except ValidationError:
            logger.warning(f"Ignoring malformed quiz score for {subject} on assessment {owner}")
    return competencies or None


# =============================================================================
# TRANSFORMS
# =============================================================================

def transform_assessment(row: AssessmentModel) -> StudentProfile:
    owner = row.id
    return StudentProfile(
        id=row.id,
        name=row.name,
        age=row.age,
        grade=row.grade,
        gender=row.gender,
        country_id=row.country_id,
        tier=parse_tier(row.assessment_type, owner),
        favorite_subjects=row.favorite_subjects,
        interests=row.interests,
        subject_competencies=parse_competencies(row.subject_competencies, owner),
        learning_style=parse_learning_style(row.kolb_scores, owner),
        personality=parse_personality(row.riasec_scores, owner),
        values=parse_values(row.cvq_scores, owner),
    )


def transform_career(row: CareerModel) -> Career:
    fields = dict(
        id=row.id,
        title=row.title,
        description=row.description or "",
        category=row.category,
        related_subjects=row.related_subjects or [],
        required_skills=row.required_skills or [],
        education_level=row.education_level or "",
        average_salary=row.average_salary,
        growth_outlook=row.growth_outlook or "",
    )
    if not row.values_profile:
        return Career(**fields)
    try:
        return Career(values_profile=row.values_profile, **fields)
    except ValidationError as e:
        logger.warning(f"Ignoring malformed values profile on career {row.id}: {e.errors()[:1]}")
        return Career(**fields)


def transform_country(row: CountryModel) -> Country:
    return Country(
        id=row.id,
        name=row.name,
        code=row.code,
        mission=row.mission or "",
        vision=row.vision or "",
        priority_sectors=row.priority_sectors or [],
        national_goals=row.national_goals or [],
    )


def transform_component(row: AssessmentComponentModel) -> AssessmentComponent:
    return AssessmentComponent(
        id=row.id,
        key=row.key,
        name=row.name,
        description=row.description or "",
        weight=row.weight,
        is_active=row.is_active,
        requires_premium=row.requires_premium,
        display_order=row.display_order or 0,
    )


# =============================================================================
# REPOSITORY
# =============================================================================

class SqlAlchemyRepository(ReferenceRepository):
    """ReferenceRepository over a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    def get_profile(self, profile_id: str) -> Optional[StudentProfile]:
        row = self.db.get(AssessmentModel, profile_id)
        return transform_assessment(row) if row else None

    def list_careers(self) -> List[Career]:
        rows = self.db.scalars(select(CareerModel).order_by(CareerModel.title)).all()
        return [transform_career(row) for row in rows]

    def get_country(self, country_id: str) -> Optional[Country]:
        row = self.db.get(CountryModel, country_id)
        return transform_country(row) if row else None

    def list_components(self) -> List[AssessmentComponent]:
        rows = self.db.scalars(
            select(AssessmentComponentModel).order_by(
                AssessmentComponentModel.display_order,
                AssessmentComponentModel.key,
            )
        ).all()
        return [transform_component(row) for row in rows]

    def bulk_affinities(
        self,
        career_ids: Sequence[str],
        component_ids: Sequence[str],
    ) -> List[CareerComponentAffinity]:
        if not career_ids or not component_ids:
            return []

        rows = self.db.execute(
            select(CareerComponentAffinityModel, AssessmentComponentModel.key)
            .join(
                AssessmentComponentModel,
                CareerComponentAffinityModel.component_id == AssessmentComponentModel.id,
            )
            .where(CareerComponentAffinityModel.career_id.in_(list(career_ids)))
            .where(CareerComponentAffinityModel.component_id.in_(list(component_ids)))
        ).all()

        affinities = []
        for row, key in rows:
            affinity = build_affinity(row.career_id, row.component_id, key, row.affinity_data)
            if affinity is not None:
                affinities.append(affinity)
        return affinities
