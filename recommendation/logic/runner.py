"""
Engine Runner

Orchestrates the recommendation pipeline for a web request:
1. Wraps the DB session in the SQLAlchemy adapter
2. Serves the reference catalog from the process-wide cache
3. Runs the matching engine
4. Optionally persists the ranked matches, and reads back the latest set

This is a pure orchestration layer - NO scoring, NO transforms.
"""

import logging
import uuid
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models import AssessmentModel, CareerModel, RecommendationModel
from .adapter import SqlAlchemyRepository
from .constants import ComponentKey
from .contracts import CareerMatch
from .engine import MatchingEngine
from .errors import ProfileNotFoundError
from .repositories import CachedRepository, ReferenceDataCache
from .tier_weights import DEFAULT_TIER_WEIGHTS, TierWeightTable

logger = logging.getLogger(__name__)

# Shared by every request in this process
reference_cache = ReferenceDataCache()

# Component key -> denormalized score column on RecommendationModel
SCORE_COLUMNS = {
    ComponentKey.SUBJECTS.value: "subject_match_score",
    ComponentKey.INTERESTS.value: "interest_match_score",
    ComponentKey.VISION.value: "country_vision_alignment",
    ComponentKey.KOLB.value: "learning_style_score",
    ComponentKey.RIASEC.value: "personality_score",
    ComponentKey.CVQ.value: "values_score",
}


def build_engine(
    db: Session,
    tier_weights: TierWeightTable = DEFAULT_TIER_WEIGHTS,
    cache: Optional[ReferenceDataCache] = None,
) -> MatchingEngine:
    repository = CachedRepository(SqlAlchemyRepository(db), cache or reference_cache)
    return MatchingEngine(repository, tier_weights=tier_weights)


def run_recommendations(
    db: Session,
    assessment_id: str,
    tier_weights: TierWeightTable = DEFAULT_TIER_WEIGHTS,
    cache: Optional[ReferenceDataCache] = None,
) -> List[CareerMatch]:
    """
    Main entry point: run the matching pipeline for one assessment.

    Args:
        db: Database session
        assessment_id: Assessment (student profile) to match
        tier_weights: Tier weight table to apply
        cache: Reference cache; defaults to the process-wide one

    Returns:
        Ranked CareerMatch list (at most five)
    """
    logger.info(f"🚀 Starting career matching for assessment: {assessment_id}")
    engine = build_engine(db, tier_weights, cache)
    return engine.generate_recommendations(assessment_id)


def explain_career(
    db: Session,
    assessment_id: str,
    career_id: str,
    tier_weights: TierWeightTable = DEFAULT_TIER_WEIGHTS,
    cache: Optional[ReferenceDataCache] = None,
) -> CareerMatch:
    """Score one career for an assessment without threshold or ranking."""
    engine = build_engine(db, tier_weights, cache)
    return engine.score_single_career(assessment_id, career_id)


def summarize_reasoning(match: CareerMatch) -> str:
    return " ".join(
        f"{b.display_name}: {b.reasoning}" for b in match.component_scores
    )


def persist_recommendations(
    db: Session,
    assessment_id: str,
    matches: List[CareerMatch],
) -> str:
    """
    Write one row per match under a fresh generation id.

    Earlier generations are left untouched. The caller's session commits.

    Returns:
        The generation id
    """
    generation_id = str(uuid.uuid4())

    for rank, match in enumerate(matches, start=1):
        row = RecommendationModel(
            generation_id=generation_id,
            assessment_id=assessment_id,
            career_id=match.career.id,
            rank=rank,
            overall_match_score=match.overall_score,
            component_scores=[b.model_dump() for b in match.component_scores],
            reasoning=summarize_reasoning(match),
            required_education=match.career.education_level,
            applied_config_version=match.applied_config_version,
        )
        for breakdown in match.component_scores:
            column = SCORE_COLUMNS.get(breakdown.key)
            if column:
                setattr(row, column, breakdown.score)
        db.add(row)

    db.flush()
    logger.info(
        f"💾 Stored {len(matches)} recommendations for assessment {assessment_id} "
        f"(generation {generation_id})"
    )
    return generation_id


def load_latest_recommendations(
    db: Session,
    assessment_id: str,
) -> Tuple[Optional[str], List[Tuple[RecommendationModel, CareerModel]]]:
    """
    Stored matches of the most recent generation, in rank order, with their careers.

    Returns:
        (generation id, [(recommendation row, career row)]), or (None, []) when
        nothing has been stored for the assessment yet
    """
    if db.get(AssessmentModel, assessment_id) is None:
        raise ProfileNotFoundError(assessment_id)

    # ids are monotonic, so the newest row belongs to the latest generation
    generation_id = db.scalars(
        select(RecommendationModel.generation_id)
        .where(RecommendationModel.assessment_id == assessment_id)
        .order_by(RecommendationModel.id.desc())
        .limit(1)
    ).first()
    if generation_id is None:
        return None, []

    rows = db.execute(
        select(RecommendationModel, CareerModel)
        .join(CareerModel, RecommendationModel.career_id == CareerModel.id)
        .where(RecommendationModel.generation_id == generation_id)
        .order_by(RecommendationModel.rank)
    ).all()
    return generation_id, [(row, career) for row, career in rows]


def serialize_match(match: CareerMatch, rank: Optional[int] = None) -> Dict[str, Any]:
    """Convert CareerMatch to a JSON-serializable dict."""
    career = match.career
    data = {
        "career_id": career.id,
        "title": career.title,
        "category": career.category,
        "description": career.description,
        "education_level": career.education_level,
        "average_salary": career.average_salary,
        "growth_outlook": career.growth_outlook,
        "overall_score": match.overall_score,
        "component_scores": [
            {
                "key": b.key,
                "name": b.display_name,
                "score": b.score,
                "weight": b.weight,
                "reasoning": b.reasoning,
            }
            for b in match.component_scores
        ],
        "applied_weight": match.applied_weight,
        "applied_config_version": match.applied_config_version,
    }
    if rank is not None:
        data["rank"] = rank
    return data


def serialize_stored(row: RecommendationModel, career: CareerModel) -> Dict[str, Any]:
    """Stored recommendation joined with its career, shaped like serialize_match."""
    return {
        "career_id": career.id,
        "title": career.title,
        "category": career.category,
        "description": career.description,
        "education_level": row.required_education or career.education_level,
        "average_salary": career.average_salary,
        "growth_outlook": career.growth_outlook,
        "rank": row.rank,
        "overall_score": row.overall_match_score,
        "component_scores": [
            {
                "key": b.get("key"),
                "name": b.get("display_name"),
                "score": b.get("score"),
                "weight": b.get("weight"),
                "reasoning": b.get("reasoning"),
            }
            for b in row.component_scores or []
        ],
        "reasoning": row.reasoning,
        "applied_config_version": row.applied_config_version,
        "created_at": row.created_at.isoformat() if row.created_at else None,
    }
