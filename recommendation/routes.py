"""
Career Recommendation API Routes

Exposes the career matching engine via REST API.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from db import get_db
from .logic.errors import (
    ConfigurationError,
    InsufficientProfileDataError,
    MatchingError,
    NotFoundError,
)
from .logic.runner import (
    explain_career,
    load_latest_recommendations,
    persist_recommendations,
    reference_cache,
    run_recommendations,
    serialize_match,
    serialize_stored,
)
from .logic.tier_weights import DEFAULT_TIER_WEIGHTS

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recommendations", tags=["recommendations"])


def _to_http_error(e: MatchingError) -> HTTPException:
    """Map engine errors to HTTP status codes."""
    if isinstance(e, NotFoundError):
        return HTTPException(status_code=404, detail=str(e))
    if isinstance(e, InsufficientProfileDataError):
        return HTTPException(status_code=422, detail=str(e))
    if isinstance(e, ConfigurationError):
        logger.error(f"❌ Matching configuration error: {e}")
        return HTTPException(status_code=500, detail="Career matching is misconfigured")
    return HTTPException(status_code=500, detail=str(e))


# =============================================================================
# CONFIGURATION
# =============================================================================

@router.get("/tiers", summary="Tier weight configuration")
def get_tier_weights() -> Dict[str, Any]:
    """Effective component weights per assessment tier (None = not used)."""
    return {"tiers": DEFAULT_TIER_WEIGHTS.as_dict()}


@router.post("/cache/invalidate", summary="Reload reference data")
def invalidate_reference_cache():
    """Drop the cached careers/components/affinities so the next request reloads them."""
    reference_cache.invalidate()
    return {"status": "ok"}


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("/{assessment_id}", summary="Generate career recommendations")
def generate_recommendations(
    assessment_id: str,
    persist: bool = Query(default=True, description="Store the generated matches"),
    db: Session = Depends(get_db),
):
    """
    Generate the top career matches for a completed assessment.

    **Response:**
    - Up to five careers scored 40 or above, best first
    - Per-component score, weight and reasoning for each career
    - The configuration fingerprint the scores were computed with
    """
    try:
        matches = run_recommendations(db, assessment_id)
    except MatchingError as e:
        raise _to_http_error(e)

    generation_id = None
    if persist and matches:
        generation_id = persist_recommendations(db, assessment_id, matches)
        db.commit()

    return {
        "assessment_id": assessment_id,
        "generation_id": generation_id,
        "count": len(matches),
        "recommendations": [
            serialize_match(match, rank) for rank, match in enumerate(matches, start=1)
        ],
    }


@router.get("/{assessment_id}", summary="Latest stored recommendations")
def get_stored_recommendations(assessment_id: str, db: Session = Depends(get_db)):
    """
    The most recently generated set of recommendations for an assessment,
    in rank order and joined with career details. Older generations are not
    returned.
    """
    try:
        generation_id, rows = load_latest_recommendations(db, assessment_id)
    except MatchingError as e:
        raise _to_http_error(e)

    return {
        "assessment_id": assessment_id,
        "generation_id": generation_id,
        "count": len(rows),
        "recommendations": [serialize_stored(row, career) for row, career in rows],
    }


@router.get("/{assessment_id}/careers/{career_id}", summary="Explain one career match")
def get_career_match(
    assessment_id: str,
    career_id: str,
    db: Session = Depends(get_db),
):
    """Score a single career for an assessment, without threshold or ranking."""
    try:
        match = explain_career(db, assessment_id, career_id)
    except MatchingError as e:
        raise _to_http_error(e)
    return serialize_match(match)
