"""
Test the recommendation API routes.
"""

import pytest
from fastapi.testclient import TestClient

from db import get_db
from main import app
from recommendation.logic.runner import reference_cache
from recommendation.models import AssessmentModel, RecommendationModel


@pytest.fixture
def client(db, session_factory):
    db.add(AssessmentModel(
        id="assessment-1",
        assessment_type="basic",
        country_id="uae",
        favorite_subjects=["Mathematics", "Science"],
        interests=["Technology"],
    ))
    db.add(AssessmentModel(id="assessment-empty", assessment_type="basic"))
    db.commit()

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    reference_cache.invalidate()
    yield TestClient(app)
    app.dependency_overrides.clear()
    reference_cache.invalidate()


def test_generate_recommendations(client, db):
    response = client.post("/recommendations/assessment-1")

    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 4
    assert body["generation_id"]
    first = body["recommendations"][0]
    assert first["rank"] == 1
    assert first["title"] == "Data Scientist"
    assert first["overall_score"] == 64.7
    assert [c["key"] for c in first["component_scores"]] == ["subjects", "interests", "vision"]
    assert db.query(RecommendationModel).count() == 4


def test_generate_without_persisting(client, db):
    response = client.post("/recommendations/assessment-1", params={"persist": "false"})

    assert response.status_code == 200
    assert response.json()["generation_id"] is None
    assert db.query(RecommendationModel).count() == 0


def test_unknown_assessment_is_404(client):
    response = client.post("/recommendations/ghost")
    assert response.status_code == 404
    assert "ghost" in response.json()["detail"]


def test_insufficient_data_is_422(client):
    response = client.post("/recommendations/assessment-empty")
    assert response.status_code == 422


def test_stored_recommendations_return_latest_generation(client):
    first = client.post("/recommendations/assessment-1").json()["generation_id"]
    second = client.post("/recommendations/assessment-1").json()["generation_id"]

    response = client.get("/recommendations/assessment-1")

    assert response.status_code == 200
    body = response.json()
    assert first != second
    assert body["generation_id"] == second
    assert body["count"] == 4
    assert [r["rank"] for r in body["recommendations"]] == [1, 2, 3, 4]
    top = body["recommendations"][0]
    assert top["title"] == "Data Scientist"
    assert top["category"] == "Technology"
    assert top["overall_score"] == 64.7
    assert [c["key"] for c in top["component_scores"]] == ["subjects", "interests", "vision"]
    assert top["component_scores"][2]["score"] == 60


def test_stored_recommendations_empty_before_generation(client):
    response = client.get("/recommendations/assessment-1")

    assert response.status_code == 200
    assert response.json()["generation_id"] is None
    assert response.json()["recommendations"] == []


def test_stored_recommendations_unknown_assessment_is_404(client):
    assert client.get("/recommendations/ghost").status_code == 404


def test_explain_single_career(client):
    response = client.get("/recommendations/assessment-1/careers/nurse")

    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Healthcare Professional (Nurse)"
    assert body["overall_score"] == 19.0
    assert "rank" not in body


def test_explain_unknown_career_is_404(client):
    response = client.get("/recommendations/assessment-1/careers/astronaut")
    assert response.status_code == 404


def test_tier_weights(client):
    response = client.get("/recommendations/tiers")

    assert response.status_code == 200
    tiers = response.json()["tiers"]
    assert tiers["basic"]["subjects"] == 35
    assert tiers["basic"]["riasec"] is None
    assert tiers["premium"]["riasec"] == 30
    assert tiers["group"]["market"] is None


def test_cache_invalidate(client):
    client.post("/recommendations/assessment-1", params={"persist": "false"})
    assert reference_cache.is_loaded

    response = client.post("/recommendations/cache/invalidate")

    assert response.status_code == 200
    assert not reference_cache.is_loaded


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_default_session_dependency_serves_requests():
    reference_cache.invalidate()
    try:
        response = TestClient(app).post("/recommendations/ghost")
    finally:
        reference_cache.invalidate()

    assert response.status_code == 404
