"""
Shared fixtures for the career matching tests.
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from db import Base
from recommendation.logic import StudentProfile
from recommendation.seed import build_seed_repository, seed_database

BASIC_STUDENT = {
    "id": "student-basic",
    "name": "Layla",
    "age": 15,
    "grade": "10",
    "country_id": "uae",
    "tier": "basic",
    "favorite_subjects": ["Mathematics", "Science"],
    "interests": ["Technology"],
}


@pytest.fixture
def basic_profile():
    return StudentProfile(**BASIC_STUDENT)


@pytest.fixture
def seed_repository(basic_profile):
    repository = build_seed_repository()
    repository.add_profile(basic_profile)
    return repository


@pytest.fixture
def session_factory():
    """Fresh in-memory SQLite database shared by every session of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(bind=engine, autoflush=False, autocommit=False)
    yield factory
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    seed_database(session)
    session.commit()
    yield session
    session.close()
