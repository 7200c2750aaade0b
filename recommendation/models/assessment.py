from sqlalchemy import Column, Integer, String, Boolean, DateTime, JSON, ForeignKey, func

from .base import Base


class AssessmentModel(Base):
    """A student's assessment session; the matching engine reads it as a StudentProfile."""
    __tablename__ = "assessments"

    id = Column(String, primary_key=True)
    user_id = Column(String)
    assessment_type = Column(String, nullable=False, default="basic")

    # Demographics
    name = Column(String)
    age = Column(Integer)
    grade = Column(String)
    gender = Column(String)
    country_id = Column(String, ForeignKey("countries.id"))

    # Preferences (NULL = step not answered)
    favorite_subjects = Column(JSON)
    interests = Column(JSON)

    # Quiz: subject -> {correct, total, percentage}
    subject_competencies = Column(JSON)

    # Instruments, stored as submitted
    kolb_scores = Column(JSON)
    riasec_scores = Column(JSON)
    cvq_scores = Column(JSON)

    current_step = Column(Integer, nullable=False, default=1)
    is_completed = Column(Boolean, nullable=False, default=False)
    completed_at = Column(DateTime)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
