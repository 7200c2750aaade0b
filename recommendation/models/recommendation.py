from sqlalchemy import Column, Integer, String, Text, Float, DateTime, JSON, ForeignKey, func

from .base import Base


class RecommendationModel(Base):
    """One persisted career match. Rows are written once per generation and never edited."""
    __tablename__ = "recommendations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    generation_id = Column(String, nullable=False, index=True)
    assessment_id = Column(String, ForeignKey("assessments.id"), nullable=False, index=True)
    career_id = Column(String, ForeignKey("careers.id"), nullable=False)
    rank = Column(Integer, nullable=False)

    # Denormalized scores (NULL when the component did not apply)
    overall_match_score = Column(Float, nullable=False)
    subject_match_score = Column(Float)
    interest_match_score = Column(Float)
    country_vision_alignment = Column(Float)
    learning_style_score = Column(Float)
    personality_score = Column(Float)
    values_score = Column(Float)

    component_scores = Column(JSON, nullable=False, default=list)
    reasoning = Column(Text, nullable=False, default="")
    required_education = Column(String, nullable=False, default="")
    applied_config_version = Column(String, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
