from sqlalchemy import Column, Integer, String, Text, Float, Boolean, DateTime, JSON, ForeignKey, UniqueConstraint, func

from .base import Base


class AssessmentComponentModel(Base):
    __tablename__ = "assessment_components"

    id = Column(String, primary_key=True)
    key = Column(String, nullable=False, unique=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="")
    weight = Column(Float, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    requires_premium = Column(Boolean, nullable=False, default=False)
    display_order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())


class CareerComponentAffinityModel(Base):
    __tablename__ = "career_component_affinities"
    __table_args__ = (UniqueConstraint("career_id", "component_id"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    career_id = Column(String, ForeignKey("careers.id"), nullable=False)
    component_id = Column(String, ForeignKey("assessment_components.id"), nullable=False)

    # Shape depends on the component (RIASEC themes, Kolb styles)
    affinity_data = Column(JSON, nullable=False)

    rationale = Column(Text)
    created_at = Column(DateTime, server_default=func.now())
