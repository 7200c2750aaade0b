from sqlalchemy import Column, String, Text, DateTime, JSON, func

from .base import Base


class CareerModel(Base):
    __tablename__ = "careers"

    id = Column(String, primary_key=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="")
    category = Column(String, nullable=False)
    required_skills = Column(JSON, nullable=False, default=list)
    related_subjects = Column(JSON, nullable=False, default=list)
    education_level = Column(String, nullable=False, default="")
    average_salary = Column(String)
    growth_outlook = Column(String, nullable=False, default="")
    icon = Column(String)

    # CVQ domain -> 0-100, used for values matching
    values_profile = Column(JSON)

    created_at = Column(DateTime, server_default=func.now())
