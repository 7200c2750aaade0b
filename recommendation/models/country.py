from sqlalchemy import Column, String, Text, DateTime, JSON, func

from .base import Base


class CountryModel(Base):
    __tablename__ = "countries"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    code = Column(String(3), unique=True)
    mission = Column(Text, nullable=False, default="")
    vision = Column(Text, nullable=False, default="")
    vision_plan = Column(Text)

    # Ordered: index 0 is the highest national priority
    priority_sectors = Column(JSON, nullable=False, default=list)
    national_goals = Column(JSON, nullable=False, default=list)

    flag = Column(String)
    created_at = Column(DateTime, server_default=func.now())
