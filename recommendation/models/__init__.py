# Export all career matching models for easy imports
from .base import Base
from .country import CountryModel
from .career import CareerModel
from .assessment import AssessmentModel
from .component import AssessmentComponentModel, CareerComponentAffinityModel
from .recommendation import RecommendationModel

__all__ = [
    "Base",
    "CountryModel",
    "CareerModel",
    "AssessmentModel",
    "AssessmentComponentModel",
    "CareerComponentAffinityModel",
    "RecommendationModel",
]
