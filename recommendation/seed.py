"""
Reference Data Seed

Countries, careers, assessment components and per-career affinities for the
career matching engine. Loaded into the database with:

    python -m recommendation.seed

and into an InMemoryRepository with build_seed_repository() for previews and
tests. Seeding is idempotent: rows whose id already exists are left alone.
"""

import logging
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from .logic.affinity import build_affinity
from .logic.constants import ComponentKey
from .logic.contracts import AssessmentComponent, Career, Country
from .logic.repositories import InMemoryRepository
from .models import (
    AssessmentComponentModel,
    CareerComponentAffinityModel,
    CareerModel,
    CountryModel,
)

logger = logging.getLogger(__name__)


# =============================================================================
# COUNTRIES
# =============================================================================

SEED_COUNTRIES: List[Dict[str, Any]] = [
    {
        "id": "uae",
        "name": "United Arab Emirates",
        "code": "UAE",
        "flag": "🇦🇪",
        "mission": "To establish the UAE as having the best government, education, and economy in the world through four key pillars: future-focused government, excellent education, diversified knowledge economy, and happy cohesive society.",
        "vision": "To be the best country in the world by the UAE's 100th anniversary in 2071, leading in AI, space exploration, and sustainable development.",
        "vision_plan": "UAE Centennial 2071",
        "priority_sectors": ["Artificial Intelligence", "Space Exploration", "Biotechnology", "Renewable Energy", "Education", "Technology"],
        "national_goals": [
            "100% AI reliance for government services by 2031",
            "50% clean energy by 2050",
            "Double GDP from AED 1.49 trillion to AED 3 trillion",
            "Mars colonization by 2117",
        ],
    },
    {
        "id": "saudi-arabia",
        "name": "Saudi Arabia",
        "code": "SAU",
        "flag": "🇸🇦",
        "mission": "To reduce oil dependence and diversify the economy through three core pillars: a vibrant society, a thriving economy, and an ambitious nation.",
        "vision": "Transform Saudi Arabia into a global investment powerhouse and a hub connecting three continents by 2030.",
        "vision_plan": "Vision 2030",
        "priority_sectors": ["Renewable Energy", "Tourism & Entertainment", "Mining", "Technology & Innovation", "Healthcare", "Manufacturing", "Financial Services"],
        "national_goals": [
            "Increase private sector contribution from 40% to 65% of GDP",
            "Increase non-oil revenue sources",
            "Raise SME contribution from 20% to 35% of GDP",
            "Expand Umrah capacity from 8M to 30M visitors annually",
        ],
    },
    {
        "id": "singapore",
        "name": "Singapore",
        "code": "SGP",
        "flag": "🇸🇬",
        "mission": "To create a thriving digital future for all through tech-enabled solutions, supporting better living, stronger communities, and creating opportunities.",
        "vision": "Become the world's first Smart Nation by 2030, leveraging AI, IoT, and data analytics for sustainable and inclusive growth.",
        "vision_plan": "Smart Nation 2.0",
        "priority_sectors": ["Artificial Intelligence", "Cybersecurity", "Healthcare Technology", "FinTech", "Smart Cities", "Education Technology"],
        "national_goals": [
            "Expand AI workforce from 4,500 to 15,000 practitioners by 2029",
            "AI market to reach $4.5B by 2030",
            "80% of buildings achieve green certification by 2030",
            "70% recycling rate by 2030",
        ],
    },
    {
        "id": "usa",
        "name": "United States",
        "code": "USA",
        "flag": "🇺🇸",
        "mission": "To preserve freedom, promote prosperity, and provide security for all Americans through democratic governance and economic opportunity.",
        "vision": "Maintain global leadership in innovation, technology, and economic development while ensuring equal opportunities for all citizens.",
        "vision_plan": "National Development Strategy",
        "priority_sectors": ["Technology & Innovation", "Healthcare", "Clean Energy", "Manufacturing", "Aerospace", "Financial Services"],
        "national_goals": [
            "Lead in technological innovation",
            "Transition to clean energy",
            "Strengthen domestic manufacturing",
            "Improve healthcare access",
        ],
    },
    {
        "id": "uk",
        "name": "United Kingdom",
        "code": "GBR",
        "flag": "🇬🇧",
        "mission": "To build a fair, prosperous, and secure nation that works for everyone, promoting innovation, education, and sustainable growth.",
        "vision": "Be a global leader in science, technology, and creative industries while maintaining strong international partnerships.",
        "vision_plan": "UK National Strategy",
        "priority_sectors": ["Financial Services", "Technology", "Life Sciences", "Creative Industries", "Advanced Manufacturing", "Green Energy"],
        "national_goals": [
            "Achieve net zero emissions by 2050",
            "Strengthen digital infrastructure",
            "Advance life sciences research",
            "Promote creative exports",
        ],
    },
]


# =============================================================================
# CAREERS
# =============================================================================

SEED_CAREERS: List[Dict[str, Any]] = [
    {
        "id": "software-engineer",
        "title": "Software Engineer",
        "description": "Design, develop, and maintain software applications and systems",
        "required_skills": ["Programming", "Problem Solving", "Data Structures", "Algorithms"],
        "related_subjects": ["Computer Science", "Mathematics", "Physics"],
        "category": "Technology",
        "education_level": "Bachelor's degree in Computer Science or related field",
        "average_salary": "$80,000 - $150,000",
        "growth_outlook": "Excellent (25% growth)",
        "values_profile": {"achievement": 75, "benevolence": 40, "universalism": 45, "self-direction": 85, "security": 60, "power": 40, "hedonism": 50},
    },
    {
        "id": "data-scientist",
        "title": "Data Scientist",
        "description": "Analyze complex data to help organizations make better decisions",
        "required_skills": ["Statistics", "Machine Learning", "Python/R", "Data Visualization"],
        "related_subjects": ["Mathematics", "Computer Science", "Statistics"],
        "category": "Technology",
        "education_level": "Bachelor's or Master's degree in Data Science, Statistics, or Computer Science",
        "average_salary": "$90,000 - $160,000",
        "growth_outlook": "Excellent (36% growth)",
        "values_profile": {"achievement": 80, "benevolence": 40, "universalism": 50, "self-direction": 85, "security": 55, "power": 45, "hedonism": 40},
    },
    {
        "id": "renewable-energy-engineer",
        "title": "Renewable Energy Engineer",
        "description": "Design and implement sustainable energy solutions",
        "required_skills": ["Engineering Design", "Sustainability", "Project Management", "Technical Analysis"],
        "related_subjects": ["Physics", "Mathematics", "Chemistry", "Engineering"],
        "category": "Engineering",
        "education_level": "Bachelor's degree in Engineering (Electrical, Mechanical, or Environmental)",
        "average_salary": "$70,000 - $120,000",
        "growth_outlook": "Very Good (20% growth)",
        "values_profile": {"achievement": 70, "benevolence": 60, "universalism": 90, "self-direction": 70, "security": 55, "power": 35, "hedonism": 35},
    },
    {
        "id": "nurse",
        "title": "Healthcare Professional (Nurse)",
        "description": "Provide patient care and support in hospitals, clinics, and healthcare facilities",
        "required_skills": ["Patient Care", "Medical Knowledge", "Communication", "Empathy"],
        "related_subjects": ["Biology", "Chemistry", "Health Science"],
        "category": "Healthcare",
        "education_level": "Bachelor's of Science in Nursing (BSN)",
        "average_salary": "$60,000 - $95,000",
        "growth_outlook": "Excellent (6% growth)",
        "values_profile": {"achievement": 55, "benevolence": 95, "universalism": 75, "self-direction": 45, "security": 75, "power": 20, "hedonism": 30},
    },
    {
        "id": "digital-marketing-specialist",
        "title": "Digital Marketing Specialist",
        "description": "Create and manage online marketing campaigns to promote brands and products",
        "required_skills": ["Social Media", "Content Creation", "Analytics", "SEO/SEM"],
        "related_subjects": ["Business", "English", "Computer Science", "Art"],
        "category": "Business & Marketing",
        "education_level": "Bachelor's degree in Marketing, Communications, or Business",
        "average_salary": "$50,000 - $85,000",
        "growth_outlook": "Very Good (10% growth)",
        "values_profile": {"achievement": 80, "benevolence": 40, "universalism": 35, "self-direction": 70, "security": 45, "power": 65, "hedonism": 65},
    },
    {
        "id": "graphic-designer",
        "title": "Graphic Designer",
        "description": "Create visual concepts to communicate ideas that inspire and inform consumers",
        "required_skills": ["Creative Design", "Adobe Creative Suite", "Typography", "Visual Communication"],
        "related_subjects": ["Art", "Computer Science", "Design"],
        "category": "Creative Arts",
        "education_level": "Bachelor's degree in Graphic Design or Fine Arts",
        "average_salary": "$45,000 - $75,000",
        "growth_outlook": "Good (3% growth)",
        "values_profile": {"achievement": 60, "benevolence": 45, "universalism": 55, "self-direction": 95, "security": 35, "power": 25, "hedonism": 75},
    },
    {
        "id": "mechanical-engineer",
        "title": "Mechanical Engineer",
        "description": "Design, develop, and test mechanical devices and systems",
        "required_skills": ["CAD Software", "Physics", "Materials Science", "Problem Solving"],
        "related_subjects": ["Physics", "Mathematics", "Engineering"],
        "category": "Engineering",
        "education_level": "Bachelor's degree in Mechanical Engineering",
        "average_salary": "$70,000 - $110,000",
        "growth_outlook": "Good (2% growth)",
        "values_profile": {"achievement": 75, "benevolence": 40, "universalism": 45, "self-direction": 70, "security": 70, "power": 40, "hedonism": 35},
    },
    {
        "id": "financial-analyst",
        "title": "Financial Analyst",
        "description": "Analyze financial data to guide business and investment decisions",
        "required_skills": ["Financial Modeling", "Excel", "Data Analysis", "Risk Assessment"],
        "related_subjects": ["Mathematics", "Economics", "Business"],
        "category": "Finance",
        "education_level": "Bachelor's degree in Finance, Economics, or Accounting",
        "average_salary": "$65,000 - $105,000",
        "growth_outlook": "Good (9% growth)",
        "values_profile": {"achievement": 85, "benevolence": 30, "universalism": 30, "self-direction": 55, "security": 80, "power": 75, "hedonism": 40},
    },
    {
        "id": "secondary-teacher",
        "title": "Teacher (Secondary Education)",
        "description": "Educate and inspire students in middle and high school settings",
        "required_skills": ["Subject Expertise", "Communication", "Patience", "Curriculum Development"],
        "related_subjects": ["Education", "Subject Specialization"],
        "category": "Education",
        "education_level": "Bachelor's degree in Education or subject area + teaching certification",
        "average_salary": "$45,000 - $75,000",
        "growth_outlook": "Good (4% growth)",
        "values_profile": {"achievement": 55, "benevolence": 90, "universalism": 80, "self-direction": 55, "security": 70, "power": 30, "hedonism": 35},
    },
    {
        "id": "environmental-scientist",
        "title": "Environmental Scientist",
        "description": "Study and develop solutions to environmental problems",
        "required_skills": ["Research", "Data Analysis", "Environmental Policy", "Field Work"],
        "related_subjects": ["Biology", "Chemistry", "Geography", "Environmental Science"],
        "category": "Science",
        "education_level": "Bachelor's degree in Environmental Science or related field",
        "average_salary": "$55,000 - $90,000",
        "growth_outlook": "Very Good (8% growth)",
        "values_profile": {"achievement": 65, "benevolence": 70, "universalism": 95, "self-direction": 75, "security": 50, "power": 25, "hedonism": 40},
    },
]


# =============================================================================
# COMPONENTS
# =============================================================================

SEED_COMPONENTS: List[Dict[str, Any]] = [
    {
        "id": "component-subjects",
        "key": ComponentKey.SUBJECTS.value,
        "name": "Subject Alignment",
        "description": "Favorite subjects and quiz competency against the career's core subjects",
        "weight": 35,
        "is_active": True,
        "requires_premium": False,
        "display_order": 1,
    },
    {
        "id": "component-interests",
        "key": ComponentKey.INTERESTS.value,
        "name": "Interest Alignment",
        "description": "Stated interests against the career's category",
        "weight": 35,
        "is_active": True,
        "requires_premium": False,
        "display_order": 2,
    },
    {
        "id": "component-vision",
        "key": ComponentKey.VISION.value,
        "name": "National Vision Alignment",
        "description": "Career category against the country's priority sectors",
        "weight": 30,
        "is_active": True,
        "requires_premium": False,
        "display_order": 3,
    },
    {
        "id": "component-riasec",
        "key": ComponentKey.RIASEC.value,
        "name": "Personality Fit (RIASEC)",
        "description": "Holland Code profile against the career's theme affinities",
        "weight": 30,
        "is_active": True,
        "requires_premium": True,
        "display_order": 4,
    },
    {
        "id": "component-cvq",
        "key": ComponentKey.CVQ.value,
        "name": "Values Alignment (CVQ)",
        "description": "Children's Values Questionnaire result against the career's values profile",
        "weight": 20,
        "is_active": True,
        "requires_premium": True,
        "display_order": 5,
    },
    {
        "id": "component-kolb",
        "key": ComponentKey.KOLB.value,
        "name": "Learning Style Fit (Kolb)",
        "description": "Kolb learning style against the career's learning-style affinities",
        "weight": 10,
        "is_active": True,
        "requires_premium": True,
        "display_order": 6,
    },
]


# =============================================================================
# AFFINITIES
# =============================================================================

# Holland theme affinity (0-100) per career
RIASEC_AFFINITIES: Dict[str, Dict[str, Any]] = {
    "software-engineer": {
        "scores": {"R": 40, "I": 90, "A": 30, "S": 20, "E": 35, "C": 70},
        "rationale": "Highly investigative (problem-solving, algorithms) and conventional (structured code, documentation).",
    },
    "data-scientist": {
        "scores": {"R": 25, "I": 95, "A": 25, "S": 25, "E": 40, "C": 75},
        "rationale": "Extremely investigative (statistical analysis, research) and highly conventional (data structures, methodologies).",
    },
    "renewable-energy-engineer": {
        "scores": {"R": 75, "I": 80, "A": 20, "S": 25, "E": 45, "C": 60},
        "rationale": "High realistic (hands-on engineering, field work) and investigative (technical problem-solving, design).",
    },
    "nurse": {
        "scores": {"R": 55, "I": 60, "A": 20, "S": 95, "E": 30, "C": 65},
        "rationale": "Extremely social (patient care, empathy, communication) and moderate-high investigative (medical knowledge, diagnosis).",
    },
    "digital-marketing-specialist": {
        "scores": {"R": 15, "I": 50, "A": 70, "S": 60, "E": 85, "C": 55},
        "rationale": "High enterprising (persuasion, campaigns, ROI) and artistic (content creation, design).",
    },
    "graphic-designer": {
        "scores": {"R": 30, "I": 35, "A": 95, "S": 45, "E": 30, "C": 40},
        "rationale": "Extremely artistic (visual creativity, design thinking) and moderate social (client collaboration).",
    },
    "mechanical-engineer": {
        "scores": {"R": 85, "I": 80, "A": 25, "S": 20, "E": 40, "C": 70},
        "rationale": "High realistic (hands-on prototyping, testing) and investigative (physics, materials science).",
    },
    "financial-analyst": {
        "scores": {"R": 15, "I": 75, "A": 15, "S": 25, "E": 65, "C": 90},
        "rationale": "Extremely conventional (financial models, reporting standards) and high investigative (data analysis, risk assessment).",
    },
    "secondary-teacher": {
        "scores": {"R": 25, "I": 60, "A": 50, "S": 95, "E": 40, "C": 60},
        "rationale": "Extremely social (student interaction, mentoring, communication) and moderate investigative (subject expertise).",
    },
    "environmental-scientist": {
        "scores": {"R": 65, "I": 90, "A": 20, "S": 40, "E": 35, "C": 70},
        "rationale": "Highly investigative (research, data analysis, environmental policy) and realistic (field work, sample collection).",
    },
}

# Learning-style affinity (0-100) per career
KOLB_AFFINITIES: Dict[str, Dict[str, Any]] = {
    "software-engineer": {
        "scores": {"Converging": 90, "Assimilating": 80, "Accommodating": 55, "Diverging": 40},
        "rationale": "Applies abstract models to concrete technical problems.",
    },
    "data-scientist": {
        "scores": {"Assimilating": 90, "Converging": 85, "Diverging": 55, "Accommodating": 40},
        "rationale": "Builds models from observation and tests them against data.",
    },
    "renewable-energy-engineer": {
        "scores": {"Converging": 90, "Accommodating": 70, "Assimilating": 70, "Diverging": 45},
        "rationale": "Practical application of engineering theory in the field.",
    },
    "nurse": {
        "scores": {"Accommodating": 85, "Diverging": 80, "Converging": 60, "Assimilating": 45},
        "rationale": "Hands-on, people-centred work that responds to changing situations.",
    },
    "digital-marketing-specialist": {
        "scores": {"Accommodating": 90, "Diverging": 75, "Converging": 55, "Assimilating": 45},
        "rationale": "Experiments quickly and adapts campaigns to audience response.",
    },
    "graphic-designer": {
        "scores": {"Diverging": 90, "Accommodating": 75, "Assimilating": 50, "Converging": 45},
        "rationale": "Generates ideas from multiple perspectives.",
    },
    "mechanical-engineer": {
        "scores": {"Converging": 95, "Assimilating": 75, "Accommodating": 65, "Diverging": 40},
        "rationale": "Solves practical problems with technical reasoning.",
    },
    "financial-analyst": {
        "scores": {"Assimilating": 90, "Converging": 80, "Diverging": 45, "Accommodating": 40},
        "rationale": "Organizes information into logical, reviewable models.",
    },
    "secondary-teacher": {
        "scores": {"Diverging": 85, "Accommodating": 75, "Assimilating": 65, "Converging": 50},
        "rationale": "Relates to learners and adapts explanations to them.",
    },
    "environmental-scientist": {
        "scores": {"Assimilating": 85, "Diverging": 75, "Converging": 70, "Accommodating": 55},
        "rationale": "Observes, reflects and builds theory from field evidence.",
    },
}

AFFINITY_SEEDS = {
    ComponentKey.RIASEC.value: RIASEC_AFFINITIES,
    ComponentKey.KOLB.value: KOLB_AFFINITIES,
}


def _component_ids_by_key() -> Dict[str, str]:
    return {component["key"]: component["id"] for component in SEED_COMPONENTS}


# =============================================================================
# LOADERS
# =============================================================================

def build_seed_repository() -> InMemoryRepository:
    """Seed data as an in-memory repository (no profiles)."""
    component_ids = _component_ids_by_key()
    affinities = []
    for key, per_career in AFFINITY_SEEDS.items():
        for career_id, entry in per_career.items():
            affinity = build_affinity(career_id, component_ids[key], key, entry["scores"])
            if affinity is not None:
                affinities.append(affinity)

    return InMemoryRepository(
        careers=[Career(**career) for career in SEED_CAREERS],
        countries=[
            Country(**{k: v for k, v in country.items() if k in Country.model_fields})
            for country in SEED_COUNTRIES
        ],
        components=[AssessmentComponent(**component) for component in SEED_COMPONENTS],
        affinities=affinities,
    )


def seed_database(db: Session) -> Dict[str, int]:
    """
    Insert seed rows that are not present yet.

    Returns:
        Count of rows created per table
    """
    created = {"countries": 0, "careers": 0, "components": 0, "affinities": 0}

    for country in SEED_COUNTRIES:
        if db.get(CountryModel, country["id"]) is None:
            db.add(CountryModel(**country))
            created["countries"] += 1
            logger.info(f"✓ Created country: {country['name']}")

    for career in SEED_CAREERS:
        if db.get(CareerModel, career["id"]) is None:
            db.add(CareerModel(**career))
            created["careers"] += 1
            logger.info(f"✓ Created career: {career['title']}")

    for component in SEED_COMPONENTS:
        if db.get(AssessmentComponentModel, component["id"]) is None:
            db.add(AssessmentComponentModel(**component))
            created["components"] += 1

    db.flush()

    existing = {
        (row.career_id, row.component_id)
        for row in db.query(CareerComponentAffinityModel).all()
    }
    component_ids = _component_ids_by_key()
    for key, per_career in AFFINITY_SEEDS.items():
        component_id = component_ids[key]
        for career_id, entry in per_career.items():
            if (career_id, component_id) in existing:
                continue
            db.add(CareerComponentAffinityModel(
                career_id=career_id,
                component_id=component_id,
                affinity_data=entry["scores"],
                rationale=entry["rationale"],
            ))
            created["affinities"] += 1

    db.flush()
    logger.info(f"🌱 Seed complete: {created}")
    return created


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    from db import init_db, session_scope

    init_db()
    with session_scope() as db:
        seed_database(db)
