"""
Matching Lexicons

Static synonym tables used by the interest and subject scorers, and the
case-insensitive text matching shared by the interest and vision scorers.
"""

import re
from typing import Dict, List

# Student interest -> career categories it points at
INTEREST_CATEGORIES: Dict[str, List[str]] = {
    "Technology": ["Technology", "IT & Software", "Engineering"],
    "Healthcare": ["Healthcare", "Medical", "Nursing", "Health Services"],
    "Arts & Design": ["Creative", "Design", "Arts", "Media"],
    "Creative": ["Creative", "Design", "Arts", "Media"],
    "Business": ["Business", "Management", "Finance", "Entrepreneurship"],
    "Education": ["Education", "Teaching", "Training", "Academia"],
    "Science": ["Science", "Research", "Engineering", "Laboratory"],
    "Research": ["Science", "Research", "Laboratory"],
    "Sports": ["Sports", "Athletics", "Fitness", "Recreation"],
    "Social Services": ["Social Services", "Community", "Nonprofit", "Counseling"],
    "Law & Government": ["Legal", "Government", "Public Service", "Policy"],
    "Environment": ["Environmental", "Science", "Sustainability", "Conservation"],
    "Media & Communication": ["Media", "Communication", "Journalism", "Broadcasting"],
    "Engineering": ["Engineering", "Technology", "Construction", "Manufacturing"],
    "Food & Hospitality": ["Culinary", "Hospitality", "Food Service", "Tourism"],
    "Fashion & Style": ["Fashion", "Design", "Retail", "Creative"],
    "Gaming & Animation": ["Gaming", "Technology", "Creative", "Entertainment"],
    "Problem Solving": ["Technology", "Engineering", "Science", "Business"],
    "Leadership": ["Business", "Management", "Education", "Government"],
    "Helping": ["Healthcare", "Social Services", "Education", "Community"],
    "Physical": ["Sports", "Healthcare", "Physical Therapy", "Fitness"],
}

# Subject names -> canonical quiz subjects
SUBJECT_ALIASES: Dict[str, str] = {
    # Science
    "Physics": "Science",
    "Chemistry": "Science",
    "Biology": "Science",
    "Physical Science": "Science",
    "Life Science": "Science",
    # Social Studies
    "Economics": "Social Studies",
    "History": "Social Studies",
    "Geography": "Social Studies",
    "Civics": "Social Studies",
    "Government": "Social Studies",
    "Sociology": "Social Studies",
    # Computer Science
    "Programming": "Computer Science",
    "Coding": "Computer Science",
    "IT": "Computer Science",
    "Technology": "Computer Science",
    # Mathematics
    "Math": "Mathematics",
    "Maths": "Mathematics",
    "Calculus": "Mathematics",
    "Algebra": "Mathematics",
    "Geometry": "Mathematics",
    # English
    "English Language": "English",
    "Literature": "English",
    "Writing": "English",
    # Arabic
    "Arabic Language": "Arabic",
}

_PUNCTUATION = re.compile(r"[.,;:!?()\[\]{}'\"]")
_WHITESPACE = re.compile(r"\s+")

_INTEREST_INDEX = {key.casefold(): values for key, values in INTEREST_CATEGORIES.items()}
_SUBJECT_INDEX = {key.casefold(): value for key, value in SUBJECT_ALIASES.items()}


def normalize_text(text: str) -> str:
    """Lowercase, strip punctuation, collapse whitespace."""
    text = _PUNCTUATION.sub(" ", text.casefold())
    return _WHITESPACE.sub(" ", text).strip()


def _contains_phrase(text: str, phrase: str) -> bool:
    return re.search(rf"(?<!\w){re.escape(phrase)}(?!\w)", text) is not None


def text_matches(left: str, right: str) -> bool:
    """
    Bidirectional, case-insensitive whole-word containment.

    "Technology" matches "Technology & Innovation" but not "Biotechnology".
    Empty text never matches.
    """
    a, b = normalize_text(left), normalize_text(right)
    if not a or not b:
        return False
    return _contains_phrase(b, a) or _contains_phrase(a, b)


def categories_for_interest(interest: str) -> List[str]:
    """Career categories for an interest; unknown interests stand for themselves."""
    return _INTEREST_INDEX.get(interest.strip().casefold(), [interest.strip()])


def canonical_subject(subject: str) -> str:
    return _SUBJECT_INDEX.get(subject.strip().casefold(), subject.strip())
