"""
Test the per-component scorers in isolation.
"""

import pytest

from recommendation.logic import (
    AssessmentComponent,
    Career,
    CareerComponentAffinity,
    Country,
    KolbAffinity,
    LearningStyleResult,
    PersonalityResult,
    RiasecAffinity,
    StudentProfile,
    SubjectCompetency,
    ValuesDomain,
    ValuesResult,
    WeightedComponent,
)
from recommendation.logic.affinity import AffinityIndex
from recommendation.logic.component_scorers import (
    COMPONENT_SCORERS,
    score_cvq,
    score_interests,
    score_kolb,
    score_riasec,
    score_subjects,
    score_vision,
)
from recommendation.logic.context import MatchingContext
from recommendation.logic.lexicon import text_matches

SECTORS = ["Technology", "Healthcare Services", "Finance", "Education"]


def component(key, weight=20):
    return WeightedComponent(
        component=AssessmentComponent(id=f"component-{key}", key=key, name=key.title(), weight=weight),
        weight=weight,
    )


def career(**fields):
    data = {"id": "career-1", "title": "Test Career", "category": "Technology"}
    data.update(fields)
    return Career(**data)


def context(profile=None, affinities=(), country=None, **profile_fields):
    profile = profile or StudentProfile(id="student-1", **profile_fields)
    return MatchingContext(
        profile=profile,
        careers=[],
        components=[],
        affinities=AffinityIndex(affinities),
        country=country,
    )


def country(sectors):
    return Country(id="testland", name="Testland", priority_sectors=sectors)


def riasec_affinity(scores, career_id="career-1"):
    return CareerComponentAffinity(
        career_id=career_id,
        component_id="component-riasec",
        component_key="riasec",
        data=RiasecAffinity(scores=scores),
    )


def kolb_affinity(scores, career_id="career-1"):
    return CareerComponentAffinity(
        career_id=career_id,
        component_id="component-kolb",
        component_key="kolb",
        data=KolbAffinity(scores=scores),
    )


def all_values(value):
    return {domain.value: value for domain in ValuesDomain}


# =============================================================================
# SUBJECTS
# =============================================================================

@pytest.mark.parametrize("favorites", [None, []])
def test_subjects_without_favorites_is_not_applicable(favorites):
    ctx = context(favorite_subjects=favorites)
    assert score_subjects(ctx, career(related_subjects=["Mathematics"]), component("subjects")) is None


def test_subjects_without_related_subjects_is_not_applicable():
    ctx = context(favorite_subjects=["Mathematics"])
    assert score_subjects(ctx, career(related_subjects=[]), component("subjects")) is None


def test_subjects_no_overlap_scores_floor():
    ctx = context(favorite_subjects=["Art"])
    result = score_subjects(ctx, career(related_subjects=["Mathematics", "Physics"]), component("subjects"))
    assert result.score == 20
    assert "None of your favorite subjects" in result.reasoning


def test_subjects_preference_ratio_without_quiz():
    ctx = context(favorite_subjects=["mathematics", "Art"])
    result = score_subjects(ctx, career(related_subjects=["Mathematics", "Physics"]), component("subjects"))
    assert result.score == pytest.approx(50)
    assert "Mathematics" in result.reasoning


def test_subjects_blends_preference_with_competency():
    ctx = context(
        favorite_subjects=["Mathematics"],
        subject_competencies={"Mathematics": SubjectCompetency(correct=8, total=10, percentage=80)},
    )
    result = score_subjects(ctx, career(related_subjects=["Mathematics", "Physics"]), component("subjects"))
    # 0.4 * 50 + 0.6 * 80
    assert result.score == pytest.approx(68)
    assert "80% demonstrated quiz competency" in result.reasoning


def test_subjects_competency_uses_canonical_quiz_subject():
    ctx = context(
        favorite_subjects=["Physics"],
        subject_competencies={"Science": SubjectCompetency(correct=6, total=10, percentage=60)},
    )
    result = score_subjects(ctx, career(related_subjects=["Physics"]), component("subjects"))
    assert result.score == pytest.approx(0.4 * 100 + 0.6 * 60)


def test_subjects_ignores_quiz_data_for_unmatched_subjects():
    ctx = context(
        favorite_subjects=["Mathematics"],
        subject_competencies={"English": SubjectCompetency(correct=1, total=10, percentage=10)},
    )
    result = score_subjects(ctx, career(related_subjects=["Mathematics"]), component("subjects"))
    assert result.score == pytest.approx(100)


# =============================================================================
# INTERESTS
# =============================================================================

@pytest.mark.parametrize("left, right, expected", [
    ("Technology", "Technology & Innovation", True),
    ("healthcare technology", "Technology", True),
    ("Engineering", "engineering", True),
    ("Technology", "Biotechnology", False),
    ("Health", "Healthcare", False),
    ("", "Technology", False),
])
def test_text_matches_whole_words_both_ways(left, right, expected):
    assert text_matches(left, right) is expected


@pytest.mark.parametrize("interests", [None, []])
def test_interests_without_interests_is_not_applicable(interests):
    assert score_interests(context(interests=interests), career(), component("interests")) is None


def test_interests_synonym_matches_category():
    result = score_interests(context(interests=["technology"]), career(category="Engineering"), component("interests"))
    assert result.score == 100
    assert "Engineering" in result.reasoning


def test_interests_fraction_of_matching_interests():
    ctx = context(interests=["Technology", "Sports"])
    result = score_interests(ctx, career(category="Technology"), component("interests"))
    assert result.score == pytest.approx(50)


def test_interests_unknown_interest_stands_for_itself():
    ctx = context(interests=["Robotics"])
    result = score_interests(ctx, career(category="Robotics Engineering"), component("interests"))
    assert result.score == 100


def test_interests_no_match_scores_zero():
    result = score_interests(context(interests=["Sports"]), career(category="Finance"), component("interests"))
    assert result.score == 0
    assert result.reasoning


# =============================================================================
# NATIONAL VISION
# =============================================================================

def test_vision_without_country_is_not_applicable():
    assert score_vision(context(), career(), component("vision")) is None


def test_vision_without_sectors_is_not_applicable():
    assert score_vision(context(country=country([])), career(), component("vision")) is None


@pytest.mark.parametrize("category, expected", [
    ("Technology", 100),
    ("Healthcare", 90),
    ("Finance", 80),
    ("Education", 60),
    ("Agriculture", 40),
])
def test_vision_bands_by_priority_rank(category, expected):
    result = score_vision(context(country=country(SECTORS)), career(category=category), component("vision"))
    assert result.score == expected
    assert result.reasoning


def test_vision_reasoning_names_priority():
    result = score_vision(context(country=country(SECTORS)), career(category="Finance"), component("vision"))
    assert result.reasoning == "Finance is national priority #3 in Testland"


def test_vision_matches_whole_words_only():
    sectors = ["Artificial Intelligence", "Biotechnology", "Education", "Technology"]
    result = score_vision(context(country=country(sectors)), career(category="Technology"), component("vision"))

    assert result.score == 60
    assert result.reasoning == "Technology is national priority #4 in Testland"


# =============================================================================
# LEARNING STYLE (KOLB)
# =============================================================================

CONVERGING = LearningStyleResult(ce=20, ro=25, ac=40, ae=35, learning_style="Converging")


def test_kolb_without_result_is_not_applicable():
    ctx = context(affinities=[kolb_affinity({"Converging": 80})])
    assert score_kolb(ctx, career(), component("kolb")) is None


def test_kolb_without_affinity_is_not_applicable():
    ctx = context(learning_style=CONVERGING)
    assert score_kolb(ctx, career(), component("kolb")) is None


def test_kolb_affinity_missing_style_is_not_applicable():
    ctx = context(learning_style=CONVERGING, affinities=[kolb_affinity({"Diverging": 80})])
    assert score_kolb(ctx, career(), component("kolb")) is None


def test_kolb_uses_affinity_for_student_style():
    ctx = context(learning_style=CONVERGING, affinities=[kolb_affinity({"Converging": 85, "Diverging": 30})])
    result = score_kolb(ctx, career(), component("kolb"))
    assert result.score == 85
    assert "Converging" in result.reasoning


# =============================================================================
# PERSONALITY (RIASEC)
# =============================================================================

AFFINITY = {"R": 50, "I": 90, "A": 10, "S": 20, "E": 30, "C": 70}


def test_riasec_one_hot_student_takes_that_theme_affinity():
    personality = PersonalityResult(scores={"R": 100, "I": 0, "A": 0, "S": 0, "E": 0, "C": 0})
    ctx = context(personality=personality, affinities=[riasec_affinity(AFFINITY)])
    result = score_riasec(ctx, career(), component("riasec"))
    assert result.score == pytest.approx(50)
    assert "Realistic" in result.reasoning


def test_riasec_weighted_average():
    personality = PersonalityResult(scores={"R": 0, "I": 50, "A": 0, "S": 0, "E": 0, "C": 50})
    ctx = context(personality=personality, affinities=[riasec_affinity(AFFINITY)])
    assert score_riasec(ctx, career(), component("riasec")).score == pytest.approx(80)


def test_riasec_all_zero_student_scores_zero():
    personality = PersonalityResult(scores={theme: 0 for theme in "RIASEC"})
    ctx = context(personality=personality, affinities=[riasec_affinity(AFFINITY)])
    assert score_riasec(ctx, career(), component("riasec")).score == 0


def test_riasec_requires_personality_and_affinity():
    personality = PersonalityResult(scores={theme: 50 for theme in "RIASEC"})
    assert score_riasec(context(personality=personality), career(), component("riasec")) is None
    assert score_riasec(context(affinities=[riasec_affinity(AFFINITY)]), career(), component("riasec")) is None


def test_riasec_ignores_other_careers_affinity():
    personality = PersonalityResult(scores={theme: 50 for theme in "RIASEC"})
    ctx = context(personality=personality, affinities=[riasec_affinity(AFFINITY, career_id="career-2")])
    assert score_riasec(ctx, career(), component("riasec")) is None


# =============================================================================
# VALUES (CVQ)
# =============================================================================

def test_cvq_identical_profiles_score_100():
    ctx = context(values=ValuesResult(scores=all_values(70)))
    result = score_cvq(ctx, career(values_profile=all_values(70)), component("cvq"))
    assert result.score == pytest.approx(100)


def test_cvq_opposite_profiles_score_0():
    ctx = context(values=ValuesResult(scores=all_values(0)))
    result = score_cvq(ctx, career(values_profile=all_values(100)), component("cvq"))
    assert result.score == pytest.approx(0)


def test_cvq_uses_shared_domains_only():
    ctx = context(values=ValuesResult(scores=all_values(50)))
    result = score_cvq(ctx, career(values_profile={"achievement": 50, "power": 50}), component("cvq"))
    assert result.score == pytest.approx(100)


def test_cvq_without_career_profile_is_not_applicable():
    ctx = context(values=ValuesResult(scores=all_values(50)))
    assert score_cvq(ctx, career(), component("cvq")) is None


def test_cvq_without_student_values_is_not_applicable():
    assert score_cvq(context(), career(values_profile=all_values(50)), component("cvq")) is None


# =============================================================================
# REGISTRY
# =============================================================================

def test_every_component_key_has_a_scorer():
    assert {key.value for key in COMPONENT_SCORERS} == {"subjects", "interests", "vision", "kolb", "riasec", "cvq"}
