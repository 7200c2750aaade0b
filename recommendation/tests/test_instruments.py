"""
Test instrument scoring helpers.
"""

import pytest
from pydantic import ValidationError

from recommendation.logic import LearningStyle, PersonalityResult, RiasecTheme, ValuesDomain, ValuesResult
from recommendation.logic.instruments import (
    classify_learning_style,
    score_learning_style,
    score_riasec_responses,
    score_values,
)


@pytest.mark.parametrize("x, y, expected", [
    (5, 5, LearningStyle.CONVERGING),
    (0, 0, LearningStyle.CONVERGING),
    (-5, 5, LearningStyle.ACCOMMODATING),
    (5, -5, LearningStyle.ASSIMILATING),
    (-5, -5, LearningStyle.DIVERGING),
])
def test_classify_learning_style_quadrants(x, y, expected):
    assert classify_learning_style(x, y) == expected


def test_score_learning_style_derives_axes():
    result = score_learning_style(ce=20, ro=30, ac=40, ae=35)
    assert result.x == 20
    assert result.y == 5
    assert result.learning_style == LearningStyle.CONVERGING


def test_score_riasec_responses_normalizes_theme_totals():
    responses = {f"R{i}": 5 for i in range(1, 6)}
    responses.update({f"I{i}": 3 for i in range(1, 6)})
    for theme in "ASEC":
        responses.update({f"{theme}{i}": 1 for i in range(1, 6)})

    result = score_riasec_responses(responses)

    assert result.scores[RiasecTheme.R] == 100
    assert result.scores[RiasecTheme.I] == 50
    assert result.scores[RiasecTheme.C] == 0
    assert result.top3 == [RiasecTheme.R, RiasecTheme.I, RiasecTheme.A]


def test_personality_result_requires_all_themes():
    with pytest.raises(ValidationError, match="missing: C"):
        PersonalityResult(scores={"R": 10, "I": 20, "A": 30, "S": 40, "E": 50})


def test_personality_result_rejects_out_of_range():
    with pytest.raises(ValidationError):
        PersonalityResult(scores={"R": 110, "I": 20, "A": 30, "S": 40, "E": 50, "C": 0})


def test_score_values_derives_top3():
    result = score_values({
        "achievement": 90, "benevolence": 20, "universalism": 30, "self-direction": 80,
        "security": 70, "power": 10, "hedonism": 0,
    })
    assert result.top3 == [ValuesDomain.ACHIEVEMENT, ValuesDomain.SELF_DIRECTION, ValuesDomain.SECURITY]


def test_values_result_requires_all_domains():
    with pytest.raises(ValidationError, match="hedonism"):
        ValuesResult(scores={d.value: 50 for d in ValuesDomain if d != ValuesDomain.HEDONISM})
