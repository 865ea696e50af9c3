from __future__ import annotations

import pytest

from signalmatch.core import (
    OrderedListRedactionPolicy,
    RedactionRule,
    filter_candidate_insights,
    filter_team_fit_insights,
)
from signalmatch.schemas import FitResult, Insight


def build_result(*categories: str, **kwargs) -> FitResult:
    insights = [Insight(category=category, text=f"{category} #{idx}") for idx, category in enumerate(categories)]
    defaults = {
        "ranked_insights": insights,
        "matching_skills": ["React", "Node"],
        "matching_skill_count": 2,
        "tier": "signals",
    }
    defaults.update(kwargs)
    return FitResult(**defaults)


FIVE = build_result(
    "required_skill",
    "required_skill",
    "preferred_skill",
    "signal_strength",
    "application",
)


def test_basic_keeps_exactly_one_insight_and_summarises_skills():
    filtered = filter_candidate_insights(FIVE, "basic")

    assert filtered.insights == ["required_skill #0"]
    assert filtered.matching_skills == []
    assert filtered.matching_skill_count == 2
    assert filtered.meta.depth == "basic"
    assert filtered.meta.is_premium_limited is True


def test_summary_keeps_one_insight_per_category_in_order():
    filtered = filter_candidate_insights(FIVE, "summary")

    assert filtered.insights == [
        "required_skill #0",
        "preferred_skill #2",
        "signal_strength #3",
        "application #4",
    ]
    assert filtered.matching_skills == ["React", "Node"]


def test_every_depth_keeps_the_summary_line():
    result = build_result("required_skill", "signal_strength", summary="A one-line overview")

    for depth in ("basic", "summary", "full"):
        assert filter_candidate_insights(result, depth).summary == "A one-line overview"
    assert filter_candidate_insights(result, "basic").to_payload()["summary"] == "A one-line overview"


def test_full_returns_the_result_untouched():
    assert filter_candidate_insights(FIVE, "full") is FIVE
    assert FIVE.meta.is_premium_limited is False


@pytest.mark.parametrize("depth", ["basic", "summary", "full"])
def test_truncation_never_adds_or_rewords(depth):
    filtered = filter_candidate_insights(FIVE, depth)

    assert len(filtered.insights) <= len(FIVE.insights)
    assert all(text in FIVE.insights for text in filtered.insights)


def test_empty_result_stays_empty():
    filtered = filter_candidate_insights(FitResult(), "basic")

    assert filtered.insights == []


def test_team_summary_keeps_counts():
    result = build_result(
        "team_aligned",
        "team_aligned",
        "team_gap",
        tier="team",
        matching_skills=[],
        matching_skill_count=0,
        classification_counts={"aligned": 2, "complementary": 0, "gap": 1},
    )

    filtered = filter_team_fit_insights(result, "summary")

    assert filtered.insights == ["team_aligned #0", "team_gap #2"]
    assert filtered.classification_counts == {"aligned": 2, "complementary": 0, "gap": 1}


def test_team_fit_has_no_basic_depth():
    with pytest.raises(ValueError):
        filter_team_fit_insights(build_result("team_aligned"), "basic")


def test_policy_requires_full_depth():
    with pytest.raises(ValueError):
        OrderedListRedactionPolicy("broken", {"summary": RedactionRule(per_category=1)})
