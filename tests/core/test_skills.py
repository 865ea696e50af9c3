from __future__ import annotations

import pytest

from signalmatch.core import SkillMatcher, SkillMatcherConfig, find_matching_skills, skills_match


def test_skills_match_is_case_insensitive_in_either_direction():
    assert skills_match("react", "React Native")
    assert skills_match("PostgreSQL", "postgres")
    assert not skills_match("Go", "Python")


def test_blank_skills_never_match():
    assert not skills_match("", "Python")
    assert not skills_match("Python", "   ")


def test_overlap_keeps_job_order_and_splits_required_from_preferred():
    overlap = SkillMatcher().overlap(
        ["typescript", "Docker", "react"],
        required_skills=["React", "Node", "TypeScript"],
        preferred_skills=["Docker", "Kubernetes"],
    )

    assert overlap.required == ("React", "TypeScript")
    assert overlap.preferred == ("Docker",)
    assert overlap.all == ["React", "TypeScript", "Docker"]


def test_skill_listed_twice_is_reported_once_as_required():
    matches = find_matching_skills(["python"], ["Python", "python "], ["PYTHON"])

    assert matches == ["Python"]


def test_no_candidate_skills_means_no_matches():
    assert find_matching_skills([], ["React", "Node"]) == []
    assert find_matching_skills(None, ["React"]) == []


def test_adding_a_candidate_skill_never_reduces_matches():
    required = ["React", "Node", "SQL"]
    skills: list[str] = []
    previous = 0
    for skill in ["node.js", "react", "sql", "go"]:
        skills.append(skill)
        count = len(find_matching_skills(skills, required))
        assert count >= previous
        previous = count
    assert previous == 3


def test_fuzzy_strategy_tolerates_spacing_but_not_prefixes():
    matcher = SkillMatcher(config=SkillMatcherConfig(strategy="fuzzy", min_similarity=90))

    assert matcher.matches("java script", "JavaScript")
    assert not matcher.matches("java", "JavaScript")
    assert not skills_match("java script", "JavaScript")


def test_unknown_strategy_is_rejected():
    with pytest.raises(ValueError):
        SkillMatcher(config=SkillMatcherConfig(strategy="exact"))  # type: ignore[arg-type]
