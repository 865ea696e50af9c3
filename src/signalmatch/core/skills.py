"\"\"\"Skill overlap between candidate and job skill lists.\"\"\""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Literal, Sequence

from rapidfuzz import fuzz

SkillMatchStrategy = Literal["substring", "fuzzy"]

SkillMatchFn = Callable[[str, str], bool]


def skills_match(candidate_skill: str, job_skill: str) -> bool:
    """Case-insensitive containment in either direction.

    Over-matches compound names ("React" matches "React Native"). That is the
    accepted matching policy; swap the strategy rather than editing this rule.
    """
    left = candidate_skill.strip().lower()
    right = job_skill.strip().lower()
    if not left or not right:
        return False
    return left in right or right in left


@dataclass
class SkillMatcherConfig:
    """Selects the matching rule used by every scorer."""

    strategy: SkillMatchStrategy = "substring"
    min_similarity: float = 90.0


@dataclass(frozen=True)
class SkillOverlap:
    """Matched job skills split by how the job lists them, in job order."""

    required: tuple[str, ...]
    preferred: tuple[str, ...]

    @property
    def all(self) -> list[str]:
        return [*self.required, *self.preferred]


class SkillMatcher:
    """Compute which job skills a candidate covers."""

    def __init__(self, *, config: SkillMatcherConfig | None = None) -> None:
        self._config = config or SkillMatcherConfig()
        self._match = self._resolve_strategy(self._config)

    def matches(self, candidate_skill: str, job_skill: str) -> bool:
        return self._match(candidate_skill, job_skill)

    def overlap(
        self,
        candidate_skills: Iterable[str] | None,
        required_skills: Sequence[str],
        preferred_skills: Sequence[str] = (),
    ) -> SkillOverlap:
        candidates = [skill for skill in (candidate_skills or []) if skill and skill.strip()]
        seen: set[str] = set()
        required = self._covered(candidates, required_skills, seen)
        preferred = self._covered(candidates, preferred_skills, seen)
        return SkillOverlap(required=tuple(required), preferred=tuple(preferred))

    def _covered(
        self,
        candidates: Sequence[str],
        job_skills: Sequence[str],
        seen: set[str],
    ) -> list[str]:
        covered: list[str] = []
        for job_skill in job_skills:
            key = job_skill.strip().lower()
            if not key or key in seen:
                continue
            if any(self._match(candidate, job_skill) for candidate in candidates):
                seen.add(key)
                covered.append(job_skill.strip())
        return covered

    @staticmethod
    def _resolve_strategy(config: SkillMatcherConfig) -> SkillMatchFn:
        if config.strategy == "substring":
            return skills_match
        if config.strategy == "fuzzy":
            threshold = config.min_similarity

            def fuzzy_match(candidate_skill: str, job_skill: str) -> bool:
                left = candidate_skill.strip().lower()
                right = job_skill.strip().lower()
                if not left or not right:
                    return False
                return left == right or fuzz.token_sort_ratio(left, right) >= threshold

            return fuzzy_match
        raise ValueError(f"Unknown skill match strategy: {config.strategy!r}")


def find_matching_skills(
    candidate_skills: Iterable[str] | None,
    required_skills: Sequence[str],
    preferred_skills: Sequence[str] = (),
) -> list[str]:
    """Job skills covered by the candidate using the default matching rule."""
    return SkillMatcher().overlap(candidate_skills, required_skills, preferred_skills).all
