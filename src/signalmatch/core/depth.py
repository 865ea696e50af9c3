"""Subscription-depth redaction of fit results."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Mapping

from ..schemas.fit import Depth, FitMeta, FitResult, Insight


@dataclass(frozen=True)
class RedactionRule:
    """Limits applied at one depth. ``None`` means unlimited."""

    per_category: int | None = None
    total: int | None = None
    keep_skill_list: bool = True


FULL = RedactionRule()


class OrderedListRedactionPolicy:
    """Order-preserving truncation of ranked insights, parameterised by depth.

    Retained insights are never reworded; only cardinality and the skill list
    shrink. ``full`` returns the result untouched.
    """

    def __init__(self, name: str, rules: Mapping[Depth, RedactionRule]) -> None:
        if "full" not in rules:
            raise ValueError("A redaction policy must define the 'full' depth.")
        self.name = name
        self._rules = dict(rules)

    @property
    def depths(self) -> tuple[Depth, ...]:
        return tuple(self._rules)

    def apply(self, result: FitResult, depth: Depth) -> FitResult:
        rule = self._rules.get(depth)
        if rule is None:
            raise ValueError(
                f"Depth {depth!r} is not supported for {self.name}; expected one of {self.depths}."
            )
        if depth == "full":
            return result

        kept: list[Insight] = []
        per_category: Counter[str] = Counter()
        for insight in result.ranked_insights:
            if rule.total is not None and len(kept) >= rule.total:
                break
            if rule.per_category is not None and per_category[insight.category] >= rule.per_category:
                continue
            per_category[insight.category] += 1
            kept.append(insight)

        return result.model_copy(
            update={
                "ranked_insights": kept,
                "matching_skills": list(result.matching_skills) if rule.keep_skill_list else [],
                "meta": FitMeta(depth=depth, is_premium_limited=True),
            }
        )


CANDIDATE_INSIGHT_POLICY = OrderedListRedactionPolicy(
    "candidate fit",
    {
        "basic": RedactionRule(total=1, keep_skill_list=False),
        "summary": RedactionRule(per_category=1),
        "full": FULL,
    },
)

TEAM_FIT_POLICY = OrderedListRedactionPolicy(
    "team fit",
    {
        "summary": RedactionRule(per_category=1),
        "full": FULL,
    },
)


def filter_candidate_insights(result: FitResult, depth: Depth) -> FitResult:
    """Redact a candidate (or job) fit result for ``basic``/``summary``/``full``."""
    return CANDIDATE_INSIGHT_POLICY.apply(result, depth)


def filter_team_fit_insights(result: FitResult, depth: Depth) -> FitResult:
    """Redact a team fit result for ``summary``/``full``; counts always survive."""
    return TEAM_FIT_POLICY.apply(result, depth)
