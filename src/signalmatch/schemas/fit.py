"\"\"\"Fit result schema returned by every scorer.\"\"\""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Depth = Literal["basic", "summary", "full"]

FitTier = Literal[
    "signals",
    "skills",
    "application",
    "context",
    "team",
    "insufficient_data",
    "none",
]

InsightCategory = Literal[
    "required_skill",
    "preferred_skill",
    "signal_strength",
    "signal_consideration",
    "application",
    "job_context",
    "team_aligned",
    "team_complementary",
    "team_gap",
    "team_strength",
    "team_diversity",
]

TeamClassification = Literal["aligned", "complementary", "gap"]

SKILL_CATEGORIES: frozenset[str] = frozenset({"required_skill", "preferred_skill"})
SIGNAL_CATEGORIES: frozenset[str] = frozenset({"signal_strength", "signal_consideration"})


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Insight(_CamelModel):
    """One ranked, human-readable reason with its evidence category."""

    category: InsightCategory
    text: str


class FitMeta(_CamelModel):
    depth: Depth = "full"
    is_premium_limited: bool = False


class FitResult(_CamelModel):
    """Ephemeral scoring output.

    ``ranked_insights`` is ordered most significant first. No field carries
    per-member data; team composites are the only team data that leave the
    analyzer.
    """

    ranked_insights: list[Insight] = Field(default_factory=list)
    matching_skills: list[str] = Field(default_factory=list)
    matching_skill_count: int = 0
    tier: FitTier = "none"
    meta: FitMeta = Field(default_factory=FitMeta)
    classification_counts: dict[TeamClassification, int] | None = None
    notice: str | None = None
    summary: str | None = None

    @property
    def insights(self) -> list[str]:
        return [insight.text for insight in self.ranked_insights]

    def insights_in(self, categories: frozenset[str] | set[str]) -> list[str]:
        return [insight.text for insight in self.ranked_insights if insight.category in categories]

    def to_payload(self) -> dict[str, Any]:
        """Serialize for the API boundary. Insight categories stay internal."""
        payload = {
            "insights": self.insights,
            "matchingSkills": list(self.matching_skills),
            "matchingSkillCount": self.matching_skill_count,
            "tier": self.tier,
            "meta": self.meta.model_dump(mode="json", by_alias=True),
        }
        if self.classification_counts is not None:
            payload["classificationCounts"] = dict(self.classification_counts)
        if self.notice:
            payload["notice"] = self.notice
        if self.summary:
            payload["summary"] = self.summary
        return payload
