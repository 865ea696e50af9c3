"""Why-this-job insights for a candidate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from ..schemas.context import JobContext
from ..schemas.fit import SIGNAL_CATEGORIES, SKILL_CATEGORIES, FitResult, FitTier, Insight
from ..schemas.signal import Signal
from .archetypes import ARCHETYPE_DESCRIPTIONS, signal_preferences
from .evidence import assess_signals, team_size_hint
from .skills import SkillMatcher, SkillOverlap


@dataclass
class FitScorerConfig:
    """Caps on signal-derived insights. Skill insights are never capped."""

    max_signal_strengths: int = 2
    max_signal_considerations: int = 1
    include_job_context: bool = True


class JobFitScorer:
    """Explain why a job may suit a candidate. Explains; never recommends."""

    def __init__(
        self,
        *,
        config: FitScorerConfig | None = None,
        skill_matcher: SkillMatcher | None = None,
    ) -> None:
        self._config = config or FitScorerConfig()
        self._skills = skill_matcher or SkillMatcher()

    def match_job(
        self,
        signals: Sequence[Signal] | None,
        job: JobContext,
        candidate_skills: Iterable[str] | None = None,
    ) -> FitResult:
        overlap = self._skills.overlap(candidate_skills, job.required_skills, job.preferred_skills)
        insights = self._skill_insights(overlap, job)
        signal_insights = self._signal_insights(signals, job) if signals else []
        insights.extend(signal_insights)
        context_insights = self._context_insights(job) if self._config.include_job_context else []
        insights.extend(context_insights)

        return FitResult(
            ranked_insights=insights,
            matching_skills=overlap.all,
            matching_skill_count=len(overlap.all),
            tier=self._tier(signal_insights, overlap, context_insights),
            summary=self._summary(insights, job),
        )

    @staticmethod
    def _skill_insights(overlap: SkillOverlap, job: JobContext) -> list[Insight]:
        insights = [
            Insight(
                category="required_skill",
                text=f"Your experience with {skill} covers a core requirement of {job.role_label}",
            )
            for skill in overlap.required
        ]
        insights.extend(
            Insight(
                category="preferred_skill",
                text=f"Your experience with {skill} is a plus for {job.role_label}",
            )
            for skill in overlap.preferred
        )
        return insights

    def _signal_insights(self, signals: Sequence[Signal], job: JobContext) -> list[Insight]:
        archetype, preferences = signal_preferences(job)
        assessment = assess_signals(signals, preferences)
        role_kind = ARCHETYPE_DESCRIPTIONS[archetype]

        insights = [
            Insight(
                category="signal_strength",
                text=(
                    f"Your profile shows {evidence.candidate_descriptor}, "
                    f"which suits the {role_kind} side of {job.role_label}"
                ),
            )
            for evidence in assessment.strengths[: self._config.max_signal_strengths]
        ]
        insights.extend(
            Insight(
                category="signal_consideration",
                text=(
                    f"{job.role_label[:1].upper()}{job.role_label[1:]} leans on "
                    f"{evidence.preferred_descriptor}; this could be an area to grow into"
                ),
            )
            for evidence in assessment.considerations[: self._config.max_signal_considerations]
        )
        return insights

    @staticmethod
    def _context_insights(job: JobContext) -> list[Insight]:
        texts: list[str] = []
        if job.location_type == "remote":
            texts.append("This role can be done fully remotely")
        elif job.location_type == "hybrid":
            texts.append("This role offers a hybrid working arrangement")

        size = team_size_hint(job.company_size)
        if size in ("solo", "small"):
            texts.append("A small team where individual contributions are highly visible")
        elif size == "large":
            texts.append("An established organization with structured teams")

        if job.domain:
            texts.append(f"Work in the {job.domain} field")
        elif job.company_name:
            texts.append(f"An opportunity to work with {job.company_name}")

        return [Insight(category="job_context", text=text) for text in texts]

    @staticmethod
    def _summary(insights: list[Insight], job: JobContext) -> str | None:
        """Neutral one-liner for the viewer; never a score."""
        categories = [insight.category for insight in insights]
        if any(category in SIGNAL_CATEGORIES for category in categories):
            if "signal_consideration" not in categories:
                return f"Your working style lines up well with {job.role_label}"
            if "signal_strength" in categories:
                return f"Your working style lines up with parts of {job.role_label}"
            return f"{job.role_label[:1].upper()}{job.role_label[1:]} may stretch your working style in new directions"
        if any(category in SKILL_CATEGORIES for category in categories):
            return f"Your skills match what {job.role_label} asks for"
        return None

    @staticmethod
    def _tier(
        signal_insights: list[Insight],
        overlap: SkillOverlap,
        context_insights: list[Insight],
    ) -> FitTier:
        if signal_insights:
            return "signals"
        if overlap.all:
            return "skills"
        if context_insights:
            return "context"
        return "none"
