"""Why-this-candidate insights for the hiring side."""

from __future__ import annotations

from ..schemas.context import CandidateContext, JobContext
from ..schemas.fit import SKILL_CATEGORIES, FitResult, FitTier, Insight
from .archetypes import signal_preferences
from .evidence import assess_signals
from .job_fit import FitScorerConfig
from .skills import SkillMatcher, SkillOverlap

COVER_MESSAGE_INSIGHT = "The candidate provided context with their application"


class CandidateFitScorer:
    """Explain how an applicant may align with a role.

    Output is context for a human decision; it does not rank or score
    applicants. The cover message only counts as present or absent.
    """

    def __init__(
        self,
        *,
        config: FitScorerConfig | None = None,
        skill_matcher: SkillMatcher | None = None,
    ) -> None:
        self._config = config or FitScorerConfig()
        self._skills = skill_matcher or SkillMatcher()

    def match_candidate(self, candidate: CandidateContext, job: JobContext) -> FitResult:
        overlap = self._skills.overlap(
            candidate.matching_skills, job.required_skills, job.preferred_skills
        )
        insights = self._skill_insights(overlap, job)
        signal_insights = self._signal_insights(candidate, job) if candidate.signals else []
        insights.extend(signal_insights)
        if candidate.has_cover_message:
            insights.append(Insight(category="application", text=COVER_MESSAGE_INSIGHT))

        return FitResult(
            ranked_insights=insights,
            matching_skills=overlap.all,
            matching_skill_count=len(overlap.all),
            tier=self._tier(signal_insights, overlap, candidate.has_cover_message),
            summary=self._summary(insights, job),
        )

    @staticmethod
    def _skill_insights(overlap: SkillOverlap, job: JobContext) -> list[Insight]:
        insights = [
            Insight(
                category="required_skill",
                text=f"Has experience with {skill}, a core requirement for {job.role_label}",
            )
            for skill in overlap.required
        ]
        insights.extend(
            Insight(
                category="preferred_skill",
                text=f"Brings {skill}, listed as a plus for {job.role_label}",
            )
            for skill in overlap.preferred
        )
        return insights

    def _signal_insights(self, candidate: CandidateContext, job: JobContext) -> list[Insight]:
        _, preferences = signal_preferences(job)
        assessment = assess_signals(candidate.signals, preferences)

        insights = [
            Insight(
                category="signal_strength",
                text=f"Shows {evidence.candidate_descriptor}, which aligns with what {job.role_label} needs",
            )
            for evidence in assessment.strengths[: self._config.max_signal_strengths]
        ]
        insights.extend(
            Insight(
                category="signal_consideration",
                text=(
                    f"{job.role_label[:1].upper()}{job.role_label[1:]} may call for more "
                    f"{evidence.dimension.topic} than this candidate usually prefers; "
                    "worth exploring in conversation"
                ),
            )
            for evidence in assessment.considerations[: self._config.max_signal_considerations]
        )
        return insights

    @staticmethod
    def _summary(insights: list[Insight], job: JobContext) -> str:
        strengths = sum(1 for insight in insights if insight.category == "signal_strength")
        considerations = sum(1 for insight in insights if insight.category == "signal_consideration")
        if strengths >= 2 and considerations == 0:
            return f"This candidate's working preferences line up well with {job.role_label}"
        if strengths >= 1 and considerations <= 1:
            return f"This candidate's working preferences line up with some aspects of {job.role_label}"
        if considerations >= 1:
            return f"This candidate may need to adapt to some aspects of {job.role_label}"
        if any(insight.category in SKILL_CATEGORIES for insight in insights):
            return f"Skill overlap is the main evidence available for {job.role_label}"
        return f"Limited information is available to assess alignment with {job.role_label}"

    @staticmethod
    def _tier(signal_insights: list[Insight], overlap: SkillOverlap, has_cover_message: bool) -> FitTier:
        if signal_insights:
            return "signals"
        if overlap.all:
            return "skills"
        if has_cover_message:
            return "application"
        return "none"
