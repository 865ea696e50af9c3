"\"\"\"Core matching and insight engine components.\"\"\""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from ..schemas import FitResult, JobContext, Signal
# NOTE: keep imports explicit for export clarity.
from .candidate_fit import CandidateFitScorer
from .depth import (
    CANDIDATE_INSIGHT_POLICY,
    TEAM_FIT_POLICY,
    OrderedListRedactionPolicy,
    RedactionRule,
    filter_candidate_insights,
    filter_team_fit_insights,
)
from .derivation import DerivationConfig, SignalDeriver
from .job_fit import FitScorerConfig, JobFitScorer
from .skills import SkillMatcher, SkillMatcherConfig, find_matching_skills, skills_match
from .team_fit import AGGREGATION_STRATEGIES, MIN_TEAM_SIZE, TeamFitAnalyzer, TeamFitConfig


@runtime_checkable
class JobScorer(Protocol):
    """Contract for "why this job" scorers."""

    def match_job(
        self,
        signals: Sequence[Signal] | None,
        job: JobContext,
        candidate_skills: Sequence[str] | None = None,
    ) -> FitResult:
        """Return ranked insights for a candidate viewing a job."""


__all__ = [
    "AGGREGATION_STRATEGIES",
    "CANDIDATE_INSIGHT_POLICY",
    "CandidateFitScorer",
    "DerivationConfig",
    "FitScorerConfig",
    "JobFitScorer",
    "JobScorer",
    "MIN_TEAM_SIZE",
    "OrderedListRedactionPolicy",
    "RedactionRule",
    "SignalDeriver",
    "SkillMatcher",
    "SkillMatcherConfig",
    "TEAM_FIT_POLICY",
    "TeamFitAnalyzer",
    "TeamFitConfig",
    "filter_candidate_insights",
    "filter_team_fit_insights",
    "find_matching_skills",
    "skills_match",
]
