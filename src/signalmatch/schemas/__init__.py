"\"\"\"Pydantic schema definitions for engine inputs and outputs.\"\"\""

from __future__ import annotations

from .assessment import (
    AnalysisContext,
    Answer,
    AssessmentSubmission,
    DerivationIssue,
    DerivationOutcome,
    TestResult,
)
from .context import CandidateContext, JobContext, TeamMemberSignals
from .fit import Depth, FitMeta, FitResult, Insight
from .signal import STRENGTH_ORDER, Signal, SourceTest, Strength, strength_rank, strongest_bands

__all__ = [
    "AnalysisContext",
    "Answer",
    "AssessmentSubmission",
    "CandidateContext",
    "Depth",
    "DerivationIssue",
    "DerivationOutcome",
    "FitMeta",
    "FitResult",
    "Insight",
    "JobContext",
    "STRENGTH_ORDER",
    "Signal",
    "SourceTest",
    "Strength",
    "TeamMemberSignals",
    "TestResult",
    "strength_rank",
    "strongest_bands",
]
