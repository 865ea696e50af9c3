"""Role archetypes and the workstyle preferences they imply."""

from __future__ import annotations

from typing import Literal, Mapping

from ..schemas.context import JobContext
from ..schemas.signal import Strength
from .instruments import disc, holland

JobArchetype = Literal["leadership", "creative", "analytical", "sales", "support", "operations"]

ARCHETYPE_PREFERENCES: Mapping[JobArchetype, Mapping[str, Strength]] = {
    "leadership": {
        disc.DOMINANCE: "high",
        holland.ENTERPRISING: "high",
        disc.INFLUENCE: "medium",
    },
    "creative": {
        holland.ARTISTIC: "high",
        disc.INFLUENCE: "medium",
    },
    "analytical": {
        disc.CONSCIENTIOUSNESS: "high",
        holland.INVESTIGATIVE: "high",
    },
    "sales": {
        disc.INFLUENCE: "high",
        holland.ENTERPRISING: "high",
    },
    "support": {
        disc.STEADINESS: "high",
        holland.SOCIAL: "high",
    },
    "operations": {
        holland.CONVENTIONAL: "high",
        disc.STEADINESS: "medium",
    },
}

ARCHETYPE_DESCRIPTIONS: Mapping[JobArchetype, str] = {
    "leadership": "leadership",
    "creative": "creative",
    "analytical": "analytical",
    "sales": "client-facing",
    "support": "people-support",
    "operations": "operations",
}

# Checked in order; the first archetype with a keyword hit wins.
_KEYWORDS: tuple[tuple[JobArchetype, tuple[str, ...]], ...] = (
    ("leadership", ("manager", "lead", "head of", "director", "chief", "vp ")),
    ("creative", ("designer", "creative", "artist", "ux", "ui ", "copywriter")),
    ("analytical", ("analyst", "data", "research", "scientist")),
    ("sales", ("sales", "business development", "account executive", "account manager")),
    ("support", ("support", "customer", "success", "hr ", "people partner", "recruiter")),
    ("operations", ("operations", "admin", "coordinator", "logistics")),
    ("analytical", ("developer", "engineer", "programmer")),
)


def infer_archetype(job: JobContext) -> JobArchetype:
    """Guess the role archetype from title first, then description."""
    for text in (job.title, job.description or ""):
        haystack = f" {text.lower()} "
        for archetype, keywords in _KEYWORDS:
            if any(keyword in haystack for keyword in keywords):
                return archetype
    return "operations"


def signal_preferences(job: JobContext) -> tuple[JobArchetype, Mapping[str, Strength]]:
    """Explicit per-job preferences override the inferred archetype's."""
    archetype = infer_archetype(job)
    if job.signal_preferences:
        return archetype, dict(job.signal_preferences)
    return archetype, ARCHETYPE_PREFERENCES[archetype]
