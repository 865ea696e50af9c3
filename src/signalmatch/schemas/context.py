"\"\"\"Read-only request views assembled by callers from job and profile records.\"\"\""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .signal import Signal, Strength

LocationType = Literal["remote", "onsite", "hybrid"]


class JobContext(BaseModel):
    """Job, company and role metadata relevant to fit scoring."""

    title: str = ""
    location_type: LocationType | None = None
    company_size: str | None = None
    required_skills: list[str] = Field(default_factory=list)
    preferred_skills: list[str] = Field(default_factory=list)
    description: str | None = None
    domain: str | None = None
    company_name: str | None = None
    signal_preferences: dict[str, Strength] = Field(default_factory=dict)

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @property
    def role_label(self) -> str:
        return self.title.strip() or "this role"


class CandidateContext(BaseModel):
    """Applicant view used by the hiring side."""

    signals: list[Signal] = Field(default_factory=list)
    matching_skills: list[str] = Field(default_factory=list)
    has_cover_message: bool = False

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class TeamMemberSignals(BaseModel):
    """One team member's signals. Never echoed back in any result."""

    signals: list[Signal] = Field(default_factory=list)
    role: str | None = None

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
