"\"\"\"Assessment submission and derivation outcome schemas.\"\"\""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

import pendulum
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .signal import Signal

IssueCode = Literal[
    "insufficient_answers",
    "unknown_test_type",
    "unsupported_test_version",
    "no_tests",
]

AnalysisPurpose = Literal["job_matching", "team_fit", "profile_insight", "general"]


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Answer(_CamelModel):
    """Single answered question."""

    question_id: str
    value: int | str

    @property
    def value_key(self) -> str:
        return str(self.value).strip()


class TestResult(_CamelModel):
    """Completed assessment. Consumed once, never persisted by the engine."""

    __test__ = False

    test_type: str
    test_version: str
    answers: list[Answer] = Field(default_factory=list)
    completed_at: datetime | None = None

    @field_validator("completed_at", mode="before")
    @classmethod
    def _parse_completed_at(cls, value: Any) -> Any:
        if isinstance(value, str) and value:
            return pendulum.parse(value)
        return value


class AnalysisContext(_CamelModel):
    """Caller-supplied hints for derivation."""

    purpose: AnalysisPurpose = "general"


class AssessmentSubmission(_CamelModel):
    """Full analyze request: one session, one or more tests."""

    session_id: str = "anonymous"
    test_results: list[TestResult] = Field(default_factory=list)
    context: AnalysisContext = Field(default_factory=AnalysisContext)


class DerivationIssue(_CamelModel):
    """Recoverable reason a submission could not be turned into signals."""

    code: IssueCode
    message: str
    test_type: str | None = None


class DerivationOutcome(_CamelModel):
    """Result of signal derivation."""

    session_id: str
    status: Literal["ok", "error"]
    signals: list[Signal] = Field(default_factory=list)
    issues: list[DerivationIssue] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
