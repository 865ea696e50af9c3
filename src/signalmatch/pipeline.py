"\"\"\"Request-level orchestration of derivation, scoring and redaction.\"\"\""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Sequence, TypeVar

import pendulum
import structlog
from pydantic import BaseModel, ValidationError

from .core import (
    CandidateFitScorer,
    JobScorer,
    SignalDeriver,
    TeamFitAnalyzer,
    filter_candidate_insights,
    filter_team_fit_insights,
)
from .schemas import (
    AssessmentSubmission,
    CandidateContext,
    Depth,
    DerivationOutcome,
    FitResult,
    JobContext,
    Signal,
    TeamMemberSignals,
)
from .storage import StoredSignals, decode_signals
from . import __version__

ModelT = TypeVar("ModelT", bound=BaseModel)


class InsightService:
    """Entry point used by request handlers.

    Stored signal documents arrive here as untrusted blobs; everything below
    this layer only sees validated ``Signal`` objects.
    """

    def __init__(
        self,
        *,
        deriver: SignalDeriver,
        job_scorer: JobScorer,
        candidate_scorer: CandidateFitScorer,
        team_analyzer: TeamFitAnalyzer,
    ) -> None:
        self._deriver = deriver
        self._job_scorer = job_scorer
        self._candidate_scorer = candidate_scorer
        self._team_analyzer = team_analyzer
        self._logger = structlog.get_logger(__name__)

    def submit_assessment(self, submission: AssessmentSubmission) -> DerivationOutcome:
        with structlog.contextvars.bound_contextvars(session_id=submission.session_id):
            outcome = self._deriver.analyze(
                submission.session_id,
                submission.test_results,
                submission.context,
            )
            self._log_outcome(submission, outcome)
        return outcome

    def _log_outcome(self, submission: AssessmentSubmission, outcome: DerivationOutcome) -> None:
        if outcome.ok:
            self._logger.info(
                "assessment.analyzed",
                tests=[result.test_type for result in submission.test_results],
                signal_count=len(outcome.signals),
            )
        else:
            self._logger.warning(
                "assessment.rejected",
                issues=[issue.code for issue in outcome.issues],
            )

    def load_signals(self, raw: Any, *, owner: str = "profile") -> list[Signal]:
        """Decode a stored document, treating anything unreadable as no signals."""
        stored = decode_signals(raw)
        self._log_stored(stored, owner)
        return list(stored.signals)

    def job_insights(
        self,
        stored_signals: Any,
        job: JobContext,
        candidate_skills: Iterable[str] | None = None,
        *,
        depth: Depth = "full",
    ) -> FitResult:
        signals = self.load_signals(stored_signals, owner="viewer") if stored_signals is not None else None
        result = self._job_scorer.match_job(signals or None, job, list(candidate_skills or []))
        filtered = filter_candidate_insights(result, depth)
        self._log_filtered("job_fit", result, filtered)
        return filtered

    def candidate_insights(
        self,
        stored_signals: Any,
        job: JobContext,
        *,
        candidate_skills: Iterable[str] | None = None,
        has_cover_message: bool = False,
        depth: Depth = "full",
    ) -> FitResult:
        candidate = CandidateContext(
            signals=self.load_signals(stored_signals, owner="candidate"),
            matching_skills=list(candidate_skills or []),
            has_cover_message=has_cover_message,
        )
        result = self._candidate_scorer.match_candidate(candidate, job)
        filtered = filter_candidate_insights(result, depth)
        self._log_filtered("candidate_fit", result, filtered)
        return filtered

    def team_fit_insights(
        self,
        candidate_stored_signals: Any,
        member_stored_signals: Sequence[Any],
        job: JobContext,
        *,
        depth: Depth = "full",
    ) -> FitResult:
        candidate_signals = self.load_signals(candidate_stored_signals, owner="candidate")
        members = [
            TeamMemberSignals(signals=self.load_signals(raw, owner="team_member"))
            for raw in member_stored_signals
        ]
        result = self._team_analyzer.analyze_team_fit(candidate_signals, members, job)
        if result.tier == "insufficient_data":
            self._logger.info(
                "team_fit.insufficient_data",
                members_with_signals=sum(1 for member in members if member.signals),
                minimum=self._team_analyzer.min_team_size,
            )
        filtered = filter_team_fit_insights(result, depth)
        self._log_filtered("team_fit", result, filtered)
        return filtered

    def _log_stored(self, stored: StoredSignals, owner: str) -> None:
        if stored.variant == "malformed":
            self._logger.warning("signals.malformed", owner=owner, reason=stored.reason)
        elif stored.variant == "legacy":
            self._logger.info(
                "signals.legacy",
                owner=owner,
                kept=len(stored.signals),
                dropped=stored.dropped,
            )

    def _log_filtered(self, kind: str, original: FitResult, filtered: FitResult) -> None:
        if filtered.meta.is_premium_limited:
            self._logger.info(
                "insights.filtered",
                kind=kind,
                depth=filtered.meta.depth,
                kept=len(filtered.ranked_insights),
                total=len(original.ranked_insights),
            )


class RequestLoadError(ValueError):
    """Raised when a request file cannot be read or validated."""

    def __init__(self, path: Path, detail: str):
        super().__init__(f"{path}: {detail}")
        self.path = path
        self.detail = detail


class RequestLoader:
    """Load JSON request documents for the CLI."""

    def load_json(self, path: Path) -> Any:
        with path.open("r", encoding="utf-8") as handle:
            try:
                return json.load(handle)
            except json.JSONDecodeError as exc:
                raise RequestLoadError(path, f"invalid JSON ({exc})") from exc
            except UnicodeDecodeError as exc:
                raise RequestLoadError(path, f"not UTF-8 text ({exc.reason})") from exc

    def load_model(self, path: Path, model: type[ModelT]) -> ModelT:
        data = self.load_json(path)
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            raise RequestLoadError(path, f"invalid {model.__name__} ({exc.error_count()} errors)") from exc

    def load_submission(self, path: Path) -> AssessmentSubmission:
        """Accept either a full submission or a single bare test result."""
        data = self.load_json(path)
        if isinstance(data, dict) and "testResults" not in data and "test_results" not in data:
            data = {"testResults": [data]}
        try:
            return AssessmentSubmission.model_validate(data)
        except ValidationError as exc:
            raise RequestLoadError(path, f"invalid assessment ({exc.error_count()} errors)") from exc

    def load_team(self, path: Path) -> list[Any]:
        """Team file: an array of stored signal documents, one per member."""
        data = self.load_json(path)
        if isinstance(data, dict):
            data = data.get("members")
        if not isinstance(data, list):
            raise RequestLoadError(path, "team file must be an array of member signal documents")
        return [_member_document(member) for member in data]


class OutputWriter:
    """Persist CLI results with run metadata."""

    def write(self, path: Path, result: dict[str, Any], *, command: str) -> None:
        payload = {
            "metadata": {
                "command": command,
                "timestamp": pendulum.now("UTC").to_iso8601_string(),
                "app_version": __version__,
            },
            "result": result,
        }
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")


def _member_document(member: Any) -> Any:
    if isinstance(member, dict) and "schemaVersion" not in member:
        return member.get("signals")
    return member
