from __future__ import annotations

import json

import pytest
import structlog
from structlog.testing import LogCapture

from signalmatch.container import create_container
from signalmatch.schemas import AssessmentSubmission, JobContext
from signalmatch.storage import SCHEMA_VERSION, encode_signals

DISC_ANSWERS = [{"questionId": f"disc_{n}", "value": "1"} for n in range(1, 21)]


@pytest.fixture
def logs():
    """Capture events after context variables are merged in."""
    capture = LogCapture()
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    structlog.configure(processors=[structlog.contextvars.merge_contextvars, capture])
    yield capture.entries
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


def submit(service, answers=DISC_ANSWERS):
    submission = AssessmentSubmission.model_validate(
        {
            "sessionId": "S-7",
            "testResults": [{"testType": "disc", "testVersion": "1.0.0", "answers": answers}],
            "context": {"purpose": "job_matching"},
        }
    )
    return service.submit_assessment(submission)


def test_assessment_round_trip_feeds_job_insights(logs):
    service = create_container().service()
    outcome = submit(service)
    stored = encode_signals(outcome.signals)
    result = service.job_insights(
        stored,
        JobContext(title="Engineering Manager", requiredSkills=["Go"]),
        ["go"],
    )

    assert outcome.ok
    assert result.tier == "signals"
    analyzed = [entry for entry in logs if entry["event"] == "assessment.analyzed"]
    assert analyzed == [
        {
            "event": "assessment.analyzed",
            "log_level": "info",
            "session_id": "S-7",
            "tests": ["disc"],
            "signal_count": 2,
        }
    ]


def test_rejected_assessment_logs_issue_codes_only(logs):
    service = create_container().service()
    outcome = submit(service, DISC_ANSWERS[:3])

    assert not outcome.ok
    assert logs == [
        {
            "event": "assessment.rejected",
            "log_level": "warning",
            "session_id": "S-7",
            "issues": ["insufficient_answers"],
        }
    ]


def test_session_id_is_bound_only_while_the_assessment_runs(logs):
    service = create_container().service()
    outcome = submit(service)
    service.job_insights(encode_signals(outcome.signals), JobContext(title="Analyst"), depth="summary")

    assert "session_id" not in structlog.contextvars.get_contextvars()
    by_event = {entry["event"]: entry for entry in logs}
    assert by_event["assessment.analyzed"]["session_id"] == "S-7"
    assert "session_id" not in by_event["insights.filtered"]


def test_malformed_stored_signals_are_treated_as_absent(logs):
    broken = json.dumps({"schemaVersion": SCHEMA_VERSION, "signals": [{"score": 0.9}]})
    job = JobContext(title="Analyst", requiredSkills=["SQL"])

    service = create_container().service()
    result = service.candidate_insights(broken, job, candidate_skills=["sql"])

    assert result.tier == "skills"
    assert [entry["event"] for entry in logs] == ["signals.malformed"]
    assert logs[0]["owner"] == "candidate"


def test_deeply_nested_stored_signals_are_treated_as_absent(logs):
    service = create_container().service()

    assert service.load_signals("[" * 100000 + "]" * 100000) == []
    assert logs[0]["event"] == "signals.malformed"


def test_filtered_candidate_insights_are_logged_without_text(logs):
    job = JobContext(title="Analyst", requiredSkills=["SQL", "Python"])

    service = create_container().service()
    result = service.candidate_insights(
        None,
        job,
        candidate_skills=["sql", "python"],
        has_cover_message=True,
        depth="basic",
    )

    assert len(result.insights) == 1
    filtered = [entry for entry in logs if entry["event"] == "insights.filtered"]
    assert filtered == [
        {
            "event": "insights.filtered",
            "log_level": "info",
            "kind": "candidate_fit",
            "depth": "basic",
            "kept": 1,
            "total": 3,
        }
    ]


def test_team_fit_logs_insufficient_members(logs):
    member = encode_signals(submit(create_container().service()).signals)

    service = create_container().service()
    result = service.team_fit_insights(member, [member, member, None], JobContext(title="Engineer"))

    assert result.tier == "insufficient_data"
    insufficient = [entry for entry in logs if entry["event"] == "team_fit.insufficient_data"]
    assert insufficient[0]["members_with_signals"] == 2
    assert insufficient[0]["minimum"] == 3


def test_job_insights_respect_depth():
    job = JobContext(title="Analyst", requiredSkills=["SQL", "Python"], locationType="remote")

    service = create_container().service()
    full = service.job_insights(None, job, ["sql", "python"])
    summary = service.job_insights(None, job, ["sql", "python"], depth="summary")

    assert len(full.insights) == 3
    assert summary.insights == [full.insights[0], full.insights[2]]
    assert summary.meta.is_premium_limited is True
