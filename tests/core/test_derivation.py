from __future__ import annotations

import pytest

from signalmatch.core import DerivationConfig, SignalDeriver
from signalmatch.core.instruments import DISC_LITE, HOLLAND
from signalmatch.schemas import AnalysisContext, Answer, TestResult


def disc_result(values: dict[int, str] | None = None, default: str | None = "1", **kwargs) -> TestResult:
    answers = []
    for number in range(1, 21):
        value = (values or {}).get(number, default)
        if value is not None:
            answers.append(Answer(question_id=f"disc_{number}", value=value))
    return TestResult(
        test_type=kwargs.get("test_type", "disc"),
        test_version=kwargs.get("test_version", "1.0.0"),
        answers=answers,
    )


def holland_result(rates: dict[str, int]) -> TestResult:
    answers = [
        Answer(question_id=question.id, value=rates.get(question.id[len("holland_")], 3))
        for question in HOLLAND.questions
    ]
    return TestResult(test_type="holland", test_version="1.0.0", answers=answers)


def labels(outcome) -> dict[str, tuple[str, str]]:
    return {signal.dimension_id: (signal.label, signal.strength) for signal in outcome.signals}


def test_disc_direct_answers_yield_decisive_without_opposing_label():
    outcome = SignalDeriver().analyze("S-1", [disc_result()])

    assert outcome.ok
    derived = labels(outcome)
    assert derived["disc.dominance"] == ("decisive", "high")
    assert derived["disc.influence"] == ("engagingCommunicator", "medium")
    # Steadiness sits exactly on the emit threshold and conscientiousness at zero.
    assert "disc.steadiness" not in derived
    assert "disc.conscientiousness" not in derived
    assert all(signal.source_test.type == "disc" for signal in outcome.signals)


def test_derivation_is_deterministic():
    deriver = SignalDeriver()
    submissions = [disc_result({3: "2", 7: "2", 15: "2"}), holland_result({"s": 5, "r": 1})]

    first = deriver.analyze("S-1", submissions, {"purpose": "team_fit"})
    second = deriver.analyze("S-1", submissions, {"purpose": "team_fit"})

    assert first == second
    assert first.to_payload() == second.to_payload()


def test_signals_never_carry_raw_scores():
    outcome = SignalDeriver().analyze("S-1", [disc_result()])

    payload = outcome.to_payload()
    for signal in payload["signals"]:
        assert set(signal) == {"dimensionId", "label", "strength", "sourceTest"}
        assert signal["strength"] in {"low", "medium", "high"}


def test_insufficient_answers_returns_error_without_signals():
    result = disc_result({number: None for number in range(12, 21)})

    outcome = SignalDeriver().analyze("S-2", [result])

    assert outcome.status == "error"
    assert outcome.signals == []
    assert [issue.code for issue in outcome.issues] == ["insufficient_answers"]
    assert outcome.issues[0].test_type == "disc"


def test_minimum_answer_count_is_inclusive():
    result = disc_result({number: None for number in range(13, 21)})

    assert len(result.answers) == DISC_LITE.minimum_questions
    assert SignalDeriver().analyze("S-3", [result]).ok


def test_invalid_and_unknown_answers_do_not_count_toward_minimum():
    values: dict[int, str | None] = {number: None for number in range(13, 21)}
    values[1] = "3"
    result = disc_result(values)
    result = result.model_copy(
        update={"answers": [*result.answers, Answer(question_id="disc_99", value="1")]}
    )

    outcome = SignalDeriver().analyze("S-4", [result])

    assert outcome.status == "error"
    assert outcome.issues[0].code == "insufficient_answers"


def test_duplicate_answers_keep_the_last_value():
    base = disc_result()
    duplicated = base.model_copy(
        update={"answers": [Answer(question_id="disc_1", value="2"), *base.answers]}
    )
    overridden = base.model_copy(
        update={"answers": [*base.answers, Answer(question_id="disc_1", value="2")]}
    )

    deriver = SignalDeriver()
    assert deriver.analyze("S", [duplicated]) == deriver.analyze("S", [base])
    assert deriver.analyze("S", [overridden]) != deriver.analyze("S", [base])


def test_holland_uniform_ratings_produce_medium_signals():
    outcome = SignalDeriver().analyze("S-5", [holland_result({})])

    assert outcome.ok
    assert len(outcome.signals) == 6
    assert {signal.strength for signal in outcome.signals} == {"medium"}


def test_holland_strong_social_interest():
    outcome = SignalDeriver().analyze(
        "S-6",
        [holland_result({"r": 1, "i": 1, "a": 1, "s": 5, "e": 1, "c": 1})],
    )

    assert labels(outcome) == {"holland.social": ("peopleDeveloper", "high")}


def test_unknown_test_type_is_reported():
    outcome = SignalDeriver().analyze("S-7", [disc_result(test_type="mbti")])

    assert outcome.status == "error"
    assert outcome.issues[0].code == "unknown_test_type"


def test_unsupported_version_is_reported():
    outcome = SignalDeriver().analyze("S-8", [disc_result(test_version="2.0.0")])

    assert outcome.status == "error"
    assert outcome.issues[0].code == "unsupported_test_version"


def test_one_failing_test_fails_the_whole_submission():
    failing = disc_result({number: None for number in range(5, 21)})

    outcome = SignalDeriver().analyze("S-9", [holland_result({}), failing])

    assert outcome.status == "error"
    assert outcome.signals == []


def test_empty_submission_is_reported():
    outcome = SignalDeriver().analyze("S-10", [])

    assert outcome.status == "error"
    assert outcome.issues[0].code == "no_tests"


def test_purpose_changes_signal_order():
    deriver = SignalDeriver()
    submissions = [disc_result(), holland_result({})]

    general = deriver.analyze("S", submissions)
    team = deriver.analyze("S", submissions, AnalysisContext(purpose="team_fit"))
    profile = deriver.analyze("S", submissions, {"purpose": "profile_insight"})

    assert general.signals[0].dimension_id == "holland.realistic"
    assert team.signals[0].dimension_id == "disc.influence"
    assert profile.signals[0].dimension_id == "holland.artistic"
    assert sorted(general.signals, key=lambda s: s.dimension_id) == sorted(
        team.signals, key=lambda s: s.dimension_id
    )


def test_higher_strength_comes_first_within_a_category():
    outcome = SignalDeriver().analyze("S", [disc_result(), holland_result({})])

    decision_making = [
        signal.dimension_id
        for signal in outcome.signals
        if signal.dimension_id in {"disc.dominance", "holland.investigative"}
    ]
    assert decision_making == ["disc.dominance", "holland.investigative"]


def test_custom_thresholds_change_bands():
    deriver = SignalDeriver(
        config=DerivationConfig(emit_threshold=0.2, medium_threshold=0.5, high_threshold=0.9)
    )

    derived = labels(deriver.analyze("S", [disc_result()]))

    assert derived["disc.steadiness"] == ("steadyWhenNeeded", "low")
    assert derived["disc.influence"][1] == "medium"


def test_score_reports_intensities():
    intensities, issue = SignalDeriver().score(DISC_LITE, disc_result())

    assert issue is None
    assert intensities["disc.dominance"] == pytest.approx(1.0)
    assert intensities["disc.influence"] == pytest.approx(12 / 18)
    assert intensities["disc.steadiness"] == pytest.approx(0.3)
    assert intensities["disc.conscientiousness"] == pytest.approx(0.0)


def test_derivation_config_rejects_unordered_thresholds():
    with pytest.raises(ValueError):
        DerivationConfig(emit_threshold=0.5, medium_threshold=0.4)


def test_test_type_matching_ignores_case_and_whitespace():
    outcome = SignalDeriver().analyze("S", [disc_result(test_type=" Disc ")])

    assert outcome.ok
