"\"\"\"Assessment answers to qualitative signals.\"\"\""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from ..schemas.assessment import (
    AnalysisContext,
    AnalysisPurpose,
    DerivationIssue,
    DerivationOutcome,
    TestResult,
)
from ..schemas.signal import Signal, SourceTest, Strength, strength_rank
from .instruments import DIMENSION_ORDER, INSTRUMENTS, TestDefinition, get_dimension

_CATEGORY_PRIORITY: dict[AnalysisPurpose, tuple[str, ...]] = {
    "job_matching": ("work_style", "collaboration", "motivation", "decision_making", "environment"),
    "team_fit": ("collaboration", "environment", "work_style", "decision_making", "motivation"),
    "profile_insight": ("motivation", "work_style", "collaboration", "decision_making", "environment"),
    "general": ("work_style", "collaboration", "decision_making", "motivation", "environment"),
}


@dataclass
class DerivationConfig:
    """Intensity cut-offs. Product policy, not psychometric constants."""

    emit_threshold: float = 0.3
    medium_threshold: float = 0.4
    high_threshold: float = 0.7

    def __post_init__(self) -> None:
        if not 0.0 <= self.emit_threshold <= self.medium_threshold <= self.high_threshold <= 1.0:
            raise ValueError(
                "Derivation thresholds must satisfy 0 <= emit <= medium <= high <= 1."
            )

    def band(self, intensity: float) -> Strength:
        if intensity > self.high_threshold:
            return "high"
        if intensity >= self.medium_threshold:
            return "medium"
        return "low"


class SignalDeriver:
    """Turn completed assessments into signals.

    The mapping is one-way: only the band label of each dimension that clears
    ``emit_threshold`` survives, so answers cannot be reconstructed.
    """

    def __init__(
        self,
        *,
        config: DerivationConfig | None = None,
        instruments: Mapping[str, TestDefinition] | None = None,
    ) -> None:
        self._config = config or DerivationConfig()
        self._instruments = dict(instruments) if instruments is not None else dict(INSTRUMENTS)

    def analyze(
        self,
        session_id: str,
        test_results: Iterable[TestResult],
        context: AnalysisContext | Mapping[str, Any] | None = None,
    ) -> DerivationOutcome:
        analysis_context = self._resolve_context(context)
        results = list(test_results)
        if not results:
            return self._error(
                session_id,
                [DerivationIssue(code="no_tests", message="No assessment results were submitted.")],
            )

        issues: list[DerivationIssue] = []
        signals: list[Signal] = []
        for result in results:
            definition, issue = self._resolve_definition(result)
            if issue is not None:
                issues.append(issue)
                continue
            intensities, issue = self.score(definition, result)
            if issue is not None:
                issues.append(issue)
                continue
            signals.extend(self._signals_for(definition, intensities))

        if issues:
            return self._error(session_id, issues)

        return DerivationOutcome(
            session_id=session_id,
            status="ok",
            signals=self._order(signals, analysis_context.purpose),
        )

    def score(
        self,
        definition: TestDefinition,
        result: TestResult,
    ) -> tuple[dict[str, float], DerivationIssue | None]:
        """Return per-dimension intensity in [0, 1], or an issue when too few answers."""
        answered: dict[str, str] = {}
        for answer in result.answers:
            question = definition.question(answer.question_id)
            if question is None or not question.accepts(answer.value_key):
                continue
            answered[question.id] = answer.value_key

        if len(answered) < definition.minimum_questions:
            return {}, DerivationIssue(
                code="insufficient_answers",
                message=(
                    f"Not enough answers: {len(answered)}/{definition.minimum_questions} required."
                ),
                test_type=definition.type,
            )

        totals = {dimension.id: 0.0 for dimension in definition.dimensions}
        maxima = {dimension.id: 0.0 for dimension in definition.dimensions}
        for question in definition.questions:
            value_key = answered.get(question.id)
            if value_key is None:
                continue
            for entry in question.dimensions:
                totals[entry.dimension_id] += float(entry.weights.get(value_key, 0.0))
                maxima[entry.dimension_id] += entry.max_weight

        intensities = {
            dimension_id: (totals[dimension_id] / maxima[dimension_id]) if maxima[dimension_id] > 0 else 0.0
            for dimension_id in totals
        }
        return intensities, None

    def _signals_for(
        self,
        definition: TestDefinition,
        intensities: Mapping[str, float],
    ) -> list[Signal]:
        source = SourceTest(type=definition.type, version=definition.version)
        signals: list[Signal] = []
        for dimension in definition.dimensions:
            intensity = intensities.get(dimension.id, 0.0)
            if intensity <= self._config.emit_threshold:
                continue
            strength = self._config.band(intensity)
            signals.append(
                Signal(
                    dimension_id=dimension.id,
                    label=dimension.band(strength).label,
                    strength=strength,
                    source_test=source,
                )
            )
        return signals

    def _resolve_definition(
        self,
        result: TestResult,
    ) -> tuple[TestDefinition, None] | tuple[None, DerivationIssue]:
        definition = self._instruments.get(result.test_type.strip().lower())
        if definition is None:
            return None, DerivationIssue(
                code="unknown_test_type",
                message=f"Unknown test type: {result.test_type!r}",
                test_type=result.test_type,
            )
        if result.test_version != definition.version:
            return None, DerivationIssue(
                code="unsupported_test_version",
                message=(
                    f"Unsupported {definition.type} version {result.test_version!r}; "
                    f"expected {definition.version!r}."
                ),
                test_type=definition.type,
            )
        return definition, None

    @staticmethod
    def _resolve_context(context: AnalysisContext | Mapping[str, Any] | None) -> AnalysisContext:
        if context is None:
            return AnalysisContext()
        if isinstance(context, AnalysisContext):
            return context
        return AnalysisContext.model_validate(dict(context))

    @staticmethod
    def _order(signals: list[Signal], purpose: AnalysisPurpose) -> list[Signal]:
        priority = _CATEGORY_PRIORITY[purpose]

        def sort_key(item: tuple[int, Signal]) -> tuple[int, int, int, int]:
            position, signal = item
            dimension = get_dimension(signal.dimension_id)
            category_rank = priority.index(dimension.category) if dimension else len(priority)
            return (
                category_rank,
                -strength_rank(signal.strength),
                DIMENSION_ORDER.get(signal.dimension_id, len(DIMENSION_ORDER)),
                position,
            )

        return [signal for _, signal in sorted(enumerate(signals), key=sort_key)]

    @staticmethod
    def _error(session_id: str, issues: list[DerivationIssue]) -> DerivationOutcome:
        return DerivationOutcome(session_id=session_id, status="error", signals=[], issues=issues)
