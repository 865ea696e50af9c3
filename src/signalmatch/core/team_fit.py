"\"\"\"Candidate-versus-team workstyle comparison over an anonymous composite.\"\"\""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Callable, Mapping, Sequence

from ..schemas.context import JobContext, TeamMemberSignals
from ..schemas.fit import FitResult, Insight, InsightCategory, TeamClassification
from ..schemas.signal import STRENGTH_ORDER, Signal, Strength, strength_rank, strongest_bands
from .instruments import DIMENSION_ORDER, get_dimension

MIN_TEAM_SIZE = 3

INSUFFICIENT_TEAM_NOTICE = (
    "Not enough team members have shared a workstyle profile yet; "
    "weigh skills and experience instead."
)
NO_CANDIDATE_SIGNALS_NOTICE = (
    "The candidate has not completed a workstyle assessment; "
    "weigh skills and experience instead."
)

AggregationStrategy = Callable[[Sequence[Strength]], Strength]


def mode_band(bands: Sequence[Strength]) -> Strength:
    """Most common band; ties go to the band nearest ``medium``, then the lower one."""
    counts = Counter(bands)
    middle = strength_rank("medium")
    return min(
        counts,
        key=lambda band: (-counts[band], abs(strength_rank(band) - middle), strength_rank(band)),
    )


def median_band(bands: Sequence[Strength]) -> Strength:
    """Lower median band."""
    ranks = sorted(strength_rank(band) for band in bands)
    return STRENGTH_ORDER[ranks[(len(ranks) - 1) // 2]]


AGGREGATION_STRATEGIES: dict[str, AggregationStrategy] = {
    "mode": mode_band,
    "median": median_band,
}

_CLASSIFICATION_ORDER: tuple[TeamClassification, ...] = ("aligned", "complementary", "gap")

_CATEGORY_FOR: dict[TeamClassification, InsightCategory] = {
    "aligned": "team_aligned",
    "complementary": "team_complementary",
    "gap": "team_gap",
}

_PHRASES: dict[TeamClassification, str] = {
    "aligned": "Shares the team's prevailing approach to {topic}",
    "complementary": "Brings a complementary angle on {topic} that can broaden the team's range",
    "gap": (
        "Approaches {topic} differently from most of the team; "
        "worth discussing how {role} would share this work"
    ),
}

_EMPHASIS: dict[Strength, str] = {
    "high": "The team as a whole puts strong emphasis on {topic}",
    "low": "The team as a whole puts light emphasis on {topic}",
}

_NARROW_RANGE = "Less variety in {topic} across the team; a different approach could add range"


@dataclass
class TeamFitConfig:
    """Privacy threshold, composite strategy and team profile caps."""

    min_team_size: int = MIN_TEAM_SIZE
    aggregation: str = "mode"
    max_team_strengths: int = 3
    max_team_diversity: int = 2

    def __post_init__(self) -> None:
        if self.min_team_size < MIN_TEAM_SIZE:
            raise ValueError(f"min_team_size cannot be lower than {MIN_TEAM_SIZE}.")


class TeamFitAnalyzer:
    """Compare a candidate against an aggregated team composite.

    The composite is the privacy boundary. It exists only when at least
    ``min_team_size`` members carry signals, and every composite dimension
    needs that many members behind it. Team profile insights describe the
    composite only.
    """

    def __init__(
        self,
        *,
        config: TeamFitConfig | None = None,
        strategies: Mapping[str, AggregationStrategy] | None = None,
    ) -> None:
        self._config = config or TeamFitConfig()
        available = dict(AGGREGATION_STRATEGIES)
        if strategies:
            available.update(strategies)
        if self._config.aggregation not in available:
            raise ValueError(f"Unknown aggregation strategy: {self._config.aggregation!r}")
        self._aggregate = available[self._config.aggregation]

    @property
    def min_team_size(self) -> int:
        return self._config.min_team_size

    def analyze_team_fit(
        self,
        candidate_signals: Sequence[Signal] | None,
        team_members: Sequence[TeamMemberSignals],
        job: JobContext,
    ) -> FitResult:
        contributing = [member for member in team_members if member.signals]
        if len(contributing) < self._config.min_team_size:
            return FitResult(tier="insufficient_data", notice=INSUFFICIENT_TEAM_NOTICE)

        covered = self._covered_bands(contributing)
        composite = {dimension_id: self._aggregate(bands) for dimension_id, bands in covered.items()}
        profile, overview = self._team_profile(len(contributing), covered, composite)

        if not candidate_signals:
            return FitResult(
                ranked_insights=profile,
                tier="team" if profile else "none",
                notice=NO_CANDIDATE_SIGNALS_NOTICE,
                summary=overview,
            )

        classifications = self._classify(strongest_bands(list(candidate_signals)), composite)
        counts: dict[TeamClassification, int] = {
            classification: sum(1 for _, value in classifications if value == classification)
            for classification in _CLASSIFICATION_ORDER
        }
        insights = [
            Insight(
                category=_CATEGORY_FOR[classification],
                text=_PHRASES[classification].format(
                    topic=get_dimension(dimension_id).topic,
                    role=job.role_label,
                ),
            )
            for classification in _CLASSIFICATION_ORDER
            for dimension_id, value in classifications
            if value == classification
        ]
        insights.extend(profile)
        return FitResult(
            ranked_insights=insights,
            tier="team" if insights else "none",
            classification_counts=counts,
            summary=overview,
        )

    def composite(self, members: Sequence[TeamMemberSignals]) -> dict[str, Strength]:
        """Aggregate band per dimension, gated on per-dimension coverage."""
        contributing = [member for member in members if member.signals]
        if len(contributing) < self._config.min_team_size:
            return {}
        return {
            dimension_id: self._aggregate(bands)
            for dimension_id, bands in self._covered_bands(contributing).items()
        }

    def _covered_bands(self, contributing: Sequence[TeamMemberSignals]) -> dict[str, list[Strength]]:
        per_dimension: dict[str, list[Strength]] = {}
        for member in contributing:
            for dimension_id, band in strongest_bands(member.signals).items():
                per_dimension.setdefault(dimension_id, []).append(band)
        return {
            dimension_id: bands
            for dimension_id, bands in per_dimension.items()
            if len(bands) >= self._config.min_team_size and get_dimension(dimension_id) is not None
        }

    def _team_profile(
        self,
        team_size: int,
        covered: Mapping[str, Sequence[Strength]],
        composite: Mapping[str, Strength],
    ) -> tuple[list[Insight], str]:
        """Composite-only description of the team plus a one-line overview."""
        leaning = [
            dimension_id
            for dimension_id in sorted(composite, key=lambda item: DIMENSION_ORDER.get(item, len(DIMENSION_ORDER)))
            if composite[dimension_id] != "medium"
        ]
        # Narrow: nobody sits at the pole opposite the composite band.
        narrow = [
            dimension_id
            for dimension_id in leaning
            if all(
                abs(strength_rank(band) - strength_rank(composite[dimension_id])) <= 1
                for band in covered[dimension_id]
            )
        ]

        insights = [
            Insight(
                category="team_strength",
                text=_EMPHASIS[composite[dimension_id]].format(topic=get_dimension(dimension_id).topic),
            )
            for dimension_id in leaning[: self._config.max_team_strengths]
        ]
        insights.extend(
            Insight(
                category="team_diversity",
                text=_NARROW_RANGE.format(topic=get_dimension(dimension_id).topic),
            )
            for dimension_id in narrow[: self._config.max_team_diversity]
        )

        if not leaning:
            return insights, f"A team of {team_size} with a varied mix of working styles"
        overview = f"A team of {team_size} with a clear shared approach to {get_dimension(leaning[0]).topic}"
        others = [dimension_id for dimension_id in narrow if dimension_id != leaning[0]]
        if others:
            overview += f", with room for more variety in {get_dimension(others[0]).topic}"
        return insights, overview

    @staticmethod
    def _classify(
        candidate_bands: Mapping[str, Strength],
        composite: Mapping[str, Strength],
    ) -> list[tuple[str, TeamClassification]]:
        shared = sorted(
            (dimension_id for dimension_id in candidate_bands if dimension_id in composite),
            key=lambda dimension_id: DIMENSION_ORDER.get(dimension_id, len(DIMENSION_ORDER)),
        )
        results: list[tuple[str, TeamClassification]] = []
        for dimension_id in shared:
            if get_dimension(dimension_id) is None:
                continue
            distance = abs(strength_rank(candidate_bands[dimension_id]) - strength_rank(composite[dimension_id]))
            if distance == 0:
                results.append((dimension_id, "aligned"))
            elif distance == 1:
                results.append((dimension_id, "complementary"))
            else:
                results.append((dimension_id, "gap"))
        return results
