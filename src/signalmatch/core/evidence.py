"""Signal evidence shared by the job and candidate fit scorers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

from ..schemas.signal import Signal, Strength, strength_rank, strongest_bands
from .instruments import Dimension, get_dimension


@dataclass(frozen=True)
class SignalEvidence:
    """One preferred dimension the candidate carries a signal for."""

    dimension: Dimension
    candidate_band: Strength
    preferred_band: Strength

    @property
    def distance(self) -> int:
        return strength_rank(self.preferred_band) - strength_rank(self.candidate_band)

    @property
    def candidate_descriptor(self) -> str:
        return self.dimension.band(self.candidate_band).descriptor

    @property
    def preferred_descriptor(self) -> str:
        return self.dimension.band(self.preferred_band).descriptor


@dataclass(frozen=True)
class SignalAssessment:
    strengths: tuple[SignalEvidence, ...]
    considerations: tuple[SignalEvidence, ...]


def assess_signals(
    signals: Sequence[Signal],
    preferences: Mapping[str, Strength],
) -> SignalAssessment:
    """Compare a candidate's bands with the role's preferred bands.

    At or above the preferred band is a strength; two bands short is a
    consideration; one band short, or no signal at all, says nothing.
    """
    bands = strongest_bands(list(signals))
    strengths: list[SignalEvidence] = []
    considerations: list[SignalEvidence] = []
    for dimension_id, preferred in preferences.items():
        candidate_band = bands.get(dimension_id)
        dimension = get_dimension(dimension_id)
        if candidate_band is None or dimension is None:
            continue
        evidence = SignalEvidence(dimension, candidate_band, preferred)
        if evidence.distance <= 0:
            strengths.append(evidence)
        elif evidence.distance >= 2:
            considerations.append(evidence)

    strengths.sort(key=lambda item: -strength_rank(item.candidate_band))
    return SignalAssessment(strengths=tuple(strengths), considerations=tuple(considerations))


def team_size_hint(company_size: str | None) -> str | None:
    """Bucket a free-form company size into solo/small/medium/large."""
    if not company_size:
        return None
    size = company_size.strip().lower()
    if "1-10" in size or "solo" in size:
        return "solo"
    if "11-50" in size or size == "small":
        return "small"
    if "51-200" in size or size == "medium":
        return "medium"
    if any(marker in size for marker in ("201", "500", "1000", "large", "enterprise")):
        return "large"
    return None
