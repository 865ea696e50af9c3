"\"\"\"Building blocks for assessment instrument definitions.\"\"\""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Mapping

from ...schemas.signal import Strength

DimensionCategory = Literal[
    "collaboration",
    "decision_making",
    "work_style",
    "motivation",
    "environment",
]


@dataclass(frozen=True)
class BandLabel:
    """Curated label plus the phrase used whenever the band is put into words."""

    label: str
    descriptor: str


@dataclass(frozen=True)
class Dimension:
    """Internal measurement axis. Ids and names never reach API consumers."""

    id: str
    name: str
    category: DimensionCategory
    topic: str
    bands: Mapping[Strength, BandLabel]

    def band(self, strength: Strength) -> BandLabel:
        return self.bands[strength]


@dataclass(frozen=True)
class DimensionWeights:
    dimension_id: str
    weights: Mapping[str, float]

    @property
    def max_weight(self) -> float:
        return max(self.weights.values()) if self.weights else 0.0


@dataclass(frozen=True)
class Question:
    id: str
    text: str
    dimensions: tuple[DimensionWeights, ...]

    def accepts(self, value_key: str) -> bool:
        return any(value_key in entry.weights for entry in self.dimensions)


@dataclass(frozen=True)
class TestDefinition:
    """Complete instrument: dimensions, questions and validity rule."""

    __test__ = False

    type: str
    version: str
    dimensions: tuple[Dimension, ...]
    questions: tuple[Question, ...]
    minimum_questions: int
    _questions_by_id: dict[str, Question] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_questions_by_id", {q.id: q for q in self.questions})

    def question(self, question_id: str) -> Question | None:
        return self._questions_by_id.get(question_id)


def forced_choice(question_id: str, text: str, first: str, second: str) -> Question:
    """Two-option question: value 1 favours ``first``, value 2 favours ``second``."""
    return Question(
        id=question_id,
        text=text,
        dimensions=(
            DimensionWeights(first, {"1": 2.0, "2": 0.0}),
            DimensionWeights(second, {"1": 0.0, "2": 2.0}),
        ),
    )


LIKERT_WEIGHTS: Mapping[str, float] = {"1": 0.0, "2": 1.0, "3": 2.0, "4": 3.0, "5": 4.0}


def rating(question_id: str, text: str, dimension_id: str) -> Question:
    """Five-point agreement question feeding a single dimension."""
    return Question(
        id=question_id,
        text=text,
        dimensions=(DimensionWeights(dimension_id, LIKERT_WEIGHTS),),
    )
