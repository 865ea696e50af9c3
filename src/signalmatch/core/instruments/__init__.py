"\"\"\"Registry of supported assessment instruments.\"\"\""

from __future__ import annotations

from .base import BandLabel, Dimension, Question, TestDefinition
from .disc import DISC_LITE
from .holland import HOLLAND

INSTRUMENTS: dict[str, TestDefinition] = {
    DISC_LITE.type: DISC_LITE,
    HOLLAND.type: HOLLAND,
}

DIMENSIONS: dict[str, Dimension] = {
    dimension.id: dimension
    for definition in INSTRUMENTS.values()
    for dimension in definition.dimensions
}

DIMENSION_ORDER: dict[str, int] = {dimension_id: idx for idx, dimension_id in enumerate(DIMENSIONS)}


def get_instrument(test_type: str) -> TestDefinition | None:
    return INSTRUMENTS.get(test_type.strip().lower())


def get_dimension(dimension_id: str) -> Dimension | None:
    return DIMENSIONS.get(dimension_id)


__all__ = [
    "BandLabel",
    "DIMENSIONS",
    "DIMENSION_ORDER",
    "DISC_LITE",
    "Dimension",
    "HOLLAND",
    "INSTRUMENTS",
    "Question",
    "TestDefinition",
    "get_dimension",
    "get_instrument",
]
