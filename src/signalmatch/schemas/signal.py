"\"\"\"Qualitative signal schema shared by derivation and scoring.\"\"\""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

Strength = Literal["low", "medium", "high"]

STRENGTH_ORDER: tuple[Strength, ...] = ("low", "medium", "high")


def strength_rank(strength: Strength) -> int:
    """Return the ordinal position of a strength band."""
    return STRENGTH_ORDER.index(strength)


class SourceTest(BaseModel):
    """Assessment instrument a signal was derived from."""

    type: str
    version: str

    model_config = ConfigDict(extra="forbid", frozen=True)


class Signal(BaseModel):
    """Privacy-safe workstyle tag. Never carries a raw score."""

    dimension_id: str
    label: str
    strength: Strength
    source_test: SourceTest

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


def strongest_bands(signals: list[Signal] | tuple[Signal, ...]) -> dict[str, Strength]:
    """Collapse signals to the strongest band per dimension.

    Re-tests can leave several signals for one dimension; taking the strongest
    keeps the result independent of list order.
    """
    bands: dict[str, Strength] = {}
    for signal in signals:
        current = bands.get(signal.dimension_id)
        if current is None or strength_rank(signal.strength) > strength_rank(current):
            bands[signal.dimension_id] = signal.strength
    return bands
