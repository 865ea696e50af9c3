"""Versioned JSON codec for signal sets persisted by callers."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Iterable, Literal

from pydantic import ValidationError

from .schemas.signal import Signal

SCHEMA_VERSION = 2

StoredVariant = Literal["current", "legacy", "empty", "malformed"]


@dataclass(frozen=True)
class StoredSignals:
    """Decoded signal document.

    ``legacy`` is the unversioned bare-array shape; its items are validated one
    by one and anything that is not a current Signal is dropped and counted.
    """

    variant: StoredVariant
    signals: tuple[Signal, ...] = ()
    dropped: int = 0
    reason: str | None = field(default=None, compare=False)

    @property
    def is_usable(self) -> bool:
        return bool(self.signals)


def encode_signals(signals: Iterable[Signal]) -> str:
    """Serialize a full signal set. Re-assessment replaces the stored document."""
    document = {
        "schemaVersion": SCHEMA_VERSION,
        "signals": [signal.model_dump(mode="json", by_alias=True) for signal in signals],
    }
    return json.dumps(document, ensure_ascii=False)


def decode_signals(raw: Any) -> StoredSignals:
    """Decode an untrusted stored document. Never raises for bad data."""
    if raw is None or raw == "" or raw == b"":
        return StoredSignals(variant="empty")

    document = raw
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            return StoredSignals(variant="malformed", reason=f"undecodable bytes ({exc.reason})")
    if isinstance(raw, str):
        try:
            document = json.loads(raw)
        except json.JSONDecodeError as exc:
            return StoredSignals(variant="malformed", reason=f"invalid JSON ({exc.msg})")
        except RecursionError:
            return StoredSignals(variant="malformed", reason="document nested too deeply")

    if isinstance(document, list):
        signals, dropped = _validate_items(document)
        if not document:
            return StoredSignals(variant="empty")
        return StoredSignals(variant="legacy", signals=signals, dropped=dropped)

    if isinstance(document, dict):
        version = document.get("schemaVersion")
        items = document.get("signals")
        if version != SCHEMA_VERSION:
            return StoredSignals(variant="malformed", reason=f"unknown schema version {version!r}")
        if not isinstance(items, list):
            return StoredSignals(variant="malformed", reason="'signals' is not an array")
        signals, dropped = _validate_items(items)
        if dropped:
            return StoredSignals(
                variant="malformed",
                reason=f"{dropped} invalid signal(s) in a versioned document",
            )
        return StoredSignals(variant="current" if signals else "empty", signals=signals)

    return StoredSignals(variant="malformed", reason=f"unexpected {type(document).__name__} document")


def _validate_items(items: list[Any]) -> tuple[tuple[Signal, ...], int]:
    signals: list[Signal] = []
    dropped = 0
    for item in items:
        if isinstance(item, Signal):
            signals.append(item)
            continue
        try:
            signals.append(Signal.model_validate(item))
        except ValidationError:
            dropped += 1
    return tuple(signals), dropped
