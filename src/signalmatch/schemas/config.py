"\"\"\"Pydantic configuration schema for CLI YAML input.\"\"\""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError


class AppConfig(BaseModel):
    derivation: dict[str, Any] | None = None
    skills: dict[str, Any] | None = None
    job_fit: dict[str, Any] | None = None
    candidate_fit: dict[str, Any] | None = None
    team_fit: dict[str, Any] | None = None

    model_config = ConfigDict(extra="forbid")

    def to_settings(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


def load_config(raw: Any) -> AppConfig:
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
