"\"\"\"Configuration management utilities.\"\"\""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from ..schemas.config import load_config


class ConfigManager:
    """Simple YAML-backed configuration loader."""

    def __init__(self, base_path: str | Path):
        self._base_path = Path(base_path)

    def load(self, name: str) -> dict[str, Any]:
        """Load a YAML configuration by name without file extension."""
        for suffix in (".yaml", ".yml"):
            path = self._base_path / f"{name}{suffix}"
            if path.exists():
                return read_yaml(path)
        raise FileNotFoundError(f"No {name}.yaml or {name}.yml under {self._base_path}")

    def settings(self, name: str) -> dict[str, Any]:
        """Load and validate a configuration, returning container settings."""
        return load_config(self.load(name)).to_settings()


def read_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle)
    return loaded if loaded is not None else {}


def load_settings(path: str | Path) -> dict[str, Any]:
    """Validate a YAML config file into container settings."""
    return load_config(read_yaml(Path(path))).to_settings()


__all__ = ["ConfigManager", "load_settings", "read_yaml"]
