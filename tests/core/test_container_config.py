from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from signalmatch.config import ConfigManager, load_settings
from signalmatch.container import create_container
from signalmatch.schemas.config import AppConfig, load_config


def test_create_container_with_overrides():
    container = create_container(
        settings={
            "derivation": {"emit_threshold": 0.25, "high_threshold": 0.8},
            "skills": {"strategy": "fuzzy", "min_similarity": 85},
            "job_fit": {"max_signal_strengths": 3},
            "candidate_fit": {"max_signal_considerations": 0},
            "team_fit": {"min_team_size": 5, "aggregation": "median"},
        }
    )

    deriver = container.deriver()
    skill_matcher = container.skill_matcher()
    job_scorer = container.job_scorer()
    candidate_scorer = container.candidate_scorer()
    team_analyzer = container.team_analyzer()

    assert deriver._config.emit_threshold == 0.25
    assert deriver._config.high_threshold == 0.8
    assert skill_matcher._config.strategy == "fuzzy"
    assert job_scorer._config.max_signal_strengths == 3
    assert job_scorer._skills is skill_matcher
    assert candidate_scorer._config.max_signal_considerations == 0
    assert candidate_scorer._skills is skill_matcher
    assert team_analyzer.min_team_size == 5


def test_default_container_shares_singletons():
    container = create_container()

    service = container.service()

    assert service is container.service()
    assert container.job_scorer()._skills is container.skill_matcher()
    assert container.team_analyzer().min_team_size == 3


def test_container_rejects_team_size_below_privacy_floor():
    with pytest.raises(ValueError):
        create_container(settings={"team_fit": {"min_team_size": 2}})


def test_load_config_validation():
    data = {
        "derivation": {"medium_threshold": 0.45},
        "team_fit": {"aggregation": "mode"},
    }
    app_config = load_config(data)
    assert isinstance(app_config, AppConfig)
    settings = app_config.to_settings()
    assert settings == data


def test_load_config_rejects_unknown_sections():
    with pytest.raises(ValidationError):
        load_config({"evaluators": {}})


def test_load_config_rejects_non_mapping():
    with pytest.raises(ValidationError):
        load_config(["derivation"])


def test_config_manager_reads_yaml_by_name(tmp_path: Path):
    (tmp_path / "insights.yml").write_text(
        "skills:\n  strategy: fuzzy\nteam_fit:\n  min_team_size: 4\n",
        encoding="utf-8",
    )

    manager = ConfigManager(tmp_path)

    assert manager.settings("insights") == {
        "skills": {"strategy": "fuzzy"},
        "team_fit": {"min_team_size": 4},
    }
    with pytest.raises(FileNotFoundError):
        manager.load("missing")


def test_load_settings_treats_empty_file_as_defaults(tmp_path: Path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert load_settings(path) == {}
