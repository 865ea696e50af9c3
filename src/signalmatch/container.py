"\"\"\"Dependency injection container for the insight engine.\"\"\""

from __future__ import annotations

from typing import Any

from dependency_injector import containers, providers

from .core import (
    CandidateFitScorer,
    DerivationConfig,
    FitScorerConfig,
    JobFitScorer,
    SignalDeriver,
    SkillMatcher,
    SkillMatcherConfig,
    TeamFitAnalyzer,
    TeamFitConfig,
)
from .pipeline import InsightService, OutputWriter, RequestLoader


class InsightContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    skill_matcher = providers.Singleton(SkillMatcher)

    deriver = providers.Singleton(SignalDeriver)
    job_scorer = providers.Singleton(JobFitScorer, skill_matcher=skill_matcher)
    candidate_scorer = providers.Singleton(CandidateFitScorer, skill_matcher=skill_matcher)
    team_analyzer = providers.Singleton(TeamFitAnalyzer)

    service = providers.Singleton(
        InsightService,
        deriver=deriver,
        job_scorer=job_scorer,
        candidate_scorer=candidate_scorer,
        team_analyzer=team_analyzer,
    )

    loader = providers.Factory(RequestLoader)
    writer = providers.Factory(OutputWriter)


def create_container(*, settings: dict[str, Any] | None = None) -> InsightContainer:
    """Instantiate container with optional overrides."""

    container = InsightContainer()

    if not settings or not isinstance(settings, dict):
        return container

    if "derivation" in settings:
        derivation_config = DerivationConfig(**settings["derivation"])
        container.deriver.override(providers.Singleton(SignalDeriver, config=derivation_config))

    if "skills" in settings:
        skill_config = SkillMatcherConfig(**settings["skills"])
        container.skill_matcher.override(providers.Singleton(SkillMatcher, config=skill_config))

    if "job_fit" in settings:
        job_config = FitScorerConfig(**settings["job_fit"])
        container.job_scorer.override(
            providers.Singleton(JobFitScorer, config=job_config, skill_matcher=container.skill_matcher)
        )

    if "candidate_fit" in settings:
        candidate_config = FitScorerConfig(**settings["candidate_fit"])
        container.candidate_scorer.override(
            providers.Singleton(
                CandidateFitScorer,
                config=candidate_config,
                skill_matcher=container.skill_matcher,
            )
        )

    if "team_fit" in settings:
        team_config = TeamFitConfig(**settings["team_fit"])
        container.team_analyzer.override(providers.Singleton(TeamFitAnalyzer, config=team_config))

    return container
