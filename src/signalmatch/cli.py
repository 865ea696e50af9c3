"\"\"\"Typer CLI entrypoint for the insight engine.\"\"\""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import load_settings
from .container import InsightContainer, create_container
from .logging import configure_logging
from .pipeline import RequestLoadError
from .schemas import JobContext

app = typer.Typer(help="Workstyle signal derivation and fit insight CLI.")

_state: dict[str, Any] = {}

DEPTHS = ("basic", "summary", "full")


@app.callback()
def main_options(
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
) -> None:
    """Shared options for every command."""
    settings: dict[str, Any] = {}
    if config:
        try:
            settings = load_settings(config)
        except (ValidationError, ValueError, yaml.YAMLError) as exc:
            raise typer.BadParameter(f"Invalid config file: {exc}", param_name="config") from exc

    configure_logging(log_level)
    try:
        _state["container"] = create_container(settings=settings)
    except (TypeError, ValueError) as exc:
        raise typer.BadParameter(f"Invalid config values: {exc}", param_name="config") from exc


def _container() -> InsightContainer:
    return _state.get("container") or create_container()


def _split_skills(skills: Optional[str]) -> list[str]:
    if not skills:
        return []
    return [skill.strip() for skill in skills.split(",") if skill.strip()]


def _check_depth(depth: str, allowed: tuple[str, ...]) -> str:
    if depth not in allowed:
        raise typer.BadParameter(f"Depth must be one of {', '.join(allowed)}", param_name="depth")
    return depth


@app.command()
def analyze(
    input: Path = typer.Option(..., "--input", exists=True, readable=True, dir_okay=False, help="Assessment submission JSON."),
    output: Path = typer.Option(..., dir_okay=False, resolve_path=True, help="Output JSON path."),
    session_id: Optional[str] = typer.Option(None, help="Override the submission session id."),
) -> None:
    """Derive workstyle signals from assessment answers."""
    container = _container()
    try:
        submission = container.loader().load_submission(input)
    except RequestLoadError as exc:
        raise typer.BadParameter(str(exc), param_name="input") from exc
    if session_id:
        submission = submission.model_copy(update={"session_id": session_id})

    outcome = container.service().submit_assessment(submission)
    container.writer().write(output, outcome.to_payload(), command="analyze")
    typer.echo(f"Status {outcome.status}: {len(outcome.signals)} signals saved to {output}.")


@app.command("match-job")
def match_job(
    job: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Job context JSON."),
    output: Path = typer.Option(..., dir_okay=False, resolve_path=True, help="Output JSON path."),
    signals: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="Stored signals JSON of the viewer."),
    skills: Optional[str] = typer.Option(None, help="Comma-separated candidate skills."),
    depth: str = typer.Option("full", help="Insight depth: basic, summary or full."),
) -> None:
    """Explain why a job may suit the viewer."""
    _check_depth(depth, DEPTHS)
    container = _container()
    loader = container.loader()
    try:
        job_context = loader.load_model(job, JobContext)
        stored = loader.load_json(signals) if signals else None
    except RequestLoadError as exc:
        raise typer.BadParameter(str(exc)) from exc

    result = container.service().job_insights(
        stored,
        job_context,
        _split_skills(skills),
        depth=depth,  # type: ignore[arg-type]
    )
    container.writer().write(output, result.to_payload(), command="match-job")
    typer.echo(f"{len(result.insights)} insights saved to {output}.")


@app.command("match-candidate")
def match_candidate(
    job: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Job context JSON."),
    output: Path = typer.Option(..., dir_okay=False, resolve_path=True, help="Output JSON path."),
    signals: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="Stored signals JSON of the candidate."),
    skills: Optional[str] = typer.Option(None, help="Comma-separated candidate skills."),
    cover_message: bool = typer.Option(False, "--cover-message/--no-cover-message", help="Whether a cover message was supplied."),
    depth: str = typer.Option("full", help="Insight depth: basic, summary or full."),
) -> None:
    """Explain how a candidate may align with a job."""
    _check_depth(depth, DEPTHS)
    container = _container()
    loader = container.loader()
    try:
        job_context = loader.load_model(job, JobContext)
        stored = loader.load_json(signals) if signals else None
    except RequestLoadError as exc:
        raise typer.BadParameter(str(exc)) from exc

    result = container.service().candidate_insights(
        stored,
        job_context,
        candidate_skills=_split_skills(skills),
        has_cover_message=cover_message,
        depth=depth,  # type: ignore[arg-type]
    )
    container.writer().write(output, result.to_payload(), command="match-candidate")
    typer.echo(f"{len(result.insights)} insights saved to {output}.")


@app.command("team-fit")
def team_fit(
    job: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Job context JSON."),
    team: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Team member signals JSON array."),
    output: Path = typer.Option(..., dir_okay=False, resolve_path=True, help="Output JSON path."),
    signals: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="Stored signals JSON of the candidate."),
    depth: str = typer.Option("full", help="Insight depth: summary or full."),
) -> None:
    """Compare a candidate with the hiring team's anonymous composite."""
    _check_depth(depth, ("summary", "full"))
    container = _container()
    loader = container.loader()
    try:
        job_context = loader.load_model(job, JobContext)
        members = loader.load_team(team)
        stored = loader.load_json(signals) if signals else None
    except RequestLoadError as exc:
        raise typer.BadParameter(str(exc)) from exc

    result = container.service().team_fit_insights(
        stored,
        members,
        job_context,
        depth=depth,  # type: ignore[arg-type]
    )
    container.writer().write(output, result.to_payload(), command="team-fit")
    typer.echo(f"Team fit ({result.tier}): {len(result.insights)} insights saved to {output}.")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
