"""CLI de FitGen (Typer + Rich).

Por qué aquí:
- La CLI solo traduce opciones a requests del dominio, llama al orquestador y
  presenta el resultado; toda la lógica vive en `core`.
- La configuración se construye una vez por proceso y se pasa explícitamente.
"""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, TypeVar

import typer
from pydantic import BaseModel, ValidationError
from rich.console import Console

from adapters.json_exporter import export_plan_json, plan_to_dict
from cli.doctor import app as doctor_app
from cli.ui_components import print_banner, render_plan
from core.config import AppSettings
from core.domain.models import (
    DietRequest,
    GenerationPayload,
    RunningPlanRequest,
    WorkoutRequest,
    YogaPlanRequest,
)
from core.log_config import setup_logging
from core.services.generation_pipeline import GenerationOrchestrator, build_orchestrator

RequestT = TypeVar("RequestT", bound=BaseModel)

app = typer.Typer(
    no_args_is_help=True,
    help="Generate workouts, diet plans, yoga flows and running plans (AI with deterministic fallback).",
)
app.add_typer(doctor_app, name="doctor")

_console = Console()

_JSON_OPTION = typer.Option(False, "--json", help="Print the plan as JSON instead of tables.")
_OUTPUT_OPTION = typer.Option(None, "--output", "-o", help="Also save the plan as JSON to this path.")


@dataclass
class CliState:
    settings: AppSettings
    show_banner: bool = True

    def orchestrator(self) -> GenerationOrchestrator:
        return build_orchestrator(self.settings)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Do not print the banner."),
) -> None:
    settings = AppSettings()
    setup_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = CliState(settings=settings, show_banner=not no_banner)


def _build_request(model: type[RequestT], **fields: Any) -> RequestT:
    try:
        return model.model_validate(fields)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors(include_url=False)
        )
        raise typer.BadParameter(problems) from exc


def _deliver(state: CliState, plan: GenerationPayload, *, as_json: bool, output: Optional[Path]) -> None:
    saved: Path | None = None
    if output is not None:
        saved = export_plan_json(plan=plan, output_path=output)

    if as_json:
        typer.echo(json.dumps(plan_to_dict(plan), ensure_ascii=False, indent=2))
        return

    if state.show_banner:
        print_banner(_console)
    render_plan(_console, plan)
    if saved is not None:
        _console.print(f"[green]Saved plan to:[/green] {saved}")


@app.command()
def workout(
    ctx: typer.Context,
    muscle: str = typer.Option(..., "--muscle", "-m", help="Target muscle group (chest, back, legs, arms, full body)."),
    duration: int = typer.Option(..., "--duration", "-d", help="Workout duration in minutes."),
    level: str = typer.Option(..., "--level", "-l", help="Fitness level (beginner, intermediate, advanced)."),
    as_json: bool = _JSON_OPTION,
    output: Optional[Path] = _OUTPUT_OPTION,
) -> None:
    """Generate a workout routine."""

    state: CliState = ctx.obj
    request = _build_request(
        WorkoutRequest,
        targetMuscle=muscle,
        durationInMinutes=duration,
        fitnessLevel=level,
    )
    plan = asyncio.run(state.orchestrator().generate_workout(request))
    _deliver(state, plan, as_json=as_json, output=output)


@app.command()
def diet(
    ctx: typer.Context,
    preference: str = typer.Option(..., "--preference", "-p", help="Dietary preference (vegetarian, vegan, keto, ...)."),
    goal: str = typer.Option(..., "--goal", "-g", help="Fitness goal, e.g. 'weight loss'."),
    calories: int = typer.Option(..., "--calories", "-c", help="Daily calorie target."),
    allergies: str = typer.Option(..., "--allergies", "-a", help="Allergies ('none' if there are none)."),
    as_json: bool = _JSON_OPTION,
    output: Optional[Path] = _OUTPUT_OPTION,
) -> None:
    """Generate a one-day meal plan."""

    state: CliState = ctx.obj
    request = _build_request(
        DietRequest,
        dietaryPreference=preference,
        fitnessGoal=goal,
        dailyCalories=calories,
        allergies=allergies,
    )
    plan = asyncio.run(state.orchestrator().generate_diet(request))
    _deliver(state, plan, as_json=as_json, output=output)


@app.command()
def yoga(
    ctx: typer.Context,
    goal: str = typer.Option(..., "--goal", "-g", help="Session goal, e.g. 'stress relief'."),
    duration: int = typer.Option(..., "--duration", "-d", help="Session duration in minutes."),
    as_json: bool = _JSON_OPTION,
    output: Optional[Path] = _OUTPUT_OPTION,
) -> None:
    """Generate a yoga flow."""

    state: CliState = ctx.obj
    request = _build_request(YogaPlanRequest, goal=goal, durationInMinutes=duration)
    plan = asyncio.run(state.orchestrator().generate_yoga_plan(request))
    _deliver(state, plan, as_json=as_json, output=output)


@app.command()
def running(
    ctx: typer.Context,
    goal: str = typer.Option(..., "--goal", "-g", help="Running goal, e.g. 'Run a 5k'."),
    timeframe: str = typer.Option(..., "--timeframe", "-t", help="Timeframe, e.g. '8 weeks'."),
    level: str = typer.Option(..., "--level", "-l", help="Current fitness level."),
    as_json: bool = _JSON_OPTION,
    output: Optional[Path] = _OUTPUT_OPTION,
) -> None:
    """Generate a week-by-week running plan."""

    state: CliState = ctx.obj
    request = _build_request(
        RunningPlanRequest,
        goal=goal,
        timeframe=timeframe,
        fitnessLevel=level,
    )
    plan = asyncio.run(state.orchestrator().generate_running_plan(request))
    _deliver(state, plan, as_json=as_json, output=output)


def run() -> None:
    app()
