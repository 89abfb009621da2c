"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Cada dominio tiene su tabla; `render_plan` elige la adecuada.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import (
    DietPlan,
    GenerationPayload,
    RunningPlan,
    RunningWeek,
    WorkoutPlan,
    YogaPlan,
)


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Se puede desactivar (`--no-banner`) en modos no interactivos.
    """

    title = Text("FitGen", style="bold cyan")
    subtitle = Text("Workouts • Diet • Yoga • Running plans", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_workout_table(plan: WorkoutPlan) -> Table:
    table = Table(title="Workout")
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("Exercise", style="cyan", no_wrap=True)
    table.add_column("Sets", style="white")
    table.add_column("Reps", style="white")
    table.add_column("Description", style="dim")
    for index, exercise in enumerate(plan.exercises, start=1):
        table.add_row(str(index), exercise.name, exercise.sets, exercise.reps, exercise.description)
    return table


def build_diet_table(plan: DietPlan) -> Table:
    table = Table(title="Diet plan", show_footer=True)
    table.add_column("Meal", style="cyan", no_wrap=True, footer="Total")
    table.add_column("Ingredients", style="white")
    table.add_column(
        "kcal",
        style="green",
        justify="right",
        footer=str(sum(meal.calories for meal in plan.meals)),
    )
    table.add_column("Description", style="dim")
    for meal in plan.meals:
        table.add_row(meal.name, meal.ingredients, str(meal.calories), meal.description)
    return table


def build_yoga_table(plan: YogaPlan) -> Table:
    table = Table(title="Yoga flow")
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("Pose", style="cyan", no_wrap=True)
    table.add_column("Hold", style="white")
    table.add_column("Cues", style="dim")
    for index, pose in enumerate(plan.poses, start=1):
        table.add_row(str(index), pose.name, pose.hold, pose.description)
    return table


def build_running_week_table(week: RunningWeek) -> Table:
    table = Table(title=f"Week {week.week_number}")
    table.add_column("Day", style="cyan", no_wrap=True)
    table.add_column("Session", style="white")
    table.add_column("Distance", style="green", justify="right")
    table.add_column("Notes", style="dim")
    for session in week.sessions:
        table.add_row(session.day, session.type, session.distance, session.notes)
    return table


def render_plan(console: Console, plan: GenerationPayload) -> None:
    if isinstance(plan, WorkoutPlan):
        console.print(build_workout_table(plan))
    elif isinstance(plan, DietPlan):
        console.print(build_diet_table(plan))
    elif isinstance(plan, YogaPlan):
        console.print(build_yoga_table(plan))
    elif isinstance(plan, RunningPlan):
        for week in plan.weeks:
            console.print(build_running_week_table(week))
    else:
        raise TypeError(f"unsupported plan type: {type(plan).__name__}")
