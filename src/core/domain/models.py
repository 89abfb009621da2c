"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- El mismo modelo valida la petición del usuario, el JSON devuelto por la IA y
  el contenido determinista del fallback.

Nota:
- Atributos en snake_case; en JSON se usan los nombres camelCase del contrato
  (`targetMuscle`, `weekNumber`, ...). Se aceptan ambos al validar.
"""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class _RequestModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class _PayloadModel(BaseModel):
    # Campos de texto libre: si la IA manda `"sets": 3` lo aceptamos como "3".
    model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)


# --------------------------------------------------------------------------- requests


class WorkoutRequest(_RequestModel):
    """Petición de rutina de entrenamiento."""

    target_muscle: str = Field(
        ...,
        alias="targetMuscle",
        min_length=1,
        max_length=64,
        description="Grupo muscular objetivo (p.ej. 'chest', 'legs', 'full body').",
    )
    duration_minutes: int = Field(
        ...,
        alias="durationInMinutes",
        gt=0,
        le=600,
        description="Duración de la sesión en minutos.",
    )
    fitness_level: str = Field(
        ...,
        alias="fitnessLevel",
        min_length=1,
        max_length=64,
        description="Nivel del usuario (beginner, intermediate, advanced).",
    )


class DietRequest(_RequestModel):
    """Petición de plan de comidas de un día."""

    dietary_preference: str = Field(
        ...,
        alias="dietaryPreference",
        min_length=1,
        max_length=64,
        description="Preferencia alimentaria (vegetarian, vegan, keto, ...).",
    )
    fitness_goal: str = Field(
        ...,
        alias="fitnessGoal",
        min_length=1,
        max_length=256,
        description="Objetivo (p.ej. 'weight loss', 'muscle gain').",
    )
    daily_calories: int = Field(
        ...,
        alias="dailyCalories",
        gt=0,
        le=20_000,
        description="Calorías objetivo del día.",
    )
    allergies: str = Field(
        ...,
        max_length=512,
        description="Alergias en texto libre ('none' si no hay).",
    )


class YogaPlanRequest(_RequestModel):
    """Petición de secuencia de yoga."""

    goal: str = Field(
        ...,
        min_length=1,
        max_length=256,
        description="Objetivo principal de la sesión (p.ej. 'Stress Relief').",
    )
    duration_minutes: int = Field(
        ...,
        alias="durationInMinutes",
        gt=0,
        le=600,
        description="Duración de la sesión en minutos.",
    )


class RunningPlanRequest(_RequestModel):
    """Petición de plan de carrera semana a semana."""

    goal: str = Field(
        ...,
        min_length=1,
        max_length=256,
        description="Objetivo (p.ej. 'Run a 5k').",
    )
    timeframe: str = Field(
        ...,
        min_length=1,
        max_length=128,
        description="Plazo legible (p.ej. '8 weeks').",
    )
    fitness_level: str = Field(
        ...,
        alias="fitnessLevel",
        min_length=1,
        max_length=64,
        description="Nivel actual del corredor.",
    )


# --------------------------------------------------------------------------- payloads


class Exercise(_PayloadModel):
    name: str
    sets: str = Field(..., description="Series en texto libre ('3').")
    reps: str = Field(..., description="Repeticiones en texto libre ('10-12', '30-60 sec').")
    description: str


class WorkoutPlan(_PayloadModel):
    """Rutina generada: lista ordenada de ejercicios."""

    exercises: list[Exercise] = Field(..., min_length=1)


class Meal(_PayloadModel):
    name: str
    ingredients: str
    calories: int
    description: str


class DietPlan(_PayloadModel):
    """Plan de comidas generado: lista ordenada de comidas."""

    meals: list[Meal] = Field(..., min_length=1)


class YogaPose(_PayloadModel):
    name: str
    hold: str = Field(..., description="Duración ('60 sec', '6 breaths').")
    description: str


class YogaPlan(_PayloadModel):
    poses: list[YogaPose] = Field(..., min_length=1)


class RunningSession(_PayloadModel):
    day: str
    type: str
    distance: str = Field(..., description="Distancia legible ('5 km', '-' en descanso).")
    notes: str


class RunningWeek(_PayloadModel):
    week_number: int = Field(..., alias="weekNumber")
    sessions: list[RunningSession]


class RunningPlan(_PayloadModel):
    """Plan de carrera: semanas ordenadas, cada una con sus sesiones."""

    weeks: list[RunningWeek] = Field(..., min_length=1)


GenerationPayload = Union[WorkoutPlan, DietPlan, YogaPlan, RunningPlan]
