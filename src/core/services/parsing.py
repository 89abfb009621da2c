"""Deserialización del JSON extraído hacia el modelo del dominio."""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ValidationError

from core.domain.models import DietPlan, RunningPlan, WorkoutPlan, YogaPlan
from core.errors import ParseError

PayloadT = TypeVar("PayloadT", bound=BaseModel)


def parse_payload(json_text: str, model: type[PayloadT]) -> PayloadT:
    """Valida `json_text` contra `model`.

    Sintaxis JSON inválida, campos requeridos ausentes o tipos incorrectos
    terminan todos en `ParseError`.
    """

    try:
        return model.model_validate_json(json_text)
    except ValidationError as exc:
        errors = exc.errors(include_url=False)
        first = errors[0] if errors else {}
        location = ".".join(str(part) for part in first.get("loc", ())) or "<root>"
        raise ParseError(
            f"{model.__name__}: {exc.error_count()} error(s), first at {location}: {first.get('msg', exc)}"
        ) from exc


def parse_workout_plan(json_text: str) -> WorkoutPlan:
    return parse_payload(json_text, WorkoutPlan)


def parse_diet_plan(json_text: str) -> DietPlan:
    return parse_payload(json_text, DietPlan)


def parse_yoga_plan(json_text: str) -> YogaPlan:
    return parse_payload(json_text, YogaPlan)


def parse_running_plan(json_text: str) -> RunningPlan:
    return parse_payload(json_text, RunningPlan)
