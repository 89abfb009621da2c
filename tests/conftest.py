"""Fixtures compartidos.

`src/` se añade al path vía `pythonpath` en pyproject.toml.
"""

from __future__ import annotations

import logging

import pytest

from core.config import AppSettings
from core.domain.models import DietRequest, RunningPlanRequest, WorkoutRequest, YogaPlanRequest
from core.errors import TransportFailure
from core.interfaces.generation import GeneratedText, GenerationResult, NoResult


class StubGenerationClient:
    """Cliente de generación que devuelve siempre el mismo resultado."""

    def __init__(self, result: GenerationResult) -> None:
        self.result = result
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> GenerationResult:
        self.prompts.append(prompt)
        return self.result

    @classmethod
    def returning_text(cls, text: str) -> "StubGenerationClient":
        return cls(GeneratedText(text=text))

    @classmethod
    def returning_nothing(cls) -> "StubGenerationClient":
        return cls(NoResult(TransportFailure("stubbed")))


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        _env_file=None,
        gemini_api_key="test-key",
        gemini_model="gemini-test",
    )


@pytest.fixture
def workout_request() -> WorkoutRequest:
    return WorkoutRequest(targetMuscle="chest", durationInMinutes=30, fitnessLevel="beginner")


@pytest.fixture
def diet_request() -> DietRequest:
    return DietRequest(
        dietaryPreference="vegan",
        fitnessGoal="weight loss",
        dailyCalories=1800,
        allergies="peanuts",
    )


@pytest.fixture
def yoga_request() -> YogaPlanRequest:
    return YogaPlanRequest(goal="Stress Relief", durationInMinutes=20)


@pytest.fixture
def running_request() -> RunningPlanRequest:
    return RunningPlanRequest(goal="Run a 5k", timeframe="8 weeks", fitnessLevel="beginner")
