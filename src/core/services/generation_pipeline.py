"""Content generation orchestration.

Each domain operation runs the same chain: build the prompt, ask the
generation client, extract the JSON object, parse it into the domain model.
Any failure along the chain short-circuits to the deterministic fallback, so
callers always get a valid payload and never an exception. Whether the
payload came from the provider or from the fallback is visible only in logs
(and in `GenerationOutcome` for code that asks for it).

The orchestrator holds no mutable state: one instance can serve any number
of concurrent calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, TypeVar

from adapters.gemini_client import GeminiClient
from core.config import AppSettings
from core.domain.categories import Domain
from core.domain.models import (
    DietPlan,
    DietRequest,
    RunningPlan,
    RunningPlanRequest,
    WorkoutPlan,
    WorkoutRequest,
    YogaPlan,
    YogaPlanRequest,
)
from core.errors import ExtractionError, ParseError
from core.interfaces.generation import GenerationClient, NoResult
from core.services import fallbacks, parsing, prompts
from core.services.json_extraction import extract_json_object

logger = logging.getLogger(__name__)

RequestT = TypeVar("RequestT")
PayloadT = TypeVar("PayloadT")


class GenerationState(str, Enum):
    """Terminal states of one orchestration call."""

    SUCCEEDED = "succeeded"
    FALLEN_BACK = "fallen_back"


@dataclass(frozen=True)
class DomainRoute(Generic[RequestT, PayloadT]):
    """Per-domain wiring of prompt, parser and fallback."""

    domain: Domain
    build_prompt: Callable[[RequestT], str]
    parse: Callable[[str], PayloadT]
    fallback: Callable[[RequestT], PayloadT]
    items: Callable[[PayloadT], list]


@dataclass(frozen=True)
class GenerationOutcome(Generic[PayloadT]):
    """Result of one orchestration call."""

    payload: PayloadT
    state: GenerationState
    reason: str | None = None

    @property
    def used_fallback(self) -> bool:
        return self.state is GenerationState.FALLEN_BACK


WORKOUT_ROUTE: DomainRoute[WorkoutRequest, WorkoutPlan] = DomainRoute(
    domain=Domain.WORKOUT,
    build_prompt=prompts.build_workout_prompt,
    parse=parsing.parse_workout_plan,
    fallback=fallbacks.fallback_workout,
    items=lambda plan: plan.exercises,
)
DIET_ROUTE: DomainRoute[DietRequest, DietPlan] = DomainRoute(
    domain=Domain.DIET,
    build_prompt=prompts.build_diet_prompt,
    parse=parsing.parse_diet_plan,
    fallback=fallbacks.fallback_diet,
    items=lambda plan: plan.meals,
)
YOGA_ROUTE: DomainRoute[YogaPlanRequest, YogaPlan] = DomainRoute(
    domain=Domain.YOGA,
    build_prompt=prompts.build_yoga_prompt,
    parse=parsing.parse_yoga_plan,
    fallback=fallbacks.fallback_yoga,
    items=lambda plan: plan.poses,
)
RUNNING_PLAN_ROUTE: DomainRoute[RunningPlanRequest, RunningPlan] = DomainRoute(
    domain=Domain.RUNNING_PLAN,
    build_prompt=prompts.build_running_plan_prompt,
    parse=parsing.parse_running_plan,
    fallback=fallbacks.fallback_running_plan,
    items=lambda plan: plan.weeks,
)


class GenerationOrchestrator:
    """Sequences prompt -> client -> extraction -> parsing, with fallback."""

    def __init__(self, client: GenerationClient) -> None:
        self._client = client

    async def generate_workout(self, request: WorkoutRequest) -> WorkoutPlan:
        logger.info(
            "Generating workout: target_muscle=%s duration=%s fitness_level=%s",
            request.target_muscle,
            request.duration_minutes,
            request.fitness_level,
        )
        return (await self.run(WORKOUT_ROUTE, request)).payload

    async def generate_diet(self, request: DietRequest) -> DietPlan:
        logger.info(
            "Generating diet: preference=%s goal=%s calories=%s allergies=%s",
            request.dietary_preference,
            request.fitness_goal,
            request.daily_calories,
            request.allergies,
        )
        return (await self.run(DIET_ROUTE, request)).payload

    async def generate_yoga_plan(self, request: YogaPlanRequest) -> YogaPlan:
        logger.info("Generating yoga plan: goal=%s duration=%s", request.goal, request.duration_minutes)
        return (await self.run(YOGA_ROUTE, request)).payload

    async def generate_running_plan(self, request: RunningPlanRequest) -> RunningPlan:
        logger.info(
            "Generating running plan: goal=%s timeframe=%s fitness_level=%s",
            request.goal,
            request.timeframe,
            request.fitness_level,
        )
        return (await self.run(RUNNING_PLAN_ROUTE, request)).payload

    async def run(self, route: DomainRoute[RequestT, PayloadT], request: RequestT) -> GenerationOutcome[PayloadT]:
        domain = route.domain.label()
        prompt = route.build_prompt(request)
        logger.debug("%s prompt: %s", domain, prompt)

        try:
            result = await self._client.generate(prompt)
        except Exception as exc:
            logger.exception("Generation client raised for %s", domain)
            result = NoResult(exc)
        if isinstance(result, NoResult):
            logger.error("Generation client returned no result for %s: %s", domain, result.reason)
            return self._fall_back(route, request, reason=f"client:{type(result.error).__name__}")

        logger.debug("Raw %s response: %s", domain, result.text)
        try:
            payload = route.parse(extract_json_object(result.text))
        except (ExtractionError, ParseError) as exc:
            logger.warning("Failed to use generated %s JSON: %s: %s", domain, type(exc).__name__, exc)
            return self._fall_back(route, request, reason=f"{type(exc).__name__}: {exc}")

        logger.info("Generated %s (%d items) via provider", domain, len(route.items(payload)))
        return GenerationOutcome(payload=payload, state=GenerationState.SUCCEEDED)

    @staticmethod
    def _fall_back(
        route: DomainRoute[RequestT, PayloadT], request: RequestT, *, reason: str
    ) -> GenerationOutcome[PayloadT]:
        logger.warning("Falling back to deterministic %s content (%s)", route.domain.label(), reason)
        return GenerationOutcome(
            payload=route.fallback(request),
            state=GenerationState.FALLEN_BACK,
            reason=reason,
        )


def build_orchestrator(settings: AppSettings | None = None) -> GenerationOrchestrator:
    """Wire the orchestrator to the Gemini client configured by `settings`."""

    return GenerationOrchestrator(GeminiClient(settings or AppSettings()))
