"""Plantillas de prompt por dominio.

Funciones puras: mismo request, mismo prompt. Cada plantilla fija el rol,
incrusta los campos del request tal cual, muestra la forma exacta del JSON
esperado y prohíbe markdown/comentarios fuera del JSON.
"""

from __future__ import annotations

from core.domain.models import (
    DietRequest,
    RunningPlanRequest,
    WorkoutRequest,
    YogaPlanRequest,
)

_JSON_ONLY = "Respond ONLY with valid JSON (no markdown, no code fences, no commentary)."


def build_workout_prompt(request: WorkoutRequest) -> str:
    return (
        "You are an expert fitness trainer. "
        f"Create a personalized {request.duration_minutes}-minute workout routine targeting "
        f"{request.target_muscle} muscles for someone at {request.fitness_level} fitness level.\n"
        f"{_JSON_ONLY} Use this exact format:\n"
        '{"exercises":[{"name":"...","sets":"3","reps":"10-12","description":"..."}]}\n'
        "4-6 exercises. Progressive, safe, concise descriptions. No extra keys."
    )


def build_diet_prompt(request: DietRequest) -> str:
    return (
        "You are a professional nutritionist. Build a one-day meal plan.\n"
        f"Preference: {request.dietary_preference}\n"
        f"Goal: {request.fitness_goal}\n"
        f"Calories: {request.daily_calories}\n"
        f"Allergies: {request.allergies}\n"
        f"{_JSON_ONLY} Use this exact format:\n"
        '{"meals":[{"name":"...","ingredients":"...","calories":450,"description":"..."}]}\n'
        "Include breakfast, lunch, dinner and 1-2 snacks. "
        f"Calories are integers and must sum close to {request.daily_calories}. "
        "Never use ingredients listed under allergies. No extra keys."
    )


def build_yoga_prompt(request: YogaPlanRequest) -> str:
    return (
        "You are a certified yoga instructor. "
        f"Create a {request.duration_minutes}-minute yoga flow focused on the goal: {request.goal}.\n"
        "Provide 6-10 sequential poses with mindful transitions. Keep pose names standard.\n"
        f"{_JSON_ONLY} Use this exact format:\n"
        '{"poses":[{"name":"Mountain Pose","hold":"60 sec","description":"Brief clear guidance"}]}\n'
        "Each pose requires: name, hold (seconds or breaths), description "
        "(succinct alignment & breathing cues). No extra keys."
    )


def build_running_plan_prompt(request: RunningPlanRequest) -> str:
    return (
        "You are an experienced running coach. "
        f"Create a structured week-by-week running plan to achieve the goal: {request.goal} "
        f"within {request.timeframe}.\n"
        f"Athlete level: {request.fitness_level}.\n"
        "Include variety: easy runs, long runs, interval/tempo work, recovery, and rest days.\n"
        f"{_JSON_ONLY} Use this exact format:\n"
        '{"weeks":[{"weekNumber":1,"sessions":[{"day":"Mon","type":"Easy Run",'
        '"distance":"3 km","notes":"Conversational pace"}]}]}\n'
        "weekNumber is an integer starting at 1. Distance units concise (km). "
        "5-7 sessions per week, include at least one rest day. No extra keys."
    )
