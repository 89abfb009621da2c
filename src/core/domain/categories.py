"""Categorical values used to pick deterministic fallback content.

Requests carry free text (whatever the caller typed). These enumerations
close that text into a fixed set of options, each with an explicit default
arm, so the fallback generators can branch exhaustively instead of relying
on string comparisons scattered across the code.
"""

from __future__ import annotations

from enum import Enum


def _normalize(value: str | None) -> str:
    return " ".join((value or "").strip().lower().replace("_", " ").replace("-", " ").split())


class Domain(str, Enum):
    """Content domains served by the generation pipeline."""

    WORKOUT = "workout"
    DIET = "diet"
    YOGA = "yoga"
    RUNNING_PLAN = "running_plan"

    def label(self) -> str:
        """Human readable label for prompts and logging."""

        return self.value.replace("_", " ")


class MuscleGroup(str, Enum):
    CHEST = "chest"
    BACK = "back"
    LEGS = "legs"
    ARMS = "arms"
    FULL_BODY = "full body"

    @classmethod
    def default(cls) -> "MuscleGroup":
        return cls.FULL_BODY

    @classmethod
    def parse(cls, value: str | None) -> "MuscleGroup":
        """Case-insensitive lookup; anything unrecognized maps to full body."""

        text = _normalize(value)
        for member in cls:
            if member.value == text:
                return member
        return cls.default()


class FitnessLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    @classmethod
    def default(cls) -> "FitnessLevel":
        return cls.ADVANCED

    @classmethod
    def parse(cls, value: str | None) -> "FitnessLevel":
        """Case-insensitive lookup; anything that is neither beginner nor
        intermediate is treated as advanced."""

        text = _normalize(value)
        for member in cls:
            if member.value == text:
                return member
        return cls.default()


class DietaryPreference(str, Enum):
    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    KETO = "keto"
    BALANCED = "balanced"

    @classmethod
    def default(cls) -> "DietaryPreference":
        return cls.BALANCED

    @classmethod
    def parse(cls, value: str | None) -> "DietaryPreference":
        text = _normalize(value)
        for member in cls:
            if member.value == text:
                return member
        return cls.default()
