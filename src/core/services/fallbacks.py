"""Contenido de respaldo determinista (sin IA remota).

Se usa cuando cualquier etapa del pipeline falla. Cada función es pura y
total: mismo request, mismo resultado, y nunca lanza. Los valores categóricos
desconocidos caen en el brazo por defecto de su enum (full body / balanced).
"""

from __future__ import annotations

import re

from core.domain.categories import DietaryPreference, FitnessLevel, MuscleGroup
from core.domain.models import (
    DietPlan,
    DietRequest,
    Exercise,
    Meal,
    RunningPlan,
    RunningPlanRequest,
    RunningSession,
    RunningWeek,
    WorkoutPlan,
    WorkoutRequest,
    YogaPlan,
    YogaPlanRequest,
    YogaPose,
)

DEFAULT_PLAN_WEEKS = 4
MAX_PLAN_WEEKS = 520
BASE_EASY_KM = 3
LONG_RUN_EXTRA_KM = 4

_INT_TOKEN_RE = re.compile(r"^[+-]?\d+$")

# (name, sets, reps, description)
_CHEST_BY_LEVEL: dict[FitnessLevel, tuple[tuple[str, str, str, str], ...]] = {
    FitnessLevel.BEGINNER: (
        ("Wall Push-ups", "3", "8-12", "Beginner-friendly chest exercise against wall"),
        ("Incline Push-ups", "3", "6-10", "Push-ups with hands elevated on bench"),
        ("Knee Push-ups", "3", "5-8", "Modified push-ups from knees"),
        ("Chest Squeeze", "3", "10-15", "Isometric chest contraction exercise"),
    ),
    FitnessLevel.INTERMEDIATE: (
        ("Standard Push-ups", "3", "10-15", "Classic bodyweight chest exercise"),
        ("Wide-Grip Push-ups", "3", "8-12", "Push-ups with wider hand placement"),
        ("Diamond Push-ups", "3", "6-10", "Push-ups with hands in diamond shape"),
        ("Decline Push-ups", "3", "8-12", "Push-ups with feet elevated"),
    ),
    FitnessLevel.ADVANCED: (
        ("One-Arm Push-ups", "3", "3-6", "Advanced single-arm push-up variation"),
        ("Archer Push-ups", "3", "5-8", "Single-sided push-up movement"),
        ("Explosive Push-ups", "4", "6-10", "Plyometric push-up with hand clap"),
        ("Hindu Push-ups", "3", "8-12", "Dynamic flowing push-up movement"),
    ),
}

# Grupos sin variante por nivel.
_EXERCISES_BY_MUSCLE: dict[MuscleGroup, tuple[tuple[str, str, str, str], ...]] = {
    MuscleGroup.BACK: (
        ("Superman", "3", "10-15", "Lying back extension exercise"),
        ("Reverse Fly", "3", "12-15", "Rear deltoid and upper back exercise"),
        ("Bird Dog", "3", "10 each side", "Core and back stability exercise"),
        ("Good Mornings", "3", "12-15", "Hip hinge movement for lower back"),
    ),
    MuscleGroup.LEGS: (
        ("Bodyweight Squats", "3", "12-20", "Basic lower body exercise"),
        ("Lunges", "3", "10 each leg", "Single-leg strength exercise"),
        ("Calf Raises", "3", "15-20", "Lower leg strengthening exercise"),
        ("Wall Sit", "3", "30-60 sec", "Isometric quad strengthening"),
    ),
    MuscleGroup.ARMS: (
        ("Tricep Dips", "3", "8-12", "Bodyweight tricep exercise"),
        ("Pike Push-ups", "3", "6-10", "Shoulder and tricep focused exercise"),
        ("Arm Circles", "3", "15 each direction", "Shoulder mobility and strength"),
        ("Plank to Push-up", "3", "8-12", "Dynamic arm and core exercise"),
    ),
    MuscleGroup.FULL_BODY: (
        ("Burpees", "3", "8-12", "Full body high-intensity exercise"),
        ("Mountain Climbers", "3", "20-30", "Dynamic full body cardio exercise"),
        ("Jumping Jacks", "3", "15-25", "Full body cardiovascular exercise"),
        ("Plank", "3", "30-60 sec", "Core stability exercise"),
    ),
}

# (name, ingredients, calories, description)
_MEALS_BY_PREFERENCE: dict[DietaryPreference, tuple[tuple[str, str, int, str], ...]] = {
    DietaryPreference.VEGETARIAN: (
        ("Veggie Protein Bowl", "Quinoa, black beans, avocado, spinach", 400, "High-protein vegetarian breakfast"),
        ("Lentil Salad", "Green lentils, cucumber, tomato, feta", 350, "Protein-rich lunch option"),
        ("Stuffed Bell Peppers", "Peppers, rice, cheese, herbs", 450, "Nutritious vegetarian dinner"),
        ("Greek Yogurt with Nuts", "Greek yogurt, almonds, berries", 200, "Protein-packed snack"),
    ),
    DietaryPreference.VEGAN: (
        ("Chia Seed Pudding", "Chia seeds, almond milk, banana", 350, "Plant-based protein breakfast"),
        ("Buddha Bowl", "Tofu, quinoa, kale, tahini dressing", 450, "Complete vegan lunch"),
        ("Lentil Curry", "Red lentils, coconut milk, vegetables", 400, "Hearty vegan dinner"),
        ("Hummus with Veggies", "Hummus, carrots, bell peppers", 180, "Plant-based snack"),
    ),
    DietaryPreference.KETO: (
        ("Avocado Eggs", "Eggs, avocado, bacon, cheese", 450, "High-fat keto breakfast"),
        ("Keto Caesar Salad", "Romaine, chicken, parmesan, keto dressing", 400, "Low-carb lunch"),
        ("Salmon with Asparagus", "Salmon, asparagus, butter sauce", 500, "Keto-friendly dinner"),
        ("Keto Fat Bombs", "Coconut oil, nuts, cocoa", 200, "High-fat keto snack"),
    ),
    DietaryPreference.BALANCED: (
        ("Balanced Breakfast", "Oatmeal, berries, protein powder, nuts", 350, "Well-rounded morning meal"),
        ("Chicken Quinoa Bowl", "Grilled chicken, quinoa, mixed vegetables", 450, "Balanced lunch option"),
        ("Lean Protein Dinner", "Fish, sweet potato, broccoli", 500, "Balanced evening meal"),
        ("Mixed Nuts", "Almonds, walnuts, dried fruit", 200, "Healthy balanced snack"),
    ),
}

# (name, hold, description)
_YOGA_SEQUENCE: tuple[tuple[str, str, str], ...] = (
    ("Centering Breath", "60 sec", "Seated or standing, deepen breathing to settle"),
    ("Cat-Cow", "6 breaths", "Alternate spinal flexion/extension with inhales and exhales"),
    ("Downward Dog", "60 sec", "Press through palms, lengthen spine, soften knees"),
    ("Low Lunge", "45 sec each", "Front knee over ankle, hips square, steady breath"),
    ("Warrior II", "45 sec each", "Front knee bent, arms extended, gaze over front hand"),
    ("Triangle", "45 sec each", "Straighten front leg, hinge at hip, lengthen both sides"),
    ("Seated Forward Fold", "60 sec", "Lengthen spine on inhale, fold gently on exhale"),
    ("Supine Twist", "45 sec each", "Arms wide, shoulders grounded, gentle spinal rotation"),
    ("Savasana", "2 min", "Relax fully, natural breath, release tension"),
)


def fallback_workout(request: WorkoutRequest) -> WorkoutPlan:
    muscle = MuscleGroup.parse(request.target_muscle)
    if muscle is MuscleGroup.CHEST:
        rows = _CHEST_BY_LEVEL[FitnessLevel.parse(request.fitness_level)]
    else:
        rows = _EXERCISES_BY_MUSCLE[muscle]
    return WorkoutPlan(
        exercises=[
            Exercise(name=name, sets=sets, reps=reps, description=description)
            for name, sets, reps, description in rows
        ]
    )


def fallback_diet(request: DietRequest) -> DietPlan:
    rows = _MEALS_BY_PREFERENCE[DietaryPreference.parse(request.dietary_preference)]
    return DietPlan(
        meals=[
            Meal(name=name, ingredients=ingredients, calories=calories, description=description)
            for name, ingredients, calories, description in rows
        ]
    )


def fallback_yoga(request: YogaPlanRequest) -> YogaPlan:
    """Secuencia fija de 9 posturas; el objetivo y la duración no la alteran."""

    return YogaPlan(
        poses=[YogaPose(name=name, hold=hold, description=description) for name, hold, description in _YOGA_SEQUENCE]
    )


def parse_timeframe_weeks(timeframe: str | None, default: int = DEFAULT_PLAN_WEEKS) -> int:
    """Extrae el entero inicial de un plazo libre ('8 weeks' -> 8).

    Solo cuenta el primer token separado por espacios; si no es un entero o
    queda fuera de 1..MAX_PLAN_WEEKS, devuelve `default`.
    """

    tokens = (timeframe or "").split()
    if not tokens or not _INT_TOKEN_RE.match(tokens[0]):
        return default
    weeks = int(tokens[0])
    return weeks if 0 < weeks <= MAX_PLAN_WEEKS else default


def _running_week(week_number: int) -> RunningWeek:
    easy = BASE_EASY_KM + (week_number - 1)
    long_run = easy + LONG_RUN_EXTRA_KM
    return RunningWeek(
        week_number=week_number,
        sessions=[
            RunningSession(day="Mon", type="Rest", distance="-", notes="Recovery / mobility"),
            RunningSession(day="Tue", type="Easy Run", distance=f"{easy} km", notes="Comfortable pace"),
            RunningSession(day="Wed", type="Intervals", distance=f"{easy - 1} km", notes="Short repeats / speed focus"),
            RunningSession(day="Thu", type="Easy Run", distance=f"{easy} km", notes="Steady aerobic"),
            RunningSession(day="Fri", type="Rest", distance="-", notes="Sleep & nutrition focus"),
            RunningSession(day="Sat", type="Tempo", distance=f"{easy + 1} km", notes="Sustained comfortably hard"),
            RunningSession(day="Sun", type="Long Run", distance=f"{long_run} km", notes="Endurance building"),
        ],
    )


def fallback_running_plan(request: RunningPlanRequest) -> RunningPlan:
    """Progresión lineal: +1 km por semana en las sesiones fáciles, sin taper ni tope."""

    weeks = parse_timeframe_weeks(request.timeframe)
    return RunningPlan(weeks=[_running_week(week) for week in range(1, weeks + 1)])
