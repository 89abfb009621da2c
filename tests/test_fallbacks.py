import pytest

from core.domain.models import DietRequest, RunningPlanRequest, WorkoutRequest, YogaPlanRequest
from core.services.fallbacks import (
    DEFAULT_PLAN_WEEKS,
    fallback_diet,
    fallback_running_plan,
    fallback_workout,
    fallback_yoga,
    parse_timeframe_weeks,
)


def _workout(muscle: str, level: str = "beginner") -> WorkoutRequest:
    return WorkoutRequest(targetMuscle=muscle, durationInMinutes=30, fitnessLevel=level)


def _diet(preference: str) -> DietRequest:
    return DietRequest(dietaryPreference=preference, fitnessGoal="maintain", dailyCalories=2000, allergies="none")


def _names(items) -> list[str]:
    return [item.name for item in items]


def test_beginner_chest_workout(workout_request):
    plan = fallback_workout(workout_request)

    assert _names(plan.exercises) == ["Wall Push-ups", "Incline Push-ups", "Knee Push-ups", "Chest Squeeze"]
    assert plan.exercises[0].sets == "3"
    assert plan.exercises[0].reps == "8-12"


@pytest.mark.parametrize(
    ("level", "first", "last"),
    [
        ("intermediate", "Standard Push-ups", "Decline Push-ups"),
        ("advanced", "One-Arm Push-ups", "Hindu Push-ups"),
        ("Intermediate", "Standard Push-ups", "Decline Push-ups"),
        ("elite", "One-Arm Push-ups", "Hindu Push-ups"),
    ],
)
def test_chest_workout_varies_by_level(level, first, last):
    exercises = fallback_workout(_workout("chest", level)).exercises

    assert len(exercises) == 4
    assert exercises[0].name == first
    assert exercises[-1].name == last


def test_advanced_chest_explosive_push_ups_use_four_sets():
    exercises = fallback_workout(_workout("chest", "advanced")).exercises

    assert exercises[2].name == "Explosive Push-ups"
    assert exercises[2].sets == "4"


@pytest.mark.parametrize(
    ("muscle", "expected_first"),
    [
        ("back", "Superman"),
        ("LEGS", "Bodyweight Squats"),
        ("Arms", "Tricep Dips"),
        ("full body", "Burpees"),
        ("shoulders", "Burpees"),
    ],
)
def test_workout_branches_on_muscle(muscle, expected_first):
    exercises = fallback_workout(_workout(muscle)).exercises

    assert len(exercises) == 4
    assert exercises[0].name == expected_first


def test_non_chest_workouts_ignore_level():
    assert fallback_workout(_workout("legs", "beginner")) == fallback_workout(_workout("legs", "advanced"))


@pytest.mark.parametrize(
    ("preference", "expected"),
    [
        ("vegetarian", ["Veggie Protein Bowl", "Lentil Salad", "Stuffed Bell Peppers", "Greek Yogurt with Nuts"]),
        ("Vegan", ["Chia Seed Pudding", "Buddha Bowl", "Lentil Curry", "Hummus with Veggies"]),
        ("KETO", ["Avocado Eggs", "Keto Caesar Salad", "Salmon with Asparagus", "Keto Fat Bombs"]),
        ("paleo", ["Balanced Breakfast", "Chicken Quinoa Bowl", "Lean Protein Dinner", "Mixed Nuts"]),
    ],
)
def test_diet_branches_on_preference(preference, expected):
    assert _names(fallback_diet(_diet(preference)).meals) == expected


def test_vegan_calories_are_integers():
    assert [meal.calories for meal in fallback_diet(_diet("vegan")).meals] == [350, 450, 400, 180]


def test_yoga_sequence_is_fixed(yoga_request):
    poses = fallback_yoga(yoga_request).poses

    assert len(poses) == 9
    assert poses[0].name == "Centering Breath"
    assert poses[-1].name == "Savasana"
    assert fallback_yoga(YogaPlanRequest(goal="flexibility", durationInMinutes=60)) == fallback_yoga(yoga_request)


@pytest.mark.parametrize(
    ("timeframe", "weeks"),
    [
        ("8 weeks", 8),
        ("12", 12),
        ("  6 weeks  ", 6),
        ("+3 weeks", 3),
        ("eight weeks", 4),
        ("8weeks", 4),
        ("0 weeks", 4),
        ("-2 weeks", 4),
        ("520 weeks", 520),
        ("521 weeks", 4),
        ("3000000000 weeks", 4),
        ("", 4),
        (None, 4),
    ],
)
def test_parse_timeframe_weeks(timeframe, weeks):
    assert parse_timeframe_weeks(timeframe) == weeks


def test_running_plan_with_huge_timeframe_uses_default_weeks():
    request = RunningPlanRequest(goal="Run a marathon", timeframe="3000000000 weeks", fitnessLevel="beginner")

    assert len(fallback_running_plan(request).weeks) == DEFAULT_PLAN_WEEKS


def test_running_plan_progression(running_request):
    plan = fallback_running_plan(running_request)

    assert [week.week_number for week in plan.weeks] == list(range(1, 9))
    week3 = {session.day: session for session in plan.weeks[2].sessions}
    assert week3["Tue"].type == "Easy Run"
    assert week3["Tue"].distance == "5 km"
    assert week3["Wed"].distance == "4 km"
    assert week3["Sat"].distance == "6 km"
    assert week3["Sun"].type == "Long Run"
    assert week3["Sun"].distance == "9 km"
    assert week3["Mon"].distance == "-"


def test_running_week_layout():
    week1 = fallback_running_plan(
        RunningPlanRequest(goal="10k", timeframe="soon", fitnessLevel="beginner")
    ).weeks[0]

    assert [(s.day, s.type) for s in week1.sessions] == [
        ("Mon", "Rest"),
        ("Tue", "Easy Run"),
        ("Wed", "Intervals"),
        ("Thu", "Easy Run"),
        ("Fri", "Rest"),
        ("Sat", "Tempo"),
        ("Sun", "Long Run"),
    ]
    assert week1.sessions[2].distance == "2 km"
    assert week1.sessions[6].distance == "7 km"


def test_unparsable_timeframe_defaults_to_four_weeks():
    plan = fallback_running_plan(RunningPlanRequest(goal="10k", timeframe="a few months", fitnessLevel="x"))

    assert len(plan.weeks) == 4


def test_fallbacks_are_pure_and_return_fresh_objects(workout_request, diet_request, running_request):
    first = fallback_workout(workout_request)
    second = fallback_workout(workout_request)
    assert first == second
    assert first is not second
    assert first.exercises is not second.exercises

    assert fallback_diet(diet_request) == fallback_diet(diet_request)
    assert fallback_running_plan(running_request) == fallback_running_plan(running_request)
