"""Prompt builders for plan generation."""

from levelup_ai.domain.diet import GenerateDietRequest
from levelup_ai.domain.workout import GenerateWorkoutRequest


def build_diet_prompt(request: GenerateDietRequest) -> str:
    """Describe a diet request as an instruction for the model."""
    lines = [
        "Create a one-day diet plan as JSON.",
        f"Goal: {request.goal}.",
        f"Daily calorie target: {request.calories} kcal.",
    ]
    if request.meals_per_day:
        lines.append(f"Meals per day: {request.meals_per_day}.")
    if request.target_protein:
        lines.append(f"Daily protein target: {request.target_protein} g.")
    if request.restrictions:
        lines.append(f"Dietary restrictions: {', '.join(request.restrictions)}.")
    if request.preferred_foods:
        lines.append(f"Preferred foods: {', '.join(request.preferred_foods)}.")
    if request.avoid_foods:
        lines.append(f"Never include: {', '.join(request.avoid_foods)}.")
    if request.preferences:
        lines.append(f"Additional preferences: {request.preferences}")
    lines.append(
        "For every meal list its items with a portion quantity, calories and "
        "protein/carbs/fat grams, the meal calorie total and meal macros "
        "(protein, carbs, fat, fiber) as whole numbers."
    )
    return "\n".join(lines)


def build_workout_prompt(request: GenerateWorkoutRequest) -> str:
    """Describe a workout request as an instruction for the model."""
    lines = [
        "Create a workout plan as JSON.",
        f"Goal: {request.goal}.",
        f"Difficulty: {request.difficulty.value}.",
        f"Training days per week: {request.days_per_week}.",
        f"Session length: {request.duration} minutes.",
    ]
    if request.equipment:
        lines.append(f"Available equipment: {', '.join(request.equipment)}.")
    if request.target_muscles:
        lines.append(f"Focus muscles: {', '.join(request.target_muscles)}.")
    if request.preferences:
        lines.append(f"Additional preferences: {request.preferences}")
    lines.append(
        "For every exercise give sets, a reps range, rest in seconds, "
        "target muscles and short coaching notes."
    )
    return "\n".join(lines)
