"""Merge regeneration modifications with a stored plan."""

from typing import TypeVar

from levelup_ai.domain.diet import DietModifications, DietPlan, GenerateDietRequest
from levelup_ai.domain.workout import (
    GenerateWorkoutRequest,
    WorkoutModifications,
    WorkoutPlan,
)

_T = TypeVar("_T")


def merge_diet_request(
    existing: DietPlan, modifications: DietModifications
) -> GenerateDietRequest:
    """Build a full diet request from a stored plan and partial changes."""
    return GenerateDietRequest(
        user_id=existing.user_id,
        calories=_pick(modifications.calories, existing.total_calories),
        goal=_pick(modifications.goal, existing.goal),
        restrictions=_pick(modifications.restrictions, existing.restrictions),
        meals_per_day=modifications.meals_per_day,
        target_protein=modifications.target_protein,
        preferred_foods=modifications.preferred_foods,
        avoid_foods=modifications.avoid_foods,
        preferences=modifications.preferences,
    )


def merge_workout_request(
    existing: WorkoutPlan, modifications: WorkoutModifications
) -> GenerateWorkoutRequest:
    """Build a full workout request from a stored plan and partial changes."""
    return GenerateWorkoutRequest(
        user_id=existing.user_id,
        goal=_pick(modifications.goal, existing.goal),
        difficulty=_pick(modifications.difficulty, existing.difficulty),
        days_per_week=_pick(modifications.days_per_week, existing.days_per_week),
        duration=_pick(modifications.duration, existing.estimated_duration),
        equipment=modifications.equipment,
        target_muscles=modifications.target_muscles,
        preferences=modifications.preferences,
    )


def _pick(override: _T | None, stored: _T) -> _T:
    return stored if override is None else override
