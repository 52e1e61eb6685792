"""Macro aggregation and calorie rescaling for diet plans."""

import math
from collections.abc import Iterable

from levelup_ai.domain.diet import (
    INVALID_CALORIES_MESSAGE,
    DietPlan,
    MacroTotals,
    Meal,
    MealMacros,
    NutritionItem,
    is_valid_calorie_target,
)
from levelup_ai.domain.errors import InvalidCaloriesError, InvalidPlanStateError


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def aggregate_macros(meals: Iterable[Meal]) -> MacroTotals:
    """Sum meal macros into plan totals, counting missing fiber as zero."""
    protein = carbs = fat = fiber = 0
    for meal in meals:
        protein += meal.macros.protein
        carbs += meal.macros.carbs
        fat += meal.macros.fat
        fiber += meal.macros.fiber or 0
    return MacroTotals(protein=protein, carbs=carbs, fat=fat, fiber=fiber)


def rescale_diet_plan(plan: DietPlan, calorie_target: int) -> DietPlan:
    """Return a copy of the plan with every quantity scaled to a new target.

    Each value is scaled and rounded on its own, so item calories only sum
    approximately to the scaled meal total. Plan macros are re-aggregated
    from the scaled meals rather than scaled directly.
    """
    if not is_valid_calorie_target(calorie_target):
        raise InvalidCaloriesError(INVALID_CALORIES_MESSAGE)
    if plan.total_calories <= 0:
        raise InvalidPlanStateError(
            f"Diet plan has a non-positive calorie total ({plan.total_calories})"
        )

    factor = calorie_target / plan.total_calories
    meals = [_scale_meal(meal, factor) for meal in plan.meals]
    return plan.model_copy(
        update={
            "total_calories": calorie_target,
            "meals": meals,
            "target_macros": aggregate_macros(meals),
        }
    )


def _scale_meal(meal: Meal, factor: float) -> Meal:
    macros = MealMacros(
        protein=round_half_up(meal.macros.protein * factor),
        carbs=round_half_up(meal.macros.carbs * factor),
        fat=round_half_up(meal.macros.fat * factor),
        fiber=_scale_optional(meal.macros.fiber, factor),
    )
    return meal.model_copy(
        update={
            "total_calories": round_half_up(meal.total_calories * factor),
            "items": [_scale_item(item, factor) for item in meal.items],
            "macros": macros,
        }
    )


def _scale_item(item: NutritionItem, factor: float) -> NutritionItem:
    return item.model_copy(
        update={
            "calories": round_half_up(item.calories * factor),
            "protein": _scale_optional(item.protein, factor),
            "carbs": _scale_optional(item.carbs, factor),
            "fat": _scale_optional(item.fat, factor),
        }
    )


def _scale_optional(value: int | None, factor: float) -> int | None:
    if value is None:
        return None
    return round_half_up(value * factor)
