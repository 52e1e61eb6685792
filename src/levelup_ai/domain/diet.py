"""Domain models for diet plans."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

MIN_CALORIE_TARGET = 1000
MAX_CALORIE_TARGET = 5000
INVALID_CALORIES_MESSAGE = (
    f"Invalid calories value. Must be between {MIN_CALORIE_TARGET} "
    f"and {MAX_CALORIE_TARGET}."
)

_PLAN_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)
_REQUEST_CONFIG = ConfigDict(
    alias_generator=to_camel, populate_by_name=True, extra="forbid"
)


def is_valid_calorie_target(calories: int) -> bool:
    """Return whether a calorie target is within the accepted range."""
    return MIN_CALORIE_TARGET <= calories <= MAX_CALORIE_TARGET


class NutritionItem(BaseModel):
    """Single food item inside a meal."""

    model_config = _PLAN_CONFIG

    name: str
    quantity: str
    calories: int = Field(ge=0)
    protein: int | None = Field(default=None, ge=0)
    carbs: int | None = Field(default=None, ge=0)
    fat: int | None = Field(default=None, ge=0)


class MealMacros(BaseModel):
    """Macronutrient grams for one meal."""

    model_config = _PLAN_CONFIG

    protein: int = Field(ge=0)
    carbs: int = Field(ge=0)
    fat: int = Field(ge=0)
    fiber: int | None = Field(default=None, ge=0)


class MacroTotals(BaseModel):
    """Aggregate macronutrient grams across all meals of a plan."""

    model_config = _PLAN_CONFIG

    protein: int = 0
    carbs: int = 0
    fat: int = 0
    fiber: int = 0


class Meal(BaseModel):
    """Meal with its items and denormalized totals."""

    model_config = _PLAN_CONFIG

    name: str
    items: list[NutritionItem] = Field(default_factory=list)
    total_calories: int = Field(ge=0)
    macros: MealMacros


class DietPlan(BaseModel):
    """Persisted diet plan."""

    model_config = _PLAN_CONFIG

    id: str | None = None
    user_id: str
    name: str
    description: str
    goal: str
    total_calories: int
    target_macros: MacroTotals = Field(default_factory=MacroTotals)
    meals: list[Meal] = Field(default_factory=list)
    restrictions: list[str] = Field(default_factory=list)
    created_at: datetime | None = None


class GenerateDietRequest(BaseModel):
    """Input for diet plan generation."""

    model_config = _REQUEST_CONFIG

    user_id: str = Field(min_length=1)
    calories: int = Field(ge=MIN_CALORIE_TARGET, le=MAX_CALORIE_TARGET)
    goal: str = Field(min_length=1)
    restrictions: list[str] | None = None
    meals_per_day: int | None = Field(default=None, ge=1, le=8)
    target_protein: int | None = Field(default=None, ge=0)
    preferred_foods: list[str] | None = None
    avoid_foods: list[str] | None = None
    preferences: str | None = None


class DietModifications(BaseModel):
    """Partial diet request used to regenerate an existing plan.

    ``user_id`` is accepted for wire compatibility but never applied: a
    regenerated plan always belongs to the owner of the stored plan.
    """

    model_config = _REQUEST_CONFIG

    user_id: str | None = None
    calories: int | None = Field(
        default=None, ge=MIN_CALORIE_TARGET, le=MAX_CALORIE_TARGET
    )
    goal: str | None = None
    restrictions: list[str] | None = None
    meals_per_day: int | None = Field(default=None, ge=1, le=8)
    target_protein: int | None = Field(default=None, ge=0)
    preferred_foods: list[str] | None = None
    avoid_foods: list[str] | None = None
    preferences: str | None = None
