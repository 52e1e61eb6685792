"""Models for plan drafts returned by AI providers."""

from pydantic import BaseModel, Field

from levelup_ai.domain.diet import Meal
from levelup_ai.domain.workout import Exercise


class DietDraft(BaseModel):
    """Structured diet draft produced by a provider."""

    name: str
    description: str
    meals: list[Meal] = Field(min_length=1)


class WorkoutDraft(BaseModel):
    """Structured workout draft produced by a provider."""

    name: str
    description: str
    exercises: list[Exercise] = Field(min_length=1)
