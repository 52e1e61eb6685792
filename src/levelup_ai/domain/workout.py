"""Domain models for workout plans."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_PLAN_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)
_REQUEST_CONFIG = ConfigDict(
    alias_generator=to_camel, populate_by_name=True, extra="forbid"
)


class Difficulty(str, Enum):
    """Training difficulty levels."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Exercise(BaseModel):
    """Single exercise prescription."""

    model_config = _PLAN_CONFIG

    name: str
    sets: int = Field(ge=1)
    reps: str
    rest_seconds: int | None = Field(default=None, ge=0)
    target_muscles: list[str] = Field(default_factory=list)
    notes: str | None = None


class WorkoutPlan(BaseModel):
    """Persisted workout plan."""

    model_config = _PLAN_CONFIG

    id: str | None = None
    user_id: str
    name: str
    description: str
    difficulty: Difficulty
    goal: str
    days_per_week: int
    estimated_duration: int
    exercises: list[Exercise] = Field(default_factory=list)
    created_at: datetime | None = None


class GenerateWorkoutRequest(BaseModel):
    """Input for workout plan generation."""

    model_config = _REQUEST_CONFIG

    user_id: str = Field(min_length=1)
    goal: str = Field(min_length=1)
    difficulty: Difficulty
    days_per_week: int = Field(ge=1, le=7)
    duration: int = Field(ge=10, le=240)
    equipment: list[str] | None = None
    target_muscles: list[str] | None = None
    preferences: str | None = None


class WorkoutModifications(BaseModel):
    """Partial workout request used to regenerate an existing plan."""

    model_config = _REQUEST_CONFIG

    user_id: str | None = None
    goal: str | None = None
    difficulty: Difficulty | None = None
    days_per_week: int | None = Field(default=None, ge=1, le=7)
    duration: int | None = Field(default=None, ge=10, le=240)
    equipment: list[str] | None = None
    target_muscles: list[str] | None = None
    preferences: str | None = None
