"""Plan drafting through interchangeable AI providers."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol, TypeVar

from pydantic import ValidationError

from levelup_ai.domain.diet import GenerateDietRequest
from levelup_ai.domain.drafts import DietDraft, WorkoutDraft
from levelup_ai.domain.errors import BackendError
from levelup_ai.domain.workout import GenerateWorkoutRequest
from levelup_ai.services.prompts import build_diet_prompt, build_workout_prompt

DEFAULT_PROVIDER = "openai"

_NULLABLE_INT = {"anyOf": [{"type": "integer", "minimum": 0}, {"type": "null"}]}
_NULLABLE_STRING = {"anyOf": [{"type": "string"}, {"type": "null"}]}

DIET_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "description": {"type": "string"},
        "meals": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "name": {"type": "string"},
                    "items": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "properties": {
                                "name": {"type": "string"},
                                "quantity": {"type": "string"},
                                "calories": {"type": "integer", "minimum": 0},
                                "protein": _NULLABLE_INT,
                                "carbs": _NULLABLE_INT,
                                "fat": _NULLABLE_INT,
                            },
                            "required": [
                                "name",
                                "quantity",
                                "calories",
                                "protein",
                                "carbs",
                                "fat",
                            ],
                            "additionalProperties": False,
                        },
                    },
                    "total_calories": {"type": "integer", "minimum": 0},
                    "macros": {
                        "type": "object",
                        "properties": {
                            "protein": {"type": "integer", "minimum": 0},
                            "carbs": {"type": "integer", "minimum": 0},
                            "fat": {"type": "integer", "minimum": 0},
                            "fiber": _NULLABLE_INT,
                        },
                        "required": ["protein", "carbs", "fat", "fiber"],
                        "additionalProperties": False,
                    },
                },
                "required": ["name", "items", "total_calories", "macros"],
                "additionalProperties": False,
            },
        },
    },
    "required": ["name", "description", "meals"],
    "additionalProperties": False,
}

WORKOUT_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "description": {"type": "string"},
        "exercises": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "name": {"type": "string"},
                    "sets": {"type": "integer", "minimum": 1},
                    "reps": {"type": "string"},
                    "rest_seconds": _NULLABLE_INT,
                    "target_muscles": {"type": "array", "items": {"type": "string"}},
                    "notes": _NULLABLE_STRING,
                },
                "required": [
                    "name",
                    "sets",
                    "reps",
                    "rest_seconds",
                    "target_muscles",
                    "notes",
                ],
                "additionalProperties": False,
            },
        },
    },
    "required": ["name", "description", "exercises"],
    "additionalProperties": False,
}

_DraftT = TypeVar("_DraftT", DietDraft, WorkoutDraft)

_logger = logging.getLogger(__name__)


class PlanClient(Protocol):
    """Interface for LLM-backed structured plan generation."""

    async def generate(
        self,
        *,
        prompt: str,
        schema_name: str,
        schema: dict[str, object],
    ) -> dict[str, object]:
        """Return a JSON object matching the schema."""


@dataclass
class PlanDrafter:
    """Turns generation requests into validated provider drafts."""

    client: PlanClient
    provider: str

    async def draft_diet(self, request: GenerateDietRequest) -> DietDraft:
        """Ask the provider for a diet draft."""
        raw = await self.client.generate(
            prompt=build_diet_prompt(request),
            schema_name="diet_plan",
            schema=DIET_SCHEMA,
        )
        return self._validate(DietDraft, raw)

    async def draft_workout(self, request: GenerateWorkoutRequest) -> WorkoutDraft:
        """Ask the provider for a workout draft."""
        raw = await self.client.generate(
            prompt=build_workout_prompt(request),
            schema_name="workout_plan",
            schema=WORKOUT_SCHEMA,
        )
        return self._validate(WorkoutDraft, raw)

    def _validate(self, model: type[_DraftT], raw: dict[str, object]) -> _DraftT:
        try:
            return model.model_validate(raw)
        except ValidationError as exc:
            raise BackendError(
                f"{self.provider} returned an invalid plan draft: "
                f"{exc.error_count()} validation errors"
            ) from exc


def select_drafter(
    provider: str | None, drafters: Mapping[str, PlanDrafter]
) -> PlanDrafter:
    """Return the drafter for a provider, falling back to the default one."""
    name = (provider or DEFAULT_PROVIDER).strip().lower()
    drafter = drafters.get(name)
    if drafter is None:
        _logger.warning(
            "AI provider %r is not configured or unknown, falling back to %s", provider, DEFAULT_PROVIDER
        )
        drafter = drafters[DEFAULT_PROVIDER]
    return drafter
