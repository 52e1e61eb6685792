"""Workout plan generation and regeneration."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

from levelup_ai.domain.errors import PlanNotFoundError
from levelup_ai.domain.workout import (
    GenerateWorkoutRequest,
    WorkoutModifications,
    WorkoutPlan,
)
from levelup_ai.services.drafting import DEFAULT_PROVIDER, PlanDrafter, select_drafter
from levelup_ai.services.envelope import enveloped
from levelup_ai.services.regeneration import merge_workout_request

_logger = logging.getLogger(__name__)


class WorkoutPlanRepository(Protocol):
    """Persistence interface for workout plans."""

    def get_plan(self, plan_id: str) -> WorkoutPlan | None:
        """Return the stored plan, if present."""

    def save_plan(self, plan: WorkoutPlan) -> WorkoutPlan:
        """Persist a plan and return it with store-assigned fields."""


@dataclass
class WorkoutPlanService:
    """Application service for workout plan operations."""

    repository: WorkoutPlanRepository
    drafters: Mapping[str, PlanDrafter]
    provider: str = DEFAULT_PROVIDER

    @enveloped(
        success_message="Workout plan generated successfully",
        failure_message="Failed to generate workout plan",
    )
    async def generate(self, request: GenerateWorkoutRequest) -> WorkoutPlan:
        """Generate and store a new workout plan."""
        return await self._generate(request)

    @enveloped(
        failure_message="Failed to fetch workout plan",
        not_found_message="The requested workout plan does not exist",
    )
    async def get(self, plan_id: str) -> WorkoutPlan:
        """Return a stored workout plan."""
        return self._load(plan_id)

    @enveloped(
        success_message="Workout plan regenerated successfully",
        failure_message="Failed to regenerate workout plan",
        not_found_message="Cannot regenerate non-existent plan",
    )
    async def regenerate(
        self, plan_id: str, modifications: WorkoutModifications
    ) -> WorkoutPlan:
        """Generate a new plan from a stored one with the given changes."""
        existing = self._load(plan_id)
        request = merge_workout_request(existing, modifications)
        _logger.info(
            "Regenerating workout plan %s for user %s", plan_id, request.user_id
        )
        return await self._generate(request)

    async def _generate(self, request: GenerateWorkoutRequest) -> WorkoutPlan:
        _logger.info("Generating workout for user: %s", request.user_id)
        drafter = select_drafter(self.provider, self.drafters)
        draft = await drafter.draft_workout(request)
        plan = WorkoutPlan(
            user_id=request.user_id,
            name=draft.name,
            description=draft.description,
            difficulty=request.difficulty,
            goal=request.goal,
            days_per_week=request.days_per_week,
            estimated_duration=request.duration,
            exercises=draft.exercises,
        )
        saved = self.repository.save_plan(plan)
        _logger.info(
            "Workout generated for user: %s, id: %s, provider: %s",
            request.user_id,
            saved.id,
            drafter.provider,
        )
        return saved

    def _load(self, plan_id: str) -> WorkoutPlan:
        plan = self.repository.get_plan(plan_id)
        if plan is None:
            raise PlanNotFoundError("Workout plan not found")
        return plan
