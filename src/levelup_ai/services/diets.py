"""Diet plan generation, regeneration and calorie adjustment."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

from levelup_ai.domain.diet import (
    INVALID_CALORIES_MESSAGE,
    DietModifications,
    DietPlan,
    GenerateDietRequest,
    is_valid_calorie_target,
)
from levelup_ai.domain.errors import InvalidCaloriesError, PlanNotFoundError
from levelup_ai.services.drafting import DEFAULT_PROVIDER, PlanDrafter, select_drafter
from levelup_ai.services.envelope import enveloped
from levelup_ai.services.macros import aggregate_macros, rescale_diet_plan
from levelup_ai.services.regeneration import merge_diet_request

_logger = logging.getLogger(__name__)


class DietPlanRepository(Protocol):
    """Persistence interface for diet plans."""

    def get_plan(self, plan_id: str) -> DietPlan | None:
        """Return the stored plan, if present."""

    def save_plan(self, plan: DietPlan) -> DietPlan:
        """Persist a plan and return it with store-assigned fields."""


@dataclass
class DietPlanService:
    """Application service for diet plan operations."""

    repository: DietPlanRepository
    drafters: Mapping[str, PlanDrafter]
    provider: str = DEFAULT_PROVIDER

    @enveloped(
        success_message="Diet plan generated successfully",
        failure_message="Failed to generate diet plan",
    )
    async def generate(self, request: GenerateDietRequest) -> DietPlan:
        """Generate and store a new diet plan."""
        return await self._generate(request)

    @enveloped(
        failure_message="Failed to fetch diet plan",
        not_found_message="The requested diet plan does not exist",
    )
    async def get(self, plan_id: str) -> DietPlan:
        """Return a stored diet plan."""
        return self._load(plan_id)

    @enveloped(
        success_message="Diet plan regenerated successfully",
        failure_message="Failed to regenerate diet plan",
        not_found_message="Cannot regenerate non-existent plan",
    )
    async def regenerate(
        self, plan_id: str, modifications: DietModifications
    ) -> DietPlan:
        """Generate a new plan from a stored one with the given changes."""
        existing = self._load(plan_id)
        request = merge_diet_request(existing, modifications)
        _logger.info("Regenerating diet plan %s for user %s", plan_id, request.user_id)
        return await self._generate(request)

    @enveloped(
        success_message="Diet plan calories adjusted successfully",
        failure_message="Failed to adjust diet calories",
        not_found_message="Cannot adjust calories for non-existent plan",
    )
    async def adjust_calories(self, plan_id: str, calories: int) -> DietPlan:
        """Rescale a stored plan to a new calorie target and save it."""
        if not is_valid_calorie_target(calories):
            raise InvalidCaloriesError(INVALID_CALORIES_MESSAGE)
        existing = self._load(plan_id)
        adjusted = rescale_diet_plan(existing, calories)
        saved = self.repository.save_plan(adjusted)
        _logger.info(
            "Diet plan %s adjusted from %s to %s kcal",
            plan_id,
            existing.total_calories,
            calories,
        )
        return saved

    async def _generate(self, request: GenerateDietRequest) -> DietPlan:
        _logger.info("Generating diet plan for user: %s", request.user_id)
        drafter = select_drafter(self.provider, self.drafters)
        draft = await drafter.draft_diet(request)
        plan = DietPlan(
            user_id=request.user_id,
            name=draft.name,
            description=draft.description,
            goal=request.goal,
            total_calories=request.calories,
            target_macros=aggregate_macros(draft.meals),
            meals=draft.meals,
            restrictions=request.restrictions or [],
        )
        saved = self.repository.save_plan(plan)
        _logger.info(
            "Diet plan generated for user: %s, id: %s, provider: %s",
            request.user_id,
            saved.id,
            drafter.provider,
        )
        return saved

    def _load(self, plan_id: str) -> DietPlan:
        plan = self.repository.get_plan(plan_id)
        if plan is None:
            raise PlanNotFoundError("Diet plan not found")
        return plan
