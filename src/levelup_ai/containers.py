"""Dependency container wiring for the application."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from levelup_ai.adapters.gemini_plan_client import GeminiPlanClient
from levelup_ai.adapters.openai_plan_client import OpenAIPlanClient
from levelup_ai.adapters.supabase_diet_repository import SupabaseDietPlanRepository
from levelup_ai.adapters.supabase_workout_repository import (
    SupabaseWorkoutPlanRepository,
)
from levelup_ai.config import Settings
from levelup_ai.services.diets import DietPlanService
from levelup_ai.services.drafting import PlanDrafter
from levelup_ai.services.workouts import WorkoutPlanService

_logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    diet_service: DietPlanService
    workout_service: WorkoutPlanService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    openai_client = OpenAIPlanClient.create(
        api_key=resolved_settings.openai_api_key,
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
    )
    drafters = {"openai": PlanDrafter(client=openai_client, provider="openai")}
    if resolved_settings.gemini_api_key:
        gemini_client = GeminiPlanClient.create(
            api_key=resolved_settings.gemini_api_key,
            model=resolved_settings.gemini_model,
        )
        drafters["gemini"] = PlanDrafter(client=gemini_client, provider="gemini")
    else:
        gemini_client = None
        if resolved_settings.ai_default_provider.strip().lower() == "gemini":
            _logger.warning(
                "Gemini selected as AI provider but GEMINI_API_KEY is not set"
            )

    diet_service = DietPlanService(
        repository=SupabaseDietPlanRepository(
            supabase_client, table=resolved_settings.diet_table
        ),
        drafters=drafters,
        provider=resolved_settings.ai_default_provider,
    )
    workout_service = WorkoutPlanService(
        repository=SupabaseWorkoutPlanRepository(
            supabase_client, table=resolved_settings.workout_table
        ),
        drafters=drafters,
        provider=resolved_settings.ai_default_provider,
    )

    async def close_resources() -> None:
        await openai_client.close()
        if gemini_client is not None:
            await gemini_client.close()

    return AppContainer(
        settings=resolved_settings,
        diet_service=diet_service,
        workout_service=workout_service,
        close_resources=close_resources,
    )
