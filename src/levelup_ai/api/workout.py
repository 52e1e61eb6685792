"""Workout plan endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from levelup_ai.api.responses import envelope_response
from levelup_ai.domain.workout import GenerateWorkoutRequest, WorkoutModifications

if TYPE_CHECKING:
    from levelup_ai.containers import AppContainer

router = APIRouter(prefix="/workout", tags=["Workout"])


@router.post("", summary="Generate personalized workout plan")
async def generate_workout(
    body: GenerateWorkoutRequest, request: Request
) -> JSONResponse:
    """Create a workout plan from goal, difficulty and schedule."""
    container: AppContainer = request.app.state.container
    return envelope_response(await container.workout_service.generate(body))


@router.get("/{plan_id}", summary="Get workout plan by ID")
async def get_workout(plan_id: str, request: Request) -> JSONResponse:
    """Return a stored workout plan."""
    container: AppContainer = request.app.state.container
    return envelope_response(await container.workout_service.get(plan_id))


@router.post("/{plan_id}/regenerate", summary="Regenerate workout plan")
async def regenerate_workout(
    plan_id: str, body: WorkoutModifications, request: Request
) -> JSONResponse:
    """Create a new version of a stored plan with the given modifications."""
    container: AppContainer = request.app.state.container
    return envelope_response(
        await container.workout_service.regenerate(plan_id, body)
    )
