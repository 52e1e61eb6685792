"""Diet plan endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from levelup_ai.api.responses import envelope_response
from levelup_ai.domain.diet import (
    INVALID_CALORIES_MESSAGE,
    DietModifications,
    GenerateDietRequest,
    is_valid_calorie_target,
)
from levelup_ai.domain.errors import ErrorKind
from levelup_ai.domain.responses import ApiResponse

if TYPE_CHECKING:
    from levelup_ai.containers import AppContainer

router = APIRouter(prefix="/diet", tags=["Diet"])


@router.post("", summary="Generate personalized diet plan")
async def generate_diet(body: GenerateDietRequest, request: Request) -> JSONResponse:
    """Create a diet plan from goals, calorie target and restrictions."""
    container: AppContainer = request.app.state.container
    return envelope_response(await container.diet_service.generate(body))


@router.get("/{plan_id}", summary="Get diet plan by ID")
async def get_diet(plan_id: str, request: Request) -> JSONResponse:
    """Return a stored diet plan."""
    container: AppContainer = request.app.state.container
    return envelope_response(await container.diet_service.get(plan_id))


@router.post("/{plan_id}/regenerate", summary="Regenerate diet plan")
async def regenerate_diet(
    plan_id: str, body: DietModifications, request: Request
) -> JSONResponse:
    """Create a new version of a stored plan with the given modifications."""
    container: AppContainer = request.app.state.container
    return envelope_response(
        await container.diet_service.regenerate(plan_id, body)
    )


@router.post(
    "/{plan_id}/adjust-calories/{calories}", summary="Adjust diet plan calories"
)
async def adjust_calories(
    plan_id: str, calories: str, request: Request
) -> JSONResponse:
    """Scale portions of a stored plan to a new calorie target."""
    target = _parse_calories(calories)
    if target is None:
        return envelope_response(
            ApiResponse.failure(
                INVALID_CALORIES_MESSAGE, kind=ErrorKind.INVALID_ARGUMENT
            )
        )
    container: AppContainer = request.app.state.container
    return envelope_response(
        await container.diet_service.adjust_calories(plan_id, target)
    )


def _parse_calories(raw: str) -> int | None:
    """Return the calorie target if it is an integer in the accepted range."""
    if not (raw.isascii() and raw.isdigit()):
        return None
    value = int(raw)
    if not is_valid_calorie_target(value):
        return None
    return value
