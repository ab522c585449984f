"""Life phase and goal routes."""

from datetime import date
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from life.application.usecase.auth import GetCurrentUserUseCase
from life.domain.model import Goal, LifePhase
from life.domain.service import LifePhaseService
from life.domain.value import GoalId, GoalStatus, LifePhaseId
from life.interface.api.session import require_profile

router = APIRouter(prefix="/phases", tags=["phases"], route_class=DishkaRoute)


class CreateLifePhaseAPIRequest(BaseModel):
    """API request for starting a life phase."""

    name: str = Field(min_length=1, max_length=200)
    start_date: date
    description: str | None = None
    end_date: date | None = None
    is_active: bool = False
    values: list[str] = Field(default_factory=list)


class UpdateLifePhaseAPIRequest(BaseModel):
    """API request for a partial phase update.

    `is_active: true` makes this the only active phase.
    """

    name: str | None = Field(None, min_length=1, max_length=200)
    start_date: date | None = None
    description: str | None = None
    end_date: date | None = None
    is_active: bool | None = None
    values: list[str] | None = None


class AddGoalAPIRequest(BaseModel):
    """API request for adding a goal to a phase."""

    title: str = Field(min_length=1, max_length=300)
    description: str | None = None


class UpdateGoalAPIRequest(BaseModel):
    """API request for a partial goal update."""

    title: str | None = Field(None, min_length=1, max_length=300)
    description: str | None = None
    status: GoalStatus | None = None


@router.get("", response_model=list[LifePhase])
async def list_phases(
    life_phase_service: FromDishka[LifePhaseService],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> list[LifePhase]:
    """List the caller's phases with their goals, latest start first."""
    profile = await require_profile(get_current_user_use_case, auth_token)
    return await life_phase_service.get_all(profile.id)


@router.post("", response_model=LifePhase, status_code=status.HTTP_201_CREATED)
async def create_phase(
    request: CreateLifePhaseAPIRequest,
    life_phase_service: FromDishka[LifePhaseService],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> LifePhase:
    """Start a life phase, optionally as the active one.

    Example:
        POST /phases
        {"name": "Sabbatical", "start_date": "2026-01-05", "is_active": true}
    """
    profile = await require_profile(get_current_user_use_case, auth_token)
    return await life_phase_service.create(
        user_id=profile.id,
        name=request.name,
        start_date=request.start_date,
        description=request.description,
        end_date=request.end_date,
        is_active=request.is_active,
        values=request.values,
    )


@router.get("/active", response_model=LifePhase | None)
async def get_active_phase(
    life_phase_service: FromDishka[LifePhaseService],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> LifePhase | None:
    """Get the caller's active phase, or null when none is active."""
    profile = await require_profile(get_current_user_use_case, auth_token)
    return await life_phase_service.get_active(profile.id)


@router.patch("/goals/{goal_id}", response_model=Goal)
async def update_goal(
    goal_id: UUID,
    request: UpdateGoalAPIRequest,
    life_phase_service: FromDishka[LifePhaseService],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> Goal:
    """Update a goal's title, description or status."""
    profile = await require_profile(get_current_user_use_case, auth_token)
    return await life_phase_service.update_goal(
        profile.id, GoalId(goal_id), request.model_dump(exclude_unset=True)
    )


@router.get("/{phase_id}", response_model=LifePhase)
async def get_phase(
    phase_id: UUID,
    life_phase_service: FromDishka[LifePhaseService],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> LifePhase:
    """Get one of the caller's phases with its goals."""
    profile = await require_profile(get_current_user_use_case, auth_token)
    return await life_phase_service.get(profile.id, LifePhaseId(phase_id))


@router.patch("/{phase_id}", response_model=LifePhase)
async def update_phase(
    phase_id: UUID,
    request: UpdateLifePhaseAPIRequest,
    life_phase_service: FromDishka[LifePhaseService],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> LifePhase:
    """Update the fields present in the request body."""
    profile = await require_profile(get_current_user_use_case, auth_token)
    return await life_phase_service.update(
        profile.id, LifePhaseId(phase_id), request.model_dump(exclude_unset=True)
    )


@router.delete("/{phase_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_phase(
    phase_id: UUID,
    life_phase_service: FromDishka[LifePhaseService],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Delete a phase and its goals."""
    profile = await require_profile(get_current_user_use_case, auth_token)
    await life_phase_service.delete(profile.id, LifePhaseId(phase_id))


@router.post("/{phase_id}/goals", response_model=Goal, status_code=status.HTTP_201_CREATED)
async def add_goal(
    phase_id: UUID,
    request: AddGoalAPIRequest,
    life_phase_service: FromDishka[LifePhaseService],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> Goal:
    """Add an active goal to a phase."""
    profile = await require_profile(get_current_user_use_case, auth_token)
    return await life_phase_service.add_goal(
        profile.id, LifePhaseId(phase_id), request.title, request.description
    )
