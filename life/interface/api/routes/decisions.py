"""Decision routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from life.application.usecase.auth import GetCurrentUserUseCase
from life.domain.model import Decision, Reflection
from life.domain.service import DecisionService
from life.domain.value import DecisionId, LifePhaseId
from life.interface.api.session import require_profile

router = APIRouter(prefix="/decisions", tags=["decisions"], route_class=DishkaRoute)


class CreateDecisionAPIRequest(BaseModel):
    """API request for logging a decision."""

    title: str = Field(min_length=1, max_length=300)
    confidence_level: int = Field(ge=1, le=5)
    description: str = ""
    category: str | None = Field(None, max_length=100)
    tags: list[str] = Field(default_factory=list)
    life_phase_id: UUID | None = None


class UpdateDecisionAPIRequest(BaseModel):
    """API request for a partial decision update."""

    title: str | None = Field(None, min_length=1, max_length=300)
    confidence_level: int | None = Field(None, ge=1, le=5)
    description: str | None = None
    category: str | None = Field(None, max_length=100)
    tags: list[str] | None = None
    life_phase_id: UUID | None = None


class AddReflectionAPIRequest(BaseModel):
    """API request for reflecting on a decision."""

    content: str = Field(min_length=1)


@router.get("", response_model=list[Decision])
async def list_decisions(
    decision_service: FromDishka[DecisionService],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> list[Decision]:
    """List the caller's decisions, newest first, with reflections."""
    profile = await require_profile(get_current_user_use_case, auth_token)
    return await decision_service.get_all(profile.id)


@router.post("", response_model=Decision, status_code=status.HTTP_201_CREATED)
async def create_decision(
    request: CreateDecisionAPIRequest,
    decision_service: FromDishka[DecisionService],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> Decision:
    """Log a decision.

    Example:
        POST /decisions
        {"title": "Move to Lisbon", "confidence_level": 4, "tags": ["home"]}
    """
    profile = await require_profile(get_current_user_use_case, auth_token)
    return await decision_service.create(
        user_id=profile.id,
        title=request.title,
        confidence_level=request.confidence_level,
        description=request.description,
        category=request.category,
        tags=request.tags,
        life_phase_id=(
            LifePhaseId(request.life_phase_id) if request.life_phase_id else None
        ),
    )


@router.get("/{decision_id}", response_model=Decision)
async def get_decision(
    decision_id: UUID,
    decision_service: FromDishka[DecisionService],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> Decision:
    """Get one of the caller's decisions."""
    profile = await require_profile(get_current_user_use_case, auth_token)
    return await decision_service.get(profile.id, DecisionId(decision_id))


@router.patch("/{decision_id}", response_model=Decision)
async def update_decision(
    decision_id: UUID,
    request: UpdateDecisionAPIRequest,
    decision_service: FromDishka[DecisionService],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> Decision:
    """Update the fields present in the request body."""
    profile = await require_profile(get_current_user_use_case, auth_token)
    return await decision_service.update(
        profile.id, DecisionId(decision_id), request.model_dump(exclude_unset=True)
    )


@router.delete("/{decision_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_decision(
    decision_id: UUID,
    decision_service: FromDishka[DecisionService],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Delete a decision and its reflections."""
    profile = await require_profile(get_current_user_use_case, auth_token)
    await decision_service.delete(profile.id, DecisionId(decision_id))


@router.post(
    "/{decision_id}/reflections",
    response_model=Reflection,
    status_code=status.HTTP_201_CREATED,
)
async def add_reflection(
    decision_id: UUID,
    request: AddReflectionAPIRequest,
    decision_service: FromDishka[DecisionService],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> Reflection:
    """Record a reflection on a past decision."""
    profile = await require_profile(get_current_user_use_case, auth_token)
    return await decision_service.add_reflection(
        profile.id, DecisionId(decision_id), request.content
    )
