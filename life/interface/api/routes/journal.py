"""Journal routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from life.application.usecase.auth import GetCurrentUserUseCase
from life.domain.model import JournalEntry
from life.domain.service import JournalService
from life.domain.value import JournalEntryId, LifePhaseId, Mood
from life.interface.api.session import require_profile

router = APIRouter(prefix="/journal", tags=["journal"], route_class=DishkaRoute)


class CreateJournalEntryAPIRequest(BaseModel):
    """API request for writing a journal entry."""

    content: str = Field(min_length=1)
    title: str | None = Field(None, max_length=300)
    mood: Mood | None = None
    life_phase_id: UUID | None = None


class UpdateJournalEntryAPIRequest(BaseModel):
    """API request for a partial journal entry update."""

    content: str | None = Field(None, min_length=1)
    title: str | None = Field(None, max_length=300)
    mood: Mood | None = None
    life_phase_id: UUID | None = None


@router.get("", response_model=list[JournalEntry])
async def list_entries(
    journal_service: FromDishka[JournalService],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> list[JournalEntry]:
    """List the caller's journal entries, newest first."""
    profile = await require_profile(get_current_user_use_case, auth_token)
    return await journal_service.get_all(profile.id)


@router.post("", response_model=JournalEntry, status_code=status.HTTP_201_CREATED)
async def create_entry(
    request: CreateJournalEntryAPIRequest,
    journal_service: FromDishka[JournalService],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> JournalEntry:
    """Write a journal entry."""
    profile = await require_profile(get_current_user_use_case, auth_token)
    return await journal_service.create(
        user_id=profile.id,
        content=request.content,
        title=request.title,
        mood=request.mood,
        life_phase_id=(
            LifePhaseId(request.life_phase_id) if request.life_phase_id else None
        ),
    )


@router.get("/{entry_id}", response_model=JournalEntry)
async def get_entry(
    entry_id: UUID,
    journal_service: FromDishka[JournalService],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> JournalEntry:
    """Get one of the caller's journal entries."""
    profile = await require_profile(get_current_user_use_case, auth_token)
    return await journal_service.get(profile.id, JournalEntryId(entry_id))


@router.patch("/{entry_id}", response_model=JournalEntry)
async def update_entry(
    entry_id: UUID,
    request: UpdateJournalEntryAPIRequest,
    journal_service: FromDishka[JournalService],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> JournalEntry:
    """Update the fields present in the request body."""
    profile = await require_profile(get_current_user_use_case, auth_token)
    return await journal_service.update(
        profile.id, JournalEntryId(entry_id), request.model_dump(exclude_unset=True)
    )


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entry(
    entry_id: UUID,
    journal_service: FromDishka[JournalService],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Delete a journal entry."""
    profile = await require_profile(get_current_user_use_case, auth_token)
    await journal_service.delete(profile.id, JournalEntryId(entry_id))
