"""Private profile routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel, Field

from life.application.usecase.auth import GetCurrentUserUseCase
from life.domain.model import PrivateProfile
from life.domain.service import PrivateProfileService
from life.interface.api.session import require_profile

router = APIRouter(
    prefix="/private-profile", tags=["private-profile"], route_class=DishkaRoute
)


class SavePrivateProfileAPIRequest(BaseModel):
    """API request for writing the private profile (full replacement)."""

    values: list[str] = Field(default_factory=list)
    joys: list[str] = Field(default_factory=list)
    remembered_as: str = ""
    share_code: str | None = Field(None, max_length=64)
    share_expiry: datetime | None = None


@router.get("", response_model=PrivateProfile | None)
async def get_private_profile(
    private_profile_service: FromDishka[PrivateProfileService],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> PrivateProfile | None:
    """Get the caller's private profile, or null if never written."""
    profile = await require_profile(get_current_user_use_case, auth_token)
    return await private_profile_service.get(profile.id)


@router.put("", response_model=PrivateProfile)
async def save_private_profile(
    request: SavePrivateProfileAPIRequest,
    private_profile_service: FromDishka[PrivateProfileService],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> PrivateProfile:
    """Create or replace the caller's private profile."""
    profile = await require_profile(get_current_user_use_case, auth_token)
    return await private_profile_service.create_or_update(
        user_id=profile.id,
        values=request.values,
        joys=request.joys,
        remembered_as=request.remembered_as,
        share_code=request.share_code,
        share_expiry=request.share_expiry,
    )
