"""Profile routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Response, status
from pydantic import BaseModel

from life.application.usecase.auth import GetCurrentUserUseCase
from life.application.usecase.profile import (
    CheckUsernameRequest,
    CheckUsernameResponse,
    CheckUsernameUseCase,
    DeleteAccountRequest,
    DeleteAccountUseCase,
    UpdatePreferencesRequest,
    UpdatePreferencesUseCase,
    UpdateUsernameRequest,
    UpdateUsernameResponse,
    UpdateUsernameUseCase,
)
from life.config import Settings
from life.domain.model import Profile
from life.domain.value import Theme
from life.interface.api.session import clear_session_cookie, require_profile

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/profile", tags=["profile"], route_class=DishkaRoute)


class UpdateUsernameAPIRequest(BaseModel):
    """API request for claiming a username."""

    username: str


class UpdatePreferencesAPIRequest(BaseModel):
    """API request for changing preferences; omitted fields are kept."""

    theme: Theme | None = None
    reminder_enabled: bool | None = None
    reminder_time: str | None = None


@router.get("/username/available", response_model=CheckUsernameResponse)
async def check_username_available(
    username: str,
    check_use_case: FromDishka[CheckUsernameUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> CheckUsernameResponse:
    """Live availability check for the username field.

    Works signed out; when signed in, the caller's own username counts as
    available.

    Example:
        GET /profile/username/available?username=ada_l

        Response:
        {"available": true}
    """
    identity_id = None
    if auth_token:
        try:
            profile = await require_profile(get_current_user_use_case, auth_token)
            identity_id = profile.id
        except HTTPException:
            # Stale session; check as signed out
            pass

    return await check_use_case.execute(
        CheckUsernameRequest(username=username, identity_id=identity_id)
    )


@router.put("/username", response_model=UpdateUsernameResponse)
async def update_username(
    request: UpdateUsernameAPIRequest,
    update_use_case: FromDishka[UpdateUsernameUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> UpdateUsernameResponse:
    """Claim a username for the current profile.

    Taken or malformed usernames come back as `success: false` with a
    readable `error`.
    """
    profile = await require_profile(get_current_user_use_case, auth_token)
    return await update_use_case.execute(
        UpdateUsernameRequest(identity_id=profile.id, username=request.username)
    )


@router.patch("/preferences", response_model=Profile)
async def update_preferences(
    request: UpdatePreferencesAPIRequest,
    update_use_case: FromDishka[UpdatePreferencesUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> Profile:
    """Merge preference changes into the current profile."""
    profile = await require_profile(get_current_user_use_case, auth_token)
    result = await update_use_case.execute(
        UpdatePreferencesRequest(
            identity_id=profile.id,
            changes=request.model_dump(exclude_unset=True),
        )
    )
    return result.profile


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def delete_account(
    delete_use_case: FromDishka[DeleteAccountUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
    auth_token: str | None = Cookie(default=None),
) -> Response:
    """Delete the current account and everything it owns.

    The session cookie is cleared on the way out.
    """
    profile = await require_profile(get_current_user_use_case, auth_token)
    await delete_use_case.execute(
        DeleteAccountRequest(identity_id=profile.id, access_token=auth_token)
    )
    logger.info(f"Account deleted: {profile.id}")

    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    clear_session_cookie(response, settings)
    return response
