"""Invite code routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from life.application.usecase.invite import (
    ValidateInviteCodeRequest,
    ValidateInviteCodeResponse,
    ValidateInviteCodeUseCase,
)

router = APIRouter(prefix="/invites", tags=["invites"], route_class=DishkaRoute)


@router.post("/validate", response_model=ValidateInviteCodeResponse)
async def validate_invite_code(
    request: ValidateInviteCodeRequest,
    validate_use_case: FromDishka[ValidateInviteCodeUseCase],
) -> ValidateInviteCodeResponse:
    """Check an invite code without consuming it.

    Public endpoint used by the sign-up form. An invalid code is a normal
    response, not an error.

    Example:
        POST /invites/validate
        {"code": "abc123"}

        Response:
        {"valid": true, "error": null}
    """
    return await validate_use_case.execute(request)
