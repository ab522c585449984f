"""Email sign-up use case."""

import logfire
from pydantic import BaseModel, Field

from life.config import Settings
from life.domain.model import AuthSession
from life.domain.service import AuthService, InviteCodeService
from life.domain.value import InviteCodeValue

from .start_sign_in import callback_url


class SignUpWithEmailRequest(BaseModel):
    """Email sign-up request. An invite code is required."""

    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=6)
    invite_code: str


class SignUpWithEmailResponse(BaseModel):
    """Sign-up outcome.

    `session` is None when the credential store wants the email confirmed
    first; the invite is then redeemed on the confirmation callback.
    """

    success: bool
    error: str | None = None
    confirmation_required: bool = False
    session: AuthSession | None = None


class SignUpWithEmailUseCase:
    """Use case for invite-gated email/password sign-up."""

    def __init__(
        self,
        auth_service: AuthService,
        invite_code_service: InviteCodeService,
        settings: Settings,
    ) -> None:
        """Initialize sign-up use case.

        Args:
            auth_service: Authentication domain service
            invite_code_service: Invite code domain service
            settings: Application settings
        """
        self.auth_service = auth_service
        self.invite_code_service = invite_code_service
        self.settings = settings

    async def execute(self, request: SignUpWithEmailRequest) -> SignUpWithEmailResponse:
        """Validate the invite, sign up, then redeem the invite.

        Raises:
            AuthenticationError: If the credential store rejects the sign-up
        """
        with logfire.span("sign_up_with_email.execute"):
            validation = await self.invite_code_service.validate(request.invite_code)
            if not validation.valid:
                return SignUpWithEmailResponse(success=False, error=validation.error)

            result = await self.auth_service.sign_up(
                request.email,
                request.password,
                callback_url(
                    self.settings, InviteCodeValue(request.invite_code).root, None
                ),
            )

            if result.session is None:
                return SignUpWithEmailResponse(success=True, confirmation_required=True)

            await self.invite_code_service.redeem(request.invite_code, result.identity.id)
            return SignUpWithEmailResponse(success=True, session=result.session)
