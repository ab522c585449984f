"""Send magic link use case."""

import logfire
from pydantic import BaseModel, Field

from life.config import Settings
from life.domain.service import AuthService, InviteCodeService
from life.domain.value import InviteCodeValue

from .start_sign_in import callback_url


class SendMagicLinkRequest(BaseModel):
    """Send magic link request."""

    email: str = Field(min_length=3, max_length=255)
    invite_code: str | None = None
    next: str | None = None


class SendMagicLinkResponse(BaseModel):
    """Magic link outcome; `code_verifier` is kept by the route in a cookie."""

    success: bool
    error: str | None = None
    code_verifier: str | None = None


class SendMagicLinkUseCase:
    """Use case for passwordless email sign-in."""

    def __init__(
        self,
        auth_service: AuthService,
        invite_code_service: InviteCodeService,
        settings: Settings,
    ) -> None:
        self.auth_service = auth_service
        self.invite_code_service = invite_code_service
        self.settings = settings

    async def execute(self, request: SendMagicLinkRequest) -> SendMagicLinkResponse:
        """Validate the optional invite and send the link.

        Raises:
            AuthenticationError: If the credential store refuses to send
        """
        with logfire.span("send_magic_link.execute", has_invite=bool(request.invite_code)):
            invite = None
            if request.invite_code:
                validation = await self.invite_code_service.validate(request.invite_code)
                if not validation.valid:
                    return SendMagicLinkResponse(success=False, error=validation.error)
                invite = InviteCodeValue(request.invite_code).root

            code_verifier = await self.auth_service.send_magic_link(
                request.email, callback_url(self.settings, invite, request.next)
            )
            return SendMagicLinkResponse(success=True, code_verifier=code_verifier)
