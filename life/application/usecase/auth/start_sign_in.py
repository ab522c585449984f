"""Start OAuth sign-in use case."""

from urllib.parse import urlencode

import logfire
from pydantic import BaseModel

from life.config import Settings
from life.domain.service import AuthService, InviteCodeService
from life.domain.value import InviteCodeValue


class StartOAuthSignInRequest(BaseModel):
    """Start OAuth sign-in request."""

    provider: str | None = None
    invite_code: str | None = None
    next: str | None = None


class StartOAuthSignInResponse(BaseModel):
    """Either an authorization URL plus the verifier to keep, or an error."""

    authorization_url: str | None = None
    code_verifier: str | None = None
    error: str | None = None


def callback_url(settings: Settings, invite: str | None, next_path: str | None) -> str:
    """Callback URL carrying the invite and destination through the provider."""
    params = {}
    if invite:
        params["invite"] = invite
    if next_path:
        params["next"] = next_path
    if not params:
        return settings.auth.callback_url
    return f"{settings.auth.callback_url}?{urlencode(params)}"


class StartOAuthSignInUseCase:
    """Use case for starting an OAuth sign-in.

    A supplied invite code is checked before the user leaves the site, so
    a bad code never costs a round trip through the provider.
    """

    def __init__(
        self,
        auth_service: AuthService,
        invite_code_service: InviteCodeService,
        settings: Settings,
    ) -> None:
        """Initialize start OAuth sign-in use case.

        Args:
            auth_service: Authentication domain service
            invite_code_service: Invite code domain service
            settings: Application settings
        """
        self.auth_service = auth_service
        self.invite_code_service = invite_code_service
        self.settings = settings

    async def execute(
        self, request: StartOAuthSignInRequest
    ) -> StartOAuthSignInResponse:
        """Validate the invite (if any) and build the authorization URL.

        Raises:
            AuthenticationError: If the credential store cannot start the flow
        """
        provider = request.provider or self.settings.auth.oauth_provider
        with logfire.span("start_oauth_sign_in.execute", provider=provider):
            invite = None
            if request.invite_code:
                validation = await self.invite_code_service.validate(
                    request.invite_code
                )
                if not validation.valid:
                    return StartOAuthSignInResponse(error=validation.error)
                invite = InviteCodeValue(request.invite_code).root

            authorization = await self.auth_service.initiate_oauth(
                provider, callback_url(self.settings, invite, request.next)
            )
            return StartOAuthSignInResponse(
                authorization_url=authorization.url,
                code_verifier=authorization.code_verifier,
            )
