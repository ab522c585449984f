"""Complete sign-in use case.

Drives the OAuth / magic-link callback:

    Start -> CodeReceived -> SessionEstablished -> [InviteRedeemed] -> Redirected

Error branches end in a redirect back to the sign-in page with a
user-facing message in the query string.
"""

from enum import Enum
from urllib.parse import quote

import logfire
from pydantic import BaseModel

from life.config import Settings
from life.domain.error import AuthenticationError, AuthenticationFault
from life.domain.model import AuthSession
from life.domain.service import AuthService, InviteCodeService

GENERIC_SIGN_IN_ERROR = "Could not authenticate"
SIGN_IN_PAGE = "/auth"


class SignInStage(str, Enum):
    """Terminal stage of a callback."""

    OAUTH_ERROR = "oauth_error"
    EXCHANGE_ERROR = "exchange_error"
    FAILED = "failed"
    REDIRECTED = "redirected"


class CompleteSignInRequest(BaseModel):
    """Query parameters of the callback plus the kept PKCE verifier."""

    code: str | None = None
    invite: str | None = None
    next: str | None = None
    error: str | None = None
    error_description: str | None = None
    code_verifier: str | None = None


class CompleteSignInResponse(BaseModel):
    """Where the callback sends the user, and the session if one was made."""

    stage: SignInStage
    redirect_path: str
    session: AuthSession | None = None
    invite_redemption_attempted: bool = False


def encode_error(message: str) -> str:
    """Percent-encode a message the way browsers' encodeURIComponent does."""
    return quote(message, safe="!*'()~")


def error_redirect(message: str) -> str:
    """Path of the sign-in page showing `message`."""
    return f"{SIGN_IN_PAGE}?error={encode_error(message)}"


def safe_next(next_path: str | None, default: str) -> str:
    """Keep `next` only if it is a local absolute path."""
    if next_path and next_path.startswith("/") and not next_path.startswith("//"):
        return next_path
    return default


class CompleteSignInUseCase:
    """Use case for the sign-in callback."""

    def __init__(
        self,
        auth_service: AuthService,
        invite_code_service: InviteCodeService,
        settings: Settings,
    ) -> None:
        """Initialize complete sign-in use case.

        Args:
            auth_service: Authentication domain service
            invite_code_service: Invite code domain service
            settings: Application settings
        """
        self.auth_service = auth_service
        self.invite_code_service = invite_code_service
        self.settings = settings

    async def execute(self, request: CompleteSignInRequest) -> CompleteSignInResponse:
        """Run the callback to its terminal stage.

        Never raises: unexpected faults are logged and reported as FAILED
        with a generic message.

        Args:
            request: Callback parameters

        Returns:
            Terminal stage and redirect path
        """
        with logfire.span(
            "complete_sign_in.execute",
            has_code=request.code is not None,
            has_invite=request.invite is not None,
            has_error=request.error is not None,
        ):
            try:
                return await self._run(request)
            except Exception as e:
                logfire.error(
                    "Sign-in callback failed",
                    error=str(e),
                    error_type=type(e).__name__,
                )
                return CompleteSignInResponse(
                    stage=SignInStage.FAILED,
                    redirect_path=error_redirect(GENERIC_SIGN_IN_ERROR),
                )

    async def _run(self, request: CompleteSignInRequest) -> CompleteSignInResponse:
        # Start
        if request.error:
            message = request.error_description or request.error
            logfire.warn("Provider returned an error", error=request.error)
            return CompleteSignInResponse(
                stage=SignInStage.OAUTH_ERROR, redirect_path=error_redirect(message)
            )

        if not request.code:
            logfire.warn("Callback without code")
            return CompleteSignInResponse(
                stage=SignInStage.FAILED,
                redirect_path=error_redirect(GENERIC_SIGN_IN_ERROR),
            )

        # CodeReceived
        try:
            session = await self.auth_service.exchange_code_for_session(
                request.code, request.code_verifier
            )
        except AuthenticationFault as e:
            logfire.error("Code exchange failed", error=str(e))
            return CompleteSignInResponse(
                stage=SignInStage.FAILED,
                redirect_path=error_redirect(GENERIC_SIGN_IN_ERROR),
            )
        except AuthenticationError as e:
            logfire.warn("Code exchange rejected", error=str(e))
            return CompleteSignInResponse(
                stage=SignInStage.EXCHANGE_ERROR,
                redirect_path=error_redirect(str(e) or GENERIC_SIGN_IN_ERROR),
            )

        if not session.identity:
            logfire.warn("Code exchange returned no identity")
            return CompleteSignInResponse(
                stage=SignInStage.FAILED,
                redirect_path=error_redirect(GENERIC_SIGN_IN_ERROR),
            )

        # SessionEstablished
        redemption_attempted = False
        if request.invite:
            await self.invite_code_service.redeem(request.invite, session.identity.id)
            redemption_attempted = True

        # Redirected
        destination = safe_next(request.next, self.settings.auth.default_next)
        logfire.info(
            "Sign-in completed",
            identity_id=str(session.identity.id),
            destination=destination,
        )
        return CompleteSignInResponse(
            stage=SignInStage.REDIRECTED,
            redirect_path=destination,
            session=session,
            invite_redemption_attempted=redemption_attempted,
        )
