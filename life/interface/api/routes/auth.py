"""Authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Response, status
from fastapi.responses import RedirectResponse
from pydantic import BaseModel, Field

from life.application.usecase.auth import (
    CompleteSignInRequest,
    CompleteSignInUseCase,
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    SendMagicLinkRequest,
    SendMagicLinkUseCase,
    SignInStage,
    SignUpWithEmailRequest,
    SignUpWithEmailUseCase,
    StartOAuthSignInRequest,
    StartOAuthSignInUseCase,
)
from life.config import Settings
from life.domain.error import AuthenticationError
from life.domain.model import Profile
from life.domain.service import AuthService
from life.interface.api.session import (
    clear_code_verifier_cookie,
    clear_session_cookie,
    set_code_verifier_cookie,
    set_session_cookie,
)
from life.util.jwt import JWTError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class InitiateLoginRequest(BaseModel):
    """Initiate OAuth login request."""

    provider: str | None = None  # Defaults to the configured provider
    invite_code: str | None = None
    next: str | None = None


class InitiateLoginResponse(BaseModel):
    """Initiate login response."""

    authorization_url: str


class EmailSignUpRequest(BaseModel):
    """Email/password sign-up request."""

    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=6)
    invite_code: str


class EmailSignInRequest(BaseModel):
    """Email/password sign-in request."""

    email: str
    password: str


class MagicLinkRequest(BaseModel):
    """Magic link request."""

    email: str = Field(min_length=3, max_length=255)
    invite_code: str | None = None
    next: str | None = None


class SignInResponse(BaseModel):
    """Outcome of a sign-in started from the API."""

    success: bool
    error: str | None = None
    confirmation_required: bool = False


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


class AuthStatusResponse(BaseModel):
    """Response for checking authentication status.

    Used by /auth/me to return the current profile if authenticated,
    or indicate unauthenticated state without raising an error.
    """

    authenticated: bool
    profile: Profile | None = None


@router.post("/login", response_model=InitiateLoginResponse)
async def initiate_login(
    request: InitiateLoginRequest,
    response: Response,
    start_use_case: FromDishka[StartOAuthSignInUseCase],
    settings: FromDishka[Settings],
) -> InitiateLoginResponse:
    """Start an OAuth sign-in.

    A supplied invite code is validated first; a bad code is rejected with
    400 and the reason. On success the PKCE verifier is kept in an
    HTTP-only cookie for the callback.

    Example:
        POST /auth/login
        {"provider": "google", "invite_code": "abc123", "next": "/journal"}

        Response:
        {"authorization_url": "https://.../auth/v1/authorize?provider=google&..."}
    """
    result = await start_use_case.execute(
        StartOAuthSignInRequest(
            provider=request.provider,
            invite_code=request.invite_code,
            next=request.next,
        )
    )
    if result.error:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.error)

    set_code_verifier_cookie(response, settings, result.code_verifier)
    return InitiateLoginResponse(authorization_url=result.authorization_url)


@router.get("/callback")
async def auth_callback(
    complete_use_case: FromDishka[CompleteSignInUseCase],
    settings: FromDishka[Settings],
    code: str | None = None,
    invite: str | None = None,
    next: str | None = None,
    error: str | None = None,
    error_description: str | None = None,
    auth_code_verifier: str | None = Cookie(default=None),
):
    """Handle the OAuth / magic-link callback.

    Exchanges the code for a session, redeems the invite carried through
    the flow, sets the session cookie and redirects to the frontend. Every
    failure redirects to the sign-in page with a readable message.

    Example:
        GET /auth/callback?code=abc&invite=ABC123&next=/journal

        Redirects to: {frontend_url}/journal
        Sets cookie: auth_token
    """
    outcome = await complete_use_case.execute(
        CompleteSignInRequest(
            code=code,
            invite=invite,
            next=next,
            error=error,
            error_description=error_description,
            code_verifier=auth_code_verifier,
        )
    )
    logger.info(f"Sign-in callback finished: stage={outcome.stage.value}")

    redirect_response = RedirectResponse(
        url=f"{settings.api.frontend_url}{outcome.redirect_path}",
        status_code=status.HTTP_302_FOUND,
    )
    clear_code_verifier_cookie(redirect_response, settings)

    if outcome.stage == SignInStage.REDIRECTED and outcome.session:
        set_session_cookie(redirect_response, settings, outcome.session)

    return redirect_response


@router.post("/signup", response_model=SignInResponse)
async def sign_up(
    request: EmailSignUpRequest,
    response: Response,
    sign_up_use_case: FromDishka[SignUpWithEmailUseCase],
    settings: FromDishka[Settings],
) -> SignInResponse:
    """Create an email/password account with an invite code.

    Sets the session cookie when the credential store signs the new
    identity in straight away.
    """
    result = await sign_up_use_case.execute(
        SignUpWithEmailRequest(
            email=request.email,
            password=request.password,
            invite_code=request.invite_code,
        )
    )
    if not result.success:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.error)

    if result.session:
        set_session_cookie(response, settings, result.session)
    return SignInResponse(
        success=True, confirmation_required=result.confirmation_required
    )


@router.post("/signin", response_model=SignInResponse)
async def sign_in(
    request: EmailSignInRequest,
    response: Response,
    auth_service: FromDishka[AuthService],
    settings: FromDishka[Settings],
) -> SignInResponse:
    """Sign in with email and password."""
    session = await auth_service.sign_in_with_password(request.email, request.password)
    set_session_cookie(response, settings, session)
    return SignInResponse(success=True)


@router.post("/magic-link", response_model=SignInResponse)
async def magic_link(
    request: MagicLinkRequest,
    response: Response,
    magic_link_use_case: FromDishka[SendMagicLinkUseCase],
    settings: FromDishka[Settings],
) -> SignInResponse:
    """Email a one-time sign-in link."""
    result = await magic_link_use_case.execute(
        SendMagicLinkRequest(
            email=request.email, invite_code=request.invite_code, next=request.next
        )
    )
    if not result.success:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.error)

    set_code_verifier_cookie(response, settings, result.code_verifier)
    return SignInResponse(success=True)


@router.post("/anonymous", response_model=SignInResponse)
async def anonymous_sign_in(
    response: Response,
    auth_service: FromDishka[AuthService],
    settings: FromDishka[Settings],
) -> SignInResponse:
    """Start an anonymous session."""
    session = await auth_service.sign_in_anonymously()
    set_session_cookie(response, settings, session)
    return SignInResponse(success=True)


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    auth_service: FromDishka[AuthService],
    settings: FromDishka[Settings],
    auth_token: str | None = Cookie(default=None),
) -> LogoutResponse:
    """Revoke the session and clear the cookie.

    The cookie is cleared even if the credential store cannot be reached.
    """
    if auth_token:
        try:
            await auth_service.sign_out(auth_token)
        except AuthenticationError as e:
            logger.warning(f"Remote sign-out failed: {e}")

    clear_session_cookie(response, settings)
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=AuthStatusResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> AuthStatusResponse:
    """Get the current profile if authenticated.

    Safe to call without authentication - returns authenticated=false
    instead of raising. The profile is created on first access.
    """
    if not auth_token:
        return AuthStatusResponse(authenticated=False)

    try:
        result = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=auth_token)
        )
        return AuthStatusResponse(authenticated=True, profile=result.profile)

    except JWTError:
        # Invalid or expired token - expected, not an error
        return AuthStatusResponse(authenticated=False)
