"""Session cookie helpers shared by the routers.

The session cookie holds the credential store's access token. In
production the frontend and API live on different subdomains, so cookies
are cross-site (`samesite="none"`, secure); in development they are
same-origin.
"""

from fastapi import HTTPException, Response, status

from life.application.usecase.auth import GetCurrentUserRequest, GetCurrentUserUseCase
from life.config import Settings
from life.domain.model import AuthSession, Profile
from life.util.jwt import JWTError

# PKCE verifier only has to survive the round trip through the provider
CODE_VERIFIER_MAX_AGE = 10 * 60


def _cookie_options(settings: Settings) -> dict:
    is_production = settings.is_production
    return {
        "httponly": True,
        "secure": is_production,
        "samesite": "none" if is_production else "lax",
        "domain": settings.auth.cookie_domain if is_production else None,
        "path": "/",
    }


def set_session_cookie(
    response: Response, settings: Settings, session: AuthSession
) -> None:
    """Store the session's access token in the HTTP-only session cookie."""
    response.set_cookie(
        key=settings.auth.session_cookie,
        value=session.access_token,
        max_age=session.expires_in or settings.auth.jwt_expiry_seconds,
        **_cookie_options(settings),
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    """Delete the session cookie (same domain/path as when it was set)."""
    options = _cookie_options(settings)
    response.delete_cookie(
        key=settings.auth.session_cookie,
        domain=options["domain"],
        path=options["path"],
    )


def set_code_verifier_cookie(
    response: Response, settings: Settings, code_verifier: str
) -> None:
    """Keep the PKCE verifier until the callback exchanges the code."""
    response.set_cookie(
        key=settings.auth.code_verifier_cookie,
        value=code_verifier,
        max_age=CODE_VERIFIER_MAX_AGE,
        **_cookie_options(settings),
    )


def clear_code_verifier_cookie(response: Response, settings: Settings) -> None:
    """Delete the PKCE verifier cookie."""
    options = _cookie_options(settings)
    response.delete_cookie(
        key=settings.auth.code_verifier_cookie,
        domain=options["domain"],
        path=options["path"],
    )


async def require_profile(
    get_current_user_use_case: GetCurrentUserUseCase, auth_token: str | None
) -> Profile:
    """Resolve the session cookie to the caller's profile.

    Creates the profile on the first authenticated request.

    Raises:
        HTTPException: 401 if the cookie is missing, invalid or expired
    """
    if not auth_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    try:
        result = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=auth_token)
        )
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )
    return result.profile
