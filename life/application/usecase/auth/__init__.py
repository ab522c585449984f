"""Authentication use cases."""

from .complete_sign_in import (
    CompleteSignInRequest,
    CompleteSignInResponse,
    CompleteSignInUseCase,
    SignInStage,
)
from .get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from .magic_link import SendMagicLinkRequest, SendMagicLinkResponse, SendMagicLinkUseCase
from .sign_up import SignUpWithEmailRequest, SignUpWithEmailResponse, SignUpWithEmailUseCase
from .start_sign_in import (
    StartOAuthSignInRequest,
    StartOAuthSignInResponse,
    StartOAuthSignInUseCase,
)

__all__ = [
    "CompleteSignInRequest",
    "CompleteSignInResponse",
    "CompleteSignInUseCase",
    "GetCurrentUserRequest",
    "GetCurrentUserResponse",
    "GetCurrentUserUseCase",
    "SendMagicLinkRequest",
    "SendMagicLinkResponse",
    "SendMagicLinkUseCase",
    "SignInStage",
    "SignUpWithEmailRequest",
    "SignUpWithEmailResponse",
    "SignUpWithEmailUseCase",
    "StartOAuthSignInRequest",
    "StartOAuthSignInResponse",
    "StartOAuthSignInUseCase",
]
