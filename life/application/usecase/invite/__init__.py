"""Invite code use cases."""

from .validate_invite_code import (
    ValidateInviteCodeRequest,
    ValidateInviteCodeResponse,
    ValidateInviteCodeUseCase,
)

__all__ = [
    "ValidateInviteCodeRequest",
    "ValidateInviteCodeResponse",
    "ValidateInviteCodeUseCase",
]
