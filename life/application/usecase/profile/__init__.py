"""Profile use cases."""

from .check_username import CheckUsernameRequest, CheckUsernameResponse, CheckUsernameUseCase
from .delete_account import DeleteAccountRequest, DeleteAccountResponse, DeleteAccountUseCase
from .update_preferences import (
    UpdatePreferencesRequest,
    UpdatePreferencesResponse,
    UpdatePreferencesUseCase,
)
from .update_username import (
    UpdateUsernameRequest,
    UpdateUsernameResponse,
    UpdateUsernameUseCase,
)

__all__ = [
    "CheckUsernameRequest",
    "CheckUsernameResponse",
    "CheckUsernameUseCase",
    "DeleteAccountRequest",
    "DeleteAccountResponse",
    "DeleteAccountUseCase",
    "UpdatePreferencesRequest",
    "UpdatePreferencesResponse",
    "UpdatePreferencesUseCase",
    "UpdateUsernameRequest",
    "UpdateUsernameResponse",
    "UpdateUsernameUseCase",
]
