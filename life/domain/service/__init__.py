"""Domain services."""

from .auth_service import AuthService, CredentialStore
from .base import Service
from .decision_service import DecisionService
from .invite_code_service import InviteCodeService, InviteCodeValidation
from .journal_service import JournalService
from .jwt_service import JWTService
from .life_phase_service import LifePhaseService
from .private_profile_service import PrivateProfileService
from .profile_service import ProfileService, UsernameUpdate

__all__ = [
    "AuthService",
    "CredentialStore",
    "DecisionService",
    "InviteCodeService",
    "InviteCodeValidation",
    "JournalService",
    "JWTService",
    "LifePhaseService",
    "PrivateProfileService",
    "ProfileService",
    "Service",
    "UsernameUpdate",
]
