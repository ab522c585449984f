"""Domain layer DI providers."""

from dishka import Scope, provide

from life.config import AuthSettings
from life.domain.repository import (
    DecisionRepository,
    InviteCodeRepository,
    JournalEntryRepository,
    LifePhaseRepository,
    PrivateProfileRepository,
    ProfileRepository,
)
from life.domain.service import (
    AuthService,
    CredentialStore,
    DecisionService,
    InviteCodeService,
    JournalService,
    JWTService,
    LifePhaseService,
    PrivateProfileService,
    ProfileService,
)
from life.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(self, credential_store: CredentialStore) -> AuthService:
        """Provide authentication domain service."""
        return AuthService(credential_store=credential_store)

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_invite_code_service(
        self, invite_code_repository: InviteCodeRepository
    ) -> InviteCodeService:
        """Provide invite code domain service."""
        return InviteCodeService(invite_code_repository=invite_code_repository)

    @provide
    def get_profile_service(
        self, profile_repository: ProfileRepository
    ) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(profile_repository=profile_repository)

    @provide
    def get_decision_service(
        self, decision_repository: DecisionRepository
    ) -> DecisionService:
        """Provide decision domain service."""
        return DecisionService(decision_repository=decision_repository)

    @provide
    def get_journal_service(
        self, journal_entry_repository: JournalEntryRepository
    ) -> JournalService:
        """Provide journal domain service."""
        return JournalService(journal_entry_repository=journal_entry_repository)

    @provide
    def get_life_phase_service(
        self, life_phase_repository: LifePhaseRepository
    ) -> LifePhaseService:
        """Provide life phase domain service."""
        return LifePhaseService(life_phase_repository=life_phase_repository)

    @provide
    def get_private_profile_service(
        self, private_profile_repository: PrivateProfileRepository
    ) -> PrivateProfileService:
        """Provide private profile domain service."""
        return PrivateProfileService(
            private_profile_repository=private_profile_repository
        )
