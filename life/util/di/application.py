"""Application layer DI providers."""

from dishka import Scope, provide

from life.application.usecase.auth import (
    CompleteSignInUseCase,
    GetCurrentUserUseCase,
    SendMagicLinkUseCase,
    SignUpWithEmailUseCase,
    StartOAuthSignInUseCase,
)
from life.application.usecase.export import ExportDataUseCase
from life.application.usecase.invite import ValidateInviteCodeUseCase
from life.application.usecase.profile import (
    CheckUsernameUseCase,
    DeleteAccountUseCase,
    UpdatePreferencesUseCase,
    UpdateUsernameUseCase,
)
from life.config import Settings
from life.domain.service import (
    AuthService,
    DecisionService,
    InviteCodeService,
    JournalService,
    JWTService,
    LifePhaseService,
    PrivateProfileService,
    ProfileService,
)
from life.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_complete_sign_in_use_case(
        self,
        auth_service: AuthService,
        invite_code_service: InviteCodeService,
        settings: Settings,
    ) -> CompleteSignInUseCase:
        """Provide complete sign-in (callback) use case."""
        return CompleteSignInUseCase(
            auth_service=auth_service,
            invite_code_service=invite_code_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_start_oauth_sign_in_use_case(
        self,
        auth_service: AuthService,
        invite_code_service: InviteCodeService,
        settings: Settings,
    ) -> StartOAuthSignInUseCase:
        """Provide start OAuth sign-in use case."""
        return StartOAuthSignInUseCase(
            auth_service=auth_service,
            invite_code_service=invite_code_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_sign_up_with_email_use_case(
        self,
        auth_service: AuthService,
        invite_code_service: InviteCodeService,
        settings: Settings,
    ) -> SignUpWithEmailUseCase:
        """Provide email sign-up use case."""
        return SignUpWithEmailUseCase(
            auth_service=auth_service,
            invite_code_service=invite_code_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_send_magic_link_use_case(
        self,
        auth_service: AuthService,
        invite_code_service: InviteCodeService,
        settings: Settings,
    ) -> SendMagicLinkUseCase:
        """Provide send magic link use case."""
        return SendMagicLinkUseCase(
            auth_service=auth_service,
            invite_code_service=invite_code_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, jwt_service: JWTService, profile_service: ProfileService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            jwt_service=jwt_service, profile_service=profile_service
        )

    # Invite use cases
    @provide(scope=Scope.REQUEST)
    def get_validate_invite_code_use_case(
        self, invite_code_service: InviteCodeService
    ) -> ValidateInviteCodeUseCase:
        """Provide validate invite code use case."""
        return ValidateInviteCodeUseCase(invite_code_service=invite_code_service)

    # Profile use cases
    @provide(scope=Scope.REQUEST)
    def get_check_username_use_case(
        self, profile_service: ProfileService
    ) -> CheckUsernameUseCase:
        """Provide check username use case."""
        return CheckUsernameUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_update_username_use_case(
        self, profile_service: ProfileService
    ) -> UpdateUsernameUseCase:
        """Provide update username use case."""
        return UpdateUsernameUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_update_preferences_use_case(
        self, profile_service: ProfileService
    ) -> UpdatePreferencesUseCase:
        """Provide update preferences use case."""
        return UpdatePreferencesUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_account_use_case(
        self, profile_service: ProfileService, auth_service: AuthService
    ) -> DeleteAccountUseCase:
        """Provide delete account use case."""
        return DeleteAccountUseCase(
            profile_service=profile_service, auth_service=auth_service
        )

    # Export use cases
    @provide(scope=Scope.REQUEST)
    def get_export_data_use_case(
        self,
        decision_service: DecisionService,
        journal_service: JournalService,
        life_phase_service: LifePhaseService,
        private_profile_service: PrivateProfileService,
    ) -> ExportDataUseCase:
        """Provide export data use case."""
        return ExportDataUseCase(
            decision_service=decision_service,
            journal_service=journal_service,
            life_phase_service=life_phase_service,
            private_profile_service=private_profile_service,
        )
