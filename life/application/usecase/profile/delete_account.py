"""Delete account use case."""

import logfire
from pydantic import BaseModel

from life.domain.error import AuthenticationError
from life.domain.service import AuthService, ProfileService
from life.domain.value import IdentityId


class DeleteAccountRequest(BaseModel):
    """Delete account request."""

    identity_id: IdentityId  # From authenticated user
    access_token: str


class DeleteAccountResponse(BaseModel):
    """Delete account response."""

    success: bool


class DeleteAccountUseCase:
    """Use case for deleting an account and everything it owns.

    The profile row is removed (the store cascades to all owned records),
    then the session is revoked at the credential store. A failed
    revocation does not undo the deletion.
    """

    def __init__(self, profile_service: ProfileService, auth_service: AuthService) -> None:
        """Initialize delete account use case.

        Args:
            profile_service: Profile domain service
            auth_service: Authentication domain service
        """
        self.profile_service = profile_service
        self.auth_service = auth_service

    async def execute(self, request: DeleteAccountRequest) -> DeleteAccountResponse:
        """Delete the caller's account.

        Raises:
            NotFoundError: If the caller has no profile
        """
        await self.profile_service.delete_account(request.identity_id)

        try:
            await self.auth_service.sign_out(request.access_token)
        except AuthenticationError as e:
            logfire.warn(
                "Sign-out after account deletion failed",
                identity_id=str(request.identity_id),
                error=str(e),
            )

        return DeleteAccountResponse(success=True)
