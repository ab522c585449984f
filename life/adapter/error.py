"""Errors raised by adapters to external services."""

from life.domain.error import AuthenticationError, AuthenticationFault


class CredentialStoreError(AuthenticationError):
    """The credential store rejected a request or could not be reached.

    The message is shown to the user as-is, so it never includes response
    bodies beyond the store's own error text.

    Attributes:
        status_code: HTTP status the store answered with, None when no
            response arrived
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class CredentialStoreFault(CredentialStoreError, AuthenticationFault):
    """The store was unreachable, timed out or sent a response we cannot use.

    Unlike a rejection, the message carries no information about the user's
    request, and the callback reports these as a generic failure.
    """
