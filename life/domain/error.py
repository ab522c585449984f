"""Errors raised by domain services and use cases.

The interface layer maps each class to one status code (see
`life.interface.error`); raise the most specific one that applies.
"""


class DomainError(Exception):
    """Root of every error the API turns into a 4xx response."""


class ValidationError(DomainError):
    """Input is well-formed JSON but breaks a business rule.

    Examples: a taken username, an unknown preference key, a second
    active life phase.
    """


class AuthenticationError(DomainError):
    """The credential store rejected or could not complete a sign-in."""


class AuthenticationFault(AuthenticationError):
    """Sign-in failed for reasons unrelated to what the user sent.

    Timeouts, outages and unusable responses. Callers that show errors to
    the user replace the message with a generic one.
    """


class NotFoundError(DomainError):
    """Row is missing or belongs to another identity.

    The two cases share one message so callers cannot guess at ids they
    do not own.
    """

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
