"""Hosted credential store adapter."""

from .client import (
    CredentialStoreClient,
    HostedCredentialStoreClient,
    MockCredentialStoreClient,
)

__all__ = [
    "CredentialStoreClient",
    "HostedCredentialStoreClient",
    "MockCredentialStoreClient",
]
