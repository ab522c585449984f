"""Credential store infrastructure providers."""

from collections.abc import AsyncIterator

import httpx
from dishka import Scope, provide

from life.adapter.identity import HostedCredentialStoreClient
from life.config import CredentialStoreSettings, Settings
from life.domain.service import CredentialStore
from life.util.di.base import ProviderBase
from life.util.error import ConfigurationError
from life.util.observability import instrument_httpx

DEFAULT_ANON_KEY = "CHANGE_ME_IN_PRODUCTION"


class IdentityProvider(ProviderBase):
    """Credential store component base."""

    __mock_component__ = "identity"


class ProdIdentityProvider(IdentityProvider):
    """Production credential store provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_http_client(
        self, settings: CredentialStoreSettings
    ) -> AsyncIterator[httpx.AsyncClient]:
        """Provide the shared HTTP client for the credential store.

        Created on first use and closed when the container closes. Its
        timeout bounds every outbound auth call.
        """
        async with httpx.AsyncClient(timeout=settings.timeout_seconds) as client:
            instrument_httpx(client)
            yield client

    @provide(scope=Scope.APP)
    def get_credential_store(
        self, http_client: httpx.AsyncClient, settings: Settings
    ) -> CredentialStore:
        """Provide the hosted credential store client.

        Raises:
            ConfigurationError: If production runs with the placeholder API key
        """
        if settings.is_production and settings.credential_store.anon_key == DEFAULT_ANON_KEY:
            raise ConfigurationError("CREDENTIAL_STORE__ANON_KEY")

        return HostedCredentialStoreClient(
            http_client=http_client, settings=settings.credential_store
        )
