"""Configuration providers (concrete in every container)."""

from dishka import Scope, provide

from life.config import (
    AuthSettings,
    CredentialStoreSettings,
    DatabaseSettings,
    Settings,
)
from life.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings and their sections.

    Settings are read once per container from the environment and `.env`.
    Components depend on the narrowest section they need, so tests can
    reason about what a component reads.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_credential_store_settings(
        self, settings: Settings
    ) -> CredentialStoreSettings:
        return settings.credential_store

    @provide(scope=Scope.APP)
    def provide_database_settings(self, settings: Settings) -> DatabaseSettings:
        return settings.database
