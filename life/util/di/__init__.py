"""Dependency injection wiring."""

from typing import Type

from life.util.di.application import ProdApplicationProvider
from life.util.di.base import (
    Component,
    ProviderBase,
    components,
    implementation,
    instantiate,
)
from life.util.di.core import ProdConfigProvider
from life.util.di.domain import ProdDomainProvider
from life.util.di.infrastructure import (
    IdentityProvider,
    PersistenceProvider,
    ProdIdentityProvider,
    ProdPersistenceProvider,
)

# Every container is built from this list; order is irrelevant to dishka
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    IdentityProvider,
    PersistenceProvider,
]

__all__ = [
    "Component",
    "IdentityProvider",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdIdentityProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "components",
    "implementation",
    "instantiate",
]
