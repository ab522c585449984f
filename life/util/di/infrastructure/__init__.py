"""Providers for the mockable components.

The production subclasses are imported with their bases so that
`implementation()` finds them through `__subclasses__()`; mock subclasses
register the same way when `tests.di` is imported.
"""

from .identity import IdentityProvider, ProdIdentityProvider
from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = [
    "IdentityProvider",
    "PersistenceProvider",
    "ProdIdentityProvider",
    "ProdPersistenceProvider",
]
