"""In-memory stand-ins for the identity and persistence components.

Importing this package registers the mock providers as subclasses of their
component bases, which `build_test_container` relies on.
"""

from .container import build_test_container
from .identity import MockIdentityProvider
from .persistence import MockPersistenceProvider

__all__ = [
    "MockIdentityProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
