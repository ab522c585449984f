"""Base classes for dependency injection providers.

Infrastructure that talks to the outside world (Postgres, the credential
store) is a mockable component: an abstract provider class with exactly one
production and one mock subclass. Everything else is a concrete provider
used as-is in every container.
"""

from typing import ClassVar, Iterable, Literal, Type

from dishka import Provider

Component = Literal["identity", "persistence"]


class ProviderBase(Provider):
    """Base for all DI providers.

    Attributes:
        __mock_component__: Component name on mockable bases, None on
            concrete providers
        __is_mock__: True on the mock implementation of a component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False


def is_mockable(base: Type[ProviderBase]) -> bool:
    """Whether a provider is a component base with implementations."""
    return bool(base.__subclasses__())


def components(providers: Iterable[Type[ProviderBase]]) -> set[Component]:
    """Names of the mockable components among providers."""
    return {
        base.__mock_component__
        for base in providers
        if is_mockable(base) and base.__mock_component__
    }


def implementation(base: Type[ProviderBase], mock: bool) -> Type[ProviderBase]:
    """Pick the production or mock implementation of a component.

    Concrete providers are returned unchanged.

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    if not is_mockable(base):
        return base

    for candidate in base.__subclasses__():
        if candidate.__is_mock__ == mock:
            return candidate

    kind = "mock" if mock else "production"
    raise ValueError(f"No {kind} implementation for {base.__mock_component__}")


def instantiate(
    providers: Iterable[Type[ProviderBase]], mocked: set[Component]
) -> list[ProviderBase]:
    """Instantiate providers, mocking the named components.

    Settings come from the container itself, so every provider is built
    without arguments.
    """
    return [
        implementation(base, mock=base.__mock_component__ in mocked)()
        for base in providers
    ]
