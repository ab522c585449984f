"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from life.util.di import PROVIDERS, Component, components, instantiate


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container with every component mocked except `unmock`.

    Mock implementations register themselves by subclassing the component
    base, so `tests.di` must be imported first (importing this module does
    that). The container can back a `TestClient` app as well as direct
    `container.get` calls.

    Args:
        unmock: Components to run against real infrastructure. Unmocked
            persistence needs Postgres at DATABASE__URL.

    Returns:
        Configured test container

    Raises:
        ValueError: If `unmock` names an unknown component

    Examples:
        # Unit and e2e tests - in-memory repositories, mock credential store
        container = build_test_container()

        # Integration tests - real Postgres
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    known = components(PROVIDERS)

    unknown = unmock - known
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    return make_async_container(
        *instantiate(PROVIDERS, mocked=known - unmock),
        FastapiProvider(),
    )
