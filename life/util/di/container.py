"""Production DI container and its FastAPI hookup."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from life.util.di import PROVIDERS, instantiate


def create_container() -> AsyncContainer:
    """Build the production container.

    Nothing connects here: the engine and the credential store HTTP client
    are APP-scoped and built on first resolution, then shared until
    `close()`.
    """
    return make_async_container(
        *instantiate(PROVIDERS, mocked=set()),
        FastapiProvider(),
    )


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach a container to an app so `FromDishka` parameters resolve.

    The app does not own the container; whoever built it closes it.
    """
    setup_dishka(container, app)
