"""Container fixtures for service-level tests.

Unit tests run every component in memory. Integration tests unmock
persistence and need a migrated Postgres at DATABASE__URL.
"""

import pytest_asyncio

from life.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Make a fixture yielding a request-scoped container.

    Each test gets a fresh APP container, so in-memory stores start empty.
    With real persistence the request scope is one unit of work: it commits
    when the test finishes cleanly.

    Example:
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_redeem(integration_env):
            repo = await integration_env.get(InviteCodeRepository)
            ...

    Args:
        unmock: Components to run against real infrastructure

    Returns:
        Async pytest fixture
    """

    @pytest_asyncio.fixture
    async def _env():
        container = build_test_container(unmock=unmock)
        try:
            async with container() as request_container:
                yield request_container
        finally:
            await container.close()

    return _env
