"""Fixtures for end-to-end API tests."""

import pytest
from fastapi.testclient import TestClient

from life.domain.model import InviteCode
from life.domain.repository import InviteCodeRepository
from life.domain.value import InviteCodeValue
from life.interface.api.app import create_app
from tests.di import build_test_container

FRONTEND_URL = "http://localhost:3000"


@pytest.fixture
def container():
    """Fully mocked container shared by every request of one test."""
    return build_test_container()


@pytest.fixture
def client(container):
    """Test client for an app wired to the mocked container."""
    with TestClient(create_app(container=container)) as test_client:
        yield test_client
        test_client.portal.call(container.close)


def seed_invite_code(client: TestClient, container, invite_code: InviteCode) -> None:
    """Store an invite code through the app's own repository."""

    async def _save():
        async with container() as request_container:
            repo = await request_container.get(InviteCodeRepository)
            await repo.save(invite_code)

    client.portal.call(_save)


def stored_invite_code(client: TestClient, container, code: str) -> InviteCode | None:
    """Read an invite code back from the app's repository."""

    async def _find():
        async with container() as request_container:
            repo = await request_container.get(InviteCodeRepository)
            return await repo.find_active_by_code(InviteCodeValue(code))

    return client.portal.call(_find)


def sign_in_anonymously(client: TestClient) -> str:
    """Start an anonymous session and return its access token."""
    response = client.post("/auth/anonymous")
    assert response.status_code == 200
    return response.cookies["auth_token"]
