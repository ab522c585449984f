"""End-to-end tests for sign-in flows."""

from tests.conftest import make_invite_code
from tests.e2e.conftest import FRONTEND_URL, seed_invite_code, stored_invite_code


class TestCallback:
    """Tests for GET /auth/callback."""

    def test_provider_error_redirects_with_message(self, client):
        """A cancelled sign-in lands on the sign-in page with the reason."""
        response = client.get(
            "/auth/callback?error=access_denied&error_description=User+cancelled",
            follow_redirects=False,
        )

        assert response.status_code == 302
        assert response.headers["location"] == f"{FRONTEND_URL}/auth?error=User%20cancelled"
        assert "auth_token" not in response.cookies

    def test_code_without_invite_signs_in(self, client):
        """A good code with no invite goes to the dashboard with a session."""
        response = client.get(
            "/auth/callback", params={"code": "good-code"}, follow_redirects=False
        )

        assert response.status_code == 302
        assert response.headers["location"] == f"{FRONTEND_URL}/dashboard"
        assert response.cookies.get("auth_token")

        me = client.get("/auth/me")
        assert me.json()["authenticated"] is True
        assert me.json()["profile"]["email"] == "good-code@example.com"

    def test_code_with_invite_consumes_it(self, client, container):
        """The invite on the callback URL is redeemed once."""
        seed_invite_code(client, container, make_invite_code("ABC123", max_uses=1))

        response = client.get(
            "/auth/callback",
            params={"code": "good-code", "invite": "ABC123", "next": "/journal"},
            follow_redirects=False,
        )

        assert response.headers["location"] == f"{FRONTEND_URL}/journal"
        assert stored_invite_code(client, container, "ABC123").current_uses == 1
        validation = client.post("/invites/validate", json={"code": "abc123"})
        assert validation.json() == {
            "valid": False,
            "error": "Invite code has reached maximum uses",
        }

    def test_bad_invite_does_not_block_sign_in(self, client):
        """An unknown invite is ignored after authentication."""
        response = client.get(
            "/auth/callback",
            params={"code": "good-code", "invite": "NOPE", "next": "/journal"},
            follow_redirects=False,
        )

        assert response.headers["location"] == f"{FRONTEND_URL}/journal"
        assert response.cookies.get("auth_token")

    def test_rejected_code(self, client):
        """A rejected exchange shows the store's message."""
        response = client.get(
            "/auth/callback", params={"code": "invalid-code"}, follow_redirects=False
        )

        assert response.headers["location"] == (
            f"{FRONTEND_URL}/auth?error=Invalid%20authorization%20code"
        )
        assert "auth_token" not in response.cookies


class TestLogin:
    """Tests for POST /auth/login."""

    def test_login_returns_authorization_url(self, client, container):
        """A valid invite yields a provider URL and keeps the verifier."""
        seed_invite_code(client, container, make_invite_code("ABC123"))

        response = client.post(
            "/auth/login", json={"provider": "google", "invite_code": "abc123"}
        )

        assert response.status_code == 200
        assert "mock=true" in response.json()["authorization_url"]
        assert response.cookies.get("auth_code_verifier")

    def test_login_with_bad_invite(self, client):
        """A bad invite is a 400 with the reason."""
        response = client.post("/auth/login", json={"invite_code": "NOPE"})

        assert response.status_code == 400
        assert response.json() == {"detail": "Invalid invite code"}


class TestEmailAuth:
    """Tests for email sign-up, sign-in and logout."""

    def test_sign_up_then_sign_in(self, client, container):
        """An invited sign-up can later sign in with the same password."""
        seed_invite_code(client, container, make_invite_code("OPEN"))

        sign_up = client.post(
            "/auth/signup",
            json={"email": "ada@example.com", "password": "secret1", "invite_code": "open"},
        )
        client.cookies.clear()
        sign_in = client.post(
            "/auth/signin", json={"email": "ada@example.com", "password": "secret1"}
        )

        assert sign_up.status_code == 200
        assert sign_up.json()["success"] is True
        assert sign_in.status_code == 200
        assert client.get("/auth/me").json()["authenticated"] is True

    def test_sign_up_without_valid_invite(self, client):
        """Sign-up needs a valid invite."""
        response = client.post(
            "/auth/signup",
            json={"email": "ada@example.com", "password": "secret1", "invite_code": "NOPE"},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid invite code"

    def test_wrong_password(self, client):
        """Rejected credentials are a 400 with the store's message."""
        response = client.post(
            "/auth/signin", json={"email": "nobody@example.com", "password": "secret1"}
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid login credentials"

    def test_logout_clears_session(self, client):
        """After logout the caller is signed out."""
        client.post("/auth/anonymous")
        assert client.get("/auth/me").json()["authenticated"] is True

        response = client.post("/auth/logout")

        assert response.json()["success"] is True
        assert client.get("/auth/me").json() == {"authenticated": False, "profile": None}

    def test_me_with_garbage_cookie(self, client):
        """A bad cookie reads as signed out, not as an error."""
        client.cookies = {"auth_token": "garbage"}

        response = client.get("/auth/me")

        assert response.status_code == 200
        assert response.json()["authenticated"] is False
