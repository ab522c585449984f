"""End-to-end tests for identity-scoped data routes."""

from tests.e2e.conftest import sign_in_anonymously


class TestAuthentication:
    """Data routes require a session."""

    def test_unauthenticated_requests_rejected(self, client):
        """Every data route answers 401 without a session."""
        for method, path in [
            ("get", "/decisions"),
            ("get", "/journal"),
            ("get", "/phases"),
            ("get", "/private-profile"),
            ("get", "/export"),
        ]:
            response = getattr(client, method)(path)
            assert response.status_code == 401, path

    def test_unauthenticated_writes_rejected(self, client):
        """Well-formed writes without a session answer 401."""
        for method, path, body in [
            ("patch", "/profile/preferences", {}),
            ("post", "/decisions", {"title": "Move", "confidence_level": 3}),
            ("put", "/profile/username", {"username": "ada_l"}),
        ]:
            response = client.request(method.upper(), path, json=body)
            assert response.status_code == 401, path


class TestDecisions:
    """Tests for /decisions."""

    def test_decision_lifecycle(self, client):
        """Create, reflect, update, list and delete a decision."""
        sign_in_anonymously(client)

        created = client.post(
            "/decisions", json={"title": "Move to Lisbon", "confidence_level": 4}
        )
        decision_id = created.json()["id"]
        reflection = client.post(
            f"/decisions/{decision_id}/reflections", json={"content": "No regrets"}
        )
        updated = client.patch(f"/decisions/{decision_id}", json={"category": "place"})
        listed = client.get("/decisions")
        deleted = client.delete(f"/decisions/{decision_id}")
        missing = client.get(f"/decisions/{decision_id}")

        assert created.status_code == 201
        assert reflection.status_code == 201
        assert updated.json()["category"] == "place"
        assert updated.json()["confidence_level"] == 4
        assert [r["content"] for r in listed.json()[0]["reflections"]] == ["No regrets"]
        assert deleted.status_code == 204
        assert missing.status_code == 404

    def test_invalid_confidence(self, client):
        """Out-of-range confidence is rejected by request validation."""
        sign_in_anonymously(client)

        response = client.post("/decisions", json={"title": "Hmm", "confidence_level": 9})

        assert response.status_code == 422

    def test_other_identity_gets_404(self, client):
        """Another identity cannot see or touch a decision."""
        owner_token = sign_in_anonymously(client)
        decision_id = client.post(
            "/decisions", json={"title": "Private", "confidence_level": 3}
        ).json()["id"]

        sign_in_anonymously(client)
        read = client.get(f"/decisions/{decision_id}")
        patched = client.patch(f"/decisions/{decision_id}", json={"title": "Mine"})
        deleted = client.delete(f"/decisions/{decision_id}")
        listed = client.get("/decisions")

        assert read.status_code == 404
        assert patched.status_code == 404
        assert deleted.status_code == 404
        assert listed.json() == []

        client.cookies = {"auth_token": owner_token}
        assert client.get(f"/decisions/{decision_id}").json()["title"] == "Private"


class TestJournal:
    """Tests for /journal."""

    def test_entry_lifecycle(self, client):
        """Create, update and delete an entry."""
        sign_in_anonymously(client)

        created = client.post("/journal", json={"content": "Quiet day.", "mood": "calm"})
        entry_id = created.json()["id"]
        updated = client.patch(f"/journal/{entry_id}", json={"mood": "grateful"})
        deleted = client.delete(f"/journal/{entry_id}")

        assert created.status_code == 201
        assert updated.json()["mood"] == "grateful"
        assert updated.json()["content"] == "Quiet day."
        assert deleted.status_code == 204
        assert client.get("/journal").json() == []

    def test_unknown_mood(self, client):
        """Moods outside the fixed set are rejected."""
        sign_in_anonymously(client)

        response = client.post("/journal", json={"content": "Hmm", "mood": "furious"})

        assert response.status_code == 422


class TestPhases:
    """Tests for /phases."""

    def test_single_active_phase(self, client):
        """Activating a second phase deactivates the first."""
        sign_in_anonymously(client)

        first = client.post(
            "/phases", json={"name": "Berlin", "start_date": "2020-01-01", "is_active": True}
        ).json()
        second = client.post(
            "/phases", json={"name": "Lisbon", "start_date": "2023-01-01"}
        ).json()
        client.patch(f"/phases/{second['id']}", json={"is_active": True})

        active = client.get("/phases/active").json()
        phases = client.get("/phases").json()

        assert active["id"] == second["id"]
        assert [p["id"] for p in phases if p["is_active"]] == [second["id"]]
        assert client.get(f"/phases/{first['id']}").json()["is_active"] is False

    def test_no_active_phase(self, client):
        """Without an active phase the endpoint returns null."""
        sign_in_anonymously(client)

        response = client.get("/phases/active")

        assert response.status_code == 200
        assert response.json() is None

    def test_goals(self, client):
        """Goals can be added to a phase and completed."""
        sign_in_anonymously(client)
        phase = client.post(
            "/phases", json={"name": "Berlin", "start_date": "2020-01-01"}
        ).json()

        goal = client.post(
            f"/phases/{phase['id']}/goals", json={"title": "Learn German"}
        ).json()
        completed = client.patch(f"/phases/goals/{goal['id']}", json={"status": "completed"})
        fetched = client.get(f"/phases/{phase['id']}").json()

        assert goal["status"] == "active"
        assert completed.json()["status"] == "completed"
        assert [g["status"] for g in fetched["goals"]] == ["completed"]


class TestProfile:
    """Tests for /profile and /private-profile."""

    def test_username_flow(self, client):
        """A claimed username is no longer available to others."""
        sign_in_anonymously(client)

        before = client.get("/profile/username/available", params={"username": "ada_l"})
        claimed = client.put("/profile/username", json={"username": "Ada_L"})
        own_check = client.get("/profile/username/available", params={"username": "ada_l"})
        client.cookies.clear()
        other_check = client.get("/profile/username/available", params={"username": "ADA_L"})

        assert before.json() == {"available": True}
        assert claimed.json() == {"success": True, "error": None}
        assert own_check.json() == {"available": True}
        assert other_check.json() == {"available": False}

    def test_taken_username(self, client):
        """Claiming a taken name reports it."""
        sign_in_anonymously(client)
        client.put("/profile/username", json={"username": "ada_l"})
        sign_in_anonymously(client)

        response = client.put("/profile/username", json={"username": "ADA_L"})

        assert response.json() == {"success": False, "error": "Username is already taken"}

    def test_preferences(self, client):
        """Preferences merge partial updates."""
        sign_in_anonymously(client)

        client.patch("/profile/preferences", json={"reminder_enabled": True})
        response = client.patch("/profile/preferences", json={"theme": "dark"})

        assert response.status_code == 200
        assert response.json()["preferences"] == {
            "theme": "dark",
            "reminder_enabled": True,
            "reminder_time": None,
        }

    def test_bad_reminder_time(self, client):
        """Domain validation failures are a 400."""
        sign_in_anonymously(client)

        response = client.patch("/profile/preferences", json={"reminder_time": "9am"})

        assert response.status_code == 400

    def test_private_profile(self, client):
        """The private profile is empty until written, then replaced."""
        sign_in_anonymously(client)

        empty = client.get("/private-profile")
        saved = client.put(
            "/private-profile",
            json={"values": ["care"], "joys": ["tea"], "remembered_as": "Present"},
        )
        fetched = client.get("/private-profile")

        assert empty.json() is None
        assert saved.status_code == 200
        assert fetched.json()["joys"] == ["tea"]

    def test_delete_account(self, client):
        """Deleting the account clears the session cookie."""
        sign_in_anonymously(client)

        response = client.delete("/profile")

        assert response.status_code == 204
        assert client.get("/auth/me").json()["authenticated"] is False


class TestExport:
    """Tests for /export."""

    def test_export_download(self, client):
        """The export is a JSON attachment of the caller's records."""
        sign_in_anonymously(client)
        client.post("/journal", json={"content": "Dear diary"})

        response = client.get("/export")

        assert response.status_code == 200
        assert response.headers["content-disposition"].startswith(
            'attachment; filename="life-export-'
        )
        body = response.json()
        assert [e["content"] for e in body["journal_entries"]] == ["Dear diary"]
        assert body["decisions"] == []
        assert "exported_at" in body
