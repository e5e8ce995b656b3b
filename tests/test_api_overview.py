"""Tests for overview and reference API endpoints."""

from fastapi.testclient import TestClient

from awardops.store.session import StoreError


def seed(store):
    """Seed the store with a small event."""
    store.collections.update(
        {
            "award_ceremonies": [
                {"id": 1, "name": "Opening", "order": 1},
                {"id": 2, "name": "Closing", "order": 2},
            ],
            "award_categories": [
                {"id": 3, "name": "Spirit", "color": "co_danh_du", "type": ["individual"]},
                {"id": 4, "name": "Teamwork", "color": "teal", "type": ["team", "overall"]},
            ],
            "participants": [
                {"id": 5, "first_name": "Ann", "last_name": "Le",
                 "team": {"id": 9, "name": "Owls"}, "nganh": "IT"},
                {"id": 6, "first_name": "Binh", "last_name": None,
                 "team": {"id": 9, "name": "Owls"}},
            ],
            "teams": [{"id": 9, "name": "Owls"}, {"id": 10, "name": "Hawks"}],
            "awards": [
                {"id": 1, "status": "approved", "type": "individual", "ceremony": 1,
                 "category": 3, "participant_nominee": 5, "team_nominee": None,
                 "submitted_at": "2025-03-01T10:00:00Z", "approved_at": "2025-03-01T11:00:00Z",
                 "submitted_by": {"first_name": "Chi", "last_name": "Vo"}},
                {"id": 2, "status": "pending", "type": "team", "ceremony": 2,
                 "category": 4, "participant_nominee": None, "team_nominee": 10,
                 "submitted_at": "2025-03-01T12:00:00Z", "approved_at": None,
                 "submitted_by": None},
                {"id": 3, "status": "approved", "type": "team", "ceremony": 2,
                 "category": 4, "participant_nominee": None, "team_nominee": 9,
                 "submitted_at": "2025-03-01T09:00:00Z", "approved_at": "2025-03-01T13:00:00Z",
                 "submitted_by": None},
            ],
        }
    )


class TestCeremonyOverview:
    """Test GET /api/overview."""

    def test_whole_event_summary(self, client: TestClient, store):
        """Without a ceremony the whole event is summarized."""
        seed(store)
        response = client.get("/api/overview")

        assert response.status_code == 200
        data = response.json()
        assert data["metrics"] == {
            "pending": 1,
            "approved": 2,
            "individualsAwarded": 1,
            "teamsAwarded": 1,
        }
        assert [entry["id"] for entry in data["latestApproved"]] == [3, 1]
        assert data["latestApproved"][1]["submittedBy"] == "Chi Vo"
        assert data["latestPending"][0]["nominee"] == "Hawks"
        assert {"color": "co_danh_du", "count": 1} in data["colorBreakdown"]

    def test_ceremony_filter(self, client, store):
        """ceremonyId restricts the summary to one ceremony."""
        seed(store)
        data = client.get("/api/overview", params={"ceremonyId": 1}).json()
        assert data["metrics"]["approved"] == 1
        assert data["metrics"]["pending"] == 0
        assert store.last_params["filter[ceremony][_eq]"] == "1"

    def test_store_failure_is_500(self, client, store):
        """Store failures surface as a generic error."""
        store.fail_with = StoreError(503, "down")
        response = client.get("/api/overview")
        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to load ceremony summary."


class TestParticipantOverview:
    """Test GET /api/overview/participants."""

    def test_summary(self, client, store):
        """Participant and team leaderboards are built from all three lists."""
        seed(store)
        data = client.get("/api/overview/participants").json()

        assert data["metrics"] == {
            "totalApprovedAwards": 2,
            "participantsAwarded": 1,
            "participantsAwaitingRecognition": 1,
            "teamsAwarded": 1,
            "teamsAwaitingRecognition": 1,
        }
        assert data["participantLeaderboard"][0]["name"] == "Ann Le"
        assert data["participantsPendingRecognition"][0]["name"] == "Binh"
        owls = data["teamLeaderboard"][0]
        assert owls["name"] == "Owls"
        assert owls["participantsRecognized"] == 1
        assert owls["individualAwards"][0]["kind"] == "participant"
        assert data["teamsPendingRecognition"][0]["name"] == "Hawks"
        assert [entry["id"] for entry in data["pendingAwards"]] == [2]
        assert ("list", "participants") in store.calls
        assert ("list", "teams") in store.calls

    def test_any_failure_aborts(self, client, store):
        """No partial summary is returned when a fetch fails."""
        store.fail_with = StoreError(None, "connection refused")
        response = client.get("/api/overview/participants")
        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to load participant/team summary."


class TestReferenceData:
    """Test reference data endpoints."""

    def test_ceremonies(self, client, store):
        """Ceremonies are returned in store order."""
        seed(store)
        data = client.get("/api/ceremonies").json()
        assert [c["name"] for c in data] == ["Opening", "Closing"]

    def test_categories_resolve_colors(self, client, store):
        """Categories carry palette colours; unknown tokens fall back to gray."""
        seed(store)
        data = client.get("/api/categories").json()
        spirit, teamwork = data
        assert spirit["colorHex"] == "#f97316"
        assert spirit["colorLabel"] == "Co Danh Du"
        assert teamwork["color"] == "teal"
        assert teamwork["colorHex"] == "#94a3b8"

    def test_category_types_pass_through(self, client, store):
        """Category types outside the award types are returned unchanged."""
        store.collections["award_categories"] = [
            {"id": 7, "name": "Jury pick", "color": "gold", "type": ["special", "team"]}
        ]
        response = client.get("/api/categories")
        assert response.status_code == 200
        assert response.json()[0]["type"] == ["special", "team"]

    def test_participants(self, client, store):
        """Participants are listed with formatted names and teams."""
        seed(store)
        data = client.get("/api/participants").json()
        assert data[0]["name"] == "Ann Le"
        assert data[0]["team"] == {"id": 9, "name": "Owls"}

    def test_teams(self, client, store):
        """Teams are listed."""
        seed(store)
        assert client.get("/api/teams").json() == [
            {"id": 9, "name": "Owls"},
            {"id": 10, "name": "Hawks"},
        ]

    def test_reference_failure(self, client, store):
        """Store failures on reference data are 500s."""
        store.fail_with = StoreError(401, "Invalid token")
        assert client.get("/api/teams").status_code == 500


class TestAppWiring:
    """Test application setup."""

    def test_health(self, client):
        """Health check responds without touching the store."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_missing_configuration(self, monkeypatch):
        """Without store configuration requests fail with a server error."""
        from awardops.api.app import create_app

        monkeypatch.delenv("DIRECTUS_URL", raising=False)
        monkeypatch.delenv("DIRECTUS_STATIC_TOKEN", raising=False)

        client = TestClient(create_app())
        response = client.get("/api/overview")

        assert response.status_code == 500
        assert response.json()["detail"] == "Content store is not configured."

    def test_main_serves_default_app(self, monkeypatch):
        """The console entry point runs the default app under uvicorn."""
        import uvicorn

        from awardops.api import app as app_module

        served = {}
        monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: served.update(app=app, **kwargs))
        monkeypatch.setenv("AWARDOPS_HOST", "0.0.0.0")
        monkeypatch.setenv("AWARDOPS_PORT", "9001")

        app_module.main()

        assert served == {"app": app_module.app, "host": "0.0.0.0", "port": 9001}
