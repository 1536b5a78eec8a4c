# =============================================================================
# tests/test_settings_api.py - Settings Endpoint Tests
# =============================================================================
# Exercises GET/POST /api/settings through the FastAPI app with an
# in-memory key-value store.
#
# Run with: pytest tests/test_settings_api.py -v
# =============================================================================

import json
from datetime import datetime, timedelta, timezone

from app.auth import SETTINGS_WRITE
from core.models import SETTINGS_FIELDS
from lib.clock import FixedClock


class SteppingClock:
    """Advances one second on every read."""

    def __init__(self, start: datetime):
        self.current = start

    def now(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


class BrokenStore:
    def get(self, key):
        raise RuntimeError("KV namespace unavailable")

    def put(self, key, value):
        raise RuntimeError("KV write rejected")


class DenyAll:
    def __init__(self):
        self.seen = []

    def is_allowed(self, request, capability):
        self.seen.append(capability)
        return False


# =============================================================================
# GET /api/settings
# =============================================================================

class TestGetSettings:
    """Tests for reading settings."""

    def test_defaults_before_any_save(self, client):
        """Nothing stored yet: the built-in document, without updated_at."""
        response = client.get("/api/settings")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"]["site_name"] == "GlobalMart"
        assert body["data"]["email"] == "info@example.com"
        assert "updated_at" not in body["data"]

    def test_returns_stored_document_verbatim(self, client, kv_store):
        """The stored JSON comes back exactly: no fields added, unknown keys kept."""
        stored = {"site_name": "Stored", "email": "x@y.z", "legacy_field": "kept"}
        kv_store.put("website_settings", json.dumps(stored))

        data = client.get("/api/settings").json()["data"]

        assert data == stored

    def test_null_and_non_string_values_are_passed_through(self, client, kv_store):
        stored = {"site_name": "Stored", "linkedin": None, "phone": 5551234}
        kv_store.put("website_settings", json.dumps(stored))

        response = client.get("/api/settings")

        assert response.status_code == 200
        assert response.json()["data"] == stored

    def test_non_object_document_is_passed_through(self, client, kv_store):
        kv_store.put("website_settings", "[1, 2]")

        response = client.get("/api/settings")

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": [1, 2]}

    def test_store_failure_is_500(self, make_client, kv_store):
        from app.dependencies import get_key_value_store
        from app.main import app

        client = make_client()
        app.dependency_overrides[get_key_value_store] = lambda: BrokenStore()

        response = client.get("/api/settings")

        assert response.status_code == 500
        assert response.json() == {"error": "KV namespace unavailable"}

    def test_corrupt_document_is_500(self, client, kv_store):
        kv_store.put("website_settings", "{not json")

        response = client.get("/api/settings")

        assert response.status_code == 500
        assert "error" in response.json()


# =============================================================================
# POST /api/settings
# =============================================================================

class TestPostSettings:
    """Tests for saving settings."""

    def test_save_then_read(self, client):
        """Partial body: named fields kept, the rest reset to ''."""
        before = datetime.now(timezone.utc).replace(microsecond=0)

        response = client.post("/api/settings", json={"site_name": "Acme", "email": "a@b.com"})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Settings saved successfully"

        data = client.get("/api/settings").json()["data"]
        assert data["site_name"] == "Acme"
        assert data["email"] == "a@b.com"
        for name in SETTINGS_FIELDS:
            if name not in ("site_name", "email"):
                assert data[name] == "", name

        updated_at = datetime.fromisoformat(data["updated_at"].replace("Z", "+00:00"))
        assert updated_at >= before

    def test_missing_site_name_falls_back(self, client):
        data = client.post("/api/settings", json={"site_name": ""}).json()["data"]
        assert data["site_name"] == "GlobalMart"

    def test_values_are_coerced_to_strings(self, client):
        data = client.post("/api/settings", json={"phone": 5551234, "address": None}).json()["data"]
        assert data["phone"] == "5551234"
        assert data["address"] == ""

    def test_unknown_fields_dropped(self, client):
        data = client.post("/api/settings", json={"site_name": "Acme", "is_admin": True}).json()["data"]
        assert "is_admin" not in data

    def test_updated_at_from_clock(self, make_client):
        client = make_client(clock=FixedClock(datetime(2030, 1, 2, 3, 4, 5, tzinfo=timezone.utc)))

        data = client.post("/api/settings", json={}).json()["data"]

        assert data["updated_at"] == "2030-01-02T03:04:05.000Z"

    def test_repeat_post_differs_only_in_updated_at(self, make_client):
        client = make_client(clock=SteppingClock(datetime(2030, 1, 1, tzinfo=timezone.utc)))
        payload = {"site_name": "Acme", "email": "a@b.com"}

        first = client.post("/api/settings", json=payload).json()["data"]
        second = client.post("/api/settings", json=payload).json()["data"]

        assert first["updated_at"] != second["updated_at"]
        first.pop("updated_at")
        second.pop("updated_at")
        assert first == second

    def test_malformed_json_is_400(self, client):
        response = client.post(
            "/api/settings",
            content=b"{bad json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"].startswith("Invalid request body")

    def test_non_object_json_is_400(self, client):
        response = client.post("/api/settings", json=["site_name", "Acme"])
        assert response.status_code == 400

    def test_store_failure_is_500(self, make_client):
        from app.dependencies import get_key_value_store
        from app.main import app

        client = make_client()
        app.dependency_overrides[get_key_value_store] = lambda: BrokenStore()

        response = client.post("/api/settings", json={"site_name": "Acme"})

        assert response.status_code == 500
        assert response.json() == {"error": "KV write rejected"}

    def test_authorizer_can_deny(self, make_client, kv_store):
        authorizer = DenyAll()
        client = make_client(authorizer=authorizer)

        response = client.post("/api/settings", json={"site_name": "Acme"})

        assert response.status_code == 403
        assert authorizer.seen == [SETTINGS_WRITE]
        assert kv_store.get("website_settings") is None

    def test_reads_are_not_gated(self, make_client):
        client = make_client(authorizer=DenyAll())
        assert client.get("/api/settings").status_code == 200


# =============================================================================
# Routing
# =============================================================================

class TestSettingsRouting:

    def test_other_methods_are_json_404(self, client):
        for method in ("PUT", "DELETE", "PATCH"):
            response = client.request(method, "/api/settings")
            assert response.status_code == 404
            assert response.json() == {"error": "Not found"}

    def test_unknown_api_path_is_json_404(self, client):
        response = client.get("/api/settings/extra")

        assert response.status_code == 404
        assert response.json() == {"error": "Not found"}

    def test_cors_headers_on_api_responses(self, client):
        response = client.get("/api/settings", headers={"Origin": "https://partner.example"})
        assert response.headers["access-control-allow-origin"] == "*"
