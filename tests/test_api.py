"""
Tests for the HTTP API.
"""

import json

from fastapi.testclient import TestClient

from company_picker_api.app.core.storage import StorageError
from company_picker_api.app.main import create_app


class TestWelcome:
    """Root endpoint."""

    def test_returns_plain_text(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "Welcome" in response.text


class TestCompanies:
    """GET /companies."""

    def test_returns_catalog(self, client, sample_companies):
        response = client.get("/companies")

        assert response.status_code == 200
        assert response.json() == sample_companies

    def test_versioned_alias(self, client, sample_companies):
        """The same routes are served under /api/v1."""
        assert client.get("/api/v1/companies").json() == sample_companies

    def test_corrupt_catalog_is_server_error(self, settings, data_dir):
        """Unparseable catalog content yields 500, not partial data."""
        data_dir.mkdir(parents=True)
        (data_dir / "companies.json").write_text("{oops", encoding="utf-8")

        with TestClient(create_app(settings)) as client:
            response = client.get("/companies")

        assert response.status_code == 500
        assert response.json() == {"detail": "Server error"}


class TestSelectedCompanies:
    """GET and POST /selected-companies."""

    def test_missing_file_reads_as_empty(self, client, seeded_data_dir):
        """The selection file is created at startup, so reads return []."""
        response = client.get("/selected-companies")

        assert response.status_code == 200
        assert response.json() == []
        assert (seeded_data_dir / "user.json").exists()

    def test_post_then_get_round_trip(self, client, sample_companies):
        selection = [sample_companies[2], sample_companies[0]]

        response = client.post("/selected-companies", json=selection)

        assert response.status_code == 200
        assert response.text == "Selections saved successfully"
        assert client.get("/selected-companies").json() == selection

    def test_post_replaces_previous_selection(self, client, sample_companies):
        client.post("/selected-companies", json=sample_companies)
        client.post("/selected-companies", json=[sample_companies[1]])

        assert client.get("/selected-companies").json() == [sample_companies[1]]

    def test_post_is_stored_verbatim(self, client, seeded_data_dir):
        """The server trusts the client: duplicates and oversize lists are kept."""
        items = [{"id": 1, "name": "Acme", "logo": ""}] * 21

        client.post("/selected-companies", json=items)

        on_disk = json.loads((seeded_data_dir / "user.json").read_text(encoding="utf-8"))
        assert on_disk == items

    def test_post_requires_an_array(self, client):
        response = client.post("/selected-companies", json={"id": 1})

        assert response.status_code == 422

    def test_write_failure_is_server_error(self, client):
        class BrokenStore:
            def save_selection(self, items):
                raise StorageError("disk full", path=None)

        client.app.state.store = BrokenStore()

        response = client.post("/selected-companies", json=[])

        assert response.status_code == 500

    def test_corrupt_selection_is_server_error(self, client, seeded_data_dir):
        (seeded_data_dir / "user.json").write_text("not json", encoding="utf-8")

        assert client.get("/selected-companies").status_code == 500


class TestCors:
    """Cross‑origin access."""

    def test_any_origin_allowed(self, client):
        response = client.get("/companies", headers={"Origin": "http://example.org"})

        assert response.headers["access-control-allow-origin"] == "*"
