"""Route tests for the plain record collections.

These run against a real ConferenceStore installed through bootstrap, so
the whole route -> service -> store path is exercised.
"""

from collections.abc import Iterator
from uuid import uuid4

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from mun_admin import __version__
from mun_admin.api.routes import all_routers
from mun_admin.bootstrap import (
    initialize_metrics,
    reset_conference,
    set_app_config,
    set_conference_store,
)
from mun_admin.config import AppConfig
from mun_admin.infrastructure.persistence import ConferenceStore


@pytest.fixture
def store() -> Iterator[ConferenceStore]:
    store = ConferenceStore()
    set_conference_store(store)
    yield store
    reset_conference()


@pytest.fixture
def client(store: ConferenceStore) -> TestClient:
    app = FastAPI()
    for router in all_routers:
        app.include_router(router)
    return TestClient(app)


class TestCommitteeRoutes:
    def test_create_and_get_in_camel_case(self, client: TestClient) -> None:
        response = client.post(
            "/api/committees",
            json={
                "name": "UNSC",
                "topic": "Cyber security",
                "agenda": "Norms for state behaviour",
                "viceChairperson": "Ravi",
            },
        )

        assert response.status_code == 201
        created = response.json()
        assert created["viceChairperson"] == "Ravi"
        assert created["sessionCount"] == 0

        fetched = client.get(f"/api/committees/{created['id']}")
        assert fetched.status_code == 200
        assert fetched.json() == created

    def test_patch_changes_only_sent_fields(self, client: TestClient) -> None:
        created = client.post(
            "/api/committees",
            json={"name": "UNSC", "topic": "Cyber", "agenda": "Norms", "chairperson": "Ana"},
        ).json()

        response = client.patch(
            f"/api/committees/{created['id']}", json={"status": "active"}
        )

        assert response.status_code == 200
        assert response.json()["status"] == "active"
        assert response.json()["chairperson"] == "Ana"

    def test_unknown_id_returns_404_problem(self, client: TestClient) -> None:
        missing = uuid4()

        response = client.get(f"/api/committees/{missing}")

        assert response.status_code == 404
        detail = response.json()["detail"]
        assert detail["type"] == "urn:mun-admin:record:not-found"
        assert detail["kind"] == "Committee"
        assert client.patch(f"/api/committees/{missing}", json={}).status_code == 404
        assert client.delete(f"/api/committees/{missing}").status_code == 404

    def test_delete_returns_204(self, client: TestClient, store: ConferenceStore) -> None:
        created = client.post(
            "/api/committees", json={"name": "UNSC", "topic": "Cyber", "agenda": "Norms"}
        ).json()

        response = client.delete(f"/api/committees/{created['id']}")

        assert response.status_code == 204
        assert client.get("/api/committees").json() == []

    def test_missing_required_field_returns_422(self, client: TestClient) -> None:
        assert client.post("/api/committees", json={"name": "UNSC"}).status_code == 422

    def test_malformed_id_returns_422(self, client: TestClient) -> None:
        assert client.get("/api/committees/not-a-uuid").status_code == 422


class TestPortfolioRoutes:
    def test_countries_listed_first(self, client: TestClient) -> None:
        for name, kind in [("UNICEF", "NGO"), ("Kenya", "Country"), ("Brazil", "Country")]:
            client.post("/api/portfolios", json={"name": name, "type": kind})

        response = client.get("/api/portfolios")

        assert [p["name"] for p in response.json()] == ["Brazil", "Kenya", "UNICEF"]
        assert response.json()[0]["isAvailable"] == 1


class TestMarkingCriteriaRoutes:
    def test_non_positive_max_points_returns_400(self, client: TestClient) -> None:
        response = client.post(
            "/api/marking-criteria", json={"name": "Research", "maxPoints": 0}
        )

        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["type"] == "urn:mun-admin:record:invalid"
        assert detail["field"] == "max_points"


class TestAwardTypeRoutes:
    def test_active_route_filters_and_orders(self, client: TestClient) -> None:
        client.post("/api/award-types", json={"name": "Verbal Mention", "orderIndex": 3})
        client.post(
            "/api/award-types", json={"name": "Retired", "orderIndex": 0, "isActive": 0}
        )
        client.post("/api/award-types", json={"name": "Best Delegate", "orderIndex": 1})

        active = client.get("/api/award-types/active")
        everything = client.get("/api/award-types")

        assert active.status_code == 200
        assert [t["name"] for t in active.json()] == ["Best Delegate", "Verbal Mention"]
        assert [t["name"] for t in everything.json()] == [
            "Retired",
            "Best Delegate",
            "Verbal Mention",
        ]


class TestUpdateRoutes:
    def test_timestamp_set_by_server(self, client: TestClient) -> None:
        response = client.post(
            "/api/updates",
            json={
                "title": "Opening ceremony moved",
                "content": "Now at 10:00 in Hall A",
                "category": "schedule",
                "author": "Secretary-General",
            },
        )

        assert response.status_code == 201
        assert response.json()["timestamp"].endswith("Z")


class TestDelegateImportRoute:
    def test_csv_import(self, client: TestClient) -> None:
        csv_body = (
            "name,school,committee,portfolio,email\n"
            "Alex Thompson,IHS,UNSC,France,alex@example.com\n"
            "No Email,IHS,UNSC,Chile,\n"
        )

        response = client.post(
            "/api/delegates/import",
            content=csv_body.encode("utf-8"),
            headers={"Content-Type": "text/csv"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["imported"] == 1
        assert body["skipped"] == 1
        assert body["delegates"][0]["name"] == "Alex Thompson"
        assert len(client.get("/api/delegates").json()) == 1

    def test_missing_header_column_returns_400(self, client: TestClient) -> None:
        response = client.post(
            "/api/delegates/import",
            content=b"name,school\nAlex,IHS\n",
            headers={"Content-Type": "text/csv"},
        )

        assert response.status_code == 400
        assert response.json()["detail"]["type"] == "urn:mun-admin:delegates:import-failed"

    def test_non_utf8_body_returns_400(self, client: TestClient) -> None:
        response = client.post(
            "/api/delegates/import",
            content=b"name,email\n\xff\xfe\xfa,x@example.com\n",
            headers={"Content-Type": "text/csv"},
        )

        assert response.status_code == 400


class TestSettingsAndDashboardRoutes:
    def test_settings_patch(self, client: TestClient) -> None:
        response = client.patch(
            "/api/app-settings", json={"currency": "EUR", "currencySymbol": "€"}
        )

        assert response.status_code == 200
        assert response.json()["currencySymbol"] == "€"
        assert client.get("/api/app-settings").json()["currency"] == "EUR"

    def test_dashboard_summary(self, client: TestClient) -> None:
        client.post(
            "/api/sponsorships",
            json={
                "sponsor": "Acme",
                "tier": "Gold",
                "amount": 5000,
                "contact": "Jo",
                "email": "jo@acme.test",
                "status": "confirmed",
            },
        )

        response = client.get("/api/dashboard/summary")

        assert response.status_code == 200
        body = response.json()
        assert body["totalSponsorship"] == 5000
        assert body["confirmedSponsorshipCount"] == 1
        assert body["delegateCount"] == 0


class TestHealthRoute:
    def test_health_before_startup(self, client: TestClient) -> None:
        set_app_config(AppConfig(environment="test", service_name="mun-admin-ci"))

        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json() == {
            "status": "ok",
            "service": "mun-admin-ci",
            "version": __version__,
            "environment": "test",
            "uptimeSeconds": 0.0,
        }

    def test_health_reports_uptime_after_startup(self, client: TestClient) -> None:
        config = AppConfig(environment="test")
        set_app_config(config)
        initialize_metrics(config)

        body = client.get("/api/health").json()

        assert body["uptimeSeconds"] >= 0.0
        assert body["service"] == "mun-admin-api"
