"""End-to-end award flow through the HTTP API.

Covers:
- Award types and evaluations created over HTTP
- Auto-assignment ranking, conflict (409) and forced replacement
- Dashboard and metrics reflecting the run
"""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

pytestmark = pytest.mark.integration

UNSC = "United Nations Security Council"


def _create_award_types(client: TestClient, *names: str) -> None:
    for order_index, name in enumerate(names):
        response = client.post(
            "/api/award-types", json={"name": name, "orderIndex": order_index}
        )
        assert response.status_code == 201


def _submit(client: TestClient, name: str, scores: dict[str, int]) -> dict:
    response = client.post(
        "/api/evaluations",
        json={
            "delegateId": str(uuid4()),
            "delegateName": name,
            "committee": UNSC,
            "scores": scores,
            "evaluatedBy": "Chair",
        },
    )
    assert response.status_code == 201
    return response.json()


def _auto_assign(client: TestClient, committee_id: str, force: bool = False):
    return client.post(
        "/api/delegate-awards/auto-assign",
        json={"committeeId": committee_id, "committeeName": UNSC, "force": force},
    )


class TestAwardFlow:
    def test_rank_assign_conflict_and_force(self, api_client: TestClient) -> None:
        committee_id = str(uuid4())
        _create_award_types(api_client, "Best Delegate", "High Commendation")
        alice = _submit(api_client, "Alice", {"c1": 25, "c2": 30, "c3": 40})
        _submit(api_client, "Bob", {"c1": 30, "c2": 27, "c3": 30})
        _submit(api_client, "Carol", {"c1": 27, "c2": 30, "c3": 30})
        assert alice["totalScore"] == 95

        first = _auto_assign(api_client, committee_id)

        assert first.status_code == 201
        assert [(a["awardTypeName"], a["delegateName"]) for a in first.json()] == [
            ("Best Delegate", "Alice"),
            ("High Commendation", "Bob"),
        ]

        _submit(api_client, "Zed", {"c1": 99})
        conflict = _auto_assign(api_client, committee_id)

        assert conflict.status_code == 409
        assert "already exist" in conflict.json()["detail"]["detail"]
        unchanged = api_client.get(
            "/api/delegate-awards", params={"committeeId": committee_id}
        ).json()
        assert [a["id"] for a in unchanged] == [a["id"] for a in first.json()]

        forced = _auto_assign(api_client, committee_id, force=True)

        assert forced.status_code == 201
        assert [a["delegateName"] for a in forced.json()] == ["Zed", "Alice"]
        listed = api_client.get(
            "/api/delegate-awards", params={"committeeId": committee_id}
        ).json()
        assert [a["delegateName"] for a in listed] == ["Zed", "Alice"]

    def test_committee_without_evaluations(self, api_client: TestClient) -> None:
        _create_award_types(api_client, "Best Delegate")

        response = _auto_assign(api_client, str(uuid4()))

        assert response.status_code == 201
        assert response.json() == []

    def test_dashboard_and_metrics_reflect_run(self, api_client: TestClient) -> None:
        _create_award_types(api_client, "Best Delegate", "High Commendation")
        _submit(api_client, "Alice", {"c1": 90})
        _submit(api_client, "Bob", {"c1": 80})
        _auto_assign(api_client, str(uuid4()))

        summary = api_client.get("/api/dashboard/summary").json()
        metrics = api_client.get("/api/metrics")

        assert summary["evaluationCount"] == 2
        assert summary["awardCount"] == 2
        assert metrics.status_code == 200
        assert "awards_auto_assigned_total" in metrics.text
        assert "evaluations_recorded_total" in metrics.text


class TestSeededConference:
    def test_defaults_present(self, seeded_api_client: TestClient) -> None:
        active = seeded_api_client.get("/api/award-types/active").json()
        criteria = seeded_api_client.get("/api/marking-criteria").json()
        portfolios = seeded_api_client.get("/api/portfolios").json()

        assert [t["name"] for t in active][:2] == ["Best Delegate", "High Commendation"]
        assert len(active) == 5
        assert all(c["maxPoints"] == 100 for c in criteria)
        assert portfolios[0]["type"] == "Country"
        assert portfolios[-1]["type"] == "NGO"

    def test_seeded_committee_auto_assign(self, seeded_api_client: TestClient) -> None:
        committee = seeded_api_client.get("/api/committees").json()[0]
        criteria = seeded_api_client.get("/api/marking-criteria").json()
        scores = {c["id"]: 80 for c in criteria}
        delegate = seeded_api_client.get("/api/delegates").json()[0]
        seeded_api_client.post(
            "/api/evaluations",
            json={
                "delegateId": delegate["id"],
                "delegateName": delegate["name"],
                "committee": committee["name"],
                "scores": scores,
                "evaluatedBy": "Chair",
            },
        )

        response = seeded_api_client.post(
            "/api/delegate-awards/auto-assign",
            json={"committeeId": committee["id"], "committeeName": committee["name"]},
        )

        assert response.status_code == 201
        awards = response.json()
        assert len(awards) == 1
        assert awards[0]["awardTypeName"] == "Best Delegate"
        assert awards[0]["delegateId"] == delegate["id"]
        assert awards[0]["assignedBy"] == "Executive Board"


class TestNullPatchesRejected:
    def test_null_order_index_leaves_auto_assign_working(
        self, api_client: TestClient
    ) -> None:
        committee_id = str(uuid4())
        _create_award_types(api_client, "Best Delegate", "High Commendation")
        best = api_client.get("/api/award-types").json()[0]
        _submit(api_client, "Alice", {"c1": 90})

        patched = api_client.patch(
            f"/api/award-types/{best['id']}", json={"orderIndex": None}
        )

        assert patched.status_code == 400
        assert patched.json()["detail"]["field"] == "order_index"
        assert api_client.get("/api/award-types").status_code == 200
        assigned = _auto_assign(api_client, committee_id)
        assert assigned.status_code == 201
        assert [a["awardTypeName"] for a in assigned.json()] == ["Best Delegate"]

    @pytest.mark.parametrize(
        "change", [{"isActive": None}, {"name": None}, {"description": None}]
    )
    def test_award_type_fields(self, api_client: TestClient, change: dict) -> None:
        _create_award_types(api_client, "Best Delegate")
        award_type = api_client.get("/api/award-types").json()[0]

        response = api_client.patch(f"/api/award-types/{award_type['id']}", json=change)

        # description is optional and may be cleared
        expected = 200 if "description" in change else 400
        assert response.status_code == expected
        assert api_client.get("/api/award-types/active").json()[0]["name"] == (
            "Best Delegate"
        )

    def test_null_max_points_leaves_scoring_working(
        self, api_client: TestClient
    ) -> None:
        created = api_client.post(
            "/api/marking-criteria", json={"name": "Research", "maxPoints": 25}
        ).json()

        patched = api_client.patch(
            f"/api/marking-criteria/{created['id']}", json={"maxPoints": None}
        )

        assert patched.status_code == 400
        assert patched.json()["detail"]["type"] == "urn:mun-admin:record:invalid"
        criterion = api_client.get(f"/api/marking-criteria/{created['id']}").json()
        assert criterion["maxPoints"] == 25
        evaluation = _submit(api_client, "Alice", {created["id"]: 20})
        assert evaluation["totalScore"] == 20

    def test_null_setting_rejected(self, api_client: TestClient) -> None:
        response = api_client.patch("/api/app-settings", json={"currency": None})

        assert response.status_code == 400
        assert api_client.get("/api/app-settings").json()["currency"] == "USD"

    def test_null_award_delegate_rejected(self, api_client: TestClient) -> None:
        committee_id = str(uuid4())
        _create_award_types(api_client, "Best Delegate")
        _submit(api_client, "Alice", {"c1": 90})
        award = _auto_assign(api_client, committee_id).json()[0]

        response = api_client.patch(
            f"/api/delegate-awards/{award['id']}", json={"delegateName": None}
        )

        assert response.status_code == 400
        stored = api_client.get(f"/api/delegate-awards/{award['id']}").json()
        assert stored["delegateName"] == "Alice"

    def test_empty_scores_submission_totals_zero(self, api_client: TestClient) -> None:
        evaluation = _submit(api_client, "Alice", {})

        assert evaluation["scores"] == {}
        assert evaluation["totalScore"] == 0
