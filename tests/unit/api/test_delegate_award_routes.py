"""Unit tests for the delegate award routes, including auto-assign."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from mun_admin.api.dependencies.conference import get_award_assignment_service
from mun_admin.api.routes.delegate_awards import router
from mun_admin.domain.errors import AwardsAlreadyExistError, RecordNotFoundError
from mun_admin.domain.models import DelegateAward

NOW = datetime(2025, 3, 1, 9, 0, tzinfo=timezone.utc)
COMMITTEE_ID = uuid4()


def _award(delegate_name: str = "Alice", type_name: str = "Best Delegate") -> DelegateAward:
    return DelegateAward(
        id=uuid4(),
        committee_id=COMMITTEE_ID,
        committee_name="UNSC",
        award_type_id=uuid4(),
        award_type_name=type_name,
        delegate_id=uuid4(),
        delegate_name=delegate_name,
        is_auto_assigned=1,
        assigned_by="Executive Board",
        timestamp=NOW,
    )


@pytest.fixture
def mock_service() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def client(mock_service: AsyncMock) -> TestClient:
    app = FastAPI()
    app.include_router(router)
    app.dependency_overrides[get_award_assignment_service] = lambda: mock_service
    return TestClient(app)


class TestAutoAssignRoute:
    def test_returns_created_awards(
        self, client: TestClient, mock_service: AsyncMock
    ) -> None:
        mock_service.auto_assign.return_value = [
            _award("Alice", "Best Delegate"),
            _award("Bob", "High Commendation"),
        ]

        response = client.post(
            "/api/delegate-awards/auto-assign",
            json={"committeeId": str(COMMITTEE_ID), "committeeName": "UNSC"},
        )

        assert response.status_code == 201
        body = response.json()
        assert [a["delegateName"] for a in body] == ["Alice", "Bob"]
        assert body[0]["isAutoAssigned"] == 1
        mock_service.auto_assign.assert_awaited_once_with(
            committee_id=COMMITTEE_ID,
            committee_name="UNSC",
            assigned_by="Executive Board",
            force=False,
        )

    def test_force_flag_forwarded(
        self, client: TestClient, mock_service: AsyncMock
    ) -> None:
        mock_service.auto_assign.return_value = []

        response = client.post(
            "/api/delegate-awards/auto-assign",
            json={
                "committeeId": str(COMMITTEE_ID),
                "committeeName": "UNSC",
                "assignedBy": "Chair",
                "force": True,
            },
        )

        assert response.status_code == 201
        assert response.json() == []
        kwargs = mock_service.auto_assign.call_args.kwargs
        assert kwargs["force"] is True
        assert kwargs["assigned_by"] == "Chair"

    def test_existing_awards_return_409(
        self, client: TestClient, mock_service: AsyncMock
    ) -> None:
        mock_service.auto_assign.side_effect = AwardsAlreadyExistError(
            committee_id=COMMITTEE_ID, committee_name="UNSC", existing_count=2
        )

        response = client.post(
            "/api/delegate-awards/auto-assign",
            json={"committeeId": str(COMMITTEE_ID), "committeeName": "UNSC"},
        )

        assert response.status_code == 409
        detail = response.json()["detail"]
        assert detail["type"] == "urn:mun-admin:awards:already-exist"
        assert "already exist" in detail["detail"]
        assert detail["instance"].endswith("/api/delegate-awards/auto-assign")

    def test_invalid_committee_id_returns_422(self, client: TestClient) -> None:
        response = client.post(
            "/api/delegate-awards/auto-assign",
            json={"committeeId": "not-a-uuid", "committeeName": "UNSC"},
        )

        assert response.status_code == 422


class TestAwardRoutes:
    def test_list_all(self, client: TestClient, mock_service: AsyncMock) -> None:
        mock_service.list_awards.return_value = [_award()]

        response = client.get("/api/delegate-awards")

        assert response.status_code == 200
        mock_service.list_awards.assert_awaited_once()
        mock_service.list_committee_awards.assert_not_called()

    def test_list_for_committee(
        self, client: TestClient, mock_service: AsyncMock
    ) -> None:
        mock_service.list_committee_awards.return_value = [_award()]

        response = client.get(
            "/api/delegate-awards", params={"committeeId": str(COMMITTEE_ID)}
        )

        assert response.status_code == 200
        mock_service.list_committee_awards.assert_awaited_once_with(COMMITTEE_ID)

    def test_manual_grant(self, client: TestClient, mock_service: AsyncMock) -> None:
        award = _award()
        mock_service.grant_award.return_value = award

        response = client.post(
            "/api/delegate-awards",
            json={
                "committeeId": str(COMMITTEE_ID),
                "committeeName": "UNSC",
                "awardTypeId": str(award.award_type_id),
                "awardTypeName": "Best Delegate",
                "delegateId": str(award.delegate_id),
                "delegateName": "Alice",
            },
        )

        assert response.status_code == 201
        kwargs = mock_service.grant_award.call_args.kwargs
        assert kwargs["assigned_by"] == "Executive Board"
        assert isinstance(kwargs["delegate_id"], UUID)

    def test_unknown_award_returns_404(
        self, client: TestClient, mock_service: AsyncMock
    ) -> None:
        missing = uuid4()
        mock_service.update_award.side_effect = RecordNotFoundError(
            "DelegateAward", missing
        )

        response = client.patch(
            f"/api/delegate-awards/{missing}", json={"delegateName": "X"}
        )

        assert response.status_code == 404

    def test_delete(self, client: TestClient, mock_service: AsyncMock) -> None:
        award_id = uuid4()

        response = client.delete(f"/api/delegate-awards/{award_id}")

        assert response.status_code == 204
        mock_service.delete_award.assert_awaited_once_with(award_id)
