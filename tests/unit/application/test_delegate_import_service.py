"""Unit tests for DelegateImportService."""

from uuid import uuid4

import pytest

from mun_admin.application.services import DelegateImportService
from mun_admin.domain.errors import DelegateImportError
from mun_admin.domain.models import DelegateStatus
from mun_admin.infrastructure.persistence import ConferenceStore


@pytest.fixture
def importer(conference_store: ConferenceStore) -> DelegateImportService:
    return DelegateImportService(conference_store.delegates)


class TestImportDelegates:
    @pytest.mark.asyncio
    async def test_valid_rows_imported_in_file_order(
        self, importer: DelegateImportService, conference_store: ConferenceStore
    ) -> None:
        committee_id = uuid4()
        csv_text = (
            "Name,School,CommitteeId,Committee,Portfolio,Email,Status\n"
            f"Alex Thompson,IHS,{committee_id},UNSC,France,alex@example.com,confirmed\n"
            "Priya Shah,Northside,,UNHRC,India,priya@example.com,\n"
        )

        result = await importer.import_delegates(csv_text)

        assert result.imported == 2
        assert result.skipped == 0
        alex, priya = result.delegates
        assert alex.committee_id == committee_id
        assert alex.status == DelegateStatus.CONFIRMED
        assert priya.committee_id is None
        assert priya.status == DelegateStatus.REGISTERED
        assert [d.name for d in await conference_store.delegates.list_all()] == [
            "Alex Thompson",
            "Priya Shah",
        ]

    @pytest.mark.asyncio
    async def test_bad_rows_skipped(self, importer: DelegateImportService) -> None:
        csv_text = (
            "name,email,status,portfolioid\n"
            "No Email,,,\n"
            ",nobody@example.com,,\n"
            "Bad Status,bad@example.com,expelled,\n"
            "Bad Id,id@example.com,,not-a-uuid\n"
            "Good Row,good@example.com,checked-in,\n"
        )

        result = await importer.import_delegates(csv_text)

        assert result.imported == 1
        assert result.skipped == 4
        assert result.delegates[0].status == DelegateStatus.CHECKED_IN

    @pytest.mark.asyncio
    async def test_missing_optional_columns_default_to_empty(
        self, importer: DelegateImportService
    ) -> None:
        result = await importer.import_delegates("name,email\nAlex,alex@example.com\n")

        delegate = result.delegates[0]
        assert delegate.school == ""
        assert delegate.committee == ""
        assert delegate.portfolio == ""
        assert delegate.phone is None

    @pytest.mark.asyncio
    async def test_missing_required_header_rejected(
        self, importer: DelegateImportService, conference_store: ConferenceStore
    ) -> None:
        with pytest.raises(DelegateImportError, match="email"):
            await importer.import_delegates("name,school\nAlex,IHS\n")

        assert await conference_store.delegates.count() == 0

    @pytest.mark.asyncio
    async def test_empty_document_rejected(self, importer: DelegateImportService) -> None:
        with pytest.raises(DelegateImportError):
            await importer.import_delegates("")
