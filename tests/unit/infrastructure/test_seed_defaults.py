"""Unit tests for the default seed data."""

import pytest

from mun_admin.config import AppConfig
from mun_admin.domain.models import COUNTRY_PORTFOLIO_TYPE, NGO_PORTFOLIO_TYPE
from mun_admin.infrastructure.persistence import ConferenceStore, seed_default_records


class TestSeedDefaultRecords:
    @pytest.mark.asyncio
    async def test_seeds_portfolios(self, conference_store: ConferenceStore) -> None:
        await seed_default_records(conference_store, AppConfig())

        portfolios = await conference_store.portfolios.list_all()
        assert len(portfolios) == 21
        assert sum(p.type == COUNTRY_PORTFOLIO_TYPE for p in portfolios) == 15
        assert sum(p.type == NGO_PORTFOLIO_TYPE for p in portfolios) == 6

    @pytest.mark.asyncio
    async def test_seeds_rubric_and_award_types(
        self, conference_store: ConferenceStore
    ) -> None:
        await seed_default_records(conference_store, AppConfig())

        criteria = await conference_store.marking_criteria.list_all()
        assert [c.max_points for c in criteria] == [100, 100, 100, 100]
        assert criteria[0].name == "Research & Preparation"

        award_types = await conference_store.award_types.list_all()
        assert [(t.name, t.order_index, t.is_active) for t in award_types] == [
            ("Best Delegate", 0, 1),
            ("High Commendation", 1, 1),
            ("Special Mention", 2, 1),
            ("Verbal Mention", 3, 1),
            ("Honorary Mention", 4, 1),
        ]

    @pytest.mark.asyncio
    async def test_settings_use_configured_currency(
        self, conference_store: ConferenceStore
    ) -> None:
        config = AppConfig(default_currency="INR", default_currency_symbol="₹")

        await seed_default_records(conference_store, config)

        settings = await conference_store.settings.get()
        assert settings is not None
        assert settings.currency == "INR"
        assert settings.currency_symbol == "₹"

    @pytest.mark.asyncio
    async def test_sample_delegate_linked_to_sample_committee(
        self, conference_store: ConferenceStore
    ) -> None:
        await seed_default_records(conference_store, AppConfig())

        [committee] = await conference_store.committees.list_all()
        [delegate] = await conference_store.delegates.list_all()
        assert delegate.committee_id == committee.id
        assert delegate.committee == committee.name
        assert await conference_store.tasks.count() == 1
        assert await conference_store.updates.count() == 1

    @pytest.mark.asyncio
    async def test_no_evaluations_or_awards_seeded(
        self, conference_store: ConferenceStore
    ) -> None:
        await seed_default_records(conference_store, AppConfig())

        assert await conference_store.evaluations.count() == 0
        assert await conference_store.delegate_awards.count() == 0
