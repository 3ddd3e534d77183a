"""Default records loaded into a fresh store at startup.

Seeds the rubric and award tiers every conference starts from, the common
country and NGO portfolios, the currency settings, and one sample record
for the delegate, committee, task and update pages.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from uuid import uuid4

from structlog import get_logger

from mun_admin.config.app_config import AppConfig
from mun_admin.domain.models import (
    COUNTRY_PORTFOLIO_TYPE,
    NGO_PORTFOLIO_TYPE,
    AppSettings,
    AwardType,
    Committee,
    ConferenceTask,
    ConferenceUpdate,
    Delegate,
    DelegateStatus,
    MarkingCriterion,
    Portfolio,
)
from mun_admin.infrastructure.persistence.conference_store import ConferenceStore

logger = get_logger(__name__)

DEFAULT_COUNTRY_PORTFOLIOS = (
    "United States",
    "China",
    "Russia",
    "United Kingdom",
    "France",
    "Germany",
    "India",
    "Japan",
    "Brazil",
    "Canada",
    "Australia",
    "South Africa",
    "Saudi Arabia",
    "Mexico",
    "South Korea",
)

DEFAULT_NGO_PORTFOLIOS = (
    "WHO",
    "UNESCO",
    "UNICEF",
    "Red Cross",
    "Amnesty International",
    "Greenpeace",
)

# (name, description); every criterion is worth 100 points
DEFAULT_MARKING_CRITERIA = (
    ("Research & Preparation", "Quality of research and preparation for the topic"),
    ("Communication Skills", "Effectiveness in verbal and written communication"),
    ("Diplomacy & Negotiation", "Ability to negotiate and build consensus"),
    ("Participation & Engagement", "Active participation in debates and discussions"),
)
DEFAULT_CRITERION_MAX_POINTS = 100

# Most prestigious first; position becomes order_index
DEFAULT_AWARD_TYPES = (
    ("Best Delegate", "Awarded to the top performing delegate"),
    ("High Commendation", "Awarded to exceptional delegates"),
    ("Special Mention", "Recognition for notable performance"),
    ("Verbal Mention", "Honorable verbal recognition"),
    ("Honorary Mention", "Honorary recognition"),
)


async def seed_default_records(store: ConferenceStore, config: AppConfig) -> None:
    """Populate ``store`` with the default conference setup.

    Args:
        store: The store to seed. Expected to be empty.
        config: Supplies the default currency.
    """
    log = logger.bind(component="seed")

    portfolios = [
        Portfolio(id=uuid4(), name=name, type=COUNTRY_PORTFOLIO_TYPE)
        for name in DEFAULT_COUNTRY_PORTFOLIOS
    ] + [
        Portfolio(id=uuid4(), name=name, type=NGO_PORTFOLIO_TYPE)
        for name in DEFAULT_NGO_PORTFOLIOS
    ]
    for portfolio in portfolios:
        await store.portfolios.insert(portfolio)

    await store.settings.save(
        AppSettings(
            id=uuid4(),
            currency=config.default_currency,
            currency_symbol=config.default_currency_symbol,
        )
    )

    for order_index, (name, description) in enumerate(DEFAULT_MARKING_CRITERIA):
        await store.marking_criteria.insert(
            MarkingCriterion(
                id=uuid4(),
                name=name,
                max_points=DEFAULT_CRITERION_MAX_POINTS,
                description=description,
                order_index=order_index,
            )
        )

    for order_index, (name, description) in enumerate(DEFAULT_AWARD_TYPES):
        await store.award_types.insert(
            AwardType(
                id=uuid4(),
                name=name,
                description=description,
                order_index=order_index,
                is_active=1,
            )
        )

    committee = Committee(
        id=uuid4(),
        name="United Nations Security Council",
        topic="Peace and Security in the Middle East",
        agenda="Discussing regional conflicts and peacekeeping operations",
        chairperson="Sarah Johnson",
        vice_chairperson="Michael Chen",
        rapporteur="Emma Williams",
        session_count=3,
        status="active",
    )
    await store.committees.insert(committee)

    sample_portfolio = portfolios[0]
    await store.delegates.insert(
        Delegate(
            id=uuid4(),
            name="Alex Thompson",
            school="International High School",
            committee_id=committee.id,
            committee=committee.name,
            portfolio_id=sample_portfolio.id,
            portfolio=sample_portfolio.name,
            email="alex.thompson@example.com",
            phone="+1 555-0123",
            status=DelegateStatus.CONFIRMED,
            notes="First-time delegate, very enthusiastic",
        )
    )

    now = datetime.now(timezone.utc)
    await store.tasks.insert(
        ConferenceTask(
            id=uuid4(),
            title="Finalize venue booking",
            description="Confirm the main conference hall and breakout rooms",
            assignee="David Martinez",
            status="in-progress",
            priority="high",
            due_date=now + timedelta(days=7),
            category="Logistics",
        )
    )
    await store.updates.insert(
        ConferenceUpdate(
            id=uuid4(),
            title="Registration Extended",
            content=(
                "Due to popular demand, we've extended the delegate registration "
                "deadline by one week."
            ),
            category="announcement",
            author="Secretary General",
            timestamp=now,
        )
    )

    log.info(
        "store_seeded",
        portfolios=len(portfolios),
        marking_criteria=len(DEFAULT_MARKING_CRITERIA),
        award_types=len(DEFAULT_AWARD_TYPES),
    )
