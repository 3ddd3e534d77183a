"""Service dependencies for the conference routes.

Services are stateless wrappers around the process-wide ConferenceStore
from bootstrap, so each provider builds a fresh service over the current
store. Tests either swap the store (``set_conference_store``) or override
a provider through ``app.dependency_overrides``.
"""

from mun_admin.application.services import (
    AppSettingsService,
    AwardAssignmentService,
    AwardTypeRegistryService,
    DashboardService,
    DelegateImportService,
    EvaluationRecorderService,
    MarkingCriteriaService,
    RecordCatalogService,
)
from mun_admin.bootstrap import get_app_config, get_award_metrics, get_conference_store
from mun_admin.domain.models import (
    Committee,
    ConferenceTask,
    ConferenceUpdate,
    Delegate,
    ExecutiveBoardMember,
    LogisticsItem,
    MarketingCampaign,
    Portfolio,
    SecretariatMember,
    Sponsorship,
    portfolio_sort_key,
)


def get_portfolio_service() -> RecordCatalogService[Portfolio]:
    """Portfolios, countries first then by name."""
    return RecordCatalogService(
        get_conference_store().portfolios,
        Portfolio,
        kind="Portfolio",
        sort_key=portfolio_sort_key,
    )


def get_delegate_service() -> RecordCatalogService[Delegate]:
    return RecordCatalogService(get_conference_store().delegates, Delegate, kind="Delegate")


def get_committee_service() -> RecordCatalogService[Committee]:
    return RecordCatalogService(
        get_conference_store().committees, Committee, kind="Committee"
    )


def get_secretariat_service() -> RecordCatalogService[SecretariatMember]:
    return RecordCatalogService(
        get_conference_store().secretariat, SecretariatMember, kind="SecretariatMember"
    )


def get_executive_board_service() -> RecordCatalogService[ExecutiveBoardMember]:
    return RecordCatalogService(
        get_conference_store().executive_board,
        ExecutiveBoardMember,
        kind="ExecutiveBoardMember",
    )


def get_task_service() -> RecordCatalogService[ConferenceTask]:
    return RecordCatalogService(
        get_conference_store().tasks, ConferenceTask, kind="ConferenceTask"
    )


def get_logistics_service() -> RecordCatalogService[LogisticsItem]:
    return RecordCatalogService(
        get_conference_store().logistics, LogisticsItem, kind="LogisticsItem"
    )


def get_marketing_service() -> RecordCatalogService[MarketingCampaign]:
    return RecordCatalogService(
        get_conference_store().marketing, MarketingCampaign, kind="MarketingCampaign"
    )


def get_sponsorship_service() -> RecordCatalogService[Sponsorship]:
    return RecordCatalogService(
        get_conference_store().sponsorships, Sponsorship, kind="Sponsorship"
    )


def get_update_service() -> RecordCatalogService[ConferenceUpdate]:
    """Public updates, newest first, timestamped on creation."""
    return RecordCatalogService(
        get_conference_store().updates,
        ConferenceUpdate,
        kind="ConferenceUpdate",
        sort_key=lambda update: update.timestamp,
        newest_first=True,
        timestamp_field="timestamp",
    )


def get_marking_criteria_service() -> MarkingCriteriaService:
    return MarkingCriteriaService(get_conference_store().marking_criteria)


def get_award_type_registry_service() -> AwardTypeRegistryService:
    return AwardTypeRegistryService(get_conference_store().award_types)


def get_evaluation_recorder_service() -> EvaluationRecorderService:
    store = get_conference_store()
    return EvaluationRecorderService(
        evaluations=store.evaluations,
        criteria=store.marking_criteria,
        metrics=get_award_metrics(),
    )


def get_award_assignment_service() -> AwardAssignmentService:
    store = get_conference_store()
    return AwardAssignmentService(
        evaluations=store.evaluations,
        awards=store.delegate_awards,
        award_types=store.award_types,
        metrics=get_award_metrics(),
    )


def get_delegate_import_service() -> DelegateImportService:
    return DelegateImportService(get_conference_store().delegates)


def get_app_settings_service() -> AppSettingsService:
    config = get_app_config()
    return AppSettingsService(
        get_conference_store().settings,
        default_currency=config.default_currency,
        default_currency_symbol=config.default_currency_symbol,
    )


def get_dashboard_service() -> DashboardService:
    store = get_conference_store()
    return DashboardService(
        delegates=store.delegates,
        committees=store.committees,
        tasks=store.tasks,
        sponsorships=store.sponsorships,
        logistics=store.logistics,
        evaluations=store.evaluations,
        awards=store.delegate_awards,
        settings=get_app_settings_service(),
    )
