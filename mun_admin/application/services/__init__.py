"""Application services."""

from mun_admin.application.services.app_settings_service import AppSettingsService
from mun_admin.application.services.award_assignment_service import (
    AwardAssignmentService,
)
from mun_admin.application.services.award_type_registry_service import (
    AwardTypeRegistryService,
)
from mun_admin.application.services.dashboard_service import (
    DashboardService,
    DashboardSummary,
)
from mun_admin.application.services.delegate_import_service import (
    DelegateImportResult,
    DelegateImportService,
)
from mun_admin.application.services.evaluation_recorder_service import (
    EvaluationRecorderService,
)
from mun_admin.application.services.marking_criteria_service import (
    MarkingCriteriaService,
)
from mun_admin.application.services.record_catalog_service import (
    RecordCatalogService,
)

__all__ = [
    "AppSettingsService",
    "AwardAssignmentService",
    "AwardTypeRegistryService",
    "DashboardService",
    "DashboardSummary",
    "DelegateImportResult",
    "DelegateImportService",
    "EvaluationRecorderService",
    "MarkingCriteriaService",
    "RecordCatalogService",
]
