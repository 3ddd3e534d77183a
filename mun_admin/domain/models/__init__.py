"""Domain models for MUN Admin."""

from mun_admin.domain.models.award import (
    UNKNOWN_AWARD_TYPE_ORDER,
    AwardType,
    DelegateAward,
)
from mun_admin.domain.models.committee import Committee
from mun_admin.domain.models.conference import (
    ConferenceTask,
    ConferenceUpdate,
    ExecutiveBoardMember,
    LogisticsItem,
    MarketingCampaign,
    SecretariatMember,
    Sponsorship,
)
from mun_admin.domain.models.delegate import Delegate, DelegateStatus
from mun_admin.domain.models.evaluation import (
    DelegateEvaluation,
    MarkingCriterion,
    compute_total_score,
)
from mun_admin.domain.models.portfolio import (
    COUNTRY_PORTFOLIO_TYPE,
    NGO_PORTFOLIO_TYPE,
    Portfolio,
    portfolio_sort_key,
)
from mun_admin.domain.models.record import (
    MergeableRecord,
    RequiredFieldError,
    merge_fields,
    nullable_fields,
)
from mun_admin.domain.models.settings import AppSettings

__all__ = [
    "AppSettings",
    "AwardType",
    "COUNTRY_PORTFOLIO_TYPE",
    "Committee",
    "ConferenceTask",
    "ConferenceUpdate",
    "Delegate",
    "DelegateAward",
    "DelegateEvaluation",
    "DelegateStatus",
    "ExecutiveBoardMember",
    "LogisticsItem",
    "MarketingCampaign",
    "MarkingCriterion",
    "MergeableRecord",
    "NGO_PORTFOLIO_TYPE",
    "Portfolio",
    "RequiredFieldError",
    "SecretariatMember",
    "Sponsorship",
    "UNKNOWN_AWARD_TYPE_ORDER",
    "compute_total_score",
    "merge_fields",
    "nullable_fields",
    "portfolio_sort_key",
]
