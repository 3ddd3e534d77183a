"""Routes for the conference operations records.

Secretariat, executive board, tasks, logistics, marketing, sponsorships
and public updates are plain CRUD collections.
"""

from fastapi import APIRouter

from mun_admin.api.dependencies.conference import (
    get_executive_board_service,
    get_logistics_service,
    get_marketing_service,
    get_secretariat_service,
    get_sponsorship_service,
    get_task_service,
    get_update_service,
)
from mun_admin.api.models.conference import (
    ConferenceTaskCreateRequest,
    ConferenceTaskResponse,
    ConferenceTaskUpdateRequest,
    ConferenceUpdateCreateRequest,
    ConferenceUpdateResponse,
    ConferenceUpdateUpdateRequest,
    ExecutiveBoardMemberCreateRequest,
    ExecutiveBoardMemberResponse,
    ExecutiveBoardMemberUpdateRequest,
    LogisticsItemCreateRequest,
    LogisticsItemResponse,
    LogisticsItemUpdateRequest,
    MarketingCampaignCreateRequest,
    MarketingCampaignResponse,
    MarketingCampaignUpdateRequest,
    SecretariatMemberCreateRequest,
    SecretariatMemberResponse,
    SecretariatMemberUpdateRequest,
    SponsorshipCreateRequest,
    SponsorshipResponse,
    SponsorshipUpdateRequest,
)
from mun_admin.api.routes.crud import add_record_routes

secretariat_router = add_record_routes(
    APIRouter(prefix="/api/secretariat", tags=["secretariat"]),
    get_service=get_secretariat_service,
    create_model=SecretariatMemberCreateRequest,
    update_model=SecretariatMemberUpdateRequest,
    response_model=SecretariatMemberResponse,
    resource="secretariat",
)

executive_board_router = add_record_routes(
    APIRouter(prefix="/api/executive-board", tags=["executive-board"]),
    get_service=get_executive_board_service,
    create_model=ExecutiveBoardMemberCreateRequest,
    update_model=ExecutiveBoardMemberUpdateRequest,
    response_model=ExecutiveBoardMemberResponse,
    resource="executive_board",
)

tasks_router = add_record_routes(
    APIRouter(prefix="/api/tasks", tags=["tasks"]),
    get_service=get_task_service,
    create_model=ConferenceTaskCreateRequest,
    update_model=ConferenceTaskUpdateRequest,
    response_model=ConferenceTaskResponse,
    resource="tasks",
)

logistics_router = add_record_routes(
    APIRouter(prefix="/api/logistics", tags=["logistics"]),
    get_service=get_logistics_service,
    create_model=LogisticsItemCreateRequest,
    update_model=LogisticsItemUpdateRequest,
    response_model=LogisticsItemResponse,
    resource="logistics",
)

marketing_router = add_record_routes(
    APIRouter(prefix="/api/marketing", tags=["marketing"]),
    get_service=get_marketing_service,
    create_model=MarketingCampaignCreateRequest,
    update_model=MarketingCampaignUpdateRequest,
    response_model=MarketingCampaignResponse,
    resource="marketing",
)

sponsorships_router = add_record_routes(
    APIRouter(prefix="/api/sponsorships", tags=["sponsorships"]),
    get_service=get_sponsorship_service,
    create_model=SponsorshipCreateRequest,
    update_model=SponsorshipUpdateRequest,
    response_model=SponsorshipResponse,
    resource="sponsorships",
)

updates_router = add_record_routes(
    APIRouter(prefix="/api/updates", tags=["updates"]),
    get_service=get_update_service,
    create_model=ConferenceUpdateCreateRequest,
    update_model=ConferenceUpdateUpdateRequest,
    response_model=ConferenceUpdateResponse,
    resource="updates",
)

routers = [
    secretariat_router,
    executive_board_router,
    tasks_router,
    logistics_router,
    marketing_router,
    sponsorships_router,
    updates_router,
]
