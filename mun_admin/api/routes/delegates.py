"""Delegate routes, including bulk CSV import.

POST /api/delegates/import takes the raw CSV document as the request body
(text/csv or text/plain) and returns how many rows were imported and
skipped.
"""

from fastapi import APIRouter, Depends, Request

from mun_admin.api.dependencies.conference import (
    get_delegate_import_service,
    get_delegate_service,
)
from mun_admin.api.models.delegate import (
    DelegateCreateRequest,
    DelegateImportResponse,
    DelegateResponse,
    DelegateUpdateRequest,
)
from mun_admin.api.routes.crud import add_record_routes
from mun_admin.api.routes.errors import import_failed
from mun_admin.application.services import DelegateImportService
from mun_admin.domain.errors import DelegateImportError

router = APIRouter(prefix="/api/delegates", tags=["delegates"])


@router.post(
    "/import",
    response_model=DelegateImportResponse,
    status_code=201,
    summary="Import delegates from CSV",
    description=(
        "Create one delegate per CSV row. Rows without a name or email, with "
        "an unknown status, or with malformed ids are skipped and counted."
    ),
)
async def import_delegates(
    request: Request,
    service: DelegateImportService = Depends(get_delegate_import_service),
) -> DelegateImportResponse:
    """Import delegates from the CSV request body.

    Raises:
        HTTPException 400: Body is not UTF-8 or has no usable header row.
    """
    body = await request.body()
    try:
        result = await service.import_delegates(body.decode("utf-8-sig"))
    except UnicodeDecodeError:
        raise import_failed(
            DelegateImportError("body is not valid UTF-8"), request
        ) from None
    except DelegateImportError as e:
        raise import_failed(e, request) from None
    return DelegateImportResponse.model_validate(result)


add_record_routes(
    router,
    get_service=get_delegate_service,
    create_model=DelegateCreateRequest,
    update_model=DelegateUpdateRequest,
    response_model=DelegateResponse,
    resource="delegates",
)
