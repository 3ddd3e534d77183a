"""CRUD route factory for plain record collections.

Attaches list / get / create / partial update / delete endpoints for one
record type to a router. Entity-specific routes (e.g. ``/active``) must be
registered on the router BEFORE calling ``add_record_routes`` so they win
over ``/{record_id}``.

Endpoints (relative to the router prefix):
- GET    ""             list in display order
- GET    "/{record_id}" one record (404 if unknown)
- POST   ""             create (201; 400 on domain rule violations)
- PATCH  "/{record_id}" partial update, only fields sent are changed
- DELETE "/{record_id}" delete (204; 404 if unknown)
"""

from collections.abc import Callable
from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response
from pydantic import BaseModel

from mun_admin.api.routes.errors import record_invalid, record_not_found
from mun_admin.application.services import RecordCatalogService
from mun_admin.domain.errors import RecordNotFoundError, RecordValidationError


def add_record_routes(
    router: APIRouter,
    *,
    get_service: Callable[[], RecordCatalogService],
    create_model: type[BaseModel],
    update_model: type[BaseModel],
    response_model: type[BaseModel],
    resource: str,
) -> APIRouter:
    """Register the CRUD endpoints for one record type.

    Args:
        router: Router carrying the collection prefix (e.g. /api/committees).
        get_service: Dependency returning the collection's service.
        create_model: Request body model for POST.
        update_model: Request body model for PATCH; every field optional.
        response_model: Response model validated from the domain record.
        resource: Snake-case resource name used in operation names.

    Returns:
        The same router, for chaining.
    """

    @router.get(
        "",
        response_model=list[response_model],  # type: ignore[valid-type]
        name=f"list_{resource}",
    )
    async def list_records(
        service: RecordCatalogService = Depends(get_service),
    ) -> list[BaseModel]:
        records = await service.list_records()
        return [response_model.model_validate(record) for record in records]

    @router.get(
        "/{record_id}",
        response_model=response_model,
        name=f"get_{resource}",
    )
    async def get_record(
        record_id: UUID,
        request: Request,
        service: RecordCatalogService = Depends(get_service),
    ) -> BaseModel:
        try:
            record = await service.get_record(record_id)
        except RecordNotFoundError as e:
            raise record_not_found(e, request) from None
        return response_model.model_validate(record)

    @router.post(
        "",
        response_model=response_model,
        status_code=201,
        name=f"create_{resource}",
    )
    async def create_record(
        payload: create_model,  # type: ignore[valid-type]
        request: Request,
        service: RecordCatalogService = Depends(get_service),
    ) -> BaseModel:
        try:
            record = await service.create_record(payload.model_dump())
        except RecordValidationError as e:
            raise record_invalid(e, request) from None
        return response_model.model_validate(record)

    @router.patch(
        "/{record_id}",
        response_model=response_model,
        name=f"update_{resource}",
    )
    async def update_record(
        record_id: UUID,
        payload: update_model,  # type: ignore[valid-type]
        request: Request,
        service: RecordCatalogService = Depends(get_service),
    ) -> BaseModel:
        try:
            record = await service.update_record(
                record_id, payload.model_dump(exclude_unset=True)
            )
        except RecordNotFoundError as e:
            raise record_not_found(e, request) from None
        except RecordValidationError as e:
            raise record_invalid(e, request) from None
        return response_model.model_validate(record)

    @router.delete(
        "/{record_id}",
        status_code=204,
        response_class=Response,
        name=f"delete_{resource}",
    )
    async def delete_record(
        record_id: UUID,
        request: Request,
        service: RecordCatalogService = Depends(get_service),
    ) -> Response:
        try:
            await service.delete_record(record_id)
        except RecordNotFoundError as e:
            raise record_not_found(e, request) from None
        return Response(status_code=204)

    return router
