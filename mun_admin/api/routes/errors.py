"""RFC 7807 problem details for domain errors raised inside routes.

Routes catch domain errors and re-raise the HTTPException built here with
``from None``. The problem details object is placed in
``HTTPException.detail``.
"""

from fastapi import HTTPException, Request

from mun_admin.domain.errors import (
    AwardsAlreadyExistError,
    DelegateImportError,
    RecordNotFoundError,
    RecordValidationError,
)


def record_not_found(error: RecordNotFoundError, request: Request) -> HTTPException:
    """404 for an unknown record id."""
    return HTTPException(
        status_code=404,
        detail={
            "type": "urn:mun-admin:record:not-found",
            "title": "Record Not Found",
            "status": 404,
            "detail": str(error),
            "instance": str(request.url),
            "kind": error.kind,
            "record_id": str(error.record_id),
        },
    )


def record_invalid(error: RecordValidationError, request: Request) -> HTTPException:
    """400 for data that passed schema validation but breaks a domain rule."""
    return HTTPException(
        status_code=400,
        detail={
            "type": "urn:mun-admin:record:invalid",
            "title": "Invalid Record",
            "status": 400,
            "detail": str(error),
            "instance": str(request.url),
            "kind": error.kind,
            "field": error.field,
        },
    )


def import_failed(error: DelegateImportError, request: Request) -> HTTPException:
    """400 for a CSV payload that cannot be read at all."""
    return HTTPException(
        status_code=400,
        detail={
            "type": "urn:mun-admin:delegates:import-failed",
            "title": "Delegate Import Failed",
            "status": 400,
            "detail": str(error),
            "instance": str(request.url),
        },
    )


def awards_already_exist(
    error: AwardsAlreadyExistError, request: Request
) -> HTTPException:
    """409 when auto-assign would overwrite awards without force."""
    detail = error.to_rfc7807_dict()
    detail["instance"] = str(request.url)
    return HTTPException(status_code=409, detail=detail)
