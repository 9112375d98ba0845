"""HTTP routes for the Provisioning bounded context.

Handlers are plain functions: FastAPI runs them in its thread pool, so
concurrent requests each borrow their own connection from the admin pool.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from provisioning.application.services import DatabaseProvisioningService
from provisioning.dependencies import get_provisioning_service
from provisioning.ports.exceptions import (
    InvalidTenantIdentifierError,
    ProvisioningError,
)
from provisioning.presentation.models import DatabaseResourceResponse, ErrorDetail

router = APIRouter(tags=["provisioning"])

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def _internal_error() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=ErrorDetail(
            code="unknown_error", message="Something went wrong"
        ).model_dump(exclude_none=True),
    )


async def get_tenant_identifier(request: Request) -> str | None:
    """Read the ``id`` field from a form body, falling back to the query string."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        value = form.get("id")
        if isinstance(value, str):
            return value
    return request.query_params.get("id")


@router.post("/databases", status_code=status.HTTP_200_OK)
def create_database(
    service: Annotated[
        DatabaseProvisioningService, Depends(get_provisioning_service)
    ],
) -> DatabaseResourceResponse:
    """Provision a new database owned by a new role.

    Role name, password and database name are generated server-side.

    Returns:
        The tenant identifier and the environment to connect with.

    Raises:
        HTTPException: 500 if any statement fails.
    """
    try:
        provisioned = service.create_database()
    except ProvisioningError as e:
        raise _internal_error() from e
    return DatabaseResourceResponse.from_domain(provisioned)


@router.delete("/databases", status_code=status.HTTP_200_OK)
def drop_database(
    service: Annotated[
        DatabaseProvisioningService, Depends(get_provisioning_service)
    ],
    raw_id: Annotated[str | None, Depends(get_tenant_identifier)],
) -> Response:
    """Drop a tenant database and its owning role.

    The ``id`` field (``role:database``) may be sent as a form field or a
    query parameter.

    Raises:
        HTTPException: 400 if the identifier is malformed, 500 if a
            statement fails.
    """
    try:
        service.drop_database(raw_id)
    except InvalidTenantIdentifierError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=ErrorDetail(
                code="validation_error", message=str(e), field=e.field
            ).model_dump(exclude_none=True),
        ) from e
    except ProvisioningError as e:
        raise _internal_error() from e
    return Response(status_code=status.HTTP_200_OK)


@router.get("/ping", status_code=status.HTTP_200_OK)
def ping(
    service: Annotated[
        DatabaseProvisioningService, Depends(get_provisioning_service)
    ],
) -> Response:
    """Check that the admin connection can serve queries."""
    try:
        service.ping()
    except ProvisioningError as e:
        raise _internal_error() from e
    return Response(status_code=status.HTTP_200_OK)
