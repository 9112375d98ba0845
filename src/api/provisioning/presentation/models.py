"""Pydantic models for provisioning API responses."""

from __future__ import annotations

from pydantic import BaseModel, Field

from provisioning.domain.value_objects import ProvisionedDatabase


class DatabaseResourceResponse(BaseModel):
    """Response model for a newly provisioned database."""

    id: str = Field(..., description="Tenant identifier (role:database)")
    env: dict[str, str] = Field(
        ...,
        description=(
            "Connection environment: FLYNN_POSTGRES, PGHOST, PGUSER, "
            "PGPASSWORD, PGDATABASE, DATABASE_URL"
        ),
    )

    @classmethod
    def from_domain(cls, provisioned: ProvisionedDatabase) -> DatabaseResourceResponse:
        """Convert a ProvisionedDatabase to an API response.

        Args:
            provisioned: Result of a create operation

        Returns:
            DatabaseResourceResponse
        """
        return cls(id=str(provisioned.id), env=provisioned.environment())


class ErrorDetail(BaseModel):
    """Body of the ``detail`` field of an error response."""

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable message")
    field: str | None = Field(default=None, description="Offending request field")
