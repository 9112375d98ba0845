"""Architecture tests using pytest-archon.

These tests enforce DDD architectural boundaries between layers
within the Provisioning bounded context.
"""

from pytest_archon import archrule


class TestProvisioningDomainLayerBoundaries:
    """Tests that the domain layer has no forbidden dependencies."""

    def test_domain_does_not_import_infrastructure(self):
        """Domain value objects must not know about SQL or the pool."""
        (
            archrule("domain_no_infrastructure")
            .match("provisioning.domain*")
            .should_not_import(
                "provisioning.infrastructure*", "infrastructure*", "psycopg2*"
            )
            .check("provisioning")
        )

    def test_domain_does_not_import_application(self):
        (
            archrule("domain_no_application")
            .match("provisioning.domain*")
            .should_not_import("provisioning.application*")
            .check("provisioning")
        )

    def test_domain_does_not_import_fastapi(self):
        (
            archrule("domain_no_fastapi")
            .match("provisioning.domain*")
            .should_not_import("fastapi*", "starlette*")
            .check("provisioning")
        )


class TestProvisioningApplicationLayerBoundaries:
    """Tests that the application layer depends on ports, not adapters."""

    def test_application_does_not_import_infrastructure_adapters(self):
        """The service talks to DatabaseAdministrator, not the Postgres class."""
        (
            archrule("application_no_adapters")
            .match("provisioning.application*")
            .should_not_import("provisioning.infrastructure*", "psycopg2*")
            .check("provisioning")
        )

    def test_application_does_not_import_presentation(self):
        (
            archrule("application_no_presentation")
            .match("provisioning.application*")
            .should_not_import("provisioning.presentation*", "fastapi*")
            .check("provisioning")
        )
