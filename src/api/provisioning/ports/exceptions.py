"""Exceptions for the provisioning bounded context.

These are the two failure kinds callers see: a malformed request they can
fix, and a failed database operation they cannot.
"""


class InvalidTenantIdentifierError(Exception):
    """Raised when a tenant identifier is not of the form ``role:database``.

    Raised before any SQL is executed, so a rejected request has no side
    effects.
    """

    def __init__(self, field: str, value: str | None = None):
        super().__init__(f"{field} is invalid")
        self.field = field
        self.value = value


class ProvisioningError(Exception):
    """Raised when an administrative statement fails during an operation.

    Attributes:
        operation: Name of the step that failed (e.g. ``grant_role``)
    """

    def __init__(self, message: str, operation: str):
        super().__init__(message)
        self.operation = operation
