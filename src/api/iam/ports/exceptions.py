"""Domain exceptions for IAM bounded context.

These exceptions represent domain-level errors that can occur during
service and repository operations. They should be caught and translated
by the presentation layer.
"""

from shared_kernel.authorization.exceptions import (
    ResourceNotFoundError,
    TenantAccessDeniedError,
)


class UnauthorizedError(Exception):
    """Raised when a user lacks permission to perform an operation.

    This is the operation-level denial (global admin required). The
    presentation layer returns HTTP 403 without exposing internal details.
    Resource-level denial uses TenantAccessDeniedError instead.
    """

    pass


class EmailMismatchError(Exception):
    """Raised when a sync request carries an email the credential does not.

    The email drives invitation matching, so it must come from the
    identity provider rather than from the caller.
    """

    pass


class IdentityNotFoundError(ResourceNotFoundError):
    """Raised when an administered identity does not exist."""

    def __init__(self) -> None:
        super().__init__("User")


class InvitationNotFoundError(ResourceNotFoundError):
    """Raised when an invitation does not exist or is not accessible."""

    def __init__(self) -> None:
        super().__init__("Invite")


class TenantNotFoundError(TenantAccessDeniedError):
    """Raised when a tenant does not exist or the caller cannot see it."""

    def __init__(self, tenant_id: str | None = None) -> None:
        super().__init__("Tenant", tenant_id=tenant_id)
