"""Exceptions raised by the permission client."""


class PermissionFetchError(Exception):
    """Raised when the authorization summary cannot be fetched or parsed.

    Covers transport failures, non-2xx responses and malformed bodies.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class TenantNotSelectableError(Exception):
    """Raised when a caller picks a tenant it cannot view."""

    def __init__(self, tenant_id: str):
        super().__init__(f"Tenant {tenant_id} is not accessible")
        self.tenant_id = tenant_id
