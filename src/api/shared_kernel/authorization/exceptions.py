"""Exceptions shared by tenant-scoped resource handlers."""


class ResourceNotFoundError(Exception):
    """Raised when a tenant-scoped resource cannot be returned to the caller.

    Handlers translate this to a 404. It is raised both when the resource
    does not exist and when the caller may not see it, so the two cases
    are indistinguishable on the wire.
    """

    def __init__(self, resource: str = "Resource"):
        super().__init__(f"{resource} not found")
        self.resource = resource


class TenantAccessDeniedError(ResourceNotFoundError):
    """Raised when the access gate denies a tenant-scoped request."""

    def __init__(self, resource: str = "Resource", tenant_id: str | None = None):
        super().__init__(resource)
        self.tenant_id = tenant_id
