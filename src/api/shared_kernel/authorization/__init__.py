"""Tenant authorization primitives shared across bounded contexts."""

from shared_kernel.authorization.exceptions import (
    ResourceNotFoundError,
    TenantAccessDeniedError,
)
from shared_kernel.authorization.protocols import TenantAccessChecker
from shared_kernel.authorization.types import AccessLevel

__all__ = [
    "AccessLevel",
    "ResourceNotFoundError",
    "TenantAccessChecker",
    "TenantAccessDeniedError",
]
