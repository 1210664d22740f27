"""SQLAlchemy ORM models for IAM bounded context.

These models map to database tables and are used by repository implementations.
"""

from iam.infrastructure.models.identity import IdentityModel
from iam.infrastructure.models.invitation import InvitationModel
from iam.infrastructure.models.tenant import TenantModel
from iam.infrastructure.models.tenant_permission import TenantPermissionModel

__all__ = [
    "IdentityModel",
    "InvitationModel",
    "TenantModel",
    "TenantPermissionModel",
]
