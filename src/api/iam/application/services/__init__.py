"""Application services for IAM bounded context.

Application services orchestrate domain aggregates, repositories, and
other infrastructure to fulfill use cases. They are the "front door" to
the IAM context.
"""

from iam.application.services.access_gate import AccessGate
from iam.application.services.invitation_aggregator import InvitationAggregator
from iam.application.services.invitation_service import InvitationService
from iam.application.services.tenant_service import TenantService
from iam.application.services.user_service import UserService

__all__ = [
    "AccessGate",
    "InvitationAggregator",
    "InvitationService",
    "TenantService",
    "UserService",
]
