"""Domain-Oriented Observability for IAM application layer.

Probes for access checks, invitations, tenants and user provisioning.
"""

from iam.application.observability.access_gate_probe import (
    AccessGateProbe,
    DefaultAccessGateProbe,
)
from iam.application.observability.authentication_probe import (
    AuthenticationProbe,
    DefaultAuthenticationProbe,
)
from iam.application.observability.invitation_aggregator_probe import (
    DefaultInvitationAggregatorProbe,
    InvitationAggregatorProbe,
)
from iam.application.observability.invitation_service_probe import (
    DefaultInvitationServiceProbe,
    InvitationServiceProbe,
)
from iam.application.observability.tenant_service_probe import (
    DefaultTenantServiceProbe,
    TenantServiceProbe,
)
from iam.application.observability.user_service_probe import (
    DefaultUserServiceProbe,
    UserServiceProbe,
)

__all__ = [
    "AccessGateProbe",
    "DefaultAccessGateProbe",
    "AuthenticationProbe",
    "DefaultAuthenticationProbe",
    "InvitationAggregatorProbe",
    "DefaultInvitationAggregatorProbe",
    "InvitationServiceProbe",
    "DefaultInvitationServiceProbe",
    "TenantServiceProbe",
    "DefaultTenantServiceProbe",
    "UserServiceProbe",
    "DefaultUserServiceProbe",
]
