"""User application service for IAM bounded context.

Handles identity provisioning on sign-in, the authorization summary the
client resolves permissions from, and admin management of grants.
"""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.observability import DefaultUserServiceProbe, UserServiceProbe
from iam.application.services.access_gate import AccessGate
from iam.application.services.invitation_aggregator import InvitationAggregator
from iam.application.value_objects import (
    AuthenticatedUser,
    AuthorizationSummary,
    IdentityWithPermissions,
    SyncResult,
)
from iam.domain.aggregates import Identity
from iam.domain.value_objects import (
    IdentityId,
    PermissionGrant,
    TenantId,
    normalize_email,
)
from iam.ports.authorization import IAuthorizationStore
from iam.ports.exceptions import (
    EmailMismatchError,
    IdentityNotFoundError,
    TenantNotFoundError,
)
from iam.ports.repositories import IIdentityRepository


class UserService:
    """Application service for identity management.

    Each public method is one use case and owns exactly one transaction.
    """

    def __init__(
        self,
        identity_repository: IIdentityRepository,
        authorization_store: IAuthorizationStore,
        invitation_aggregator: InvitationAggregator,
        access_gate: AccessGate,
        session: AsyncSession,
        probe: UserServiceProbe | None = None,
    ):
        """Initialize UserService with dependencies.

        Args:
            identity_repository: Repository for identity persistence
            authorization_store: Source of truth for permissions
            invitation_aggregator: Applies pending invitations on creation
            access_gate: Guards admin-only operations
            session: Database session for transaction management
            probe: Optional domain probe for observability
        """
        self._identity_repository = identity_repository
        self._store = authorization_store
        self._aggregator = invitation_aggregator
        self._gate = access_gate
        self._session = session
        self._probe = probe or DefaultUserServiceProbe()

    async def sync(
        self,
        user: AuthenticatedUser,
        email: str,
        display_name: str | None = None,
    ) -> SyncResult:
        """Provision the caller's identity or refresh its profile.

        Pending invitations are applied only when the identity is created.
        Invitations issued after that are not picked up automatically.

        Args:
            user: The authenticated caller
            email: Email reported by the client
            display_name: Optional display name

        Returns:
            The identity, its permissions and whether it was just created

        Raises:
            ValueError: If email is blank
            EmailMismatchError: If the credential carries a different email
        """
        normalized = normalize_email(email)
        if not normalized:
            raise ValueError("Email is required")
        if user.email is not None and user.email != normalized:
            self._probe.email_mismatch(identity_id=user.user_id.value)
            raise EmailMismatchError("Email does not match the authenticated user")

        try:
            return await self._sync_once(user.user_id, normalized, display_name)
        except IntegrityError:
            # A concurrent first sign-in won the insert; retry as an update
            return await self._sync_once(user.user_id, normalized, display_name)

    async def _sync_once(
        self, identity_id: IdentityId, email: str, display_name: str | None
    ) -> SyncResult:
        async with self._session.begin():
            existing = await self._identity_repository.get_by_id(identity_id)
            if existing is not None:
                identity = existing.with_profile(
                    email,
                    display_name if display_name is not None else existing.display_name,
                )
                await self._identity_repository.save(identity)
                created = False
            else:
                identity = Identity.create(identity_id, email, display_name)
                await self._identity_repository.save(identity)
                result = await self._aggregator.aggregate(identity_id, email)
                if result.is_global_admin:
                    identity = identity.with_global_admin(True)
                created = True

            permissions = await self._store.list_permissions(identity_id)

        self._probe.identity_synced(
            identity_id=identity_id.value, email=email, was_created=created
        )
        return SyncResult(identity=identity, permissions=permissions, created=created)

    async def get_summary(self, user: AuthenticatedUser) -> AuthorizationSummary:
        """Build the caller's authorization summary.

        Global admins see every tenant. Everyone else sees only tenants they
        hold a permission on. A caller with no identity row gets an empty
        summary rather than an error.
        """
        async with self._session.begin():
            identity = await self._store.get_identity(user.user_id)
            if identity is None:
                self._probe.summary_built(
                    identity_id=user.user_id.value, provisioned=False, tenant_count=0
                )
                return AuthorizationSummary(identity=None)

            permissions = await self._store.list_permissions(identity.id)
            tenants = await self._store.list_tenants()

        if not identity.is_global_admin:
            permitted = {permission.tenant_id for permission in permissions}
            tenants = [tenant for tenant in tenants if tenant.id in permitted]

        self._probe.summary_built(
            identity_id=identity.id.value, provisioned=True, tenant_count=len(tenants)
        )
        return AuthorizationSummary(
            identity=identity, permissions=permissions, tenants=tenants
        )

    async def list_identities(
        self, caller_id: IdentityId
    ) -> list[IdentityWithPermissions]:
        """List every identity with its grants (global admin only).

        Raises:
            UnauthorizedError: If the caller is not a global admin
        """
        async with self._session.begin():
            await self._gate.require_global_admin(caller_id.value)
            identities = await self._identity_repository.list_all()
            views = [
                IdentityWithPermissions(
                    identity=identity,
                    permissions=await self._store.list_permissions(identity.id),
                )
                for identity in identities
            ]

        self._probe.identities_listed(count=len(views))
        return views

    async def update_identity(
        self,
        caller_id: IdentityId,
        identity_id: IdentityId,
        is_global_admin: bool | None = None,
        grants: list[PermissionGrant] | None = None,
    ) -> IdentityWithPermissions:
        """Change an identity's admin flag and/or replace its permission set.

        ``grants`` replaces every existing permission; None leaves them alone.
        Repeated tenants collapse with OR on ``can_edit``. A target that ends
        up a global admin holds no permission rows, so any grants are dropped
        and existing rows are cleared.

        Raises:
            UnauthorizedError: If the caller is not a global admin
            IdentityNotFoundError: If the target identity does not exist
            TenantNotFoundError: If a grant names a tenant that does not exist
        """
        async with self._session.begin():
            await self._gate.require_global_admin(caller_id.value)

            target = await self._identity_repository.get_by_id(identity_id)
            if target is None:
                raise IdentityNotFoundError()

            if is_global_admin is not None:
                await self._store.set_global_admin(identity_id, is_global_admin)
                target = target.with_global_admin(is_global_admin)

            if target.is_global_admin:
                await self._store.replace_permissions(identity_id, [])
            elif grants is not None:
                merged = await self._merge_grants(grants)
                await self._store.replace_permissions(identity_id, merged)

            permissions = await self._store.list_permissions(identity_id)

        self._probe.identity_updated(
            identity_id=identity_id.value,
            updated_by=caller_id.value,
            is_global_admin=target.is_global_admin,
            permission_count=None if grants is None else len(permissions),
        )
        return IdentityWithPermissions(identity=target, permissions=permissions)

    async def _merge_grants(
        self, grants: list[PermissionGrant]
    ) -> list[PermissionGrant]:
        existing = {tenant.id for tenant in await self._store.list_tenants()}
        merged: dict[TenantId, bool] = {}
        for grant in grants:
            if grant.tenant_id not in existing:
                raise TenantNotFoundError(grant.tenant_id.value)
            can_edit = merged.get(grant.tenant_id, False) or grant.can_edit
            merged[grant.tenant_id] = can_edit
        return [
            PermissionGrant(tenant_id=tenant_id, can_edit=can_edit)
            for tenant_id, can_edit in merged.items()
        ]
