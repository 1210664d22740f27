"""IAM presentation layer - aggregate-based organization.

Organizes presentation concerns by domain aggregate (me, users, tenants,
invites) following vertical slicing and DDD principles. Each package
contains its own routes and models.
"""

from __future__ import annotations

from fastapi import APIRouter

from iam.presentation import invites, me, tenants, users

# Auth is enforced per-endpoint (each handler declares its own Depends)
router = APIRouter(tags=["iam"])

router.include_router(me.router)
router.include_router(users.router)
router.include_router(tenants.router)
router.include_router(invites.router)

__all__ = ["router"]
