"""Authorization type definitions shared across bounded contexts."""

from enum import StrEnum


class AccessLevel(StrEnum):
    """Tenant-scoped access levels.

    EDIT implies VIEW. Global admins hold both on every tenant.
    """

    VIEW = "view"
    EDIT = "edit"
