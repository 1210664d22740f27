"""Identity provisioning and administration presentation."""

from iam.presentation.users.routes import router

__all__ = ["router"]
