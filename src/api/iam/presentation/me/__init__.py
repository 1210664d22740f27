"""Authorization summary presentation."""

from iam.presentation.me.routes import router

__all__ = ["router"]
