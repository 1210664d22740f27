"""Invitation presentation."""

from iam.presentation.invites.routes import router

__all__ = ["router"]
