"""Domain exceptions for IAM aggregates."""


class InvitationAlreadyAcceptedError(Exception):
    """Raised when mutating an invitation that has already been accepted.

    Invitations are immutable once accepted and are never reopened.
    """

    pass


class InvalidTenantError(ValueError):
    """Raised when tenant attributes violate business rules."""

    pass
