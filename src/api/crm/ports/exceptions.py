"""Exceptions raised by CRM services.

The not-found errors are 404s on the wire and are raised for records that
do not exist as well as for records in a tenant the caller cannot reach.
"""

from shared_kernel.authorization.exceptions import ResourceNotFoundError


class ContactNotFoundError(ResourceNotFoundError):
    def __init__(self) -> None:
        super().__init__("Contact")


class CalendarEventNotFoundError(ResourceNotFoundError):
    def __init__(self) -> None:
        super().__init__("Event")


class UnknownReachoutAuthorError(ValueError):
    """A reachout names an author that is not a known identity."""

    def __init__(self) -> None:
        super().__init__("Unknown reachout author")


class BusinessNotFoundError(ResourceNotFoundError):
    def __init__(self) -> None:
        super().__init__("Business")


class OpportunityNotFoundError(ResourceNotFoundError):
    def __init__(self) -> None:
        super().__init__("Opportunity")


class DuplicateBusinessPlaceError(ValueError):
    """The tenant already has a business for this map listing."""

    def __init__(self, place_id: str) -> None:
        super().__init__(f"A business already exists for place {place_id}")
        self.place_id = place_id
