"""Conversions between CRM ORM models and domain objects."""

from __future__ import annotations

from crm.domain.aggregates import Business, CalendarEvent, Contact, Opportunity
from crm.domain.value_objects import (
    BusinessId,
    CalendarEventId,
    ContactId,
    ContactStatus,
    DonationDetails,
    EventPriority,
    EventStatus,
    EventType,
    OpportunityId,
    OpportunityStatus,
    Reachout,
    ReachoutId,
    ReachoutType,
)
from crm.infrastructure.models import (
    BusinessModel,
    CalendarEventModel,
    ContactModel,
    OpportunityModel,
    ReachoutModel,
)


def reachout_from_model(model: ReachoutModel) -> Reachout:
    return Reachout(
        id=ReachoutId(value=model.id),
        date=model.date,
        note=model.note,
        created_by=model.created_by,
        type=ReachoutType(model.type),
        donation=DonationDetails(
            free_bundlet_card=model.free_bundlet_card,
            dozen_bundtinis=model.dozen_bundtinis,
            cake_8inch=model.cake_8inch,
            cake_10inch=model.cake_10inch,
            sample_tray=model.sample_tray,
            bundtlet_tower=model.bundtlet_tower,
            notes=model.donation_notes,
            ordered_from_us=model.ordered_from_us,
            followed_up=model.followed_up,
        ),
    )


def reachout_to_model(contact_id: str, reachout: Reachout) -> ReachoutModel:
    donation = reachout.donation
    return ReachoutModel(
        id=reachout.id.value,
        contact_id=contact_id,
        date=reachout.date,
        note=reachout.note,
        type=reachout.type.value,
        created_by=reachout.created_by,
        free_bundlet_card=donation.free_bundlet_card,
        dozen_bundtinis=donation.dozen_bundtinis,
        cake_8inch=donation.cake_8inch,
        cake_10inch=donation.cake_10inch,
        sample_tray=donation.sample_tray,
        bundtlet_tower=donation.bundtlet_tower,
        donation_notes=donation.notes,
        ordered_from_us=donation.ordered_from_us,
        followed_up=donation.followed_up,
    )


def contact_from_model(
    model: ContactModel, reachouts: list[ReachoutModel] | None = None
) -> Contact:
    return Contact(
        id=ContactId(value=model.id),
        tenant_id=model.tenant_id,
        created_by=model.created_by,
        first_name=model.first_name,
        last_name=model.last_name,
        email=model.email,
        phone=model.phone,
        business_name=model.business_name,
        status=ContactStatus(model.status),
        notes=model.notes,
        last_reachout_date=model.last_reachout_date,
        created_at=model.created_at,
        reachouts=[reachout_from_model(r) for r in reachouts or []],
    )


def calendar_event_from_model(model: CalendarEventModel) -> CalendarEvent:
    return CalendarEvent(
        id=CalendarEventId(value=model.id),
        tenant_id=model.tenant_id,
        title=model.title,
        date=model.date,
        created_by=model.created_by,
        description=model.description,
        start_time=model.start_time,
        end_time=model.end_time,
        type=EventType(model.type),
        contact_id=ContactId(value=model.contact_id) if model.contact_id else None,
        priority=EventPriority(model.priority) if model.priority else None,
        status=EventStatus(model.status),
        location=model.location,
        notes=model.notes,
        created_at=model.created_at,
        completed_at=model.completed_at,
        cancelled_at=model.cancelled_at,
    )


def business_from_model(model: BusinessModel) -> Business:
    return Business(
        id=BusinessId(value=model.id),
        tenant_id=model.tenant_id,
        name=model.name,
        created_by=model.created_by,
        address=model.address,
        city=model.city,
        state=model.state,
        zip_code=model.zip_code,
        place_id=model.place_id,
        created_at=model.created_at,
    )


def opportunity_from_model(model: OpportunityModel) -> Opportunity:
    return Opportunity(
        id=OpportunityId(value=model.id),
        tenant_id=model.tenant_id,
        place_id=model.place_id,
        name=model.name,
        created_by=model.created_by,
        address=model.address,
        city=model.city,
        state=model.state,
        zip_code=model.zip_code,
        status=OpportunityStatus(model.status),
        business_id=BusinessId(value=model.business_id) if model.business_id else None,
        created_at=model.created_at,
        converted_at=model.converted_at,
    )
