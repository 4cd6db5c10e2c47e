"""
Calendar event management service.

Handles income, expense, reminder and goal entries on the shared calendar.
"""

from datetime import date
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.couples.services import couple_scope_filter
from apps.events.models import CalendarEvent

from .exceptions import EventNotFoundError, InvalidEventFilterError

EVENT_UPDATE_FIELDS = ('title', 'kind', 'amount', 'date', 'description')


def get_events_for_user(
    *,
    user: User,
    month: Optional[int] = None,
    year: Optional[int] = None
) -> QuerySet:
    """
    List events visible to the user, ordered by date.

    Args:
        user: User whose scope is listed
        month: Optional month (1-12), requires year
        year: Optional year, requires month

    Returns:
        QuerySet of CalendarEvent instances

    Raises:
        InvalidEventFilterError: If only one of month/year is given or month is out of range
    """
    queryset = CalendarEvent.objects.filter(couple_scope_filter(user))

    if (month is None) != (year is None):
        raise InvalidEventFilterError("month and year must be given together")

    if month is not None:
        if not 1 <= month <= 12:
            raise InvalidEventFilterError("month must be between 1 and 12")
        queryset = queryset.filter(date__year=year, date__month=month)

    return queryset.order_by('date', 'created_at')


def _lock_event(*, event_id: UUID, user: User) -> CalendarEvent:
    try:
        return (
            CalendarEvent.objects
            .select_for_update()
            .filter(couple_scope_filter(user))
            .get(id=event_id)
        )
    except CalendarEvent.DoesNotExist:
        raise EventNotFoundError(f"Event with ID {event_id} not found")


def create_event(
    *,
    user: User,
    title: str,
    kind: str,
    date: date,
    amount: Optional[Decimal] = None,
    description: str = ''
) -> CalendarEvent:
    """Create an event in the user's scope."""
    return CalendarEvent.objects.create(
        owner=user,
        couple_id=user.couple_id,
        title=title.strip(),
        kind=kind,
        amount=amount,
        date=date,
        description=description,
    )


@transaction.atomic
def update_event(*, event_id: UUID, user: User, **fields) -> CalendarEvent:
    """
    Update an event visible to the user. Unknown keys are ignored.

    Raises:
        EventNotFoundError: If the event is outside the user's scope
    """
    event = _lock_event(event_id=event_id, user=user)
    update_fields = ['updated_at']

    for field in EVENT_UPDATE_FIELDS:
        if field in fields:
            setattr(event, field, fields[field])
            update_fields.append(field)

    event.save(update_fields=update_fields)
    return event


@transaction.atomic
def delete_event(*, event_id: UUID, user: User) -> None:
    """
    Delete an event visible to the user.

    Raises:
        EventNotFoundError: If the event is outside the user's scope
    """
    event = _lock_event(event_id=event_id, user=user)
    event.delete()
