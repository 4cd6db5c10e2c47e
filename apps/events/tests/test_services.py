"""
Service layer unit tests for events app.

Tests cover:
- Event scope (couple vs personal)
- Month filtering and filter validation
- Updates and deletion
"""

import pytest
from datetime import date
from decimal import Decimal

from apps.events.models import CalendarEvent, EventKind
from apps.events.services import (
    create_event,
    delete_event,
    get_events_for_user,
    update_event,
)
from apps.events.services.exceptions import EventNotFoundError, InvalidEventFilterError


@pytest.fixture
def march_events(single_user):
    """Three events of the single user around March 2025."""
    return [
        create_event(user=single_user, title='Nómina', kind=EventKind.INCOME,
                     amount=Decimal('1800.00'), date=date(2025, 3, 1)),
        create_event(user=single_user, title='Alquiler', kind=EventKind.EXPENSE,
                     amount=Decimal('700.00'), date=date(2025, 3, 5)),
        create_event(user=single_user, title='Seguro', kind=EventKind.REMINDER,
                     date=date(2025, 4, 2)),
    ]


@pytest.mark.django_db
class TestEventManagement:
    """Tests for event_management.py service functions."""

    def test_create_personal_event(self, single_user):
        event = create_event(
            user=single_user,
            title='Dentista',
            kind=EventKind.EXPENSE,
            amount=Decimal('60.00'),
            date=date(2025, 6, 10),
        )

        assert event.owner == single_user
        assert event.couple is None

    def test_create_couple_event_visible_to_partner(self, partners):
        ana, luis = partners
        event = create_event(user=ana, title='Cena', kind=EventKind.EXPENSE, date=date(2025, 6, 1))

        assert event.couple_id == ana.couple_id
        assert list(get_events_for_user(user=luis)) == [event]

    def test_list_all_ordered_by_date(self, march_events, single_user):
        titles = [e.title for e in get_events_for_user(user=single_user)]

        assert titles == ['Nómina', 'Alquiler', 'Seguro']

    def test_list_month(self, march_events, single_user):
        events = get_events_for_user(user=single_user, month=3, year=2025)

        assert [e.title for e in events] == ['Nómina', 'Alquiler']

    def test_month_without_year(self, single_user):
        with pytest.raises(InvalidEventFilterError):
            get_events_for_user(user=single_user, month=3)

    def test_month_out_of_range(self, single_user):
        with pytest.raises(InvalidEventFilterError):
            get_events_for_user(user=single_user, month=13, year=2025)

    def test_update_event(self, march_events, single_user):
        event = update_event(
            event_id=march_events[1].id,
            user=single_user,
            amount=Decimal('750.00'),
            owner=None,
        )

        assert event.amount == Decimal('750.00')
        assert event.owner == single_user

    def test_update_outside_scope(self, march_events, partners):
        ana, _ = partners

        with pytest.raises(EventNotFoundError):
            update_event(event_id=march_events[0].id, user=ana, title='Mine')

    def test_delete_event(self, march_events, single_user):
        delete_event(event_id=march_events[2].id, user=single_user)

        assert CalendarEvent.objects.filter(owner=single_user).count() == 2
