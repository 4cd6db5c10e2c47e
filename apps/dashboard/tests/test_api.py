import pytest
from decimal import Decimal
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from apps.events.models import EventKind
from apps.events.services import create_event
from apps.goals.services import add_contribution, create_goal


@pytest.mark.django_db
class TestDashboardEndpoint:
    """Tests for GET /api/dashboard/stats/"""

    def test_default_period_is_month(self, client_for, single_user):
        response = client_for(single_user).get(reverse('dashboard:stats'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['period']['name'] == 'month'
        assert set(response.data) == {
            'period', 'summary', 'monthly_trends', 'upcoming_events', 'goals', 'categories',
        }
        assert len(response.data['monthly_trends']) == 6

    def test_summary_and_upcoming(self, client_for, single_user):
        today = timezone.localdate()
        create_event(user=single_user, title='Nómina', kind=EventKind.INCOME,
                     amount=Decimal('1500.00'), date=today)

        response = client_for(single_user).get(reverse('dashboard:stats'), {'period': 'week'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['summary']['total_income'] == Decimal('1500.00')
        assert response.data['upcoming_events'][0]['title'] == 'Nómina'

    def test_large_negative_savings_rate(self, client_for, single_user):
        today = timezone.localdate()
        create_event(user=single_user, title='Regalo', kind=EventKind.INCOME,
                     amount=Decimal('1.00'), date=today)
        create_event(user=single_user, title='Coche', kind=EventKind.EXPENSE,
                     amount=Decimal('2000.00'), date=today)

        response = client_for(single_user).get(reverse('dashboard:stats'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['summary']['savings_rate'] == Decimal('-199900.00')

    def test_overfunded_goal_progress(self, client_for, single_user):
        goal = create_goal(user=single_user, name='Hucha', target_amount=Decimal('0.01'))
        add_contribution(goal_id=goal.id, user=single_user, amount=Decimal('999999.99'))

        response = client_for(single_user).get(reverse('dashboard:stats'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['goals']['overall_progress'] == Decimal('9999999900.00')

    def test_invalid_period(self, client_for, single_user):
        response = client_for(single_user).get(reverse('dashboard:stats'), {'period': 'decade'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.data

    def test_requires_authentication(self, api_client, db):
        response = api_client.get(reverse('dashboard:stats'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
