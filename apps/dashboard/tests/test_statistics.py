"""
Unit tests for dashboard statistics.

Tests cover:
- Period resolution
- Income/expense summary for the period
- Upcoming events, goal progress and category counts
"""

import pytest
from datetime import date
from decimal import Decimal

from apps.dashboard.exceptions import InvalidPeriodError
from apps.dashboard.statistics import get_dashboard_stats, resolve_period
from apps.events.models import EventKind
from apps.events.services import create_event
from apps.goals.services import add_contribution, create_goal

TODAY = date(2025, 5, 14)


class TestResolvePeriod:

    def test_week_runs_monday_to_sunday(self):
        period = resolve_period('week', TODAY)

        assert period.start == date(2025, 5, 12)
        assert period.end == date(2025, 5, 18)

    def test_month(self):
        period = resolve_period('month', TODAY)

        assert (period.start, period.end) == (date(2025, 5, 1), date(2025, 5, 31))

    def test_quarter(self):
        period = resolve_period('quarter', TODAY)

        assert (period.start, period.end) == (date(2025, 4, 1), date(2025, 6, 30))

    def test_year(self):
        period = resolve_period('year', TODAY)

        assert (period.start, period.end) == (date(2025, 1, 1), date(2025, 12, 31))

    def test_february_leap_year(self):
        period = resolve_period('month', date(2024, 2, 10))

        assert period.end == date(2024, 2, 29)

    def test_unknown_period(self):
        with pytest.raises(InvalidPeriodError):
            resolve_period('decade', TODAY)


@pytest.mark.django_db
class TestDashboardStats:
    """Tests for statistics.get_dashboard_stats."""

    def test_empty_dashboard(self, single_user):
        stats = get_dashboard_stats(user=single_user, today=TODAY)

        assert stats['summary']['total_income'] == Decimal('0.00')
        assert stats['summary']['savings_rate'] == Decimal('0.00')
        assert stats['upcoming_events'] == []
        assert stats['goals']['total_goals'] == 0
        assert stats['categories'] == {'income': 4, 'expense': 8}

    def test_month_summary(self, single_user):
        create_event(user=single_user, title='Nómina', kind=EventKind.INCOME,
                     amount=Decimal('2000.00'), date=date(2025, 5, 1))
        create_event(user=single_user, title='Alquiler', kind=EventKind.EXPENSE,
                     amount=Decimal('800.00'), date=date(2025, 5, 3))
        create_event(user=single_user, title='Cine', kind=EventKind.EXPENSE,
                     amount=Decimal('20.00'), date=date(2025, 5, 20))
        create_event(user=single_user, title='Abril', kind=EventKind.EXPENSE,
                     amount=Decimal('999.00'), date=date(2025, 4, 30))

        summary = get_dashboard_stats(user=single_user, today=TODAY)['summary']

        assert summary['total_income'] == Decimal('2000.00')
        assert summary['total_expenses'] == Decimal('820.00')
        assert summary['net_balance'] == Decimal('1180.00')
        assert summary['events_count'] == 3
        assert summary['savings_rate'] == Decimal('59.00')

    def test_upcoming_events_limited(self, single_user):
        for day in range(10, 25):
            create_event(user=single_user, title=f'Día {day}', kind=EventKind.REMINDER,
                         date=date(2025, 5, day))

        upcoming = get_dashboard_stats(user=single_user, today=TODAY)['upcoming_events']

        assert [e.date.day for e in upcoming] == [14, 15, 16, 17, 18]

    def test_goal_progress_is_shared(self, partners):
        ana, luis = partners
        goal = create_goal(user=ana, name='Italia', target_amount=Decimal('1000.00'))
        create_goal(user=luis, name='Coche', target_amount=Decimal('1000.00'))
        add_contribution(goal_id=goal.id, user=luis, amount=Decimal('500.00'))

        goals = get_dashboard_stats(user=ana, today=TODAY)['goals']

        assert goals['total_goals'] == 2
        assert goals['completed_goals'] == 0
        assert goals['total_saved'] == Decimal('500.00')
        assert goals['overall_progress'] == Decimal('25.00')
        assert {g['name'] for g in goals['active']} == {'Italia', 'Coche'}

    def test_couple_categories_counted_once(self, partners):
        ana, _ = partners

        assert get_dashboard_stats(user=ana, today=TODAY)['categories'] == {'income': 4, 'expense': 8}

    def test_invalid_period(self, single_user):
        with pytest.raises(InvalidPeriodError):
            get_dashboard_stats(user=single_user, period='fortnight', today=TODAY)

    def test_monthly_trends_cover_last_six_months(self, single_user):
        create_event(user=single_user, title='Nómina', kind=EventKind.INCOME,
                     amount=Decimal('2000.00'), date=date(2025, 5, 1))
        create_event(user=single_user, title='Seguro', kind=EventKind.EXPENSE,
                     amount=Decimal('300.00'), date=date(2025, 3, 10))
        create_event(user=single_user, title='Noviembre', kind=EventKind.EXPENSE,
                     amount=Decimal('50.00'), date=date(2024, 11, 30))

        trends = get_dashboard_stats(user=single_user, today=TODAY)['monthly_trends']

        assert [t['month'] for t in trends] == [
            '2024-12', '2025-01', '2025-02', '2025-03', '2025-04', '2025-05',
        ]
        assert trends[3]['expenses'] == Decimal('300.00')
        assert trends[3]['net_balance'] == Decimal('-300.00')
        assert trends[5]['income'] == Decimal('2000.00')
        assert trends[0]['expenses'] == Decimal('0.00')

    def test_period_contributions_are_the_users_own(self, partners):
        ana, luis = partners
        goal = create_goal(user=ana, name='Italia', target_amount=Decimal('1000.00'))
        add_contribution(goal_id=goal.id, user=ana, amount=Decimal('100.00'), date=date(2025, 5, 2))
        add_contribution(goal_id=goal.id, user=ana, amount=Decimal('50.00'), date=date(2025, 4, 20))
        add_contribution(goal_id=goal.id, user=luis, amount=Decimal('200.00'), date=date(2025, 5, 3))

        active = get_dashboard_stats(user=ana, today=TODAY)['goals']['active']

        assert active[0]['period_contributions'] == Decimal('100.00')
        assert active[0]['current_amount'] == Decimal('350.00')

    def test_savings_rate_is_unbounded_below(self, single_user):
        create_event(user=single_user, title='Regalo', kind=EventKind.INCOME,
                     amount=Decimal('1.00'), date=TODAY)
        create_event(user=single_user, title='Coche', kind=EventKind.EXPENSE,
                     amount=Decimal('2000.00'), date=TODAY)

        summary = get_dashboard_stats(user=single_user, today=TODAY)['summary']

        assert summary['savings_rate'] == Decimal('-199900.00')
