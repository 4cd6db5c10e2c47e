"""
Dashboard Statistics
====================

Read-only aggregations behind the dashboard widgets: income and expenses
for a period, monthly trends, upcoming calendar entries, savings goal
progress and the category catalog size.

Functions:
    resolve_period: Turn a period name into a date range.
    get_dashboard_stats: Build the full dashboard payload for a user.

Example:
    Getting this month's summary::

        from apps.dashboard.statistics import get_dashboard_stats

        stats = get_dashboard_stats(user=request.user, period='month')
        print(f"Net balance: {stats['summary']['net_balance']} EUR")

Note:
    Everything is scoped like the rest of the API: the user's couple when
    they have one, otherwise the user alone. Nothing here writes.
"""

import calendar
from datetime import date, timedelta
from decimal import Decimal
from typing import NamedTuple, Optional

from django.db.models import Count, DecimalField, Q, Sum
from django.db.models.functions import Coalesce, TruncMonth
from django.utils import timezone

from apps.accounts.models import User
from apps.categories.models import Category
from apps.categories.services import CategoryScope
from apps.couples.services import couple_scope_filter
from apps.events.models import CalendarEvent, EventKind
from apps.goals.models import SavingsGoal

from .exceptions import InvalidPeriodError

PERIODS = ('week', 'month', 'quarter', 'year')
UPCOMING_EVENTS_LIMIT = 5
TREND_MONTHS = 6

ZERO = Decimal('0.00')


class Period(NamedTuple):
    name: str
    start: date
    end: date


def _month_end(year: int, month: int) -> date:
    return date(year, month, calendar.monthrange(year, month)[1])


def resolve_period(period: str, today: Optional[date] = None) -> Period:
    """
    Resolve a period name to an inclusive date range around ``today``.

    Args:
        period (str): One of ``week`` (Monday to Sunday), ``month``,
            ``quarter`` or ``year``.
        today (date, optional): Reference day. Defaults to the current
            local date.

    Returns:
        Period: Named tuple with ``name``, ``start`` and ``end``.

    Raises:
        InvalidPeriodError: If the period name is unknown.

    Example:
        >>> resolve_period('quarter', date(2025, 5, 14))
        Period(name='quarter', start=datetime.date(2025, 4, 1), end=datetime.date(2025, 6, 30))
    """
    today = today or timezone.localdate()

    if period == 'week':
        start = today - timedelta(days=today.weekday())
        return Period(period, start, start + timedelta(days=6))

    if period == 'month':
        return Period(period, today.replace(day=1), _month_end(today.year, today.month))

    if period == 'quarter':
        first_month = 3 * ((today.month - 1) // 3) + 1
        return Period(
            period,
            date(today.year, first_month, 1),
            _month_end(today.year, first_month + 2),
        )

    if period == 'year':
        return Period(period, date(today.year, 1, 1), date(today.year, 12, 31))

    raise InvalidPeriodError(
        f"Invalid period: '{period}'. Valid options: {', '.join(PERIODS)}"
    )


def _period_summary(events, period: Period) -> dict:
    money = DecimalField(max_digits=12, decimal_places=2)
    totals = events.filter(date__range=(period.start, period.end)).aggregate(
        income=Coalesce(Sum('amount', filter=Q(kind=EventKind.INCOME)), ZERO, output_field=money),
        expenses=Coalesce(Sum('amount', filter=Q(kind=EventKind.EXPENSE)), ZERO, output_field=money),
        count=Count('id'),
    )

    income = totals['income']
    expenses = totals['expenses']
    net_balance = income - expenses

    if income > 0:
        savings_rate = (net_balance / income * 100).quantize(Decimal('0.01'))
    else:
        savings_rate = ZERO

    return {
        'total_income': income,
        'total_expenses': expenses,
        'net_balance': net_balance,
        'events_count': totals['count'],
        'savings_rate': savings_rate,
    }


def _first_of_month(day: date, months_back: int) -> date:
    index = day.year * 12 + day.month - 1 - months_back
    return date(index // 12, index % 12 + 1, 1)


def _monthly_trends(events, today: date) -> list:
    """Income and expenses per month for the last six months, oldest first."""
    money = DecimalField(max_digits=12, decimal_places=2)
    first = _first_of_month(today, TREND_MONTHS - 1)
    last = _month_end(today.year, today.month)

    # TruncMonth groups by month, filtered Sums split by kind
    rows = (
        events.filter(date__range=(first, last))
        .annotate(month=TruncMonth('date'))
        .values('month')
        .annotate(
            income=Coalesce(Sum('amount', filter=Q(kind=EventKind.INCOME)), ZERO, output_field=money),
            expenses=Coalesce(Sum('amount', filter=Q(kind=EventKind.EXPENSE)), ZERO, output_field=money),
        )
        .order_by('month')
    )
    totals = {(row['month'].year, row['month'].month): row for row in rows}

    trends = []
    for offset in range(TREND_MONTHS - 1, -1, -1):
        month = _first_of_month(today, offset)
        row = totals.get((month.year, month.month), {})
        income = row.get('income', ZERO)
        expenses = row.get('expenses', ZERO)
        trends.append({
            'month': month.strftime('%Y-%m'),
            'income': income,
            'expenses': expenses,
            'net_balance': income - expenses,
        })
    return trends


def _goal_progress(user: User, period: Period) -> dict:
    goals = SavingsGoal.objects.filter(couple_scope_filter(user))
    money = DecimalField(max_digits=12, decimal_places=2)
    totals = goals.aggregate(
        target=Coalesce(Sum('target_amount'), ZERO, output_field=money),
        saved=Coalesce(Sum('current_amount'), ZERO, output_field=money),
        total=Count('id'),
        completed=Count('id', filter=Q(is_completed=True)),
    )

    if totals['target'] > 0:
        overall = (totals['saved'] / totals['target'] * 100).quantize(Decimal('0.01'))
    else:
        overall = ZERO

    # Only the viewing user's contributions count towards the period total
    active = (
        goals.filter(is_completed=False)
        .annotate(period_contributions=Coalesce(
            Sum(
                'contributions__amount',
                filter=Q(
                    contributions__user=user,
                    contributions__date__range=(period.start, period.end),
                ),
            ),
            ZERO,
            output_field=money,
        ))
        .order_by('target_date', '-created_at')
    )

    return {
        'total_goals': totals['total'],
        'completed_goals': totals['completed'],
        'total_target': totals['target'],
        'total_saved': totals['saved'],
        'overall_progress': overall,
        'active': [
            {
                'id': goal.id,
                'name': goal.name,
                'target_amount': goal.target_amount,
                'current_amount': goal.current_amount,
                'progress_percentage': goal.progress_percentage,
                'period_contributions': goal.period_contributions,
                'target_date': goal.target_date,
            }
            for goal in active
        ],
    }


def _category_counts(user: User) -> dict:
    rows = (
        CategoryScope.for_user(user)
        .apply(Category.objects.all())
        .values('kind')
        .annotate(count=Count('id'))
    )
    counts = {row['kind']: row['count'] for row in rows}

    return {
        'income': counts.get('income', 0),
        'expense': counts.get('expense', 0),
    }


def get_dashboard_stats(
    *,
    user: User,
    period: str = 'month',
    today: Optional[date] = None
) -> dict:
    """
    Build the dashboard payload for a user.

    Args:
        user (User): The user viewing the dashboard.
        period (str): Period for the income/expense summary.
        today (date, optional): Reference day. Defaults to the current
            local date.

    Returns:
        dict: A dictionary containing:
            - period (dict): ``name``, ``start`` and ``end`` of the range.
            - summary (dict): Income, expenses, net balance, number of
              events and savings rate (percentage of income kept).
            - monthly_trends (list[dict]): Income, expenses and net
              balance for each of the last six months, oldest first.
            - upcoming_events (list[CalendarEvent]): The next five events
              from ``today`` on.
            - goals (dict): Totals and per-goal progress of active goals,
              including what the user contributed during the period.
            - categories (dict): Category counts by kind.

    Raises:
        InvalidPeriodError: If the period name is unknown.
    """
    today = today or timezone.localdate()
    resolved = resolve_period(period, today)
    events = CalendarEvent.objects.filter(couple_scope_filter(user))

    upcoming = list(
        events.filter(date__gte=today).order_by('date', 'created_at')[:UPCOMING_EVENTS_LIMIT]
    )

    return {
        'period': {
            'name': resolved.name,
            'start': resolved.start,
            'end': resolved.end,
        },
        'summary': _period_summary(events, resolved),
        'monthly_trends': _monthly_trends(events, today),
        'upcoming_events': upcoming,
        'goals': _goal_progress(user, resolved),
        'categories': _category_counts(user),
    }
