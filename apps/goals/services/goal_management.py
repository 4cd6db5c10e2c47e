"""
Savings goal management service.

Goals belong to the user's couple when they have one, otherwise to the
user alone.
"""

import logging
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet
from django.utils import timezone

from apps.accounts.models import User
from apps.couples.services import couple_scope_filter
from apps.goals.models import GoalContribution, GoalPriority, SavingsGoal

from .exceptions import (
    GoalAlreadyCompletedError,
    GoalNotFoundError,
    InvalidGoalDataError,
)

logger = logging.getLogger(__name__)

MAX_AMOUNT = Decimal('999999.99')

GOAL_UPDATE_FIELDS = (
    'name',
    'description',
    'target_amount',
    'target_date',
    'priority',
    'icon',
    'color',
)


def validate_amount(amount, field: str = 'amount') -> Decimal:
    """
    Coerce and check a money amount.

    Amounts must be positive, at most 999999.99 and have no more than
    two decimal places.

    Raises:
        InvalidGoalDataError: If the amount breaks any of these rules
    """
    try:
        value = Decimal(str(amount))
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidGoalDataError(f"{field} must be a number")

    if not value.is_finite() or value <= 0:
        raise InvalidGoalDataError(f"{field} must be positive")

    if value > MAX_AMOUNT:
        raise InvalidGoalDataError(f"{field} must be at most {MAX_AMOUNT}")

    if value.as_tuple().exponent < -2:
        raise InvalidGoalDataError(f"{field} must have at most two decimal places")

    return value.quantize(Decimal('0.01'))


def _validate_target_date(target_date: Optional[date]) -> None:
    if target_date is not None and target_date <= timezone.localdate():
        raise InvalidGoalDataError("target_date must be in the future")


def get_goals_for_user(*, user: User, include_completed: bool = True) -> QuerySet:
    """List goals visible to the user, newest first."""
    queryset = SavingsGoal.objects.filter(couple_scope_filter(user))

    if not include_completed:
        queryset = queryset.filter(is_completed=False)

    return queryset.order_by('-created_at')


def get_goal(*, goal_id: UUID, user: User) -> SavingsGoal:
    """
    Get a goal visible to the user.

    Raises:
        GoalNotFoundError: If the goal doesn't exist or is outside the user's scope
    """
    try:
        return SavingsGoal.objects.filter(couple_scope_filter(user)).get(id=goal_id)
    except SavingsGoal.DoesNotExist:
        raise GoalNotFoundError(f"Goal with ID {goal_id} not found")


def _lock_goal(*, goal_id: UUID, user: User) -> SavingsGoal:
    try:
        return (
            SavingsGoal.objects
            .select_for_update()
            .filter(couple_scope_filter(user))
            .get(id=goal_id)
        )
    except SavingsGoal.DoesNotExist:
        raise GoalNotFoundError(f"Goal with ID {goal_id} not found")


@transaction.atomic
def create_goal(
    *,
    user: User,
    name: str,
    target_amount,
    description: str = '',
    target_date: Optional[date] = None,
    priority: str = GoalPriority.MEDIUM,
    icon: str = '',
    color: str = '',
    current_amount=Decimal('0.00')
) -> SavingsGoal:
    """
    Create a savings goal in the user's scope.

    Args:
        user: Creating user
        name: Goal name
        target_amount: Amount to save
        description: Optional description
        target_date: Optional deadline, must be in the future
        priority: low, medium or high (default medium)
        icon: Optional icon tag
        color: Optional hex color
        current_amount: Amount already saved (default 0)

    Returns:
        Created SavingsGoal instance

    Raises:
        InvalidGoalDataError: If amounts or the target date are invalid
    """
    target_amount = validate_amount(target_amount, 'target_amount')
    current_amount = Decimal(str(current_amount or '0')).quantize(Decimal('0.01'))
    if current_amount < 0:
        raise InvalidGoalDataError("current_amount cannot be negative")
    _validate_target_date(target_date)

    goal = SavingsGoal.objects.create(
        owner=user,
        couple_id=user.couple_id,
        name=name.strip(),
        description=description,
        target_amount=target_amount,
        current_amount=current_amount,
        target_date=target_date,
        priority=priority,
        icon=icon,
        color=color,
        is_completed=current_amount >= target_amount,
    )

    logger.info("Savings goal %s created by %s", goal.id, user.id)
    return goal


@transaction.atomic
def update_goal(*, goal_id: UUID, user: User, **fields) -> SavingsGoal:
    """
    Update a goal visible to the user.

    Unknown keys are ignored. Completion is re-evaluated when the target
    amount changes.

    Raises:
        GoalNotFoundError: If the goal is outside the user's scope
        InvalidGoalDataError: If the new amount or date is invalid
    """
    goal = _lock_goal(goal_id=goal_id, user=user)
    update_fields = ['updated_at']

    for field in GOAL_UPDATE_FIELDS:
        if field not in fields:
            continue

        value = fields[field]
        if field == 'target_amount':
            value = validate_amount(value, 'target_amount')
        elif field == 'target_date':
            _validate_target_date(value)
        elif field == 'name':
            value = value.strip()

        setattr(goal, field, value)
        update_fields.append(field)

    if 'target_amount' in fields:
        goal.is_completed = goal.current_amount >= goal.target_amount
        update_fields.append('is_completed')

    goal.save(update_fields=update_fields)
    return goal


@transaction.atomic
def delete_goal(*, goal_id: UUID, user: User) -> None:
    """
    Delete a goal and its contributions.

    Raises:
        GoalNotFoundError: If the goal is outside the user's scope
    """
    goal = _lock_goal(goal_id=goal_id, user=user)
    goal.delete()


@transaction.atomic
def add_contribution(
    *,
    goal_id: UUID,
    user: User,
    amount,
    notes: str = '',
    date: Optional[date] = None
) -> GoalContribution:
    """
    Add money to a savings goal.

    The goal row is locked so concurrent contributions add up correctly.
    The goal is marked completed once the saved amount reaches the target.

    Args:
        goal_id: UUID of the goal
        user: Contributing user
        amount: Amount added
        notes: Optional note
        date: Contribution date (default today)

    Returns:
        Created GoalContribution instance

    Raises:
        GoalNotFoundError: If the goal is outside the user's scope
        GoalAlreadyCompletedError: If the goal is already completed
        InvalidGoalDataError: If the amount is invalid
    """
    amount = validate_amount(amount)
    goal = _lock_goal(goal_id=goal_id, user=user)

    if goal.is_completed:
        raise GoalAlreadyCompletedError(f"Goal '{goal.name}' is already completed")

    contribution = GoalContribution.objects.create(
        goal=goal,
        user=user,
        amount=amount,
        notes=notes,
        date=date or timezone.localdate(),
    )

    goal.current_amount += amount
    goal.is_completed = goal.current_amount >= goal.target_amount
    goal.save(update_fields=['current_amount', 'is_completed', 'updated_at'])

    if goal.is_completed:
        logger.info("Savings goal %s completed", goal.id)

    return contribution
