"""
Goals app services layer.

Services contain business logic and orchestrate operations across models.
All state-changing operations use transactions and concurrency protection.
"""

from .exceptions import (
    GoalsServiceError,
    GoalNotFoundError,
    InvalidGoalDataError,
    GoalAlreadyCompletedError,
)

from .goal_management import (
    MAX_AMOUNT,
    validate_amount,
    get_goals_for_user,
    get_goal,
    create_goal,
    update_goal,
    delete_goal,
    add_contribution,
)


__all__ = [
    # Exceptions
    'GoalsServiceError',
    'GoalNotFoundError',
    'InvalidGoalDataError',
    'GoalAlreadyCompletedError',

    # Goal Management
    'MAX_AMOUNT',
    'validate_amount',
    'get_goals_for_user',
    'get_goal',
    'create_goal',
    'update_goal',
    'delete_goal',
    'add_contribution',
]
