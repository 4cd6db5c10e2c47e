"""
Domain-specific exceptions for goals app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class GoalsServiceError(Exception):
    """Base exception for all goals service errors."""
    pass


class GoalNotFoundError(GoalsServiceError):
    """Raised when a goal does not exist or is outside the user's scope."""
    pass


class InvalidGoalDataError(GoalsServiceError):
    """Raised when goal amounts or dates break the goal rules."""
    pass


class GoalAlreadyCompletedError(GoalsServiceError):
    """Raised when contributing to a goal that is already completed."""
    pass
