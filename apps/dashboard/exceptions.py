"""
Domain exceptions for dashboard app.

Exception Hierarchy:
    DashboardServiceError (base)
    └── InvalidPeriodError

Usage:
    from apps.dashboard.exceptions import InvalidPeriodError

    if period not in PERIODS:
        raise InvalidPeriodError(f"Invalid period: {period}")
"""


class DashboardServiceError(Exception):
    """
    Base exception for all dashboard errors.

    Views catch this class and return ``{'error': str(e)}`` with status 400.
    """

    pass


class InvalidPeriodError(DashboardServiceError):
    """
    Raised when the requested period is not one of week, month, quarter, year.

    Example:
        raise InvalidPeriodError(
            "Invalid period: 'decade'. Valid options: week, month, quarter, year"
        )
    """

    pass
