"""
Domain-specific exceptions for events app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class EventsServiceError(Exception):
    """Base exception for all calendar events service errors."""
    pass


class EventNotFoundError(EventsServiceError):
    """Raised when an event does not exist or is outside the user's scope."""
    pass


class InvalidEventFilterError(EventsServiceError):
    """Raised when a month/year filter is incomplete or out of range."""
    pass
