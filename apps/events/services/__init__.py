"""
Events app services layer.

Services contain business logic and orchestrate operations across models.
"""

from .exceptions import (
    EventsServiceError,
    EventNotFoundError,
    InvalidEventFilterError,
)

from .event_management import (
    get_events_for_user,
    create_event,
    update_event,
    delete_event,
)


__all__ = [
    # Exceptions
    'EventsServiceError',
    'EventNotFoundError',
    'InvalidEventFilterError',

    # Event Management
    'get_events_for_user',
    'create_event',
    'update_event',
    'delete_event',
]
