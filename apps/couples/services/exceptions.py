"""
Domain-specific exceptions for couples app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class CouplesServiceError(Exception):
    """Base exception for all couples service errors."""
    pass


class CoupleNotFoundError(CouplesServiceError):
    """Raised when the user has no couple profile."""
    pass


class CoupleFullError(CouplesServiceError):
    """Raised when a couple already has two members."""
    pass


class SelfInvitationError(CouplesServiceError):
    """Raised when a user invites their own email address."""
    pass


class PartnerAlreadyPairedError(CouplesServiceError):
    """Raised when the invited person already belongs to a full couple."""
    pass


class InvitationNotFoundError(CouplesServiceError):
    """Raised when an invitation token is unknown, used, revoked or expired."""
    pass


class CannotAcceptOwnInvitationError(CouplesServiceError):
    """Raised when a member of the inviting couple tries to accept."""
    pass


class AlreadyPairedError(CouplesServiceError):
    """Raised when the accepting user already belongs to a full couple."""
    pass
