"""
Couples app services layer.

Services contain business logic and orchestrate operations across models.
All state-changing operations use transactions and concurrency protection.
"""

from .exceptions import (
    CouplesServiceError,
    CoupleNotFoundError,
    CoupleFullError,
    SelfInvitationError,
    PartnerAlreadyPairedError,
    InvitationNotFoundError,
    CannotAcceptOwnInvitationError,
    AlreadyPairedError,
)

from .couple_management import (
    create_couple_profile,
    get_couple_for_user,
    update_couple_profile,
    update_shared_settings,
    couple_scope_filter,
)

from .invite_management import (
    build_invite_url,
    create_invitation,
    get_pending_invitations,
    get_invitation_preview,
    accept_invitation,
)


__all__ = [
    # Exceptions
    'CouplesServiceError',
    'CoupleNotFoundError',
    'CoupleFullError',
    'SelfInvitationError',
    'PartnerAlreadyPairedError',
    'InvitationNotFoundError',
    'CannotAcceptOwnInvitationError',
    'AlreadyPairedError',

    # Couple Management
    'create_couple_profile',
    'get_couple_for_user',
    'update_couple_profile',
    'update_shared_settings',
    'couple_scope_filter',

    # Invite Management
    'build_invite_url',
    'create_invitation',
    'get_pending_invitations',
    'get_invitation_preview',
    'accept_invitation',
]
