"""Email verification service."""

from uuid import UUID

from django.contrib.auth import get_user_model
from django.db import transaction
from django.utils import timezone

from .exceptions import InvalidTokenError

User = get_user_model()


@transaction.atomic
def verify_user_email(*, user_id: UUID, token: str) -> User:
    """
    Verify user's email with token.

    Args:
        user_id: User's ID
        token: Verification token

    Returns:
        User instance

    Raises:
        InvalidTokenError: If token is invalid
    """
    try:
        user = (
            User.objects
            .select_for_update()
            .get(id=user_id)
        )
    except User.DoesNotExist:
        raise InvalidTokenError("Invalid verification token")

    if not token or user.verification_token != token:
        raise InvalidTokenError("Invalid verification token")

    # Token is single use
    user.email_verified_at = timezone.now()
    user.verification_token = None
    user.save(update_fields=['email_verified_at', 'verification_token'])

    return user
