"""
Invite management service.

Handles couple invitations: creating time-limited links, previewing them
and joining a couple by accepting one.
"""

import logging
import secrets
from datetime import timedelta
from typing import Optional

from django.conf import settings
from django.db import transaction
from django.db.models import Q, QuerySet
from django.utils import timezone

from apps.accounts.models import PersonalSettings, User
from apps.categories.services import move_categories_to_couple
from apps.couples.models import CoupleInvitation, CoupleProfile, InvitationStatus
from apps.events.models import CalendarEvent
from apps.goals.models import SavingsGoal

from .couple_management import create_couple_profile
from .exceptions import (
    AlreadyPairedError,
    CannotAcceptOwnInvitationError,
    CoupleFullError,
    InvitationNotFoundError,
    PartnerAlreadyPairedError,
    SelfInvitationError,
)

logger = logging.getLogger(__name__)


def build_invite_url(invitation: CoupleInvitation) -> str:
    """Link the invited partner opens to join the couple."""
    return f"{settings.FRONTEND_URL.rstrip('/')}/invite/{invitation.token}"


def _bring_records_into_couple(
    *,
    user: User,
    couple: CoupleProfile,
    previous_couple: Optional[CoupleProfile],
    include_default_categories: bool
) -> None:
    move_categories_to_couple(
        user=user,
        couple=couple,
        include_defaults=include_default_categories,
    )

    owned = Q(owner=user, couple__isnull=True)
    if previous_couple is not None:
        owned |= Q(couple=previous_couple)

    SavingsGoal.objects.filter(owned).update(couple=couple)
    CalendarEvent.objects.filter(owned).update(couple=couple)


@transaction.atomic
def create_invitation(
    *,
    inviter: User,
    partner_email: str,
    message: str = ''
) -> CoupleInvitation:
    """
    Invite a partner to join the inviter's couple.

    When the inviter has no couple yet, one named "<first name> y pareja"
    is created and their personal records move into it.

    Args:
        inviter: User sending the invitation
        partner_email: Email address of the invited partner
        message: Optional personal message

    Returns:
        Created CoupleInvitation instance

    Raises:
        CoupleFullError: If the inviter already has a partner
        SelfInvitationError: If the inviter invites their own email
        PartnerAlreadyPairedError: If the partner is already in a full couple
    """
    inviter = User.objects.select_for_update().get(pk=inviter.pk)
    partner_email = User.objects.normalize_email(partner_email)
    couple = inviter.couple

    if couple is not None and couple.is_full():
        raise CoupleFullError("You already have a partner")

    if partner_email == inviter.email:
        raise SelfInvitationError("You cannot invite yourself")

    partner = (
        User.objects
        .select_related('couple')
        .filter(email=partner_email)
        .first()
    )
    if partner is not None and partner.couple is not None and partner.couple.is_full():
        raise PartnerAlreadyPairedError("This person already has a partner")

    if couple is None:
        couple = create_couple_profile(name=f"{inviter.get_first_name()} y pareja")
        _bring_records_into_couple(
            user=inviter,
            couple=couple,
            previous_couple=None,
            include_default_categories=True,
        )
        inviter.couple = couple
        inviter.save(update_fields=['couple'])

    invitation = CoupleInvitation.objects.create(
        couple=couple,
        invited_by=inviter,
        partner_email=partner_email,
        message=message,
        token=secrets.token_hex(32),
        expires_at=timezone.now() + timedelta(days=settings.COUPLE_INVITE_TTL_DAYS),
    )

    logger.info("Couple invitation %s created by %s", invitation.id, inviter.id)
    return invitation


def get_pending_invitations(*, user: User) -> QuerySet:
    """
    List the non-expired pending invitations of the user's couple, newest first.
    """
    if not user.couple_id:
        return CoupleInvitation.objects.none()

    return (
        CoupleInvitation.objects
        .filter(
            couple_id=user.couple_id,
            status=InvitationStatus.PENDING,
            expires_at__gt=timezone.now(),
        )
        .order_by('-created_at')
    )


def _usable_invitations() -> QuerySet:
    return CoupleInvitation.objects.filter(
        status=InvitationStatus.PENDING,
        expires_at__gt=timezone.now(),
    )


def get_invitation_preview(*, token: str) -> CoupleInvitation:
    """
    Look up an invitation before accepting it.

    Args:
        token: Invitation token from the link

    Returns:
        CoupleInvitation with couple and inviter loaded

    Raises:
        InvitationNotFoundError: If the token is unknown, used or expired
        CoupleFullError: If the couple has meanwhile been completed
    """
    try:
        invitation = (
            _usable_invitations()
            .select_related('couple', 'invited_by')
            .get(token=token)
        )
    except CoupleInvitation.DoesNotExist:
        raise InvitationNotFoundError("Invitation is invalid or has expired")

    if invitation.couple.is_full():
        raise CoupleFullError("This invitation is no longer available")

    return invitation


@transaction.atomic
def accept_invitation(*, token: str, user: User) -> CoupleProfile:
    """
    Join a couple by accepting an invitation.

    The invitation row is locked so two people cannot accept the same
    link. The user's non-default categories, goals and events follow them
    into the couple, and a previous couple left without members is deleted.

    Args:
        token: Invitation token from the link
        user: User accepting the invitation

    Returns:
        The joined CoupleProfile

    Raises:
        InvitationNotFoundError: If the token is unknown, used or expired
        CannotAcceptOwnInvitationError: If the user belongs to the inviting couple
        AlreadyPairedError: If the user already belongs to a full couple
        CoupleFullError: If the couple already has two members
    """
    try:
        invitation = _usable_invitations().select_for_update().get(token=token)
    except CoupleInvitation.DoesNotExist:
        raise InvitationNotFoundError("Invitation is invalid or has expired")

    user = User.objects.select_for_update().get(pk=user.pk)
    couple = CoupleProfile.objects.select_for_update().get(pk=invitation.couple_id)

    if invitation.invited_by_id == user.pk or user.couple_id == couple.pk:
        raise CannotAcceptOwnInvitationError("You cannot accept your own invitation")

    previous_couple = user.couple
    if previous_couple is not None and previous_couple.is_full():
        raise AlreadyPairedError("You already have a partner")

    if couple.is_full():
        raise CoupleFullError("This couple is already complete")

    _bring_records_into_couple(
        user=user,
        couple=couple,
        previous_couple=previous_couple,
        include_default_categories=False,
    )
    user.couple = couple
    user.save(update_fields=['couple'])

    if previous_couple is not None and previous_couple.member_count() == 0:
        previous_couple.delete()

    couple.name = f"{invitation.invited_by.get_first_name()} y {user.get_first_name()}"
    couple.save(update_fields=['name', 'updated_at'])

    invitation.status = InvitationStatus.ACCEPTED
    invitation.accepted_by = user
    invitation.accepted_at = timezone.now()
    invitation.save(update_fields=['status', 'accepted_by', 'accepted_at'])

    PersonalSettings.objects.get_or_create(user=user)

    logger.info("User %s joined couple %s", user.id, couple.id)
    return couple
