"""
Couple management service.

Handles couple profile creation, lookup and shared settings.
"""

from typing import Optional

from django.db import DEFAULT_DB_ALIAS, transaction
from django.db.models import Prefetch, Q

from apps.accounts.models import User
from apps.couples.models import CoupleProfile, SharedSettings

from .exceptions import CoupleNotFoundError

SHARED_SETTINGS_FIELDS = (
    'split_method',
    'default_currency',
    'budget_cycle',
    'budget_start_day',
    'shared_goal_notifications',
    'large_expense_threshold',
)


def create_couple_profile(
    *,
    name: str,
    currency: str = 'EUR',
    timezone: str = 'Europe/Madrid',
    using: str = DEFAULT_DB_ALIAS
) -> CoupleProfile:
    """
    Create a couple profile together with its shared settings.

    Both rows are written in one atomic block; when called inside an
    outer transaction the block becomes a savepoint of it.

    Args:
        name: Display name of the couple
        currency: Base currency (default EUR)
        timezone: Timezone name (default Europe/Madrid)
        using: Database alias to write to

    Returns:
        Created CoupleProfile instance
    """
    with transaction.atomic(using=using):
        couple = CoupleProfile.objects.db_manager(using).create(
            name=name,
            currency=currency,
            timezone=timezone,
        )
        SharedSettings.objects.db_manager(using).create(
            couple=couple,
            default_currency=currency,
        )

    return couple


def get_couple_for_user(*, user: User) -> CoupleProfile:
    """
    Get the user's couple with members and shared settings loaded.

    Raises:
        CoupleNotFoundError: If the user has no couple
    """
    if not user.couple_id:
        raise CoupleNotFoundError("You are not part of a couple")

    try:
        return (
            CoupleProfile.objects
            .select_related('shared_settings')
            .prefetch_related(
                Prefetch('members', queryset=User.objects.order_by('created_at'))
            )
            .get(id=user.couple_id)
        )
    except CoupleProfile.DoesNotExist:
        raise CoupleNotFoundError("You are not part of a couple")


@transaction.atomic
def update_couple_profile(
    *,
    user: User,
    name: Optional[str] = None,
    currency: Optional[str] = None,
    timezone: Optional[str] = None
) -> CoupleProfile:
    """
    Update the user's couple profile.

    Raises:
        CoupleNotFoundError: If the user has no couple
    """
    if not user.couple_id:
        raise CoupleNotFoundError("You are not part of a couple")

    couple = CoupleProfile.objects.select_for_update().get(id=user.couple_id)
    update_fields = ['updated_at']

    if name is not None:
        couple.name = name.strip()
        update_fields.append('name')

    if currency is not None:
        couple.currency = currency
        update_fields.append('currency')

    if timezone is not None:
        couple.timezone = timezone
        update_fields.append('timezone')

    couple.save(update_fields=update_fields)
    return couple


@transaction.atomic
def update_shared_settings(*, user: User, **fields) -> SharedSettings:
    """
    Update the shared settings of the user's couple.

    Unknown keys are ignored. A missing settings row is recreated with
    defaults before the update.

    Raises:
        CoupleNotFoundError: If the user has no couple
    """
    if not user.couple_id:
        raise CoupleNotFoundError("You are not part of a couple")

    shared_settings, _ = (
        SharedSettings.objects
        .select_for_update()
        .get_or_create(couple_id=user.couple_id)
    )

    update_fields = ['updated_at']
    for field in SHARED_SETTINGS_FIELDS:
        if field in fields:
            setattr(shared_settings, field, fields[field])
            update_fields.append(field)

    shared_settings.save(update_fields=update_fields)
    return shared_settings


def couple_scope_filter(user: User) -> Q:
    """
    Filter matching records visible to the user.

    Records of the user's couple when they have one, otherwise the
    user's own records that belong to no couple.
    """
    if user.couple_id:
        return Q(couple_id=user.couple_id)
    return Q(owner=user, couple__isnull=True)
