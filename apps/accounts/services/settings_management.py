"""Personal settings service."""

from django.db import transaction

from apps.accounts.models import PersonalSettings, User

PERSONAL_SETTINGS_FIELDS = (
    'theme',
    'language',
    'currency',
    'email_notifications',
    'push_notifications',
    'budget_alerts',
    'goal_reminders',
    'assistant_personality',
    'share_data_for_analytics',
)


def get_personal_settings(*, user: User) -> PersonalSettings:
    """Return the user's settings, creating them with defaults if missing."""
    personal_settings, _ = PersonalSettings.objects.get_or_create(user=user)
    return personal_settings


@transaction.atomic
def update_personal_settings(*, user: User, **fields) -> PersonalSettings:
    """
    Update the user's personal settings.

    Unknown keys are ignored.

    Args:
        user: Owner of the settings
        **fields: New values for any of PERSONAL_SETTINGS_FIELDS

    Returns:
        Updated PersonalSettings instance
    """
    personal_settings, _ = (
        PersonalSettings.objects
        .select_for_update()
        .get_or_create(user=user)
    )

    update_fields = ['updated_at']
    for field in PERSONAL_SETTINGS_FIELDS:
        if field in fields:
            setattr(personal_settings, field, fields[field])
            update_fields.append(field)

    personal_settings.save(update_fields=update_fields)
    return personal_settings
