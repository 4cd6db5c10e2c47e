"""
Account provisioning service.

Registration creates the account, its personal settings, an optional
couple profile and the default categories as a single unit: either all
of it is stored or none of it is.
"""

import logging
import secrets
from dataclasses import dataclass
from typing import List, Optional

from django.conf import settings
from django.contrib.auth.hashers import make_password
from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import validate_email
from django.db import DEFAULT_DB_ALIAS, DatabaseError, IntegrityError, transaction
from django.utils import timezone

from apps.accounts.models import PersonalSettings, User
from apps.categories.models import Category
from apps.categories.services import CategoryScope, create_default_categories
from apps.couples.models import CoupleProfile
from apps.couples.services import create_couple_profile

from .exceptions import DuplicateAccountError, ProvisioningFailedError, ValidationFailedError

logger = logging.getLogger(__name__)

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 100
NAME_MAX_LENGTH = 100
COUPLE_NAME_MAX_LENGTH = 150


@dataclass(frozen=True)
class ProvisionedAccount:
    """Everything created for a new account."""

    user: User
    settings: PersonalSettings
    couple: Optional[CoupleProfile]
    categories: List[Category]

    @property
    def has_couple(self) -> bool:
        return self.couple is not None

    @property
    def scope(self) -> CategoryScope:
        if self.couple is not None:
            return CategoryScope.shared(self.couple)
        return CategoryScope.personal(self.user)


def validate_registration(
    *,
    email: str,
    password: str,
    name: str,
    couple_name: Optional[str] = None
) -> None:
    """
    Check registration input before anything is written.

    Raises:
        ValidationFailedError: With per-field messages in ``details``
    """
    errors = {}

    try:
        validate_email(User.objects.normalize_email(email))
    except DjangoValidationError:
        errors['email'] = ['Enter a valid email address.']

    if not password or len(password) < PASSWORD_MIN_LENGTH:
        errors['password'] = [f'Password must be at least {PASSWORD_MIN_LENGTH} characters.']
    elif len(password) > PASSWORD_MAX_LENGTH:
        errors['password'] = [f'Password must be at most {PASSWORD_MAX_LENGTH} characters.']

    name = (name or '').strip()
    if not name:
        errors['name'] = ['Name is required.']
    elif len(name) > NAME_MAX_LENGTH:
        errors['name'] = [f'Name must be at most {NAME_MAX_LENGTH} characters.']

    if len((couple_name or '').strip()) > COUPLE_NAME_MAX_LENGTH:
        errors['coupleName'] = [f'Couple name must be at most {COUPLE_NAME_MAX_LENGTH} characters.']

    if errors:
        raise ValidationFailedError("Invalid registration data", details=errors)


def email_is_registered(email: str, *, using: str = DEFAULT_DB_ALIAS) -> bool:
    """Check whether an account already uses the (normalized) email."""
    return User.objects.db_manager(using).filter(email=email).exists()


def provision_account(
    *,
    email: str,
    password: str,
    name: str,
    couple_name: Optional[str] = None,
    using: str = DEFAULT_DB_ALIAS
) -> ProvisionedAccount:
    """
    Register a new account with everything it needs to start.

    Steps:
    1. Normalize the email and reject it if already registered
    2. Hash the password (before any database write)
    3. In one transaction: create the account, its personal settings,
       the couple profile with shared settings when a couple name is
       given, and the twelve default categories in the resulting scope

    The email check before the transaction only avoids needless work; two
    concurrent registrations can both pass it, and the unique constraint
    on the email then rejects the second one inside the transaction.

    Args:
        email: Email address (trimmed and lower-cased before use)
        password: Raw password; only its hash is stored
        name: Display name
        couple_name: Optional couple name; blank means no couple
        using: Database alias to provision into

    Returns:
        ProvisionedAccount with the created rows

    Raises:
        ValidationFailedError: If the input is malformed (nothing is written)
        DuplicateAccountError: If the email is already registered
        ProvisioningFailedError: If any write fails (everything is rolled back)
    """
    validate_registration(email=email, password=password, name=name, couple_name=couple_name)

    email = User.objects.normalize_email(email)
    if email_is_registered(email, using=using):
        raise DuplicateAccountError("An account with this email already exists")

    password_hash = make_password(password)
    couple_name = (couple_name or '').strip()

    try:
        with transaction.atomic(using=using):
            user = _create_account(
                email=email,
                name=name.strip(),
                password_hash=password_hash,
                using=using,
            )
            personal_settings = PersonalSettings.objects.db_manager(using).create(user=user)

            couple = None
            if couple_name:
                couple = create_couple_profile(name=couple_name, using=using)
                user.couple = couple
                user.save(using=using, update_fields=['couple'])

            scope = CategoryScope.shared(couple) if couple else CategoryScope.personal(user)
            categories = create_default_categories(owner=user, scope=scope, using=using)

    except IntegrityError as e:
        if email_is_registered(email, using=using):
            logger.info("Registration for %s lost a race with a concurrent signup", email)
            raise DuplicateAccountError("An account with this email already exists") from e
        _log_write_failure(email, e)
        raise ProvisioningFailedError("Account could not be created") from e

    except DatabaseError as e:
        _log_write_failure(email, e)
        raise ProvisioningFailedError("Account could not be created") from e

    except Exception as e:
        logger.exception("Account provisioning failed for %s", email)
        raise ProvisioningFailedError("Account could not be created") from e

    logger.info(
        "Provisioned account %s (%s) with %d categories, couple=%s",
        user.id, email, len(categories), couple.id if couple else None,
    )

    return ProvisionedAccount(
        user=user,
        settings=personal_settings,
        couple=couple,
        categories=categories,
    )


def _create_account(*, email: str, name: str, password_hash: str, using: str) -> User:
    extra = {}
    if settings.ACCOUNTS_AUTO_VERIFY:
        extra['email_verified_at'] = timezone.now()
    else:
        extra['verification_token'] = secrets.token_urlsafe(32)

    return User.objects.db_manager(using).create(
        email=email,
        name=name,
        password=password_hash,
        **extra
    )


def _log_write_failure(email: str, error: DatabaseError) -> None:
    # Never log the driver message, it can echo the failing row and its password hash
    constraint = getattr(getattr(error.__cause__, 'diag', None), 'constraint_name', None)
    logger.error(
        "Account provisioning failed for %s: %s (constraint=%s)",
        email, type(error).__name__, constraint,
    )
