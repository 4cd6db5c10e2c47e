"""
Service layer unit tests for accounts app.

Tests cover:
- Account provisioning (couple and personal scope)
- Rollback when any provisioning write fails
- Duplicate detection, including a concurrent signup
- Authentication, email verification and settings
"""

import logging
import uuid

import pytest
from unittest.mock import patch
from django.contrib.auth import get_user_model
from django.db import DatabaseError, IntegrityError
from django.test import override_settings

from apps.accounts.models import PersonalSettings, User
from apps.accounts.services import (
    authenticate_user,
    email_is_registered,
    get_personal_settings,
    provision_account,
    update_personal_settings,
    validate_registration,
    verify_user_email,
)
from apps.accounts.services.exceptions import (
    DuplicateAccountError,
    InactiveAccountError,
    InvalidCredentialsError,
    InvalidTokenError,
    ProvisioningFailedError,
    ValidationFailedError,
)
from apps.categories.models import Category, CategoryKind, ScopeKind
from apps.categories.services import DEFAULT_CATEGORIES
from apps.couples.models import CoupleProfile, SharedSettings


# =============================================================================
# Account Provisioning Tests
# =============================================================================

@pytest.mark.django_db
class TestProvisionAccount:
    """Tests for account_provisioning.provision_account."""

    def test_provision_with_couple(self):
        """A couple name creates the couple and links every category to it."""
        account = provision_account(
            email='a@b.com',
            password='secret123',
            name='Ana',
            couple_name='AnaYLuis',
        )

        user = User.objects.get(email='a@b.com')
        assert account.user == user
        assert account.has_couple
        assert user.couple == account.couple
        assert account.couple.name == 'AnaYLuis'
        assert SharedSettings.objects.filter(couple=account.couple).exists()
        assert PersonalSettings.objects.filter(user=user).exists()

        categories = Category.objects.filter(owner=user)
        assert categories.count() == 12
        assert all(c.scope == ScopeKind.SHARED for c in categories)
        assert all(c.couple_id == account.couple.id for c in categories)
        assert all(c.scope_id == account.couple.id for c in categories)

        personal = PersonalSettings.objects.get(user=user)
        assert account.settings == personal
        assert personal.theme == 'light'
        assert personal.language == 'es'
        assert personal.currency == 'EUR'
        assert personal.email_notifications
        assert personal.push_notifications
        assert personal.budget_alerts
        assert personal.goal_reminders
        assert personal.share_data_for_analytics is False
        assert personal.assistant_personality == 'friendly'

        account.couple.refresh_from_db()
        assert account.couple.currency == 'EUR'
        assert account.couple.timezone == 'Europe/Madrid'

        shared = SharedSettings.objects.get(couple=account.couple)
        assert shared.split_method == 'equal'
        assert shared.default_currency == 'EUR'
        assert shared.budget_cycle == 'monthly'
        assert shared.budget_start_day == 1
        assert shared.shared_goal_notifications is True

    def test_provision_without_couple(self):
        """Without a couple name the categories fall back to the personal scope."""
        account = provision_account(email='solo@example.com', password='secret123', name='Solo')

        assert not account.has_couple
        assert account.user.couple is None
        assert not CoupleProfile.objects.exists()

        categories = Category.objects.filter(owner=account.user)
        assert categories.count() == 12
        assert all(c.scope == ScopeKind.PERSONAL for c in categories)
        assert all(c.couple_id is None for c in categories)
        assert all(c.scope_id == account.user.id for c in categories)
        assert account.scope.scope_id == account.user.id

    def test_blank_couple_name_means_no_couple(self):
        """A whitespace couple name is treated as absent."""
        account = provision_account(
            email='blank@example.com',
            password='secret123',
            name='Blank',
            couple_name='   ',
        )

        assert not account.has_couple
        assert not CoupleProfile.objects.exists()

    def test_default_catalog_is_complete(self):
        """Exactly the catalog entries are created: eight expense, four income."""
        account = provision_account(email='cat@example.com', password='secret123', name='Cat')
        categories = Category.objects.filter(owner=account.user)

        assert categories.filter(kind=CategoryKind.EXPENSE).count() == 8
        assert categories.filter(kind=CategoryKind.INCOME).count() == 4
        assert categories.filter(is_default=True).count() == 12
        assert set(categories.values_list('name', flat=True)) == {c.name for c in DEFAULT_CATEGORIES}
        assert [c.name for c in account.categories] == [c.name for c in DEFAULT_CATEGORIES]

    def test_email_is_normalized(self):
        """Email is trimmed and lower-cased before storing."""
        account = provision_account(email='  Ana@Example.COM ', password='secret123', name='Ana')

        assert account.user.email == 'ana@example.com'

    def test_password_is_hashed(self):
        """Only a hash of the password is stored."""
        account = provision_account(email='hash@example.com', password='secret123', name='Hash')

        assert account.user.password != 'secret123'
        assert account.user.check_password('secret123')

    def test_duplicate_email_rejected(self, user):
        """Registering an existing email fails without writing anything."""
        with pytest.raises(DuplicateAccountError):
            provision_account(email='TestUser@example.com', password='secret123', name='Again')

        assert User.objects.filter(email='testuser@example.com').count() == 1
        assert not Category.objects.exists()

    def test_invalid_input_writes_nothing(self):
        """Malformed input is rejected before any write."""
        with pytest.raises(ValidationFailedError) as exc_info:
            provision_account(email='not-an-email', password='short', name='')

        assert set(exc_info.value.details) == {'email', 'password', 'name'}
        assert not User.objects.exists()

    def test_category_failure_rolls_back_everything(self):
        """A failing category insert leaves no account, settings, couple or categories."""
        original_save = Category.save
        calls = {'count': 0}

        def flaky_save(self, *args, **kwargs):
            calls['count'] += 1
            if calls['count'] == 7:
                raise DatabaseError('disk full')
            return original_save(self, *args, **kwargs)

        with patch.object(Category, 'save', new=flaky_save):
            with pytest.raises(ProvisioningFailedError):
                provision_account(
                    email='rollback@example.com',
                    password='secret123',
                    name='Rollback',
                    couple_name='Nosotros',
                )

        assert not User.objects.filter(email='rollback@example.com').exists()
        assert not PersonalSettings.objects.exists()
        assert not CoupleProfile.objects.exists()
        assert not SharedSettings.objects.exists()
        assert not Category.objects.exists()

    def test_settings_failure_rolls_back_account(self):
        """A failure after the account insert removes the account too."""
        with patch.object(PersonalSettings, 'save', side_effect=DatabaseError('boom')):
            with pytest.raises(ProvisioningFailedError):
                provision_account(email='settings@example.com', password='secret123', name='S')

        assert not User.objects.filter(email='settings@example.com').exists()

    def test_concurrent_signup_reports_duplicate(self, user):
        """Losing the race on the unique email is reported as a duplicate."""
        target = 'apps.accounts.services.account_provisioning.email_is_registered'

        with patch(target, side_effect=[False, True]):
            with pytest.raises(DuplicateAccountError):
                provision_account(email=user.email, password='secret123', name='Racer')

        assert User.objects.filter(email=user.email).count() == 1
        assert not Category.objects.exists()

    def test_unexplained_integrity_error_is_provisioning_failure(self):
        """An integrity error unrelated to the email is an internal failure."""
        with patch.object(PersonalSettings, 'save', side_effect=IntegrityError('constraint')):
            with pytest.raises(ProvisioningFailedError):
                provision_account(email='integrity@example.com', password='secret123', name='I')

        assert not User.objects.filter(email='integrity@example.com').exists()

    def test_logs_do_not_contain_secrets(self, caplog):
        """Neither the password nor its hash is ever logged."""
        caplog.set_level(logging.INFO)

        account = provision_account(email='logs@example.com', password='secret123', name='Logs')

        assert 'logs@example.com' in caplog.text
        assert 'secret123' not in caplog.text
        assert account.user.password not in caplog.text

    def test_failure_logs_do_not_contain_secrets(self, caplog):
        """The failure path logs the error without the password."""
        caplog.set_level(logging.INFO)

        with patch.object(Category, 'save', side_effect=DatabaseError('boom')):
            with pytest.raises(ProvisioningFailedError):
                provision_account(email='fail@example.com', password='secret123', name='F')

        assert 'fail@example.com' in caplog.text
        assert 'secret123' not in caplog.text

    @pytest.mark.parametrize('error_class', [IntegrityError, DatabaseError])
    def test_failure_logs_omit_driver_message(self, caplog, error_class):
        """A failing-row detail from the database never reaches the log."""
        caplog.set_level(logging.INFO)
        row = 'Failing row contains (bcrypt_sha256$$2b$12$leakedhash)'

        with patch.object(PersonalSettings, 'save', side_effect=error_class(row)):
            with pytest.raises(ProvisioningFailedError):
                provision_account(email='row@example.com', password='secret123', name='R')

        assert 'row@example.com' in caplog.text
        assert error_class.__name__ in caplog.text
        assert 'leakedhash' not in caplog.text

    @override_settings(ACCOUNTS_AUTO_VERIFY=False)
    def test_verification_token_when_not_auto_verified(self):
        """Without auto verification the account gets a verification token."""
        account = provision_account(email='verify@example.com', password='secret123', name='V')

        assert not account.user.email_verified
        assert account.user.verification_token

    def test_auto_verified_by_default(self):
        account = provision_account(email='auto@example.com', password='secret123', name='Auto')

        assert account.user.email_verified
        assert account.user.verification_token is None


@pytest.mark.django_db
class TestRegistrationHelpers:
    """Tests for validate_registration and email_is_registered."""

    def test_validate_accepts_good_input(self):
        validate_registration(email='ok@example.com', password='secret123', name='Ok')

    def test_validate_long_couple_name(self):
        with pytest.raises(ValidationFailedError) as exc_info:
            validate_registration(
                email='ok@example.com',
                password='secret123',
                name='Ok',
                couple_name='x' * 151,
            )

        assert 'coupleName' in exc_info.value.details

    def test_validate_long_password(self):
        with pytest.raises(ValidationFailedError) as exc_info:
            validate_registration(email='ok@example.com', password='p' * 101, name='Ok')

        assert 'password' in exc_info.value.details

    def test_email_is_registered(self, user):
        assert email_is_registered('testuser@example.com')
        assert not email_is_registered('nobody@example.com')


# =============================================================================
# Authentication and Settings Tests
# =============================================================================

@pytest.mark.django_db
class TestAuthentication:
    """Tests for user_authentication.authenticate_user."""

    def test_authenticate_success(self, user):
        authenticated = authenticate_user(email='TESTUSER@example.com', password='TestPass123!')

        assert authenticated == user
        assert authenticated.last_login is not None

    def test_returns_configured_user_model(self, user):
        authenticated = authenticate_user(email=user.email, password='TestPass123!')

        assert type(authenticated) is get_user_model()

    def test_wrong_password(self, user):
        with pytest.raises(InvalidCredentialsError):
            authenticate_user(email=user.email, password='WrongPass')

    def test_unknown_email(self, db):
        with pytest.raises(InvalidCredentialsError):
            authenticate_user(email='ghost@example.com', password='whatever1')

    def test_inactive_account(self, user_inactive):
        with pytest.raises(InactiveAccountError):
            authenticate_user(email=user_inactive.email, password='TestPass123!')


@pytest.mark.django_db
class TestEmailVerification:

    def test_verify_success(self, user_unverified):
        verified = verify_user_email(user_id=user_unverified.id, token='test-verification-token')

        assert verified.email_verified
        assert verified.verification_token is None

    def test_verify_wrong_token(self, user_unverified):
        with pytest.raises(InvalidTokenError):
            verify_user_email(user_id=user_unverified.id, token='nope')

    def test_verify_unknown_user(self, db):
        with pytest.raises(InvalidTokenError):
            verify_user_email(user_id=uuid.uuid4(), token='test-verification-token')


@pytest.mark.django_db
class TestPersonalSettings:

    def test_get_creates_missing_settings(self, user):
        personal_settings = get_personal_settings(user=user)

        assert personal_settings.user == user
        assert personal_settings.currency == 'EUR'

    def test_update_ignores_unknown_fields(self, user):
        personal_settings = update_personal_settings(user=user, theme='dark', user_id='x')

        assert personal_settings.theme == 'dark'
        assert personal_settings.user == user
