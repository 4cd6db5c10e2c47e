from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.db import models
from django.utils import timezone
import uuid


class UserManager(BaseUserManager):
    """Custom user manager for email-based authentication."""

    use_in_migrations = True

    @classmethod
    def normalize_email(cls, email):
        """Trim and lower-case the whole address; accounts are case-insensitive."""
        return (email or '').strip().lower()

    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError('Email is required')

        email = self.normalize_email(email)
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('email_verified_at', timezone.now())

        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True')

        return self.create_user(email, password, **extra_fields)


class User(AbstractBaseUser, PermissionsMixin):
    """Account with email authentication, optionally part of a couple."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(unique=True, max_length=254, db_index=True)
    name = models.CharField(max_length=100, blank=True)

    # Verification
    email_verified_at = models.DateTimeField(null=True, blank=True)
    verification_token = models.CharField(max_length=64, blank=True, null=True)

    # Shared profile (at most one)
    couple = models.ForeignKey(
        'couples.CoupleProfile',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='members',
    )

    # Permissions
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    last_login = models.DateTimeField(null=True, blank=True)

    objects = UserManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = []

    class Meta:
        db_table = 'users'
        indexes = [
            models.Index(fields=['created_at'], name='users_created_idx'),
        ]

    def __str__(self):
        return self.email

    @property
    def email_verified(self):
        return self.email_verified_at is not None

    @property
    def has_couple(self):
        return self.couple_id is not None

    def get_display_name(self):
        """Return display name or email prefix."""
        return self.name or self.email.split('@')[0]

    def get_first_name(self):
        return self.get_display_name().split(' ')[0]


class Theme(models.TextChoices):
    LIGHT = 'light', 'Light'
    DARK = 'dark', 'Dark'
    SYSTEM = 'system', 'System'


class AssistantPersonality(models.TextChoices):
    FRIENDLY = 'friendly', 'Friendly'
    PROFESSIONAL = 'professional', 'Professional'
    MOTIVATIONAL = 'motivational', 'Motivational'
    CONCISE = 'concise', 'Concise'


class PersonalSettings(models.Model):
    """Per-account preferences, created together with the account."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name='settings')

    theme = models.CharField(max_length=10, choices=Theme.choices, default=Theme.LIGHT)
    language = models.CharField(max_length=5, default='es')
    currency = models.CharField(max_length=3, default='EUR')

    email_notifications = models.BooleanField(default=True)
    push_notifications = models.BooleanField(default=True)
    budget_alerts = models.BooleanField(default=True)
    goal_reminders = models.BooleanField(default=True)

    assistant_personality = models.CharField(
        max_length=20,
        choices=AssistantPersonality.choices,
        default=AssistantPersonality.FRIENDLY,
    )
    share_data_for_analytics = models.BooleanField(default=False)

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'personal_settings'
        verbose_name_plural = 'personal settings'

    def __str__(self):
        return f"Settings for {self.user.email}"
