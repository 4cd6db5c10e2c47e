import pytest
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a verified test user."""
    return User.objects.create_user(
        email='testuser@example.com',
        password='TestPass123!',
        name='Test User',
        email_verified_at=timezone.now(),
    )


@pytest.fixture
def user_unverified(db):
    """Create and return a user with unverified email."""
    return User.objects.create_user(
        email='unverified@example.com',
        password='TestPass123!',
        name='Unverified User',
        verification_token='test-verification-token',
    )


@pytest.fixture
def user_inactive(db):
    """Create and return an inactive user."""
    return User.objects.create_user(
        email='inactive@example.com',
        password='TestPass123!',
        name='Inactive User',
        is_active=False,
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an authenticated API client using JWT."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def registration_data():
    """Valid registration payload as sent by the web client."""
    return {
        'email': 'a@b.com',
        'password': 'secret123',
        'name': 'Ana',
        'coupleName': 'AnaYLuis',
    }
