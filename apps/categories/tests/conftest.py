import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.services import provision_account
from apps.categories.models import CategoryKind
from apps.categories.services import create_category


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def client_for():
    """Return a factory building JWT-authenticated clients for a user."""
    def make_client(user):
        client = APIClient()
        refresh = RefreshToken.for_user(user)
        client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
        return client
    return make_client


@pytest.fixture
def single_user(db):
    """Account with personal categories."""
    return provision_account(email='single@example.com', password='TestPass123!', name='Single').user


@pytest.fixture
def couple_user(db):
    """Account with shared categories."""
    return provision_account(
        email='couple@example.com',
        password='TestPass123!',
        name='Couple Member',
        couple_name='Nosotros',
    ).user


@pytest.fixture
def custom_category(single_user):
    """Custom expense category of the single user."""
    return create_category(
        user=single_user,
        name='Mascotas',
        icon='paw',
        color='#FFAA00',
        kind=CategoryKind.EXPENSE,
    )
