import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.services import provision_account
from apps.couples.services import accept_invitation, create_invitation


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
    """Account without a couple."""
    return provision_account(email='single@example.com', password='TestPass123!', name='Single').user


@pytest.fixture
def partners(db):
    """Two accounts sharing one couple."""
    ana = provision_account(email='ana@example.com', password='TestPass123!', name='Ana').user
    luis = provision_account(email='luis@example.com', password='TestPass123!', name='Luis').user
    invitation = create_invitation(inviter=ana, partner_email=luis.email)
    accept_invitation(token=invitation.token, user=luis)
    ana.refresh_from_db()
    luis.refresh_from_db()
    return ana, luis
