import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.services import provision_account


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
def ana(db):
    """Single account without a couple."""
    return provision_account(email='ana@example.com', password='TestPass123!', name='Ana García').user


@pytest.fixture
def luis(db):
    """Second single account without a couple."""
    return provision_account(email='luis@example.com', password='TestPass123!', name='Luis Martín').user


@pytest.fixture
def carmen(db):
    """Account registered together with a couple name."""
    return provision_account(
        email='carmen@example.com',
        password='TestPass123!',
        name='Carmen López',
        couple_name='Casa de Carmen',
    ).user


@pytest.fixture
def pending_invitation(ana, luis):
    """Invitation from ana to luis, not yet accepted."""
    from apps.couples.services import create_invitation
    invitation = create_invitation(inviter=ana, partner_email=luis.email, message='¡Hola!')
    ana.refresh_from_db()
    return invitation


@pytest.fixture
def paired(pending_invitation, ana, luis):
    """Ana and luis sharing one couple."""
    from apps.couples.services import accept_invitation
    accept_invitation(token=pending_invitation.token, user=luis)
    ana.refresh_from_db()
    luis.refresh_from_db()
    return ana.couple
