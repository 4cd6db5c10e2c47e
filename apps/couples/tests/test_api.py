import pytest
from django.urls import reverse
from rest_framework import status
from apps.couples.models import CoupleInvitation, InvitationStatus


# =============================================================================
# Couple Profile Tests
# =============================================================================

@pytest.mark.django_db
class TestMyCouple:
    """Tests for /api/couples/me/ endpoints"""

    def test_get_my_couple(self, client_for, carmen):
        response = client_for(carmen).get(reverse('couples:my-couple'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['name'] == 'Casa de Carmen'
        assert response.data['member_count'] == 1
        assert response.data['members'][0]['email'] == carmen.email
        assert response.data['shared_settings']['split_method'] == 'equal'

    def test_get_my_couple_without_couple(self, client_for, ana):
        response = client_for(ana).get(reverse('couples:my-couple'))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert 'error' in response.data

    def test_rename_couple(self, client_for, carmen):
        response = client_for(carmen).patch(
            reverse('couples:my-couple'), {'name': 'Hogar'}, format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['name'] == 'Hogar'

    def test_update_shared_settings(self, client_for, carmen):
        response = client_for(carmen).patch(
            reverse('couples:update-settings'),
            {'budget_cycle': 'weekly', 'budget_start_day': 15},
            format='json',
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['budget_cycle'] == 'weekly'
        assert response.data['budget_start_day'] == 15

    def test_update_shared_settings_invalid_day(self, client_for, carmen):
        response = client_for(carmen).patch(
            reverse('couples:update-settings'), {'budget_start_day': 40}, format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_requires_authentication(self, api_client, db):
        response = api_client.get(reverse('couples:my-couple'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# Invitation Tests
# =============================================================================

@pytest.mark.django_db
class TestInvitations:
    """Tests for /api/couples/invitations/ endpoints"""

    def test_create_invitation(self, client_for, ana):
        response = client_for(ana).post(
            reverse('couples:invitations'),
            {'partner_email': 'luis@example.com', 'message': 'Únete'},
            format='json',
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['partner_email'] == 'luis@example.com'
        assert response.data['invite_url'].endswith(f"/invite/{response.data['token']}")

    def test_create_self_invitation(self, client_for, ana):
        response = client_for(ana).post(
            reverse('couples:invitations'), {'partner_email': ana.email}, format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_list_pending(self, client_for, ana, pending_invitation):
        response = client_for(ana).get(reverse('couples:invitations'))

        assert response.status_code == status.HTTP_200_OK
        assert [inv['id'] for inv in response.data] == [str(pending_invitation.id)]

    def test_preview_is_public(self, api_client, pending_invitation):
        url = reverse('couples:invitation-preview', kwargs={'token': pending_invitation.token})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['inviter_name'] == 'Ana García'
        assert response.data['couple_name'] == 'Ana y pareja'

    def test_preview_unknown_token(self, api_client, db):
        url = reverse('couples:invitation-preview', kwargs={'token': 'nope'})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_accept(self, client_for, luis, pending_invitation):
        response = client_for(luis).post(
            reverse('couples:accept-invitation'),
            {'token': pending_invitation.token},
            format='json',
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['couple']['name'] == 'Ana y Luis'
        assert response.data['couple']['member_count'] == 2
        assert CoupleInvitation.objects.get(pk=pending_invitation.pk).status == InvitationStatus.ACCEPTED

    def test_accept_own_invitation(self, client_for, ana, pending_invitation):
        response = client_for(ana).post(
            reverse('couples:accept-invitation'),
            {'token': pending_invitation.token},
            format='json',
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_accept_unknown_token(self, client_for, luis):
        response = client_for(luis).post(
            reverse('couples:accept-invitation'), {'token': 'missing'}, format='json'
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
