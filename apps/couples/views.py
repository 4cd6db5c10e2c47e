from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    AcceptInvitationSerializer,
    CoupleProfileSerializer,
    CoupleUpdateSerializer,
    InvitationCreateSerializer,
    InvitationPreviewSerializer,
    InvitationSerializer,
    SharedSettingsSerializer,
)

from apps.couples.services import (
    accept_invitation,
    create_invitation,
    get_couple_for_user,
    get_invitation_preview,
    get_pending_invitations,
    update_couple_profile,
    update_shared_settings,
    # Exceptions
    AlreadyPairedError,
    CannotAcceptOwnInvitationError,
    CoupleFullError,
    CoupleNotFoundError,
    InvitationNotFoundError,
    PartnerAlreadyPairedError,
    SelfInvitationError,
)


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


class AcceptInvitationResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    couple = CoupleProfileSerializer()


@extend_schema(
    methods=['GET'],
    responses={200: CoupleProfileSerializer, 404: ErrorResponseSerializer},
    description="Get the current user's couple with members and shared settings.",
    tags=['couples'],
)
@extend_schema(
    methods=['PATCH'],
    request=CoupleUpdateSerializer,
    responses={200: CoupleProfileSerializer, 404: ErrorResponseSerializer},
    description="Rename the couple or change its currency/timezone.",
    tags=['couples'],
)
@api_view(['GET', 'PATCH'])
@permission_classes([IsAuthenticated])
def my_couple(request):
    """Get or update the current user's couple."""
    try:
        if request.method == 'PATCH':
            serializer = CoupleUpdateSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)
            update_couple_profile(user=request.user, **serializer.validated_data)

        couple = get_couple_for_user(user=request.user)
    except CoupleNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(CoupleProfileSerializer(couple).data)


@extend_schema(
    request=SharedSettingsSerializer,
    responses={200: SharedSettingsSerializer, 404: ErrorResponseSerializer},
    description="Update the shared settings of the current user's couple.",
    tags=['couples'],
)
@api_view(['PATCH'])
@permission_classes([IsAuthenticated])
def update_settings(request):
    """Update shared couple settings."""
    serializer = SharedSettingsSerializer(data=request.data, partial=True)
    serializer.is_valid(raise_exception=True)

    try:
        shared_settings = update_shared_settings(
            user=request.user,
            **serializer.validated_data
        )
    except CoupleNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(SharedSettingsSerializer(shared_settings).data)


@extend_schema(
    methods=['GET'],
    responses={200: InvitationSerializer(many=True)},
    description="List pending, non-expired invitations of the user's couple.",
    tags=['couples'],
)
@extend_schema(
    methods=['POST'],
    request=InvitationCreateSerializer,
    responses={201: InvitationSerializer, 400: ErrorResponseSerializer},
    description=(
        "Invite a partner. Creates the couple first when the user has none; "
        "the response contains the invitation link."
    ),
    tags=['couples'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def invitations(request):
    """List or create couple invitations."""
    if request.method == 'GET':
        pending = get_pending_invitations(user=request.user)
        return Response(InvitationSerializer(pending, many=True).data)

    serializer = InvitationCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        invitation = create_invitation(
            inviter=request.user,
            partner_email=serializer.validated_data['partner_email'],
            message=serializer.validated_data['message'],
        )
    except (CoupleFullError, SelfInvitationError, PartnerAlreadyPairedError) as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(InvitationSerializer(invitation).data, status=status.HTTP_201_CREATED)


@extend_schema(
    responses={
        200: InvitationPreviewSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Public preview of an invitation before accepting it.",
    tags=['couples'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def invitation_preview(request, token):
    """Show who sent an invitation."""
    try:
        invitation = get_invitation_preview(token=token)
    except InvitationNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except CoupleFullError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(InvitationPreviewSerializer(invitation).data)


@extend_schema(
    request=AcceptInvitationSerializer,
    responses={
        200: AcceptInvitationResponseSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Join a couple by accepting an invitation token.",
    tags=['couples'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def accept(request):
    """Accept a couple invitation."""
    serializer = AcceptInvitationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        accept_invitation(
            token=serializer.validated_data['token'],
            user=request.user
        )
    except InvitationNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except (CannotAcceptOwnInvitationError, AlreadyPairedError, CoupleFullError) as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    # Reload to pick up the new couple link
    request.user.refresh_from_db()
    couple = get_couple_for_user(user=request.user)

    return Response({
        'message': 'You have joined the couple',
        'couple': CoupleProfileSerializer(couple).data,
    })
