from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.tokens import RefreshToken
from drf_spectacular.utils import extend_schema

from .serializers import (
    AccountPublicSerializer,
    PersonalSettingsSerializer,
    RegistrationSerializer,
    UserLoginSerializer,
    UserSerializer,
    VerifyEmailSerializer,
)
from .services import (
    DuplicateAccountError,
    InactiveAccountError,
    InvalidCredentialsError,
    InvalidTokenError,
    ProvisioningFailedError,
    ValidationFailedError,
    authenticate_user,
    get_personal_settings,
    provision_account,
    update_personal_settings,
    verify_user_email,
)


# Response serializers for API documentation
class TokensResponseSerializer(serializers.Serializer):
    refresh = serializers.CharField()
    access = serializers.CharField()


class RegistrationResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    message = serializers.CharField()
    user = AccountPublicSerializer()


class AuthResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    user = UserSerializer()
    tokens = TokensResponseSerializer()


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


class ValidationErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()
    details = serializers.DictField()


@extend_schema(
    request=RegistrationSerializer,
    responses={
        201: RegistrationResponseSerializer,
        400: ValidationErrorResponseSerializer,
        409: ErrorResponseSerializer,
        500: ErrorResponseSerializer,
    },
    description=(
        "Register a new account. Creates the account, personal settings, "
        "an optional couple profile and the default categories atomically."
    ),
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    """Register a new account."""
    serializer = RegistrationSerializer(data=request.data)

    if not serializer.is_valid():
        return Response({
            'error': 'Invalid registration data',
            'details': serializer.errors,
        }, status=status.HTTP_400_BAD_REQUEST)

    data = serializer.validated_data

    try:
        account = provision_account(
            email=data['email'],
            password=data['password'],
            name=data['name'],
            couple_name=data.get('couple_name'),
        )
    except ValidationFailedError as e:
        return Response(
            {'error': str(e), 'details': e.details},
            status=status.HTTP_400_BAD_REQUEST
        )
    except DuplicateAccountError as e:
        return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)
    except ProvisioningFailedError:
        return Response(
            {'error': 'Internal server error'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    return Response({
        'success': True,
        'message': 'Account created successfully',
        'user': AccountPublicSerializer(account.user).data,
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    request=UserLoginSerializer,
    responses={
        200: AuthResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
    },
    description="Authenticate with email and password to receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with email and password."""
    serializer = UserLoginSerializer(data=request.data)

    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        user = authenticate_user(**serializer.validated_data)
    except InvalidCredentialsError as e:
        return Response({'error': str(e)}, status=status.HTTP_401_UNAUTHORIZED)
    except InactiveAccountError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    refresh = RefreshToken.for_user(user)

    return Response({
        'message': 'Login successful',
        'user': UserSerializer(user).data,
        'tokens': {
            'refresh': str(refresh),
            'access': str(refresh.access_token),
        }
    })


@extend_schema(
    responses={200: UserSerializer},
    description="Get the current account with its settings and couple summary.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_current_user(request):
    """Get current authenticated user profile."""
    get_personal_settings(user=request.user)
    return Response(UserSerializer(request.user).data)


@extend_schema(
    request=PersonalSettingsSerializer,
    responses={
        200: PersonalSettingsSerializer,
        400: ErrorResponseSerializer,
    },
    description="Update the current account's personal settings.",
    tags=['auth'],
)
@api_view(['PATCH'])
@permission_classes([IsAuthenticated])
def update_settings(request):
    """Update personal settings."""
    serializer = PersonalSettingsSerializer(data=request.data, partial=True)

    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    personal_settings = update_personal_settings(
        user=request.user,
        **serializer.validated_data
    )
    return Response(PersonalSettingsSerializer(personal_settings).data)


@extend_schema(
    request=VerifyEmailSerializer,
    responses={
        200: MessageResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Verify the account's email address with its verification token.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def verify_email(request):
    """Verify email with token."""
    serializer = VerifyEmailSerializer(data=request.data)

    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        verify_user_email(
            user_id=request.user.id,
            token=serializer.validated_data['token']
        )
    except InvalidTokenError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response({'message': 'Email verified successfully'})
