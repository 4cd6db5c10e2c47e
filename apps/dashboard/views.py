from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework import status
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from .exceptions import InvalidPeriodError
from .serializers import (
    DashboardQuerySerializer,
    DashboardResponseSerializer,
    ErrorSerializer,
)
from .statistics import get_dashboard_stats


@extend_schema(
    parameters=[
        OpenApiParameter(
            'period',
            OpenApiTypes.STR,
            description="Summary period: 'week', 'month', 'quarter' or 'year'",
            default='month',
        ),
    ],
    responses={
        200: DashboardResponseSerializer,
        400: ErrorSerializer,
    },
    description="Income and expense summary, upcoming events, goal progress and category counts.",
    tags=['dashboard'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def dashboard_stats(request):
    """Dashboard statistics for the user's scope - thin HTTP handler."""
    query_serializer = DashboardQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)

    try:
        stats = get_dashboard_stats(
            user=request.user,
            period=query_serializer.validated_data['period'],
        )
    except InvalidPeriodError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(DashboardResponseSerializer(stats).data)
