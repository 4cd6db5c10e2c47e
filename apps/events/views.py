from rest_framework import viewsets, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from .serializers import (
    CalendarEventSerializer,
    EventQuerySerializer,
    EventWriteSerializer,
)

from apps.events.services import (
    create_event,
    delete_event,
    get_events_for_user,
    update_event,
    # Exceptions
    EventNotFoundError,
    InvalidEventFilterError,
)


class CalendarEventViewSet(viewsets.ModelViewSet):
    """
    ViewSet for calendar events.

    All business logic is handled by services.
    Views are thin HTTP handlers only.

    list: Events of the user's scope, optionally for one month (?month=&year=)
    create: Create an event
    retrieve: Get an event
    update: Replace an event's fields
    partial_update: Change some of an event's fields
    destroy: Delete an event
    """

    serializer_class = CalendarEventSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        """Return only events in the user's scope."""
        return get_events_for_user(user=self.request.user)

    def get_serializer_class(self):
        if self.action in ['create', 'update', 'partial_update']:
            return EventWriteSerializer
        return CalendarEventSerializer

    @extend_schema(
        parameters=[
            OpenApiParameter('month', OpenApiTypes.INT, description='Month (1-12), requires year'),
            OpenApiParameter('year', OpenApiTypes.INT, description='Year, requires month'),
        ],
    )
    def list(self, request, *args, **kwargs):
        query_serializer = EventQuerySerializer(data=request.query_params)
        query_serializer.is_valid(raise_exception=True)

        try:
            events = get_events_for_user(user=request.user, **query_serializer.validated_data)
        except InvalidEventFilterError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(CalendarEventSerializer(events, many=True).data)

    @extend_schema(request=EventWriteSerializer, responses={201: CalendarEventSerializer})
    def create(self, request, *args, **kwargs):
        serializer = EventWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        event = create_event(user=request.user, **serializer.validated_data)
        return Response(CalendarEventSerializer(event).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=EventWriteSerializer, responses={200: CalendarEventSerializer})
    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        serializer = EventWriteSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            event = update_event(
                event_id=self.kwargs['pk'],
                user=request.user,
                **serializer.validated_data
            )
        except EventNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(CalendarEventSerializer(event).data)

    def destroy(self, request, *args, **kwargs):
        try:
            delete_event(event_id=self.kwargs['pk'], user=request.user)
        except EventNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(status=status.HTTP_204_NO_CONTENT)
