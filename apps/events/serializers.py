from decimal import Decimal

from rest_framework import serializers

from .models import CalendarEvent, EventKind


class CalendarEventSerializer(serializers.ModelSerializer):

    class Meta:
        model = CalendarEvent
        fields = [
            'id',
            'title',
            'kind',
            'amount',
            'date',
            'description',
            'owner',
            'couple',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class EventWriteSerializer(serializers.Serializer):
    """Input for creating or updating a calendar event."""

    title = serializers.CharField(max_length=200)
    kind = serializers.ChoiceField(choices=EventKind.choices)
    amount = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal('0.01'),
        required=False,
        allow_null=True,
    )
    date = serializers.DateField()
    description = serializers.CharField(max_length=500, required=False, allow_blank=True)


class EventQuerySerializer(serializers.Serializer):
    """Optional month filter for the calendar listing."""

    month = serializers.IntegerField(min_value=1, max_value=12, required=False)
    year = serializers.IntegerField(min_value=1900, max_value=2100, required=False)

    def validate(self, attrs):
        if ('month' in attrs) != ('year' in attrs):
            raise serializers.ValidationError('month and year must be given together')
        return attrs
