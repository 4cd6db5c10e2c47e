from rest_framework import serializers

from .models import Category, CategoryKind, hex_color_validator


class CategorySerializer(serializers.ModelSerializer):
    """Category with its resolved scope."""

    scope_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = Category
        fields = [
            'id',
            'name',
            'icon',
            'color',
            'kind',
            'scope',
            'scope_id',
            'is_default',
            'created_at',
        ]
        read_only_fields = ['id', 'scope', 'scope_id', 'is_default', 'created_at']


class CategoryWriteSerializer(serializers.Serializer):
    """Input for creating or updating a category."""

    name = serializers.CharField(max_length=100)
    icon = serializers.CharField(max_length=50)
    color = serializers.CharField(max_length=7, validators=[hex_color_validator])
    kind = serializers.ChoiceField(choices=CategoryKind.choices)

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Name cannot be blank')
        return value


class CategoryQuerySerializer(serializers.Serializer):
    kind = serializers.ChoiceField(choices=CategoryKind.choices, required=False)
