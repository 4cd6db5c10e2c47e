from rest_framework import serializers

from .models import PersonalSettings, User
from .services.account_provisioning import (
    COUPLE_NAME_MAX_LENGTH,
    NAME_MAX_LENGTH,
    PASSWORD_MAX_LENGTH,
    PASSWORD_MIN_LENGTH,
)


class RegistrationSerializer(serializers.Serializer):
    """Registration request body; camelCase keys as sent by the web client."""

    email = serializers.EmailField(max_length=254)
    password = serializers.CharField(
        write_only=True,
        min_length=PASSWORD_MIN_LENGTH,
        max_length=PASSWORD_MAX_LENGTH,
        trim_whitespace=False,
        style={'input_type': 'password'}
    )
    name = serializers.CharField(max_length=NAME_MAX_LENGTH)
    coupleName = serializers.CharField(
        source='couple_name',
        max_length=COUPLE_NAME_MAX_LENGTH,
        required=False,
        allow_blank=True,
        allow_null=True,
    )
    passwordConfirm = serializers.CharField(
        source='password_confirm',
        write_only=True,
        required=False,
        trim_whitespace=False,
        style={'input_type': 'password'}
    )

    def validate(self, attrs):
        """Validate password confirmation when one is sent."""
        confirm = attrs.get('password_confirm')
        if confirm is not None and confirm != attrs['password']:
            raise serializers.ValidationError({
                'passwordConfirm': 'Passwords do not match'
            })
        return attrs


class AccountPublicSerializer(serializers.ModelSerializer):
    """Public projection of a newly registered account."""

    hasCouple = serializers.BooleanField(source='has_couple', read_only=True)

    class Meta:
        model = User
        fields = ['id', 'email', 'name', 'hasCouple']
        read_only_fields = fields


class PersonalSettingsSerializer(serializers.ModelSerializer):

    class Meta:
        model = PersonalSettings
        fields = [
            'theme',
            'language',
            'currency',
            'email_notifications',
            'push_notifications',
            'budget_alerts',
            'goal_reminders',
            'assistant_personality',
            'share_data_for_analytics',
            'updated_at',
        ]
        read_only_fields = ['updated_at']


class CoupleSummarySerializer(serializers.Serializer):
    id = serializers.UUIDField()
    name = serializers.CharField()


class UserSerializer(serializers.ModelSerializer):
    """Current user profile with settings and couple summary."""

    settings = PersonalSettingsSerializer(read_only=True)
    couple = CoupleSummarySerializer(read_only=True)

    class Meta:
        model = User
        fields = [
            'id',
            'email',
            'name',
            'email_verified',
            'has_couple',
            'couple',
            'settings',
            'created_at',
            'last_login',
        ]
        read_only_fields = fields


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        trim_whitespace=False,
        style={'input_type': 'password'}
    )


class VerifyEmailSerializer(serializers.Serializer):
    token = serializers.CharField(help_text="Email verification token")


class UserBriefSerializer(serializers.ModelSerializer):
    """Minimal user info for couple members and inviters."""

    class Meta:
        model = User
        fields = ['id', 'name', 'email']
        read_only_fields = fields
