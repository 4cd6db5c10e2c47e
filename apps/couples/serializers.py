from rest_framework import serializers

from apps.accounts.serializers import UserBriefSerializer
from .models import CoupleInvitation, CoupleProfile, SharedSettings
from .services import build_invite_url


class SharedSettingsSerializer(serializers.ModelSerializer):

    class Meta:
        model = SharedSettings
        fields = [
            'split_method',
            'default_currency',
            'budget_cycle',
            'budget_start_day',
            'shared_goal_notifications',
            'large_expense_threshold',
            'updated_at',
        ]
        read_only_fields = ['updated_at']


class CoupleProfileSerializer(serializers.ModelSerializer):
    """Couple with members and shared settings."""

    members = UserBriefSerializer(many=True, read_only=True)
    shared_settings = SharedSettingsSerializer(read_only=True)
    member_count = serializers.SerializerMethodField()

    class Meta:
        model = CoupleProfile
        fields = [
            'id',
            'name',
            'currency',
            'timezone',
            'members',
            'member_count',
            'shared_settings',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

    def get_member_count(self, obj):
        return len(obj.members.all())


class CoupleUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=150, required=False)
    currency = serializers.CharField(max_length=3, required=False)
    timezone = serializers.CharField(max_length=64, required=False)


class InvitationCreateSerializer(serializers.Serializer):
    partner_email = serializers.EmailField()
    message = serializers.CharField(max_length=500, required=False, allow_blank=True, default='')


class InvitationSerializer(serializers.ModelSerializer):
    """Invitation as seen by the inviting couple, including its link."""

    invite_url = serializers.SerializerMethodField()

    class Meta:
        model = CoupleInvitation
        fields = [
            'id',
            'partner_email',
            'message',
            'token',
            'status',
            'invite_url',
            'expires_at',
            'created_at',
        ]
        read_only_fields = fields

    def get_invite_url(self, obj) -> str:
        return build_invite_url(obj)


class InvitationPreviewSerializer(serializers.ModelSerializer):
    """Public view of an invitation, shown before accepting it."""

    couple_name = serializers.CharField(source='couple.name', read_only=True)
    inviter_name = serializers.CharField(source='invited_by.get_display_name', read_only=True)
    inviter_email = serializers.EmailField(source='invited_by.email', read_only=True)

    class Meta:
        model = CoupleInvitation
        fields = [
            'id',
            'token',
            'couple_name',
            'inviter_name',
            'inviter_email',
            'message',
            'expires_at',
            'created_at',
        ]
        read_only_fields = fields


class AcceptInvitationSerializer(serializers.Serializer):
    token = serializers.CharField(max_length=64)
