from django.contrib import admin
from .models import CoupleInvitation, CoupleProfile, InvitationStatus, SharedSettings


class SharedSettingsInline(admin.StackedInline):
    model = SharedSettings
    can_delete = False
    extra = 0


@admin.register(CoupleProfile)
class CoupleProfileAdmin(admin.ModelAdmin):
    list_display = ['name', 'currency', 'timezone', 'member_count', 'created_at']
    search_fields = ['name', 'members__email']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [SharedSettingsInline]

    def member_count(self, obj):
        return obj.member_count()
    member_count.short_description = 'Members'


@admin.register(CoupleInvitation)
class CoupleInvitationAdmin(admin.ModelAdmin):
    list_display = ['partner_email', 'couple', 'invited_by', 'status', 'expires_at', 'created_at']
    list_filter = ['status', 'created_at']
    search_fields = ['partner_email', 'couple__name', 'invited_by__email']
    raw_id_fields = ['couple', 'invited_by', 'accepted_by']
    readonly_fields = ['token', 'accepted_at', 'created_at']
    actions = ['revoke_invitations']

    @admin.action(description='Revoke selected pending invitations')
    def revoke_invitations(self, request, queryset):
        count = queryset.filter(status=InvitationStatus.PENDING).update(status=InvitationStatus.REVOKED)
        self.message_user(request, f'Revoked {count} invitation(s).')
