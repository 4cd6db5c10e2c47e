from django.contrib import admin
from .models import CalendarEvent


@admin.register(CalendarEvent)
class CalendarEventAdmin(admin.ModelAdmin):
    list_display = ['date', 'title', 'kind', 'amount', 'couple', 'owner']
    list_filter = ['kind', 'date']
    search_fields = ['title', 'owner__email', 'couple__name']
    raw_id_fields = ['owner', 'couple']
    date_hierarchy = 'date'
    readonly_fields = ['created_at', 'updated_at']
