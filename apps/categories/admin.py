from django.contrib import admin
from .models import Category


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'kind', 'scope', 'owner', 'couple', 'is_default', 'created_at']
    list_filter = ['kind', 'scope', 'is_default']
    search_fields = ['name', 'owner__email', 'couple__name']
    raw_id_fields = ['owner', 'couple']
    readonly_fields = ['created_at']

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('owner', 'couple')
