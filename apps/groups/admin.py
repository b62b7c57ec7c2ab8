from django.contrib import admin

from .capacity import with_registered_count
from .models import Group


@admin.register(Group)
class GroupAdmin(admin.ModelAdmin):
    list_display = ["name", "date", "day", "time_from", "time_to", "max_companies", "registered"]
    list_filter = ["date"]
    search_fields = ["name"]
    readonly_fields = ["created_at", "updated_at"]
    ordering = ["date", "time_from"]

    def get_queryset(self, request):
        return with_registered_count(super().get_queryset(request))

    @admin.display(description="Registered", ordering="registered_count")
    def registered(self, obj):
        return obj.registered_count
