from django.contrib import admin

from .models import WebsiteSettings


@admin.register(WebsiteSettings)
class WebsiteSettingsAdmin(admin.ModelAdmin):
    list_display = [
        "id", "is_open", "auto_schedule", "open_time", "close_time",
        "codes_active", "updated_at",
    ]
    readonly_fields = ["created_at", "updated_at"]

    fieldsets = (
        ("Gate", {
            "fields": ("is_open", "auto_schedule", "open_time", "close_time"),
        }),
        ("Registration", {
            "fields": ("codes_active", "message", "post_registration_message"),
        }),
        ("Metadata", {
            "fields": ("created_at", "updated_at"),
            "classes": ("collapse",),
        }),
    )

    def has_add_permission(self, request):
        return not WebsiteSettings.objects.exists()

    def has_delete_permission(self, request, obj=None):
        return False
