from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    list_display = ["username", "name", "email", "role", "status", "last_login", "created_at"]
    list_filter = ["role", "status", "created_at"]
    search_fields = ["username", "name", "email", "phone"]
    ordering = ["-created_at"]
    readonly_fields = ["id", "last_login", "created_at", "updated_at"]

    fieldsets = (
        ("Identity", {"fields": ("id", "username", "name", "email", "phone")}),
        ("Role and access", {"fields": ("role", "status")}),
        ("Security", {"fields": ("password",), "classes": ("collapse",)}),
        (
            "Django permissions",
            {
                "fields": ("is_active", "is_staff", "is_superuser", "groups", "user_permissions"),
                "classes": ("collapse",),
            },
        ),
        ("Metadata", {"fields": ("last_login", "created_at", "updated_at")}),
    )

    add_fieldsets = (
        (
            None,
            {
                "classes": ("wide",),
                "fields": ("username", "name", "email", "role", "password1", "password2"),
            },
        ),
    )
