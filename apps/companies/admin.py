from django.contrib import admin

from .models import Company


@admin.register(Company)
class CompanyAdmin(admin.ModelAdmin):
    list_display = ["name", "code", "registrant_name", "group", "status", "paid", "spent", "created_at"]
    list_filter = ["status", "paid", "spent", "group"]
    search_fields = ["name", "code", "registrant_name", "phone_number"]
    readonly_fields = ["id", "created_at", "updated_at", "approved_at", "rejected_at"]
    ordering = ["-created_at"]
    list_per_page = 50

    fieldsets = (
        ("Identity", {
            "fields": ("id", "name", "code", "registrant_name"),
        }),
        ("Contact", {
            "fields": ("phone_number", "email", "address"),
        }),
        ("Registration", {
            "fields": ("group", "pre_registration", "status", "rejection_reason"),
        }),
        ("Payment", {
            "fields": ("paid", "spent", "payment_date"),
        }),
        ("Metadata", {
            "fields": ("created_at", "updated_at", "approved_at", "rejected_at"),
            "classes": ("collapse",),
        }),
    )
