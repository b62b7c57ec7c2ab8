from django.contrib import admin

from .models import PreRegistration


@admin.register(PreRegistration)
class PreRegistrationAdmin(admin.ModelAdmin):
    list_display = ["company_name", "code", "name", "mobile_number", "group", "status", "created_at"]
    list_filter = ["status", "group"]
    search_fields = ["company_name", "code", "name", "mobile_number"]
    readonly_fields = ["id", "created_at", "updated_at"]
    ordering = ["-created_at"]
